"""Helpers shared by the load test and the pytest suites."""
