"""
Test suite for the crocodile API load test.

This package contains:
- performance/: the Locust load test itself (journey, shape, thresholds)
- unit/: fast pytest checks of the load-test code against an in-memory API
- smoke/: a single journey iteration against a live API
"""
