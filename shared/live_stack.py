"""Shared live-API helpers for the load test precheck and the smoke suite."""

from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)


def is_service_available(url: str, timeout: float = 5) -> bool:
    """Return True when ``GET {url}/`` answers with 200."""
    try:
        response = requests.get(f"{url.rstrip('/')}/", timeout=timeout)
    except requests.RequestException as exc:
        logger.debug("Availability probe against %s failed: %s", url, exc)
        return False
    return response.status_code == 200
