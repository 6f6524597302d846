"""
Load test configuration module.

Settings are read from environment variables with defaults so that the
same locustfile can be pointed at a laptop, a CI service container, or a
staging host without edits::

    BASE_URL=http://staging:8000 VUS=10 DURATION=2m \\
        locust -f tests/performance/locustfile.py --headless
"""

from __future__ import annotations

import logging
import math
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_VUS = 5
DEFAULT_DURATION = "1m"
DEFAULT_CLOUD_PROJECT_ID = 6019612
DEFAULT_THRESHOLDS_FILE = BASE_DIR / "tests" / "performance" / "thresholds.yml"

# Used when DURATION cannot be understood at all.
FALLBACK_DURATION_SECONDS = 60

_DURATION_PATTERN = re.compile(r"^(\d+)([smh]?)$", re.IGNORECASE)
_UNIT_SECONDS = {"": 1, "s": 1, "m": 60, "h": 3600}


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


def parse_duration_seconds(value: str | None) -> float:
    """
    Convert a duration string into seconds.

    Accepts ``<n>``, ``<n>s``, ``<n>m`` and ``<n>h`` (unit is
    case-insensitive).  Anything else is tried as a plain number, and if
    that fails too (or is not positive) the 60 second fallback is used.

    Args:
        value: Raw duration text, e.g. ``"2m"`` or ``"90"``.

    Returns:
        The duration in seconds.
    """
    raw = str(value or "").strip()
    match = _DURATION_PATTERN.match(raw)
    if match:
        return int(match.group(1)) * _UNIT_SECONDS[match.group(2).lower()]

    try:
        seconds = float(raw)
    except ValueError:
        seconds = 0.0

    if not math.isfinite(seconds) or seconds <= 0:
        logger.warning(
            "Could not parse DURATION=%r, using %ss", value, FALLBACK_DURATION_SECONDS
        )
        return FALLBACK_DURATION_SECONDS
    return seconds


def ramp_seconds_for(duration_seconds: float) -> int:
    """Ramp length: a tenth of the steady stage, rounded half up, at least 1s."""
    return max(1, math.floor(duration_seconds / 10 + 0.5))


def _int_setting(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class LoadTestConfig:
    """Resolved settings for one load test run."""

    base_url: str = DEFAULT_BASE_URL
    vus: int = DEFAULT_VUS
    duration_seconds: float = FALLBACK_DURATION_SECONDS
    cloud_project_id: int = DEFAULT_CLOUD_PROJECT_ID
    think_time_min: int = 0
    think_time_max: int = 5
    request_timeout: float = 5.0
    thresholds_file: Path = DEFAULT_THRESHOLDS_FILE

    @property
    def ramp_seconds(self) -> int:
        return ramp_seconds_for(self.duration_seconds)

    @property
    def total_seconds(self) -> float:
        """Ramp-up + steady + ramp-down."""
        return self.duration_seconds + 2 * self.ramp_seconds


def get_config(environ: Mapping[str, str] | None = None) -> LoadTestConfig:
    """
    Build the load test configuration from environment variables.

    Args:
        environ: Mapping to read from.  If None, uses ``os.environ``.

    Returns:
        An immutable :class:`LoadTestConfig`.

    Raises:
        ConfigError: If an integer setting is malformed or out of range.
    """
    if environ is None:
        environ = os.environ

    vus = _int_setting(environ, "VUS", DEFAULT_VUS)
    if vus < 1:
        raise ConfigError(f"VUS must be at least 1, got {vus}")

    think_min = _int_setting(environ, "THINK_TIME_MIN", 0)
    think_max = _int_setting(environ, "THINK_TIME_MAX", 5)
    if think_min < 0 or think_max < think_min:
        raise ConfigError(
            f"Think-time bounds must satisfy 0 <= min <= max, got {think_min}..{think_max}"
        )

    raw_timeout = environ.get("REQUEST_TIMEOUT", "5")
    try:
        request_timeout = float(raw_timeout)
    except ValueError as exc:
        raise ConfigError(f"REQUEST_TIMEOUT must be a number, got {raw_timeout!r}") from exc

    return LoadTestConfig(
        base_url=(environ.get("BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        vus=vus,
        duration_seconds=parse_duration_seconds(environ.get("DURATION") or DEFAULT_DURATION),
        cloud_project_id=_int_setting(environ, "CLOUD_PROJECT_ID", DEFAULT_CLOUD_PROJECT_ID),
        think_time_min=think_min,
        think_time_max=think_max,
        request_timeout=request_timeout,
        thresholds_file=Path(environ.get("THRESHOLDS_FILE") or DEFAULT_THRESHOLDS_FILE),
    )
