"""
Process metrics reported by the health endpoint.
Every value is read at call time; nothing is cached between requests.
"""

import platform
import time
from datetime import datetime, timezone
from typing import Any, Dict

import psutil

_PROCESS = psutil.Process()

# Uptime at import, measured from process creation; later growth comes from
# the monotonic clock so successive readings never go backwards.
_UPTIME_AT_IMPORT = max(0.0, time.time() - _PROCESS.create_time())
_MONOTONIC_AT_IMPORT = time.monotonic()


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-05-01T12:00:00.123Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def process_uptime() -> float:
    """Seconds since this process was started."""
    return _UPTIME_AT_IMPORT + (time.monotonic() - _MONOTONIC_AT_IMPORT)


def memory_usage() -> Dict[str, int]:
    """Memory counters of the current process, in bytes."""
    return {name: int(value) for name, value in _PROCESS.memory_info()._asdict().items()}


def runtime_version() -> str:
    return platform.python_version()


def health_report() -> Dict[str, Any]:
    """Build the GET /health payload."""
    return {
        "status": "ok",
        "timestamp": utc_timestamp(),
        "uptime": process_uptime(),
        "memory": memory_usage(),
        "version": runtime_version(),
    }
