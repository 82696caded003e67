"""Read-only view of the running process: clock, uptime, memory, platform, RNG.

Route handlers never touch ``time``, ``random`` or ``resource`` directly; they
receive a :class:`ProcessRuntime` through :func:`src.dependencies.get_runtime`.
Tests swap in a subclass with fixed values via :func:`src.main.create_app`.
"""

import os
import platform
import random
import resource
import sys
import time
from datetime import UTC, datetime

_STATM_PATH = "/proc/self/statm"


def _current_rss_bytes() -> int | None:
    """Return the resident set size from ``/proc``, or ``None`` off Linux."""
    try:
        with open(_STATM_PATH, encoding="ascii") as fh:
            resident_pages = int(fh.read().split()[1])
    except (OSError, IndexError, ValueError):
        return None
    return resident_pages * os.sysconf("SC_PAGE_SIZE")


class ProcessRuntime:
    """Process facts sampled fresh on every call."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._started = time.monotonic()
        self._rng = rng if rng is not None else random.Random()

    def now(self) -> datetime:
        return datetime.now(UTC)

    def uptime_seconds(self) -> float:
        return time.monotonic() - self._started

    def memory_usage(self) -> dict[str, int]:
        """Return memory metrics in bytes.

        ``maxRss`` is the peak resident set size reported by ``getrusage``
        (kilobytes on Linux, bytes on macOS).  ``rss`` is the current resident
        set size where ``/proc`` exposes it and falls back to the peak value.
        """
        usage = resource.getrusage(resource.RUSAGE_SELF)
        max_rss = usage.ru_maxrss if sys.platform == "darwin" else usage.ru_maxrss * 1024
        rss = _current_rss_bytes()
        return {"rss": rss if rss is not None else max_rss, "maxRss": max_rss}

    def runtime_version(self) -> str:
        return platform.python_version()

    def platform_name(self) -> str:
        return sys.platform

    def random_int(self, upper: int) -> int:
        """Return a uniformly distributed integer in ``[0, upper)``."""
        return self._rng.randrange(upper)
