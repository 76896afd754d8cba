"""Concrete clock returning the operating-system wall time."""

from __future__ import annotations

import time

from lib_syslog_format.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    """Read :func:`time.time_ns` on every call."""

    def now_ns(self) -> int:
        return time.time_ns()


class FixedClock(ClockPort):
    """Clock frozen at a single reading; used by demos and tests.

    Examples
    --------
    >>> FixedClock(1_700_000_000_123_456_789).now_ns()
    1700000000123456789
    """

    def __init__(self, epoch_ns: int) -> None:
        self._epoch_ns = epoch_ns

    def now_ns(self) -> int:
        return self._epoch_ns


__all__ = ["FixedClock", "SystemClock"]
