from __future__ import annotations

import calendar
from typing import Callable

import pytest

from lib_syslog_format.adapters.clock import FixedClock
from lib_syslog_format.domain.identity import ProcessIdentity

NOV_14_2023 = 1_700_000_000 * 1_000_000_000
"""2023-11-14T22:13:20Z in nanoseconds."""


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(NOV_14_2023 + 123_456_789)


@pytest.fixture
def clock_at() -> Callable[..., FixedClock]:
    """Build a clock frozen at the given UTC wall time."""

    def _factory(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0, nanos: int = 0) -> FixedClock:
        seconds = calendar.timegm((year, month, day, hour, minute, second, 0, 0, 0))
        return FixedClock(seconds * 1_000_000_000 + nanos)

    return _factory


@pytest.fixture
def identity() -> ProcessIdentity:
    return ProcessIdentity(hostname="host1", process="myapp", pid=123)


class FailingSink:
    """Sink whose every write raises ``error``."""

    def __init__(self, error: BaseException) -> None:
        self.error = error

    def write(self, data: bytes) -> int:
        raise self.error


@pytest.fixture
def failing_sink() -> Callable[[BaseException], FailingSink]:
    return FailingSink
