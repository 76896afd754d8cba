"""Port for the wall clock read once per formatted line."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Provide the current time as integer nanoseconds since the epoch."""

    def now_ns(self) -> int: ...


__all__ = ["ClockPort"]
