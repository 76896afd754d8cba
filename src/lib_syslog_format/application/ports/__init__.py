"""Protocols describing the collaborators of the formatters."""

from __future__ import annotations

from .clock import ClockPort
from .identity import SystemIdentityPort
from .log_format import LogFormat
from .sink import SinkPort

__all__ = ["ClockPort", "LogFormat", "SinkPort", "SystemIdentityPort"]
