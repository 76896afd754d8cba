"""Adapters: concrete formatters, clocks, identity probing and the logging bridge."""

from __future__ import annotations

from .clock import FixedClock, SystemClock
from .identity import DiagnosticHook, SystemIdentityProvider, detect_identity
from .logging_bridge import SyslogFormatter
from .rfc3164 import Formatter3164
from .rfc5424 import Formatter5424, Rfc5424Message

__all__ = [
    "DiagnosticHook",
    "FixedClock",
    "Formatter3164",
    "Formatter5424",
    "Rfc5424Message",
    "SyslogFormatter",
    "SystemClock",
    "SystemIdentityProvider",
    "detect_identity",
]
