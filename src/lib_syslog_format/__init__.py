"""Public package surface for rendering syslog wire formats.

Typical use::

    import sys
    import lib_syslog_format as syslog_format

    formatter = syslog_format.create_formatter5424(facility="local0")
    formatter.info(sys.stdout.buffer, ("login", {"auth@32473": {"user": "alice"}}, "accepted"))

Formatters are immutable and may be shared; the sink decides whether
concurrent writes are safe.
"""

from __future__ import annotations

from .adapters import (
    FixedClock,
    Formatter3164,
    Formatter5424,
    Rfc5424Message,
    SyslogFormatter,
    SystemClock,
    detect_identity,
)
from .application.ports import ClockPort, LogFormat, SinkPort
from .domain import (
    NILVALUE,
    Facility,
    FormatError,
    ProcessIdentity,
    Severity,
    StructuredData,
    decode_priority,
    encode_priority,
    encode_structured_data,
    is_us_print_ascii,
    normalize_message_id,
)
from .lib_syslog_format import create_formatter3164, create_formatter5424, summary_info

__all__ = [
    "ClockPort",
    "Facility",
    "FixedClock",
    "FormatError",
    "Formatter3164",
    "Formatter5424",
    "LogFormat",
    "NILVALUE",
    "ProcessIdentity",
    "Rfc5424Message",
    "Severity",
    "SinkPort",
    "StructuredData",
    "SyslogFormatter",
    "SystemClock",
    "create_formatter3164",
    "create_formatter5424",
    "decode_priority",
    "detect_identity",
    "encode_priority",
    "encode_structured_data",
    "is_us_print_ascii",
    "normalize_message_id",
    "summary_info",
]
