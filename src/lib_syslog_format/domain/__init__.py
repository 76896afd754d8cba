"""Domain value objects and pure encoders for the syslog wire formats."""

from __future__ import annotations

from .errors import FormatError
from .facility import Facility
from .identity import ProcessIdentity
from .message_id import MAX_MESSAGE_ID_LENGTH, is_us_print_ascii, normalize_message_id
from .priority import decode_priority, encode_priority
from .severity import Severity
from .structured_data import NILVALUE, StructuredData, encode_structured_data, escape_param_value
from .timestamps import format_rfc3164_timestamp, format_rfc5424_timestamp

__all__ = [
    "Facility",
    "FormatError",
    "MAX_MESSAGE_ID_LENGTH",
    "NILVALUE",
    "ProcessIdentity",
    "Severity",
    "StructuredData",
    "decode_priority",
    "encode_priority",
    "encode_structured_data",
    "escape_param_value",
    "format_rfc3164_timestamp",
    "format_rfc5424_timestamp",
    "is_us_print_ascii",
    "normalize_message_id",
]
