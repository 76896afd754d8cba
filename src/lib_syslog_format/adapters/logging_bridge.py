"""Bridge from :mod:`logging` records to syslog lines.

Purpose
-------
Let applications already using the stdlib logging tree obtain RFC 3164 or
RFC 5424 lines by installing :class:`SyslogFormatter` on any handler. Delivery
stays with the handler; this module only encodes.

Contents
--------
* :class:`SyslogFormatter` - :class:`logging.Formatter` subclass.

System Role
-----------
Outer adapter translating ``LogRecord`` fields into the payload shapes expected
by :class:`Formatter3164` and :class:`Formatter5424`. RFC 5424 message ids and
structured data travel on the record through ``extra={"msgid": ...,
"structured_data": {...}}``.
"""

from __future__ import annotations

import logging

from lib_syslog_format.domain.severity import Severity

from .rfc3164 import Formatter3164
from .rfc5424 import Formatter5424


class SyslogFormatter(logging.Formatter):
    """Format records with a wire formatter instead of a ``%`` template.

    Examples
    --------
    >>> from lib_syslog_format.adapters.clock import FixedClock
    >>> wire = Formatter3164(hostname="h", process="app", pid=7, use_utc=True,
    ...                      clock=FixedClock(1_700_000_000 * 10**9))
    >>> record = logging.LogRecord("demo", logging.WARNING, __file__, 1, "disk %s%%", (91,), None)
    >>> SyslogFormatter(wire).format(record)
    '<12>Nov 14 22:13:20 h app[7]: disk 91%'
    """

    def __init__(self, wire: Formatter3164 | Formatter5424) -> None:
        super().__init__()
        self._wire = wire

    @property
    def wire(self) -> Formatter3164 | Formatter5424:
        return self._wire

    def format(self, record: logging.LogRecord) -> str:
        severity = Severity.from_python_level(record.levelno)
        text = self._message_text(record)
        if isinstance(self._wire, Formatter5424):
            message_id = getattr(record, "msgid", None)
            structured_data = getattr(record, "structured_data", None) or {}
            return self._wire.render(severity, (message_id, structured_data, text))
        return self._wire.render(severity, text)

    def _message_text(self, record: logging.LogRecord) -> str:
        text = record.getMessage()
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            text = f"{text}\n{record.exc_text}"
        if record.stack_info:
            text = f"{text}\n{self.formatStack(record.stack_info)}"
        return text


__all__ = ["SyslogFormatter"]
