"""Structured syslog formatter (RFC 5424).

Purpose
-------
Render ``<PRI>1 TIMESTAMP HOSTNAME APP-NAME PROCID MSGID SD MSG`` lines with
microsecond RFC 3339 timestamps and STRUCTURED-DATA blocks.

Contents
--------
* :class:`Rfc5424Message` - named payload ``(message_id, structured_data, message)``.
* :class:`Formatter5424` - immutable formatter implementing :class:`LogFormat`.

System Role
-----------
Sibling of :class:`~lib_syslog_format.adapters.rfc3164.Formatter3164`. Both
share the dispatch contract, so callers switch wire formats without touching
their per-severity call sites.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, NamedTuple

from lib_syslog_format.application.ports.clock import ClockPort
from lib_syslog_format.application.ports.log_format import LogFormat
from lib_syslog_format.application.ports.sink import SinkPort
from lib_syslog_format.domain.facility import Facility
from lib_syslog_format.domain.identity import ProcessIdentity
from lib_syslog_format.domain.message_id import normalize_message_id
from lib_syslog_format.domain.priority import encode_priority
from lib_syslog_format.domain.severity import Severity
from lib_syslog_format.domain.structured_data import NILVALUE, StructuredData, encode_structured_data
from lib_syslog_format.domain.timestamps import format_rfc5424_timestamp

from ._formatting import write_line
from .clock import SystemClock

_NO_STRUCTURED_DATA: StructuredData = MappingProxyType({})

_VERSION = 1


class Rfc5424Message(NamedTuple):
    """Payload accepted by :meth:`Formatter5424.format`.

    ``message_id`` may be a string, a non-negative integer or ``None``.
    """

    message_id: str | int | None = None
    structured_data: StructuredData = _NO_STRUCTURED_DATA
    message: Any = ""


@dataclass(slots=True, frozen=True, kw_only=True)
class Formatter5424(LogFormat[tuple[Any, StructuredData, Any]]):
    """Immutable RFC 5424 formatter.

    Attributes
    ----------
    facility:
        Facility combined into the PRI value; defaults to ``USER``.
    hostname:
        HOSTNAME field; ``None`` renders as ``localhost``.
    process:
        APP-NAME field; an empty name renders as ``-``.
    pid:
        PROCID field.
    escape_structured_data:
        Opt into RFC 5424 escaping of ``"``, ``\\`` and ``]`` inside SD values.
        Values are inserted verbatim by default.
    clock:
        Time source read once per line.

    Examples
    --------
    >>> from lib_syslog_format.adapters.clock import FixedClock
    >>> formatter = Formatter5424(hostname="host1", process="myapp", pid=123,
    ...                           clock=FixedClock(1_700_000_000_123_456_789))
    >>> formatter.render(Severity.NOTICE, ("ID47", {"exampleSDID@0": {"iut": "3"}}, "hi"))
    '<13>1 2023-11-14T22:13:20.123456Z host1 myapp 123 ID47 [exampleSDID@0 iut="3"] hi'
    """

    facility: Facility = Facility.USER
    hostname: str | None = None
    process: str
    pid: int
    escape_structured_data: bool = False
    clock: ClockPort = field(default_factory=SystemClock, compare=False, repr=False)

    @classmethod
    def from_identity(
        cls,
        identity: ProcessIdentity,
        *,
        facility: Facility = Facility.USER,
        escape_structured_data: bool = False,
        clock: ClockPort | None = None,
    ) -> "Formatter5424":
        """Build a formatter from a detected :class:`ProcessIdentity`."""
        return cls(
            facility=facility,
            hostname=identity.hostname,
            process=identity.process,
            pid=identity.pid,
            escape_structured_data=escape_structured_data,
            clock=clock or SystemClock(),
        )

    def format_structured_data(self, data: StructuredData) -> str:
        """Serialise ``data`` honouring :attr:`escape_structured_data`."""
        return encode_structured_data(data, escape=self.escape_structured_data)

    def render(self, severity: Severity, message: tuple[Any, StructuredData, Any]) -> str:
        """Return the line for ``message`` without writing it anywhere.

        ``message`` is ``(message_id, structured_data, text)``. An integer
        message id is rendered in decimal and then takes the string path, so
        ``42`` and ``"42"`` produce identical lines.
        """
        message_id, data, text = message
        return self._render(severity, message_id, data, text)

    def _render(self, severity: Severity, message_id: str | int | None, data: StructuredData, text: Any) -> str:
        priority = encode_priority(severity, self.facility)
        timestamp = format_rfc5424_timestamp(self.clock.now_ns())
        hostname = self.hostname if self.hostname is not None else "localhost"
        app_name = self.process or NILVALUE
        return (
            f"<{priority}>{_VERSION} {timestamp} {hostname} {app_name} {self.pid} "
            f"{normalize_message_id(message_id)} {self.format_structured_data(data)} {text}"
        )

    def format(self, sink: SinkPort, severity: Severity, message: tuple[Any, StructuredData, Any]) -> None:
        """Write the rendered line into ``sink``; write failures raise ``FormatError``."""
        write_line(sink, self.render(severity, message))


__all__ = ["Formatter5424", "Rfc5424Message"]
