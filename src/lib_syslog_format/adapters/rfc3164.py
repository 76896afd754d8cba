"""Legacy BSD syslog formatter (RFC 3164).

Purpose
-------
Render ``<PRI>Mmm dd hh:mm:ss hostname process[pid]: message`` lines.

Contents
--------
* :class:`Formatter3164` - immutable formatter implementing :class:`LogFormat`.

System Role
-----------
Adapter on the output edge: it composes the domain encoders (priority,
timestamp) and hands the encoded line to a caller supplied sink. Transport
framing and line termination are left to the transport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lib_syslog_format.application.ports.clock import ClockPort
from lib_syslog_format.application.ports.log_format import LogFormat
from lib_syslog_format.application.ports.sink import SinkPort
from lib_syslog_format.domain.facility import Facility
from lib_syslog_format.domain.identity import ProcessIdentity
from lib_syslog_format.domain.priority import encode_priority
from lib_syslog_format.domain.severity import Severity
from lib_syslog_format.domain.timestamps import format_rfc3164_timestamp

from ._formatting import write_line
from .clock import SystemClock


@dataclass(slots=True, frozen=True, kw_only=True)
class Formatter3164(LogFormat[Any]):
    """Immutable RFC 3164 formatter.

    Attributes
    ----------
    facility:
        Facility combined into the PRI value; defaults to ``USER``.
    hostname:
        Host field; ``None`` omits the field together with its trailing space.
    process / pid:
        Rendered as the ``process[pid]:`` tag.
    use_utc:
        Render the timestamp in UTC instead of local wall-clock time.
    clock:
        Time source read once per line.

    Examples
    --------
    >>> from lib_syslog_format.adapters.clock import FixedClock
    >>> formatter = Formatter3164(hostname="host1", process="myapp", pid=123,
    ...                           use_utc=True, clock=FixedClock(1_700_000_000 * 10**9))
    >>> formatter.render(Severity.INFO, "hello")
    '<14>Nov 14 22:13:20 host1 myapp[123]: hello'
    """

    facility: Facility = Facility.USER
    hostname: str | None = None
    process: str
    pid: int
    use_utc: bool = False
    clock: ClockPort = field(default_factory=SystemClock, compare=False, repr=False)

    @classmethod
    def from_identity(
        cls,
        identity: ProcessIdentity,
        *,
        facility: Facility = Facility.USER,
        use_utc: bool = False,
        clock: ClockPort | None = None,
    ) -> "Formatter3164":
        """Build a formatter from a detected :class:`ProcessIdentity`."""
        return cls(
            facility=facility,
            hostname=identity.hostname,
            process=identity.process,
            pid=identity.pid,
            use_utc=use_utc,
            clock=clock or SystemClock(),
        )

    def render(self, severity: Severity, message: Any) -> str:
        """Return the line for ``message`` without writing it anywhere."""
        priority = encode_priority(severity, self.facility)
        timestamp = format_rfc3164_timestamp(self.clock.now_ns(), use_utc=self.use_utc)
        if self.hostname is None:
            return f"<{priority}>{timestamp} {self.process}[{self.pid}]: {message}"
        return f"<{priority}>{timestamp} {self.hostname} {self.process}[{self.pid}]: {message}"

    def format(self, sink: SinkPort, severity: Severity, message: Any) -> None:
        """Write the rendered line into ``sink``; write failures raise ``FormatError``."""
        write_line(sink, self.render(severity, message))


__all__ = ["Formatter3164"]
