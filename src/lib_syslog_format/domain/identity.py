"""Process identity fields stamped on every syslog line."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ProcessIdentity:
    """Hostname, application name and pid of the emitting process.

    Attributes
    ----------
    hostname:
        Host name or ``None`` when it could not be determined. RFC 3164 lines
        omit the field; RFC 5424 lines substitute ``localhost``.
    process:
        Application name (``APP-NAME`` in RFC 5424). Empty when unknown.
    pid:
        Operating-system process id.
    """

    hostname: str | None
    process: str
    pid: int


__all__ = ["ProcessIdentity"]
