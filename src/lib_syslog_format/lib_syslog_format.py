"""Façade composing identity detection, configuration and formatters.

Purpose
-------
Offer the explicit factories a host application calls once at start-up. All
environment probing happens here, never inside formatter construction, so the
resulting formatters are plain immutable values that can be threaded through
the application.

Contents
--------
* :func:`create_formatter3164` / :func:`create_formatter5424` - factories.
* :func:`resolve_settings` - shared precedence logic.
* :func:`summary_info` - metadata banner used by the CLI.

System Role
-----------
Composition root between the domain/adapters and host code. Precedence:
explicit keyword arguments, then ``SYSLOG_*`` environment variables, then
detected identity.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Mapping

from .adapters.clock import SystemClock
from .adapters.identity import DiagnosticHook, detect_identity
from .adapters.rfc3164 import Formatter3164
from .adapters.rfc5424 import Formatter5424
from .application.ports.clock import ClockPort
from .config import FormatterSettings, load_settings
from .domain.facility import Facility


def _coerce_facility(facility: Facility | str | None) -> Facility | None:
    if facility is None or isinstance(facility, Facility):
        return facility
    return Facility.from_name(facility)


def resolve_settings(
    *,
    facility: Facility | str | None = None,
    hostname: str | None = None,
    process: str | None = None,
    pid: int | None = None,
    use_utc: bool | None = None,
    escape_structured_data: bool | None = None,
    environ: Mapping[str, str] | None = None,
    diagnostic: DiagnosticHook = None,
) -> FormatterSettings:
    """Detect identity, apply environment overrides, then explicit arguments.

    ``None`` arguments mean "not specified" and fall through to the lower
    precedence sources. A blank ``hostname`` clears the hostname the same way an
    empty ``SYSLOG_HOSTNAME`` does.
    """
    settings = load_settings(detect_identity(diagnostic=diagnostic), environ)
    if hostname is not None and not hostname.strip():
        settings = replace(settings, hostname=None)
        hostname = None
    return settings.with_overrides(
        facility=_coerce_facility(facility),
        hostname=hostname,
        process=process,
        pid=pid,
        use_utc=use_utc,
        escape_structured_data=escape_structured_data,
    )


def create_formatter3164(
    *,
    facility: Facility | str | None = None,
    hostname: str | None = None,
    process: str | None = None,
    pid: int | None = None,
    use_utc: bool | None = None,
    clock: ClockPort | None = None,
    environ: Mapping[str, str] | None = None,
    diagnostic: DiagnosticHook = None,
) -> Formatter3164:
    """Return an RFC 3164 formatter with detected defaults.

    Examples
    --------
    >>> formatter = create_formatter3164(process="doc", pid=1, environ={})
    >>> formatter.facility, formatter.process, formatter.pid
    (<Facility.USER: 8>, 'doc', 1)
    """
    settings = resolve_settings(
        facility=facility,
        hostname=hostname,
        process=process,
        pid=pid,
        use_utc=use_utc,
        environ=environ,
        diagnostic=diagnostic,
    )
    return Formatter3164(
        facility=settings.facility,
        hostname=settings.hostname,
        process=settings.process,
        pid=settings.pid,
        use_utc=settings.use_utc,
        clock=clock or SystemClock(),
    )


def create_formatter5424(
    *,
    facility: Facility | str | None = None,
    hostname: str | None = None,
    process: str | None = None,
    pid: int | None = None,
    escape_structured_data: bool | None = None,
    clock: ClockPort | None = None,
    environ: Mapping[str, str] | None = None,
    diagnostic: DiagnosticHook = None,
) -> Formatter5424:
    """Return an RFC 5424 formatter with the same detected defaults as RFC 3164."""
    settings = resolve_settings(
        facility=facility,
        hostname=hostname,
        process=process,
        pid=pid,
        escape_structured_data=escape_structured_data,
        environ=environ,
        diagnostic=diagnostic,
    )
    return Formatter5424(
        facility=settings.facility,
        hostname=settings.hostname,
        process=settings.process,
        pid=settings.pid,
        escape_structured_data=settings.escape_structured_data,
        clock=clock or SystemClock(),
    )


def summary_info() -> str:
    """Return the metadata banner printed by the ``info`` command.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = [
    "create_formatter3164",
    "create_formatter5424",
    "resolve_settings",
    "summary_info",
]
