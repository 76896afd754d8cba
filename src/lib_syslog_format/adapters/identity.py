"""Best-effort discovery of hostname, application name and pid.

Purpose
-------
Supply the identity defaults for both formatters without ever failing: a
missing hostname stays ``None``, an unknown application name becomes an empty
string and the pid always comes from :func:`os.getpid`.

Contents
--------
* :data:`DiagnosticHook` - callback signature for detection telemetry.
* :class:`SystemIdentityProvider` - :class:`SystemIdentityPort` implementation.
* :func:`detect_identity` - convenience wrapper used by the façade.

System Role
-----------
Invoked once at start-up by the explicit factories in
:mod:`lib_syslog_format.lib_syslog_format`; formatters never probe the
environment themselves.
"""

from __future__ import annotations

import os
import socket
import sys
from pathlib import Path
from typing import Any, Callable, Optional

from lib_syslog_format.application.ports.identity import SystemIdentityPort
from lib_syslog_format.domain.identity import ProcessIdentity

DiagnosticHook = Optional[Callable[[str, dict[str, Any]], None]]


class SystemIdentityProvider(SystemIdentityPort):
    """Probe the running interpreter for its identity fields."""

    def __init__(self, *, diagnostic: DiagnosticHook = None) -> None:
        self._diagnostic = diagnostic

    def resolve_identity(self) -> ProcessIdentity:
        """Return the detected :class:`ProcessIdentity`.

        Examples
        --------
        >>> identity = SystemIdentityProvider().resolve_identity()
        >>> identity.pid == os.getpid()
        True
        """
        return ProcessIdentity(
            hostname=self._hostname(),
            process=self._process_name(),
            pid=os.getpid(),
        )

    def _hostname(self) -> str | None:
        try:
            value = socket.gethostname()
        except OSError as exc:
            self._emit("hostname_unavailable", {"error": str(exc)})
            return None
        if not value:
            self._emit("hostname_unavailable", {"error": "empty hostname"})
            return None
        return value

    def _process_name(self) -> str:
        for candidate in (sys.argv[0] if sys.argv else "", sys.executable or ""):
            name = Path(candidate).name
            if name:
                return name
        self._emit("process_name_unavailable", {"argv": list(sys.argv)})
        return ""

    def _emit(self, event: str, payload: dict[str, Any]) -> None:
        if self._diagnostic is None:
            return
        try:
            self._diagnostic(event, payload)
        except Exception:  # pragma: no cover - diagnostics must never break detection
            pass


def detect_identity(*, diagnostic: DiagnosticHook = None) -> ProcessIdentity:
    """Detect the identity of the current process."""

    return SystemIdentityProvider(diagnostic=diagnostic).resolve_identity()


__all__ = ["DiagnosticHook", "SystemIdentityProvider", "detect_identity"]
