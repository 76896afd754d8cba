"""Port for discovering the identity of the running process."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_syslog_format.domain.identity import ProcessIdentity


@runtime_checkable
class SystemIdentityPort(Protocol):
    """Resolve hostname, application name and pid on demand."""

    def resolve_identity(self) -> ProcessIdentity: ...


__all__ = ["SystemIdentityPort"]
