"""Port describing the byte destination a formatter writes into."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SinkPort(Protocol):
    """Accept one encoded syslog line.

    Binary file objects, ``io.BytesIO`` and socket wrappers exposing ``write``
    all satisfy this protocol. Failures are reported by raising ``OSError``
    (or ``ValueError`` for closed file objects).
    """

    def write(self, data: bytes) -> Any: ...


__all__ = ["SinkPort"]
