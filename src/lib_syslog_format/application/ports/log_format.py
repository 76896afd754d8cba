"""Dispatch contract shared by the RFC 3164 and RFC 5424 formatters.

Purpose
-------
Let callers pick a severity-named operation (``info``, ``err`` ...) uniformly
across wire formats. Implementations only provide :meth:`LogFormat.format`; the
per-severity helpers are inherited.

System Role
-----------
Concrete formatters subclass :class:`LogFormat` explicitly with the payload type
they accept: plain messages for RFC 3164, ``(message_id, structured_data,
message)`` tuples for RFC 5424.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from lib_syslog_format.domain.severity import Severity

from .sink import SinkPort

PayloadT = TypeVar("PayloadT", contravariant=True)


@runtime_checkable
class LogFormat(Protocol[PayloadT]):
    """Render a payload at a given severity and write it to a sink."""

    def format(self, sink: SinkPort, severity: Severity, message: PayloadT) -> None:
        """Write one line for ``message`` at ``severity`` into ``sink``.

        Raises
        ------
        lib_syslog_format.domain.errors.FormatError
            When the sink rejects the write.
        """
        ...

    def emerg(self, sink: SinkPort, message: PayloadT) -> None:
        self.format(sink, Severity.EMERG, message)

    def alert(self, sink: SinkPort, message: PayloadT) -> None:
        self.format(sink, Severity.ALERT, message)

    def crit(self, sink: SinkPort, message: PayloadT) -> None:
        self.format(sink, Severity.CRIT, message)

    def err(self, sink: SinkPort, message: PayloadT) -> None:
        self.format(sink, Severity.ERR, message)

    def warning(self, sink: SinkPort, message: PayloadT) -> None:
        self.format(sink, Severity.WARNING, message)

    def notice(self, sink: SinkPort, message: PayloadT) -> None:
        self.format(sink, Severity.NOTICE, message)

    def info(self, sink: SinkPort, message: PayloadT) -> None:
        self.format(sink, Severity.INFO, message)

    def debug(self, sink: SinkPort, message: PayloadT) -> None:
        self.format(sink, Severity.DEBUG, message)


__all__ = ["LogFormat"]
