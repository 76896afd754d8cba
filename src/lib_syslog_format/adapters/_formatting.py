"""Helpers shared by the wire formatters.

Contents
--------
* :func:`write_line` - encode a rendered line and hand it to the sink,
  translating write failures into :class:`FormatError`.
"""

from __future__ import annotations

from lib_syslog_format.application.ports.sink import SinkPort
from lib_syslog_format.domain.errors import FormatError


def write_line(sink: SinkPort, line: str) -> None:
    """Write ``line`` as UTF-8 into ``sink`` without a trailing newline.

    Examples
    --------
    >>> import io
    >>> buffer = io.BytesIO()
    >>> write_line(buffer, "<14>hello")
    >>> buffer.getvalue()
    b'<14>hello'
    """
    data = line.encode("utf-8", errors="replace")
    try:
        sink.write(data)
    except (OSError, ValueError) as exc:
        raise FormatError(f"failed to write syslog line: {exc}", cause=exc) from exc


__all__ = ["write_line"]
