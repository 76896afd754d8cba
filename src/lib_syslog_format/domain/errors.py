"""Error types raised by the formatters."""

from __future__ import annotations


class FormatError(Exception):
    """Raised when a rendered syslog line cannot be written to its sink.

    The underlying I/O exception is available as :attr:`cause` and is also
    chained as ``__cause__``.
    """

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


__all__ = ["FormatError"]
