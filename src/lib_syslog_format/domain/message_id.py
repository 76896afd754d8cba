"""MSGID normalisation for RFC 5424 headers."""

from __future__ import annotations

from itertools import islice

from .structured_data import NILVALUE

MAX_MESSAGE_ID_LENGTH = 32


def is_us_print_ascii(char: str) -> bool:
    """Return ``True`` for printable US-ASCII (codes 33 to 126 inclusive).

    Examples
    --------
    >>> is_us_print_ascii("!"), is_us_print_ascii(" "), is_us_print_ascii("~")
    (True, False, True)
    """
    return 33 <= ord(char) <= 126


def normalize_message_id(message_id: str | int | None) -> str:
    """Return the MSGID header token for ``message_id``.

    Integers are rendered in decimal first. Characters outside the printable
    range are dropped before the 32 character cut, so dropped characters do
    not consume the budget. ``None`` and ids that filter down to nothing
    become :data:`NILVALUE`. Booleans are rejected with :class:`TypeError`
    instead of being rendered as ``"True"``.

    Examples
    --------
    >>> normalize_message_id(42)
    '42'
    >>> normalize_message_id("id with spaces")
    'idwithspaces'
    >>> normalize_message_id(None)
    '-'
    """
    if message_id is None:
        return NILVALUE
    if isinstance(message_id, bool):
        raise TypeError(f"message id must be str, int or None, not {message_id!r}")
    if isinstance(message_id, int):
        message_id = str(message_id)
    kept = "".join(islice(filter(is_us_print_ascii, message_id), MAX_MESSAGE_ID_LENGTH))
    return kept or NILVALUE


__all__ = ["MAX_MESSAGE_ID_LENGTH", "is_us_print_ascii", "normalize_message_id"]
