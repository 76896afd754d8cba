"""Timestamp renderings for both syslog wire formats.

Both helpers take the clock reading as integer nanoseconds since the epoch so
sub-microsecond readings can be floored instead of rounded.
"""

from __future__ import annotations

from datetime import datetime, timezone

_NANOS_PER_SECOND = 1_000_000_000

# RFC 3164 mandates English abbreviations regardless of the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _to_datetime(epoch_ns: int, tz: timezone | None) -> datetime:
    seconds, nanos = divmod(epoch_ns, _NANOS_PER_SECOND)
    moment = datetime.fromtimestamp(seconds, tz=tz)
    return moment.replace(microsecond=nanos // 1000)


def format_rfc3164_timestamp(epoch_ns: int, *, use_utc: bool = False) -> str:
    """Render ``Mmm dd hh:mm:ss`` with a space-padded day (RFC 3164 4.1.2).

    Examples
    --------
    >>> format_rfc3164_timestamp(1_709_622_489 * 10**9, use_utc=True)
    'Mar  5 07:08:09'
    """
    moment = _to_datetime(epoch_ns, timezone.utc if use_utc else None)
    return f"{_MONTHS[moment.month - 1]} {moment.day:>2} {moment:%H:%M:%S}"


def format_rfc5424_timestamp(epoch_ns: int) -> str:
    """Render an RFC 3339 UTC timestamp floored to microseconds.

    Trailing zeros of the fraction are dropped, and a whole second carries no
    fraction at all.

    Examples
    --------
    >>> format_rfc5424_timestamp(1_700_000_000_123_456_789)
    '2023-11-14T22:13:20.123456Z'
    >>> format_rfc5424_timestamp(1_700_000_000_120_000_000)
    '2023-11-14T22:13:20.12Z'
    >>> format_rfc5424_timestamp(1_700_000_000 * 10**9)
    '2023-11-14T22:13:20Z'
    """
    moment = _to_datetime(epoch_ns, timezone.utc)
    fraction = f"{moment.microsecond:06d}".rstrip("0")
    suffix = f".{fraction}Z" if fraction else "Z"
    return f"{moment:%Y-%m-%dT%H:%M:%S}{suffix}"


__all__ = ["format_rfc3164_timestamp", "format_rfc5424_timestamp"]
