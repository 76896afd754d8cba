"""PRI value encoding (RFC 5424 section 6.2.1, RFC 3164 section 4.1.1)."""

from __future__ import annotations

from .facility import Facility
from .severity import Severity


def encode_priority(severity: Severity, facility: Facility) -> int:
    """Combine ``severity`` and ``facility`` into the PRI value.

    Examples
    --------
    >>> encode_priority(Severity.INFO, Facility.USER)
    14
    >>> encode_priority(Severity.DEBUG, Facility.LOCAL7)
    191
    """
    return facility.value | severity.value


def decode_priority(priority: int) -> tuple[Facility, Severity]:
    """Split a PRI value back into its facility and severity."""
    if not 0 <= priority <= 191:
        raise ValueError(f"Priority out of range: {priority}")
    return Facility(priority & ~0x07), Severity(priority & 0x07)


__all__ = ["decode_priority", "encode_priority"]
