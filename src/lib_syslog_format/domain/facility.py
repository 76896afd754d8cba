"""Syslog facilities with their POSIX ``LOG_*`` values.

Each member's value is the facility code already shifted left by three bits, so
it can be OR-ed with a :class:`~lib_syslog_format.domain.severity.Severity` to
form the PRI value directly.
"""

from __future__ import annotations

from enum import Enum


class Facility(Enum):
    """RFC 5424 section 6.2.1 facilities."""

    KERN = 0 << 3
    USER = 1 << 3
    MAIL = 2 << 3
    DAEMON = 3 << 3
    AUTH = 4 << 3
    SYSLOG = 5 << 3
    LPR = 6 << 3
    NEWS = 7 << 3
    UUCP = 8 << 3
    CRON = 9 << 3
    AUTHPRIV = 10 << 3
    FTP = 11 << 3
    NTP = 12 << 3
    AUDIT = 13 << 3
    ALERT = 14 << 3
    CLOCK = 15 << 3
    LOCAL0 = 16 << 3
    LOCAL1 = 17 << 3
    LOCAL2 = 18 << 3
    LOCAL3 = 19 << 3
    LOCAL4 = 20 << 3
    LOCAL5 = 21 << 3
    LOCAL6 = 22 << 3
    LOCAL7 = 23 << 3

    @property
    def code(self) -> int:
        """Return the unshifted facility number (0-23)."""

        return self.value >> 3

    @property
    def keyword(self) -> str:
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "Facility":
        """Resolve ``user``, ``LOG_USER`` or ``Local3`` style names.

        Examples
        --------
        >>> Facility.from_name("log_local3")
        <Facility.LOCAL3: 152>
        """
        normalized = name.strip().upper()
        if normalized.startswith("LOG_"):
            normalized = normalized[4:]
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown syslog facility: {name!r}") from exc

    @classmethod
    def from_code(cls, code: int) -> "Facility":
        """Return the facility for the unshifted numeric ``code``."""
        if not 0 <= code <= 23:
            raise ValueError(f"Unsupported syslog facility code: {code}")
        return cls(code << 3)


__all__ = ["Facility"]
