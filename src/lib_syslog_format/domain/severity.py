"""Syslog severities as defined by RFC 5424 table 2.

Purpose
-------
Offer a domain-specific representation of the eight syslog severities together
with helpers translating names and stdlib :mod:`logging` levels.

Contents
--------
* :class:`Severity` enum ordered by numeric code (``EMERG`` = 0 ... ``DEBUG`` = 7).
* ``_ALIASES`` constant mapping common spellings to members.

System Role
-----------
Consumed by the priority encoder and every wire formatter; the logging bridge
uses :meth:`Severity.from_python_level` to classify records.
"""

from __future__ import annotations

import logging
from enum import Enum


class Severity(Enum):
    """Enumerated syslog severities, most severe first."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def keyword(self) -> str:
        """Return the lowercase keyword used by ``syslog.conf`` selectors."""

        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Resolve ``name`` (keyword or alias, case-insensitive) to a member.

        Examples
        --------
        >>> Severity.from_name("warn")
        <Severity.WARNING: 4>
        >>> Severity.from_name("Emerg")
        <Severity.EMERG: 0>
        """
        normalized = name.strip().upper()
        if normalized.startswith("LOG_"):
            normalized = normalized[4:]
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown syslog severity: {name!r}") from exc

    @classmethod
    def from_numeric(cls, code: int) -> "Severity":
        """Return the :class:`Severity` carrying numeric ``code``."""
        try:
            return cls(code)
        except ValueError as exc:
            raise ValueError(f"Unsupported syslog severity numeric: {code}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "Severity":
        """Translate a stdlib logging level into the closest severity.

        Custom levels fall into the band of the next lower standard level.

        Examples
        --------
        >>> Severity.from_python_level(logging.ERROR)
        <Severity.ERR: 3>
        >>> Severity.from_python_level(25)
        <Severity.INFO: 6>
        """
        if level >= logging.CRITICAL:
            return cls.CRIT
        if level >= logging.ERROR:
            return cls.ERR
        if level >= logging.WARNING:
            return cls.WARNING
        if level >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


# Alternative spellings accepted by :meth:`Severity.from_name`.
_ALIASES = {
    "EMERGENCY": "EMERG",
    "PANIC": "EMERG",
    "CRITICAL": "CRIT",
    "ERROR": "ERR",
    "WARN": "WARNING",
    "INFORMATIONAL": "INFO",
}


__all__ = ["Severity"]
