"""Environment-driven configuration for the formatter factories.

Purpose
-------
Resolve formatter settings from detected identity, environment variables and an
optional ``.env`` file so deployments can retune facility or hostname without
code changes.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle that requests ``.env`` loading.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``python-dotenv`` wiring.
* :class:`FormatterSettings` / :func:`load_settings` - resolved formatter inputs.

System Role
-----------
Used by the façade factories and the CLI. Precedence is explicit keyword
arguments, then environment, then detected identity.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from .domain.facility import Facility
from .domain.identity import ProcessIdentity

DOTENV_ENV_VAR = "SYSLOG_USE_DOTENV"

ENV_FACILITY = "SYSLOG_FACILITY"
ENV_HOSTNAME = "SYSLOG_HOSTNAME"
ENV_APP_NAME = "SYSLOG_APP_NAME"
ENV_USE_UTC = "SYSLOG_USE_UTC"
ENV_STRICT_SD = "SYSLOG_STRICT_SD"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})

_DOTENV_PATH: Path | None = None


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag (1/0, true/false, yes/no, on/off), got {value!r}")


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI flag wins over the :data:`DOTENV_ENV_VAR` toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return _parse_bool(DOTENV_ENV_VAR, env_value)


def _find_dotenv(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking upwards from ``search_from`` (or the CWD).

    Existing environment variables keep precedence. Subsequent calls return the
    already loaded path without re-reading the file.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, ``None`` when no file was found.
    """
    global _DOTENV_PATH
    if _DOTENV_PATH is not None:
        return _DOTENV_PATH
    if search_from is None:
        located = find_dotenv(usecwd=True)
        found = Path(located) if located else None
    else:
        found = _find_dotenv(search_from.resolve())
    if found is None:
        return None
    load_dotenv(found, override=False)
    _DOTENV_PATH = found.resolve()
    return _DOTENV_PATH


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_PATH
    _DOTENV_PATH = None


@dataclass(slots=True, frozen=True)
class FormatterSettings:
    """Resolved inputs for building either formatter."""

    facility: Facility
    hostname: str | None
    process: str
    pid: int
    use_utc: bool = False
    escape_structured_data: bool = False

    @property
    def identity(self) -> ProcessIdentity:
        return ProcessIdentity(hostname=self.hostname, process=self.process, pid=self.pid)

    def with_overrides(self, **changes: object) -> "FormatterSettings":
        """Return a copy with every non-``None`` entry of ``changes`` applied."""
        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied)


def load_settings(identity: ProcessIdentity, environ: Mapping[str, str] | None = None) -> FormatterSettings:
    """Apply ``SYSLOG_*`` environment overrides on top of ``identity``.

    ``SYSLOG_HOSTNAME`` set to an empty string clears the hostname.

    Raises
    ------
    ValueError
        When ``SYSLOG_FACILITY`` names an unknown facility or a boolean flag
        cannot be parsed.

    Examples
    --------
    >>> ident = ProcessIdentity(hostname="box", process="app", pid=1)
    >>> load_settings(ident, {"SYSLOG_FACILITY": "local0", "SYSLOG_HOSTNAME": ""}).hostname is None
    True
    """
    env = os.environ if environ is None else environ

    facility = Facility.USER
    if (raw_facility := env.get(ENV_FACILITY)) is not None:
        facility = Facility.from_name(raw_facility)

    hostname = identity.hostname
    if (raw_hostname := env.get(ENV_HOSTNAME)) is not None:
        hostname = raw_hostname.strip() or None

    process = env.get(ENV_APP_NAME, identity.process)

    use_utc = False
    if (raw_utc := env.get(ENV_USE_UTC)) is not None:
        use_utc = _parse_bool(ENV_USE_UTC, raw_utc)

    escape = False
    if (raw_strict := env.get(ENV_STRICT_SD)) is not None:
        escape = _parse_bool(ENV_STRICT_SD, raw_strict)

    return FormatterSettings(
        facility=facility,
        hostname=hostname,
        process=process,
        pid=identity.pid,
        use_utc=use_utc,
        escape_structured_data=escape,
    )


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_APP_NAME",
    "ENV_FACILITY",
    "ENV_HOSTNAME",
    "ENV_STRICT_SD",
    "ENV_USE_UTC",
    "FormatterSettings",
    "enable_dotenv",
    "load_settings",
    "should_use_dotenv",
]
