"""Command-line adapter rendering syslog lines with rich-click.

Purpose
-------
Expose the formatters for shell use: print a single RFC 3164 or RFC 5424 line,
show a per-severity demo table, or display package metadata.

Contents
--------
* :func:`cli` - root command group with traceback and dotenv toggles.
* ``info`` / ``rfc3164`` / ``rfc5424`` / ``demo`` subcommands.
* :func:`main` - entry point delegating to :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Outermost presentation layer. It only parses options and calls the façade
factories; all encoding lives in the adapters.
"""

from __future__ import annotations

import os
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as config_module
from .domain.facility import Facility
from .domain.severity import Severity
from .domain.structured_data import StructuredData
from .lib_syslog_format import create_formatter3164, create_formatter5424, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_SEVERITY_CHOICES = [severity.keyword for severity in Severity]
_FACILITY_CHOICES = [facility.keyword for facility in Facility]
_DEMO_FORMATS = ("rfc3164", "rfc5424", "both")


def _parse_structured_data(entries: Sequence[str]) -> StructuredData:
    """Turn ``ID:NAME=VALUE`` entries into a structured-data mapping.

    Examples
    --------
    >>> _parse_structured_data(["origin:ip=10.0.0.1", "origin:sw=app"])
    {'origin': {'ip': '10.0.0.1', 'sw': 'app'}}
    """
    data: dict[str, dict[str, str]] = {}
    for entry in entries:
        sd_id, sep, pair = entry.partition(":")
        name, eq, value = pair.partition("=")
        if not sep or not eq or not sd_id or not name:
            raise click.BadParameter(f"expected ID:NAME=VALUE, got {entry!r}", param_hint="--sd")
        data.setdefault(sd_id, {})[name] = value
    return data


def _identity_options(function):
    function = click.option("--pid", type=int, default=None, help="Process id (defaults to the current pid).")(function)
    function = click.option("--app-name", "process", default=None, help="Application name (defaults to the script name).")(function)
    function = click.option("--hostname", default=None, help="Hostname (defaults to the detected hostname).")(function)
    function = click.option(
        "--facility",
        type=click.Choice(_FACILITY_CHOICES, case_sensitive=False),
        default=None,
        help="Syslog facility (defaults to SYSLOG_FACILITY or 'user').",
    )(function)
    function = click.option(
        "--severity",
        type=click.Choice(_SEVERITY_CHOICES, case_sensitive=False),
        default=Severity.INFO.keyword,
        show_default=True,
        help="Syslog severity of the rendered line.",
    )(function)
    return function


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load a nearby .env before reading SYSLOG_* variables (env toggle: {config_module.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Render log events as RFC 3164 or RFC 5424 syslog lines."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata about the package."""

    click.echo(summary_info(), nl=False)


@cli.command("rfc3164", context_settings=CLICK_CONTEXT_SETTINGS)
@_identity_options
@click.option("--utc", "use_utc", is_flag=True, default=False, help="Render the timestamp in UTC instead of local time.")
@click.argument("message")
def cli_rfc3164(
    severity: str,
    facility: str | None,
    hostname: str | None,
    process: str | None,
    pid: int | None,
    use_utc: bool,
    message: str,
) -> None:
    """Print MESSAGE as one RFC 3164 line."""

    formatter = create_formatter3164(facility=facility, hostname=hostname, process=process, pid=pid, use_utc=use_utc or None)
    click.echo(formatter.render(Severity.from_name(severity), message))


@cli.command("rfc5424", context_settings=CLICK_CONTEXT_SETTINGS)
@_identity_options
@click.option("--msgid", default=None, help="MSGID header field (printable ASCII, max 32 characters).")
@click.option("--sd", "sd_entries", multiple=True, metavar="ID:NAME=VALUE", help="Structured-data parameter; repeatable.")
@click.option("--strict-sd", "strict_sd", is_flag=True, default=False, help="Escape '\"', '\\' and ']' inside SD values.")
@click.argument("message")
def cli_rfc5424(
    severity: str,
    facility: str | None,
    hostname: str | None,
    process: str | None,
    pid: int | None,
    msgid: str | None,
    sd_entries: tuple[str, ...],
    strict_sd: bool,
    message: str,
) -> None:
    """Print MESSAGE as one RFC 5424 line."""

    data = _parse_structured_data(sd_entries)
    formatter = create_formatter5424(
        facility=facility,
        hostname=hostname,
        process=process,
        pid=pid,
        escape_structured_data=strict_sd or None,
    )
    click.echo(formatter.render(Severity.from_name(severity), (msgid, data, message)))


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "wire_format",
    type=click.Choice(_DEMO_FORMATS, case_sensitive=False),
    default="both",
    show_default=True,
    help="Wire format(s) to render.",
)
@click.option(
    "--facility",
    type=click.Choice(_FACILITY_CHOICES, case_sensitive=False),
    default=None,
    help="Syslog facility used for every line.",
)
def cli_demo(wire_format: str, facility: str | None) -> None:
    """Render one line per severity in a table."""

    wire_format = wire_format.lower()
    table = Table(title=f"{__init__conf__.shell_command} demo", show_lines=False)
    table.add_column("Severity", style="bold")
    table.add_column("PRI", justify="right")
    table.add_column("Format")
    table.add_column("Line", overflow="fold")

    renderers = []
    if wire_format in ("rfc3164", "both"):
        formatter3164 = create_formatter3164(facility=facility)
        renderers.append(("rfc3164", lambda severity: formatter3164.render(severity, f"{severity.keyword} demo message")))
    if wire_format in ("rfc5424", "both"):
        formatter5424 = create_formatter5424(facility=facility)
        renderers.append(
            (
                "rfc5424",
                lambda severity: formatter5424.render(
                    severity,
                    ("demo", {"demo@32473": {"severity": severity.keyword}}, f"{severity.keyword} demo message"),
                ),
            )
        )

    for severity in Severity:
        for label, render in renderers:
            line = render(severity)
            table.add_row(severity.keyword, line[1 : line.index(">")], label, line)

    Console().print(table)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
