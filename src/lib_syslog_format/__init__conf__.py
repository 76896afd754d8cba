"""Static package metadata surfaced by the CLI and :func:`summary_info`."""

from __future__ import annotations

from typing import Callable

name = "lib_syslog_format"
title = "Render log events as RFC 3164 and RFC 5424 syslog lines"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_syslog_format"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_syslog_format"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Emit the metadata banner through ``writer`` (defaults to stdout).

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for lib_syslog_format:
    ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    emit = writer or (lambda text: print(text, end=""))
    for line in lines:
        emit(line)
