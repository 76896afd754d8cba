from __future__ import annotations

import io
import logging
import sys

import pytest

from lib_syslog_format.adapters.clock import FixedClock
from lib_syslog_format.adapters.logging_bridge import SyslogFormatter
from lib_syslog_format.adapters.rfc3164 import Formatter3164
from lib_syslog_format.adapters.rfc5424 import Formatter5424
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def _record(level: int, msg: str, *args: object, **attrs: object) -> logging.LogRecord:
    record = logging.LogRecord("tests", level, __file__, 10, msg, args, None)
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def wire3164(fixed_clock: FixedClock) -> Formatter3164:
    return Formatter3164(hostname="host1", process="myapp", pid=123, use_utc=True, clock=fixed_clock)


@pytest.fixture
def wire5424(fixed_clock: FixedClock) -> Formatter5424:
    return Formatter5424(hostname="host1", process="myapp", pid=123, clock=fixed_clock)


def test_rfc3164_record_rendering(wire3164: Formatter3164) -> None:
    line = SyslogFormatter(wire3164).format(_record(logging.ERROR, "failed %d times", 3))
    assert line == "<11>Nov 14 22:13:20 host1 myapp[123]: failed 3 times"


def test_rfc5424_record_carries_msgid_and_structured_data(wire5424: Formatter5424) -> None:
    record = _record(logging.INFO, "accepted", msgid="login", structured_data={"auth@32473": {"user": "alice"}})
    line = SyslogFormatter(wire5424).format(record)
    assert line == '<14>1 2023-11-14T22:13:20.123456Z host1 myapp 123 login [auth@32473 user="alice"] accepted'


def test_rfc5424_record_without_extras_uses_nilvalues(wire5424: Formatter5424) -> None:
    line = SyslogFormatter(wire5424).format(_record(logging.DEBUG, "noise"))
    assert line.endswith(" myapp 123 - - noise")
    assert line.startswith("<15>1 ")


def test_exception_text_is_appended(wire3164: Formatter3164) -> None:
    try:
        raise RuntimeError("kaboom")
    except RuntimeError:
        record = logging.LogRecord("tests", logging.ERROR, __file__, 1, "crashed", (), sys.exc_info())

    line = SyslogFormatter(wire3164).format(record)

    assert line.startswith("<11>Nov 14 22:13:20 host1 myapp[123]: crashed\nTraceback")
    assert "RuntimeError: kaboom" in line


def test_formatter_plugs_into_stream_handler(wire3164: Formatter3164) -> None:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(SyslogFormatter(wire3164))
    logger = logging.getLogger("tests.syslog_bridge")
    logger.propagate = False
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        logger.warning("disk at %s%%", 91)
    finally:
        logger.removeHandler(handler)

    assert stream.getvalue() == "<12>Nov 14 22:13:20 host1 myapp[123]: disk at 91%\n"


def test_wire_property_exposes_formatter(wire3164: Formatter3164) -> None:
    assert SyslogFormatter(wire3164).wire is wire3164
