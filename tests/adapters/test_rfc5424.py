from __future__ import annotations

import io
import re

import pytest

from lib_syslog_format.adapters.clock import FixedClock
from lib_syslog_format.adapters.rfc5424 import Formatter5424, Rfc5424Message
from lib_syslog_format.domain.errors import FormatError
from lib_syslog_format.domain.facility import Facility
from lib_syslog_format.domain.identity import ProcessIdentity
from lib_syslog_format.domain.severity import Severity
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]

HEADER_RE = re.compile(
    r"<(?P<pri>\d{1,3})>1 (?P<ts>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.(?P<frac>\d{1,6}))?Z) "
    r"(?P<host>\S+) (?P<app>\S+) (?P<pid>\d+) (?P<msgid>\S+) (?P<rest>.*)"
)


@pytest.fixture
def formatter(fixed_clock: FixedClock) -> Formatter5424:
    return Formatter5424(facility=Facility.USER, hostname="host1", process="myapp", pid=123, clock=fixed_clock)


def test_line_is_bit_exact_with_fixed_clock(formatter: Formatter5424) -> None:
    sink = io.BytesIO()

    formatter.format(sink, Severity.INFO, ("ID47", {"exampleSDID@0": {"iut": "3"}}, "hello"))

    assert sink.getvalue() == b'<14>1 2023-11-14T22:13:20.123456Z host1 myapp 123 ID47 [exampleSDID@0 iut="3"] hello'


def test_missing_message_id_and_structured_data_use_nilvalue(formatter: Formatter5424) -> None:
    line = formatter.render(Severity.INFO, (None, {}, "hello"))
    assert line == "<14>1 2023-11-14T22:13:20.123456Z host1 myapp 123 - - hello"


def test_integer_message_id_matches_string_form(formatter: Formatter5424) -> None:
    as_int = io.BytesIO()
    as_str = io.BytesIO()

    formatter.format(as_int, Severity.WARNING, (42, {}, "m"))
    formatter.format(as_str, Severity.WARNING, ("42", {}, "m"))

    assert as_int.getvalue() == as_str.getvalue()
    assert b" 42 - m" in as_int.getvalue()


def test_message_id_is_filtered_then_truncated(formatter: Formatter5424) -> None:
    raw = "\x00".join("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
    line = formatter.render(Severity.INFO, (raw, {}, "m"))
    match = HEADER_RE.fullmatch(line)
    assert match is not None
    assert match["msgid"] == "ABCDEFGHIJKLMNOPQRSTUVWXYZ012345"


def test_missing_hostname_becomes_localhost(fixed_clock: FixedClock) -> None:
    formatter = Formatter5424(process="myapp", pid=123, clock=fixed_clock)
    assert " localhost myapp 123 " in formatter.render(Severity.INFO, (None, {}, "m"))


def test_empty_app_name_becomes_nilvalue(fixed_clock: FixedClock) -> None:
    formatter = Formatter5424(hostname="h", process="", pid=9, clock=fixed_clock)
    assert formatter.render(Severity.INFO, (None, {}, "m")) == "<14>1 2023-11-14T22:13:20.123456Z h - 9 - - m"


def test_timestamp_is_floored_to_microseconds(clock_at) -> None:
    formatter = Formatter5424(hostname="h", process="p", pid=1, clock=clock_at(2024, 3, 5, 7, 8, 9, nanos=123_456_789))
    match = HEADER_RE.fullmatch(formatter.render(Severity.INFO, (None, {}, "m")))
    assert match is not None
    assert match["ts"] == "2024-03-05T07:08:09.123456Z"
    assert match["frac"] == "123456"


def test_whole_second_timestamp_omits_fraction(clock_at) -> None:
    formatter = Formatter5424(hostname="h", process="p", pid=1, clock=clock_at(2023, 11, 14, 22, 13, 20))
    assert formatter.render(Severity.INFO, (None, {}, "m")) == "<14>1 2023-11-14T22:13:20Z h p 1 - - m"


def test_trailing_fraction_zeros_are_dropped(clock_at) -> None:
    formatter = Formatter5424(hostname="h", process="p", pid=1, clock=clock_at(2023, 11, 14, 22, 13, 20, nanos=120_000_000))
    assert formatter.render(Severity.INFO, (None, {}, "m")) == "<14>1 2023-11-14T22:13:20.12Z h p 1 - - m"


def test_system_clock_line_matches_grammar() -> None:
    formatter = Formatter5424(hostname="host1", process="myapp", pid=123)
    match = HEADER_RE.fullmatch(formatter.render(Severity.ERR, ("id", {}, "boom")))
    assert match is not None
    assert match["pri"] == "11"
    assert match["rest"] == "- boom"


def test_structured_data_is_verbatim_by_default(formatter: Formatter5424) -> None:
    line = formatter.render(Severity.INFO, (None, {"raw": {"v": 'say "hi"'}}, "m"))
    assert line.endswith('[raw v="say "hi""] m')


def test_strict_structured_data_escapes_values(fixed_clock: FixedClock) -> None:
    formatter = Formatter5424(hostname="h", process="p", pid=1, escape_structured_data=True, clock=fixed_clock)
    line = formatter.render(Severity.INFO, (None, {"raw": {"v": 'say "hi" ]'}}, "m"))
    assert line.endswith('[raw v="say \\"hi\\" \\]"] m')


def test_format_structured_data_helper(formatter: Formatter5424) -> None:
    assert formatter.format_structured_data({}) == "-"
    assert formatter.format_structured_data({"exampleSDID@0": {"iut": "3"}}) == '[exampleSDID@0 iut="3"]'


def test_named_payload_is_accepted(formatter: Formatter5424) -> None:
    payload = Rfc5424Message(message_id="login", structured_data={"auth@32473": {"user": "alice"}}, message="ok")
    assert formatter.render(Severity.NOTICE, payload).endswith(' login [auth@32473 user="alice"] ok')


def test_named_payload_defaults() -> None:
    payload = Rfc5424Message()
    assert payload.message_id is None
    assert dict(payload.structured_data) == {}
    assert payload.message == ""


@pytest.mark.parametrize(
    "method, severity",
    [
        ("emerg", Severity.EMERG),
        ("alert", Severity.ALERT),
        ("crit", Severity.CRIT),
        ("err", Severity.ERR),
        ("warning", Severity.WARNING),
        ("notice", Severity.NOTICE),
        ("info", Severity.INFO),
        ("debug", Severity.DEBUG),
    ],
)
def test_severity_helpers_match_explicit_format(formatter: Formatter5424, method: str, severity: Severity) -> None:
    via_helper = io.BytesIO()
    via_format = io.BytesIO()

    getattr(formatter, method)(via_helper, (7, {}, "m"))
    formatter.format(via_format, severity, (7, {}, "m"))

    assert via_helper.getvalue() == via_format.getvalue()


def test_write_failure_surfaces_as_format_error(formatter: Formatter5424, failing_sink) -> None:
    cause = ConnectionResetError("reset")
    with pytest.raises(FormatError) as excinfo:
        formatter.format(failing_sink(cause), Severity.INFO, (None, {}, "m"))
    assert excinfo.value.cause is cause


def test_from_identity_matches_rfc3164_identity(identity: ProcessIdentity, fixed_clock: FixedClock) -> None:
    formatter = Formatter5424.from_identity(identity, facility=Facility.LOCAL0, clock=fixed_clock)
    assert formatter.render(Severity.ALERT, (None, {}, "m")).startswith("<129>1 2023-11-14T22:13:20.123456Z host1 myapp 123 ")


def test_boolean_message_id_is_rejected(formatter: Formatter5424) -> None:
    sink = io.BytesIO()

    with pytest.raises(TypeError):
        formatter.format(sink, Severity.INFO, (True, {}, "m"))

    assert sink.getvalue() == b""
