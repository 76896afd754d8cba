from __future__ import annotations

import pytest

from lib_syslog_format.domain.facility import Facility
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


@pytest.mark.parametrize(
    "facility, code",
    [
        (Facility.KERN, 0),
        (Facility.USER, 1),
        (Facility.MAIL, 2),
        (Facility.DAEMON, 3),
        (Facility.AUTH, 4),
        (Facility.SYSLOG, 5),
        (Facility.CRON, 9),
        (Facility.AUTHPRIV, 10),
        (Facility.CLOCK, 15),
        (Facility.LOCAL0, 16),
        (Facility.LOCAL7, 23),
    ],
)
def test_facility_values_are_shifted_codes(facility: Facility, code: int) -> None:
    assert facility.code == code
    assert facility.value == code << 3


def test_all_twenty_four_facilities_are_defined() -> None:
    assert sorted(facility.code for facility in Facility) == list(range(24))


@pytest.mark.parametrize("name", ["user", "USER", "log_user", "LOG_USER", " User "])
def test_from_name_accepts_posix_spellings(name: str) -> None:
    assert Facility.from_name(name) is Facility.USER


def test_from_name_rejects_unknown_facility() -> None:
    with pytest.raises(ValueError, match="Unknown syslog facility"):
        Facility.from_name("local8")


def test_from_code_round_trips_every_facility() -> None:
    for facility in Facility:
        assert Facility.from_code(facility.code) is facility


@pytest.mark.parametrize("code", [-1, 24])
def test_from_code_rejects_out_of_range(code: int) -> None:
    with pytest.raises(ValueError, match="Unsupported syslog facility code"):
        Facility.from_code(code)
