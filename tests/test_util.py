import pytest

from pytimeconvert.util import (
    apply_meridiem,
    civil_from_days,
    components_to_millis,
    days_from_civil,
    expand_two_digit_year,
    format_offset,
    format_year,
    is_valid_calendar_date,
    parse_fraction_millis,
    parse_month_token,
    split_millis,
    truncate_div,
)


@pytest.mark.parametrize(
    ("token", "expected"),
    [(69, 1969), (68, 2068), (0, 2000), (99, 1999)],
)
def test_expand_two_digit_year_boundary(token: int, expected: int) -> None:
    assert expand_two_digit_year(token) == expected


def test_days_from_civil_epoch() -> None:
    assert days_from_civil(1970, 1, 1) == 0
    assert days_from_civil(2019, 1, 30) == 17926
    assert days_from_civil(1969, 12, 31) == -1


@pytest.mark.parametrize("days", [-719468, -1, 0, 59, 17926, 2932896])
def test_civil_from_days_round_trip(days: int) -> None:
    assert days_from_civil(*civil_from_days(days)) == days


@pytest.mark.parametrize(
    ("year", "month", "day", "expected"),
    [
        (2024, 2, 29, True),
        (2023, 2, 29, False),
        (1900, 2, 29, False),
        (2000, 2, 29, True),
        (2024, 4, 31, False),
        (2024, 2, 30, False),
        (2023, 13, 1, False),
        (2023, 0, 1, False),
        (50, 6, 15, True),
        (12000, 12, 31, True),
    ],
)
def test_is_valid_calendar_date(year: int, month: int, day: int, expected: bool) -> None:
    assert is_valid_calendar_date(year, month, day) is expected


def test_components_to_millis_and_split() -> None:
    millis = components_to_millis(2019, 1, 30, 13, 23, 38, 250)
    assert millis == 1548854618250
    assert split_millis(millis) == (2019, 1, 30, 13, 23, 38, 250)
    assert split_millis(-1) == (1969, 12, 31, 23, 59, 59, 999)


def test_parse_month_token() -> None:
    assert parse_month_token("SEPT") == 9
    assert parse_month_token("december") == 12
    assert parse_month_token("foo") is None


def test_parse_fraction_millis() -> None:
    assert parse_fraction_millis(None) == 0
    assert parse_fraction_millis("5") == 500
    assert parse_fraction_millis("123456789") == 123


def test_apply_meridiem() -> None:
    assert apply_meridiem(7, None) == 7
    assert apply_meridiem(12, "am") == 0
    assert apply_meridiem(12, "PM") == 12
    assert apply_meridiem(8, "pm") == 20
    assert apply_meridiem(13, "PM") is None
    assert apply_meridiem(0, "AM") is None


def test_format_offset_and_year() -> None:
    assert format_offset(0) == "+00:00"
    assert format_offset(-420) == "-07:00"
    assert format_offset(345) == "+05:45"
    assert format_year(50) == "0050"
    assert format_year(10000) == "10000"
    assert format_year(-1) == "-0001"


def test_truncate_div() -> None:
    assert truncate_div(1500, 1000) == 1
    assert truncate_div(-1500, 1000) == -1
