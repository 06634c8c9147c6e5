"""Shared calendar arithmetic and token helpers."""

from __future__ import annotations

import re
import time
from datetime import UTC, datetime, timedelta

MILLIS_PER_SECOND = 1_000
MILLIS_PER_MINUTE = 60_000
MILLIS_PER_HOUR = 3_600_000
MILLIS_PER_DAY = 86_400_000
MAX_INSTANT_MILLIS = 8_640_000_000_000_000

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

MONTHS = {
    "jan": 1,
    "january": 1,
    "feb": 2,
    "february": 2,
    "mar": 3,
    "march": 3,
    "apr": 4,
    "april": 4,
    "may": 5,
    "jun": 6,
    "june": 6,
    "jul": 7,
    "july": 7,
    "aug": 8,
    "august": 8,
    "sep": 9,
    "sept": 9,
    "september": 9,
    "oct": 10,
    "october": 10,
    "nov": 11,
    "november": 11,
    "dec": 12,
    "december": 12,
}

_FRACTION_RE = re.compile(r"[0-9]{1,9}")


def current_millis() -> int:
    """Return the wall-clock instant in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date."""
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    day_of_year = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * 146097 + day_of_era - 719468


def civil_from_days(days: int) -> tuple[int, int, int]:
    days += 719468
    era = days // 146097
    day_of_era = days - era * 146097
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + (3 if shifted_month < 10 else -9)
    return year_of_era + era * 400 + (month <= 2), month, day


def is_valid_calendar_date(year: int, month: int, day: int) -> bool:
    if month < 1 or month > 12 or day < 1 or day > 31:
        return False
    return civil_from_days(days_from_civil(year, month, day)) == (year, month, day)


def is_valid_time(hour: int, minute: int, second: int, millisecond: int) -> bool:
    return 0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59 and 0 <= millisecond <= 999


def is_representable(instant: int) -> bool:
    return -MAX_INSTANT_MILLIS <= instant <= MAX_INSTANT_MILLIS


def components_to_millis(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Epoch milliseconds for civil fields read as UTC."""
    return (
        days_from_civil(year, month, day) * MILLIS_PER_DAY
        + hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millisecond
    )


def split_millis(instant: int) -> tuple[int, int, int, int, int, int, int]:
    """Inverse of :func:`components_to_millis`."""
    days, remainder = divmod(instant, MILLIS_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, remainder = divmod(remainder, MILLIS_PER_HOUR)
    minute, remainder = divmod(remainder, MILLIS_PER_MINUTE)
    second, millisecond = divmod(remainder, MILLIS_PER_SECOND)
    return year, month, day, hour, minute, second, millisecond


def datetime_to_millis(value: datetime) -> int:
    return (value - EPOCH) // timedelta(milliseconds=1)


def truncate_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def expand_two_digit_year(value: int) -> int:
    return 1900 + value if value >= 69 else 2000 + value


def parse_month_token(token: str) -> int | None:
    return MONTHS.get(token.lower())


def parse_fraction_millis(raw: str | None) -> int:
    if not raw or not _FRACTION_RE.fullmatch(raw):
        return 0
    return int(f"{raw}000"[:3])


def apply_meridiem(hour: int, meridiem: str | None) -> int | None:
    """Convert a 12-hour clock value to 24-hour, ``None`` when impossible."""
    if not meridiem:
        return hour
    upper = meridiem.upper()
    if hour < 1 or hour > 12:
        return None
    if upper == "AM":
        return 0 if hour == 12 else hour
    if upper == "PM":
        return 12 if hour == 12 else hour + 12
    return None


def format_offset(minutes: int) -> str:
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def format_year(year: int) -> str:
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"
