"""Single-purpose format parsers.

Every parser takes the zone-stripped input text and the source zone and
returns epoch milliseconds, or ``None`` to decline.
"""

from __future__ import annotations

import logging
import re

from dateutil import parser as dateutil_parser

from .. import util
from ..convert import to_instant
from ..models import DateComponents, ZoneSpec
from ..zone import is_local_zone, resolve_zone

_LOGGER = logging.getLogger(__name__)

_NOW_RE = re.compile(r"^now", re.IGNORECASE)
_AGO_RE = re.compile(r"^(\d+)\s+(minutes?|hours?|day|days)\s+ago$", re.IGNORECASE | re.ASCII)
_DIGITS_RE = re.compile(r"^[0-9]+$")
_COMPACT_DATETIME_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})(\d{2})(\d{2})(\d{2})$", re.ASCII)
_COMPACT_DATE_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})$", re.ASCII)
_DASH_DATE_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$", re.ASCII)
_DASH_YEAR_MONTH_RE = re.compile(r"^(\d{4})-(\d{1,2})$", re.ASCII)
_DASH_MONTH_NAME_RE = re.compile(r"^(\d{4})-([A-Za-z]{3})-(\d{1,2})$", re.ASCII)
_DASH_DATETIME_RE = re.compile(
    r"^(\d{4})-(\d{1,2})-(\d{1,2})[T\s](\d{1,2}):(\d{2})(?::(\d{2}))?"
    r"(?:[.,](\d{1,9}))?(?:\s*(AM|PM))?$",
    re.IGNORECASE | re.ASCII,
)
_SLASH_RE = re.compile(
    r"^(\d{1,4})/(\d{1,2})/(\d{1,4})"
    r"(?:\s+(\d{1,2}):(\d{2})(?::(\d{2}))?(?:[.,](\d{1,9}))?(?:\s*(AM|PM))?)?$",
    re.IGNORECASE | re.ASCII,
)
_CHINESE_RE = re.compile(r"^(\d{4})年(\d{1,2})月(\d{1,2})日(?:\s+(\d{1,2}):(\d{2}))?$", re.ASCII)
_DAY_MONTH_NAME_RE = re.compile(
    r"^(\d{1,2})\s+([A-Za-z]{3})\s+(\d{4}),\s*(\d{1,2}):(\d{2})(?::(\d{2}))?$",
    re.ASCII,
)
_MONTH_NAME_RE = re.compile(
    r"^([A-Za-z]{3,9})\s+(\d{1,2}),\s*(\d{4})(?:\s+(\d{1,2}):(\d{2}):(\d{2})\s*(AM|PM))?$",
    re.IGNORECASE | re.ASCII,
)
_ANSI_RE = re.compile(
    r"^(?:[A-Za-z]{3}\s+)?([A-Za-z]{3})\s+(\d{1,2})\s+(\d{1,2}):(\d{2}):(\d{2})\s+(\d{4})$",
    re.ASCII,
)

_EXPLICIT_ZONE_PATTERNS = (
    re.compile(r"\b(?:UTC|GMT)\b", re.IGNORECASE),
    re.compile(r"Etc/GMT[+-]\d{1,2}", re.IGNORECASE | re.ASCII),
    re.compile(r"\b[A-Za-z_]+/[A-Za-z_+-]+\b", re.ASCII),
    re.compile(r"[+-]\d{2}:?\d{2}(?!\d)", re.ASCII),
    re.compile(r"\dZ$", re.ASCII),
)
# Tokens dateutil misreads or rejects; resolved here instead.
_ZONE_TOKEN_PATTERNS = (
    re.compile(r"\bEtc/GMT[+-]\d{1,2}\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\b(?:UTC|GMT)\s*[+-]\s*\d{1,2}(?::?\d{2})?\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\b[A-Za-z_]+/[A-Za-z_+-]+(?:/[A-Za-z_+-]+)?\b", re.ASCII),
)
_COMMA_FRACTION_RE = re.compile(r"(\d),(\d{3,9})(?!\d)", re.ASCII)
_LONG_FRACTION_RE = re.compile(r"\.(\d{3})\d+", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")

_AGO_UNITS = {
    "minute": util.MILLIS_PER_MINUTE,
    "hour": util.MILLIS_PER_HOUR,
    "day": util.MILLIS_PER_DAY,
}


def _build(
    zone: ZoneSpec,
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    meridiem: str | None = None,
) -> int | None:
    normalized_hour = util.apply_meridiem(hour, meridiem)
    if normalized_hour is None:
        return None
    if not util.is_valid_calendar_date(year, month, day):
        return None
    if not util.is_valid_time(normalized_hour, minute, second, millisecond):
        return None
    components = DateComponents(year, month, day, normalized_hour, minute, second, millisecond)
    instant = to_instant(components, zone)
    if not util.is_representable(instant):
        return None
    return instant


def _optional_int(value: str | None) -> int:
    return int(value) if value else 0


def parse_now(text: str, source_zone: ZoneSpec) -> int | None:
    if not _NOW_RE.match(text.strip()):
        return None
    return util.current_millis() // 1000 * 1000


def parse_ago(text: str, source_zone: ZoneSpec) -> int | None:
    match = _AGO_RE.match(text.strip())
    if not match:
        return None
    unit = match.group(2).lower().rstrip("s")
    return util.current_millis() - int(match.group(1)) * _AGO_UNITS[unit]


def parse_numeric(text: str, source_zone: ZoneSpec) -> int | None:
    """Compact absolute dates, else an epoch value scaled by digit count."""
    if not _DIGITS_RE.match(text):
        return None
    length = len(text)
    if length == 14 and text.startswith("2"):
        year, month, day, hour, minute, second = map(int, _COMPACT_DATETIME_RE.match(text).groups())
        return _build(source_zone, year, month, day, hour, minute, second)
    if length == 8 and text.startswith("2"):
        year, month, day = map(int, _COMPACT_DATE_RE.match(text).groups())
        return _build(source_zone, year, month, day)
    if length == 4 and text.startswith("2"):
        return _build(source_zone, int(text), 1, 1)

    value = int(text)
    if length > 16:
        millis = value // 1_000_000
    elif length > 13:
        millis = value // 1_000
    elif length > 10:
        millis = value
    else:
        millis = value * 1_000
    if millis < 0 or not util.is_representable(millis):
        return None
    return millis


def parse_dash_date(text: str, source_zone: ZoneSpec) -> int | None:
    match = _DASH_DATE_RE.match(text)
    if match:
        year, month, day = map(int, match.groups())
        return _build(source_zone, year, month, day)

    match = _DASH_YEAR_MONTH_RE.match(text)
    if match:
        year, month = map(int, match.groups())
        return _build(source_zone, year, month, 1)

    match = _DASH_MONTH_NAME_RE.match(text)
    if match:
        month = util.parse_month_token(match.group(2))
        if month is None:
            return None
        return _build(source_zone, int(match.group(1)), month, int(match.group(3)))

    match = _DASH_DATETIME_RE.match(text)
    if not match:
        return None
    year, month, day, hour, minute, second, fraction, meridiem = match.groups()
    return _build(
        source_zone,
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        _optional_int(second),
        util.parse_fraction_millis(fraction),
        meridiem,
    )


def parse_slash_date(text: str, source_zone: ZoneSpec) -> int | None:
    """``A/B/C`` dates; a four-digit group fixes the order, else Y/M/D then M/D/Y."""
    match = _SLASH_RE.match(text)
    if not match:
        return None
    a, b, c, hour, minute, second, fraction, meridiem = match.groups()

    attempts: list[tuple[int, int, int]] = []
    if len(a) == 4:
        attempts.append((int(a), int(b), int(c)))
    elif len(c) == 4:
        attempts.append((int(c), int(a), int(b)))
    elif len(a) <= 2 and len(b) <= 2 and len(c) <= 2:
        attempts.append((util.expand_two_digit_year(int(a)), int(b), int(c)))
        attempts.append((util.expand_two_digit_year(int(c)), int(a), int(b)))

    for year, month, day in attempts:
        instant = _build(
            source_zone,
            year,
            month,
            day,
            _optional_int(hour),
            _optional_int(minute),
            _optional_int(second),
            util.parse_fraction_millis(fraction),
            meridiem,
        )
        if instant is not None:
            return instant
    return None


def parse_chinese_date(text: str, source_zone: ZoneSpec) -> int | None:
    match = _CHINESE_RE.match(text.strip())
    if not match:
        return None
    year, month, day, hour, minute = match.groups()
    return _build(
        source_zone,
        int(year),
        int(month),
        int(day),
        _optional_int(hour),
        _optional_int(minute),
    )


def parse_day_month_name(text: str, source_zone: ZoneSpec) -> int | None:
    match = _DAY_MONTH_NAME_RE.match(text.strip())
    if not match:
        return None
    day, month_token, year, hour, minute, second = match.groups()
    month = util.parse_month_token(month_token)
    if month is None:
        return None
    return _build(
        source_zone,
        int(year),
        month,
        int(day),
        int(hour),
        int(minute),
        _optional_int(second),
    )


def parse_month_name(text: str, source_zone: ZoneSpec) -> int | None:
    match = _MONTH_NAME_RE.match(text.strip())
    if not match:
        return None
    month_token, day, year, hour, minute, second, meridiem = match.groups()
    month = util.parse_month_token(month_token)
    if month is None:
        return None
    return _build(
        source_zone,
        int(year),
        month,
        int(day),
        _optional_int(hour),
        _optional_int(minute),
        _optional_int(second),
        meridiem=meridiem,
    )


def parse_ansi(text: str, source_zone: ZoneSpec) -> int | None:
    """ctime layout, e.g. ``Wed Jan 30 21:24:44 2019``."""
    match = _ANSI_RE.match(text.strip())
    if not match:
        return None
    month_token, day, hour, minute, second, year = match.groups()
    month = util.parse_month_token(month_token)
    if month is None:
        return None
    return _build(
        source_zone,
        int(year),
        month,
        int(day),
        int(hour),
        int(minute),
        int(second),
    )


def has_explicit_zone(text: str) -> bool:
    trimmed = text.strip()
    return any(pattern.search(trimmed) for pattern in _EXPLICIT_ZONE_PATTERNS)


def normalize_native_input(text: str) -> str:
    """Comma fractions become dot fractions of at most three digits."""
    normalized = text.strip()
    normalized = _COMMA_FRACTION_RE.sub(
        lambda match: f"{match.group(1)}.{match.group(2)[:3]}",
        normalized,
    )
    normalized = _LONG_FRACTION_RE.sub(r".\1", normalized)
    return _WHITESPACE_RE.sub(" ", normalized)


def _extract_zone_token(text: str) -> tuple[str, ZoneSpec | None]:
    for pattern in _ZONE_TOKEN_PATTERNS:
        for match in pattern.finditer(text):
            zone = resolve_zone(match.group(0))
            if zone is None:
                continue
            remaining = f"{text[: match.start()]} {text[match.end() :]}"
            return _WHITESPACE_RE.sub(" ", remaining).strip(), zone
    return text, None


def parse_native(text: str, source_zone: ZoneSpec) -> int | None:
    """General-purpose fallback, only for text with an explicit zone or a local source zone."""
    if not has_explicit_zone(text) and not is_local_zone(source_zone):
        _LOGGER.debug("Native fallback skipped for %r: no explicit zone", text)
        return None
    remaining, token_zone = _extract_zone_token(normalize_native_input(text))
    if not remaining:
        return None
    try:
        parsed = dateutil_parser.parse(remaining)
        if parsed.tzinfo is not None and parsed.utcoffset() is not None:
            instant = util.datetime_to_millis(parsed)
            return instant if util.is_representable(instant) else None
    except (ValueError, OverflowError) as exc:
        _LOGGER.debug("Native fallback rejected %r: %s", remaining, exc)
        return None
    return _build(
        token_zone or source_zone,
        parsed.year,
        parsed.month,
        parsed.day,
        parsed.hour,
        parsed.minute,
        parsed.second,
        parsed.microsecond // 1000,
    )
