"""Conversion between civil components, instants and zone-local strings."""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from .exceptions import ZoneError
from .models import DateComponents, FixedZone, NamedZone, ZoneSpec
from .tzcache import ZONE_CACHE
from .util import (
    EPOCH,
    MILLIS_PER_DAY,
    MILLIS_PER_MINUTE,
    components_to_millis,
    datetime_to_millis,
    format_offset,
    format_year,
    split_millis,
    truncate_div,
)

# One day inside datetime's range so astimezone never overflows.
_MIN_LOOKUP_MILLIS = datetime_to_millis(datetime.min.replace(tzinfo=UTC)) + MILLIS_PER_DAY
_MAX_LOOKUP_MILLIS = datetime_to_millis(datetime.max.replace(tzinfo=UTC)) - MILLIS_PER_DAY
_NUMERIC_ABBREVIATION_RE = re.compile(r"^([+-])(\d{2})(\d{2})?$", re.ASCII)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def _handle(zone: NamedZone) -> ZoneInfo:
    handle = ZONE_CACHE.get(zone.name)
    if handle is None:
        raise ZoneError(f"Unknown timezone: {zone.name}.")
    return handle


def _local_datetime(instant: int, zone: NamedZone) -> datetime:
    clamped = min(max(instant, _MIN_LOOKUP_MILLIS), _MAX_LOOKUP_MILLIS)
    return (EPOCH + timedelta(milliseconds=clamped)).astimezone(_handle(zone))


def zone_offset_millis(instant: int, zone: ZoneSpec) -> int:
    """UTC offset of ``zone`` at ``instant``, in milliseconds."""
    if isinstance(zone, FixedZone):
        return zone.offset_minutes * MILLIS_PER_MINUTE
    offset = _local_datetime(instant, zone).utcoffset()
    if offset is None:
        return 0
    return offset // _ONE_MILLISECOND


def to_instant(components: DateComponents, zone: ZoneSpec) -> int:
    """Map civil components in ``zone`` to epoch milliseconds.

    Named zones use a two-pass correction: the offset at the naive UTC guess
    is applied, then re-queried at the adjusted instant and re-applied if it
    changed. Local times that are skipped or repeated by a DST transition are
    not disambiguated beyond that.
    """
    utc_guess = components_to_millis(
        components.year,
        components.month,
        components.day,
        components.hour,
        components.minute,
        components.second,
        components.millisecond,
    )
    if isinstance(zone, FixedZone):
        return utc_guess - zone.offset_minutes * MILLIS_PER_MINUTE
    first_offset = zone_offset_millis(utc_guess, zone)
    adjusted = utc_guess - first_offset
    second_offset = zone_offset_millis(adjusted, zone)
    if second_offset != first_offset:
        adjusted = utc_guess - second_offset
    return adjusted


def zone_abbreviation(instant: int, zone: ZoneSpec) -> str:
    """Short zone name at ``instant``: the label for fixed zones, else e.g. ``PDT``."""
    if isinstance(zone, FixedZone):
        return zone.label
    name = _local_datetime(instant, zone).tzname()
    if not name:
        return zone.name
    match = _NUMERIC_ABBREVIATION_RE.match(name)
    if match is None:
        return name
    sign, hours, minutes = match.groups()
    if int(hours) == 0 and not minutes:
        return "GMT"
    suffix = f":{minutes}" if minutes and minutes != "00" else ""
    return f"GMT{sign}{int(hours)}{suffix}"


def format_for_zone(instant: int, zone: ZoneSpec) -> str:
    """Render as ``YYYY-MM-DDTHH:MM:SS ±HH:MM ZONE``."""
    offset = zone_offset_millis(instant, zone)
    year, month, day, hour, minute, second, _ = split_millis(instant + offset)
    offset_text = format_offset(truncate_div(offset, MILLIS_PER_MINUTE))
    return (
        f"{format_year(year)}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}"
        f" {offset_text} {zone_abbreviation(instant, zone)}"
    )
