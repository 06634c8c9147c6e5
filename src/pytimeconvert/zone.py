"""Zone specifier resolution."""

from __future__ import annotations

import logging
import re

from tzlocal import get_localzone_name

from .models import FixedZone, NamedZone, ZoneSpec
from .tzcache import ZONE_CACHE
from .util import format_offset

_LOGGER = logging.getLogger(__name__)

LOCAL_LABEL = "Local"
UTC_LABEL = "UTC"
FALLBACK_ZONE_NAME = "UTC"

_LOCAL_RE = re.compile(r"^local$", re.IGNORECASE)
_UTC_RE = re.compile(r"^(?:utc|gmt|z)$", re.IGNORECASE)
# Etc/GMT identifiers carry reversed signs: Etc/GMT+7 is UTC-07:00.
_ETC_RE = re.compile(r"^Etc/GMT([+-])(\d{1,2})$", re.IGNORECASE | re.ASCII)
_PREFIXED_OFFSET_RE = re.compile(
    r"^(?:UTC|GMT)\s*([+-])\s*(\d{1,2})(?::?(\d{2}))?$",
    re.IGNORECASE | re.ASCII,
)
_BARE_OFFSET_RE = re.compile(r"^([+-])\s*(\d{1,2})(?::?(\d{2}))?$", re.ASCII)


def local_zone_name() -> str:
    """Return the process's local timezone name, ``UTC`` when undiscoverable."""
    try:
        name = get_localzone_name()
    except LookupError as exc:
        _LOGGER.debug("Local timezone lookup failed: %s", exc)
        return FALLBACK_ZONE_NAME
    handle = ZONE_CACHE.get(name) if name else None
    if handle is None:
        return FALLBACK_ZONE_NAME
    return handle.key


def local_zone() -> NamedZone:
    return NamedZone(local_zone_name(), label=LOCAL_LABEL)


def utc_zone() -> FixedZone:
    return FixedZone(0, UTC_LABEL)


def fixed_zone(offset_minutes: int) -> FixedZone:
    return FixedZone(offset_minutes, f"UTC{format_offset(offset_minutes)}")


def is_valid_zone_name(name: str) -> bool:
    return ZONE_CACHE.get(name) is not None


def is_local_zone(zone: ZoneSpec) -> bool:
    return isinstance(zone, NamedZone) and zone.name == local_zone_name()


def _offset_zone(sign: str, hours: str, minutes: str | None) -> FixedZone | None:
    hour_value = int(hours)
    minute_value = int(minutes or "0")
    if hour_value > 23 or minute_value > 59:
        return None
    direction = 1 if sign == "+" else -1
    return fixed_zone(direction * (hour_value * 60 + minute_value))


def _parse_fixed_offset(value: str) -> FixedZone | None:
    match = _ETC_RE.match(value)
    if match:
        hours = int(match.group(2))
        if hours > 23:
            return None
        direction = -1 if match.group(1) == "+" else 1
        return fixed_zone(direction * hours * 60)
    match = _PREFIXED_OFFSET_RE.match(value) or _BARE_OFFSET_RE.match(value)
    if match:
        return _offset_zone(match.group(1), match.group(2), match.group(3))
    return None


def resolve_zone(raw: str | None) -> ZoneSpec | None:
    """Resolve a textual zone specifier, ``None`` when it is not a zone."""
    if not isinstance(raw, str):
        return None
    value = raw.strip()
    if not value:
        return None
    if _LOCAL_RE.match(value):
        return local_zone()
    if _UTC_RE.match(value):
        return utc_zone()
    fixed = _parse_fixed_offset(value)
    if fixed is not None:
        return fixed
    if is_valid_zone_name(value):
        return NamedZone(value)
    return None


def parse_output_zones(raw_list: str | None, include_local: bool = True) -> list[ZoneSpec]:
    """Parse a comma-separated zone list into unique zones, in order.

    Entries that do not resolve are skipped. An empty result falls back to UTC.
    """
    zones: list[ZoneSpec] = []
    seen: set[str] = set()

    def push_unique(zone: ZoneSpec | None) -> None:
        if zone is None or zone.key in seen:
            return
        seen.add(zone.key)
        zones.append(zone)

    if include_local:
        push_unique(local_zone())
    if raw_list:
        for entry in raw_list.split(","):
            entry = entry.strip()
            if not entry:
                continue
            zone = resolve_zone(entry)
            if zone is None:
                _LOGGER.debug("Skipping unknown output zone %s", entry)
            push_unique(zone)
    if not zones:
        push_unique(utc_zone())
    return zones
