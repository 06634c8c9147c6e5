"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Literal

from .exceptions import CalendarError, ZoneError
from .tzcache import ZONE_CACHE
from .util import EPOCH, is_valid_calendar_date, is_valid_time

_MAX_OFFSET_MINUTES = 1440


@dataclass(frozen=True, slots=True)
class FixedZone:
    """Constant UTC offset, e.g. ``GMT-7`` or ``+08:00``."""

    offset_minutes: int
    label: str

    def __post_init__(self) -> None:
        if not isinstance(self.offset_minutes, int) or isinstance(self.offset_minutes, bool):
            raise ZoneError("offset_minutes must be an integer.")
        if not -_MAX_OFFSET_MINUTES < self.offset_minutes < _MAX_OFFSET_MINUTES:
            raise ZoneError("offset_minutes must be within one day of UTC.")

    @property
    def display_name(self) -> str:
        return self.label

    @property
    def key(self) -> str:
        """Identity used to de-duplicate zone lists."""
        return f"fixed:{self.offset_minutes}"


@dataclass(frozen=True, slots=True)
class NamedZone:
    """Timezone database zone whose offset varies by instant."""

    name: str
    label: str | None = None

    def __post_init__(self) -> None:
        handle = ZONE_CACHE.get(self.name)
        if handle is None:
            raise ZoneError(f"Unknown timezone: {self.name}.")
        object.__setattr__(self, "name", handle.key)

    @property
    def display_name(self) -> str:
        return self.label if self.label is not None else self.name

    @property
    def key(self) -> str:
        return f"named:{self.name}"


ZoneSpec = FixedZone | NamedZone


@dataclass(frozen=True, slots=True)
class DateComponents:
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    def __post_init__(self) -> None:
        if not is_valid_calendar_date(self.year, self.month, self.day):
            raise CalendarError(f"Invalid calendar date {self.year}-{self.month}-{self.day}.")
        if not is_valid_time(self.hour, self.minute, self.second, self.millisecond):
            raise CalendarError("Time of day is out of range.")


class ParseState(Enum):
    """Coarse shape of the input text, used to pick parsers."""

    UNKNOWN = "unknown"
    DIGIT = "digit"
    DIGIT_DASH = "digit-dash"
    DIGIT_SLASH = "digit-slash"
    DIGIT_ALPHA = "digit-alpha"
    ALPHA = "alpha"


@dataclass(frozen=True, slots=True)
class ParseSuccess:
    input_text: str
    source_zone: ZoneSpec
    source_zone_label: str
    instant: int
    matched_pattern: str

    @property
    def ok(self) -> Literal[True]:
        return True

    @property
    def utc_datetime(self) -> datetime:
        """UTC-aware datetime; raises ``OverflowError`` outside datetime's range."""
        return EPOCH + timedelta(milliseconds=self.instant)


@dataclass(frozen=True, slots=True)
class ParseFailure:
    input_text: str
    source_zone: ZoneSpec
    source_zone_label: str
    error: str
    error_code: str

    @property
    def ok(self) -> Literal[False]:
        return False


ParseOutcome = ParseSuccess | ParseFailure


@dataclass(frozen=True, slots=True)
class RenderedZone:
    label: str
    value: str
