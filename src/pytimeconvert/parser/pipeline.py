"""Input shape classification and per-shape parser ordering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol

from ..models import ParseState, ZoneSpec
from ..zone import resolve_zone
from .formats import (
    parse_ago,
    parse_ansi,
    parse_chinese_date,
    parse_dash_date,
    parse_day_month_name,
    parse_month_name,
    parse_native,
    parse_now,
    parse_numeric,
    parse_slash_date,
)

_LEADING_DIGIT_RE = re.compile(r"^[0-9]")
_ALL_DIGITS_RE = re.compile(r"^[0-9]+$")
_LEADING_LETTER_RE = re.compile(r"^[A-Za-z]")
_LETTER_OR_IDEOGRAPH_RE = re.compile(r"[A-Za-z\u4e00-\u9fff]")


class FormatParser(Protocol):
    def __call__(self, text: str, source_zone: ZoneSpec, /) -> int | None: ...


@dataclass(frozen=True, slots=True)
class PatternEntry:
    label: str
    parser: FormatParser


NOW = PatternEntry("now", parse_now)
AGO = PatternEntry("ago", parse_ago)
NUMERIC = PatternEntry("numeric-epoch", parse_numeric)
DASH = PatternEntry("dash-date", parse_dash_date)
SLASH = PatternEntry("slash-date", parse_slash_date)
CHINESE = PatternEntry("chinese-date", parse_chinese_date)
DAY_MONTH_NAME = PatternEntry("day-month-name", parse_day_month_name)
MONTH_NAME = PatternEntry("month-name", parse_month_name)
ANSI = PatternEntry("ansi-style", parse_ansi)
NATIVE = PatternEntry("native-fallback", parse_native)

PIPELINES: dict[ParseState, tuple[PatternEntry, ...]] = {
    ParseState.DIGIT: (NOW, AGO, NUMERIC, NATIVE),
    ParseState.DIGIT_DASH: (NOW, AGO, DASH, CHINESE, NATIVE),
    ParseState.DIGIT_SLASH: (NOW, AGO, SLASH, NATIVE),
    ParseState.DIGIT_ALPHA: (NOW, AGO, CHINESE, DAY_MONTH_NAME, NATIVE),
    ParseState.ALPHA: (NOW, AGO, MONTH_NAME, ANSI, NATIVE),
    ParseState.UNKNOWN: (NOW, AGO, NUMERIC, DASH, SLASH, CHINESE, NATIVE),
}


def pipeline_for(state: ParseState) -> tuple[PatternEntry, ...]:
    return PIPELINES[state]


def classify(text: str) -> ParseState:
    value = text.strip()
    if not value:
        return ParseState.UNKNOWN
    if _LEADING_DIGIT_RE.match(value):
        if _ALL_DIGITS_RE.match(value):
            return ParseState.DIGIT
        if "-" in value:
            return ParseState.DIGIT_DASH
        if "/" in value:
            return ParseState.DIGIT_SLASH
        if _LETTER_OR_IDEOGRAPH_RE.search(value):
            return ParseState.DIGIT_ALPHA
        return ParseState.DIGIT
    if _LEADING_LETTER_RE.match(value):
        return ParseState.ALPHA
    return ParseState.UNKNOWN


def split_zone_suffix(raw: str, default_zone: ZoneSpec) -> tuple[str, ZoneSpec]:
    """Split a trailing ``,zone`` clause off ``raw``.

    When the text after the last comma is not a zone the whole input is kept
    and ``default_zone`` applies.
    """
    trimmed = raw.strip()
    comma_index = trimmed.rfind(",")
    if comma_index <= 0:
        return trimmed, default_zone
    zone = resolve_zone(trimmed[comma_index + 1 :])
    if zone is None:
        return trimmed, default_zone
    return trimmed[:comma_index].strip(), zone
