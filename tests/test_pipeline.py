import pytest

from pytimeconvert.models import FixedZone, NamedZone, ParseState
from pytimeconvert.parser.pipeline import PIPELINES, classify, pipeline_for, split_zone_suffix

DEFAULT_ZONE = FixedZone(480, "UTC+08:00")


@pytest.mark.parametrize(
    ("text", "state"),
    [
        ("", ParseState.UNKNOWN),
        ("   ", ParseState.UNKNOWN),
        ("1548854618", ParseState.DIGIT),
        ("2019-01-30 21:24:44", ParseState.DIGIT_DASH),
        ("2019-01-30T21:24:44Z", ParseState.DIGIT_DASH),
        ("2019/01/30", ParseState.DIGIT_SLASH),
        ("2019年1月30日", ParseState.DIGIT_ALPHA),
        ("30 Jan 2019, 21:24", ParseState.DIGIT_ALPHA),
        ("5 minutes ago", ParseState.DIGIT_ALPHA),
        ("12:30", ParseState.DIGIT),
        ("Jan 30, 2019", ParseState.ALPHA),
        ("now", ParseState.ALPHA),
        ("+0800", ParseState.UNKNOWN),
        ("年", ParseState.UNKNOWN),
    ],
)
def test_classify(text: str, state: ParseState) -> None:
    assert classify(text) is state


def test_every_pipeline_starts_with_now_and_ago() -> None:
    for state in ParseState:
        labels = [entry.label for entry in pipeline_for(state)]
        assert labels[:2] == ["now", "ago"]
    assert set(PIPELINES) == set(ParseState)


@pytest.mark.parametrize(
    ("state", "labels"),
    [
        (ParseState.DIGIT, ["numeric-epoch", "native-fallback"]),
        (ParseState.DIGIT_DASH, ["dash-date", "chinese-date", "native-fallback"]),
        (ParseState.DIGIT_SLASH, ["slash-date", "native-fallback"]),
        (ParseState.DIGIT_ALPHA, ["chinese-date", "day-month-name", "native-fallback"]),
        (ParseState.ALPHA, ["month-name", "ansi-style", "native-fallback"]),
        (
            ParseState.UNKNOWN,
            ["numeric-epoch", "dash-date", "slash-date", "chinese-date", "native-fallback"],
        ),
    ],
)
def test_pipeline_order(state: ParseState, labels: list[str]) -> None:
    assert [entry.label for entry in pipeline_for(state)][2:] == labels


def test_split_zone_suffix_resolves_zone() -> None:
    text, zone = split_zone_suffix("  2019-01-30 21:24:44 , gmt-7 ", DEFAULT_ZONE)
    assert text == "2019-01-30 21:24:44"
    assert zone == FixedZone(-420, "UTC-07:00")


def test_split_zone_suffix_named_zone_uses_last_comma() -> None:
    text, zone = split_zone_suffix("Jan 30, 2019,Asia/Tokyo", DEFAULT_ZONE)
    assert text == "Jan 30, 2019"
    assert zone == NamedZone("Asia/Tokyo")


@pytest.mark.parametrize(
    "raw",
    ["2019-01-30", ",utc", "Jan 30, 2019", "2024-01-12 08:30:00,123", "2019-01-30,Mars/Olympus"],
)
def test_split_zone_suffix_keeps_text_when_not_a_zone(raw: str) -> None:
    assert split_zone_suffix(raw, DEFAULT_ZONE) == (raw, DEFAULT_ZONE)


def test_split_zone_suffix_may_leave_empty_text() -> None:
    assert split_zone_suffix("   ", DEFAULT_ZONE) == ("", DEFAULT_ZONE)
    assert split_zone_suffix(" ,", DEFAULT_ZONE) == (",", DEFAULT_ZONE)
