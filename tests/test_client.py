import pytest

from pytimeconvert import USAGE_EXAMPLES, Converter
from pytimeconvert import zone as zone_module
from pytimeconvert.client import INPUT_ZONE_ENV, OUTPUT_ZONES_ENV
from pytimeconvert.exceptions import ConfigError, ValidationError
from pytimeconvert.models import FixedZone, NamedZone, ParseFailure, ParseSuccess, RenderedZone


@pytest.fixture(autouse=True)
def shanghai_local(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(zone_module, "get_localzone_name", lambda: "Asia/Shanghai")


def test_convert_renders_every_output_zone() -> None:
    converter = Converter("GMT-7", "America/Los_Angeles, UTC")

    outcome, rendered = converter.convert("2019-01-30 21:24:44")

    assert isinstance(outcome, ParseSuccess)
    assert outcome.instant == 1548908684000
    assert rendered == [
        RenderedZone("Local", "2019-01-31T12:24:44 +08:00 CST"),
        RenderedZone("America/Los_Angeles", "2019-01-30T20:24:44 -08:00 PST"),
        RenderedZone("UTC", "2019-01-31T04:24:44 +00:00 UTC"),
    ]


def test_default_zone_is_local() -> None:
    converter = Converter()

    assert converter.default_zone == NamedZone("Asia/Shanghai", label="Local")
    assert converter.output_zones == (NamedZone("Asia/Shanghai", label="Local"),)


def test_unknown_default_zone_falls_back_to_utc() -> None:
    assert Converter("Mars/Olympus").default_zone == FixedZone(0, "UTC")
    with pytest.raises(ConfigError):
        Converter("Mars/Olympus", strict=True)


def test_accepts_zone_instances() -> None:
    zone = FixedZone(60, "UTC+01:00")
    assert Converter(zone).default_zone is zone


def test_rejects_invalid_configuration_types() -> None:
    with pytest.raises(ConfigError):
        Converter(42)  # type: ignore[arg-type]
    with pytest.raises(ConfigError):
        Converter("UTC", ["UTC"])  # type: ignore[arg-type]


def test_from_env() -> None:
    converter = Converter.from_env(
        {INPUT_ZONE_ENV: "utc+5:30", OUTPUT_ZONES_ENV: "Asia/Tokyo,Asia/Tokyo"},
        include_local=False,
    )

    assert converter.default_zone == FixedZone(330, "UTC+05:30")
    assert converter.output_zones == (NamedZone("Asia/Tokyo"),)


def test_from_env_defaults() -> None:
    converter = Converter.from_env({})

    assert converter.default_zone.display_name == "Local"


def test_render_failure_is_empty() -> None:
    converter = Converter("UTC")
    outcome, rendered = converter.convert("not a time")

    assert isinstance(outcome, ParseFailure)
    assert rendered == []


def test_timestamps() -> None:
    converter = Converter("UTC")
    outcome = converter.parse("1548854618123")

    assert converter.timestamps(outcome) == ("1548854618123", "1548854618")
    before_epoch = converter.parse("1969-12-31 23:59:58.5")
    assert converter.timestamps(before_epoch) == ("-1500", "-1")


def test_timestamps_require_success() -> None:
    converter = Converter("UTC")
    with pytest.raises(ValidationError):
        converter.timestamps(converter.parse(""))  # type: ignore[arg-type]


def test_usage_examples_parse() -> None:
    converter = Converter("UTC")
    for example in USAGE_EXAMPLES:
        assert converter.parse(example).ok
