"""Converter facade: configured zones around the parser."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from .convert import format_for_zone
from .exceptions import ConfigError, ValidationError
from .models import FixedZone, NamedZone, ParseOutcome, ParseSuccess, RenderedZone, ZoneSpec
from .parser import parse_date_input
from .util import truncate_div
from .zone import LOCAL_LABEL, parse_output_zones, resolve_zone, utc_zone

_LOGGER = logging.getLogger(__name__)

INPUT_ZONE_ENV = "PYTIMECONVERT_INPUT_ZONE"
OUTPUT_ZONES_ENV = "PYTIMECONVERT_OUTPUT_ZONES"

USAGE_EXAMPLES = (
    "now",
    "1548854618000",
    "2019-01-30 21:24:44,gmt-7",
    "2024-01-12T08:30:00+08:00",
    "2024/01/12 8:30 PM",
)


def _resolve_default_zone(value: str | ZoneSpec | None, *, strict: bool) -> ZoneSpec:
    if isinstance(value, (FixedZone, NamedZone)):
        return value
    if value is not None and not isinstance(value, str):
        raise ConfigError("default_input_zone must be a string or zone.")
    raw = value if value else LOCAL_LABEL
    zone = resolve_zone(raw)
    if zone is not None:
        return zone
    if strict:
        raise ConfigError(f"Unknown default input zone: {raw}.")
    _LOGGER.debug("Default input zone %s not recognized, using UTC", raw)
    return utc_zone()


class Converter:
    """Parse inputs against a default zone and render them for output zones."""

    def __init__(
        self,
        default_input_zone: str | ZoneSpec | None = LOCAL_LABEL,
        output_zones: str | None = None,
        *,
        include_local: bool = True,
        strict: bool = False,
    ) -> None:
        if output_zones is not None and not isinstance(output_zones, str):
            raise ConfigError("output_zones must be a comma-separated string.")
        self._default_zone = _resolve_default_zone(default_input_zone, strict=strict)
        self._output_zones = tuple(parse_output_zones(output_zones, include_local))

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        include_local: bool = True,
        strict: bool = False,
    ) -> Converter:
        env = os.environ if environ is None else environ
        return cls(
            env.get(INPUT_ZONE_ENV) or LOCAL_LABEL,
            env.get(OUTPUT_ZONES_ENV),
            include_local=include_local,
            strict=strict,
        )

    @property
    def default_zone(self) -> ZoneSpec:
        return self._default_zone

    @property
    def output_zones(self) -> tuple[ZoneSpec, ...]:
        return self._output_zones

    def parse(self, raw_input: str) -> ParseOutcome:
        return parse_date_input(raw_input, self._default_zone)

    def render(self, outcome: ParseOutcome) -> list[RenderedZone]:
        """Format a successful outcome for every output zone; failures render nothing."""
        if not isinstance(outcome, ParseSuccess):
            return []
        return [
            RenderedZone(label=zone.display_name, value=format_for_zone(outcome.instant, zone))
            for zone in self._output_zones
        ]

    def convert(self, raw_input: str) -> tuple[ParseOutcome, list[RenderedZone]]:
        outcome = self.parse(raw_input)
        return outcome, self.render(outcome)

    @staticmethod
    def timestamps(outcome: ParseSuccess) -> tuple[str, str]:
        """Return ``(milliseconds, seconds)`` strings for an instant."""
        if not isinstance(outcome, ParseSuccess):
            raise ValidationError("Timestamps require a successful parse.")
        return str(outcome.instant), str(truncate_div(outcome.instant, 1000))
