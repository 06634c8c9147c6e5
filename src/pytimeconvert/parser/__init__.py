"""Parse free-form time expressions into instants."""

from __future__ import annotations

import logging

from ..exceptions import ValidationError
from ..models import FixedZone, NamedZone, ParseFailure, ParseOutcome, ParseSuccess, ZoneSpec
from ..util import is_representable
from .pipeline import classify, pipeline_for, split_zone_suffix

_LOGGER = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter a time value, for example: now or 2019-01-30 21:24:44,gmt-7"
EMPTY_INPUT = "empty_input"
UNRECOGNIZED_FORMAT = "unrecognized_format"


def parse_date_input(raw_input: str, default_source_zone: ZoneSpec) -> ParseOutcome:
    """Parse ``raw_input``, reading zone-less text in ``default_source_zone``.

    A trailing ``,zone`` clause overrides the default zone. The first parser
    in the pipeline for the input's shape that accepts the text wins.
    """
    if not isinstance(raw_input, str):
        raise ValidationError("Input must be a string.")
    if not isinstance(default_source_zone, (FixedZone, NamedZone)):
        raise ValidationError("default_source_zone must be a FixedZone or NamedZone.")
    text, source_zone = split_zone_suffix(raw_input, default_source_zone)
    zone_label = source_zone.display_name

    if not text:
        return ParseFailure(
            input_text=text,
            source_zone=source_zone,
            source_zone_label=zone_label,
            error=EMPTY_INPUT_MESSAGE,
            error_code=EMPTY_INPUT,
        )

    state = classify(text)
    _LOGGER.debug("Input %r classified as %s in zone %s", text, state.value, zone_label)
    for entry in pipeline_for(state):
        instant = entry.parser(text, source_zone)
        if instant is None or not is_representable(instant):
            continue
        _LOGGER.debug("Input %r matched pattern %s", text, entry.label)
        return ParseSuccess(
            input_text=text,
            source_zone=source_zone,
            source_zone_label=zone_label,
            instant=instant,
            matched_pattern=entry.label,
        )

    _LOGGER.debug("No pattern matched %r", text)
    return ParseFailure(
        input_text=text,
        source_zone=source_zone,
        source_zone_label=zone_label,
        error=f"Could not find date format for {text}",
        error_code=UNRECOGNIZED_FORMAT,
    )


__all__ = ["EMPTY_INPUT_MESSAGE", "parse_date_input"]
