"""pytimeconvert package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .client import USAGE_EXAMPLES, Converter
from .convert import format_for_zone, to_instant
from .exceptions import CalendarError, ConfigError, PyTimeConvertError, ValidationError, ZoneError
from .models import (
    DateComponents,
    FixedZone,
    NamedZone,
    ParseFailure,
    ParseState,
    ParseSuccess,
    RenderedZone,
)
from .parser import parse_date_input
from .zone import parse_output_zones, resolve_zone

try:
    __version__ = version("pytimeconvert")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "USAGE_EXAMPLES",
    "CalendarError",
    "ConfigError",
    "Converter",
    "DateComponents",
    "FixedZone",
    "NamedZone",
    "ParseFailure",
    "ParseState",
    "ParseSuccess",
    "PyTimeConvertError",
    "RenderedZone",
    "ValidationError",
    "ZoneError",
    "__version__",
    "format_for_zone",
    "parse_date_input",
    "parse_output_zones",
    "resolve_zone",
    "to_instant",
]
