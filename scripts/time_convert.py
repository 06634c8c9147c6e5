"""Manual converter for time expressions.

Run from the repository root with:
  PYTHONPATH=src python scripts/time_convert.py "2019-01-30 21:24:44,gmt-7"

  PYTHONPATH=src python scripts/time_convert.py 1548854618 \
    --output-zones "Asia/Shanghai,America/Los_Angeles,UTC"

Optional environment variables:
  PYTIMECONVERT_INPUT_ZONE
  PYTIMECONVERT_OUTPUT_ZONES

Command-line options take precedence over the environment. With no input the
usage examples are printed.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from pytimeconvert import USAGE_EXAMPLES, Converter, ParseSuccess
from pytimeconvert.client import INPUT_ZONE_ENV, OUTPUT_ZONES_ENV
from pytimeconvert.exceptions import ConfigError

_LOGGER = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert a time expression across zones.")
    parser.add_argument("input", nargs="*", help="Time expression, optionally ending in ,zone.")
    parser.add_argument(
        "--input-zone",
        dest="input_zone",
        help="Zone for inputs without a ,zone suffix (default: Local).",
    )
    parser.add_argument(
        "--output-zones",
        dest="output_zones",
        help="Comma-separated zones to render the instant in.",
    )
    parser.add_argument(
        "--no-local",
        dest="include_local",
        action="store_false",
        help="Do not render the local zone first.",
    )
    parser.add_argument(
        "--debug",
        dest="debug",
        action="store_true",
        help="Log parser attempts.",
    )
    return parser.parse_args()


def main() -> int:
    """CLI entrypoint for converting a time expression."""
    args = _parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    input_zone = args.input_zone or os.getenv(INPUT_ZONE_ENV)
    output_zones = args.output_zones or os.getenv(OUTPUT_ZONES_ENV)
    try:
        converter = Converter(
            input_zone,
            output_zones,
            include_local=args.include_local,
            strict=True,
        )
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    raw_input = " ".join(args.input)
    if not raw_input.strip():
        print("Examples:")
        for example in USAGE_EXAMPLES:
            print(f"  {example}")
        return 0

    outcome, rendered = converter.convert(raw_input)
    if not isinstance(outcome, ParseSuccess):
        print(f"{outcome.error} (source: {outcome.source_zone_label})", file=sys.stderr)
        return 1

    milliseconds, seconds = converter.timestamps(outcome)
    _LOGGER.debug("Matched pattern %s", outcome.matched_pattern)
    print(f"TimeStamp: {milliseconds} ms ({seconds} s), source: {outcome.source_zone_label}")
    for entry in rendered:
        print(f"{entry.label}: {entry.value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
