#!/usr/bin/env python3
"""CLI for converting a CSV column of user-typed widths to canonical values.

Reads a CSV file, parses the width column with the chosen unit system, and
writes the data back with extra columns:
- <column>_canonical: width in feet (empty where input was empty)
- <column>_display: formatted width (only with --format)

Usage:
    # Parse metric widths, write to stdout
    python scripts/widths/convert_widths.py segments.csv --column width --units metric

    # Write to a file and add a display column in German formatting
    python scripts/widths/convert_widths.py segments.csv -c width -u metric \\
        --format --locale de-DE --output segments_out.csv

Environment Variables:
    STREETWIDTH_LOCALE: Default locale for --format (default: from widthconfig.yaml)
    STREETWIDTH_CONFIG: Alternative widthconfig.yaml
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path

import pandas as pd

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from streetwidth.widths.widthapi import parse_widths, prettify_widths
from streetwidth.widths.widthtables import UnitSystem

logger = logging.getLogger("convert_widths")


def convert_frame(
    data: pd.DataFrame,
    column: str,
    unit_system: UnitSystem,
    add_display: bool = False,
    locale: str = None,
) -> pd.DataFrame:
    """Return a copy of ``data`` with canonical (and optionally display) columns added."""
    if column not in data.columns:
        raise KeyError(f"Column {column!r} not found. Available: {', '.join(map(str, data.columns))}")

    result = data.copy()
    canonical = parse_widths(result[column], unit_system)
    result[f"{column}_canonical"] = canonical

    if add_display:
        result[f"{column}_display"] = prettify_widths(canonical, unit_system, locale=locale)

    parsed = int(canonical.notna().sum())
    logger.info(f"Parsed {parsed:,} of {len(result):,} rows in column {column!r}")
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Convert a CSV column of widths to canonical feet',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument('input', type=Path, help='Input CSV file')
    parser.add_argument(
        '--column', '-c',
        default='width',
        help='Column holding width text (default: width)'
    )
    parser.add_argument(
        '--units', '-u',
        default='metric',
        help='Unit system for unitless input: metric or imperial (default: metric)'
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=None,
        help='Output CSV path (default: stdout)'
    )

    # Display options
    parser.add_argument(
        '--format',
        action='store_true',
        help='Add a <column>_display column with formatted widths'
    )
    parser.add_argument(
        '--locale',
        default=None,
        help='Locale for --format, e.g. en-US, de-DE'
    )

    # Development options
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        unit_system = UnitSystem.coerce(args.units)
        if unit_system is None:
            raise ValueError(f"Unknown unit system: {args.units}. Must be metric or imperial.")

        if not args.input.exists():
            raise FileNotFoundError(f"Input file not found: {args.input}")

        # Keep every column as text so values pass through unchanged
        data = pd.read_csv(args.input, dtype=str)

        result = convert_frame(
            data,
            column=args.column,
            unit_system=unit_system,
            add_display=args.format,
            locale=args.locale,
        )

        if args.output is None:
            result.to_csv(sys.stdout, index=False)
        else:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            result.to_csv(args.output, index=False)
            logger.info(f"Wrote {args.output}")

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 1
    except (FileNotFoundError, KeyError, ValueError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
