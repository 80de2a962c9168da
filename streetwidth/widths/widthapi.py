"""Public API for width parsing and formatting.

This module provides the main entry points for turning user-typed widths into
canonical values and canonical values back into display strings.

Key Design Principles:
1. Widths are stored in feet regardless of the user's unit system
2. Parsing is lenient: malformed numbers become 0, empty input becomes None
3. Locale is always an explicit argument, never read from ambient state
"""

from typing import Any, Iterable, Optional

import pandas as pd

from streetwidth.widths.widthformat import prettify_width_value, stringify_width_value
from streetwidth.widths.widthparse import parse_width_value


def parse_width(text: Optional[str], unit_system: Any) -> Optional[float]:
    """Parse user-typed width text into a canonical width (feet).

    Accepts mixed units, fractions and locale punctuation:
      - Feet: "5'", "5ft", "5 feet"
      - Inches: "7\\"", "7in", "7 inches"
      - Feet and inches: "5'7\\"", "5' 7"
      - Metric: "1.5m", "150cm", "1,5 m"
      - Vulgar fractions: "5½'", "5'½\\""
      - Unitless: feet under IMPERIAL, metres under METRIC

    Args:
        text: Raw input text
        unit_system: UnitSystem.IMPERIAL / UnitSystem.METRIC (or 1 / 2, or
                     "imperial" / "metric")

    Returns:
        Width in feet, or None if text or unit_system is missing.
        Unparseable numbers contribute 0 rather than raising.

    Note:
        Every comma is read as a decimal separator, so grouped numbers do not
        round-trip: "1,234½'" (as displayed for 1234.5 ft) parses to about
        1.234. Only ASCII digits are read.

    Examples:
        >>> parse_width("5'7\\"", UnitSystem.IMPERIAL)
        5.583333333333333

        >>> parse_width("1m", UnitSystem.METRIC)
        3.3333333333333335

        >>> parse_width("", UnitSystem.IMPERIAL) is None
        True
    """
    return parse_width_value(text, unit_system)


def prettify_width(
    value: Optional[float],
    unit_system: Any = None,
    *,
    markup: bool = False,
    locale: Optional[str] = None,
) -> str:
    """Format a canonical width for display in the user's unit system.

    Args:
        value: Width in feet
        unit_system: IMPERIAL or METRIC (default METRIC)
        markup: If True, a "<wbr>" word break opportunity is inserted before
                the unit suffix
        locale: Locale identifier, e.g. "en-US" (default from config)

    Returns:
        Display string

    Examples:
        >>> prettify_width(5.5, UnitSystem.IMPERIAL)
        "5½'"

        >>> prettify_width(5.5, UnitSystem.METRIC)
        '1.65 m'

        >>> prettify_width(5.5, UnitSystem.METRIC, locale="de-DE")
        '1,65 m'

        >>> prettify_width(10, UnitSystem.IMPERIAL, markup=True)
        "10<wbr>'"
    """
    return prettify_width_value(value, unit_system, markup=markup, locale=locale)


def stringify_width(
    value: Optional[float],
    unit_system: Any = None,
    *,
    locale: Optional[str] = None,
) -> str:
    """Render a width as a bare locale-aware number (no unit), e.g. for an input box.

    Args:
        value: Width in feet
        unit_system: IMPERIAL renders feet, METRIC (default) renders metres
        locale: Locale identifier (default from config)

    Returns:
        Formatted number, "0" for a missing width

    Examples:
        >>> stringify_width(10, UnitSystem.METRIC)
        '3'

        >>> stringify_width(1234.56789, UnitSystem.IMPERIAL)
        '1,234.568'
    """
    return stringify_width_value(value, unit_system, locale=locale)


def parse_widths(values: Iterable[Optional[str]], unit_system: Any) -> pd.Series:
    """Parse a column of width strings.

    Args:
        values: Series or iterable of raw width strings
        unit_system: Unit system applied to every element

    Returns:
        Float Series of widths in feet; empty/missing input becomes NaN.
        The index of an input Series is preserved.

    Examples:
        >>> parse_widths(["5'", "1m", None], UnitSystem.METRIC).tolist()
        [5.0, 3.3333333333333335, nan]
    """
    series = values if isinstance(values, pd.Series) else pd.Series(list(values), dtype=object)

    def _parse(v):
        if v is None or (not isinstance(v, str) and pd.isna(v)):
            return None
        return parse_width_value(str(v), unit_system)

    return series.map(_parse).astype(float)


def prettify_widths(
    values: Iterable[Optional[float]],
    unit_system: Any = None,
    *,
    markup: bool = False,
    locale: Optional[str] = None,
) -> pd.Series:
    """Format a column of canonical widths for display.

    Args:
        values: Series or iterable of widths in feet
        unit_system: IMPERIAL or METRIC (default METRIC)
        markup: Insert word break markers
        locale: Locale identifier

    Returns:
        Series of display strings; missing widths render as zero

    Examples:
        >>> prettify_widths([5.5, None], UnitSystem.IMPERIAL).tolist()
        ["5½'", "0'"]
    """
    series = values if isinstance(values, pd.Series) else pd.Series(list(values), dtype=object)

    def _prettify(v):
        v = None if pd.isna(v) else float(v)
        return prettify_width_value(v, unit_system, markup=markup, locale=locale)

    return series.map(_prettify).astype(object)


__all__ = [
    "parse_width",
    "prettify_width",
    "stringify_width",
    "parse_widths",
    "prettify_widths",
]
