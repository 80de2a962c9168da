"""Widths module for parsing and formatting street segment widths.

Widths are stored internally in feet. This module converts free-form user
input (feet/inches with fractions, or metres with decimals) into that canonical
value, and renders canonical values for display in either unit system.

Public API:
    parse_width(text, unit_system) -> float | None
        Parse user-typed width text into feet

    prettify_width(value, unit_system=None, *, markup=False, locale=None) -> str
        Format a width with its unit for display

    stringify_width(value, unit_system=None, *, locale=None) -> str
        Format a width as a bare number (no unit)

    parse_widths(values, unit_system) -> pd.Series
    prettify_widths(values, unit_system=None, ...) -> pd.Series
        Column-wise versions of the above

Examples:
    >>> from streetwidth.widths import parse_width, prettify_width, UnitSystem
    >>>
    >>> parse_width("5' 7\\"", UnitSystem.IMPERIAL)
    5.583333333333333
    >>> parse_width("1,5 m", UnitSystem.METRIC)
    5.0
    >>> prettify_width(5.5, UnitSystem.IMPERIAL)
    "5½'"
    >>> prettify_width(5.5, UnitSystem.METRIC, locale="fr-FR")
    '1,65 m'
"""

from .widthtables import (
    UnitSystem,
    UnitToken,
    load_width_config,
)
from .widthapi import (
    parse_width,
    prettify_width,
    stringify_width,
    parse_widths,
    prettify_widths,
)

__all__ = [
    "UnitSystem",
    "UnitToken",
    "load_width_config",
    "parse_width",
    "prettify_width",
    "stringify_width",
    "parse_widths",
    "prettify_widths",
]
