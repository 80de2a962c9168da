"""Width display formatting.

Converts canonical widths (feet) into locale-aware display strings in the
user's unit system: ``5½'`` for imperial, ``1.65 m`` for metric.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Optional

from streetwidth.utils.localeformat import format_locale_decimal, resolve_locale, round_half_up
from streetwidth.widths.widthtables import FEET_MARKER, UnitSystem, load_width_config

METRIC_SUFFIX = " m"


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def convert_imperial_to_metric(value: float) -> Decimal:
    """Convert a canonical width to metres, rounded half-up to the metric precision.

    Examples:
        >>> convert_imperial_to_metric(10)
        Decimal('3.000')

        >>> convert_imperial_to_metric(5.5)
        Decimal('1.650')
    """
    config = load_width_config()
    return round_half_up(value * config.imperial_metric_multiplier, config.metric_precision)


def stringify_width_value(
    value: Optional[float],
    unit_system: Any = None,
    locale: Optional[str] = None,
) -> str:
    """Render a width as a locale-aware number without units.

    Args:
        value: Canonical width in feet
        unit_system: IMPERIAL renders feet; anything else renders metres
        locale: Locale identifier (None = configured default)

    Returns:
        Formatted number; "0" for a missing or zero width
    """
    if _is_missing(value):
        return "0"

    config = load_width_config()
    locale = resolve_locale(locale, default=config.default_locale)

    if UnitSystem.coerce(unit_system) == UnitSystem.IMPERIAL:
        return format_locale_decimal(value, locale, config.imperial_precision)

    if isinstance(value, float) and math.isinf(value):
        return format_locale_decimal(value, locale, config.metric_precision)

    return format_locale_decimal(convert_imperial_to_metric(value), locale, config.metric_precision)


def format_vulgar_fraction(value: Optional[float], locale: Optional[str] = None) -> str:
    """Render an imperial width using a vulgar fraction where one fits.

    Examples:
        >>> format_vulgar_fraction(5.5)
        '5½'

        >>> format_vulgar_fraction(0.25)
        '¼'

        >>> format_vulgar_fraction(5.1)
        '5.1'
    """
    if _is_missing(value) or not math.isfinite(value):
        return stringify_width_value(value, UnitSystem.IMPERIAL, locale)

    whole = math.floor(value)
    remainder = value - whole
    fraction = load_width_config().vulgar_fractions.get(str(remainder)[1:])

    if fraction:
        if whole:
            return stringify_width_value(whole, UnitSystem.IMPERIAL, locale) + fraction
        return fraction

    return stringify_width_value(value, UnitSystem.IMPERIAL, locale)


def prettify_width_value(
    value: Optional[float],
    unit_system: Any = None,
    markup: bool = False,
    locale: Optional[str] = None,
) -> str:
    """Format a canonical width for display, with its unit.

    Args:
        value: Canonical width in feet
        unit_system: IMPERIAL or METRIC; None or unknown means METRIC
        markup: Insert a word break marker before the unit
        locale: Locale identifier (None = configured default)

    Returns:
        Display string, e.g. "5½'" or "1.65 m"
    """
    config = load_width_config()

    if UnitSystem.coerce(unit_system) == UnitSystem.IMPERIAL:
        text = format_vulgar_fraction(value, locale)
        if markup:
            text += config.markup_break
        return text + FEET_MARKER

    text = stringify_width_value(value, UnitSystem.METRIC, locale)
    if markup:
        text += config.markup_break + " "
    return text + METRIC_SUFFIX


__all__ = [
    "METRIC_SUFFIX",
    "convert_imperial_to_metric",
    "stringify_width_value",
    "format_vulgar_fraction",
    "prettify_width_value",
]
