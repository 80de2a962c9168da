"""Locale-aware decimal rendering.

Thin layer over Babel: resolves user-supplied locale identifiers (``en-US``,
``de_DE``, ``fr``) to ``babel.Locale`` objects and renders decimals with the
locale's grouping and decimal symbols.

Examples:
  >>> format_locale_decimal(1234.5678, "en-US")
  '1,234.568'

  >>> format_locale_decimal(1234.5678, "de-DE")
  '1.234,568'
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from functools import lru_cache
from typing import Any, Optional, Union

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal]


def _parse_identifier(identifier: Any) -> Locale:
    # Babel expects "_" between subtags; browsers and HTTP headers use "-"
    return Locale.parse(str(identifier).strip().replace("-", "_"))


@lru_cache(maxsize=64)
def resolve_locale(identifier: Optional[str], default: str = "en") -> Locale:
    """Resolve a locale identifier, falling back to ``default``.

    Args:
        identifier: Locale identifier such as "en-US" or "pt_BR" (None allowed)
        default: Identifier used when ``identifier`` is missing or unknown

    Returns:
        babel.Locale instance

    Raises:
        UnknownLocaleError / ValueError: only if ``default`` itself is invalid

    Examples:
        >>> str(resolve_locale("en-US"))
        'en_US'

        >>> str(resolve_locale("xx-NOPE", default="de"))
        'de'
    """
    if identifier:
        try:
            return _parse_identifier(identifier)
        except (UnknownLocaleError, ValueError, TypeError) as e:
            logger.warning(f"Unknown locale {identifier!r} ({e}), using {default!r}")

    return _parse_identifier(default)


def round_half_up(value: Number, digits: int) -> Decimal:
    """Round the exact binary value of ``value`` to ``digits`` places, ties away from zero.

    This matches fixed-point conversion as done by browsers (e.g. 1.0625 -> 1.063),
    unlike round(), which rounds ties to even.

    Examples:
        >>> round_half_up(1.0625, 3)
        Decimal('1.063')

        >>> round_half_up(0.3 * 7, 3)
        Decimal('2.100')
    """
    quantum = Decimal(1).scaleb(-digits)
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)


def format_locale_decimal(
    value: Number,
    locale: Union[str, Locale, None] = None,
    max_fraction_digits: int = 3,
) -> str:
    """Render a decimal with locale grouping and at most ``max_fraction_digits`` digits.

    Trailing zeros in the fraction are dropped, the way browsers render
    ``Intl.NumberFormat`` output.

    Args:
        value: Number to render
        locale: Locale identifier or babel.Locale (None = "en")
        max_fraction_digits: Maximum number of fraction digits shown

    Returns:
        Formatted string

    Examples:
        >>> format_locale_decimal(5, "en")
        '5'

        >>> format_locale_decimal(1.66666, "fr-FR")
        '1,667'
    """
    if not isinstance(locale, Locale):
        locale = resolve_locale(locale)

    if isinstance(value, float) and math.isinf(value):
        return "-∞" if value < 0 else "∞"

    rounded = round_half_up(value, max_fraction_digits)
    return format_decimal(rounded, locale=locale)


__all__ = [
    "resolve_locale",
    "round_half_up",
    "format_locale_decimal",
]
