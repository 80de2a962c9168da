"""Width input parsing.

Turns user-typed width text into a canonical width in feet. Parsing is lenient:
the input usually comes from a text field updated on every keystroke, so
malformed numbers degrade to 0 rather than raising.
"""

from __future__ import annotations

import logging
import math
import re
from functools import lru_cache
from typing import Any, Optional

from streetwidth.widths.widthnormalize import (
    is_compound_feet_inches,
    normalize_width_text,
    split_feet_inches,
)
from streetwidth.widths.widthtables import UnitSystem, load_width_config

logger = logging.getLogger(__name__)

# Leading decimal number: sign, digits with optional fraction, optional exponent
_LEADING_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@lru_cache(maxsize=None)
def _suffix_pattern(suffix: str) -> re.Pattern:
    # A digit or decimal point immediately followed by the suffix, at end of text
    return re.compile(r"[\d.]" + re.escape(suffix) + r"$", re.ASCII)


def parse_leading_float(text: str) -> Optional[float]:
    """Read the leading decimal number of ``text``.

    Examples:
        >>> parse_leading_float("5.5ft")
        5.5

        >>> parse_leading_float(".75\\"")
        0.75

        >>> parse_leading_float("m5") is None
        True
    """
    match = _LEADING_FLOAT.match(text)
    if not match:
        return None

    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def find_unit_multiplier(text: str, default: float) -> float:
    """Return the multiplier of the first unit suffix that ends ``text``.

    Args:
        text: Normalized width token (e.g., "30cm", "7\\"")
        default: Multiplier used when no suffix matches

    Returns:
        Multiplier into feet
    """
    for token in load_width_config().input_units:
        if _suffix_pattern(token.text).search(text):
            return token.multiplier
    return default


def parse_width_token(text: str, unit_system: Optional[UnitSystem] = None) -> float:
    """Parse a single width token (no compound feet/inches) into feet.

    Unitless numbers are read as feet, or as metres when ``unit_system`` is
    METRIC. An explicit unit suffix always wins.

    Args:
        text: Normalized token (e.g., "5'", "1.5m", "7\\"", "12")
        unit_system: Unit system used for unitless numbers

    Returns:
        Width in feet; 0.0 when the token has no usable number

    Examples:
        >>> parse_width_token("7\\"")
        0.5833333333333333

        >>> parse_width_token("3", UnitSystem.METRIC)
        10.0
    """
    # Dashes would otherwise be read as a negative sign
    text = text.replace("-", "")

    value = parse_leading_float(text)
    if not value:
        # Also covers a legitimate zero, e.g. the feet part of 0'7"
        logger.debug(f"No width value in token {text!r}, using 0")
        return 0.0

    config = load_width_config()
    if unit_system == UnitSystem.METRIC:
        default = 1 / config.imperial_metric_multiplier
    else:
        default = 1

    return value * find_unit_multiplier(text, default)


def parse_width_value(text: Optional[str], unit_system: Any) -> Optional[float]:
    """Parse width text into a canonical width in feet.

    Args:
        text: Raw user input (e.g., "5'7\\"", "1,5 m", "10½'")
        unit_system: UnitSystem member, its int value or name

    Returns:
        Width in feet, or None when there is nothing to parse
    """
    if not text or not unit_system:
        return None

    system = UnitSystem.coerce(unit_system)
    if system is None:
        logger.debug(f"Unknown unit system {unit_system!r}, reading unitless input as feet")

    text = normalize_width_text(text)

    if is_compound_feet_inches(text):
        feet, *inches = split_feet_inches(text)
        # Feet segment always carries its marker, so it ignores the unit system
        width = parse_width_token(feet)
        for segment in inches:
            width += parse_width_token(segment, system)
        return width

    return parse_width_token(text, system)


__all__ = [
    "parse_leading_float",
    "find_unit_multiplier",
    "parse_width_token",
    "parse_width_value",
]
