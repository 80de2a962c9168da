"""Width Text Normalization
-------------------------

Utility functions for normalizing user-typed width text before parsing.

Examples:
  >>> normalize_width_text(" 5' 7 ")
  "5'7"

  >>> normalize_width_text("1,5 m")
  '1.5m'

  >>> normalize_width_text("10½'")
  "10.5'"
"""

import re
from typing import List, Mapping, Optional

from streetwidth.widths.widthtables import FEET_MARKER, INCHES_MARKER, load_width_config


def replace_vulgar_fractions(text: str, glyph_to_decimal: Optional[Mapping[str, str]] = None) -> str:
    """
    Replace vulgar fraction glyphs with decimal fraction strings.

    Each glyph in the table is replaced at its first occurrence only.

    Args:
        text: Width text
        glyph_to_decimal: Glyph -> decimal mapping (default: configured table)

    Returns:
        Text with glyphs replaced

    Examples:
        >>> replace_vulgar_fractions("5½")
        '5.5'

        >>> replace_vulgar_fractions("¾\\"")
        '.75"'
    """
    if glyph_to_decimal is None:
        glyph_to_decimal = load_width_config().glyph_to_decimal

    for glyph, decimal in glyph_to_decimal.items():
        if glyph in text:
            text = text.replace(glyph, decimal, 1)

    return text


def normalize_width_text(text: str) -> str:
    """
    Normalize width text for consistent parsing.

    Transformations:
      - Remove all whitespace (mostly leading/trailing in practice)
      - Comma decimals become period decimals ("1,5" -> "1.5")
      - Vulgar fraction glyphs become decimals ("½" -> ".5")

    Args:
        text: Raw width text (e.g., "5' 7\\"", "1,5 m")

    Returns:
        Normalized text for parsing
    """
    if not text:
        return ""

    text = re.sub(r"\s+", "", text)
    text = text.replace(",", ".")

    return replace_vulgar_fractions(text)


def is_compound_feet_inches(text: str) -> bool:
    """
    Detect feet-and-inches input like 5'7".

    True when the feet marker appears anywhere except as the last character.

    Examples:
        >>> is_compound_feet_inches("5'7\\"")
        True

        >>> is_compound_feet_inches("5'")
        False

        >>> is_compound_feet_inches("1.5m")
        False
    """
    index = text.find(FEET_MARKER)
    return index != -1 and len(text) > index + 1


def split_feet_inches(text: str) -> List[str]:
    """
    Split compound input into a feet segment followed by inches segments.

    The feet marker is re-appended to the first segment, and an inches
    marker is appended to every later segment that lacks one.

    Examples:
        >>> split_feet_inches("5'7")
        ["5'", '7"']

        >>> split_feet_inches("5'7\\"")
        ["5'", '7"']

        >>> split_feet_inches("0'.5\\"")
        ["0'", '.5"']
    """
    feet, *rest = text.split(FEET_MARKER)
    segments = [feet + FEET_MARKER]

    for segment in rest:
        if INCHES_MARKER not in segment:
            segment += INCHES_MARKER
        segments.append(segment)

    return segments


__all__ = [
    "replace_vulgar_fractions",
    "normalize_width_text",
    "is_compound_feet_inches",
    "split_feet_inches",
]
