"""Street Width - width parsing and formatting for street segment editors

Public API for converting user-typed widths to canonical values and back.

Usage:
    from streetwidth import parse_width, prettify_width, UnitSystem

    # Parse user input into feet (the canonical unit)
    width = parse_width("5'7\"", UnitSystem.IMPERIAL)   # Returns: 5.5833...
    width = parse_width("1,5 m", UnitSystem.METRIC)     # Returns: 5.0

    # Format for display in the user's unit system and locale
    prettify_width(5.5, UnitSystem.IMPERIAL)                  # Returns: "5½'"
    prettify_width(5.5, UnitSystem.METRIC, locale="de-DE")    # Returns: '1,65 m'

    # Bare number for an input box
    stringify_width(5.5, UnitSystem.METRIC)                   # Returns: '1.65'
"""

__version__ = "0.1.0"

# ============================================================================
# Width Parsing & Formatting API
# ============================================================================

from .widths.widthapi import (
    parse_width,         # Primary API - user text -> canonical width (feet)
    prettify_width,      # Canonical width -> display string with unit
    stringify_width,     # Canonical width -> bare locale number
    parse_widths,        # Column-wise parse_width
    prettify_widths,     # Column-wise prettify_width
)

from .widths.widthtables import (
    UnitSystem,          # IMPERIAL / METRIC
    load_width_config,   # Frozen unit and fraction tables
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "parse_width",       # Parse user text -> feet
    "prettify_width",    # Feet -> display string

    # ========================================================================
    # Width Formatting & Batch Helpers
    # ========================================================================
    "stringify_width",   # Feet -> bare number
    "parse_widths",      # Column-wise parse
    "prettify_widths",   # Column-wise format

    # ========================================================================
    # Tables
    # ========================================================================
    "UnitSystem",
    "load_width_config",
]
