"""Shared utilities for the streetwidth package."""

from streetwidth.utils.dataloader import (
    find_data_file,
    load_yaml_file,
    format_not_found_error,
)
from streetwidth.utils.localeformat import (
    resolve_locale,
    round_half_up,
    format_locale_decimal,
)

__all__ = [
    # Data loading
    "find_data_file",
    "load_yaml_file",
    "format_not_found_error",
    # Locale formatting
    "resolve_locale",
    "round_half_up",
    "format_locale_decimal",
]
