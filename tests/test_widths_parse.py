"""Tests for width input parsing.

Run with: pytest tests/test_widths_parse.py -v
"""

import pytest

from streetwidth.widths.widthapi import parse_width
from streetwidth.widths.widthparse import (
    find_unit_multiplier,
    parse_leading_float,
    parse_width_token,
    parse_width_value,
)
from streetwidth.widths.widthtables import UnitSystem


# ============================================================================
# Missing Input
# ============================================================================

class TestParseMissingInput:
    """Empty input means there is nothing to parse"""

    def test_empty_string(self, imperial):
        assert parse_width("", imperial) is None

    def test_none_text(self, metric):
        assert parse_width(None, metric) is None

    def test_missing_unit_system(self):
        assert parse_width("5'", None) is None

    def test_whitespace_only_is_zero(self, imperial):
        """Whitespace is text, it just has no number in it"""
        assert parse_width("   ", imperial) == 0


# ============================================================================
# Imperial Input
# ============================================================================

class TestParseImperial:
    """Feet, inches and unitless input under the imperial unit system"""

    def test_feet_marker(self, imperial):
        assert parse_width("5'", imperial) == 5

    def test_feet_and_inches(self, imperial):
        assert parse_width("5'7\"", imperial) == pytest.approx(5 + 7 / 12)

    def test_feet_and_inches_without_inch_marker(self, imperial):
        assert parse_width("5' 7", imperial) == pytest.approx(5 + 7 / 12)

    def test_leading_zero_feet(self, imperial):
        """0'7" resolves the zero feet token to 0 and keeps the inches"""
        assert parse_width("0'7\"", imperial) == pytest.approx(7 / 12)

    def test_unitless_is_feet(self, imperial):
        assert parse_width("12", imperial) == 12

    def test_sample_inputs(self, imperial, sample_imperial_inputs):
        for text, expected in sample_imperial_inputs.items():
            assert parse_width(text, imperial) == pytest.approx(expected), text

    def test_vulgar_fraction_in_inches(self, imperial):
        """Fractions are replaced before splitting feet from inches"""
        assert parse_width("5'½\"", imperial) == pytest.approx(5 + 0.5 / 12)

    def test_vulgar_fraction_alone(self, imperial):
        assert parse_width("¾'", imperial) == pytest.approx(0.75)

    def test_repeated_feet_marker(self, imperial):
        """Empty pieces after the feet marker contribute nothing"""
        assert parse_width("5''", imperial) == 5

    def test_metric_suffix_overrides_imperial(self, imperial):
        assert parse_width("1m", imperial) == pytest.approx(1 / 0.3)


# ============================================================================
# Metric Input
# ============================================================================

class TestParseMetric:
    """Metres, centimetres and unitless input under the metric unit system"""

    def test_metres(self, metric):
        assert parse_width("1m", metric) == pytest.approx(3.333, abs=0.001)

    def test_unitless_is_metres(self, metric):
        assert parse_width("3", metric) == pytest.approx(10)

    def test_centimetres(self, metric):
        assert parse_width("150cm", metric) == pytest.approx(5)

    def test_comma_decimal(self, metric):
        assert parse_width("1,5m", metric) == parse_width("1.5m", metric)

    def test_spaces_removed(self, metric):
        assert parse_width(" 1.5 m ", metric) == pytest.approx(5)

    def test_feet_marker_overrides_metric(self, metric):
        assert parse_width("5'", metric) == 5

    def test_compound_under_metric_reads_inches(self, metric):
        """Pieces after the feet marker are inches even under metric"""
        assert parse_width("5'6", metric) == pytest.approx(5.5)


# ============================================================================
# Lenient Parsing
# ============================================================================

class TestParseLeniency:
    """Malformed numbers degrade to zero instead of failing"""

    def test_no_number(self, imperial):
        assert parse_width("abc", imperial) == 0

    def test_dashes_are_dropped(self, metric):
        """A dash is never read as a negative sign"""
        assert parse_width("-3m", metric) == pytest.approx(10)
        assert parse_width("3-m", metric) == pytest.approx(10)

    def test_bad_inches_keep_feet(self, imperial):
        assert parse_width("5'abc", imperial) == 5

    def test_unit_system_by_name_and_value(self):
        assert parse_width("3", "metric") == pytest.approx(10)
        assert parse_width("3", 2) == pytest.approx(10)
        assert parse_width("3", "IMPERIAL") == 3

    def test_unknown_unit_system_reads_feet(self):
        assert parse_width("3", 7) == 3


# ============================================================================
# Helpers
# ============================================================================

class TestParseHelpers:
    """Test the token-level helpers"""

    def test_parse_leading_float(self):
        assert parse_leading_float("5.5ft") == 5.5
        assert parse_leading_float(".75\"") == 0.75
        assert parse_leading_float("5.m") == 5.0
        assert parse_leading_float("m5") is None
        assert parse_leading_float("") is None

    def test_parse_leading_float_rejects_overflow(self):
        assert parse_leading_float("1e999") is None

    def test_parse_leading_float_ascii_digits_only(self):
        assert parse_leading_float("٣") is None
        assert parse_leading_float("١٢ft") is None

    def test_non_ascii_digits_read_as_zero(self, metric, imperial):
        assert parse_width("٣m", metric) == 0
        assert parse_width("१२'", imperial) == 0
        assert find_unit_multiplier("٣m", default=1) == 1

    def test_find_unit_multiplier_first_match(self):
        assert find_unit_multiplier("30cm", default=1) == pytest.approx(1 / 100 / 0.3)
        assert find_unit_multiplier("7\"", default=1) == pytest.approx(1 / 12)

    def test_find_unit_multiplier_needs_number_before_suffix(self):
        """A suffix only counts right after a digit or decimal point"""
        assert find_unit_multiplier("5left", default=42) == 42

    def test_find_unit_multiplier_default(self):
        assert find_unit_multiplier("12", default=3) == 3

    def test_parse_width_token_metric_default(self):
        assert parse_width_token("3", UnitSystem.METRIC) == pytest.approx(10)
        assert parse_width_token("3") == 3

    def test_parse_width_token_zero(self):
        assert parse_width_token("0'") == 0.0

    def test_parse_width_value_matches_api(self, imperial):
        assert parse_width_value("5'7\"", imperial) == parse_width("5'7\"", imperial)
