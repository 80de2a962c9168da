"""Shared test fixtures and utilities for streetwidth tests."""

import pytest

from streetwidth.utils.localeformat import resolve_locale
from streetwidth.widths.widthtables import UnitSystem, load_width_config


@pytest.fixture
def fresh_config():
    """Fixture that clears cached width config before and after the test.

    Use together with monkeypatch when a test changes STREETWIDTH_CONFIG or
    STREETWIDTH_LOCALE, so the next load reads the patched environment.

    Example:
        def test_locale_env(monkeypatch, fresh_config):
            monkeypatch.setenv("STREETWIDTH_LOCALE", "de")
            assert fresh_config().default_locale == "de"
    """
    load_width_config.cache_clear()
    resolve_locale.cache_clear()
    yield load_width_config
    load_width_config.cache_clear()
    resolve_locale.cache_clear()


@pytest.fixture
def imperial():
    return UnitSystem.IMPERIAL


@pytest.fixture
def metric():
    return UnitSystem.METRIC


@pytest.fixture
def sample_imperial_inputs():
    """Fixture providing user-typed imperial widths and their values in feet."""
    return {
        "5'": 5.0,
        "5ft": 5.0,
        "5 feet": 5.0,
        "5ft.": 5.0,
        "6\"": 0.5,
        "6in": 0.5,
        "6in.": 0.5,
        "6 inch": 0.5,
        "6 inches": 0.5,
        "5'6\"": 5.5,
        "5' 6": 5.5,
        "10½'": 10.5,
        "12": 12.0,
    }
