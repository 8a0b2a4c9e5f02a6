"""Shared pytest fixtures for country-parser tests."""

import pytest

from country_parser.country import Country
from country_parser.parser import CountryParser


@pytest.fixture
def sample_countries() -> list[Country]:
    """A small country table."""
    return [
        Country(code="AT", name="Austria", alpha_3="AUT", phone_code="43"),
        Country(code="DE", name="Germany", alpha_3="DEU", phone_code="49"),
        Country(code="FR", name="France", alpha_3="FRA", phone_code="33"),
    ]


@pytest.fixture
def sample_translations() -> dict[str, dict[str, str]]:
    """Translation tables with deliberate overlaps to exercise fallback order.

    "Germany" is AT in Spanish, and "Shared" is FR in Arabic but DE in Spanish.
    """
    return {
        "en": {"AT": "Austria", "DE": "Germany", "FR": "France"},
        "ar": {"FR": "Shared"},
        "es": {"AT": "Germany", "DE": "Shared", "FR": "Francia"},
        "ru": {"DE": "Германия", "FR": "Франция"},
        "ne": {"DE": "जर्मनी"},
        "zh-Hans": {"DE": "德国"},
        "zh-Hant": {"DE": "德國"},
    }


@pytest.fixture
def sample_parser(sample_countries, sample_translations) -> CountryParser:
    """Parser over the sample tables."""
    return CountryParser(countries=sample_countries, translations=sample_translations)
