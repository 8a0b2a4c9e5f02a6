"""Country Parser package for resolving country codes and localized names."""

from country_parser.country import Country
from country_parser.exceptions import NotFoundError
from country_parser.language import LanguageTag
from country_parser.parser import (
    CountryParser,
    all_countries,
    localized_name,
    parse,
    parse_country_code,
    parse_country_name,
    supported_languages,
    try_parse,
    try_parse_country_code,
    try_parse_country_name,
)

__all__ = [
    "Country",
    "CountryParser",
    "LanguageTag",
    "NotFoundError",
    "all_countries",
    "localized_name",
    "parse",
    "parse_country_code",
    "parse_country_name",
    "supported_languages",
    "try_parse",
    "try_parse_country_code",
    "try_parse_country_name",
]
