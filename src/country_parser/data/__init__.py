"""Static country and translation tables, built once at import time."""

from country_parser.data.country_codes import COUNTRY_CODES
from country_parser.data.translations import TRANSLATIONS, get_translation, table_key_for

__all__ = ["COUNTRY_CODES", "TRANSLATIONS", "get_translation", "table_key_for"]
