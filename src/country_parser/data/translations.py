"""
Localized country names, one read-only table per supported language.

English names come from the country code table. Every other language is
read from the ``iso3166-1`` gettext catalogs bundled with pycountry; codes a
catalog does not translate are left out of that language's table rather
than falling back to the English name.
"""

import gettext
import logging
from collections.abc import Mapping
from types import MappingProxyType

import pycountry

from country_parser.config.languages import (
    CHINESE_DEFAULT_TABLE,
    CHINESE_SCRIPT_TABLES,
    DEFAULT_LANGUAGE,
    LANGUAGE_TABLES,
    TRANSLATION_CATALOGS,
)
from country_parser.data.country_codes import COUNTRY_CODES
from country_parser.language import LanguageTag, coerce_language

logger = logging.getLogger(__name__)

_GETTEXT_DOMAIN = "iso3166-1"

# Names for codes that have no entry in the ISO catalogs.
_MANUAL_TRANSLATIONS: dict[str, dict[str, str]] = {
    "XK": {
        "ar": "كوسوفو",
        "es": "Kosovo",
        "el": "Κόσοβο",
        "nb": "Kosovo",
        "nn": "Kosovo",
        "pl": "Kosowo",
        "pt": "Kosovo",
        "ru": "Косово",
        "ne": "कोसोभो",
        "uk": "Косово",
        "tr": "Kosova",
        "hr": "Kosovo",
        "zh-Hans": "科索沃",
        "zh-Hant": "科索沃",
    },
}


class _Untranslated(gettext.NullTranslations):
    """Catalog fallback that reports a missing entry as ``None``."""

    def gettext(self, message):
        return None


def _load_catalog(catalog: str) -> gettext.NullTranslations:
    translation = gettext.translation(
        _GETTEXT_DOMAIN,
        pycountry.LOCALES_DIR,
        languages=[catalog],
    )
    translation.add_fallback(_Untranslated())
    return translation


def _build_english_table() -> dict[str, str]:
    return {country.code: country.name for country in COUNTRY_CODES}


def _build_catalog_table(table_key: str, catalog: str) -> dict[str, str]:
    """Translate every ISO country name through one gettext catalog.

    The common name is tried first, then the ISO short name.

    Args:
        table_key: Key of the table being built (e.g. ``zh-Hant``)
        catalog: Catalog directory name under pycountry's locales

    Returns:
        Dict of code -> localized name for every code the catalog covers
    """
    translation = _load_catalog(catalog)
    table: dict[str, str] = {}

    for entry in pycountry.countries:
        msgids = [getattr(entry, "common_name", None), entry.name]
        for msgid in msgids:
            if not msgid:
                continue
            localized = translation.gettext(msgid)
            if localized:
                table[entry.alpha_2] = localized
                break

    for code, names in _MANUAL_TRANSLATIONS.items():
        if table_key in names:
            table[code] = names[table_key]

    return table


def _build_translations() -> dict[str, Mapping[str, str]]:
    """Build every translation table keyed by table key.

    Returns:
        Dict mapping each table key to a read-only code -> name mapping
    """
    tables: dict[str, Mapping[str, str]] = {}
    for table_key, catalog in TRANSLATION_CATALOGS.items():
        if catalog is None:
            table = _build_english_table()
        else:
            table = _build_catalog_table(table_key, catalog)
        tables[table_key] = MappingProxyType(table)
        logger.debug(f"Loaded {len(table)} names for {table_key}")
    return tables


# Pre-built tables used at import time
TRANSLATIONS: dict[str, Mapping[str, str]] = _build_translations()


def table_key_for(language: LanguageTag | str) -> str:
    """Return the key of the translation table used for ``language``.

    Chinese picks Traditional for the ``Hant`` script and Simplified
    otherwise. Hindi and Nepali share one table. Unrecognized languages use
    English.

    Args:
        language: Language tag or tag string

    Returns:
        Table key present in TRANSLATION_CATALOGS
    """
    tag = coerce_language(language)
    if tag.language == "zh":
        return CHINESE_SCRIPT_TABLES.get(tag.script or "", CHINESE_DEFAULT_TABLE)
    return LANGUAGE_TABLES.get(tag.language, DEFAULT_LANGUAGE)


def get_translation(
    language: LanguageTag | str,
    translations: Mapping[str, Mapping[str, str]] | None = None,
) -> Mapping[str, str]:
    """Return the translation table for ``language``.

    Args:
        language: Language tag or tag string
        translations: Tables to pick from. Defaults to the bundled tables.

    Returns:
        Read-only code -> localized name mapping (empty if the selected
        table is missing from ``translations``)
    """
    tables = TRANSLATIONS if translations is None else translations
    return tables.get(table_key_for(language), MappingProxyType({}))
