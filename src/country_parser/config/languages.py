"""
Supported languages and the translation table each one resolves to.

Translation tables are keyed by a short table key. Several language tags can
share a table (Hindi and Nepali both use the Nepali names), and Chinese is
split by script rather than by language.
"""

# Permanent fallback for name lookups, searched right after the current language.
DEFAULT_LANGUAGE = "en"

# Fixed fallback enumeration. Order matters: name lookups without an explicit
# language list walk this list (minus English and the current language).
SUPPORTED_LANGUAGES: list[str] = [
    "en",
    "ar",
    "es",
    "el",
    "nb",
    "nn",
    "pl",
    "pt",
    "ru",
    "hi",
    "ne",
    "uk",
    "tr",
    "hr",
    "zh-Hans",
    "zh-Hant",
]

# Table key -> gettext catalog under pycountry's locales directory.
# English names come straight from the ISO 3166-1 database.
TRANSLATION_CATALOGS: dict[str, str | None] = {
    "en": None,
    "ar": "ar",
    "es": "es",
    "el": "el",
    "nb": "nb_NO",
    "nn": "nn",
    "pl": "pl",
    "pt": "pt",
    "ru": "ru",
    "ne": "ne",
    "uk": "uk",
    "tr": "tr",
    "hr": "hr",
    "zh-Hans": "zh_CN",
    "zh-Hant": "zh_TW",
}

# Base language code -> table key. Chinese is resolved by script instead.
LANGUAGE_TABLES: dict[str, str] = {
    "en": "en",
    "ar": "ar",
    "es": "es",
    "el": "el",
    "nb": "nb",
    "nn": "nn",
    "pl": "pl",
    "pt": "pt",
    "ru": "ru",
    "hi": "ne",
    "ne": "ne",
    "uk": "uk",
    "tr": "tr",
    "hr": "hr",
}

# Chinese script subtag -> table key; a missing or unknown script is Simplified.
CHINESE_SCRIPT_TABLES: dict[str, str] = {
    "Hans": "zh-Hans",
    "Hant": "zh-Hant",
}
CHINESE_DEFAULT_TABLE = "zh-Hans"
