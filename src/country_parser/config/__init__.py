"""Configuration module for supported languages and translation catalogs."""

from .languages import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, TRANSLATION_CATALOGS

__all__ = ["DEFAULT_LANGUAGE", "SUPPORTED_LANGUAGES", "TRANSLATION_CATALOGS"]
