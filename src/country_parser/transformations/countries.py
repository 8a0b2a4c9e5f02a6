"""Resolve DataFrame columns of free-form country strings to country codes."""

import logging
from collections.abc import Sequence

import pandas as pd

from country_parser.language import LanguageTag
from country_parser.parser import CountryParser, default_parser

logger = logging.getLogger(__name__)


def _resolve_value(
    value,
    parser: CountryParser,
    language: LanguageTag | str | None,
    languages: Sequence[LanguageTag | str] | None,
) -> str | None:
    """Resolve one cell to a country code, or None."""
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    if not text:
        return None
    country = parser.try_parse(text, language=language, languages=languages)
    return country.code if country is not None else None


def resolve_country_column(
    df: pd.DataFrame,
    column: str,
    target: str = "country_code",
    language: LanguageTag | str | None = None,
    languages: Sequence[LanguageTag | str] | None = None,
    parser: CountryParser | None = None,
) -> pd.DataFrame:
    """Add a column of country codes resolved from ``column``.

    Each distinct value is resolved once as a code or a localized name.
    Null, blank and unresolvable values become None.

    Args:
        df: Input DataFrame
        column: Name of the column holding country codes or names
        target: Name of the column to write codes to
        language: Current language, searched first for names
        languages: Explicit languages to search instead of the fallbacks
        parser: Parser to resolve with. Defaults to the bundled tables.

    Returns:
        Copy of ``df`` with the ``target`` column added

    Raises:
        KeyError: If ``column`` is not in ``df``
    """
    if column not in df.columns:
        raise KeyError(f"Column not found: {column}")
    parser = parser or default_parser

    resolved = {
        value: _resolve_value(value, parser, language, languages)
        for value in df[column].dropna().unique()
    }

    result = df.copy()
    result[target] = df[column].map(lambda v: None if pd.isna(v) else resolved.get(v))

    unresolved = [
        v for v, code in resolved.items() if code is None and str(v).strip()
    ]
    if unresolved:
        logger.warning(f"Could not resolve {len(unresolved)} distinct values in {column}")
    return result


def unresolved_values(
    df: pd.DataFrame,
    column: str,
    language: LanguageTag | str | None = None,
    languages: Sequence[LanguageTag | str] | None = None,
    parser: CountryParser | None = None,
) -> list[str]:
    """List distinct non-blank values in ``column`` that match no country.

    Returns:
        Sorted list of the unresolvable values as strings
    """
    parser = parser or default_parser
    values = {str(v).strip() for v in df[column].dropna().unique()}
    return sorted(
        v for v in values if v and parser.try_parse(v, language=language, languages=languages) is None
    )
