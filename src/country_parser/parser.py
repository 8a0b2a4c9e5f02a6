"""
Parse simple string representations of countries to Country records.

Country codes and names are commonly stored as plain strings in databases
and other forms of storage. ``parse`` accepts either: an ISO 3166-1 alpha-2
code is tried first, then a country name in any supported language.

Name lookups search the current language (if given), then English, then
every other supported language in a fixed order. Passing an explicit
``languages`` list replaces the English and general fallbacks with exactly
that list.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from country_parser.config.languages import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from country_parser.country import Country
from country_parser.data.country_codes import COUNTRY_CODES
from country_parser.data.translations import TRANSLATIONS, table_key_for
from country_parser.exceptions import NotFoundError
from country_parser.language import LanguageTag, coerce_language

logger = logging.getLogger(__name__)

LanguageLike = LanguageTag | str


def supported_languages(exclude: Iterable[LanguageLike] = ()) -> list[LanguageTag]:
    """Return the supported languages in fallback order, minus ``exclude``."""
    excluded = {coerce_language(language) for language in exclude}
    tags = [LanguageTag.parse(language) for language in SUPPORTED_LANGUAGES]
    return [tag for tag in tags if tag not in excluded]


class CountryParser:
    """Resolve codes and localized names against a country table.

    Args:
        countries: Country records to resolve against
        translations: Table key -> (code -> localized name) mappings
    """

    def __init__(
        self,
        countries: Sequence[Country] = COUNTRY_CODES,
        translations: Mapping[str, Mapping[str, str]] = TRANSLATIONS,
    ) -> None:
        self._countries = tuple(countries)
        self._translations = translations
        # Lowercased name -> code per table. On a collision the first code wins.
        self._name_index: dict[str, dict[str, str]] = {}
        for table_key, table in translations.items():
            index: dict[str, str] = {}
            for code, name in table.items():
                index.setdefault(name.lower(), code)
            self._name_index[table_key] = index

    @property
    def countries(self) -> tuple[Country, ...]:
        return self._countries

    def parse(
        self,
        value: str,
        language: LanguageLike | None = None,
        languages: Sequence[LanguageLike] | None = None,
    ) -> Country:
        """Return the country matching ``value`` as a code or name.

        Raises:
            NotFoundError: If neither a code nor a name matches.
        """
        country = self.try_parse_country_code(value)
        if country is not None:
            return country
        return self.parse_country_name(value, language=language, languages=languages)

    def try_parse(
        self,
        value: str,
        language: LanguageLike | None = None,
        languages: Sequence[LanguageLike] | None = None,
    ) -> Country | None:
        """Return the country matching ``value`` as a code or name, or None."""
        try:
            return self.parse(value, language=language, languages=languages)
        except NotFoundError:
            return None

    def parse_country_code(self, code: str) -> Country:
        """Return the single country whose code matches ``code``.

        The comparison is case-insensitive.

        Raises:
            NotFoundError: If no country, or more than one, has the code.
        """
        normalized = code.upper()
        matches = [c for c in self._countries if c.code == normalized]
        if len(matches) > 1:
            logger.error(f"Country table has {len(matches)} records for code {normalized}")
            raise NotFoundError(code, f"Ambiguous country code {code!r}")
        if not matches:
            raise NotFoundError(code)
        return matches[0]

    def try_parse_country_code(self, code: str) -> Country | None:
        try:
            return self.parse_country_code(code)
        except NotFoundError:
            return None

    def parse_country_name(
        self,
        name: str,
        language: LanguageLike | None = None,
        languages: Sequence[LanguageLike] | None = None,
    ) -> Country:
        """Return the country whose localized name matches ``name``.

        The current ``language`` is searched first, if given. Without an
        explicit ``languages`` list, English is searched next, followed by
        the rest of the supported languages. With ``languages``, only those
        are searched after the current language, in the order given.

        Args:
            name: Country name, matched case-insensitively
            language: Current language, searched first
            languages: Explicit languages to search instead of the fallbacks

        Returns:
            The matching Country

        Raises:
            NotFoundError: If no searched language has a matching name.
        """
        code = self._localized_name_to_code(name.lower(), language, languages)
        if code is None:
            raise NotFoundError(name)
        return self.parse_country_code(code)

    def try_parse_country_name(
        self,
        name: str,
        language: LanguageLike | None = None,
        languages: Sequence[LanguageLike] | None = None,
    ) -> Country | None:
        try:
            return self.parse_country_name(name, language=language, languages=languages)
        except NotFoundError:
            return None

    def localized_name(self, code: str, language: LanguageLike | None = None) -> str | None:
        """Return the name of ``code`` in ``language`` (English by default).

        Returns:
            Localized name, or None if that language's table lacks the code
        """
        table_key = table_key_for(language if language is not None else DEFAULT_LANGUAGE)
        table = self._translations.get(table_key, {})
        return table.get(code.upper())

    def _localized_name_to_code(
        self,
        name: str,
        language: LanguageLike | None,
        languages: Sequence[LanguageLike] | None,
    ) -> str | None:
        current = coerce_language(language) if language is not None else None

        search: list[LanguageTag] = []
        if current is not None:
            search.append(current)
        if languages is None:
            default = LanguageTag.parse(DEFAULT_LANGUAGE)
            search.append(default)
            exclude = [default] if current is None else [default, current]
            search.extend(supported_languages(exclude=exclude))
        else:
            search.extend(coerce_language(tag) for tag in languages)

        for tag in search:
            code = self._name_to_code_in(name, tag)
            if code is not None:
                logger.debug(f"Matched {name!r} to {code} in {tag}")
                return code
        return None

    def _name_to_code_in(self, name: str, language: LanguageTag) -> str | None:
        """Look up a lowercased name in the table for ``language``."""
        index = self._name_index.get(table_key_for(language), {})
        return index.get(name)


# Parser over the bundled tables
default_parser = CountryParser()


def all_countries() -> tuple[Country, ...]:
    return default_parser.countries


def parse(
    value: str,
    language: LanguageLike | None = None,
    languages: Sequence[LanguageLike] | None = None,
) -> Country:
    return default_parser.parse(value, language=language, languages=languages)


def try_parse(
    value: str,
    language: LanguageLike | None = None,
    languages: Sequence[LanguageLike] | None = None,
) -> Country | None:
    return default_parser.try_parse(value, language=language, languages=languages)


def parse_country_code(code: str) -> Country:
    return default_parser.parse_country_code(code)


def try_parse_country_code(code: str) -> Country | None:
    return default_parser.try_parse_country_code(code)


def parse_country_name(
    name: str,
    language: LanguageLike | None = None,
    languages: Sequence[LanguageLike] | None = None,
) -> Country:
    return default_parser.parse_country_name(name, language=language, languages=languages)


def try_parse_country_name(
    name: str,
    language: LanguageLike | None = None,
    languages: Sequence[LanguageLike] | None = None,
) -> Country | None:
    return default_parser.try_parse_country_name(name, language=language, languages=languages)


def localized_name(code: str, language: LanguageLike | None = None) -> str | None:
    return default_parser.localized_name(code, language=language)
