"""Data quality validation for the country and translation tables."""

import logging
from collections import Counter
from collections.abc import Mapping, Sequence

from country_parser.country import Country
from country_parser.data.country_codes import COUNTRY_CODES
from country_parser.data.translations import TRANSLATIONS

logger = logging.getLogger(__name__)

CODE_TABLE = "country_codes"


def _check_unique_codes(countries: Sequence[Country], translations: Mapping[str, Mapping[str, str]]) -> list[dict]:
    counts = Counter(country.code for country in countries)
    return [
        {
            "rule": "unique_codes",
            "table": CODE_TABLE,
            "message": f"Code {code} appears {count} times",
            "severity": "error",
        }
        for code, count in sorted(counts.items())
        if count > 1
    ]


def _check_translation_codes_known(
    countries: Sequence[Country], translations: Mapping[str, Mapping[str, str]]
) -> list[dict]:
    known = {country.code for country in countries}
    errors = []
    for table_key, table in translations.items():
        for code in sorted(set(table) - known):
            errors.append(
                {
                    "rule": "translation_codes_known",
                    "table": table_key,
                    "message": f"Translation for unknown code {code}",
                    "severity": "error",
                }
            )
    return errors


def _check_unique_names(countries: Sequence[Country], translations: Mapping[str, Mapping[str, str]]) -> list[dict]:
    errors = []
    for table_key, table in translations.items():
        codes_by_name: dict[str, list[str]] = {}
        for code, name in table.items():
            codes_by_name.setdefault(name.lower(), []).append(code)
        for name, codes in sorted(codes_by_name.items()):
            if len(codes) > 1:
                errors.append(
                    {
                        "rule": "unique_names",
                        "table": table_key,
                        "message": f"Name {name!r} is shared by {', '.join(sorted(codes))}",
                        "severity": "warning",
                    }
                )
    return errors


VALIDATION_RULES = {
    "unique_codes": _check_unique_codes,
    "translation_codes_known": _check_translation_codes_known,
    "unique_names": _check_unique_names,
}


def validate_data_quality(
    validation_rules: list[str] | None = None,
    countries: Sequence[Country] = COUNTRY_CODES,
    translations: Mapping[str, Mapping[str, str]] = TRANSLATIONS,
) -> list[dict]:
    """Validate the integrity of the lookup tables.

    Args:
        validation_rules: Optional list of validation rule names to run.
            If None, runs all available validation rules.
        countries: Country code table to check. Defaults to the bundled table.
        translations: Translation tables to check. Defaults to the bundled tables.

    Returns:
        List of validation error dictionaries. Empty list means validation passed.
        Each error dict contains: rule, table, message, severity.

    Raises:
        ValueError: If an unknown rule name is given.
    """
    rules = validation_rules or list(VALIDATION_RULES)
    unknown = [rule for rule in rules if rule not in VALIDATION_RULES]
    if unknown:
        raise ValueError(f"Unknown validation rules: {', '.join(unknown)}")

    errors: list[dict] = []
    for rule in rules:
        found = VALIDATION_RULES[rule](countries, translations)
        logger.debug(f"Rule {rule}: {len(found)} issues")
        errors.extend(found)
    return errors
