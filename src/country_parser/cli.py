"""CLI entry point for country-parser."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from country_parser.country import Country
from country_parser.exceptions import NotFoundError
from country_parser.language import LanguageTag

LANGUAGE_ENV = "COUNTRY_PARSER_LANGUAGE"
LANGUAGES_ENV = "COUNTRY_PARSER_LANGUAGES"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _language_tag(value: str) -> str:
    """Argparse type for a single language tag."""
    try:
        LanguageTag.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return value.strip()


def _language_list(value: str) -> list[str]:
    """Argparse type for a comma-separated list of language tags."""
    return [_language_tag(part) for part in value.split(",") if part.strip()]


def _add_language_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--language",
        type=_language_tag,
        default=None,
        help=f"Current language searched first, e.g. 'ru' or 'zh-Hant' (env: {LANGUAGE_ENV})",
    )
    parser.add_argument(
        "--languages",
        type=_language_list,
        default=None,
        help=f"Comma-separated languages to search instead of the fallbacks (env: {LANGUAGES_ENV})",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="country-parser",
        description="Resolve country codes and localized country names",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Resolve a country code or name",
    )
    parse_parser.add_argument("value", help="Country code or name")
    _add_language_options(parse_parser)

    # code command
    code_parser = subparsers.add_parser(
        "code",
        help="Resolve an ISO 3166-1 alpha-2 code",
    )
    code_parser.add_argument("code", help="Country code, any case")

    # name command
    name_parser = subparsers.add_parser(
        "name",
        help="Resolve a localized country name",
    )
    name_parser.add_argument("name", help="Country name in any supported language")
    _add_language_options(name_parser)

    # localize command
    localize_parser = subparsers.add_parser(
        "localize",
        help="Show the name of a country in a language",
    )
    localize_parser.add_argument("code", help="Country code, any case")
    localize_parser.add_argument(
        "--language",
        type=_language_tag,
        default=None,
        help=f"Language tag (env: {LANGUAGE_ENV}, default: en)",
    )

    subparsers.add_parser("languages", help="List supported languages in fallback order")
    subparsers.add_parser("validate", help="Validate the country and translation tables")

    return parser


def _print_country(country: Country, as_json: bool) -> None:
    if as_json:
        print(json.dumps(country.to_dict(), ensure_ascii=False))
    else:
        print(f"{country.flag} {country.display_name}")


def _resolve_languages(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> tuple[str | None, list[str] | None]:
    """Pick the current and explicit languages from flags, then environment.

    Invalid tags in the environment are reported as argument errors.
    """
    language = args.language
    env_language = os.environ.get(LANGUAGE_ENV)
    if language is None and env_language:
        try:
            language = _language_tag(env_language)
        except argparse.ArgumentTypeError as e:
            parser.error(f"{LANGUAGE_ENV}: {e}")
    languages = getattr(args, "languages", None)
    env_languages = os.environ.get(LANGUAGES_ENV)
    if languages is None and env_languages is not None:
        try:
            languages = _language_list(env_languages)
        except argparse.ArgumentTypeError as e:
            parser.error(f"{LANGUAGES_ENV}: {e}")
    return language, languages


def _run(args: argparse.Namespace, language: str | None, languages: list[str] | None) -> int:
    from country_parser import parser as lookup

    if args.command in ("parse", "name"):
        if args.command == "parse":
            country = lookup.parse(args.value, language=language, languages=languages)
        else:
            country = lookup.parse_country_name(args.name, language=language, languages=languages)
        _print_country(country, args.json)
        return 0

    if args.command == "code":
        _print_country(lookup.parse_country_code(args.code), args.json)
        return 0

    if args.command == "localize":
        country = lookup.parse_country_code(args.code)
        name = lookup.localized_name(country.code, language=language)
        if name is None:
            print(f"No translation for {country.code} in {language}", file=sys.stderr)
            return 1
        print(json.dumps({"code": country.code, "name": name}, ensure_ascii=False) if args.json else name)
        return 0

    if args.command == "languages":
        tags = [str(tag) for tag in lookup.supported_languages()]
        print(json.dumps(tags) if args.json else "\n".join(tags))
        return 0

    if args.command == "validate":
        from country_parser.utils.validators import validate_data_quality

        issues = validate_data_quality()
        errors = [issue for issue in issues if issue["severity"] == "error"]
        if args.json:
            print(json.dumps(issues, ensure_ascii=False, indent=2))
        else:
            for issue in issues:
                print(f"[{issue['severity']}] {issue['rule']} ({issue['table']}): {issue['message']}")
        if errors:
            print(f"Found {len(errors)} validation errors", file=sys.stderr)
            return 1
        if not args.json:
            print("Validation passed")
        return 0

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    dotenv_path = Path.cwd() / ".env"
    if dotenv_path.exists():
        load_dotenv(dotenv_path)
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    language, languages = None, None
    if args.command in ("parse", "name", "localize"):
        language, languages = _resolve_languages(args, parser)

    setup_logging(args.verbose)
    try:
        return _run(args, language, languages)
    except NotFoundError as e:
        print(str(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
