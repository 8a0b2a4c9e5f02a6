"""Tests for CLI commands."""

import json
import subprocess
import sys

import pytest

from country_parser.cli import LANGUAGE_ENV, LANGUAGES_ENV, create_parser, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run every CLI test without language settings from the environment."""
    monkeypatch.delenv(LANGUAGE_ENV, raising=False)
    monkeypatch.delenv(LANGUAGES_ENV, raising=False)
    monkeypatch.chdir(tmp_path)


class TestCLIParser:
    """Tests for CLI argument parsing."""

    def test_create_parser_returns_parser(self) -> None:
        """Test that create_parser returns an ArgumentParser."""
        parser = create_parser()
        assert parser is not None
        assert parser.prog == "country-parser"

    def test_help_flag(self) -> None:
        """Test that --help works without error."""
        parser = create_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--help"])
        assert exc_info.value.code == 0

    def test_parse_help(self) -> None:
        """Test that parse --help works."""
        parser = create_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["parse", "--help"])
        assert exc_info.value.code == 0

    def test_parse_parses_args(self) -> None:
        """Test that parse reads the value and language options."""
        parser = create_parser()
        args = parser.parse_args(["parse", "Germany", "--language", "ru", "--languages", "es,pt"])
        assert args.command == "parse"
        assert args.value == "Germany"
        assert args.language == "ru"
        assert args.languages == ["es", "pt"]

    @pytest.mark.parametrize("tag", ["123", "*", "419"])
    def test_invalid_language_flag(self, tag: str) -> None:
        """Test that an invalid --language tag is an argument error."""
        parser = create_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["parse", "Germany", "--language", tag])
        assert exc_info.value.code == 2

    def test_invalid_languages_flag(self) -> None:
        """Test that one invalid tag in --languages is an argument error."""
        parser = create_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["name", "Germany", "--languages", "ru,123"])
        assert exc_info.value.code == 2

    def test_parse_missing_value(self) -> None:
        """Test that parse requires a value."""
        parser = create_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["parse"])
        assert exc_info.value.code == 2


class TestLookupCommands:
    """Tests for parse, code, name and localize commands."""

    def test_parse_code(self, capsys: pytest.CaptureFixture) -> None:
        """Test that parse resolves a code in any case."""
        assert main(["parse", "de"]) == 0
        assert "Germany (DE) [+49]" in capsys.readouterr().out

    def test_parse_name_json(self, capsys: pytest.CaptureFixture) -> None:
        """Test that parse resolves a localized name and prints JSON."""
        assert main(["--json", "parse", "Alemania"]) == 0
        record = json.loads(capsys.readouterr().out)
        assert record["code"] == "DE"
        assert record["alpha_3"] == "DEU"

    def test_parse_not_found(self, capsys: pytest.CaptureFixture) -> None:
        """Test that an unknown value exits 1 with a message on stderr."""
        assert main(["parse", "ZZ"]) == 1
        assert "No country found" in capsys.readouterr().err

    def test_code_command(self, capsys: pytest.CaptureFixture) -> None:
        """Test that code resolves a country code."""
        assert main(["code", "fr"]) == 0
        assert "France (FR)" in capsys.readouterr().out

    def test_code_command_rejects_names(self) -> None:
        """Test that code does not fall back to name lookup."""
        assert main(["code", "France"]) == 1

    def test_name_with_explicit_languages(self) -> None:
        """Test that --languages limits the searched tables."""
        assert main(["name", "Germany", "--languages", "ru,es"]) == 1
        assert main(["name", "Германия", "--languages", "ru,es"]) == 0

    def test_languages_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the language list is read from the environment."""
        monkeypatch.setenv(LANGUAGES_ENV, "ru")
        assert main(["name", "Germany"]) == 1

    def test_flag_overrides_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that --languages takes precedence over the environment."""
        monkeypatch.setenv(LANGUAGES_ENV, "ru")
        assert main(["name", "Germany", "--languages", "en"]) == 0

    def test_languages_from_dotenv(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """Test that the language list is read from a .env file."""
        # Registers the variable with monkeypatch so the value loaded from .env is undone
        monkeypatch.setenv(LANGUAGES_ENV, "")
        monkeypatch.delenv(LANGUAGES_ENV)
        (tmp_path / ".env").write_text(f"{LANGUAGES_ENV}=ru\n", encoding="utf-8")
        assert main(["name", "Germany"]) == 1

    def test_localize(self, capsys: pytest.CaptureFixture) -> None:
        """Test that localize prints the name in the requested language."""
        assert main(["localize", "de", "--language", "zh-Hant"]) == 0
        assert capsys.readouterr().out.strip() == "德國"

    def test_localize_language_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """Test that localize reads the current language from the environment."""
        monkeypatch.setenv(LANGUAGE_ENV, "ru")
        assert main(["localize", "de"]) == 0
        assert capsys.readouterr().out.strip() == "Германия"

    def test_localize_flag_overrides_environment(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        """Test that localize --language takes precedence over the environment."""
        monkeypatch.setenv(LANGUAGE_ENV, "ru")
        assert main(["localize", "de", "--language", "es"]) == 0
        assert capsys.readouterr().out.strip() == "Alemania"

    @pytest.mark.parametrize("env", [LANGUAGE_ENV, LANGUAGES_ENV])
    def test_invalid_language_in_environment(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture, env: str
    ) -> None:
        """Test that an invalid tag in the environment is an argument error."""
        monkeypatch.setenv(env, "123")
        with pytest.raises(SystemExit) as exc_info:
            main(["parse", "Germany"])
        assert exc_info.value.code == 2
        assert env in capsys.readouterr().err

    def test_empty_language_in_environment_is_ignored(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that an empty current language in the environment is treated as unset."""
        monkeypatch.setenv(LANGUAGE_ENV, "")
        assert main(["parse", "Germany"]) == 0


class TestInfoCommands:
    """Tests for languages and validate commands."""

    def test_languages(self, capsys: pytest.CaptureFixture) -> None:
        """Test that languages lists the tags in fallback order."""
        assert main(["--json", "languages"]) == 0
        tags = json.loads(capsys.readouterr().out)
        assert tags[0] == "en"
        assert tags[-1] == "zh-Hant"
        assert len(tags) == 16

    def test_validate(self, capsys: pytest.CaptureFixture) -> None:
        """Test that validate passes for the bundled tables."""
        assert main(["validate"]) == 0
        assert "Validation passed" in capsys.readouterr().out


class TestMainFunction:
    """Tests for main entry point."""

    def test_no_command_shows_help(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that running without a command shows help and returns 0."""
        monkeypatch.setattr(sys, "argv", ["country-parser"])
        result = main()
        assert result == 0

    def test_reads_sys_argv(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that main reads arguments from sys.argv."""
        monkeypatch.setattr(sys, "argv", ["country-parser", "code", "US"])
        assert main() == 0


class TestCLIIntegration:
    """Integration tests for CLI using subprocess."""

    def test_cli_help_via_subprocess(self) -> None:
        """Test CLI help via subprocess."""
        result = subprocess.run(
            [sys.executable, "-m", "country_parser.cli", "--help"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0
        assert "parse" in result.stdout
        assert "validate" in result.stdout
