"""Unit tests for CLI interface.

Tests CLI commands, argument parsing, and output formatting.
"""

import json
import re
from pathlib import Path

import pytest
from typer.testing import CliRunner

from langsniff import __version__
from langsniff.cli.main import app

runner = CliRunner()


def strip_ansi(text: str) -> str:
    """Strip ANSI escape codes from text."""
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


@pytest.mark.unit
class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "guess" in strip_ansi(result.stdout)
        assert "languages" in strip_ansi(result.stdout)

    def test_cli_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "Langsniff version:" in result.stdout
        assert __version__ in result.stdout

    def test_invalid_command_fails(self) -> None:
        result = runner.invoke(app, ["invalid-command"])

        assert result.exit_code != 0


@pytest.mark.unit
class TestGuessCommand:
    """Test 'langsniff guess' command."""

    def test_guess_document(self, text_file: Path) -> None:
        result = runner.invoke(app, ["guess", str(text_file), "--no-dictionaries"])

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "confident" in output
        assert "english" in output

    def test_guess_json(self, text_file: Path) -> None:
        result = runner.invoke(app, ["guess", str(text_file), "--json", "--no-dictionaries"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 1
        assert data[0]["status"] == "confident"
        assert data[0]["winning_base_language"] == "english"
        assert data[0]["label"] == "american"
        assert data[0]["offset"] == 0

    def test_guess_paragraphs(
        self, tmp_path: Path, english_text: str, french_text: str, german_text: str
    ) -> None:
        path = tmp_path / "mixed.txt"
        path.write_text(f"{english_text}\n\n{french_text}\n\n{german_text}\n", encoding="utf-8")

        result = runner.invoke(
            app, ["guess", str(path), "--scope", "paragraph", "--json", "--no-dictionaries"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [d["winning_base_language"] for d in data] == ["english", "french", "german"]
        assert data[1]["offset"] == len(english_text) + 2

    def test_guess_paragraphs_rich_output(
        self, tmp_path: Path, english_text: str, french_text: str
    ) -> None:
        path = tmp_path / "mixed.txt"
        path.write_text(f"{english_text}\n\n{french_text}", encoding="utf-8")

        result = runner.invoke(
            app, ["guess", str(path), "--scope", "paragraph", "--no-dictionaries", "--highlight"]
        )

        assert result.exit_code == 0
        assert "Language switches: 2" in strip_ansi(result.stdout)

    def test_guess_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")

        result = runner.invoke(app, ["guess", str(path), "--json", "--no-dictionaries"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["status"] == "none"

    def test_guess_margin_option(self, tmp_path: Path) -> None:
        path = tmp_path / "close.txt"
        path.write_text("der die und das the and of to " + "lorem " * 20, encoding="utf-8")

        strict = runner.invoke(app, ["guess", str(path), "--json", "--no-dictionaries"])
        loose = runner.invoke(
            app, ["guess", str(path), "--json", "--no-dictionaries", "--margin", "0.5"]
        )

        assert json.loads(strict.stdout)[0]["status"] == "tentative"
        assert json.loads(loose.stdout)[0]["status"] == "confident"

    def test_guess_custom_registry(self, tmp_path: Path) -> None:
        registry = tmp_path / "languages.yaml"
        registry.write_text(
            "- variant_id: esperanto\n  base_language: esperanto\n  words: [la, kaj, de]\n",
            encoding="utf-8",
        )
        path = tmp_path / "eo.txt"
        path.write_text("la hundo kaj la kato de la domo", encoding="utf-8")

        result = runner.invoke(
            app, ["guess", str(path), "--registry", str(registry), "--json", "--no-dictionaries"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)[0]["winning_variant_id"] == "esperanto"

    def test_guess_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["guess", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "File not found" in strip_ansi(result.stdout)

    def test_guess_bad_registry(self, text_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["guess", str(text_file), "--registry", str(tmp_path / "nope.yaml")]
        )

        assert result.exit_code == 1
        assert "Registry file not found" in strip_ansi(result.stdout)


@pytest.mark.unit
class TestLanguagesCommand:
    """Test 'langsniff languages' command."""

    def test_lists_builtin_variants(self) -> None:
        result = runner.invoke(app, ["languages", "--no-dictionaries"])

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        assert "deutsch8" in output
        assert "english" in output

    def test_bad_registry(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["languages", "--registry", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
