"""Shared pytest fixtures for Langsniff tests.

Provides small registries, sample texts and common utilities.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from langsniff.profiles.registry import LanguageRegistry, LanguageVariant

# ============================================================================
# Registry Fixtures
# ============================================================================


@pytest.fixture
def small_registry() -> LanguageRegistry:
    """Provide a compact registry: two German variants, English and French."""
    return LanguageRegistry(
        [
            LanguageVariant(
                variant_id="deutsch",
                base_language="german",
                encoding="ascii",
                words=("und", "der", "die", "das", "fuer", "ueber"),
            ),
            LanguageVariant(
                variant_id="deutsch8",
                base_language="german",
                encoding="extended",
                words=("und", "der", "die", "das", "für", "über"),
            ),
            LanguageVariant(
                variant_id="english",
                base_language="english",
                words=("and", "the", "of", "to"),
                dictionary="en_US",
            ),
            LanguageVariant(
                variant_id="francais",
                base_language="french",
                words=("et", "le", "la", "les"),
                has_dictionary=False,
            ),
        ]
    )


# ============================================================================
# Sample Text Fixtures
# ============================================================================


@pytest.fixture
def english_text() -> str:
    return (
        "The history of the city is closely tied to the river, and the people who lived "
        "there were proud of their bridges. It was a place where trade and culture met, "
        "and many of the old buildings are still standing today."
    )


@pytest.fixture
def french_text() -> str:
    return (
        "Le chat est sur la table et il regarde les oiseaux dans le jardin avec une "
        "grande attention."
    )


@pytest.fixture
def german_text() -> str:
    return (
        "Das ist für mich eine schöne Überraschung, aber ich weiß nicht, ob wir das "
        "später noch können. Die Kinder sind mit dem Hund auf dem Weg nach Hause."
    )


@pytest.fixture
def text_file(tmp_path: Path, english_text: str) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text(english_text, encoding="utf-8")
    return path


# ============================================================================
# Settings / CLI Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop the cached settings and any LANGSNIFF_ environment overrides."""
    import os

    for key in list(os.environ):
        if key.startswith("LANGSNIFF_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("langsniff.utils.config._settings", None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide Typer CLI test runner."""
    return CliRunner()


# ============================================================================
# Pytest Configuration Hooks
# ============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
