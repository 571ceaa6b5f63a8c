"""Unit tests for dictionary availability providers."""

from pathlib import Path

import pytest

from langsniff.profiles.dictionaries import (
    DictionaryProvider,
    DirectoryDictionaryProvider,
    StaticDictionaryProvider,
)


def install(directory: Path, name: str, aff: bool = True) -> None:
    (directory / f"{name}.dic").write_text("1\nword\n", encoding="utf-8")
    if aff:
        (directory / f"{name}.aff").write_text("SET UTF-8\n", encoding="utf-8")


@pytest.mark.unit
class TestStaticDictionaryProvider:
    def test_lookup(self) -> None:
        provider = StaticDictionaryProvider(["en_US", "de_DE"])

        assert provider.is_available("en_US")
        assert not provider.is_available("fr_FR")

    def test_satisfies_protocol(self) -> None:
        assert isinstance(StaticDictionaryProvider(), DictionaryProvider)


@pytest.mark.unit
class TestDirectoryDictionaryProvider:
    def test_finds_dic_and_aff_pair(self, tmp_path: Path) -> None:
        install(tmp_path, "en_US")

        provider = DirectoryDictionaryProvider([tmp_path])

        assert provider.is_available("en_US")
        assert not provider.is_available("de_DE")

    def test_requires_affix_file(self, tmp_path: Path) -> None:
        install(tmp_path, "en_US", aff=False)

        assert not DirectoryDictionaryProvider([tmp_path]).is_available("en_US")

    def test_searches_all_paths(self, tmp_path: Path) -> None:
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        install(second, "sv_SE")

        assert DirectoryDictionaryProvider([first, second]).is_available("sv_SE")

    def test_results_are_cached(self, tmp_path: Path) -> None:
        provider = DirectoryDictionaryProvider([tmp_path])
        assert not provider.is_available("nl_NL")

        install(tmp_path, "nl_NL")

        assert not provider.is_available("nl_NL")
        provider.clear_cache()
        assert provider.is_available("nl_NL")

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert not DirectoryDictionaryProvider([tmp_path / "nope"]).is_available("en_US")
