# Copyright 2025 The Langsniff Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Language variant registry.

A registry is an ordered table of language variants. Variants of the same base
language are listed from most specific (alternate encoding or restricted
spelling) to least specific; the last one is the fallback of its group and wins
ties only after the others.

Example registry file (custom.yaml):
    variants:
      - variant_id: deutsch
        base_language: german
        encoding: ascii
        dictionary: de_DE_ascii
        words: [der, die, das, und, fuer, ueber]
      - variant_id: deutsch8
        base_language: german
        encoding: extended
        dictionary: de_DE
        words: [der, die, das, und, für, über]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from langsniff.core.matcher import StopwordMatcher
from langsniff.profiles.builtin import BUILTIN_VARIANTS
from langsniff.profiles.dictionaries import DictionaryProvider

logger = logging.getLogger(__name__)


class RegistryError(ValueError):
    """Raised when a registry definition is inconsistent or unreadable."""


@dataclass(frozen=True)
class LanguageVariant:
    """One stopword profile tied to a base language and a spelling convention.

    Attributes:
        variant_id: Unique identifier, also used as the display label
        base_language: Grouping key shared by all variants of a language
        encoding: Spelling/encoding kind (ascii, extended, american, ...)
        words: Literal stopwords recognized for this variant
        dictionary: Spell-checker dictionary name (defaults to variant_id)
        has_dictionary: Availability used when no DictionaryProvider is given
        matcher: Compiled matcher built from words
    """

    variant_id: str
    base_language: str
    encoding: str = "common"
    words: tuple[str, ...] = ()
    dictionary: str = ""
    has_dictionary: bool = True
    matcher: StopwordMatcher = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        matcher = StopwordMatcher(self.words)
        object.__setattr__(self, "matcher", matcher)
        object.__setattr__(self, "words", matcher.words)
        if not self.dictionary:
            object.__setattr__(self, "dictionary", self.variant_id)

    @property
    def key(self) -> tuple[str, str]:
        return (self.base_language, self.encoding)

    def dictionary_available(self, provider: DictionaryProvider | None = None) -> bool:
        """Check whether this variant's dictionary can be used.

        Args:
            provider: External dictionary lookup; the static flag is used when None

        Returns:
            True if the dictionary is available
        """
        if provider is None:
            return self.has_dictionary
        return provider.is_available(self.dictionary)


class LanguageRegistry:
    """Ordered, immutable collection of language variants.

    Lookups are explicit: by variant id, or by (base_language, encoding).

    Example:
        >>> registry = builtin_registry()
        >>> registry.lookup("german", "extended").variant_id
        'deutsch8'
        >>> [v.variant_id for v in registry.variants_for("english")]
        ['american', 'british']
    """

    def __init__(self, variants: Iterable[LanguageVariant] = ()) -> None:
        self._variants: tuple[LanguageVariant, ...] = tuple(variants)
        self._by_id: dict[str, LanguageVariant] = {}
        self._by_key: dict[tuple[str, str], LanguageVariant] = {}

        for variant in self._variants:
            if variant.variant_id in self._by_id:
                raise RegistryError(f"Duplicate variant id: {variant.variant_id}")
            if variant.key in self._by_key:
                raise RegistryError(
                    f"Duplicate variant for base language '{variant.base_language}' "
                    f"and encoding '{variant.encoding}'"
                )
            self._by_id[variant.variant_id] = variant
            self._by_key[variant.key] = variant

    @property
    def variants(self) -> tuple[LanguageVariant, ...]:
        return self._variants

    def __iter__(self) -> Iterator[LanguageVariant]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __contains__(self, variant_id: object) -> bool:
        return variant_id in self._by_id

    def get(self, variant_id: str) -> LanguageVariant | None:
        return self._by_id.get(variant_id)

    def lookup(self, base_language: str, encoding: str) -> LanguageVariant | None:
        """Resolve a variant by base language and encoding kind."""
        return self._by_key.get((base_language, encoding))

    def variants_for(self, base_language: str) -> list[LanguageVariant]:
        """All variants of a base language, most specific first."""
        return [v for v in self._variants if v.base_language == base_language]

    def fallback_for(self, base_language: str) -> LanguageVariant | None:
        """The least specific variant of a base language."""
        group = self.variants_for(base_language)
        return group[-1] if group else None

    def base_languages(self) -> list[str]:
        """Distinct base languages in registry order."""
        return list(dict.fromkeys(v.base_language for v in self._variants))

    def __repr__(self) -> str:
        return f"LanguageRegistry(variants={len(self._variants)})"


def variant_from_mapping(data: Mapping[str, Any]) -> LanguageVariant:
    """Build a LanguageVariant from a plain mapping (YAML entry or built-in data).

    ``words`` may be a list or a whitespace separated string.

    Raises:
        RegistryError: If required keys are missing
    """
    try:
        variant_id = str(data["variant_id"])
        base_language = str(data["base_language"])
    except KeyError as e:
        raise RegistryError(f"Variant definition missing required key: {e.args[0]}") from e

    words = data.get("words") or ()
    if isinstance(words, str):
        words = words.split()

    return LanguageVariant(
        variant_id=variant_id,
        base_language=base_language,
        encoding=str(data.get("encoding", "common")),
        words=tuple(words) if isinstance(words, (list, tuple)) else words,
        dictionary=str(data.get("dictionary") or ""),
        has_dictionary=bool(data.get("has_dictionary", True)),
    )


@lru_cache(maxsize=1)
def builtin_registry() -> LanguageRegistry:
    """Return the registry of built-in stopword profiles."""
    return LanguageRegistry(variant_from_mapping(entry) for entry in BUILTIN_VARIANTS)


def load_registry(path: str | Path | None = None) -> LanguageRegistry:
    """Load a registry from a YAML file, or the built-in registry.

    The file may contain a top-level list of variants or a mapping with a
    ``variants`` list. File order is registry order.

    Args:
        path: Path to a YAML registry file; None selects the built-in registry

    Returns:
        Loaded LanguageRegistry

    Raises:
        RegistryError: If the file is missing, unreadable or inconsistent
    """
    if path is None:
        return builtin_registry()

    registry_path = Path(path)
    if not registry_path.is_file():
        raise RegistryError(f"Registry file not found: {registry_path}")

    logger.info("Loading language registry from: %s", registry_path)

    try:
        with open(registry_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RegistryError(f"Cannot parse registry file {registry_path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("variants")
    if not isinstance(data, list):
        raise RegistryError(
            f"Registry file must contain a list of variants, got {type(data).__name__}"
        )

    entries = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise RegistryError(f"Variant #{index} must be a mapping, got {type(entry).__name__}")
        entries.append(variant_from_mapping(entry))

    registry = LanguageRegistry(entries)
    logger.info(
        "Loaded %d variants for %d base languages",
        len(registry),
        len(registry.base_languages()),
    )
    return registry
