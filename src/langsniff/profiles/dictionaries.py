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

"""Spell-checker dictionary availability lookups."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# Common hunspell install locations
DEFAULT_DICTIONARY_PATHS: tuple[str, ...] = (
    "/usr/share/hunspell",
    "/usr/share/myspell",
    "/usr/share/myspell/dicts",
    "/Library/Spelling",
)


@runtime_checkable
class DictionaryProvider(Protocol):
    """Answers whether a named spell-checker dictionary is installed."""

    def is_available(self, name: str) -> bool: ...


class StaticDictionaryProvider:
    """Provider backed by a fixed set of dictionary names."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self.names = frozenset(names)

    def is_available(self, name: str) -> bool:
        return name in self.names


class DirectoryDictionaryProvider:
    """Provider that looks for hunspell ``<name>.dic``/``<name>.aff`` pairs.

    Results are cached per dictionary name, so repeated classification runs
    do not touch the filesystem again.

    Example:
        >>> provider = DirectoryDictionaryProvider(["/usr/share/hunspell"])
        >>> provider.is_available("en_US")
        True
    """

    def __init__(self, search_paths: Iterable[str | Path] | None = None) -> None:
        paths = DEFAULT_DICTIONARY_PATHS if search_paths is None else search_paths
        self.search_paths: list[Path] = [Path(p).expanduser() for p in paths]
        self._cache: dict[str, bool] = {}

    def is_available(self, name: str) -> bool:
        if name not in self._cache:
            self._cache[name] = self._find(name) is not None
            logger.debug("Dictionary %s available: %s", name, self._cache[name])
        return self._cache[name]

    def _find(self, name: str) -> Path | None:
        for directory in self.search_paths:
            dic = directory / f"{name}.dic"
            if dic.is_file() and dic.with_suffix(".aff").is_file():
                return dic
        return None

    def clear_cache(self) -> None:
        """Forget cached lookups (e.g. after installing a dictionary)."""
        self._cache.clear()
