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

"""Compiled stopword matching for a single language variant."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

logger = logging.getLogger(__name__)


class StopwordMatcher:
    """Count stopword occurrences of one word list in a text window.

    The word list is merged into a single case-sensitive alternation,
    anchored on word boundaries, so each physical occurrence is counted once
    and words never match inside longer words.

    An empty or malformed word list produces a matcher that never matches.

    Example:
        >>> matcher = StopwordMatcher(["the", "and", "of"])
        >>> matcher.count("the cat and the dog")
        3
        >>> matcher.count("theatre")
        0
    """

    def __init__(self, words: Iterable[str] | None) -> None:
        self.words: tuple[str, ...] = _normalize_words(words)
        self._pattern: re.Pattern[str] | None = _compile(self.words)

    @property
    def is_empty(self) -> bool:
        """True when the matcher can never match."""
        return self._pattern is None

    def count(self, text: str) -> int:
        """Return the number of non-overlapping stopword occurrences in text."""
        if self._pattern is None or not text:
            return 0
        return sum(1 for _ in self._pattern.finditer(text))

    def spans(self, text: str) -> list[tuple[int, int]]:
        """Return (start, end) character spans of every match, in text order."""
        if self._pattern is None or not text:
            return []
        return [match.span() for match in self._pattern.finditer(text)]

    def __repr__(self) -> str:
        return f"StopwordMatcher(words={len(self.words)})"


def _normalize_words(words: Iterable[str] | None) -> tuple[str, ...]:
    """Deduplicate a word list, dropping blanks; malformed input yields ()."""
    if words is None or isinstance(words, (str, bytes)):
        if words:
            logger.warning("Word list must be a sequence of strings, got %s", type(words).__name__)
        return ()

    try:
        items = list(words)
    except TypeError:
        logger.warning("Word list is not iterable: %r", words)
        return ()

    if not all(isinstance(word, str) for word in items):
        logger.warning("Word list contains non-string entries; matcher disabled")
        return ()

    seen: dict[str, None] = {}
    for word in items:
        word = word.strip()
        if word:
            seen.setdefault(word, None)
    return tuple(seen)


def _compile(words: tuple[str, ...]) -> re.Pattern[str] | None:
    if not words:
        return None
    # Longest first so an alternative is never shadowed by its own prefix
    alternation = "|".join(re.escape(word) for word in sorted(words, key=len, reverse=True))
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)")
