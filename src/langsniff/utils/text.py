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

"""Host-side text windowing helpers.

These belong to the host, not the classifier: they decide which window of a
document is classified and how many words it holds.
"""

from __future__ import annotations

import re

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_WORD = re.compile(r"\w+")


def count_words(text: str) -> int:
    """Count runs of word characters in text.

    Example:
        >>> count_words("Hello, wide world!")
        3
    """
    return sum(1 for _ in _WORD.finditer(text)) if text else 0


def split_paragraphs(text: str) -> list[tuple[int, str]]:
    """Split text on blank lines.

    Returns:
        List of (offset, paragraph) pairs for non-blank paragraphs, where
        offset is the paragraph's start position in text
    """
    paragraphs = []
    start = 0
    for match in _PARAGRAPH_BREAK.finditer(text):
        chunk = text[start : match.start()]
        if chunk.strip():
            paragraphs.append((start, chunk))
        start = match.end()
    tail = text[start:]
    if tail.strip():
        paragraphs.append((start, tail))
    return paragraphs
