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

"""Stateless classification of a text window against a variant registry.

Pipeline: match every variant, score the counts, rank and select a winner,
then resolve dictionary availability for the winning variant. Every input is
total; an empty window or an empty registry yields a NONE verdict.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from langsniff.core.models import (
    ClassificationVerdict,
    ClassifierConfig,
    MatchResult,
    VerdictStatus,
)
from langsniff.core.scoring import score_with_config
from langsniff.core.selector import select_winner
from langsniff.profiles.dictionaries import DictionaryProvider
from langsniff.profiles.registry import LanguageRegistry, LanguageVariant
from langsniff.utils.text import count_words

logger = logging.getLogger(__name__)


def score_variants(
    text: str,
    variants: Iterable[LanguageVariant],
    word_count: int,
    config: ClassifierConfig,
) -> list[MatchResult]:
    """Produce one MatchResult per variant, in registry order."""
    results = []
    for variant in variants:
        raw_count = variant.matcher.count(text) if word_count > 0 else 0
        results.append(
            MatchResult(
                variant_id=variant.variant_id,
                base_language=variant.base_language,
                raw_count=raw_count,
                confidence=score_with_config(raw_count, word_count, config),
            )
        )
    return results


def classify(
    text: str,
    registry: LanguageRegistry | Iterable[LanguageVariant],
    config: ClassifierConfig | None = None,
    *,
    word_count: int | None = None,
    dictionaries: DictionaryProvider | None = None,
) -> ClassificationVerdict:
    """Classify the language of a text window.

    Args:
        text: Text window chosen by the host
        registry: Language variants to match against, in priority order
        config: Thresholds; defaults to ClassifierConfig()
        word_count: Total words in the window; counted with count_words if None
        dictionaries: Dictionary lookup; variant flags are used if None

    Returns:
        ClassificationVerdict for this window

    Example:
        >>> from langsniff.profiles import builtin_registry
        >>> verdict = classify("the cat and the dog", builtin_registry())
        >>> verdict.winning_base_language
        'english'
    """
    config = config or ClassifierConfig()
    text = text or ""
    if word_count is None:
        word_count = count_words(text)
    word_count = max(word_count, 0)

    variants = tuple(registry)
    results = score_variants(text, variants, word_count, config)
    selection = select_winner(results, config.required_confidence_margin)

    if selection.status == VerdictStatus.NONE or selection.winner is None:
        return ClassificationVerdict(
            status=VerdictStatus.NONE,
            word_count=word_count,
            results=selection.ranked,
        )

    winner = selection.winner
    runner_up = selection.runner_up
    variant = next((v for v in variants if v.variant_id == winner.variant_id), None)
    available = variant.dictionary_available(dictionaries) if variant is not None else False

    verdict = ClassificationVerdict(
        status=selection.status,
        winning_base_language=winner.base_language,
        winning_variant_id=winner.variant_id,
        dictionary_available=available,
        confidence=winner.confidence,
        runner_up_base_language=runner_up.base_language if runner_up else "",
        runner_up_confidence=runner_up.confidence if runner_up else 0.0,
        word_count=word_count,
        results=selection.ranked,
    )
    logger.debug(
        "Classified %d words: %s %s (dictionary available: %s)",
        word_count,
        verdict.status.value,
        verdict.winning_variant_id,
        available,
    )
    return verdict
