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

"""Winner selection across base languages.

Variants of the same base language are collapsed before the margin test, so
the winner is compared against the first competing base language rather than
against one of its own spelling or encoding variants.

Known limitation: only the first distinct base language after the leading
run is inspected. With three or more base languages of similar strength, a
stronger competitor further down the ranking is not consulted.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .models import MatchResult, VerdictStatus

logger = logging.getLogger(__name__)


@dataclass
class Selection:
    """Outcome of ranking and margin comparison.

    Attributes:
        status: Three-state decision
        winner: Top-ranked result (None only for an empty input)
        runner_up: First result of a different base language, if any
        ranked: All results sorted by confidence, registry order on ties
    """

    status: VerdictStatus
    winner: MatchResult | None = None
    runner_up: MatchResult | None = None
    ranked: list[MatchResult] = field(default_factory=list)


def rank_results(results: Sequence[MatchResult]) -> list[MatchResult]:
    """Sort results by confidence, highest first.

    The sort is stable, so equal confidences keep registry order and the
    more specific variant of a base language stays ahead of its fallback.
    """
    return sorted(results, key=lambda result: result.confidence, reverse=True)


def find_runner_up(ranked: Sequence[MatchResult]) -> MatchResult | None:
    """Return the first entry whose base language differs from the leader's."""
    if not ranked:
        return None
    leader_base = ranked[0].base_language
    for result in ranked[1:]:
        if result.base_language != leader_base:
            return result
    return None


def select_winner(results: Sequence[MatchResult], required_margin: float = 2.0) -> Selection:
    """Rank variant scores and decide between confident, tentative and none.

    Args:
        results: One MatchResult per registry variant, in registry order
        required_margin: Ratio the winner must exceed over the runner-up

    Returns:
        Selection with status, winner and runner-up

    Example:
        >>> results = [
        ...     MatchResult(variant_id="en", base_language="english", raw_count=10, confidence=0.2),
        ...     MatchResult(variant_id="de", base_language="german", raw_count=1, confidence=0.0),
        ... ]
        >>> select_winner(results).status
        <VerdictStatus.CONFIDENT: 'confident'>
    """
    ranked = rank_results(results)
    if not ranked:
        return Selection(status=VerdictStatus.NONE)

    winner = ranked[0]
    runner_up = find_runner_up(ranked)

    if winner.confidence == 0.0:
        return Selection(
            status=VerdictStatus.NONE, winner=winner, runner_up=runner_up, ranked=ranked
        )

    if runner_up is None or runner_up.confidence == 0.0:
        status = VerdictStatus.CONFIDENT
    elif winner.confidence / runner_up.confidence > required_margin:
        status = VerdictStatus.CONFIDENT
    else:
        status = VerdictStatus.TENTATIVE

    logger.debug(
        "Selected %s (%.4f) over %s (%.4f): %s",
        winner.variant_id,
        winner.confidence,
        runner_up.variant_id if runner_up else "-",
        runner_up.confidence if runner_up else 0.0,
        status.value,
    )
    return Selection(status=status, winner=winner, runner_up=runner_up, ranked=ranked)
