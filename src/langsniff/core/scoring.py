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

"""Match-density confidence scoring.

The score is ``K * matches / sqrt(words)``. It is a ranking value, not a
probability: it grows with the number of stopword hits and shrinks as the
same hits are spread over a longer window.
"""

from __future__ import annotations

import math

from .models import DEFAULT_SCALE_CONSTANT, ClassifierConfig


def confidence(
    raw_count: int,
    total_word_count: int,
    *,
    min_matches: int = 2,
    scale: float = DEFAULT_SCALE_CONSTANT,
) -> float:
    """Compute the confidence of a variant from its match count.

    Args:
        raw_count: Stopword occurrences found in the window
        total_word_count: Words in the window
        min_matches: Counts below this are treated as no evidence
        scale: Scaling constant K

    Returns:
        Non-negative confidence, 0.0 meaning no evidence

    Example:
        >>> round(confidence(8, 100), 4)
        0.1131
        >>> confidence(1, 100)
        0.0
    """
    if total_word_count <= 0 or raw_count <= 0 or raw_count < min_matches:
        return 0.0
    return scale * (raw_count / math.sqrt(total_word_count))


def score_with_config(raw_count: int, total_word_count: int, config: ClassifierConfig) -> float:
    """Compute confidence using the thresholds held in a ClassifierConfig."""
    return confidence(
        raw_count,
        total_word_count,
        min_matches=config.min_matches,
        scale=config.confidence_scale_constant,
    )
