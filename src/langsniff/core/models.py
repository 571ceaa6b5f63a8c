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

"""Core data models for stopword-based language classification.

This module defines the value objects exchanged between the engine and its hosts:
- Classifier configuration (thresholds and scaling)
- Per-variant match results
- Classification verdicts and their three-state status
- Per-document session state
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Sentinel base language recorded when no language has won
DEFAULT_LANGUAGE = "default"

# sqrt(2)/10: a window where every word matched scores close to 1
DEFAULT_SCALE_CONSTANT = math.sqrt(2) / 10


class VerdictStatus(str, Enum):
    """Outcome of a single classification run.

    - Confident: the top base language beats the runner-up by the required margin
    - Tentative: a likely candidate exists but the margin is not met
    - None: no variant produced usable evidence
    """

    CONFIDENT = "confident"
    TENTATIVE = "tentative"
    NONE = "none"


class ClassifierConfig(BaseModel):
    """Tunable thresholds for scoring and winner selection."""

    min_matches: int = Field(
        default=2,
        ge=0,
        description="Matches below this count are forced to zero confidence",
    )
    required_confidence_margin: float = Field(
        default=2.0,
        gt=0.0,
        allow_inf_nan=False,
        description="Winner/runner-up confidence ratio that must be exceeded",
    )
    confidence_scale_constant: float = Field(
        default=DEFAULT_SCALE_CONSTANT,
        gt=0.0,
        allow_inf_nan=False,
        description="Scaling constant K in K * count / sqrt(words)",
    )

    model_config = ConfigDict(frozen=True)


class MatchResult(BaseModel):
    """Score of one language variant against one text window."""

    variant_id: str = Field(..., description="Variant identifier (e.g., 'deutsch8')")
    base_language: str = Field(..., description="Base language grouping key (e.g., 'german')")
    raw_count: int = Field(default=0, ge=0, description="Stopword occurrences found")
    confidence: float = Field(default=0.0, ge=0.0, description="Ranking score, 0 = no evidence")

    model_config = ConfigDict(frozen=True)


class ClassificationVerdict(BaseModel):
    """Result of one classification run.

    The winning fields are empty strings when the status is NONE.
    ``dictionary_available`` is only meaningful when a candidate is reported.
    """

    status: VerdictStatus = Field(..., description="Confident, tentative or none")
    winning_base_language: str = Field(default="", description="Winning base language")
    winning_variant_id: str = Field(default="", description="Display/dictionary variant")
    dictionary_available: bool = Field(
        default=False, description="Whether the winning variant's dictionary is installed"
    )
    confidence: float = Field(default=0.0, ge=0.0, description="Winner confidence")
    runner_up_base_language: str = Field(
        default="", description="First distinct base language after the winner"
    )
    runner_up_confidence: float = Field(default=0.0, ge=0.0, description="Runner-up confidence")
    word_count: int = Field(default=0, ge=0, description="Total words in the window")
    results: list[MatchResult] = Field(
        default_factory=list, description="All variant scores, ranked"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def is_confident(self) -> bool:
        return self.status == VerdictStatus.CONFIDENT

    @property
    def label(self) -> str:
        """Compact status text: ``id`` when confident, ``[id]`` when tentative, ``-`` otherwise."""
        if self.status == VerdictStatus.CONFIDENT:
            return self.winning_variant_id
        if self.status == VerdictStatus.TENTATIVE:
            return f"[{self.winning_variant_id}]"
        return "-"

    @property
    def margin(self) -> float | None:
        """Winner/runner-up confidence ratio, None when the runner-up has no evidence."""
        if self.runner_up_confidence <= 0.0:
            return None
        return self.confidence / self.runner_up_confidence


class SessionState(BaseModel):
    """Last decision held for one document.

    Only ClassificationSession mutates this object.
    """

    current_winner_base_language: str = Field(default=DEFAULT_LANGUAGE)
    current_winner_has_dictionary: bool = Field(default=False)
    has_confidence: bool = Field(default=False)

    def matches(self, verdict: ClassificationVerdict) -> bool:
        """Check whether a confident verdict would leave this state unchanged."""
        return (
            self.has_confidence
            and self.current_winner_base_language == verdict.winning_base_language
            and self.current_winner_has_dictionary == verdict.dictionary_available
        )
