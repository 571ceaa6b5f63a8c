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

"""Core classification engine: matching, scoring, selection and sessions."""

from langsniff.core.engine import classify, score_variants
from langsniff.core.matcher import StopwordMatcher
from langsniff.core.models import (
    DEFAULT_LANGUAGE,
    DEFAULT_SCALE_CONSTANT,
    ClassificationVerdict,
    ClassifierConfig,
    MatchResult,
    SessionState,
    VerdictStatus,
)
from langsniff.core.scoring import confidence
from langsniff.core.selector import Selection, find_runner_up, rank_results, select_winner
from langsniff.core.session import ClassificationSession

__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_SCALE_CONSTANT",
    "ClassificationSession",
    "ClassificationVerdict",
    "ClassifierConfig",
    "MatchResult",
    "Selection",
    "SessionState",
    "StopwordMatcher",
    "VerdictStatus",
    "classify",
    "confidence",
    "find_runner_up",
    "rank_results",
    "score_variants",
    "select_winner",
]
