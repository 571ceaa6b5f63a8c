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

"""
Langsniff - stopword-based language guessing for live text.

Classifies the natural language of a text window by counting per-language
stopwords, and only commits to a language when its evidence clearly outranks
the runner-up. Cheap enough to run after every few keystrokes.
"""

__version__ = "0.1.0"

from langsniff.core.engine import classify
from langsniff.core.models import (
    ClassificationVerdict,
    ClassifierConfig,
    MatchResult,
    SessionState,
    VerdictStatus,
)
from langsniff.core.session import ClassificationSession
from langsniff.profiles.registry import (
    LanguageRegistry,
    LanguageVariant,
    builtin_registry,
    load_registry,
)

__all__ = [
    "ClassificationSession",
    "ClassificationVerdict",
    "ClassifierConfig",
    "LanguageRegistry",
    "LanguageVariant",
    "MatchResult",
    "SessionState",
    "VerdictStatus",
    "__version__",
    "builtin_registry",
    "classify",
    "load_registry",
]
