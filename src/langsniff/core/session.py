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

"""Per-document classification session.

A host keeps one session per tracked document and calls ``classify`` after
edits. The session remembers the last confident winner so listeners (e.g. a
spell checker switching dictionaries) are only notified when it changes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from langsniff.core.engine import classify
from langsniff.core.models import (
    DEFAULT_LANGUAGE,
    ClassificationVerdict,
    ClassifierConfig,
    SessionState,
    VerdictStatus,
)
from langsniff.profiles.dictionaries import DictionaryProvider
from langsniff.profiles.registry import LanguageRegistry, builtin_registry

logger = logging.getLogger(__name__)

ChangeListener = Callable[[ClassificationVerdict], None]


class ClassificationSession:
    """Classify successive windows of one document and track the winner.

    Example:
        >>> session = ClassificationSession()
        >>> session.add_listener(lambda v: print("switch to", v.winning_variant_id))
        >>> _ = session.classify("the cat and the dog sat on the mat with the hat")
        switch to american
        >>> _ = session.classify("the cat and the dog sat on the mat with the hat")
        >>> session.state.current_winner_base_language
        'english'
    """

    def __init__(
        self,
        registry: LanguageRegistry | None = None,
        config: ClassifierConfig | None = None,
        dictionaries: DictionaryProvider | None = None,
    ) -> None:
        self.registry = registry if registry is not None else builtin_registry()
        self.config = config or ClassifierConfig()
        self.dictionaries = dictionaries
        self._state = SessionState()
        self._listeners: list[ChangeListener] = []
        self.last_verdict: ClassificationVerdict | None = None

    @property
    def state(self) -> SessionState:
        """Copy of the current session state."""
        return self._state.model_copy()

    def add_listener(self, listener: ChangeListener) -> None:
        """Register a callback fired when a new confident winner is adopted."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ChangeListener) -> bool:
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    def reset(self) -> None:
        """Return to the initial no-winner state."""
        self._state = SessionState()
        self.last_verdict = None

    def classify(self, text: str, word_count: int | None = None) -> ClassificationVerdict:
        """Classify a window and update the session state.

        Args:
            text: Text window chosen by the host
            word_count: Total words in the window; counted with count_words if None

        Returns:
            ClassificationVerdict for this window
        """
        verdict = classify(
            text,
            self.registry,
            self.config,
            word_count=word_count,
            dictionaries=self.dictionaries,
        )
        self._apply(verdict)
        self.last_verdict = verdict
        return verdict

    def _apply(self, verdict: ClassificationVerdict) -> None:
        if verdict.status != VerdictStatus.CONFIDENT:
            if self._state.has_confidence:
                logger.debug(
                    "Lost confidence in %s (%s)",
                    self._state.current_winner_base_language,
                    verdict.status.value,
                )
            self._state = SessionState(
                current_winner_base_language=DEFAULT_LANGUAGE,
                current_winner_has_dictionary=False,
                has_confidence=False,
            )
            return

        if self._state.matches(verdict):
            return

        self._state = SessionState(
            current_winner_base_language=verdict.winning_base_language,
            current_winner_has_dictionary=verdict.dictionary_available,
            has_confidence=True,
        )
        if verdict.dictionary_available:
            logger.info("Switched language to %s", verdict.winning_variant_id)
        else:
            logger.warning(
                "Detected %s (%s) but no dictionary is available",
                verdict.winning_base_language,
                verdict.winning_variant_id,
            )
        self._notify(verdict)

    def _notify(self, verdict: ClassificationVerdict) -> None:
        for listener in list(self._listeners):
            try:
                listener(verdict)
            except Exception as e:
                logger.error("Language change listener failed: %s", e, exc_info=True)
