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

"""Guess command: classify the language of a text file."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

import typer

from langsniff.cli.ui import (
    console,
    highlight_matches,
    print_error,
    print_header,
    print_verdict,
    print_warning,
)
from langsniff.core.models import ClassificationVerdict, VerdictStatus
from langsniff.core.session import ClassificationSession
from langsniff.profiles.dictionaries import DirectoryDictionaryProvider
from langsniff.profiles.registry import load_registry
from langsniff.utils.config import get_settings
from langsniff.utils.text import count_words, split_paragraphs

logger = logging.getLogger(__name__)


class Scope(str, Enum):
    """Which windows of the file are classified."""

    DOCUMENT = "document"
    PARAGRAPH = "paragraph"


def _verdict_payload(verdict: ClassificationVerdict, offset: int = 0) -> dict[str, Any]:
    payload = verdict.model_dump(mode="json", exclude={"results"})
    payload["offset"] = offset
    payload["label"] = verdict.label
    return payload


def guess(
    file: str = typer.Argument(..., help="Text file to classify"),
    scope: Scope = typer.Option(
        Scope.DOCUMENT, "--scope", "-s", help="Classify the whole file or each paragraph"
    ),
    min_matches: int | None = typer.Option(
        None, "--min-matches", help="Minimum stopword matches to count as evidence"
    ),
    margin: float | None = typer.Option(
        None, "--margin", "-m", help="Required confidence ratio over the runner-up"
    ),
    registry_path: str | None = typer.Option(
        None, "--registry", "-r", help="YAML registry file (default: built-in)"
    ),
    check_dictionaries: bool = typer.Option(
        True,
        "--dictionaries/--no-dictionaries",
        help="Look up installed hunspell dictionaries",
    ),
    highlight: bool = typer.Option(False, "--highlight", help="Highlight recognized stopwords"),
    as_json: bool = typer.Option(False, "--json", help="Print verdicts as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Verbose logging"),
) -> None:
    """
    Guess the language of a text file from its stopwords.

    Exit codes:
        0 - Classification ran (any verdict)
        1 - File or configuration error

    Examples:
        # Whole document
        langsniff guess notes.txt

        # Paragraph by paragraph, stricter margin
        langsniff guess notes.txt --scope paragraph --margin 3
    """
    settings = get_settings()
    if verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=log_level, format="%(message)s", force=True)

    try:
        file_path = Path(file)
        if not file_path.is_file():
            print_error(f"Error: File not found: {file}")
            raise typer.Exit(code=1)

        text = file_path.read_text(encoding="utf-8")
        registry = load_registry(registry_path or settings.registry_path)
        config = settings.to_classifier_config(
            min_matches=min_matches, required_confidence_margin=margin
        )
        dictionaries = (
            DirectoryDictionaryProvider(settings.dictionary_paths) if check_dictionaries else None
        )

        session = ClassificationSession(registry, config, dictionaries)
        switches: list[ClassificationVerdict] = []
        session.add_listener(switches.append)

        if scope == Scope.PARAGRAPH:
            windows = split_paragraphs(text)
        else:
            windows = [(0, text)]

        verdicts = [
            (offset, window, session.classify(window, count_words(window)))
            for offset, window in windows
        ]

        if as_json:
            typer.echo(
                json.dumps(
                    [_verdict_payload(verdict, offset) for offset, _, verdict in verdicts],
                    ensure_ascii=False,
                    indent=2,
                )
            )
            return

        print_header(
            f"Language guess: {file_path.name}",
            f"{len(verdicts)} window(s), scope {scope.value}",
        )
        for index, (offset, window, verdict) in enumerate(verdicts, start=1):
            title = (
                "Document" if scope == Scope.DOCUMENT else f"Paragraph {index} (offset {offset})"
            )
            print_verdict(verdict, title=title)
            if check_dictionaries and verdict.is_confident and not verdict.dictionary_available:
                print_warning(f"No dictionary installed for {verdict.winning_variant_id}")
            if highlight and verdict.status != VerdictStatus.NONE:
                variant = registry.get(verdict.winning_variant_id)
                if variant is not None:
                    console.print(highlight_matches(window, variant))
            console.print()

        if scope == Scope.PARAGRAPH:
            console.print(f"[dim]Language switches: {len(switches)}[/dim]")

    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Error: {e}")
        raise typer.Exit(code=1)
