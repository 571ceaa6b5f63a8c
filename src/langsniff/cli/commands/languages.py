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

"""Languages command: list the variants of a registry."""

from __future__ import annotations

import typer

from langsniff.cli.ui import console, print_error, print_registry
from langsniff.profiles.dictionaries import DirectoryDictionaryProvider
from langsniff.profiles.registry import load_registry
from langsniff.utils.config import get_settings


def languages(
    registry_path: str | None = typer.Option(
        None, "--registry", "-r", help="YAML registry file (default: built-in)"
    ),
    check_dictionaries: bool = typer.Option(
        True,
        "--dictionaries/--no-dictionaries",
        help="Look up installed hunspell dictionaries",
    ),
) -> None:
    """
    List the language variants known to the classifier.

    Examples:
        langsniff languages
        langsniff languages --registry my_languages.yaml
    """
    settings = get_settings()
    try:
        registry = load_registry(registry_path or settings.registry_path)
    except ValueError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(code=1)

    dictionaries = (
        DirectoryDictionaryProvider(settings.dictionary_paths) if check_dictionaries else None
    )
    print_registry(registry, dictionaries)
    console.print(
        f"[dim]{len(registry)} variants, {len(registry.base_languages())} languages[/dim]"
    )
