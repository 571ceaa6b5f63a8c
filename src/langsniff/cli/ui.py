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

"""Rich UI components for CLI output.

Reusable renderers for verdicts, registries and highlighted matches.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from langsniff.core.models import ClassificationVerdict, VerdictStatus
from langsniff.profiles.dictionaries import DictionaryProvider
from langsniff.profiles.registry import LanguageRegistry, LanguageVariant
from langsniff.utils.console import (
    console,
    print_error,
    print_warning,
)

__all__ = [
    "console",
    "print_error",
    "print_warning",
    "print_header",
    "print_verdict",
    "print_registry",
    "highlight_matches",
]

STATUS_STYLES: dict[VerdictStatus, str] = {
    VerdictStatus.CONFIDENT: "green",
    VerdictStatus.TENTATIVE: "yellow",
    VerdictStatus.NONE: "dim",
}


def print_header(title: str, subtitle: str | None = None) -> None:
    """Print a minimal header with title and optional subtitle."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")
    if subtitle:
        console.print(f"[dim]{subtitle}[/dim]")
    console.print()


def _build_scores_table(verdict: ClassificationVerdict, top: int) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Variant")
    table.add_column("Language")
    table.add_column("Matches", justify="right")
    table.add_column("Confidence", justify="right")

    for result in verdict.results[:top]:
        style = "bold" if result.variant_id == verdict.winning_variant_id else ""
        table.add_row(
            result.variant_id,
            result.base_language,
            str(result.raw_count),
            f"{result.confidence:.4f}",
            style=style,
        )
    return table


def print_verdict(verdict: ClassificationVerdict, title: str = "Language", top: int = 5) -> None:
    """Print a verdict panel with the top-ranked variant scores."""
    style = STATUS_STYLES[verdict.status]
    lines = [f"[{style}]Status:[/{style}] {verdict.status.value}  [bold]{verdict.label}[/bold]"]

    if verdict.status != VerdictStatus.NONE:
        lines.append(f"Language: {verdict.winning_base_language}")
        if verdict.runner_up_base_language:
            margin = verdict.margin
            ratio = f"{margin:.2f}" if margin is not None else "∞"
            lines.append(f"Runner-up: {verdict.runner_up_base_language} (ratio {ratio})")
        if not verdict.dictionary_available:
            lines.append("[yellow]⚠ No dictionary installed for this variant[/yellow]")
    lines.append(f"[dim]Words: {verdict.word_count}[/dim]")

    console.print(Panel("\n".join(lines), title=title, border_style=style, padding=(0, 2)))
    if verdict.results and top > 0 and verdict.word_count > 0:
        console.print(_build_scores_table(verdict, top))


def print_registry(
    registry: LanguageRegistry, dictionaries: DictionaryProvider | None = None
) -> None:
    """Print all registry variants grouped by base language."""
    table = Table(title="Language variants", show_header=True, header_style="bold cyan")
    table.add_column("Language")
    table.add_column("Variant")
    table.add_column("Encoding")
    table.add_column("Dictionary")
    table.add_column("Installed", justify="center")
    table.add_column("Words", justify="right")

    for base in registry.base_languages():
        group = registry.variants_for(base)
        for index, variant in enumerate(group):
            installed = variant.dictionary_available(dictionaries)
            table.add_row(
                base if index == 0 else "",
                variant.variant_id,
                variant.encoding,
                variant.dictionary,
                "[green]✓[/green]" if installed else "[red]✗[/red]",
                str(len(variant.words)),
            )
    console.print(table)


def highlight_matches(text: str, variant: LanguageVariant, style: str = "bold magenta") -> Text:
    """Return text with the variant's recognized stopwords highlighted."""
    rendered = Text(text)
    for start, end in variant.matcher.spans(text):
        rendered.stylize(style, start, end)
    return rendered
