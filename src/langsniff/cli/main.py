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

"""Main CLI application entry point for Langsniff.

The CLI is a small host around the classifier: it reads files, chooses the
text windows (whole document or paragraphs) and renders verdicts.
"""

from __future__ import annotations

import typer

from langsniff import __version__
from langsniff.cli.commands.guess import guess
from langsniff.cli.commands.languages import languages
from langsniff.cli.ui import console

app = typer.Typer(
    name="langsniff",
    help="Langsniff - stopword-based language guessing for live text.",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.command()(guess)
app.command()(languages)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Langsniff version: [bold cyan]{__version__}[/bold cyan]")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - Used by Typer callback
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """
    Langsniff - stopword-based language guessing for live text.
    """


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
