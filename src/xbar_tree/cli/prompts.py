"""Interactive prompts for the three construction phases.

This module is responsible for:

* Asking for the sentence until it holds at least one word.
* Rendering the current constituent list as a Rich table and asking
  which two neighbours to merge.
* Asking for one mark per node, showing the node's context.

All display-related logic lives here — no tree logic.  Each prompt
returns the raw line; parsing and validation belong to the core.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from xbar_tree.cli.console import console
from xbar_tree.core.merge_engine import tokenize
from xbar_tree.core.models import Constituent, Word
from xbar_tree.exceptions import EmptySentenceError, EnvironmentError, InputCancelledError, InputError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for constituent rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Low-level input
# ---------------------------------------------------------------------------

def _ask_text(message: str) -> str:
    """Ask one free-text question.

    Raises
    ------
    InputCancelledError
        If the user cancels the prompt (questionary returns ``None``).
    """
    questionary = _import_questionary()
    answer: str | None = questionary.text(message).ask()  # None on Ctrl+C / Esc
    if answer is None:
        raise InputCancelledError("Input cancelled.")
    return answer


def report_rejection(exc: InputError) -> None:
    """Show a recoverable input error before the prompt is repeated."""
    console.print(f"[red]{console.escape(str(exc))}[/red]")
    if exc.hint:
        console.print(f"[dim]{console.escape(exc.hint)}[/dim]")


# ---------------------------------------------------------------------------
# Phase 1 — sentence
# ---------------------------------------------------------------------------

def prompt_sentence() -> list[Word]:
    """Ask for a sentence until it contains at least one word."""
    while True:
        raw = _ask_text("Sentence:")
        try:
            return tokenize(raw)
        except EmptySentenceError as exc:
            report_rejection(exc)


# ---------------------------------------------------------------------------
# Phase 2 — merge selection
# ---------------------------------------------------------------------------

def _display_constituents(sequence: Sequence[Constituent]) -> None:
    """Print a Rich table of the current constituents, numbered from 1."""
    table_class = _import_rich_table()

    table = table_class(
        title="Constituents",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Constituent", justify="left", min_width=10)

    for i, constituent in enumerate(sequence, start=1):
        table.add_row(str(i), console.escape(constituent.display()))

    console.print()
    console.print(table)


def prompt_merge(sequence: Sequence[Constituent]) -> str:
    """Show *sequence* and return the raw answer to "which two merge?"."""
    _display_constituents(sequence)
    return _ask_text("Which two should merge?")


# ---------------------------------------------------------------------------
# Phase 3 — marks
# ---------------------------------------------------------------------------

def prompt_mark(context: str) -> str:
    """Show a ``[? ...]`` node context and return the raw mark."""
    console.print(f"Constituent [cyan]{console.escape(context)}[/cyan]")
    return _ask_text("What is this?")
