"""Shared pytest fixtures and configuration for the xbar-tree test suite.

Guidelines
----------
* No external binary (dot, pdflatex, pdftoppm) is ever executed.
* questionary is mocked at the prompt boundary.
* Core tests must be pure — no side effects.
* Interactive input is fed from scripted answer lists.
"""

from __future__ import annotations

from collections.abc import Iterable

import pytest


class ScriptedInput:
    """Callable answer feed that records every question it was asked."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers: list[str] = list(answers)
        self.asked: list[object] = []

    def __call__(self, question: object) -> str:
        self.asked.append(question)
        if not self._answers:
            raise AssertionError(f"unexpected extra prompt: {question!r}")
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


@pytest.fixture
def scripted() -> type[ScriptedInput]:
    """Return the :class:`ScriptedInput` factory."""
    return ScriptedInput
