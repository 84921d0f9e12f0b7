"""Regression tests for optional CLI UI dependencies (rich/questionary).

These tests verify bootstrap commands are resilient when optional UI
packages are missing, and interactive flows fail cleanly only when UI
paths are actually exercised.
"""

from __future__ import annotations

import sys

import pytest

from xbar_tree.cli import exit_codes
from xbar_tree.cli.app import main
from xbar_tree.cli.console import configure_logging, console
from xbar_tree.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_doctor_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    code = main(["doctor"])
    assert code in (exit_codes.SUCCESS, exit_codes.GENERAL_ERROR)


def test_doctor_fails_without_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_questionary(monkeypatch)

    assert main(["doctor"]) == exit_codes.GENERAL_ERROR


def test_build_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_questionary(monkeypatch)

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        main(["--renderer", "none"])


def test_merge_prompt_errors_cleanly_when_rich_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        main(["the cat", "--renderer", "none"])


def test_single_word_builds_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    """A one-word sentence never shows the merge table, so Rich is not needed."""
    _hide_rich(monkeypatch)
    monkeypatch.setattr("xbar_tree.cli.prompts._ask_text", lambda message: "N")

    assert main(["cats", "--renderer", "none"]) == exit_codes.SUCCESS
    assert "[N cats]" in capsys.readouterr().err


def test_plain_console_does_not_escape(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert console.escape("[N cats]") == "[N cats]"


def test_logging_falls_back_to_stream_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    import logging

    _hide_rich(monkeypatch)
    configure_logging(verbose=True)

    logger = logging.getLogger("xbar_tree")
    assert logger.level == logging.DEBUG
    assert isinstance(logger.handlers[0], logging.StreamHandler)
