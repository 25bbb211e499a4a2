"""Shared pytest fixtures for the stackwiz test suite.

Provides reusable fixtures for:
- Temporary working directories
- A scripted prompter standing in for questionary
- A recording runner standing in for the shell
"""

from __future__ import annotations

import io
import shlex
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from stackwiz.catalog import Category
from stackwiz.errors import PromptCancelled
from stackwiz.prompts import Prompter
from stackwiz.runner import CommandRunner, ExecutionResult


CANCEL = object()


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class ScriptedPrompter(Prompter):
    """Answers prompts from a queue. ``CANCEL`` in the queue aborts that prompt."""

    def __init__(self, answers: list[Any]):
        self.answers = list(answers)
        self.asked: list[str] = []

    def _next(self, message: str) -> Any:
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        answer = self.answers.pop(0)
        if answer is CANCEL:
            raise PromptCancelled()
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def text(self, message: str, default: str = "") -> str:
        return self._next(message) or default

    def select(self, message: str, choices: list[str]) -> str:
        answer = self._next(message)
        assert answer in choices
        return answer

    def checkbox(self, message: str, choices: list[str]) -> list[str]:
        return list(self._next(message))


class RecordingRunner(CommandRunner):
    """Records commands instead of running them.

    ``npm create vite@latest <name>`` creates the project directory so the
    wizard can change into it. Commands containing any string in ``fail``
    are reported as failed.
    """

    def __init__(self, fail: tuple[str, ...] = (), create_project: bool = True):
        super().__init__()
        self.commands: list[str] = []
        self.fail = fail
        self.create_project = create_project

    def run(self, directive: str) -> ExecutionResult:
        self.commands.append(directive)
        if any(marker in directive for marker in self.fail):
            return ExecutionResult.failed(directive, "exited with status 1", 1)
        argv = shlex.split(directive)
        if self.create_project and argv[1:3] == ["create", "vite@latest"]:
            (Path.cwd() / argv[3]).mkdir()
        return ExecutionResult.succeeded(directive)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "STACKWIZ_CONFIG",
        "STACKWIZ_PROJECT_NAME",
        "STACKWIZ_PACKAGE_MANAGER",
        "STACKWIZ_CATALOG",
        "STACKWIZ_LOG_LEVEL",
        "STACKWIZ_LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def console() -> Console:
    """Console writing to a buffer; read it back with ``console.file.getvalue()``."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def testing_category() -> Category:
    return Category.from_mapping(
        "Testing",
        {"Jest": "<cmd1>", "Vitest": "<cmd2>", "Cypress": ""},
    )
