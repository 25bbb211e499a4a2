"""
Stackwiz Prompts - Interactive questions for the wizard

Prompts go through a small ``Prompter`` interface so the wizard can be
driven by something other than a terminal. Any user abort is turned into
PromptCancelled, which the CLI handles once.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import questionary

from stackwiz.errors import PromptCancelled


class Prompter(ABC):
    """Interface for the three prompt shapes the wizard needs."""

    @abstractmethod
    def text(self, message: str, default: str = "") -> str:
        """Free-text answer; blank input means ``default``."""

    @abstractmethod
    def select(self, message: str, choices: list[str]) -> str:
        """Exactly one of ``choices``."""

    @abstractmethod
    def checkbox(self, message: str, choices: list[str]) -> list[str]:
        """Any subset of ``choices``, in display order."""


class QuestionaryPrompter(Prompter):
    """Terminal prompts backed by questionary."""

    def text(self, message: str, default: str = "") -> str:
        answer = _ask(questionary.text(message, default=default))
        return answer.strip() or default

    def select(self, message: str, choices: list[str]) -> str:
        return _ask(questionary.select(message, choices=choices))

    def checkbox(self, message: str, choices: list[str]) -> list[str]:
        return list(_ask(questionary.checkbox(message, choices=choices)))


def _ask(question: questionary.Question) -> Any:
    try:
        answer = question.unsafe_ask()
    except (KeyboardInterrupt, EOFError):
        raise PromptCancelled() from None
    if answer is None:
        raise PromptCancelled()
    return answer
