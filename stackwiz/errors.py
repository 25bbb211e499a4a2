"""
Stackwiz Errors - Exception types shared across the wizard
"""

from __future__ import annotations

from pathlib import Path


class StackwizError(Exception):
    """Base class for errors raised by stackwiz"""


class PromptCancelled(StackwizError):
    """The user aborted a prompt. Not a failure: the run stops cleanly."""


class UnknownCatalogError(StackwizError):
    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f"Unknown catalog {name!r} (available: {', '.join(available)})")


class BootstrapError(StackwizError):
    """Project bootstrap failed, so there is no project directory to work in"""


class ScaffoldError(StackwizError):
    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not scaffold {path}: {cause}")
