"""
Stackwiz Runner - Sequential execution of shell directives

Each directive is a command line handed to the platform shell with the
host's stdio inherited, so package manager output streams live. Directives
run one at a time; a failing directive is recorded and the rest still run.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# RESULTS
# ═══════════════════════════════════════════════════════════════════════════


class ExecutionStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one directive."""

    directive: str
    status: ExecutionStatus
    cause: str | None = None  # Set for failures
    returncode: int | None = None  # None if nothing was spawned

    @property
    def ok(self) -> bool:
        return self.status != ExecutionStatus.FAILED

    @classmethod
    def succeeded(cls, directive: str) -> "ExecutionResult":
        return cls(directive, ExecutionStatus.SUCCEEDED, returncode=0)

    @classmethod
    def failed(cls, directive: str, cause: str, returncode: int | None = None) -> "ExecutionResult":
        return cls(directive, ExecutionStatus.FAILED, cause=cause, returncode=returncode)

    @classmethod
    def skipped(cls, directive: str) -> "ExecutionResult":
        return cls(directive, ExecutionStatus.SKIPPED)


# ═══════════════════════════════════════════════════════════════════════════
# SHELL SELECTION
# ═══════════════════════════════════════════════════════════════════════════


def shell_argv(command: str, platform: str | None = None) -> list[str]:
    """Interpreter argv for ``command``: cmd.exe on Windows, /bin/sh elsewhere."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return ["cmd.exe", "/d", "/s", "/c", command]
    return ["/bin/sh", "-c", command]


# ═══════════════════════════════════════════════════════════════════════════
# RUNNER
# ═══════════════════════════════════════════════════════════════════════════


class CommandRunner:
    """
    Runs directives through the platform shell.

    Output is not captured: stdin, stdout and stderr are inherited from the
    current process. Only the exit status decides success.
    """

    def __init__(self, cwd: Path | None = None, platform: str | None = None):
        self.cwd = cwd
        self.platform = platform

    def run(self, directive: str) -> ExecutionResult:
        """Run one directive to completion."""
        if not directive.strip():
            logger.debug("Skipping blank directive")
            return ExecutionResult.skipped(directive)

        argv = shell_argv(directive, self.platform)
        logger.info("CMD %s", directive)

        try:
            proc = subprocess.run(argv, cwd=self.cwd, check=False)
        except OSError as e:
            logger.warning("Could not start %r: %s", directive, e)
            return ExecutionResult.failed(directive, str(e))

        if proc.returncode != 0:
            cause = f"exited with status {proc.returncode}"
            logger.warning("Command %r %s", directive, cause)
            return ExecutionResult.failed(directive, cause, proc.returncode)

        return ExecutionResult.succeeded(directive)

    def execute_all(self, directives: Iterable[str]) -> list[ExecutionResult]:
        """
        Run directives in order, one after the other.

        A failing directive does not stop the ones after it.

        Args:
            directives: Command lines to run

        Returns:
            One ExecutionResult per directive, in input order
        """
        return [self.run(directive) for directive in directives]


def execute_all(directives: Iterable[str], cwd: Path | None = None) -> list[ExecutionResult]:
    """Run directives sequentially with a default CommandRunner."""
    return CommandRunner(cwd=cwd).execute_all(directives)
