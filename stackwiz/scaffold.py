"""
Stackwiz Scaffold - Placeholder files and directories for a new project

Paths are created relative to the project root. Existing files are never
touched, so running the writer twice leaves the tree unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from stackwiz.errors import ScaffoldError

logger = logging.getLogger(__name__)

# Conventional file names without an extension.
EXTENSIONLESS_FILES = frozenset({
    "LICENSE",
    "LICENCE",
    "NOTICE",
    "AUTHORS",
    "CHANGELOG",
    "Makefile",
    "Dockerfile",
    "Procfile",
})

# Dotfiles that are files even though nothing follows the leading dot.
DOTFILES = frozenset({
    ".env",
    ".gitignore",
    ".gitattributes",
    ".npmrc",
    ".nvmrc",
    ".prettierrc",
    ".prettierignore",
    ".eslintrc",
    ".eslintignore",
    ".editorconfig",
    ".dockerignore",
    ".browserslistrc",
})


def is_file_path(relative_path: str) -> bool:
    """True when the last path segment looks like a file rather than a directory."""
    if relative_path.endswith(("/", "\\")):
        return False
    name = Path(relative_path).name
    if name in EXTENSIONLESS_FILES or name in DOTFILES:
        return True
    # A leading dot alone (".github", ".husky") marks a hidden directory.
    return "." in name.lstrip(".")


def ensure_paths(paths: Iterable[str], root: Path | None = None) -> list[Path]:
    """
    Make sure every path exists under ``root``.

    Missing parent directories are created. File paths are created empty if
    missing; directory paths are created. Nothing is rolled back when a path
    fails: the error propagates and earlier paths stay on disk.

    Args:
        paths: Paths relative to the project root
        root: Project root. Defaults to the current working directory.

    Returns:
        Files created by this call
    """
    root = (root or Path.cwd()).resolve()
    created: list[Path] = []

    for relative_path in paths:
        full_path = root / relative_path
        try:
            if is_file_path(relative_path):
                full_path.parent.mkdir(parents=True, exist_ok=True)
                if not full_path.exists():
                    full_path.touch()
                    created.append(full_path)
                    logger.info("Created %s", relative_path)
            else:
                full_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ScaffoldError(full_path, e) from e

    return created
