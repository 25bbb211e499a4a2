"""
Stackwiz - Interactive Vite stack wizard

Prompts for a framework, a language and feature packages, then bootstraps
the project, installs the picks one by one and writes placeholder files.
"""

__version__ = "0.1.0"

from stackwiz.catalog import Catalog, Category, Choice, get_catalog
from stackwiz.resolver import resolve, resolve_all
from stackwiz.runner import CommandRunner, ExecutionResult, ExecutionStatus, execute_all
from stackwiz.scaffold import ensure_paths
from stackwiz.wizard import Wizard, WizardReport

__all__ = [
    "Catalog",
    "Category",
    "Choice",
    "get_catalog",
    "resolve",
    "resolve_all",
    "CommandRunner",
    "ExecutionResult",
    "ExecutionStatus",
    "execute_all",
    "ensure_paths",
    "Wizard",
    "WizardReport",
]
