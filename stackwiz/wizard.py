"""
Stackwiz Wizard - Prompt-driven project setup

Sequences the prompts and dispatches into the resolver, the runner and the
scaffold writer:

    name -> framework -> language -> bootstrap -> category selections
         -> install -> scaffold -> extra actions

Prompt cancellation is not handled here; PromptCancelled propagates to the
caller, which stops the run without cleanup.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stackwiz.catalog import Catalog
from stackwiz.config import WizardConfig
from stackwiz.errors import BootstrapError
from stackwiz.prompts import Prompter, QuestionaryPrompter
from stackwiz.resolver import resolve, resolve_all
from stackwiz.runner import CommandRunner, ExecutionResult, ExecutionStatus
from stackwiz.scaffold import ensure_paths

logger = logging.getLogger(__name__)


@dataclass
class WizardReport:
    """Everything one wizard run did."""

    project_name: str
    project_dir: Path
    framework: str
    language: str
    selections: dict[str, list[str]] = field(default_factory=dict)
    installs: list[ExecutionResult] = field(default_factory=list)
    scaffolded: list[Path] = field(default_factory=list)
    extras: list[ExecutionResult] = field(default_factory=list)

    @property
    def failures(self) -> list[ExecutionResult]:
        return [r for r in self.installs + self.extras if r.status == ExecutionStatus.FAILED]

    @property
    def success(self) -> bool:
        return len(self.failures) == 0


class Wizard:
    """
    Interactive project wizard.

    Collaborators are injected so the flow can run against scripted prompts
    and a recording runner.
    """

    def __init__(
        self,
        config: WizardConfig | None = None,
        prompter: Prompter | None = None,
        runner: CommandRunner | None = None,
        console: Console | None = None,
        catalog: Catalog | None = None,
    ):
        self.config = config or WizardConfig()
        self.prompter = prompter or QuestionaryPrompter()
        self.runner = runner or CommandRunner()
        self.console = console or Console()
        self.catalog = catalog or self.config.get_catalog()

    def run(self) -> WizardReport:
        """Run the whole wizard. Raises PromptCancelled if the user aborts."""
        self.console.print("\n🚀 Welcome to Vite Stack Wizard!\n", style="cyan")

        name = self.prompter.text("Project name:", default=self.config.default_project_name)
        framework = self.prompter.select("Choose a framework:", self.config.frameworks)
        language = self.prompter.select("Choose a language:", self.config.languages)

        project_dir = self._bootstrap(name, framework, language)
        os.chdir(project_dir)
        self.console.print(f"\n📂 Switched to project folder: {name}\n", style="cyan")

        report = WizardReport(
            project_name=name,
            project_dir=project_dir,
            framework=framework,
            language=language,
        )

        report.selections = self._ask_selections()
        directives = resolve_all(self.catalog, report.selections)
        report.installs = self._install(directives)

        report.scaffolded = ensure_paths(self.catalog.scaffold_paths(), project_dir)
        if report.scaffolded:
            self.console.print(f"[green]✓[/green] Scaffolded {len(report.scaffolded)} files")

        extras = self.prompter.checkbox("Extra actions:", self.catalog.extras.labels())
        report.extras = self._run_extras(extras)

        self._show_summary(report)
        self.console.print("\n✨ Project setup complete!", style="magenta")
        return report

    # ═══════════════════════════════════════════════════════════════════════
    # STEPS
    # ═══════════════════════════════════════════════════════════════════════

    def _bootstrap(self, name: str, framework: str, language: str) -> Path:
        """Create the Vite project and return its directory."""
        try:
            command = self.config.bootstrap_command_for(name, framework, language)
        except ValueError as e:
            raise BootstrapError(str(e)) from e

        self.console.print(f"\n📦 Creating Vite app: {escape(name)}\n", style="green")
        result = self.runner.run(command)
        if not result.ok:
            raise BootstrapError(f"Project bootstrap failed: {result.cause}")

        project_dir = (Path.cwd() / name).resolve()
        if not project_dir.is_dir():
            raise BootstrapError(f"Bootstrap did not create {project_dir}")

        logger.info("Bootstrapped %s (%s) in %s", name, command, project_dir)
        return project_dir

    def _ask_selections(self) -> dict[str, list[str]]:
        selections: dict[str, list[str]] = {}
        for category in self.catalog.categories:
            selections[category.name] = self.prompter.checkbox(
                f"Choose {category.name} options:",
                category.labels(),
            )
        return selections

    def _install(self, directives: list[str]) -> list[ExecutionResult]:
        if not directives:
            return []

        self.console.print("\n📦 Installing npm packages...\n", style="green")
        results: list[ExecutionResult] = []
        for packages in directives:
            command = self.config.install_command_for(packages)
            result = self.runner.run(command)
            self._print_result(result, packages)
            results.append(result)
        return results

    def _run_extras(self, labels: list[str]) -> list[ExecutionResult]:
        results: list[ExecutionResult] = []
        for command in resolve(self.catalog.extras, labels):
            command = self.config.expand_command(command)
            self.console.print(f"\n▶ {command}\n", style="green")
            result = self.runner.run(command)
            self._print_result(result, command)
            results.append(result)
        return results

    # ═══════════════════════════════════════════════════════════════════════
    # OUTPUT
    # ═══════════════════════════════════════════════════════════════════════

    def _print_result(self, result: ExecutionResult, label: str) -> None:
        if result.status == ExecutionStatus.SUCCEEDED:
            self.console.print(f"[green]✓[/green] {escape(label)}")
        elif result.status == ExecutionStatus.FAILED:
            self.console.print(f"[red]✗[/red] {escape(label)}: {result.cause}")
        else:
            self.console.print(f"[yellow]-[/yellow] {escape(label)} (skipped)")

    def _show_summary(self, report: WizardReport) -> None:
        """Show install and extra-action results."""
        rows = report.installs + report.extras
        if not rows:
            return

        table = Table(title=report.project_name)
        table.add_column("Step", style="cyan")
        table.add_column("Status")

        styles = {
            ExecutionStatus.SUCCEEDED: "[green]succeeded[/green]",
            ExecutionStatus.FAILED: "[red]failed[/red]",
            ExecutionStatus.SKIPPED: "[yellow]skipped[/yellow]",
        }
        for result in rows:
            table.add_row(escape(result.directive), styles[result.status])

        self.console.print(table)
