"""Tests for the wizard flow (stackwiz.wizard) with scripted prompts."""

from __future__ import annotations

from pathlib import Path

import pytest
from conftest import CANCEL, RecordingRunner, ScriptedPrompter

from stackwiz.catalog import COMPACT_CATALOG, FULL_CATALOG
from stackwiz.config import WizardConfig
from stackwiz.errors import BootstrapError, PromptCancelled, ScaffoldError
from stackwiz.runner import ExecutionStatus
from stackwiz.wizard import Wizard


def full_answers(
    name: str = "shop",
    framework: str = "react",
    language: str = "TypeScript",
    picks: dict[str, list[str]] | None = None,
    extras: list[str] | None = None,
) -> list:
    picks = picks or {}
    answers: list = [name, framework, language]
    answers += [picks.get(category, []) for category in FULL_CATALOG.category_names()]
    answers.append(extras or [])
    return answers


def make_wizard(answers: list, runner: RecordingRunner, console, **config) -> Wizard:
    return Wizard(
        config=WizardConfig(**config),
        prompter=ScriptedPrompter(answers),
        runner=runner,
        console=console,
    )


class TestWizardRun:
    def test_full_run(self, work_dir: Path, console):
        runner = RecordingRunner()
        answers = full_answers(
            picks={
                "Testing": ["Cypress", "Jest"],
                "Styling": ["TailwindCSS"],
                "Components": ["Shadcn UI"],
            },
            extras=["Start Dev Server", "Git Initialization"],
        )

        report = make_wizard(answers, runner, console).run()

        assert runner.commands == [
            "npm create vite@latest shop -- --template react-ts",
            "npm install tailwindcss postcss autoprefixer",
            "npm install jest @types/jest ts-jest",
            "npm install cypress",
            "git init",
            "npm run dev",
        ]
        assert report.project_dir == (work_dir / "shop").resolve()
        assert Path.cwd() == report.project_dir
        assert report.success
        assert len(report.installs) == 3

    def test_scaffold_written(self, work_dir: Path, console):
        report = make_wizard(full_answers(), RecordingRunner(), console).run()

        project = work_dir / "shop"
        assert (project / "src" / "components").is_dir()
        assert (project / "src" / "App.tsx").stat().st_size == 0
        assert (project / ".github" / "workflows" / "node.yml").is_file()
        assert (project / "LICENSE").is_file()
        assert len(report.scaffolded) == 6

    def test_existing_boilerplate_kept(self, work_dir: Path, console):
        class ViteRunner(RecordingRunner):
            def run(self, directive):
                result = super().run(directive)
                if "create vite@latest" in directive:
                    (work_dir / "shop" / "src").mkdir()
                    (work_dir / "shop" / "src" / "main.tsx").write_text("render()\n")
                return result

        make_wizard(full_answers(), ViteRunner(), console).run()
        assert (work_dir / "shop" / "src" / "main.tsx").read_text() == "render()\n"

    def test_no_picks_installs_nothing(self, work_dir: Path, console):
        runner = RecordingRunner()
        report = make_wizard(full_answers(), runner, console).run()

        assert runner.commands == ["npm create vite@latest shop -- --template react-ts"]
        assert report.installs == []
        assert report.extras == []

    def test_javascript_template(self, work_dir: Path, console):
        runner = RecordingRunner()
        make_wizard(full_answers(framework="svelte", language="JavaScript"), runner, console).run()
        assert runner.commands[0] == "npm create vite@latest shop -- --template svelte"

    def test_install_failure_isolated(self, work_dir: Path, console):
        runner = RecordingRunner(fail=("zustand",))
        answers = full_answers(picks={"State": ["Redux", "Zustand", "Jotai"]})

        report = make_wizard(answers, runner, console).run()

        assert [r.status for r in report.installs] == [
            ExecutionStatus.SUCCEEDED,
            ExecutionStatus.FAILED,
            ExecutionStatus.SUCCEEDED,
        ]
        assert not report.success
        output = console.file.getvalue()
        assert "✗ zustand: exited with status 1" in output
        assert "✓ jotai" in output
        assert "Project setup complete" in output

    def test_package_manager_from_config(self, work_dir: Path, console):
        runner = RecordingRunner()
        answers = full_answers(picks={"Utilities": ["Axios"]}, extras=["Start Dev Server"])
        make_wizard(answers, runner, console, package_manager="pnpm").run()

        assert runner.commands[1:] == ["pnpm install axios", "pnpm run dev"]

    def test_compact_catalog(self, work_dir: Path, console):
        runner = RecordingRunner()
        answers = ["shop", "react", "TypeScript", ["Vitest", "Axios"], []]

        report = make_wizard(answers, runner, console, catalog="compact").run()

        assert report.selections == {"Packages": ["Vitest", "Axios"]}
        assert runner.commands[1:] == ["npm install axios", "npm install vitest"]
        assert set(COMPACT_CATALOG.scaffold_paths()) == {"src/components", "src/utils"}


class TestWizardCancellation:
    def test_cancel_on_second_prompt(self, work_dir: Path, console):
        runner = RecordingRunner()
        prompter = ScriptedPrompter(["shop", CANCEL])
        wizard = Wizard(prompter=prompter, runner=runner, console=console)

        with pytest.raises(PromptCancelled):
            wizard.run()

        assert runner.commands == []
        assert list(work_dir.iterdir()) == []

    def test_cancel_during_categories(self, work_dir: Path, console):
        runner = RecordingRunner()
        answers = ["shop", "react", "TypeScript", ["Sass"], CANCEL]

        with pytest.raises(PromptCancelled):
            make_wizard(answers, runner, console).run()

        # Bootstrap already ran; nothing was installed and nothing is cleaned up
        assert runner.commands == ["npm create vite@latest shop -- --template react-ts"]
        assert (work_dir / "shop").is_dir()
        assert not (work_dir / "shop" / "src").exists()

    def test_interrupt_propagates(self, work_dir: Path, console):
        runner = RecordingRunner()
        prompter = ScriptedPrompter(["shop", "react", KeyboardInterrupt()])

        with pytest.raises(KeyboardInterrupt):
            Wizard(prompter=prompter, runner=runner, console=console).run()
        assert runner.commands == []


class TestWizardErrors:
    def test_bootstrap_failure(self, work_dir: Path, console):
        runner = RecordingRunner(fail=("create vite",))
        with pytest.raises(BootstrapError, match="bootstrap failed"):
            make_wizard(full_answers(), runner, console).run()
        assert len(runner.commands) == 1

    @pytest.mark.parametrize("name", ["my app", "shop; touch PWNED", "shop && echo hi"])
    def test_unsafe_name_never_reaches_shell(self, work_dir: Path, console, name):
        runner = RecordingRunner()
        with pytest.raises(BootstrapError, match="invalid project name"):
            make_wizard(full_answers(name=name), runner, console).run()
        assert runner.commands == []
        assert list(work_dir.iterdir()) == []

    def test_bootstrap_without_directory(self, work_dir: Path, console):
        runner = RecordingRunner(create_project=False)
        with pytest.raises(BootstrapError, match="did not create"):
            make_wizard(full_answers(), runner, console).run()

    def test_scaffold_failure_is_fatal(self, work_dir: Path, console):
        class BlockingRunner(RecordingRunner):
            def run(self, directive):
                result = super().run(directive)
                if "create vite@latest" in directive:
                    (work_dir / "shop" / "src").write_text("")
                return result

        runner = BlockingRunner()
        answers = full_answers(extras=["Git Initialization"])

        with pytest.raises(ScaffoldError):
            make_wizard(answers, runner, console).run()
        assert "git init" not in runner.commands
