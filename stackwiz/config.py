"""
Stackwiz Config - Typed wizard settings

Defaults cover the usual Vite + npm flow. Settings can be overridden from
environment variables or from a YAML file named by ``STACKWIZ_CONFIG``.
The option catalog itself is compiled in; configuration only picks which
built-in catalog to use.
"""

from __future__ import annotations

import logging
import os
import re
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from stackwiz.catalog import CATALOGS, Catalog, get_catalog


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Directory-safe npm-style project names: no spaces, separators or shell syntax.
PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")

# Placeholders each command template may use.
TEMPLATE_PLACEHOLDERS = {
    "install_command": ("pm", "packages"),
    "bootstrap_command": ("pm", "name", "template"),
}


def check_project_name(name: str) -> str:
    """Return ``name`` if it is usable as a project directory, else raise ValueError"""
    if not PROJECT_NAME_PATTERN.match(name):
        raise ValueError(
            f"invalid project name {name!r}: use letters, digits, '.', '_' or '-'"
        )
    return name


def quote_arg(arg: str, platform: str | None = None) -> str:
    """Quote one argument for the platform shell"""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return subprocess.list2cmdline([arg])
    return shlex.quote(arg)


class WizardConfig(BaseModel):
    """Wizard configuration"""

    default_project_name: str = "my-vite-app"
    frameworks: list[str] = Field(default_factory=lambda: ["react", "vue", "svelte", "vanilla"])
    languages: list[str] = Field(default_factory=lambda: ["JavaScript", "TypeScript"])
    package_manager: str = "npm"
    install_command: str = "{pm} install {packages}"
    bootstrap_command: str = "{pm} create vite@latest {name} -- --template {template}"
    catalog: str = "full"
    log_level: str = "WARNING"
    log_file: Path | None = None

    @field_validator("frameworks", "languages")
    @classmethod
    def validate_not_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("at least one option is required")
        return v

    @field_validator("default_project_name")
    @classmethod
    def validate_project_name(cls, v: str) -> str:
        return check_project_name(v)

    @field_validator("install_command", "bootstrap_command")
    @classmethod
    def validate_command_template(cls, v: str, info: ValidationInfo) -> str:
        allowed = TEMPLATE_PLACEHOLDERS[info.field_name]
        try:
            v.format(**{name: name for name in allowed})
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"invalid template {v!r} ({e}); allowed placeholders: "
                + ", ".join(f"{{{name}}}" for name in allowed)
            ) from None
        return v

    @field_validator("catalog")
    @classmethod
    def validate_catalog(cls, v: str) -> str:
        if v not in CATALOGS:
            raise ValueError(f"unknown catalog {v!r}, expected one of: {', '.join(sorted(CATALOGS))}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"invalid log level {v!r}")
        return level

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)

    def get_catalog(self) -> Catalog:
        return get_catalog(self.catalog)

    def template_for(self, framework: str, language: str) -> str:
        """Vite template name, e.g. ``react-ts`` for React + TypeScript"""
        return f"{framework}-ts" if language == "TypeScript" else framework

    def install_command_for(self, packages: str) -> str:
        return self.install_command.format(pm=self.package_manager, packages=packages.strip())

    def bootstrap_command_for(
        self,
        name: str,
        framework: str,
        language: str,
        platform: str | None = None,
    ) -> str:
        """
        Project creation command line.

        Raises:
            ValueError: if ``name`` is not a valid project name
        """
        check_project_name(name)
        return self.bootstrap_command.format(
            pm=self.package_manager,
            name=quote_arg(name, platform),
            template=quote_arg(self.template_for(framework, language), platform),
        )

    def expand_command(self, command: str) -> str:
        """Fill in ``{pm}`` in an extra-action command"""
        return command.replace("{pm}", self.package_manager)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "WizardConfig":
        """
        Build a config from environment variables.

        Recognised variables (all optional):
            STACKWIZ_PROJECT_NAME, STACKWIZ_PACKAGE_MANAGER, STACKWIZ_CATALOG,
            STACKWIZ_LOG_LEVEL, STACKWIZ_LOG_FILE.
        """
        env_map = {
            "STACKWIZ_PROJECT_NAME": "default_project_name",
            "STACKWIZ_PACKAGE_MANAGER": "package_manager",
            "STACKWIZ_CATALOG": "catalog",
            "STACKWIZ_LOG_LEVEL": "log_level",
            "STACKWIZ_LOG_FILE": "log_file",
        }
        kwargs: dict[str, Any] = {
            field: os.environ[var] for var, field in env_map.items() if os.environ.get(var)
        }
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "WizardConfig":
        """Parse YAML content into a WizardConfig"""
        import yaml

        data = yaml.safe_load(yaml_content) or {}
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "WizardConfig":
        """Load config from a YAML file"""
        content = Path(path).read_text(encoding="utf-8")
        return cls.from_yaml(content)


def load_config() -> WizardConfig:
    """Config from ``$STACKWIZ_CONFIG`` when set, otherwise from the environment."""
    path = os.environ.get("STACKWIZ_CONFIG")
    if path:
        return WizardConfig.from_file(path)
    return WizardConfig.from_env()
