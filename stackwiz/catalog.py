"""
Stackwiz Catalog - Pydantic models for the option catalog

Defines categories, choices and their directives, plus the built-in
catalogs offered by the wizard. Catalogs are frozen values: they are built
once at import time and passed explicitly to the resolver.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from stackwiz.errors import UnknownCatalogError


# ═══════════════════════════════════════════════════════════════════════════
# ENUMS
# ═══════════════════════════════════════════════════════════════════════════


class DirectiveKind(str, Enum):
    COMMAND = "command"
    NOOP = "noop"
    PATHS = "paths"


# ═══════════════════════════════════════════════════════════════════════════
# CHOICES & CATEGORIES
# ═══════════════════════════════════════════════════════════════════════════


class Choice(BaseModel):
    """A selectable label and the directive it maps to"""

    label: str
    directive: str = ""

    model_config = {"frozen": True}

    @property
    def kind(self) -> DirectiveKind:
        return DirectiveKind.COMMAND if self.directive.strip() else DirectiveKind.NOOP

    @property
    def is_blank(self) -> bool:
        return self.kind == DirectiveKind.NOOP


class Category(BaseModel):
    """Named group of related choices, in display order"""

    name: str
    choices: tuple[Choice, ...] = ()

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_unique_labels(self) -> "Category":
        seen: set[str] = set()
        for choice in self.choices:
            if choice.label in seen:
                raise ValueError(f"Duplicate label {choice.label!r} in category {self.name!r}")
            seen.add(choice.label)
        return self

    @classmethod
    def from_mapping(cls, name: str, options: dict[str, str]) -> "Category":
        """Build a category from an ordered ``{label: directive}`` mapping"""
        return cls(
            name=name,
            choices=tuple(Choice(label=label, directive=directive) for label, directive in options.items()),
        )

    def labels(self) -> list[str]:
        return [c.label for c in self.choices]

    def directive_for(self, label: str) -> str | None:
        """Directive for ``label``, or None when the label is not in this category"""
        return next((c.directive for c in self.choices if c.label == label), None)


class ScaffoldEntry(BaseModel):
    """Logical name for a group of relative paths to scaffold"""

    name: str
    paths: tuple[str, ...]

    model_config = {"frozen": True}

    @property
    def kind(self) -> DirectiveKind:
        return DirectiveKind.PATHS

    @classmethod
    def from_string(cls, name: str, paths: str) -> "ScaffoldEntry":
        """Build an entry from a whitespace-separated path list"""
        return cls(name=name, paths=tuple(paths.split()))


# ═══════════════════════════════════════════════════════════════════════════
# CATALOG
# ═══════════════════════════════════════════════════════════════════════════


class Catalog(BaseModel):
    """Complete option catalog for one wizard flow"""

    name: str
    categories: tuple[Category, ...]
    scaffold: tuple[ScaffoldEntry, ...] = ()
    extras: Category = Field(default_factory=lambda: Category(name="Extras"))

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_unique_categories(self) -> "Catalog":
        names = [c.name for c in self.categories]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate categories in catalog {self.name!r}: {', '.join(duplicates)}")
        return self

    def category(self, name: str) -> Category | None:
        """Get category by name"""
        return next((c for c in self.categories if c.name == name), None)

    def category_names(self) -> list[str]:
        return [c.name for c in self.categories]

    def scaffold_paths(self) -> list[str]:
        """All scaffold paths in catalog order, without duplicates"""
        paths: list[str] = []
        for entry in self.scaffold:
            for path in entry.paths:
                if path not in paths:
                    paths.append(path)
        return paths


# ═══════════════════════════════════════════════════════════════════════════
# BUILT-IN OPTIONS
# ═══════════════════════════════════════════════════════════════════════════


STYLING_OPTIONS = {
    "TailwindCSS": "tailwindcss postcss autoprefixer",
    "Bootstrap": "bootstrap",
    "Styled Components": "styled-components",
    "Emotion": "@emotion/react @emotion/styled",
    "Sass": "sass",
    "Less": "less",
    "Material UI": "@mui/material @emotion/react @emotion/styled",
    "Chakra UI": "@chakra-ui/react @emotion/react @emotion/styled",
}

STATE_OPTIONS = {
    "Redux": "@reduxjs/toolkit react-redux",
    "Zustand": "zustand",
    "Jotai": "jotai",
    "Recoil": "recoil",
    "MobX": "mobx mobx-react-lite",
}

ROUTING_OPTIONS = {
    "React Router": "react-router-dom",
    "Vue Router": "vue-router",
    "Svelte Navigator": "svelte-navigator",
}

UTILITY_OPTIONS = {
    "Lodash": "lodash",
    "Dayjs": "dayjs",
    "Axios": "axios",
    "React Query": "@tanstack/react-query",
}

TESTING_OPTIONS = {
    "Jest": "jest @types/jest ts-jest",
    "Vitest": "vitest",
    "Cypress": "cypress",
    "React Testing Library": "@testing-library/react @testing-library/jest-dom",
}

LINTING_OPTIONS = {
    "ESLint": "eslint",
    "Prettier": "prettier eslint-config-prettier eslint-plugin-prettier",
    "StandardJS": "standard",
}

COMPONENT_OPTIONS = {
    "Material UI": "@mui/material @emotion/react @emotion/styled",
    "Mantine": "@mantine/core @mantine/hooks",
    "Shadcn UI": "",
    "Ant Design": "antd",
    "Radix UI": "@radix-ui/react-accordion @radix-ui/react-dialog",
}

ENV_OPTIONS = {
    "Dotenv": "dotenv",
    "EnvSetup": "",
    "Theme / Dark Mode": "",
}

DEVTOOLS_OPTIONS = {
    "React Icons": "react-icons",
    "Form Handling": "react-hook-form formik",
    "State DevTools": "redux-devtools-extension",
}

SCAFFOLD_PATHS = {
    "Components Folder": "src/components",
    "Pages Folder": "src/pages",
    "Hooks Folder": "src/hooks",
    "Utils Folder": "src/utils",
    "Boilerplate Files": "src/App.tsx src/main.tsx src/index.html",
    "README / LICENSE": "README.md LICENSE",
    "GitHub Actions": ".github/workflows/node.yml",
}

# Extras are complete commands; "{pm}" is filled in with the package manager.
EXTRA_ACTIONS = {
    "Git Initialization": "git init",
    "Start Dev Server": "{pm} run dev",
}

COMPACT_OPTIONS = {
    "TailwindCSS": "tailwindcss postcss autoprefixer",
    "React Router": "react-router-dom",
    "Zustand": "zustand",
    "Axios": "axios",
    "React Query": "@tanstack/react-query",
    "Vitest": "vitest",
    "ESLint": "eslint",
    "Prettier": "prettier",
}


def _build_full_catalog() -> Catalog:
    groups = {
        "Styling": STYLING_OPTIONS,
        "State": STATE_OPTIONS,
        "Routing": ROUTING_OPTIONS,
        "Utilities": UTILITY_OPTIONS,
        "Testing": TESTING_OPTIONS,
        "Linting": LINTING_OPTIONS,
        "Components": COMPONENT_OPTIONS,
        "Env": ENV_OPTIONS,
        "DevTools": DEVTOOLS_OPTIONS,
    }
    return Catalog(
        name="full",
        categories=tuple(Category.from_mapping(name, options) for name, options in groups.items()),
        scaffold=tuple(ScaffoldEntry.from_string(name, paths) for name, paths in SCAFFOLD_PATHS.items()),
        extras=Category.from_mapping("Extras", EXTRA_ACTIONS),
    )


def _build_compact_catalog() -> Catalog:
    return Catalog(
        name="compact",
        categories=(Category.from_mapping("Packages", COMPACT_OPTIONS),),
        scaffold=(
            ScaffoldEntry.from_string("Components Folder", "src/components"),
            ScaffoldEntry.from_string("Utils Folder", "src/utils"),
        ),
        extras=Category.from_mapping("Extras", EXTRA_ACTIONS),
    )


FULL_CATALOG = _build_full_catalog()
COMPACT_CATALOG = _build_compact_catalog()

CATALOGS: dict[str, Catalog] = {
    FULL_CATALOG.name: FULL_CATALOG,
    COMPACT_CATALOG.name: COMPACT_CATALOG,
}


def get_catalog(name: str) -> Catalog:
    """Look up a built-in catalog by name"""
    try:
        return CATALOGS[name]
    except KeyError:
        raise UnknownCatalogError(name, sorted(CATALOGS)) from None
