"""Resolved project options shared by the generator, providers and CLI."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import validate_project_name

__all__ = ["CssOption", "PackageManager", "ProjectOptions"]


class PackageManager(str, Enum):
    """Package managers the generated project can be driven with."""

    PNPM = "pnpm"
    NPM = "npm"


class CssOption(str, Enum):
    """CSS strategy applied on top of the plain stylesheet setup."""

    NONE = "none"
    SASS = "sass"
    LESS = "less"
    LIGHTNINGCSS = "lightningcss"


class ProjectOptions(BaseModel):
    """Finalized feature choices for a single generation run.

    Instances are immutable: the options are resolved once from user input
    and then only read by the rest of the pipeline.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(..., description="Name of the project and of its directory.")
    package_manager: PackageManager = Field(default=PackageManager.PNPM, description="Package manager used for scripts and instructions.")
    typescript: bool = Field(default=True, description="Generate TypeScript sources instead of JavaScript.")
    router: bool = Field(default=False, description="Wire Vue Router into the application.")
    store: bool = Field(default=False, description="Wire a Pinia store into the application.")
    eslint: bool = Field(default=False, description="Add an ESLint configuration and lint script.")
    css: CssOption = Field(default=CssOption.NONE, description="CSS pre-processor or transformer.")
    unocss: bool = Field(default=False, description="Add the UnoCSS atomic CSS engine.")
    git_hooks: bool = Field(default=False, description="Add husky, lint-staged and commitlint conventions.")

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        return validate_project_name(value)

    @property
    def script_extension(self) -> str:
        """File extension of generated script sources (``ts`` or ``js``)."""

        return "ts" if self.typescript else "js"

    def template_context(self) -> Dict[str, str]:
        """Return the values every template may reference."""

        return {
            "projectName": self.project_name,
            "packageManager": self.package_manager.value,
            "scriptExtension": self.script_extension,
        }
