"""Commit conventions: husky hooks, lint-staged, commitlint and commitizen."""

from __future__ import annotations

from pathlib import Path

from ..config import ProjectOptions
from ..files import write_text_file
from .base import FeatureProvider, FeatureResult

__all__ = ["GitHooksProvider"]


PRE_COMMIT_HOOK = "npx lint-staged\n"
COMMIT_MSG_HOOK = 'npx commitlint --edit "$1"\n'

COMMITIZEN_CONFIG = {"commitizen": {"path": "cz-conventional-changelog"}}


class GitHooksProvider(FeatureProvider):
    """Write the commitlint config and the husky hook scripts.

    Installing husky into ``.git`` is left to the package manager's
    ``prepare`` script.
    """

    name = "git-hooks"

    def enabled(self, options: ProjectOptions) -> bool:
        return options.git_hooks

    def setup(self, project_path: Path, options: ProjectOptions) -> FeatureResult:
        self.renderer.render_to(
            "git/commitlint.config.js.tpl",
            project_path / "commitlint.config.js",
            options.template_context(),
        )
        write_text_file(project_path / ".husky" / "pre-commit", PRE_COMMIT_HOOK)
        write_text_file(project_path / ".husky" / "commit-msg", COMMIT_MSG_HOOK)

        return FeatureResult.build(
            dev_dependencies=[
                "husky",
                "lint-staged",
                "commitizen",
                "cz-conventional-changelog",
                "@commitlint/cli",
                "@commitlint/config-conventional",
            ],
            scripts={"cz": "cz", "prepare": "husky"},
            lint_staged={"*.{js,ts,vue}": "npx eslint --fix"},
            package_config=COMMITIZEN_CONFIG,
        )
