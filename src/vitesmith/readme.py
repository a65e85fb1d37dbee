"""README generation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List

from .config import CssOption, PackageManager, ProjectOptions
from .template import TemplateRenderer

__all__ = ["build_readme_context", "feature_lines", "write_readme"]


@dataclass(frozen=True, slots=True)
class _FeatureLine:
    applies: Callable[[ProjectOptions], bool]
    text: Callable[[ProjectOptions], str]


_CSS_LABELS = {
    CssOption.SASS: "Sass",
    CssOption.LESS: "Less",
    CssOption.LIGHTNINGCSS: "Lightning CSS",
}

_FEATURE_LINES = (
    _FeatureLine(
        lambda o: o.package_manager is PackageManager.PNPM,
        lambda o: "- **pnpm**: fast, disk space efficient package manager.",
    ),
    _FeatureLine(
        lambda o: o.typescript,
        lambda o: "- **TypeScript**: typed JavaScript for safer refactoring.",
    ),
    _FeatureLine(
        lambda o: o.router,
        lambda o: "- **Vue Router**: the official router for single-page applications.",
    ),
    _FeatureLine(
        lambda o: o.store,
        lambda o: "- **Pinia**: lightweight, type-safe state management for Vue.",
    ),
    _FeatureLine(
        lambda o: o.eslint,
        lambda o: "- **ESLint**: linting and code style checks.",
    ),
    _FeatureLine(
        lambda o: o.css is not CssOption.NONE,
        lambda o: f"- **{_CSS_LABELS[o.css]}**: {_CSS_LABELS[o.css]} CSS processing.",
    ),
    _FeatureLine(
        lambda o: o.unocss,
        lambda o: "- **UnoCSS**: instant on-demand atomic CSS engine.",
    ),
    _FeatureLine(
        lambda o: o.git_hooks,
        lambda o: "- **Git commit conventions**: husky, lint-staged and commitlint.",
    ),
)

BASIC_SETUP_LINE = "- **Vue + Vite**: a minimal Vue 3 application."


def feature_lines(options: ProjectOptions) -> List[str]:
    lines = [line.text(options) for line in _FEATURE_LINES if line.applies(options)]
    return lines or [BASIC_SETUP_LINE]


def _section(text: str) -> str:
    # Sections are separated from what follows by exactly one blank line.
    return text.rstrip("\n") + "\n" if text.strip() else ""


def _quality_tools(options: ProjectOptions, renderer: TemplateRenderer) -> str:
    if not (options.eslint or options.git_hooks):
        return ""

    context = {"packageManager": options.package_manager.value}
    eslint = renderer.render("readme/eslint.md.tpl", context) if options.eslint else ""
    git_hooks = renderer.render("readme/git-hooks.md.tpl", context) if options.git_hooks else ""
    return renderer.render(
        "readme/quality-tools.md.tpl",
        {"eslintSection": _section(eslint), "gitHooksSection": _section(git_hooks)},
    )


def build_readme_context(options: ProjectOptions, renderer: TemplateRenderer) -> Dict[str, str]:
    """Return the context of ``readme/README.md.tpl`` for ``options``."""

    ext = options.script_extension
    pm = options.package_manager.value
    return {
        **options.template_context(),
        "features": "\n".join(feature_lines(options)),
        "mainFileExtension": ext,
        "viteConfigExtension": ext,
        "lintScript": f"- `{pm} run lint`: lint the code and fix problems automatically." if options.eslint else "",
        "routerDir": "│   ├── router/       # route definitions" if options.router else "",
        "storeDir": "│   ├── store/        # Pinia stores" if options.store else "",
        "viewsDir": "│   ├── views/        # page components" if options.router else "",
        "tsconfig": "├── tsconfig.json\n├── tsconfig.node.json" if options.typescript else "",
        "eslintConfig": f"├── eslint.config.{ext}" if options.eslint else "",
        "unocssConfig": f"├── uno.config.{ext}" if options.unocss else "",
        "commitlintConfig": "├── commitlint.config.js\n├── .husky/" if options.git_hooks else "",
        "codeQualityTools": _section(_quality_tools(options, renderer)),
    }


def write_readme(project_path: Path, options: ProjectOptions, renderer: TemplateRenderer) -> Path:
    return renderer.render_to(
        "readme/README.md.tpl",
        project_path / "README.md",
        build_readme_context(options, renderer),
    )
