"""VS Code workspace recommendations and settings."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .config import ProjectOptions
from .files import write_json_file
from .template import TemplateRenderer

__all__ = ["extension_recommendations", "write_editor_config"]


ESLINT_SETTINGS = """\
  "prettier.enable": false,
  "editor.formatOnSave": false,
  "editor.codeActionsOnSave": {
    "source.fixAll.eslint": "explicit",
    "source.organizeImports": "never"
  },"""


def extension_recommendations(options: ProjectOptions) -> List[str]:
    recommendations = ["Vue.volar"]
    if options.eslint:
        recommendations.append("dbaeumer.vscode-eslint")
    if options.unocss:
        recommendations.append("antfu.unocss")
    return recommendations


def write_editor_config(project_path: Path, options: ProjectOptions, renderer: TemplateRenderer) -> List[Path]:
    """Write ``.vscode/extensions.json`` and ``.vscode/settings.json``."""

    vscode_dir = project_path / ".vscode"
    extensions = write_json_file(
        vscode_dir / "extensions.json",
        {"recommendations": extension_recommendations(options)},
    )
    settings = renderer.render_to(
        "vscode/settings.json.tpl",
        vscode_dir / "settings.json",
        {"eslintSettings": ESLINT_SETTINGS if options.eslint else ""},
    )
    return [extensions, settings]
