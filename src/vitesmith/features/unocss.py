"""UnoCSS atomic CSS engine."""

from __future__ import annotations

from pathlib import Path

from ..config import ProjectOptions
from ..files import read_seed_file, write_text_file
from ..viteconfig import add_imports, add_plugin, vite_config_path
from .base import FeatureProvider, FeatureResult

__all__ = ["UnoCSSProvider"]


class UnoCSSProvider(FeatureProvider):
    """Write ``uno.config.*`` and register the Vite plugin."""

    name = "unocss"

    def enabled(self, options: ProjectOptions) -> bool:
        return options.unocss

    def setup(self, project_path: Path, options: ProjectOptions) -> FeatureResult:
        self.renderer.render_to(
            "unocss/uno.config.js.tpl",
            project_path / f"uno.config.{options.script_extension}",
            options.template_context(),
        )

        config_path = vite_config_path(project_path, options.typescript)
        content = read_seed_file(config_path, feature=self.name)
        content = add_imports(content, ["import UnoCSS from 'unocss/vite'"], path=config_path)
        content = add_plugin(content, "UnoCSS()", path=config_path)
        write_text_file(config_path, content)

        return FeatureResult.build(
            dev_dependencies=["unocss", "@unocss/eslint-plugin"],
            imports=["import 'virtual:uno.css'"],
        )
