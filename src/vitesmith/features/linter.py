"""ESLint configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import ProjectOptions
from ..errors import ManifestParseError
from ..files import read_json_file, write_json_file
from .base import FeatureProvider, FeatureResult

__all__ = ["LinterProvider"]


LOGGER = logging.getLogger(__name__)

TSCONFIG_NODE = "tsconfig.node.json"


class LinterProvider(FeatureProvider):
    """Write ``eslint.config.*`` and register the ``lint`` script.

    In TypeScript mode the config file is itself TypeScript, so it is added
    to the ``include`` list of ``tsconfig.node.json`` to be type-checked with
    the other build tooling files.
    """

    name = "eslint"

    def enabled(self, options: ProjectOptions) -> bool:
        return options.eslint

    def setup(self, project_path: Path, options: ProjectOptions) -> FeatureResult:
        config_name = f"eslint.config.{options.script_extension}"
        context = {
            **options.template_context(),
            "typeScriptConfig": "typescript: true," if options.typescript else "",
            "unoESLintConfig": "unocss: true," if options.unocss else "",
        }
        self.renderer.render_to("eslint/eslint.config.js.tpl", project_path / config_name, context)

        dev_dependencies = ["eslint", "@antfu/eslint-config"]
        if options.typescript:
            dev_dependencies.append("jiti")
            self._include_in_tsconfig(project_path / TSCONFIG_NODE, config_name)

        return FeatureResult.build(
            dev_dependencies=dev_dependencies,
            scripts={"lint": "eslint . --fix"},
        )

    def _include_in_tsconfig(self, tsconfig_path: Path, config_name: str) -> None:
        tsconfig = read_json_file(tsconfig_path, feature=self.name)
        if not isinstance(tsconfig, dict):
            raise ManifestParseError(tsconfig_path, "expected a JSON object")

        include = tsconfig.get("include") or []
        if not isinstance(include, list):
            raise ManifestParseError(tsconfig_path, "'include' must be a list")
        if config_name in include:
            return

        tsconfig["include"] = [*include, config_name]
        write_json_file(tsconfig_path, tsconfig)
        LOGGER.debug("added %s to %s", config_name, tsconfig_path)
