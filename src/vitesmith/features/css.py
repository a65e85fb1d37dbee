"""CSS pre-processors and the Lightning CSS transformer."""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import CssOption, ProjectOptions
from ..files import read_seed_file, write_text_file
from ..viteconfig import add_config_block, add_imports, vite_config_path
from .base import FeatureProvider, FeatureResult

__all__ = ["CSSProvider"]


LOGGER = logging.getLogger(__name__)

LIGHTNINGCSS_IMPORTS = (
    "import browserslist from 'browserslist'",
    "import { browserslistToTargets } from 'lightningcss'",
)

LIGHTNINGCSS_CONFIG = """\
css: {
  transformer: 'lightningcss',
  lightningcss: {
    targets: browserslistToTargets(browserslist('>= 0.25%')),
  },
},
build: {
  cssMinify: 'lightningcss',
},"""

# Pre-processors need nothing but their compiler; Vite picks them up by file
# extension.
_PREPROCESSOR_PACKAGES = {
    CssOption.SASS: ("sass",),
    CssOption.LESS: ("less",),
}


class CSSProvider(FeatureProvider):
    """Install the selected CSS strategy.

    The Lightning CSS transformer is configured by editing the shared
    ``vite.config`` file directly instead of going through the merged effects.
    """

    name = "css"

    def enabled(self, options: ProjectOptions) -> bool:
        return options.css is not CssOption.NONE

    def setup(self, project_path: Path, options: ProjectOptions) -> FeatureResult:
        if options.css is CssOption.LIGHTNINGCSS:
            self._configure_lightningcss(vite_config_path(project_path, options.typescript))
            return FeatureResult.build(dev_dependencies=["lightningcss", "browserslist"])

        return FeatureResult.build(dev_dependencies=_PREPROCESSOR_PACKAGES[options.css])

    def _configure_lightningcss(self, config_path: Path) -> None:
        content = read_seed_file(config_path, feature=self.name)
        content = add_imports(content, LIGHTNINGCSS_IMPORTS, path=config_path)
        content = add_config_block(
            content,
            LIGHTNINGCSS_CONFIG,
            marker="transformer: 'lightningcss'",
            path=config_path,
        )
        write_text_file(config_path, content)
        LOGGER.debug("configured lightningcss in %s", config_path)
