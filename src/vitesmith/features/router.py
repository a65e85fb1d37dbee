"""Vue Router wiring."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..config import ProjectOptions
from ..errors import PatternMatchError
from ..files import read_seed_file, write_text_file
from .base import FeatureProvider, FeatureResult

__all__ = ["RouterProvider"]


LOGGER = logging.getLogger(__name__)

_HELLO_WORLD_TAG = re.compile(r"<HelloWorld.*/>")
_HELLO_WORLD_IMPORT = re.compile(r"^[ \t]*import HelloWorld.*\n", re.MULTILINE)


class RouterProvider(FeatureProvider):
    """Create ``src/router`` and a home view, and render routes from ``App.vue``."""

    name = "router"

    def enabled(self, options: ProjectOptions) -> bool:
        return options.router

    def setup(self, project_path: Path, options: ProjectOptions) -> FeatureResult:
        ext = options.script_extension
        context = options.template_context()

        self.renderer.render_to(
            f"router/router.{ext}.tpl",
            project_path / "src" / "router" / f"index.{ext}",
            context,
        )
        self.renderer.render_to(
            "router/Home.vue.tpl",
            project_path / "src" / "views" / "Home.vue",
            context,
        )
        self._patch_app_component(project_path / "src" / "App.vue")

        return FeatureResult.build(
            dependencies=["vue-router"],
            imports=["import router from './router'"],
            use_calls=[".use(router)"],
        )

    def _patch_app_component(self, app_path: Path) -> None:
        content = read_seed_file(app_path, feature=self.name)
        if "<router-view" in content:
            LOGGER.debug("%s already renders <router-view>", app_path)
            return

        tags = _HELLO_WORLD_TAG.findall(content)
        if len(tags) != 1:
            raise PatternMatchError(app_path, _HELLO_WORLD_TAG.pattern, len(tags))

        content = _HELLO_WORLD_TAG.sub("<router-view />", content, count=1)
        content = _HELLO_WORLD_IMPORT.sub("", content, count=1)
        write_text_file(app_path, content)
        LOGGER.debug("replaced HelloWorld with <router-view> in %s", app_path)
