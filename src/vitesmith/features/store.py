"""Pinia store wiring."""

from __future__ import annotations

from pathlib import Path

from ..config import ProjectOptions
from .base import FeatureProvider, FeatureResult

__all__ = ["StoreProvider"]


class StoreProvider(FeatureProvider):
    """Create ``src/store`` with the Pinia instance and an example store."""

    name = "store"

    def enabled(self, options: ProjectOptions) -> bool:
        return options.store

    def setup(self, project_path: Path, options: ProjectOptions) -> FeatureResult:
        ext = options.script_extension
        store_dir = project_path / "src" / "store"
        context = options.template_context()

        self.renderer.render_to(f"store/index.{ext}.tpl", store_dir / f"index.{ext}", context)
        self.renderer.render_to(f"store/counter.{ext}.tpl", store_dir / f"counter.{ext}", context)

        return FeatureResult.build(
            dependencies=["pinia"],
            imports=["import pinia from './store'"],
            use_calls=[".use(pinia)"],
        )
