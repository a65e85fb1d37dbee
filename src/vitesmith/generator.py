"""End-to-end generation pipeline for a scaffolded Vite + Vue project."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .bootstrap import BootstrapMutator, EntryFile, entry_file_path
from .compose import AccumulatedEffects, CompositionOrchestrator
from .config import PackageManager, ProjectOptions
from .editor import write_editor_config
from .errors import MissingSeedFileError
from .features import FeatureProvider, default_providers
from .files import read_seed_file, write_text_file
from .manifest import ManifestDocument, ManifestMerger
from .readme import write_readme
from .template import TemplateRenderer

__all__ = ["GenerationResult", "ProjectGenerator"]


LOGGER = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of :meth:`ProjectGenerator.generate`."""

    project_path: Path
    effects: AccumulatedEffects
    manifest: ManifestDocument
    entry_file: Path


class ProjectGenerator:
    """Apply the selected features to a seed project created by ``create vite``.

    The seed manifest and entry file are read and validated before any
    provider runs, and they are rewritten only once every provider succeeded
    and both rewrites were computed in memory. The manifest is written first,
    so a failed manifest write leaves the entry file untouched.
    """

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        providers: Sequence[FeatureProvider] | None = None,
        *,
        orchestrator: CompositionOrchestrator | None = None,
        mutator: BootstrapMutator | None = None,
        merger: ManifestMerger | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.providers = list(providers) if providers is not None else default_providers(self.renderer)
        self.orchestrator = orchestrator or CompositionOrchestrator()
        self.mutator = mutator or BootstrapMutator()
        self.merger = merger or ManifestMerger()

    def generate(self, project_path: str | Path, options: ProjectOptions) -> GenerationResult:
        """Compose every enabled feature into the project at ``project_path``."""

        project_path = Path(project_path).expanduser().resolve()
        if not project_path.is_dir():
            raise MissingSeedFileError(project_path)

        manifest_path = project_path / MANIFEST_NAME
        entry_path = entry_file_path(project_path, options.typescript)

        manifest = ManifestDocument.load(manifest_path)
        entry_content = read_seed_file(entry_path)
        EntryFile.parse(entry_content, factory=self.mutator.factory, path=entry_path)

        LOGGER.info("composing features for %s", options.project_name)
        effects = self.orchestrator.compose(project_path, options, self.providers)

        dev_dependencies = list(effects.dev_dependencies)
        if options.package_manager is PackageManager.PNPM and "pnpm" not in dev_dependencies:
            dev_dependencies.append("pnpm")

        new_entry = self.mutator.mutate(
            entry_content, effects.imports, effects.use_calls, path=entry_path
        )
        new_manifest = self.merger.merge(
            manifest,
            effects.scripts,
            effects.lint_staged,
            effects.dependencies,
            dev_dependencies,
            effects.package_config,
        )

        new_manifest.write(manifest_path)
        write_text_file(entry_path, new_entry)
        LOGGER.info("updated %s and %s", entry_path.name, manifest_path.name)

        write_editor_config(project_path, options, self.renderer)
        write_readme(project_path, options, self.renderer)

        return GenerationResult(
            project_path=project_path,
            effects=effects,
            manifest=new_manifest,
            entry_file=entry_path,
        )
