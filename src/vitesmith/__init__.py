"""Compose optional features into a freshly scaffolded Vite + Vue project.

The package renders feature files from line-conditional templates, runs the
selected feature providers in a fixed order, and merges their effects into
the project's ``package.json`` and application entry file. It can be used
programmatically or through the ``vitesmith`` command line interface.
"""

from __future__ import annotations

from .bootstrap import BootstrapMutator, EntryFile
from .compose import AccumulatedEffects, CompositionOrchestrator
from .config import CssOption, PackageManager, ProjectOptions
from .errors import (
    ManifestParseError,
    MergeCollisionError,
    MissingSeedFileError,
    PatternMatchError,
    ScaffoldError,
    TemplateNotFoundError,
)
from .features import FeatureProvider, FeatureResult, default_providers
from .generator import GenerationResult, ProjectGenerator
from .manifest import ManifestDocument, ManifestMerger
from .template import TemplateRenderer

__all__ = [
    "AccumulatedEffects",
    "BootstrapMutator",
    "CompositionOrchestrator",
    "CssOption",
    "EntryFile",
    "FeatureProvider",
    "FeatureResult",
    "GenerationResult",
    "ManifestDocument",
    "ManifestMerger",
    "ManifestParseError",
    "MergeCollisionError",
    "MissingSeedFileError",
    "PackageManager",
    "PatternMatchError",
    "ProjectGenerator",
    "ProjectOptions",
    "ScaffoldError",
    "TemplateNotFoundError",
    "TemplateRenderer",
    "default_providers",
]

__version__ = "0.1.0"
