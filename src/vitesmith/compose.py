"""Run feature providers and merge their declared effects."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from .config import ProjectOptions
from .errors import MergeCollisionError
from .features.base import FeatureProvider, FeatureResult

__all__ = ["AccumulatedEffects", "CompositionOrchestrator", "EffectsAccumulator"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AccumulatedEffects:
    """Merged effects of every enabled feature of one generation run."""

    features: tuple[str, ...] = ()
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()
    scripts: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    lint_staged: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    imports: tuple[str, ...] = ()
    use_calls: tuple[str, ...] = ()
    package_config: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


class _KeyedEntries:
    """Key-wise merge target remembering which feature set each key."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        self.values: dict[str, Any] = {}
        self.owners: dict[str, str] = {}

    def merge(self, feature: str, entries: Mapping[str, Any]) -> None:
        for key, value in entries.items():
            if key in self.values and self.values[key] != value:
                raise MergeCollisionError(
                    self.field_name,
                    key,
                    first_feature=self.owners[key],
                    first_value=self.values[key],
                    second_feature=feature,
                    second_value=value,
                )
            self.values.setdefault(key, value)
            self.owners.setdefault(key, feature)


class EffectsAccumulator:
    """Running merge target for :class:`FeatureResult` objects.

    Dependency names are deduplicated keeping their first-seen position.
    Scripts, lint-staged entries and config sections merge by key and must
    agree on shared keys.
    Imports and use calls keep arrival order and are not deduplicated; a
    repeated entry is logged because it points at a provider bug.
    """

    def __init__(self) -> None:
        self._features: list[str] = []
        self._dependencies: dict[str, None] = {}
        self._dev_dependencies: dict[str, None] = {}
        self._scripts = _KeyedEntries("scripts")
        self._lint_staged = _KeyedEntries("lint-staged")
        self._package_config = _KeyedEntries("config")
        self._imports: list[str] = []
        self._use_calls: list[str] = []

    def absorb(self, feature: str, result: FeatureResult) -> None:
        """Merge ``result`` produced by ``feature``."""

        self._scripts.merge(feature, result.scripts)
        self._lint_staged.merge(feature, result.lint_staged)
        self._package_config.merge(feature, result.package_config)

        self._features.append(feature)
        self._dependencies.update(dict.fromkeys(result.dependencies))
        self._dev_dependencies.update(dict.fromkeys(result.dev_dependencies))

        for target, entries, label in (
            (self._imports, result.imports, "import"),
            (self._use_calls, result.use_calls, "use call"),
        ):
            for entry in entries:
                if entry in target:
                    LOGGER.warning("duplicate %s %r declared by '%s'", label, entry, feature)
                target.append(entry)

    def build(self) -> AccumulatedEffects:
        return AccumulatedEffects(
            features=tuple(self._features),
            dependencies=tuple(self._dependencies),
            dev_dependencies=tuple(self._dev_dependencies),
            scripts=MappingProxyType(dict(self._scripts.values)),
            lint_staged=MappingProxyType(dict(self._lint_staged.values)),
            imports=tuple(self._imports),
            use_calls=tuple(self._use_calls),
            package_config=MappingProxyType(dict(self._package_config.values)),
        )


class CompositionOrchestrator:
    """Invoke enabled providers in their declared order and merge the results."""

    def compose(
        self,
        project_path: str | Path,
        options: ProjectOptions,
        providers: Sequence[FeatureProvider],
    ) -> AccumulatedEffects:
        """Run every enabled provider once and return the merged effects.

        ``providers`` is processed strictly in sequence order, which fixes
        the order of imports and use calls in the result. A provider failure
        propagates immediately and no further provider runs.
        """

        names = [provider.name for provider in providers]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"providers declared more than once: {', '.join(duplicates)}")

        project_path = Path(project_path)
        accumulator = EffectsAccumulator()
        for provider in providers:
            if not provider.enabled(options):
                LOGGER.debug("skipping disabled feature '%s'", provider.name)
                continue

            LOGGER.info("setting up feature '%s'", provider.name)
            result = provider.setup(project_path, options)
            accumulator.absorb(provider.name, result)

        effects = accumulator.build()
        LOGGER.debug(
            "composed features=%s dependencies=%s dev_dependencies=%s",
            effects.features,
            effects.dependencies,
            effects.dev_dependencies,
        )
        return effects
