"""Contract shared by every optional feature of a generated project."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from ..config import ProjectOptions
from ..template import TemplateRenderer

__all__ = ["FeatureProvider", "FeatureResult"]


def _frozen_mapping(values: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True, slots=True)
class FeatureResult:
    """Effects declared by one feature.

    ``imports`` and ``use_calls`` are applied to the bootstrap file in the
    order given; a use call is a method-chain segment such as
    ``".use(router)"``. ``package_config`` holds sections of the manifest's
    ``config`` object keyed by tool name.
    """

    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()
    scripts: Mapping[str, str] = field(default_factory=dict)
    lint_staged: Mapping[str, str] = field(default_factory=dict)
    imports: tuple[str, ...] = ()
    use_calls: tuple[str, ...] = ()
    package_config: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        *,
        dependencies: Iterable[str] = (),
        dev_dependencies: Iterable[str] = (),
        scripts: Mapping[str, str] | None = None,
        lint_staged: Mapping[str, str] | None = None,
        imports: Iterable[str] = (),
        use_calls: Iterable[str] = (),
        package_config: Mapping[str, Any] | None = None,
    ) -> "FeatureResult":
        """Create a result from arbitrary iterables, copying every input."""

        return cls(
            dependencies=tuple(dependencies),
            dev_dependencies=tuple(dev_dependencies),
            scripts=_frozen_mapping(scripts),
            lint_staged=_frozen_mapping(lint_staged),
            imports=tuple(imports),
            use_calls=tuple(use_calls),
            package_config=_frozen_mapping(package_config),
        )


class FeatureProvider(ABC):
    """A self-contained optional capability of the generated project.

    A provider writes the files it owns below the project directory and
    reports the cross-cutting effects (dependencies, scripts, imports, ...)
    that the orchestrator merges into the shared manifest and entry file.
    """

    name: str = ""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    @abstractmethod
    def enabled(self, options: ProjectOptions) -> bool:
        """Whether the feature was selected in ``options``."""

    @abstractmethod
    def setup(self, project_path: Path, options: ProjectOptions) -> FeatureResult:
        """Write the feature's files and return its declared effects."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
