"""``package.json`` model and the merge of feature effects into it."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from .errors import ManifestParseError
from .files import read_seed_file, strip_json_comments, write_json_file

__all__ = ["LATEST", "ManifestDocument", "ManifestMerger"]


LATEST = "latest"


class ManifestDocument(BaseModel):
    """The parts of ``package.json`` the generator owns.

    Every other field is carried through untouched, and :meth:`to_dict`
    restores the key order of the parsed document so rewrites stay minimal.
    """

    model_config = ConfigDict(extra="allow")

    scripts: Dict[str, str] = Field(default_factory=dict, description="Named package scripts.")
    lint_staged: Optional[Dict[str, Union[str, List[str]]]] = Field(None, alias="lint-staged", description="Staged file glob to command or list of commands.")
    dependencies: Dict[str, str] = Field(default_factory=dict, description="Runtime dependencies by name.")
    dev_dependencies: Dict[str, str] = Field(default_factory=dict, alias="devDependencies", description="Development dependencies by name.")
    config: Optional[Dict[str, Any]] = Field(None, description="Tool settings read through npm's package config, keyed by tool.")

    _key_order: List[str] = PrivateAttr(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, *, path: str | Path = "package.json") -> "ManifestDocument":
        if not isinstance(data, dict):
            raise ManifestParseError(path, "expected a JSON object")
        try:
            document = cls.model_validate(data)
        except ValidationError as exc:
            raise ManifestParseError(path, str(exc)) from exc
        document._key_order = list(data)
        return document

    @classmethod
    def from_json_text(cls, text: str, *, path: str | Path = "package.json") -> "ManifestDocument":
        try:
            data = json.loads(strip_json_comments(text))
        except json.JSONDecodeError as exc:
            raise ManifestParseError(path, str(exc)) from exc
        return cls.from_dict(data, path=path)

    @classmethod
    def load(cls, path: str | Path) -> "ManifestDocument":
        return cls.from_json_text(read_seed_file(path), path=path)

    def to_dict(self) -> Dict[str, Any]:
        payload = self.model_dump(by_alias=True)
        ordered = {key: payload[key] for key in self._key_order if key in payload}
        for key, value in payload.items():
            if key not in ordered and value not in (None, {}):
                ordered[key] = value
        return ordered

    def write(self, path: str | Path) -> Path:
        return write_json_file(path, self.to_dict())


def _add_names(existing: Mapping[str, str], names: Iterable[str], version: str) -> Dict[str, str]:
    merged = dict(existing)
    for name in names:
        merged.setdefault(name, version)
    return dict(sorted(merged.items()))


def _overlay(existing: Optional[Dict[str, Any]], entries: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    # A section the features do not touch keeps its absence.
    if not entries:
        return existing
    return {**(existing or {}), **entries}


class ManifestMerger:
    """Merge scripts, lint-staged entries and dependency names into a manifest."""

    def __init__(self, version_marker: str = LATEST) -> None:
        self.version_marker = version_marker

    def merge(
        self,
        manifest: ManifestDocument,
        scripts: Mapping[str, str],
        lint_staged: Mapping[str, str],
        dependencies: Iterable[str],
        dev_dependencies: Iterable[str],
        package_config: Optional[Mapping[str, Any]] = None,
    ) -> ManifestDocument:
        """Return a new document with the feature effects applied.

        Feature scripts, lint-staged entries and ``config`` sections replace
        existing keys of the same name. New dependency names get
        :attr:`version_marker`, existing versions are kept, and both
        dependency maps end up sorted by name.
        """

        return manifest.model_copy(
            update={
                "scripts": {**manifest.scripts, **scripts},
                "lint_staged": _overlay(manifest.lint_staged, lint_staged),
                "config": _overlay(manifest.config, package_config),
                "dependencies": _add_names(manifest.dependencies, dependencies, self.version_marker),
                "dev_dependencies": _add_names(
                    manifest.dev_dependencies, dev_dependencies, self.version_marker
                ),
            }
        )
