"""Exception types raised while composing a project."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "ManifestParseError",
    "MergeCollisionError",
    "MissingSeedFileError",
    "PatternMatchError",
    "ScaffoldError",
    "TemplateNotFoundError",
]


class ScaffoldError(RuntimeError):
    """Base class for every failure of the generation pipeline."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class TemplateNotFoundError(ScaffoldError):
    """Raised when a template resource does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"template not found: {self.path}")


class MissingSeedFileError(ScaffoldError):
    """Raised when a file expected from the seed scaffold is absent."""

    def __init__(self, path: str | Path, *, feature: str | None = None) -> None:
        self.path = Path(path)
        self.feature = feature
        owner = f" (required by '{feature}')" if feature else ""
        super().__init__(f"expected file does not exist: {self.path}{owner}")


class ManifestParseError(ScaffoldError):
    """Raised when a JSON document cannot be parsed into the expected shape."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"failed to parse {self.path}: {reason}")


class MergeCollisionError(ScaffoldError):
    """Raised when two features declare the same key with different values."""

    def __init__(
        self,
        field: str,
        key: str,
        *,
        first_feature: str,
        first_value: object,
        second_feature: str,
        second_value: object,
    ) -> None:
        self.field = field
        self.key = key
        self.first_feature = first_feature
        self.first_value = first_value
        self.second_feature = second_feature
        self.second_value = second_value
        super().__init__(
            f"{field} entry '{key}' declared by '{first_feature}' as {first_value!r} "
            f"and by '{second_feature}' as {second_value!r}"
        )


class PatternMatchError(ScaffoldError):
    """Raised when a source rewrite cannot find its anchor exactly once."""

    def __init__(self, path: str | Path, pattern: str, matches: int) -> None:
        self.path = Path(path)
        self.pattern = pattern
        self.matches = matches
        super().__init__(
            f"expected exactly one match of {pattern!r} in {self.path}, found {matches}"
        )
