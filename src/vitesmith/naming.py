"""Project name validation shared by the configuration model and CLI."""

from __future__ import annotations

import re
import unicodedata

__all__ = ["is_valid_package_name", "slugify", "validate_project_name"]


MAX_PACKAGE_NAME_LENGTH = 214

_PACKAGE_NAME = re.compile(r"^(?:@[a-z0-9~][a-z0-9\-._~]*/)?[a-z0-9~][a-z0-9\-._~]*$")
_SEPARATORS = re.compile(r"[\s_]+")


def slugify(value: str) -> str:
    """Return an npm friendly slug from ``value``.

    Accents are folded to ASCII, runs of whitespace and underscores become a
    single ``-`` and anything outside the URL-safe alphabet is dropped.
    """

    text = unicodedata.normalize("NFKD", value)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = _SEPARATORS.sub("-", text.strip().lower())
    text = re.sub(r"[^a-z0-9\-._~]", "", text)
    text = re.sub(r"-{2,}", "-", text)
    return text.strip("-._")


def is_valid_package_name(name: str) -> bool:
    """Whether ``name`` may be used as the ``name`` field of ``package.json``."""

    if not name or len(name) > MAX_PACKAGE_NAME_LENGTH:
        return False
    if name != name.strip() or name.lower() != name:
        return False
    return _PACKAGE_NAME.match(name) is not None


def validate_project_name(name: str) -> str:
    """Return ``name`` stripped, raising :class:`ValueError` when unusable."""

    candidate = name.strip()
    if not candidate:
        raise ValueError("project name must not be empty")

    if not is_valid_package_name(candidate):
        suggestion = slugify(candidate)
        hint = f" (try '{suggestion}')" if suggestion else ""
        raise ValueError(f"'{candidate}' is not a valid package name{hint}")

    return candidate
