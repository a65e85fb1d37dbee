"""Helpers for reading and writing files of the scaffolded project."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from .errors import ManifestParseError, MissingSeedFileError

__all__ = [
    "read_json_file",
    "read_seed_file",
    "strip_json_comments",
    "write_json_file",
    "write_text_file",
]


# String literals are matched first so that ``//`` inside a URL survives.
_JSON_TOKENS = re.compile(
    r'(?P<string>"(?:\\.|[^"\\])*")|(?P<line>//[^\n]*)|(?P<block>/\*.*?\*/)',
    re.DOTALL,
)


def strip_json_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments from JSON-with-comments text."""

    def replace(match: re.Match[str]) -> str:
        if match.group("string") is not None:
            return match.group("string")
        return ""

    return _JSON_TOKENS.sub(replace, text)


def read_seed_file(path: str | Path, *, feature: str | None = None) -> str:
    """Return the content of a file the seed scaffold must have created."""

    path = Path(path)
    if not path.is_file():
        raise MissingSeedFileError(path, feature=feature)
    return path.read_text(encoding="utf-8")


def read_json_file(path: str | Path, *, feature: str | None = None) -> Any:
    """Parse a JSON (or JSON-with-comments) file."""

    text = read_seed_file(path, feature=feature)
    try:
        return json.loads(strip_json_comments(text))
    except json.JSONDecodeError as exc:
        raise ManifestParseError(path, str(exc)) from exc


def write_text_file(path: str | Path, content: str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def write_json_file(path: str | Path, data: Any) -> Path:
    """Write ``data`` with two space indentation and a trailing newline."""

    return write_text_file(path, json.dumps(data, indent=2, ensure_ascii=False) + "\n")
