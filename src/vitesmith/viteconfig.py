"""Text patches applied to the ``vite.config`` file of the seed project.

The build configuration is rewritten by matching fixed anchors in the
generated source rather than by parsing it. Every patch requires its anchor
to be present exactly once and raises :class:`PatternMatchError` otherwise.
Patches skip work that is already present so they can be re-applied safely.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from .errors import PatternMatchError

__all__ = ["add_config_block", "add_imports", "add_plugin", "vite_config_path"]


_IMPORT_LINE = re.compile(r"^import\s.*$", re.MULTILINE)
_PLUGINS_LIST = re.compile(r"(?P<head>plugins:\s*\[)(?P<gap>[ \t]*\n?)")
_DEFINE_CONFIG = re.compile(r"defineConfig\(\{[ \t]*\n")


def vite_config_path(project_path: Path, typescript: bool) -> Path:
    return project_path / ("vite.config.ts" if typescript else "vite.config.js")


def _single_match(pattern: re.Pattern[str], content: str, path: Path) -> re.Match[str]:
    matches = list(pattern.finditer(content))
    if len(matches) != 1:
        raise PatternMatchError(path, pattern.pattern, len(matches))
    return matches[0]


def add_imports(content: str, lines: Sequence[str], *, path: Path) -> str:
    """Insert ``lines`` after the last top-level ``import`` statement."""

    present = set(content.splitlines())
    missing = [line for line in lines if line not in present]
    if not missing:
        return content

    last_import = None
    for last_import in _IMPORT_LINE.finditer(content):
        pass
    if last_import is None:
        raise PatternMatchError(path, _IMPORT_LINE.pattern, 0)

    insert_at = last_import.end()
    return content[:insert_at] + "\n" + "\n".join(missing) + content[insert_at:]


def add_plugin(content: str, plugin_call: str, *, path: Path) -> str:
    """Prepend ``plugin_call`` to the ``plugins: [...]`` list."""

    if plugin_call in content:
        return content

    match = _single_match(_PLUGINS_LIST, content, path)
    head, gap = match.group("head"), match.group("gap")
    if "\n" in gap:
        indent = re.match(r"[ \t]*", content[match.end():]).group(0) or "    "
        entry = f"{head}\n{indent}{plugin_call},\n"
    elif content[match.end():].startswith("]"):
        entry = f"{head}{plugin_call}"
    else:
        entry = f"{head}{plugin_call}, "
    return content[: match.start()] + entry + content[match.end():]


def add_config_block(content: str, block: str, *, marker: str, path: Path) -> str:
    """Insert ``block`` as the first entries of the ``defineConfig({...})`` object.

    ``marker`` is a fragment of ``block`` used to detect a previous insertion.
    """

    if marker in content:
        return content

    match = _single_match(_DEFINE_CONFIG, content, path)
    indented = "".join(f"  {line}\n" if line else "\n" for line in block.splitlines())
    return content[: match.end()] + indented + content[match.end():]
