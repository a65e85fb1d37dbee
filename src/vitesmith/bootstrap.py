"""Rewrite the application entry file for the selected features."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Sequence

from .errors import PatternMatchError

__all__ = ["BootstrapMutator", "EntryFile", "MountExpression", "entry_file_path"]


DEFAULT_FACTORY = "createApp"
DEFAULT_VARIABLE = "app"


def entry_file_path(project_path: Path, typescript: bool) -> Path:
    return project_path / "src" / ("main.ts" if typescript else "main.js")


@lru_cache(maxsize=8)
def _mount_pattern(factory: str) -> re.Pattern[str]:
    return re.compile(
        re.escape(factory)
        + r"\(\s*(?P<root>[A-Za-z_$][\w$]*)\s*\)"
        + r"\s*\.mount\(\s*(?P<quote>['\"])(?P<selector>[^'\"]*)(?P=quote)\s*\)"
        + r"[ \t]*;?"
    )


@dataclass(frozen=True, slots=True)
class MountExpression:
    """The ``factory(Root).mount(selector)`` statement of a seed entry file."""

    factory: str
    root: str
    selector: str
    quote: str = "'"

    def expand(self, use_calls: Sequence[str], variable: str = DEFAULT_VARIABLE) -> str:
        """Return the statements replacing the one-line construct-and-mount."""

        lines = [f"const {variable} = {self.factory}({self.root});"]
        lines.extend(f"{variable}{call};" for call in use_calls)
        lines.append(f"{variable}.mount({self.quote}{self.selector}{self.quote});")
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class EntryFile:
    """An entry file split around its single canonical mount expression."""

    head: str
    mount: MountExpression
    tail: str

    @classmethod
    def parse(
        cls,
        content: str,
        *,
        factory: str = DEFAULT_FACTORY,
        path: str | Path = "main",
    ) -> "EntryFile":
        """Split ``content``, requiring exactly one mount expression."""

        pattern = _mount_pattern(factory)
        matches = list(pattern.finditer(content))
        if len(matches) != 1:
            raise PatternMatchError(path, f"{factory}(<Root>).mount(<selector>)", len(matches))

        match = matches[0]
        return cls(
            head=content[: match.start()],
            mount=MountExpression(
                factory=factory,
                root=match.group("root"),
                selector=match.group("selector"),
                quote=match.group("quote"),
            ),
            tail=content[match.end():],
        )

    def render(
        self,
        imports: Sequence[str],
        use_calls: Sequence[str],
        variable: str = DEFAULT_VARIABLE,
    ) -> str:
        body = self.head + self.mount.expand(use_calls, variable) + self.tail
        if not imports:
            return body
        return "\n".join(imports) + "\n" + body


class BootstrapMutator:
    """Prepend feature imports and expand the mount expression into use calls."""

    def __init__(self, factory: str = DEFAULT_FACTORY, variable: str = DEFAULT_VARIABLE) -> None:
        self.factory = factory
        self.variable = variable

    def mutate(
        self,
        content: str,
        imports: Sequence[str],
        use_calls: Sequence[str],
        *,
        path: str | Path = "main",
    ) -> str:
        """Return ``content`` rewritten for ``imports`` and ``use_calls``.

        Raises :class:`PatternMatchError` when the construct-and-mount
        expression is missing or ambiguous.
        """

        entry = EntryFile.parse(content, factory=self.factory, path=path)
        return entry.render(imports, use_calls, self.variable)
