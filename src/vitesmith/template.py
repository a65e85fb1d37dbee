"""Line-oriented conditional string templating."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Union

from .errors import TemplateNotFoundError
from .files import write_text_file

__all__ = [
    "DEFAULT_TEMPLATE_DIR",
    "TemplateContext",
    "TemplateRenderer",
    "TemplateValue",
]


DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TemplateValue = Union[str, bool, None]
TemplateContext = Mapping[str, TemplateValue]

_PLACEHOLDER_PATTERN = re.compile(r"{{[ \t]*(?P<name>[^{}\n]+?)[ \t]*}}")

# A placeholder alone on its line is matched together with its indentation and
# line ending; any other occurrence is matched as a bare token.
_RENDER_PATTERN = re.compile(
    r"^(?P<indent>[ \t]*){{[ \t]*(?P<line_name>[^{}\n]+?)[ \t]*}}(?P<trail>[ \t]*(?:\r?\n|$))"
    r"|{{[ \t]*(?P<name>[^{}\n]+?)[ \t]*}}",
    re.MULTILINE,
)

_MISSING = object()


def _render_line(match: re.Match[str], context: TemplateContext) -> str:
    value = context.get(match.group("line_name"), _MISSING)
    if value is _MISSING or (value is not True and not value):
        return ""
    text = "" if value is True else str(value)
    return match.group("indent") + text + match.group("trail")


def _render_token(match: re.Match[str], context: TemplateContext) -> str:
    value = context.get(match.group("name"), _MISSING)
    if value is _MISSING:
        return match.group(0)
    if value is True or not value:
        return ""
    return str(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates containing ``{{ name }}`` placeholders.

    A placeholder that occupies a line on its own doubles as a line-level
    conditional: when its value is falsy the whole line, newline included, is
    removed. Placeholders missing from the context are removed as well when
    they sit on their own line, so the rendered output never carries raw
    template syntax on a line of its own.
    """

    template_dir: Path = field(default_factory=lambda: DEFAULT_TEMPLATE_DIR)

    def __post_init__(self) -> None:
        self.template_dir = Path(self.template_dir)

    @staticmethod
    def placeholders(template: str) -> set[str]:
        """Return the names of every placeholder referenced by ``template``."""

        return {match.group("name") for match in _PLACEHOLDER_PATTERN.finditer(template)}

    def render_string(self, template: str, context: TemplateContext) -> str:
        """Render ``template`` using ``context`` in a single pass.

        Parameters
        ----------
        template:
            The template text.
        context:
            Placeholder values. Non-empty strings are substituted inline,
            ``True`` removes the token but keeps its line, and falsy values
            delete lines consisting solely of the placeholder. Substituted
            values are inserted literally and never rendered again.
        """

        def replace(match: re.Match[str]) -> str:
            if match.group("line_name") is not None:
                return _render_line(match, context)
            return _render_token(match, context)

        return _RENDER_PATTERN.sub(replace, template)

    def render_file(
        self,
        template_path: str | Path,
        context: TemplateContext,
        *,
        target: str | Path | None = None,
    ) -> str:
        """Render ``template_path`` and optionally write the result to ``target``."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise TemplateNotFoundError(template_path)

        rendered = self.render_string(template_path.read_text(encoding="utf-8"), context)
        if target is not None:
            write_text_file(target, rendered)
        return rendered

    def render(self, template_name: str, context: TemplateContext | None = None) -> str:
        """Render a template stored under :attr:`template_dir`."""

        return self.render_file(self.template_dir / template_name, context or {})

    def render_to(
        self,
        template_name: str,
        target: str | Path,
        context: TemplateContext | None = None,
    ) -> Path:
        """Render a stored template into ``target``, creating parent directories."""

        self.render_file(self.template_dir / template_name, context or {}, target=target)
        return Path(target)
