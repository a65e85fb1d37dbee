"""Command line interface for vitesmith."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence

from pydantic import ValidationError

from .config import CssOption, PackageManager, ProjectOptions
from .errors import ScaffoldError
from .generator import ProjectGenerator
from .template import TemplateRenderer, TemplateValue

LOGGER = logging.getLogger(__name__)


def _parse_key_value_pairs(pairs: Iterable[str]) -> dict[str, TemplateValue]:
    """Turn ``-c`` arguments into a renderer context.

    ``KEY=VALUE`` substitutes ``VALUE``, ``KEY=`` drops lines holding only the
    placeholder, and a bare ``KEY`` keeps such lines without the token.
    """

    context: dict[str, TemplateValue] = {}
    for pair in pairs:
        key, separator, value = pair.partition("=")
        key = key.strip()
        if not key:
            raise argparse.ArgumentTypeError(
                f"invalid context entry '{pair}'. Expected KEY, KEY= or KEY=VALUE."
            )
        context[key] = value if separator else True
    return context


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compose optional features into a Vite + Vue project"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (repeat for debug output)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    apply_parser = subparsers.add_parser(
        "apply", help="apply features to a project scaffolded by 'create vite'"
    )
    apply_parser.add_argument("directory", type=Path, help="Directory of the seed project")
    apply_parser.add_argument(
        "-n", "--name", help="Project name (defaults to the directory name)"
    )
    apply_parser.add_argument(
        "-t",
        "--template",
        choices=["vue", "vue-ts"],
        default="vue-ts",
        help="Template the seed was created from",
    )
    apply_parser.add_argument(
        "--package-manager",
        choices=[manager.value for manager in PackageManager],
        default=PackageManager.PNPM.value,
    )
    apply_parser.add_argument("--router", action="store_true", help="Add Vue Router")
    apply_parser.add_argument("--store", action="store_true", help="Add Pinia")
    apply_parser.add_argument("--eslint", action="store_true", help="Add ESLint")
    apply_parser.add_argument(
        "--css",
        choices=[option.value for option in CssOption],
        default=CssOption.NONE.value,
        help="CSS pre-processor or transformer",
    )
    apply_parser.add_argument("--unocss", action="store_true", help="Add UnoCSS")
    apply_parser.add_argument(
        "--git-hooks", action="store_true", help="Add husky, lint-staged and commitlint"
    )

    render_parser = subparsers.add_parser(
        "render", help="render a template file with line-conditional placeholders"
    )
    render_parser.add_argument("template", type=Path, help="Path to the template file")
    render_parser.add_argument(
        "-c",
        "--context",
        metavar="KEY[=VALUE]",
        action="append",
        default=[],
        help="Values exposed to the template renderer; KEY= drops the line, a bare KEY keeps it",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the rendered template to this path instead of stdout",
    )

    return parser


def _options_from_args(args: argparse.Namespace) -> ProjectOptions:
    return ProjectOptions(
        project_name=args.name or args.directory.resolve().name,
        package_manager=PackageManager(args.package_manager),
        typescript=args.template == "vue-ts",
        router=args.router,
        store=args.store,
        eslint=args.eslint,
        css=CssOption(args.css),
        unocss=args.unocss,
        git_hooks=args.git_hooks,
    )


def _handle_apply(args: argparse.Namespace) -> int:
    try:
        options = _options_from_args(args)
    except ValidationError as exc:
        sys.stderr.write(f"error: invalid options\n{exc}\n")
        return 2

    generator = ProjectGenerator(TemplateRenderer())
    result = generator.generate(args.directory, options)
    pm = options.package_manager.value
    features = ", ".join(result.effects.features) or "none"
    print(f"Project configured at {result.project_path} (features: {features})")
    print("Next steps:")
    print(f"  cd {args.directory}")
    print(f"  {pm} install")
    print(f"  {pm} dev")
    return 0


def _handle_render(args: argparse.Namespace) -> int:
    renderer = TemplateRenderer()
    context = _parse_key_value_pairs(args.context)
    rendered = renderer.render_file(args.template, context, target=args.output)
    if not args.output:
        sys.stdout.write(rendered)
        if not rendered.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    handlers = {"apply": _handle_apply, "render": _handle_render}
    handler = handlers.get(args.command)
    if handler is None:
        parser.error("no command provided")
        return 2

    try:
        return handler(args)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
        return 2
    except ScaffoldError as exc:
        LOGGER.debug("generation failed", exc_info=True)
        sys.stderr.write(f"error: {exc}\n")
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
