"""Kaboomer command-line interface.

Usage::

    kaboomer init my-game
    kaboomer init my-game --template empty --nogit
    kaboomer add scene boss-fight
"""

from __future__ import annotations

import argparse
import asyncio
import shlex
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from kaboomer.config import PACKAGE_NAME_REGEX, GenerationOptions, __version__
from kaboomer.scaffolder import (
    TEMPLATE_NAMES,
    UNIT_KINDS,
    GitError,
    InvalidUnitKindError,
    InvalidUnitNameError,
    NotAProjectError,
    ProjectExistsError,
    ProjectGenerator,
    add_unit,
)
from kaboomer.utils import print_error, print_next_steps, print_success


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kaboomer",
        description="A CLI to scaffold KaboomJS games.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  kaboomer init my-game\n"
            "  kaboomer init my-game -t empty --nogit\n"
            "  kaboomer add scene boss-fight\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init", help="initialize a new project")
    init.add_argument("dir", help="the root of the project")
    init.add_argument(
        "--force", "-f",
        action="store_true",
        default=None,
        help="overwrite existing folder",
    )
    init.add_argument(
        "--nogit", "-g",
        action="store_true",
        default=None,
        help="skip .gitignore and git init",
    )
    init.add_argument(
        "--template", "-t",
        choices=TEMPLATE_NAMES,
        default=None,
        help="template to scaffold (default: basic)",
    )

    add = sub.add_parser("add", help="add a scene, object or component to the project")
    add.add_argument("type", help=f"one of: {', '.join(UNIT_KINDS)}")
    add.add_argument("name", help="file name of the new unit, e.g. boss-fight")

    return parser


def _run_init(args: argparse.Namespace) -> None:
    try:
        options = GenerationOptions.from_env(
            force=args.force,
            nogit=args.nogit,
            template=args.template,
        )
    except ValidationError as exc:
        print_error(f"Invalid options: {exc}")
        sys.exit(1)

    # A scoped name such as @scope/pkg is kept whole, anything else uses its base name.
    name = args.dir if PACKAGE_NAME_REGEX.fullmatch(args.dir) else None
    generator = ProjectGenerator(Path.cwd() / args.dir, options, name=name)
    try:
        asyncio.run(generator.generate())
    except ProjectExistsError as exc:
        print_error(str(exc))
        sys.exit(1)
    except GitError as exc:
        print_error(str(exc))
        sys.exit(1)
    except OSError as exc:
        print_error(str(exc))
        sys.exit(1)

    print_next_steps(args.dir, [f"cd {shlex.quote(args.dir)}", "npm install", "npm run dev"])


def _run_add(args: argparse.Namespace) -> None:
    try:
        asyncio.run(add_unit(args.type, args.name))
    except (InvalidUnitKindError, InvalidUnitNameError, NotAProjectError) as exc:
        print_error(str(exc))
        sys.exit(1)
    except OSError as exc:
        print_error(str(exc))
        sys.exit(1)

    print_success(f"added {args.type} {escape(args.name)}")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``kaboomer`` and ``python -m kaboomer``."""
    args = build_parser().parse_args(argv)

    if args.command == "init":
        _run_init(args)
    elif args.command == "add":
        _run_add(args)


if __name__ == "__main__":
    main()
