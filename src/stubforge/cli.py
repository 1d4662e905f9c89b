"""Command line interface for stubforge."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import SUPPORTED_LICENSES, CommandSettings, NameVariants, TestingFramework
from .errors import StubforgeError
from .naming import DEFAULT_NAMESPACE
from .scaffold import ProjectGenerator


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every generated file",
    )

    parser = argparse.ArgumentParser(description="Scaffold a new PHP package")
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser(
        "new", parents=[common], help="generate a new package skeleton"
    )
    new_parser.add_argument("name", help="Package name in VENDOR/PROJECT form")
    new_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Directory in which the project folder is created",
    )
    new_parser.add_argument(
        "-n",
        "--namespace",
        default=DEFAULT_NAMESPACE,
        help="Namespace for generated classes (derived from the name by default)",
    )
    new_parser.add_argument(
        "-l",
        "--license",
        default="mit",
        help=f"License of the package, one of: {', '.join(SUPPORTED_LICENSES)}",
    )
    new_parser.add_argument(
        "-t",
        "--test",
        dest="testing",
        choices=[framework.value for framework in TestingFramework],
        default=TestingFramework.PHPUNIT.value,
        help="Testing framework to set up",
    )
    new_parser.add_argument(
        "--git",
        action="store_true",
        help="Initialize an empty git repository in the new project",
    )
    new_parser.add_argument(
        "--phpcs",
        action="store_true",
        help="Generate a PHP CS Fixer configuration file",
    )

    subparsers.add_parser(
        "licenses", parents=[common], help="list the supported license keys"
    )

    return parser


def _handle_new(args: argparse.Namespace) -> int:
    settings = CommandSettings(
        project_name=args.name,
        namespace=args.namespace,
        license=args.license,
        testing_framework=args.testing,
        with_git_init=args.git,
        with_lint_config=args.phpcs,
    )
    # reject a malformed name before anything is created on disk
    NameVariants.from_project_name(settings.project_name)
    target = args.directory
    target.mkdir(parents=True, exist_ok=True)
    project_path = ProjectGenerator().generate(settings, target)
    print(f"Project created at {project_path}")
    return 0


def _handle_licenses(args: argparse.Namespace) -> int:
    for license in SUPPORTED_LICENSES:
        print(license)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "new":
            return _handle_new(args)
        if args.command == "licenses":
            return _handle_licenses(args)
    except StubforgeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
