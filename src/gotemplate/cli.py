"""Command line interface for gotemplate."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from .config import ProjectConfig
from .errors import GotemplateError
from .scaffold import ProjectScaffolder
from .vcs import GitClient, TemplateCommitter

COMMIT_FLAG = "-commit"

USAGE = """Usage:
  gotemplate <projectname>  - Create a new Go project from the template.
  gotemplate -commit        - Commit known template files separately.
"""


class CommandLineError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.status = status


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise CommandLineError(message)

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        if message:
            sys.stderr.write(message)
        raise CommandLineError("", status)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def build_parser() -> argparse.ArgumentParser:
    """Parser for the options shared by both modes.

    ``-commit`` and the project name are not argparse arguments: anything the
    parser does not recognise is left over, so a name such as ``-foo`` is
    kept verbatim and ``-commit`` only matches exactly.
    """

    parser = _ArgumentParser(
        prog="gotemplate",
        description="Create a new Go project from the bundled template",
        allow_abbrev=False,
        epilog="Use -commit to commit the known template files in the target directory, one group per commit.",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory to create the project in, or to commit from (defaults to the current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each step")
    return parser


def _handle_create(name: str, directory: Path | None) -> int:
    try:
        config = ProjectConfig.from_name(name, directory=directory)
        ProjectScaffolder().create(config)
    except (GotemplateError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Project {config.name} created successfully.")
    return 0


def _handle_commit(directory: Path | None) -> int:
    committer = TemplateCommitter(GitClient(directory))
    try:
        committer.commit_all()
    except GotemplateError as exc:
        print(f"Error committing template files: {exc}", file=sys.stderr)
        return 1
    print("Template files committed successfully.")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args, tokens = parser.parse_known_args(argv)
    except CommandLineError as exc:
        if str(exc):
            print(f"Error: {exc}", file=sys.stderr)
        return exc.status
    setup_logging(args.verbose)
    if "--" in tokens:
        tokens.remove("--")

    if not tokens:
        sys.stdout.write(USAGE)
        return 1
    if len(tokens) > 1:
        print(f"Error: unexpected arguments: {' '.join(tokens[1:])}", file=sys.stderr)
        sys.stdout.write(USAGE)
        return 1

    if tokens[0] == COMMIT_FLAG:
        return _handle_commit(args.directory)
    return _handle_create(tokens[0], args.directory)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
