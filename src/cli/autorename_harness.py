# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Run class and image renaming over a project tree."""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import TextIO

from autorename import (
    IgnoreMatcher,
    NameGenerator,
    RenameError,
    find_and_replace_class_names,
    find_and_replace_image_names,
)
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

logger = logging.getLogger(__name__)

COMPLETION_MESSAGE = (
    "Class and image names have been updated across CSS, HTML, and JS files."
)


class ValidationError(RuntimeError):
    """Represent user input validation failure."""


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application logging with Rich handler on stderr.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True), rich_tracebacks=True, show_path=False
            )
        ],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        prog="autorename",
        description="Replace CSS class names and image file names with random ones.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Project root to process (default: current directory).",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Gitignore-style pattern of paths to leave untouched. Repeatable.",
    )
    parser.add_argument(
        "--gitignore",
        action="store_true",
        help="Also skip paths ignored by .gitignore files and the .git directory.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random name generator.",
    )
    parser.add_argument(
        "--show-mapping",
        action="store_true",
        help="Print the class and image name mappings after renaming.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log every file action."
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run rename command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning("Argument parsing failed (argv=%s)", argv)
        return 2

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        root = _validate_root(Path(args.root) if args.root else Path.cwd())
    except ValidationError as exc:
        logger.warning("Validation failed (error=%s)", exc)
        stderr.write(f"{exc}\n")
        return 2

    try:
        matcher = IgnoreMatcher.from_patterns(
            project_root=root, patterns=args.exclude, use_gitignore=args.gitignore
        )
    except OSError as exc:
        logger.warning("Failed to read .gitignore files (error=%s)", exc)
        stderr.write(f"Failed to read .gitignore files: {exc}\n")
        return 2

    rng = random.Random(args.seed) if args.seed is not None else None
    generator = NameGenerator(rng=rng)
    class_mapping: dict[str, str] = {}
    image_mapping: dict[str, str] = {}
    try:
        find_and_replace_class_names(
            root, class_mapping, generator=generator, matcher=matcher
        )
        find_and_replace_image_names(
            root, image_mapping, generator=generator, matcher=matcher
        )
    except RenameError as exc:
        logger.warning("Rename failed (error=%s)", exc)
        stderr.write(f"Rename failed: {exc}\n")
        return 2

    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    if args.show_mapping:
        _print_mapping(console, "Class names", class_mapping)
        _print_mapping(console, "Image files", image_mapping)
    console.print(COMPLETION_MESSAGE)
    return 0


def _validate_root(root: Path) -> Path:
    """Validate the project root path.

    Args:
        root: Root path from user args or the working directory.

    Returns:
        Normalized absolute root.

    Raises:
        ValidationError: If the root is missing or not a directory.
    """
    root_abs = root.resolve()
    if not root_abs.exists():
        raise ValidationError(f"Root path does not exist: {root_abs}")
    if not root_abs.is_dir():
        raise ValidationError(f"Root path must be a directory: {root_abs}")
    return root_abs


def _print_mapping(console: Console, title: str, mapping: dict[str, str]) -> None:
    table = Table(title=title)
    table.add_column("original", overflow="fold")
    table.add_column("replacement", overflow="fold")
    for original, replacement in mapping.items():
        table.add_row(original, replacement)
    console.print(table)


def main() -> None:
    """Run autorename CLI."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
