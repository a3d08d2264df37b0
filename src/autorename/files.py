# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Discover, read and write project files for rename passes."""

import logging
import os
import shutil
import tempfile
from collections.abc import Iterable
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


class RenameError(RuntimeError):
    """Represent a filesystem failure during a rename pass."""


class IgnoreMatcher:
    """Match project paths against gitignore-style exclusion patterns."""

    def __init__(self, spec: pathspec.GitIgnoreSpec) -> None:
        """Initialize matcher.

        Args:
            spec: Compiled gitignore matcher.
        """
        self._spec = spec

    @classmethod
    def from_patterns(
        cls,
        project_root: Path,
        patterns: Iterable[str] = (),
        use_gitignore: bool = False,
    ) -> "IgnoreMatcher":
        """Build matcher from explicit patterns and optional .gitignore files.

        Args:
            project_root: Project root the patterns are relative to.
            patterns: Gitignore-syntax exclusion patterns.
            use_gitignore: Whether to honor .gitignore files and skip .git.

        Returns:
            Configured ignore matcher.

        Raises:
            OSError: If .gitignore files cannot be read.
        """
        lines: list[str] = list(patterns)
        if use_gitignore:
            lines.append(".git/")
            for ignore_path in sorted(project_root.rglob(".gitignore")):
                base = ignore_path.parent.relative_to(project_root).as_posix()
                if base == ".":
                    base = ""
                content = ignore_path.read_text(
                    encoding=TEXT_ENCODING, errors=TEXT_ERRORS
                )
                for line in content.splitlines():
                    lines.append(_translate_gitignore_line(line=line, base=base))
        spec = pathspec.GitIgnoreSpec.from_lines(lines)
        return cls(spec=spec)

    def matches(self, relative_path: str) -> bool:
        """Check whether a file path should be excluded.

        Args:
            relative_path: Project-relative path.

        Returns:
            True when path should be excluded.
        """
        normalized = relative_path.replace(os.sep, "/").strip("/")
        if not normalized:
            return False
        return self._spec.match_file(normalized)


def discover_files(
    root: Path,
    extensions: Iterable[str] | None = None,
    matcher: IgnoreMatcher | None = None,
    project_root: Path | None = None,
) -> list[Path]:
    """List regular files under root in sorted order.

    Args:
        root: Directory to walk recursively.
        extensions: Case-insensitive extensions to keep; any when omitted.
        matcher: Optional exclusion matcher.
        project_root: Root that matcher patterns are relative to; root when omitted.

    Returns:
        Sorted file paths.
    """
    wanted = {ext.lower() for ext in extensions} if extensions is not None else None
    base = project_root if project_root is not None else root
    files: list[Path] = []
    if not root.is_dir():
        return files
    for path in sorted(root.rglob("*")):
        if path.is_symlink() or not path.is_file():
            continue
        if wanted is not None and file_extension(path).lower() not in wanted:
            continue
        if matcher is not None and matcher.matches(path.relative_to(base).as_posix()):
            logger.debug("Skipping excluded file (path=%s)", path)
            continue
        files.append(path)
    return files


def file_extension(path: Path) -> str:
    """Return the text after the last dot of a file name.

    Dotfiles keep their name as extension, so `.htaccess` yields `htaccess`.
    """
    name = path.name
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def read_source(path: Path) -> str:
    """Read a text file, preserving undecodable bytes.

    Args:
        path: File to read.

    Returns:
        File content.

    Raises:
        RenameError: If the file cannot be read.
    """
    try:
        with path.open(encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline="") as handle:
            return handle.read()
    except OSError as exc:
        logger.warning("Failed reading file (path=%s error=%s)", path, exc)
        raise RenameError(f"Failed reading {path}: {exc}") from exc


def write_source(path: Path, text: str) -> None:
    """Replace a text file's content through a temporary sibling file.

    The temporary file gets a unique name and the target's permission bits;
    it is removed when the write fails.

    Args:
        path: File to overwrite.
        text: New content.

    Raises:
        RenameError: If the file cannot be written.
    """
    tmp_path: Path | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        tmp_path = Path(tmp_name)
        with os.fdopen(
            fd, "w", encoding=TEXT_ENCODING, errors=TEXT_ERRORS, newline=""
        ) as handle:
            handle.write(text)
        shutil.copymode(path, tmp_path)
        tmp_path.replace(path)
    except OSError as exc:
        logger.warning("Failed writing file (path=%s error=%s)", path, exc)
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise RenameError(f"Failed writing {path}: {exc}") from exc


def rename_file(path: Path, new_name: str) -> Path:
    """Rename a file inside its own directory without overwriting.

    Args:
        path: File to rename.
        new_name: New leaf name.

    Returns:
        Renamed path.

    Raises:
        RenameError: If the target exists or the rename fails.
    """
    target = path.with_name(new_name)
    try:
        if target.exists():
            raise FileExistsError(f"Target already exists: {target}")
        path.rename(target)
    except OSError as exc:
        logger.warning("Failed renaming file (path=%s error=%s)", path, exc)
        raise RenameError(f"Failed renaming {path}: {exc}") from exc
    return target


def _translate_gitignore_line(line: str, base: str) -> str:
    """Translate one .gitignore line to root-relative pattern.

    Args:
        line: Original .gitignore line.
        base: Parent directory relative to project root.

    Returns:
        Root-relative pattern line.
    """
    if not base:
        return line
    if not line:
        return line
    if line.lstrip().startswith("#"):
        return line
    if line.startswith(r"\!") or line.startswith(r"\#"):
        return line
    is_negation = line.startswith("!")
    pattern = line[1:] if is_negation else line
    anchored = pattern.startswith("/")
    normalized_pattern = pattern[1:] if anchored else pattern
    prefixed = f"{base}/{normalized_pattern}" if normalized_pattern else base
    if anchored:
        prefixed = f"/{prefixed}"
    if is_negation:
        return f"!{prefixed}"
    return prefixed
