# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Rename CSS class names across CSS, HTML and JS files."""

import logging
from dataclasses import dataclass
from pathlib import Path

from autorename.files import (
    IgnoreMatcher,
    discover_files,
    file_extension,
    read_source,
    write_source,
)
from autorename.names import NameGenerator
from autorename.rewriters import discover_class_names, rewriter_for

logger = logging.getLogger(__name__)

CSS_EXTENSIONS: tuple[str, ...] = ("css",)
MARKUP_EXTENSIONS: tuple[str, ...] = ("html", "js")


@dataclass(frozen=True)
class ClassRenameSummary:
    """Represent class rename pass counters."""

    css_files_processed: int
    markup_files_processed: int
    files_changed: int
    classes_mapped: int
    replacements: int


def find_and_replace_class_names(
    root_dir: Path,
    class_mapping: dict[str, str],
    generator: NameGenerator | None = None,
    matcher: IgnoreMatcher | None = None,
) -> ClassRenameSummary:
    """Map CSS class selectors to random names and rewrite every usage.

    The first walk harvests class names from CSS files, extends the mapping in
    first-seen order and rewrites each CSS file. The second walk propagates the
    mapping into HTML class attributes and JS string literals.

    Args:
        root_dir: Project root to process.
        class_mapping: Original to replacement mapping, extended in place.
        generator: Replacement name source; a fresh unseeded one when omitted.
        matcher: Optional exclusion matcher.

    Returns:
        Pass counters.

    Raises:
        RenameError: If a file cannot be read or written.
    """
    names = generator if generator is not None else NameGenerator()
    for replacement in class_mapping.values():
        names.reserve(replacement)

    files_changed = 0
    replacements = 0
    mapped_before = len(class_mapping)

    css_files = discover_files(root_dir, extensions=CSS_EXTENSIONS, matcher=matcher)
    for css_file in css_files:
        source = read_source(css_file)
        for class_name in discover_class_names(source):
            if class_name in class_mapping:
                continue
            names.reserve(class_name)
            class_mapping[class_name] = names.class_name()
            logger.debug(
                "Mapped class name (name=%s replacement=%s)",
                class_name,
                class_mapping[class_name],
            )
        result = rewriter_for(file_extension(css_file)).rewrite(source, class_mapping)
        replacements += result.replacements
        if result.text != source:
            write_source(css_file, result.text)
            files_changed += 1

    markup_files = discover_files(
        root_dir, extensions=MARKUP_EXTENSIONS, matcher=matcher
    )
    for markup_file in markup_files:
        source = read_source(markup_file)
        result = rewriter_for(file_extension(markup_file)).rewrite(
            source, class_mapping
        )
        replacements += result.replacements
        if result.text == source:
            continue
        logger.debug(
            "Rewrote class references (path=%s count=%d)",
            markup_file,
            result.replacements,
        )
        write_source(markup_file, result.text)
        files_changed += 1

    summary = ClassRenameSummary(
        css_files_processed=len(css_files),
        markup_files_processed=len(markup_files),
        files_changed=files_changed,
        classes_mapped=len(class_mapping) - mapped_before,
        replacements=replacements,
    )
    logger.info(
        "Class rename pass finished (css_files=%d markup_files=%d changed=%d "
        "classes=%d replacements=%d)",
        summary.css_files_processed,
        summary.markup_files_processed,
        summary.files_changed,
        summary.classes_mapped,
        summary.replacements,
    )
    return summary
