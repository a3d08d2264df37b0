# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Rename image files under img/ and rewrite references to them."""

import logging
from dataclasses import dataclass
from pathlib import Path

from autorename.files import (
    IgnoreMatcher,
    discover_files,
    file_extension,
    read_source,
    rename_file,
    write_source,
)
from autorename.names import NameGenerator
from autorename.rewriters import ReferenceRewriter

logger = logging.getLogger(__name__)

IMAGE_DIR_NAME = "img"
REFERENCE_EXTENSIONS: tuple[str, ...] = ("html", "css", "js")


@dataclass(frozen=True)
class ImageRenameSummary:
    """Represent image rename pass counters."""

    images_renamed: int
    reference_files_processed: int
    files_changed: int
    replacements: int


def find_and_replace_image_names(
    root_dir: Path,
    filename_mapping: dict[str, str],
    generator: NameGenerator | None = None,
    matcher: IgnoreMatcher | None = None,
) -> ImageRenameSummary:
    """Rename files under root_dir/img and rewrite references to them.

    Images sharing a leaf name in different subdirectories receive the same
    replacement, so references by leaf name stay consistent.

    Args:
        root_dir: Project root to process.
        filename_mapping: Original to new file name mapping, extended in place.
        generator: Replacement name source; a fresh unseeded one when omitted.
        matcher: Optional exclusion matcher.

    Returns:
        Pass counters.

    Raises:
        RenameError: If a file cannot be renamed, read or written.
    """
    image_dir = root_dir / IMAGE_DIR_NAME
    if not image_dir.is_dir():
        logger.info("No image directory found (path=%s)", image_dir)
        return ImageRenameSummary(
            images_renamed=0,
            reference_files_processed=0,
            files_changed=0,
            replacements=0,
        )

    names = generator if generator is not None else NameGenerator()
    images = discover_files(image_dir, matcher=matcher, project_root=root_dir)
    for image in images:
        names.reserve(image.stem)

    for image in images:
        original_name = image.name
        new_name = filename_mapping.get(original_name)
        if new_name is None:
            new_name = names.file_name(file_extension(image))
            filename_mapping[original_name] = new_name
        else:
            logger.debug("Reusing image name for duplicate leaf (name=%s)", original_name)
        rename_file(image, new_name)
        logger.debug("Renamed image (path=%s new_name=%s)", image, new_name)

    rewriter = ReferenceRewriter()
    files_changed = 0
    replacements = 0
    reference_files = discover_files(
        root_dir, extensions=REFERENCE_EXTENSIONS, matcher=matcher
    )
    for reference_file in reference_files:
        source = read_source(reference_file)
        result = rewriter.rewrite(source, filename_mapping)
        replacements += result.replacements
        if result.text == source:
            continue
        write_source(reference_file, result.text)
        files_changed += 1

    summary = ImageRenameSummary(
        images_renamed=len(images),
        reference_files_processed=len(reference_files),
        files_changed=files_changed,
        replacements=replacements,
    )
    logger.info(
        "Image rename pass finished (images=%d files=%d changed=%d replacements=%d)",
        summary.images_renamed,
        summary.reference_files_processed,
        summary.files_changed,
        summary.replacements,
    )
    return summary
