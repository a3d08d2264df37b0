# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for class and image renaming components."""

from autorename.classes import ClassRenameSummary, find_and_replace_class_names
from autorename.files import IgnoreMatcher, RenameError, discover_files
from autorename.images import ImageRenameSummary, find_and_replace_image_names
from autorename.names import (
    NameGenerator,
    generate_random_class_name,
    generate_random_file_name,
)
from autorename.rewriters import (
    CssRewriter,
    HtmlRewriter,
    JsRewriter,
    ReferenceRewriter,
    RewriteResult,
    TextRewriter,
    discover_class_names,
    rewriter_for,
)

__all__ = [
    "ClassRenameSummary",
    "CssRewriter",
    "HtmlRewriter",
    "IgnoreMatcher",
    "ImageRenameSummary",
    "JsRewriter",
    "NameGenerator",
    "ReferenceRewriter",
    "RenameError",
    "RewriteResult",
    "TextRewriter",
    "discover_class_names",
    "discover_files",
    "find_and_replace_class_names",
    "find_and_replace_image_names",
    "generate_random_class_name",
    "generate_random_file_name",
    "rewriter_for",
]
