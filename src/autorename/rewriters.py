# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Rewrite class names and file references inside CSS, HTML and JS text."""

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)

_IDENT_CHARS = "A-Za-z0-9_-"

# Selector prelude: a whole segment between delimiters that ends at an opening brace.
_PRELUDE_RE = re.compile(r"(?<![^{};])[^{};]+(?=\{)")
_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_CLASS_SELECTOR_RE = re.compile(rf"\.([{_IDENT_CHARS}]+)\s*[{{,]")
_CLASS_ATTR_RE = re.compile(
    r"(?<![\w-])(class\s*=\s*)([\"'])(.*?)\2", re.IGNORECASE | re.DOTALL
)
_WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")


@dataclass(frozen=True)
class RewriteResult:
    """Store rewritten text and replacement counter.

    Args:
        text: Rewritten text.
        replacements: Number of substitutions applied.
    """

    text: str
    replacements: int


class TextRewriter(Protocol):
    """Define mapping-driven rewrite behavior for one file type."""

    def rewrite(self, text: str, mapping: Mapping[str, str]) -> RewriteResult:
        """Rewrite occurrences of mapping keys in text.

        Args:
            text: Source file content.
            mapping: Original name to replacement name mapping.

        Returns:
            Rewritten text with replacement count.
        """


class CssRewriter:
    """Rename class selectors inside CSS selector preludes."""

    def rewrite(self, text: str, mapping: Mapping[str, str]) -> RewriteResult:
        if not mapping:
            return RewriteResult(text=text, replacements=0)
        pattern = re.compile(
            rf"\.({_alternation(mapping)})(?![{_IDENT_CHARS}])"
        )
        count = 0

        def replace_class(match: re.Match[str]) -> str:
            nonlocal count
            count += 1
            return "." + mapping[match.group(1)]

        def replace_prelude(match: re.Match[str]) -> str:
            return pattern.sub(replace_class, match.group(0))

        rewritten = _PRELUDE_RE.sub(replace_prelude, text)
        return RewriteResult(text=rewritten, replacements=count)


class HtmlRewriter:
    """Rename whole class tokens inside HTML class attributes."""

    def rewrite(self, text: str, mapping: Mapping[str, str]) -> RewriteResult:
        if not mapping:
            return RewriteResult(text=text, replacements=0)
        count = 0

        def replace_attribute(match: re.Match[str]) -> str:
            nonlocal count
            prefix, quote, value = match.group(1), match.group(2), match.group(3)
            parts = _WHITESPACE_SPLIT_RE.split(value)
            for position, part in enumerate(parts):
                if part in mapping:
                    parts[position] = mapping[part]
                    count += 1
            return f"{prefix}{quote}{''.join(parts)}{quote}"

        rewritten = _CLASS_ATTR_RE.sub(replace_attribute, text)
        return RewriteResult(text=rewritten, replacements=count)


class JsRewriter:
    """Rename class names used as exact quoted string literals."""

    def rewrite(self, text: str, mapping: Mapping[str, str]) -> RewriteResult:
        if not mapping:
            return RewriteResult(text=text, replacements=0)
        pattern = re.compile(rf"([\"'])({_alternation(mapping)})\1")
        count = 0

        def replace_literal(match: re.Match[str]) -> str:
            nonlocal count
            count += 1
            quote = match.group(1)
            return f"{quote}{mapping[match.group(2)]}{quote}"

        rewritten = pattern.sub(replace_literal, text)
        return RewriteResult(text=rewritten, replacements=count)


class ReferenceRewriter:
    """Rename file names where they stand as a whole path segment."""

    def rewrite(self, text: str, mapping: Mapping[str, str]) -> RewriteResult:
        if not mapping:
            return RewriteResult(text=text, replacements=0)
        pattern = re.compile(
            rf"(?<![.{_IDENT_CHARS}])({_alternation(mapping)})"
            rf"(?![{_IDENT_CHARS}]|\.[{_IDENT_CHARS}])"
        )
        count = 0

        def replace_reference(match: re.Match[str]) -> str:
            nonlocal count
            count += 1
            return mapping[match.group(1)]

        rewritten = pattern.sub(replace_reference, text)
        return RewriteResult(text=rewritten, replacements=count)


_CLASS_REWRITERS: dict[str, TextRewriter] = {
    "css": CssRewriter(),
    "html": HtmlRewriter(),
    "js": JsRewriter(),
}


def rewriter_for(extension: str) -> TextRewriter:
    """Return the class-name rewriter registered for a file extension.

    Args:
        extension: File extension without the leading dot.

    Returns:
        Rewriter for the extension.

    Raises:
        KeyError: If no rewriter handles the extension.
    """
    return _CLASS_REWRITERS[extension.lower()]


def discover_class_names(css_text: str) -> list[str]:
    """Collect class selector names from CSS text in first-seen order.

    Args:
        css_text: CSS file content.

    Returns:
        Distinct class names without the leading period.
    """
    names: dict[str, None] = {}
    uncommented = _COMMENT_RE.sub(" ", css_text)
    for prelude in _PRELUDE_RE.finditer(uncommented):
        for match in _CLASS_SELECTOR_RE.finditer(prelude.group(0) + "{"):
            names.setdefault(match.group(1), None)
    return list(names)


def _alternation(names: Iterable[str]) -> str:
    """Build a regex alternation that prefers longer names.

    Args:
        names: Literal names to match.

    Returns:
        Escaped alternation pattern body.
    """
    ordered = sorted(names, key=lambda name: (-len(name), name))
    return "|".join(re.escape(name) for name in ordered)
