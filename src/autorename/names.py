# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Generate random replacement tokens for class names and image filenames."""

import logging
import random
import string

logger = logging.getLogger(__name__)

FILE_NAME_LENGTH = 10
CLASS_NAME_LENGTH = 8

_LETTERS = string.ascii_letters
_ALPHANUMERIC = string.digits + string.ascii_letters


def generate_random_file_name(
    extension: str = "", rng: random.Random | None = None
) -> str:
    """Generate a random alphanumeric file name.

    Args:
        extension: Extension appended after a dot when non-empty.
        rng: Random source; the module-level generator when omitted.

    Returns:
        Ten-character alphanumeric base, optionally with extension.
    """
    source = rng if rng is not None else random
    base = "".join(source.choices(_ALPHANUMERIC, k=FILE_NAME_LENGTH))
    return f"{base}.{extension}" if extension else base


def generate_random_class_name(
    length: int = CLASS_NAME_LENGTH, rng: random.Random | None = None
) -> str:
    """Generate a random class name that starts with a letter.

    Args:
        length: Number of characters in the result.
        rng: Random source; the module-level generator when omitted.

    Returns:
        Identifier-safe alphanumeric class name.

    Raises:
        ValueError: If length is smaller than one.
    """
    if length < 1:
        raise ValueError(f"Class name length must be positive: {length}")
    source = rng if rng is not None else random
    first = source.choice(_LETTERS)
    rest = "".join(source.choices(_ALPHANUMERIC, k=length - 1))
    return first + rest


class NameGenerator:
    """Produce replacement tokens that are unique within one run."""

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize generator state.

        Args:
            rng: Random source shared by every generated token.
        """
        self._rng = rng
        self._seen: set[str] = set()

    def reserve(self, name: str) -> None:
        """Mark an existing name so it is never produced as a replacement.

        Args:
            name: Class name or file stem already present in the project.
        """
        self._seen.add(name)

    def is_taken(self, name: str) -> bool:
        return name in self._seen

    def class_name(self, length: int = CLASS_NAME_LENGTH) -> str:
        """Generate a class name not produced or reserved before.

        Args:
            length: Number of characters in the result.

        Returns:
            Fresh class name.
        """
        while True:
            candidate = generate_random_class_name(length=length, rng=self._rng)
            if candidate in self._seen:
                logger.debug("Regenerating colliding class name (name=%s)", candidate)
                continue
            self._seen.add(candidate)
            return candidate

    def file_name(self, extension: str = "") -> str:
        """Generate a file name whose base was not produced or reserved before.

        Args:
            extension: Extension appended after a dot when non-empty.

        Returns:
            Fresh file name.
        """
        while True:
            base = generate_random_file_name(rng=self._rng)
            if base in self._seen:
                logger.debug("Regenerating colliding file name (name=%s)", base)
                continue
            self._seen.add(base)
            return f"{base}.{extension}" if extension else base
