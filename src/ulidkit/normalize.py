"""Normalization of hand-typed or OCR'd ULID text."""

from __future__ import annotations

import string

# Maps one character to exactly one character, so length never changes.
# Only ASCII letters are upper-cased; the canonical alphabet is ASCII.
_NORMALIZE_TABLE = str.maketrans(
    {
        **dict(zip(string.ascii_lowercase, string.ascii_uppercase, strict=True)),
        "O": "0",
        "o": "0",
        "I": "1",
        "i": "1",
        "L": "1",
        "l": "1",
        "U": "V",
        "u": "V",
    }
)


def normalize(text: str | None) -> str | None:
    """Normalize text before validation.

    Strips surrounding whitespace, upper-cases ASCII letters, and maps the
    commonly confused letters ``O -> 0``, ``I -> 1``, ``L -> 1`` and
    ``U -> V``. Any other character is kept as-is; this function does not
    validate. The result has the same length as the stripped input.

    Args:
        text: Text to normalize, or None.

    Returns:
        The normalized text, or None if ``text`` is None or blank.
    """
    if text is None:
        return None
    stripped = text.strip()
    if not stripped:
        return None
    return stripped.translate(_NORMALIZE_TABLE)
