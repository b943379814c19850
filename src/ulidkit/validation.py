"""Fixed-size alphabet validation used as the gate before text decode."""

from __future__ import annotations

from ulidkit.errors import FormatError


def is_fixed_size_containing_only(text: str | None, size: int, valid_chars: str | None) -> bool:
    """Check that ``text`` has exactly ``size`` characters, all in ``valid_chars``."""
    if text is None or valid_chars is None:
        return False
    if len(text) != size:
        return False
    return all(ch in valid_chars for ch in text)


def require_fixed_size_containing_only(
    text: str | None,
    size: int,
    valid_chars: str | None,
    message: str,
) -> str:
    """Return ``text`` unchanged if it passes ``is_fixed_size_containing_only``.

    Raises:
        FormatError: With ``message`` if the check fails.
    """
    if text is None or not is_fixed_size_containing_only(text, size, valid_chars):
        raise FormatError(message)
    return text
