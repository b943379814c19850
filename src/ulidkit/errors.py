"""Exception types raised by ulidkit."""

from __future__ import annotations


class UlidError(ValueError):
    """Base class for all ulidkit errors."""


class InvalidArgumentError(UlidError):
    """Raised when a caller passes a structurally wrong argument.

    Examples: a byte string of the wrong length, a timestamp outside the
    48-bit range, or ``None`` where text is mandatory.
    """


class FormatError(UlidError):
    """Raised when text cannot be parsed as a ULID."""
