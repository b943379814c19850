"""ulidkit - Universally Unique Lexicographically Sortable Identifiers.

A ULID is a 128-bit identifier: a 48-bit millisecond timestamp followed by
80 bits of randomness. Its 26-character Crockford base32 form sorts in
timestamp order.

Example:
    >>> from ulidkit import Ulid
    >>>
    >>> ulid = Ulid.generate()
    >>> parsed = Ulid.parse(str(ulid).lower())
    >>> parsed == ulid
    True
"""

from __future__ import annotations

from ulidkit.base32 import ALPHABET
from ulidkit.errors import FormatError, InvalidArgumentError, UlidError
from ulidkit.generator import Clock, RandomSource, generate, system_clock
from ulidkit.normalize import normalize
from ulidkit.ulid import MAX_TIMESTAMP, Ulid

__version__ = "0.1.0"

__all__ = [
    "ALPHABET",
    "MAX_TIMESTAMP",
    "Clock",
    "FormatError",
    "InvalidArgumentError",
    "RandomSource",
    "Ulid",
    "UlidError",
    "__version__",
    "generate",
    "normalize",
    "system_clock",
]
