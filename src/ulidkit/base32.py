"""Crockford base32 text codec for ULID fields.

Each character carries 5 bits, most significant group first, so the
lexicographic order of encoded strings matches the numeric order of the
encoded values. The alphabet leaves out I, L, O and U.

Layout of the 26-character canonical form:
- chars 0-9: 48-bit timestamp (the top 2 of its 50 bits are always zero)
- chars 10-17: high 40 bits of randomness
- chars 18-25: low 40 bits of randomness
"""

from __future__ import annotations

from ulidkit._internal.bits import mask

ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

BITS_PER_CHAR = 5
TIMESTAMP_CHARS = 10
RANDOM_HALF_CHARS = 8
ULID_TEXT_LENGTH = TIMESTAMP_CHARS + 2 * RANDOM_HALF_CHARS

_GROUP_MASK = mask(BITS_PER_CHAR)
_DECODE_TABLE: dict[str, int] = {ch: index for index, ch in enumerate(ALPHABET)}


def encode_groups(value: int, count: int) -> str:
    """Encode the low ``count * 5`` bits of ``value`` as ``count`` characters."""
    return "".join(
        ALPHABET[(value >> ((count - i - 1) * BITS_PER_CHAR)) & _GROUP_MASK]
        for i in range(count)
    )


def decode_char(ch: str) -> int:
    """Return the 5-bit value of a normalized character.

    Unknown characters decode to 0. Callers validate before decoding, so the
    fallback is never hit for parsed input.
    """
    return _DECODE_TABLE.get(ch, 0)


def decode_groups(text: str) -> int:
    """Return the base-32 positional value of already-validated text."""
    value = 0
    for ch in text:
        value = (value << BITS_PER_CHAR) | decode_char(ch)
    return value


def encode_ulid_fields(timestamp: int, random_hi: int, random_lo: int) -> str:
    """Encode the three ULID fields into the 26-character canonical form."""
    return (
        encode_groups(timestamp, TIMESTAMP_CHARS)
        + encode_groups(random_hi, RANDOM_HALF_CHARS)
        + encode_groups(random_lo, RANDOM_HALF_CHARS)
    )


def decode_ulid_fields(text: str) -> tuple[int, int, int]:
    """Split validated canonical text into ``(timestamp, random_hi, random_lo)``."""
    hi_start = TIMESTAMP_CHARS
    lo_start = TIMESTAMP_CHARS + RANDOM_HALF_CHARS
    return (
        decode_groups(text[:hi_start]),
        decode_groups(text[hi_start:lo_start]),
        decode_groups(text[lo_start:ULID_TEXT_LENGTH]),
    )
