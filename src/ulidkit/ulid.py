"""The ULID value type and its binary codec.

A ULID is 128 bits: a 48-bit millisecond timestamp followed by 80 bits of
randomness. The randomness is held as two 40-bit halves.

Binary layout (16 bytes, big-endian):
- [0:6)   timestamp
- [6:11)  random_hi
- [11:16) random_lo

See https://github.com/ulid/spec.
"""

from __future__ import annotations

import binascii
import datetime as dt
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ulidkit._internal.bits import mask, pack_be, unpack_be
from ulidkit.base32 import ALPHABET, ULID_TEXT_LENGTH, decode_ulid_fields, encode_ulid_fields
from ulidkit.errors import FormatError, InvalidArgumentError
from ulidkit.normalize import normalize
from ulidkit.validation import is_fixed_size_containing_only, require_fixed_size_containing_only

if TYPE_CHECKING:
    from ulidkit.generator import Clock, RandomSource

TIMESTAMP_BITS = 48
RANDOM_HALF_BITS = 40

TIMESTAMP_BYTES = TIMESTAMP_BITS // 8
RANDOM_HALF_BYTES = RANDOM_HALF_BITS // 8
RANDOMNESS_BYTES = 2 * RANDOM_HALF_BYTES
ULID_BYTES = TIMESTAMP_BYTES + RANDOMNESS_BYTES

MAX_TIMESTAMP = mask(TIMESTAMP_BITS)
MAX_RANDOM_HALF = mask(RANDOM_HALF_BITS)
MAX_INT = mask(ULID_BYTES * 8)

_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.UTC)
_TEXT_FORMAT_MESSAGE = f"'text' must contain {ULID_TEXT_LENGTH} Base 32 characters"


def _as_bytes(data: object, size: int) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        msg = f"'bytes' must be a bytes-like object of exactly {size} elements"
        raise InvalidArgumentError(msg)
    raw = bytes(data)
    if len(raw) != size:
        msg = f"'bytes' must be exactly {size} elements in size"
        raise InvalidArgumentError(msg)
    return raw


def _check_field(name: str, value: object, maximum: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"'{name}' must be an int, got {type(value).__name__}"
        raise InvalidArgumentError(msg)
    if value < 0 or value > maximum:
        msg = f"'{name}' out of range: {value} (must be 0..{maximum})"
        raise InvalidArgumentError(msg)


@dataclass(frozen=True, order=True, repr=False)
class Ulid:
    """Universally Unique Lexicographically Sortable Identifier.

    Instances are immutable and compare in the same order as their canonical
    text form.

    Example:
        >>> ulid = Ulid.parse("01GYD6YF6YYNSDENPANV5BK5T2")
        >>> str(ulid)
        '01GYD6YF6YYNSDENPANV5BK5T2'
        >>> Ulid.from_bytes(ulid.to_bytes()) == ulid
        True
    """

    timestamp: int
    random_hi: int
    random_lo: int

    def __post_init__(self) -> None:
        _check_field("timestamp", self.timestamp, MAX_TIMESTAMP)
        _check_field("random_hi", self.random_hi, MAX_RANDOM_HALF)
        _check_field("random_lo", self.random_lo, MAX_RANDOM_HALF)

    # -- binary codec ------------------------------------------------------

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Ulid:
        """Build a Ulid from exactly 16 bytes.

        Raises:
            InvalidArgumentError: If ``data`` is not a bytes-like object of
                exactly 16 bytes.
        """
        raw = _as_bytes(data, ULID_BYTES)
        lo_start = TIMESTAMP_BYTES + RANDOM_HALF_BYTES
        return cls(
            unpack_be(raw, 0, TIMESTAMP_BYTES),
            unpack_be(raw, TIMESTAMP_BYTES, RANDOM_HALF_BYTES),
            unpack_be(raw, lo_start, RANDOM_HALF_BYTES),
        )

    @classmethod
    def from_parts(cls, timestamp: int, randomness: bytes | bytearray | memoryview) -> Ulid:
        """Build a Ulid from a millisecond timestamp and 10 bytes of randomness.

        Args:
            timestamp: Milliseconds since the Unix epoch, at most 48 bits.
            randomness: Exactly 10 bytes.

        Raises:
            InvalidArgumentError: If the timestamp does not fit in 48 bits or
                ``randomness`` is not a bytes-like object of exactly 10 bytes.
        """
        if isinstance(timestamp, int) and timestamp > MAX_TIMESTAMP:
            msg = "'timestamp' larger than 48 bit"
            raise InvalidArgumentError(msg)
        raw = _as_bytes(randomness, RANDOMNESS_BYTES)
        return cls(
            timestamp,
            unpack_be(raw, 0, RANDOM_HALF_BYTES),
            unpack_be(raw, RANDOM_HALF_BYTES, RANDOM_HALF_BYTES),
        )

    def to_bytes(self) -> bytes:
        """Return the 16-byte big-endian binary form."""
        return (
            pack_be(self.timestamp, TIMESTAMP_BYTES)
            + pack_be(self.random_hi, RANDOM_HALF_BYTES)
            + pack_be(self.random_lo, RANDOM_HALF_BYTES)
        )

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    # -- integer / hex forms -----------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> Ulid:
        """Build a Ulid from its 128-bit integer value."""
        _check_field("value", value, MAX_INT)
        return cls(
            value >> (2 * RANDOM_HALF_BITS),
            (value >> RANDOM_HALF_BITS) & MAX_RANDOM_HALF,
            value & MAX_RANDOM_HALF,
        )

    def to_int(self) -> int:
        """Return the 128-bit integer value."""
        return (
            (self.timestamp << (2 * RANDOM_HALF_BITS))
            | (self.random_hi << RANDOM_HALF_BITS)
            | self.random_lo
        )

    def __int__(self) -> int:
        return self.to_int()

    @classmethod
    def from_hex(cls, value: str) -> Ulid:
        """Build a Ulid from the 32-character hex form of its bytes."""
        try:
            raw = bytes.fromhex(value)
        except (TypeError, ValueError, binascii.Error) as exc:
            msg = f"Invalid hex ULID: {value!r}"
            raise InvalidArgumentError(msg) from exc
        return cls.from_bytes(raw)

    @property
    def hex(self) -> str:
        """Lowercase hex of the 16-byte binary form."""
        return self.to_bytes().hex()

    # -- text codec --------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Ulid:
        """Parse text such as ``01GYD6YF6YYNSDENPANV5BK5T2``.

        The text is normalized first, so lowercase input, surrounding
        whitespace and the letters O, I, L and U are accepted.

        Raises:
            InvalidArgumentError: If ``text`` is None.
            FormatError: If the normalized text is not 26 base32 characters,
                or encodes a timestamp wider than 48 bits.
        """
        if text is None:
            msg = "'text' must not be None"
            raise InvalidArgumentError(msg)
        checked = require_fixed_size_containing_only(
            normalize(text), ULID_TEXT_LENGTH, ALPHABET, _TEXT_FORMAT_MESSAGE
        )
        timestamp, random_hi, random_lo = decode_ulid_fields(checked)
        if timestamp > MAX_TIMESTAMP:
            msg = f"'text' encodes a timestamp larger than 48 bit: {text!r}"
            raise FormatError(msg)
        return cls(timestamp, random_hi, random_lo)

    @staticmethod
    def is_valid(text: str | None) -> bool:
        """Return True if ``text`` would parse."""
        normalized = normalize(text)
        if normalized is None or not is_fixed_size_containing_only(
            normalized, ULID_TEXT_LENGTH, ALPHABET
        ):
            return False
        timestamp, _, _ = decode_ulid_fields(normalized)
        return timestamp <= MAX_TIMESTAMP

    def __str__(self) -> str:
        return encode_ulid_fields(self.timestamp, self.random_hi, self.random_lo)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    # -- derived views -----------------------------------------------------

    @property
    def randomness(self) -> bytes:
        """The 10 bytes of randomness."""
        return self.to_bytes()[TIMESTAMP_BYTES:]

    @property
    def datetime(self) -> dt.datetime:
        """The timestamp as an aware UTC datetime.

        Raises:
            OverflowError: If the timestamp lies beyond ``datetime.max``.
        """
        return _EPOCH + dt.timedelta(milliseconds=self.timestamp)

    # -- generation --------------------------------------------------------

    @classmethod
    def generate(
        cls,
        clock: Clock | None = None,
        random: RandomSource | None = None,
    ) -> Ulid:
        """Generate a new Ulid. See :func:`ulidkit.generator.generate`."""
        from ulidkit.generator import generate  # noqa: PLC0415

        return generate(clock=clock, random=random)
