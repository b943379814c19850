"""Tests for the Ulid value type and its binary and text codecs."""
from __future__ import annotations

import copy
import pickle
from datetime import UTC, datetime

import pytest

from ulidkit import MAX_TIMESTAMP, FormatError, InvalidArgumentError, Ulid

ZERO_RANDOMNESS = bytes(10)
MAX_RANDOMNESS = b"\xff" * 10


class TestFromBytes:
    """Tests for Ulid.from_bytes / to_bytes."""

    def test_roundtrip(self) -> None:
        """to_bytes is the inverse of from_bytes."""
        data = bytes(range(16))

        assert Ulid.from_bytes(data).to_bytes() == data

    def test_field_layout(self) -> None:
        """Bytes split 6/5/5 big-endian into the three fields."""
        ulid = Ulid.from_bytes(bytes(range(16)))

        assert ulid.timestamp == 0x000102030405
        assert ulid.random_hi == 0x060708090A
        assert ulid.random_lo == 0x0B0C0D0E0F

    def test_high_bytes_are_unsigned(self) -> None:
        """Bytes >= 0x80 are not sign-extended into neighbouring fields."""
        data = b"\x80" * 16
        ulid = Ulid.from_bytes(data)

        assert ulid.timestamp == 0x808080808080
        assert ulid.to_bytes() == data

    def test_accepts_bytearray_and_memoryview(self) -> None:
        """Any bytes-like object of the right size is accepted."""
        data = bytes(range(16))

        assert Ulid.from_bytes(bytearray(data)) == Ulid.from_bytes(memoryview(data))

    @pytest.mark.parametrize("size", [0, 3, 15, 17])
    def test_rejects_wrong_size(self, size: int) -> None:
        """Anything but 16 bytes is rejected."""
        with pytest.raises(InvalidArgumentError, match="16"):
            Ulid.from_bytes(bytes(size))

    def test_rejects_none(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Ulid.from_bytes(None)  # type: ignore[arg-type]

    def test_rejects_str_of_right_length(self) -> None:
        """A 16-character str is not bytes."""
        with pytest.raises(InvalidArgumentError, match="bytes-like"):
            Ulid.from_bytes("0123456789abcdef")  # type: ignore[arg-type]

    def test_dunder_bytes(self) -> None:
        ulid = Ulid.from_bytes(bytes(range(16)))

        assert bytes(ulid) == ulid.to_bytes()


class TestFromParts:
    """Tests for Ulid.from_parts."""

    def test_timestamp_and_randomness_preserved(self) -> None:
        """Timestamp and randomness come back out unchanged."""
        now = 1_682_300_000_123
        randomness = bytes(range(10, 20))

        ulid = Ulid.from_parts(now, randomness)

        assert ulid.timestamp == now
        assert ulid.randomness == randomness
        assert ulid.to_bytes()[6:] == randomness

    def test_rejects_timestamp_over_48_bits(self) -> None:
        with pytest.raises(InvalidArgumentError, match="48 bit"):
            Ulid.from_parts(2**48, ZERO_RANDOMNESS)

    def test_rejects_negative_timestamp(self) -> None:
        with pytest.raises(InvalidArgumentError, match="timestamp"):
            Ulid.from_parts(-1, ZERO_RANDOMNESS)

    def test_rejects_wrong_randomness_size(self) -> None:
        with pytest.raises(InvalidArgumentError, match="10"):
            Ulid.from_parts(MAX_TIMESTAMP, bytes(3))

    def test_rejects_str_randomness(self) -> None:
        """A 10-character str is not bytes."""
        with pytest.raises(InvalidArgumentError, match="bytes-like"):
            Ulid.from_parts(0, "0123456789")  # type: ignore[arg-type]


class TestConstruction:
    """Tests for direct construction."""

    def test_rejects_out_of_range_fields(self) -> None:
        with pytest.raises(InvalidArgumentError, match="random_hi"):
            Ulid(0, 2**40, 0)
        with pytest.raises(InvalidArgumentError, match="random_lo"):
            Ulid(0, 0, -1)

    def test_rejects_non_int_fields(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must be an int"):
            Ulid(1.5, 0, 0)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError, match="must be an int"):
            Ulid(True, 0, 0)

    def test_is_immutable(self) -> None:
        ulid = Ulid(1, 2, 3)

        with pytest.raises(AttributeError):
            ulid.timestamp = 5  # type: ignore[misc]


class TestEncode:
    """Tests for the canonical text form."""

    def test_zero(self) -> None:
        assert str(Ulid.from_parts(0, ZERO_RANDOMNESS)) == "00000000000000000000000000"

    def test_max(self) -> None:
        assert str(Ulid.from_parts(MAX_TIMESTAMP, MAX_RANDOMNESS)) == "7ZZZZZZZZZZZZZZZZZZZZZZZZZ"

    def test_max_timestamp_zero_randomness(self) -> None:
        ulid = Ulid.from_parts(MAX_TIMESTAMP, ZERO_RANDOMNESS)

        assert str(ulid) == "7ZZZZZZZZZ0000000000000000"

    def test_zero_timestamp_max_randomness(self) -> None:
        ulid = Ulid.from_parts(0, MAX_RANDOMNESS)

        assert str(ulid) == "0000000000ZZZZZZZZZZZZZZZZ"

    def test_repr(self) -> None:
        ulid = Ulid.from_parts(0, ZERO_RANDOMNESS)

        assert repr(ulid) == "Ulid('00000000000000000000000000')"


class TestParse:
    """Tests for Ulid.parse."""

    def test_parse_lowercase(self) -> None:
        """Lowercase input is normalized before decoding."""
        ulid = Ulid.parse("7zzzzzzzzz0000000000000000")

        assert ulid.timestamp == MAX_TIMESTAMP

    def test_parse_equals_from_parts(self) -> None:
        expected = Ulid.from_parts(MAX_TIMESTAMP, ZERO_RANDOMNESS)

        assert Ulid.parse("7ZZZZZZZZZ0000000000000000") == expected

    def test_parse_roundtrip(self) -> None:
        text = "01GYD6YF6YYNSDENPANV5BK5T2"

        assert str(Ulid.parse(text)) == text

    def test_parse_tolerates_confusable_letters(self) -> None:
        """O, I, L and U are mapped before validation."""
        assert str(Ulid.parse("  olgyd6yf6yynsdenpanu5bk5t2 ")) == "01GYD6YF6YYNSDENPANV5BK5T2"

    def test_parse_rejects_short_text(self) -> None:
        with pytest.raises(FormatError, match="26 Base 32 characters"):
            Ulid.parse("xyz")

    def test_parse_rejects_invalid_characters(self) -> None:
        with pytest.raises(FormatError):
            Ulid.parse("01GYD6YF6YYNSDENPANV5BK5T!")

    def test_parse_rejects_blank(self) -> None:
        with pytest.raises(FormatError):
            Ulid.parse("   ")

    def test_parse_rejects_none(self) -> None:
        """None is an argument error, raised before normalization."""
        with pytest.raises(InvalidArgumentError, match="must not be None"):
            Ulid.parse(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize("suffix", ["\u00df", "\ufb01"])
    def test_parse_rejects_short_text_that_expands_when_upper_cased(self, suffix: str) -> None:
        """Characters whose full upper-case form is two letters do not pad the length."""
        with pytest.raises(FormatError):
            Ulid.parse("01GYD6YF6YYNSDENPANV5BK5" + suffix)

    def test_parse_rejects_timestamp_overflow(self) -> None:
        """A first character above 7 encodes more than 48 timestamp bits."""
        with pytest.raises(FormatError, match="48 bit"):
            Ulid.parse("8ZZZZZZZZZ0000000000000000")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            Ulid.parse("xyz")


class TestIsValid:
    """Tests for Ulid.is_valid."""

    @pytest.mark.parametrize(
        "text",
        [
            "01GYD6YF6YYNSDENPANV5BK5T2",
            "01gyd6yf6yynsdenpanv5bk5t2",
            "olgyd6yf6yynsdenpanu5bk5t2",
            "7ZZZZZZZZZZZZZZZZZZZZZZZZZ",
        ],
    )
    def test_valid(self, text: str) -> None:
        assert Ulid.is_valid(text)

    @pytest.mark.parametrize(
        "text",
        [
            None,
            "",
            "   ",
            "xyz",
            "01GYD6YF6YYNSDENPANV5BK5T2X",
            "8ZZZZZZZZZZZZZZZZZZZZZZZZZ",
            "01GYD6YF6YYNSDENPANV5BK5\u00df",
            "01GYD6YF6YYNSDENPANV5BK5\ufb01",
        ],
    )
    def test_invalid(self, text: str | None) -> None:
        assert not Ulid.is_valid(text)


class TestOrderingAndEquality:
    """Tests for comparison semantics."""

    def test_equal_values_hash_equal(self) -> None:
        a = Ulid.parse("01GYD6YF6YYNSDENPANV5BK5T2")
        b = Ulid.parse("01gyd6yf6yynsdenpanv5bk5t2")

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_order_follows_timestamp_then_randomness(self) -> None:
        early = Ulid.from_parts(1, MAX_RANDOMNESS)
        late = Ulid.from_parts(2, ZERO_RANDOMNESS)
        late_more_random = Ulid.from_parts(2, b"\x00" * 9 + b"\x01")

        assert sorted([late_more_random, late, early]) == [early, late, late_more_random]


class TestIntAndHex:
    """Tests for the integer and hex forms."""

    def test_int_of_max(self) -> None:
        assert int(Ulid.from_parts(MAX_TIMESTAMP, MAX_RANDOMNESS)) == 2**128 - 1

    def test_int_roundtrip(self) -> None:
        ulid = Ulid.from_bytes(bytes(range(16)))

        assert Ulid.from_int(ulid.to_int()) == ulid
        assert ulid.to_int() == int.from_bytes(bytes(range(16)), "big")

    def test_from_int_rejects_out_of_range(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Ulid.from_int(2**128)
        with pytest.raises(InvalidArgumentError):
            Ulid.from_int(-1)

    def test_hex_roundtrip(self) -> None:
        ulid = Ulid.from_bytes(bytes(range(16)))

        assert ulid.hex == "000102030405060708090a0b0c0d0e0f"
        assert Ulid.from_hex(ulid.hex) == ulid

    def test_from_hex_rejects_garbage(self) -> None:
        with pytest.raises(InvalidArgumentError, match="hex"):
            Ulid.from_hex("not hex at all")

    def test_from_hex_rejects_wrong_size(self) -> None:
        with pytest.raises(InvalidArgumentError, match="16"):
            Ulid.from_hex("0011")


class TestDatetime:
    """Tests for the datetime view."""

    def test_epoch(self) -> None:
        ulid = Ulid.from_parts(0, ZERO_RANDOMNESS)

        assert ulid.datetime == datetime(1970, 1, 1, tzinfo=UTC)

    def test_millisecond_precision(self) -> None:
        ulid = Ulid.from_parts(1_682_300_000_123, ZERO_RANDOMNESS)

        assert ulid.datetime == datetime(2023, 4, 24, 1, 33, 20, 123_000, tzinfo=UTC)

    def test_overflow_beyond_year_9999(self) -> None:
        ulid = Ulid.from_parts(MAX_TIMESTAMP, ZERO_RANDOMNESS)

        with pytest.raises(OverflowError):
            _ = ulid.datetime


class TestSerialization:
    """Tests for pickle and copy support."""

    def test_pickle_roundtrip(self) -> None:
        ulid = Ulid.parse("01GYD6YF6YYNSDENPANV5BK5T2")

        assert pickle.loads(pickle.dumps(ulid)) == ulid

    def test_copy(self) -> None:
        ulid = Ulid.parse("01GYD6YF6YYNSDENPANV5BK5T2")

        assert copy.deepcopy(ulid) == ulid
