"""Shift-and-mask helpers for fixed-width big-endian fields."""

from __future__ import annotations


def mask(width: int) -> int:
    """Return an int with the low ``width`` bits set."""
    return (1 << width) - 1


def unpack_be(data: bytes, start: int, length: int) -> int:
    """Read ``length`` bytes at ``start`` as an unsigned big-endian int."""
    value = 0
    for byte in data[start : start + length]:
        value = (value << 8) | (byte & 0xFF)
    return value


def pack_be(value: int, length: int) -> bytes:
    """Write the low ``length * 8`` bits of ``value`` as big-endian bytes."""
    value &= mask(length * 8)
    return bytes((value >> (8 * (length - i - 1))) & 0xFF for i in range(length))
