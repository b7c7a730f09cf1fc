"""Byte-order conversion of fixed-width integers."""

from __future__ import annotations

import sys

_WIDTHS = (16, 32, 64)
_NATIVE_IS_BIG = sys.byteorder == "big"


def _check(value: int, bits: int, signed: bool) -> int:
    """Validate *value* for the width and return it as an unsigned integer."""
    if bits not in _WIDTHS:
        raise ValueError(f"unsupported integer width: {bits}")
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= value <= high:
        kind = "signed" if signed else "unsigned"
        raise ValueError(f"{value} does not fit in a {kind} {bits}-bit integer")
    return value + (1 << bits) if value < 0 else value


def _from_unsigned(value: int, bits: int, signed: bool) -> int:
    if signed and value >= 1 << (bits - 1):
        return value - (1 << bits)
    return value


def _swap(value: int, bits: int) -> int:
    nbytes = bits // 8
    return int.from_bytes(value.to_bytes(nbytes, "little"), "big")


def swap16(value: int) -> int:
    """Swap the two bytes of an unsigned 16-bit integer."""
    return _swap(_check(value, 16, False), 16)


def swap32(value: int) -> int:
    """Reverse the byte order of an unsigned 32-bit integer."""
    return _swap(_check(value, 32, False), 32)


def swap64(value: int) -> int:
    """Reverse the byte order of an unsigned 64-bit integer."""
    return _swap(_check(value, 64, False), 64)


def _convert(value: int, bits: int, signed: bool, needs_swap: bool) -> int:
    unsigned = _check(value, bits, signed)
    if needs_swap:
        unsigned = _swap(unsigned, bits)
    return _from_unsigned(unsigned, bits, signed)


def native_to_little(value: int, bits: int = 32, signed: bool = False) -> int:
    """Convert an integer from native byte order to little endian."""
    return _convert(value, bits, signed, _NATIVE_IS_BIG)


def native_to_big(value: int, bits: int = 32, signed: bool = False) -> int:
    """Convert an integer from native byte order to big endian."""
    return _convert(value, bits, signed, not _NATIVE_IS_BIG)


def little_to_native(value: int, bits: int = 32, signed: bool = False) -> int:
    """Convert an integer from little endian to native byte order."""
    return native_to_little(value, bits, signed)


def big_to_native(value: int, bits: int = 32, signed: bool = False) -> int:
    """Convert an integer from big endian to native byte order."""
    return native_to_big(value, bits, signed)