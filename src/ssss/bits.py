# SPDX-FileCopyrightText: 2025 ssss-gf2n contributors
# SPDX-License-Identifier: MIT

"""Bit-level helpers over arbitrary precision integers.

Negative values follow two's-complement semantics: every operation behaves as
if the integer were written out in binary and sign-extended to whatever width
the other operand needs. The helpers work on a fixed-width binary image of the
operands sized to the wider of the two, so no sign/magnitude conversion is
ever performed on strings.

The byte import/export functions mirror the word order / endianness model of
GMP's ``mpz_import`` and ``mpz_export``.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from .errors import BitIndexError, UnsupportedEndianness


class WordOrder(Enum):
    MSB_FIRST = 1
    LSB_FIRST = -1


class Endian(Enum):
    MSB = 1
    LSB = -1
    HOST = 0


def two_compl(value: int) -> int:
    """Return a number that "looks" like the two's complement of ``value``.

    Non-negative values and ``-1`` come back unchanged. For any other negative
    input the magnitude of the result, written in binary and sign-extended with
    ones, is the two's complement of ``value``::

        >>> bin(two_compl(-6))
        '-0b1010'
        >>> bin(two_compl(-9))
        '-0b10111'
    """
    if value >= 0 or value == -1:
        return value
    magnitude = -value - 1
    width = magnitude.bit_length()
    inverted = ~magnitude & ((1 << width) - 1)
    return -((1 << width) | inverted)


def _check_index(index: int) -> None:
    if index < 0:
        raise BitIndexError(f"negative bit index: {index}")


def test_bit(value: int, index: int) -> int:
    """Return bit ``index`` of ``value`` (0 or 1), sign-extending negatives."""
    _check_index(index)
    # Python right shifts are arithmetic, i.e. already sign-extending.
    return (value >> index) & 1


def _width(a: int, b: int) -> int:
    # one extra bit so the sign of both operands survives in the image
    return max(a.bit_length(), b.bit_length()) + 1


def _bin_map(a: int, b: int, op: Callable[[int, int], int]) -> int:
    width = _width(a, b)
    mask = (1 << width) - 1
    image = op(a & mask, b & mask) & mask
    if image >> (width - 1):
        return image - (1 << width)
    return image


def bitwise_or(a: int, b: int) -> int:
    return _bin_map(a, b, lambda x, y: x | y)


def bitwise_xor(a: int, b: int) -> int:
    return _bin_map(a, b, lambda x, y: x ^ y)


def set_bit(value: int, index: int) -> int:
    """Return ``value`` with bit ``index`` set; the sign is preserved."""
    _check_index(index)
    return bitwise_or(value, 1 << index)


def left_shift(value: int, count: int) -> int:
    return value << count


def size_in_bits(value: int) -> int:
    return abs(value).bit_length()


_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def size_in_base(value: int, base: int) -> int:
    """Number of digits of ``abs(value)`` in ``base`` (2..36); zero has one digit."""
    if not 2 <= base <= 36:
        raise ValueError(f"unsupported base: {base}")
    value = abs(value)
    if base & (base - 1) == 0:
        shift = base.bit_length() - 1
        return max(1, -(-value.bit_length() // shift))
    digits = 1
    while value >= base:
        value //= base
        digits += 1
    return digits


def _check_endian(endian: Endian, word_size: int) -> None:
    if endian is Endian.HOST and word_size > 1:
        raise UnsupportedEndianness("host-native endianness is not supported")


def import_bytes(order: WordOrder, endian: Endian, data: bytes, word_size: int = 1) -> int:
    """Build a non-negative integer from ``data``.

    ``data`` is read as a sequence of ``word_size``-byte words, ordered by
    ``order``; the bytes inside each word are ordered by ``endian``.
    """
    _check_endian(endian, word_size)
    if len(data) % word_size:
        raise ValueError("data length is not a multiple of the word size")
    words = [data[i : i + word_size] for i in range(0, len(data), word_size)]
    if order is WordOrder.MSB_FIRST:
        words.reverse()
    if endian is Endian.MSB:
        words = [word[::-1] for word in words]
    return int.from_bytes(b"".join(words), "little")


def export_bytes(
    order: WordOrder,
    word_size: int,
    endian: Endian,
    value: int,
    count: int | None = None,
) -> bytes:
    """Inverse of :func:`import_bytes`.

    Without ``count`` the minimal number of words is produced (none for zero);
    otherwise the output is zero-padded to exactly ``count`` words.
    """
    _check_endian(endian, word_size)
    if value < 0:
        raise ValueError("cannot export a negative value")
    needed = -(-value.bit_length() // (8 * word_size))
    if count is None:
        count = needed
    elif count < needed:
        raise ValueError(f"value does not fit in {count} words")
    raw = value.to_bytes(count * word_size, "little")
    words = [raw[i : i + word_size] for i in range(0, len(raw), word_size)]
    if endian is Endian.MSB:
        words = [word[::-1] for word in words]
    if order is WordOrder.MSB_FIRST:
        words.reverse()
    return b"".join(words)


__all__ = [
    "WordOrder",
    "Endian",
    "two_compl",
    "test_bit",
    "bitwise_or",
    "bitwise_xor",
    "set_bit",
    "left_shift",
    "size_in_bits",
    "size_in_base",
    "import_bytes",
    "export_bytes",
]
