# SPDX-FileCopyrightText: 2025 ssss-gf2n contributors
# SPDX-License-Identifier: MIT

"""Arithmetic in GF(2^n) for n a multiple of 8 between 8 and 1024.

Elements are plain non-negative integers whose bits are the coefficients of a
polynomial over GF(2). Field operations are carried out by a :class:`FieldContext`
that pairs the field size with its reduction polynomial; contexts are cheap,
immutable and created once per split/combine call.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .bits import (
    Endian,
    WordOrder,
    bitwise_xor,
    export_bytes,
    import_bytes,
    left_shift,
    set_bit,
    size_in_base,
    size_in_bits,
    test_bit,
)
from .errors import InvalidDegree, ValidationError
from .utils.logging import get_logger

logger = get_logger("field")

MAX_DEGREE = 1024

_HEX = re.compile(r"[0-9a-fA-F]*")

# Tap positions of one irreducible pentanomial x^n + x^a + x^b + x^c + 1 per
# supported field size, indexed by 3 * (n / 8 - 1). Shares are only
# interchangeable with other ssss implementations if this table is exact.
IRREDUCIBLE_TAPS = (
    4, 3, 1, 5, 3, 1, 4, 3, 1, 7, 3, 2, 5, 4, 3,
    5, 3, 2, 7, 4, 2, 4, 3, 1, 10, 9, 3, 9, 4, 2,
    7, 6, 2, 10, 9, 6, 4, 3, 1, 5, 4, 3, 4, 3, 1,
    7, 2, 1, 5, 3, 2, 7, 4, 2, 6, 3, 2, 5, 3, 2,
    15, 3, 2, 11, 3, 2, 9, 8, 7, 7, 2, 1, 5, 3, 2,
    9, 3, 1, 7, 3, 1, 9, 8, 3, 9, 4, 2, 8, 5, 3,
    15, 14, 10, 10, 5, 2, 9, 6, 2, 9, 3, 2, 9, 5, 2,
    11, 10, 1, 7, 3, 2, 11, 2, 1, 9, 7, 4, 4, 3, 1,
    8, 3, 1, 7, 4, 1, 7, 2, 1, 13, 11, 6, 5, 3, 2,
    7, 3, 2, 8, 7, 5, 12, 3, 2, 13, 10, 6, 5, 3, 2,
    5, 3, 2, 9, 5, 2, 9, 7, 2, 13, 4, 3, 4, 3, 1,
    11, 6, 4, 18, 9, 6, 19, 18, 13, 11, 3, 2, 15, 9, 6,
    4, 3, 1, 16, 5, 2, 15, 14, 6, 8, 5, 2, 15, 11, 2,
    11, 6, 2, 7, 5, 3, 8, 3, 1, 19, 16, 9, 11, 9, 6,
    15, 7, 6, 13, 4, 3, 14, 13, 3, 13, 6, 3, 9, 5, 2,
    19, 13, 6, 19, 10, 3, 11, 6, 5, 9, 2, 1, 14, 3, 2,
    13, 3, 1, 7, 5, 4, 11, 9, 8, 11, 6, 5, 23, 16, 9,
    19, 14, 6, 23, 10, 2, 8, 3, 2, 5, 4, 3, 9, 6, 4,
    4, 3, 2, 13, 8, 6, 13, 11, 1, 13, 10, 3, 11, 6, 5,
    19, 17, 4, 15, 14, 7, 13, 9, 6, 9, 7, 3, 9, 7, 1,
    14, 3, 2, 11, 8, 2, 11, 6, 4, 13, 5, 2, 11, 5, 1,
    11, 4, 1, 19, 10, 3, 21, 10, 6, 13, 3, 1, 15, 7, 5,
    19, 18, 10, 7, 5, 3, 12, 7, 2, 7, 5, 1, 14, 9, 6,
    10, 3, 2, 15, 13, 12, 12, 11, 9, 16, 9, 7, 12, 9, 3,
    9, 5, 2, 17, 10, 6, 24, 9, 3, 17, 15, 13, 5, 4, 3,
    19, 17, 8, 15, 6, 3, 19, 6, 1,
)


def field_size_valid(degree: int) -> bool:
    return 8 <= degree <= MAX_DEGREE and degree % 8 == 0


def init_polynomial(degree: int) -> int:
    """Return the reduction polynomial of GF(2^degree) as a bit mask."""
    if not field_size_valid(degree):
        raise InvalidDegree(f"invalid field size: {degree}")
    base = 3 * (degree // 8 - 1)
    poly = set_bit(0, degree)
    for tap in IRREDUCIBLE_TAPS[base : base + 3]:
        poly = set_bit(poly, tap)
    return set_bit(poly, 0)


@dataclass(frozen=True)
class FieldContext:
    degree: int
    poly: int

    @classmethod
    def for_degree(cls, degree: int) -> "FieldContext":
        return cls(degree=degree, poly=init_polynomial(degree))

    # -- arithmetic -------------------------------------------------------

    @staticmethod
    def add(x: int, y: int) -> int:
        return bitwise_xor(x, y)

    def multiply(self, x: int, y: int) -> int:
        """Shift-and-add multiplication, reducing whenever bit ``degree`` is set."""
        b = x
        z = b if test_bit(y, 0) else 0
        for i in range(1, self.degree):
            b = left_shift(b, 1)
            if test_bit(b, self.degree):
                b = bitwise_xor(b, self.poly)
            if test_bit(y, i):
                z = bitwise_xor(z, b)
        return z

    def invert(self, x: int) -> int:
        """Multiplicative inverse via the binary extended Euclidean algorithm."""
        if x == 0:
            raise ZeroDivisionError("zero has no inverse in GF(2^n)")
        u, v = x, self.poly
        g, z = 0, 1
        while u != 1:
            shift = size_in_bits(u) - size_in_bits(v)
            if shift < 0:
                u, v = v, u
                z, g = g, z
                shift = -shift
            u = bitwise_xor(u, left_shift(v, shift))
            z = bitwise_xor(z, left_shift(g, shift))
        return z

    # -- conversions ------------------------------------------------------

    def import_hex(self, text: str) -> int:
        if len(text) > self.degree // 4:
            raise ValidationError("input string too long")
        if len(text) < self.degree // 4:
            logger.warning("input string too short, adding null padding on the left")
        if not _HEX.fullmatch(text):
            raise ValidationError("invalid syntax")
        return int(text, 16) if text else 0

    def export_hex(self, value: int) -> str:
        padding = self.degree // 4 - size_in_base(value, 16)
        return "0" * padding + format(value, "x")

    def import_text(self, data: bytes) -> int:
        if len(data) > self.degree // 8:
            raise ValidationError("input string too long")
        if any(byte < 32 or byte >= 127 for byte in data):
            logger.warning("Non-ASCII data detected, use hex mode instead")
        return import_bytes(WordOrder.MSB_FIRST, Endian.MSB, data)

    def export_text(self, value: int) -> bytes:
        return export_bytes(WordOrder.MSB_FIRST, 1, Endian.MSB, value)


__all__ = ["MAX_DEGREE", "IRREDUCIBLE_TAPS", "FieldContext", "field_size_valid", "init_polynomial"]
