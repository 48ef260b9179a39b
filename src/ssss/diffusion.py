# SPDX-FileCopyrightText: 2025 ssss-gf2n contributors
# SPDX-License-Identifier: MIT

"""Diffusion layer applied to the secret before it becomes coefficient zero.

Mapping a secret straight onto a field element lets a partial reconstruction
leak secret bytes. The value is therefore whitened with a 64-bit Feistel block
cipher (the XTEA-style round function of the reference ``ssss`` tool, with an
all-zero key schedule) slid over the whole buffer in 2-byte steps, so every
output byte depends on every input byte. The transform is keyless and exactly
invertible.
"""

from __future__ import annotations

import struct
from typing import Callable, Tuple

from .bits import Endian, WordOrder, export_bytes, import_bytes, size_in_bits
from .utils.logging import get_logger

logger = get_logger("diffusion")

DELTA = 0x9E3779B9
ROUNDS = 32
MASK = 0xFFFFFFFF
# sum after ROUNDS additions of DELTA, modulo 2**32
DECIPHER_SUM = (DELTA * ROUNDS) & MASK

MIN_DEGREE = 64
PASSES_PER_BYTE = 40

Block = Tuple[int, int]


def encipher_block(v0: int, v1: int) -> Block:
    total = 0
    for _ in range(ROUNDS):
        v0 = (v0 + ((((v1 << 4) ^ (v1 >> 5)) + v1) ^ total)) & MASK
        total = (total + DELTA) & MASK
        v1 = (v1 + ((((v0 << 4) ^ (v0 >> 5)) + v0) ^ total)) & MASK
    return v0, v1


def decipher_block(v0: int, v1: int) -> Block:
    total = DECIPHER_SUM
    for _ in range(ROUNDS):
        v1 = (v1 - ((((v0 << 4) ^ (v0 >> 5)) + v0) ^ total)) & MASK
        total = (total - DELTA) & MASK
        v0 = (v0 - ((((v1 << 4) ^ (v1 >> 5)) + v1) ^ total)) & MASK
    return v0, v1


def _process_slice(data: bytearray, offset: int, size: int, block: Callable[[int, int], Block]) -> None:
    # 8-byte window starting at offset, wrapping around the first `size` bytes
    positions = [(offset + k) % size for k in range(8)]
    v0, v1 = struct.unpack(">II", bytes(data[p] for p in positions))
    for p, byte in zip(positions, struct.pack(">II", *block(v0, v1))):
        data[p] = byte


def _transform(x: int, degree: int, forward: bool) -> int:
    size = degree // 8
    # least significant 16-bit word first, most significant byte first in a word
    buf = bytearray(export_bytes(WordOrder.LSB_FIRST, 2, Endian.MSB, x, count=(degree + 8) // 16))
    odd_words = degree % 16 == 8
    if odd_words:
        buf[size - 1] = buf[size]

    if forward:
        for offset in range(0, PASSES_PER_BYTE * size, 2):
            _process_slice(buf, offset, size, encipher_block)
    else:
        for offset in range(PASSES_PER_BYTE * size - 2, -1, -2):
            _process_slice(buf, offset, size, decipher_block)

    if odd_words:
        buf[size] = buf[size - 1]
        buf[size - 1] = 0

    x = import_bytes(WordOrder.LSB_FIRST, Endian.MSB, bytes(buf), word_size=2)
    assert size_in_bits(x) <= degree
    return x


def _too_small(degree: int) -> bool:
    if degree < MIN_DEGREE:
        logger.warning("Security level too small for the diffusion layer. Secret too short.")
        return True
    return False


def encode(x: int, degree: int) -> int:
    """Whiten field element ``x`` of GF(2^degree); identity below 64 bits."""
    if _too_small(degree):
        return x
    return _transform(x, degree, forward=True)


def decode(x: int, degree: int) -> int:
    """Inverse of :func:`encode`."""
    if _too_small(degree):
        return x
    return _transform(x, degree, forward=False)


__all__ = ["encipher_block", "decipher_block", "encode", "decode"]
