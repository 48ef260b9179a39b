# SPDX-FileCopyrightText: 2025 ssss-gf2n contributors
# SPDX-License-Identifier: MIT

"""Exceptions raised by the secret sharing routines."""

from __future__ import annotations


class SSSSError(Exception):
    """Base class for every error raised by :mod:`ssss`."""


class ValidationError(SSSSError, ValueError):
    """Parameters of a split/combine request are malformed."""


class InvalidDegree(ValidationError):
    """Field size is outside ``[8, 1024]`` or not a multiple of 8."""


class InvalidShare(SSSSError, ValueError):
    """A share string cannot be parsed."""


class SingularSystem(SSSSError, ArithmeticError):
    """The interpolation matrix has no solution (duplicate evaluation points)."""


class BitIndexError(SSSSError, IndexError):
    pass


class UnsupportedEndianness(SSSSError, NotImplementedError):
    pass


__all__ = [
    "SSSSError",
    "ValidationError",
    "InvalidDegree",
    "InvalidShare",
    "SingularSystem",
    "BitIndexError",
    "UnsupportedEndianness",
]
