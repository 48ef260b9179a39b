# SPDX-FileCopyrightText: 2025 ssss-gf2n contributors
# SPDX-License-Identifier: MIT

"""Shamir's secret sharing over GF(2^n), share-compatible with ``ssss``."""

from __future__ import annotations

from .errors import (
    BitIndexError,
    InvalidDegree,
    InvalidShare,
    SingularSystem,
    SSSSError,
    UnsupportedEndianness,
    ValidationError,
)
from .policy import SharingPolicy, load_policy
from .protocol import (
    combine,
    combine_to_buffer,
    combine_to_hex_string,
    combine_to_text,
    extend,
    regenerate,
    resplit,
    split,
    split_buffer,
    split_hex_string,
    split_string,
)
from .shares import Share, parse_share

__version__ = "0.1.0"

__all__ = [
    "split",
    "split_string",
    "split_hex_string",
    "split_buffer",
    "combine",
    "combine_to_text",
    "combine_to_hex_string",
    "combine_to_buffer",
    "resplit",
    "extend",
    "regenerate",
    "parse_share",
    "Share",
    "SharingPolicy",
    "load_policy",
    "SSSSError",
    "ValidationError",
    "InvalidDegree",
    "InvalidShare",
    "SingularSystem",
    "BitIndexError",
    "UnsupportedEndianness",
]
