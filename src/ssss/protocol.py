# SPDX-FileCopyrightText: 2025 ssss-gf2n contributors
# SPDX-License-Identifier: MIT

"""Shamir's secret sharing over GF(2^n).

The secret is mapped onto a field element of 8..1024 bits (the field size is
taken from the secret length), whitened by :mod:`ssss.diffusion` and used as
the constant term of a random polynomial of degree ``threshold``. Shares are
the polynomial evaluated at ``1..number_of_keys``; any ``threshold`` of them
recover every coefficient and therefore the secret.

``split``
    Split a secret given as text (UTF-8) or hex.
``combine``
    Recover the secret from ``threshold`` shares.
``resplit``
    Issue a fresh batch of shares of the same polynomial.
``extend`` / ``regenerate``
    Issue one more share, at the first free index or at a chosen one.
"""

from __future__ import annotations

import re
import secrets
from typing import List, Optional, Sequence, Tuple, Union

from . import diffusion
from . import policy as policy_config
from .bits import Endian, WordOrder, import_bytes
from .errors import InvalidDegree, InvalidShare, ValidationError
from .field import FieldContext, field_size_valid
from .policy import SharingPolicy
from .polynomial import horner
from .shares import Share, format_share, index_width, parse_share, parse_shares
from .solver import interpolate
from .utils.logging import get_logger

logger = get_logger("protocol")

_HEX = re.compile(r"[0-9a-fA-F]*")

SplitResult = Union[List[str], Tuple[List[str], str]]


def _resolve(policy: Optional[SharingPolicy]) -> SharingPolicy:
    return policy if policy is not None else policy_config.policy


def _check_token(token: Optional[str], policy: SharingPolicy) -> None:
    if token and len(token) > policy.max_token_len:
        raise ValidationError("Token too long")


def _check_counts(threshold: int, number_of_keys: int, policy: SharingPolicy) -> int:
    if threshold < 1:
        raise ValidationError("threshold must be at least 1")
    if number_of_keys < 0:
        raise ValidationError("numberOfKeys must not be negative")
    if number_of_keys > 0 and threshold > number_of_keys:
        if policy.threshold_mode == "clamp":
            logger.warning("threshold %d lowered to the number of shares (%d)", threshold, number_of_keys)
            return number_of_keys
        raise ValidationError("threshold must not be greater than numberOfKeys")
    return threshold


def _random_element(degree: int) -> int:
    return import_bytes(WordOrder.MSB_FIRST, Endian.MSB, secrets.token_bytes(degree // 8))


def _evaluate(
    ctx: FieldContext,
    coefficients: Sequence[int],
    indexes: Sequence[int],
    prefix: Optional[str],
    width: int,
) -> List[str]:
    threshold = len(coefficients)
    return [
        format_share(ctx, prefix, index, horner(ctx, threshold, index, coefficients), width)
        for index in indexes
    ]


def split(
    secret: Union[str, bytes],
    *,
    threshold: int,
    number_of_keys: int,
    prefix: Optional[str] = None,
    input_is_hex: bool = False,
    entropy: Optional[str] = None,
    export_entropy: bool = False,
    policy: Optional[SharingPolicy] = None,
) -> SplitResult:
    """Split ``secret`` into ``number_of_keys`` shares, any ``threshold`` of which recover it.

    ``secret`` is text (or raw bytes) unless ``input_is_hex`` is set, in which
    case it is a hex string. ``entropy`` replaces the random coefficients with
    caller supplied hex, making the result deterministic. With
    ``export_entropy`` a ``(shares, entropy)`` tuple is returned, where
    ``entropy`` is the hex of the coefficients that were used.
    """
    policy = _resolve(policy)
    _check_token(prefix, policy)
    threshold = _check_counts(threshold, number_of_keys, policy)

    if input_is_hex:
        if not isinstance(secret, str):
            raise ValidationError("hex secrets must be given as str")
        data = b""
        degree = 4 * ((len(secret) + 1) & ~1)
    else:
        data = secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)
        degree = 8 * len(data)
    if not field_size_valid(degree):
        raise InvalidDegree("Security level invalid (secret too long?)")
    if number_of_keys >= 1 << degree:
        raise ValidationError("numberOfKeys does not fit in the field")

    ctx = FieldContext.for_degree(degree)
    digits = degree // 4
    if entropy is not None:
        expected = digits * (threshold - 1)
        if len(entropy) != expected or not _HEX.fullmatch(entropy):
            raise ValidationError(f"Raw entropy must be a hexadecimal string of length: {expected}")

    element = ctx.import_hex(secret) if input_is_hex else ctx.import_text(data)
    if policy.diffusion:
        element = diffusion.encode(element, degree)

    coefficients = [element]
    for i in range(1, threshold):
        if entropy is not None:
            coefficients.append(int(entropy[digits * (i - 1) : digits * i], 16))
        else:
            coefficients.append(_random_element(degree))

    shares = _evaluate(ctx, coefficients, range(1, number_of_keys + 1), prefix, index_width(number_of_keys))
    logger.debug("split %d-bit secret into %d shares, threshold %d", degree, number_of_keys, threshold)

    if export_entropy:
        return shares, "".join(ctx.export_hex(c) for c in coefficients[1:])
    return shares


def split_string(text: str, **params) -> SplitResult:
    """Split a UTF-8 text secret."""
    return split(text, input_is_hex=False, **params)


def split_hex_string(hex_string: str, **params) -> SplitResult:
    """Split a secret given as a hex string."""
    return split(hex_string, input_is_hex=True, **params)


def split_buffer(buf: bytes, **params) -> SplitResult:
    """Split raw bytes; they are shared in hex mode so leading zeros survive."""
    return split(bytes(buf).hex(), input_is_hex=True, **params)


def _recover(shares: Sequence[str], threshold: int) -> Tuple[FieldContext, List[int]]:
    parsed = parse_shares(shares, threshold)
    ctx = FieldContext.for_degree(parsed[0].degree)
    coefficients = interpolate(ctx, [(share.index, share.element()) for share in parsed])
    logger.debug("recovered %d coefficients in a %d-bit field", len(coefficients), ctx.degree)
    return ctx, coefficients


def _combine(shares: Sequence[str], threshold: int, policy: Optional[SharingPolicy]) -> Tuple[FieldContext, int]:
    policy = _resolve(policy)
    ctx, coefficients = _recover(shares, threshold)
    secret = coefficients[0]
    if policy.diffusion:
        secret = diffusion.decode(secret, ctx.degree)
    return ctx, secret


def combine(
    shares: Sequence[str],
    *,
    threshold: int,
    input_is_hex: bool = False,
    policy: Optional[SharingPolicy] = None,
) -> str:
    """Recover the secret from the first ``threshold`` entries of ``shares``.

    Extra shares are ignored. The secret is returned as hex when
    ``input_is_hex`` is set, as text otherwise.
    """
    ctx, secret = _combine(shares, threshold, policy)
    if input_is_hex:
        return ctx.export_hex(secret)
    data = ctx.export_text(secret)
    if any(byte < 32 or byte >= 127 for byte in data):
        logger.warning("Non-ASCII data detected, use hex mode instead")
    return data.decode("utf-8", errors="replace")


def combine_to_text(shares: Sequence[str], *, threshold: int, **params) -> str:
    return combine(shares, threshold=threshold, input_is_hex=False, **params)


def combine_to_hex_string(shares: Sequence[str], *, threshold: int, **params) -> str:
    return combine(shares, threshold=threshold, input_is_hex=True, **params)


def combine_to_buffer(shares: Sequence[str], *, threshold: int, **params) -> bytes:
    return bytes.fromhex(combine_to_hex_string(shares, threshold=threshold, **params))


def resplit(
    shares: Sequence[str],
    *,
    threshold: int,
    number_of_keys: int,
    prefix: Optional[str] = None,
    policy: Optional[SharingPolicy] = None,
) -> List[str]:
    """Issue ``number_of_keys`` new shares of the polynomial behind ``shares``.

    The new shares are evaluated at ``1..number_of_keys`` so they coincide
    with the original shares at the same indexes; only the prefix may
    change. The secret itself is never decoded.
    """
    _check_token(prefix, _resolve(policy))
    if number_of_keys <= threshold:
        raise ValidationError("numberOfKeys must be greater than threshold")
    ctx, coefficients = _recover(shares, threshold)
    _check_index(ctx, number_of_keys)
    return _evaluate(ctx, coefficients, range(1, number_of_keys + 1), prefix, index_width(number_of_keys))


def _check_index(ctx: FieldContext, index: int) -> None:
    if index >= 1 << ctx.degree:
        raise ValidationError("share index does not fit in the field")


def _supplied(shares: Sequence[str], token: Optional[str]) -> List[Share]:
    # every share carries exactly the token, or no prefix when none is given
    parsed = [parse_share(text) for text in shares]
    if any(share.prefix != (token or None) for share in parsed):
        raise InvalidShare("invalid share")
    return parsed


def _issue(
    shares: Sequence[str],
    threshold: int,
    index: int,
    token: Optional[str],
    supplied: Sequence[Share],
) -> str:
    ctx, coefficients = _recover(shares, threshold)
    _check_index(ctx, index)
    width = max([index_width(index)] + [share.width for share in supplied])
    return _evaluate(ctx, coefficients, [index], token, width)[0]


def extend(
    shares: Sequence[str],
    threshold: int,
    token: Optional[str] = None,
    *,
    policy: Optional[SharingPolicy] = None,
) -> str:
    """Issue one new share at the smallest positive index not in ``shares``."""
    _check_token(token, _resolve(policy))
    supplied = _supplied(shares, token)

    taken = {share.index for share in supplied}
    next_index = 1
    while next_index in taken:
        next_index += 1
    return _issue(shares, threshold, next_index, token, supplied)


def regenerate(
    shares: Sequence[str],
    threshold: int,
    index: int,
    token: Optional[str] = None,
    *,
    policy: Optional[SharingPolicy] = None,
) -> str:
    """Issue the share at ``index``.

    Evaluation only depends on the recovered polynomial, so an index that was
    already issued yields exactly the same share again.
    """
    _check_token(token, _resolve(policy))
    if index < 1:
        raise ValidationError("share index must be positive")
    supplied = _supplied(shares, token)
    return _issue(shares, threshold, index, token, supplied)


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
]
