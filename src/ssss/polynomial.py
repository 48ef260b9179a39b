# SPDX-FileCopyrightText: 2025 ssss-gf2n contributors
# SPDX-License-Identifier: MIT

"""Evaluation of the sharing polynomial."""

from __future__ import annotations

from typing import Sequence

from .field import FieldContext


def horner(ctx: FieldContext, threshold: int, x: int, coefficients: Sequence[int]) -> int:
    """Evaluate ``x^t + c[t-1]*x^(t-1) + ... + c[1]*x + c[0]`` at ``x``.

    The polynomial carries an implicit monic leading term ``x^threshold``;
    ``coefficients[0]`` is the constant term. This matches the share values
    produced by the reference ``ssss`` implementation.
    """
    y = x
    for i in range(threshold - 1, 0, -1):
        y = ctx.add(y, coefficients[i])
        y = ctx.multiply(y, x)
    return ctx.add(y, coefficients[0])


__all__ = ["horner"]
