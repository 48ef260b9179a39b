# SPDX-FileCopyrightText: 2025 ssss-gf2n contributors
# SPDX-License-Identifier: MIT

"""Recover the sharing polynomial from ``threshold`` points.

The points define a Vandermonde-style system over GF(2^n) which is solved by
Gaussian elimination. The matrix is stored column-per-share:
``matrix[k][i]`` is the coefficient of unknown ``k`` in the equation
contributed by share ``i``, where unknown ``k`` is the coefficient of
``x^(t-1-k)``. Solving yields every coefficient, not only the constant term,
so that new shares can be evaluated afterwards.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .errors import SingularSystem
from .field import FieldContext

Matrix = List[List[int]]


def build_system(ctx: FieldContext, points: Sequence[Tuple[int, int]]) -> Tuple[Matrix, List[int]]:
    """Build the interpolation matrix and right-hand side for ``(x, y)`` points."""
    n = len(points)
    matrix: Matrix = [[0] * n for _ in range(n)]
    values: List[int] = []
    for i, (x, y) in enumerate(points):
        matrix[n - 1][i] = 1
        for j in range(n - 2, -1, -1):
            matrix[j][i] = ctx.multiply(matrix[j + 1][i], x)
        # strip the implicit x^t term of the monic sharing polynomial
        values.append(ctx.add(y, ctx.multiply(x, matrix[0][i])))
    return matrix, values


def solve(ctx: FieldContext, matrix: Matrix, values: List[int]) -> List[int]:
    """Solve the system in place.

    Returns the coefficients lowest degree first; element 0 is the constant
    term. Raises :class:`SingularSystem` if no pivot can be found, which
    happens when two shares have the same index.
    """
    n = len(values)
    mul, add = ctx.multiply, ctx.add

    for i in range(n):
        if matrix[i][i] == 0:
            for j in range(i + 1, n):
                if matrix[i][j] != 0:
                    break
            else:
                raise SingularSystem("Shares inconsistent. Perhaps a single share was used twice.")
            for k in range(i, n):
                matrix[k][i], matrix[k][j] = matrix[k][j], matrix[k][i]
            values[i], values[j] = values[j], values[i]
        for j in range(i + 1, n):
            if matrix[i][j] == 0:
                continue
            for k in range(i + 1, n):
                h = mul(matrix[k][i], matrix[i][j])
                matrix[k][j] = add(mul(matrix[k][j], matrix[i][i]), h)
            h = mul(values[i], matrix[i][j])
            values[j] = add(mul(values[j], matrix[i][i]), h)

    values[n - 1] = mul(values[n - 1], ctx.invert(matrix[n - 1][n - 1]))
    coefficients = [values[n - 1]]
    for i in range(n - 2, -1, -1):
        for j in range(n - 1, i, -1):
            values[i] = add(values[i], mul(values[j], matrix[j][i]))
        values[i] = mul(values[i], ctx.invert(matrix[i][i]))
        coefficients.append(values[i])
    return coefficients


def interpolate(ctx: FieldContext, points: Sequence[Tuple[int, int]]) -> List[int]:
    """Coefficients ``[c0, ..., c(t-1)]`` of the polynomial through ``points``."""
    matrix, values = build_system(ctx, points)
    return solve(ctx, matrix, values)


__all__ = ["build_system", "solve", "interpolate"]
