"""Gauss-Seidel solver and angle conversions."""

from __future__ import annotations

import math

from .matrix import MatN
from .vector import VecN

PI = math.pi


def lcp_gauss_seidel(a: MatN, b: VecN) -> VecN:
    """Approximate x in a x = b with one Gauss-Seidel sweep per unknown.

    Rows whose update is not finite (for example a zero diagonal) are skipped.
    """
    n = len(b)
    if a.n != n:
        raise ValueError(f"matrix of size {a.n} does not fit vector of length {n}")
    x = VecN.zeros(n)
    for _ in range(n):
        for i, row in enumerate(a.rows):
            try:
                dx = (b[i] - row.dot(x)) / row[i]
            except ZeroDivisionError:
                continue
            if math.isfinite(dx):
                x[i] = x[i] + dx
    return x


def degrees(radians: float) -> float:
    return radians * (180.0 / PI)


def radians(degrees: float) -> float:
    return degrees * (PI / 180.0)