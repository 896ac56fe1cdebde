"""Legendre polynomials and their derivatives."""

from __future__ import annotations

import math

import numpy as np


def binomial(n: int, k: int) -> int:
    """Binomial coefficient ``n`` choose ``k``, for ``0 <= k <= n``."""
    if k < 0 or n < k:
        raise ValueError(f"binomial coefficient needs 0 <= k <= n, got n={n}, k={k}")
    return math.comb(n, k)


def legendre(x, n: int, k: int) -> np.ndarray:
    """The ``k``-th derivative of the Legendre polynomial of degree ``n`` at the points ``x``."""
    if n < 0 or k < 0:
        raise ValueError(f"degree and derivative order must be non-negative, got n={n}, k={k}")

    x = np.asarray(x, dtype=float)
    shifted = 0.5 * (x - 1.0)
    result = np.zeros_like(x)

    for j in range(k, n + 1):
        factor = math.prod(0.5 * (j - h) for h in range(k))
        result = result + binomial(n, j) * binomial(n + j, j) * factor * shifted ** (j - k)

    return result