"""Gauss-Legendre quadrature rules over reference intervals and the reference triangle."""

from __future__ import annotations

import numpy as np

from ivo.constants import QUADRATURE_ZERO


def gauss1(n: int, a: float, b: float) -> tuple[np.ndarray, np.ndarray]:
    """Nodes and weights of the ``n``-point Gauss-Legendre rule over ``[a, b]``; ``n`` must be odd."""
    if not a < b:
        raise ValueError(f"the interval must satisfy a < b, got [{a}, {b}]")
    if n < 1 or n % 2 == 0:
        raise ValueError(f"the order must be a positive odd number, got {n}")

    m = (n + 1) // 2
    z = np.cos(np.pi * (np.arange(1, m + 1) - 0.25) / (n + 0.5))
    error = np.full(m, 1.0 + QUADRATURE_ZERO)
    temp = np.zeros(m)

    while error.max() > QUADRATURE_ZERO:
        p0 = np.ones(m)
        p1 = np.zeros(m)
        for j in range(1, n + 1):
            p2, p1 = p1, p0
            p0 = (2.0 * j - 1.0) / j * z * p1 - (j - 1.0) / j * p2

        temp = n * (z * p0 - p1) / (z * z - 1.0)
        update = np.where(error > QUADRATURE_ZERO, p0 / temp, 0.0)

        z_old = z
        z = z_old - update
        error = np.abs(z - z_old)

    nodes = (b + a) / 2.0 - (b - a) / 2.0 * np.concatenate((z[:-1], -z[::-1]))

    z_ref = np.concatenate((z[:-1], z[::-1]))
    temp_ref = np.concatenate((temp[:-1], temp[::-1]))
    weights = (b - a) / ((1.0 - z_ref * z_ref) * (temp_ref * temp_ref))

    return nodes, weights


def quadrature1t(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Gauss-Legendre nodes and weights over the reference interval [-1, 1]."""
    return gauss1(n, -1.0, 1.0)


def quadrature1x(n: int) -> tuple[np.ndarray, np.ndarray]:
    """Gauss-Legendre nodes and weights over the reference interval [0, 1]."""
    return gauss1(n, 0.0, 1.0)


def quadrature2xy(n: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Collapsed Gauss-Legendre x nodes, y nodes and weights over the triangle (0,0), (1,0), (0,1)."""
    nodes1, weights1 = quadrature1t(n)

    nodes_x = np.repeat(nodes1, n)
    nodes_y = np.tile(nodes1, n)
    weights_x = np.repeat(weights1, n)
    weights_y = np.tile(weights1, n)

    triangle_x = (1.0 + nodes_x) / 2.0
    triangle_y = (1.0 - nodes_x) * (1.0 + nodes_y) / 4.0
    triangle_weights = (1.0 - nodes_x) * weights_x * weights_y / 8.0

    return triangle_x, triangle_y, triangle_weights