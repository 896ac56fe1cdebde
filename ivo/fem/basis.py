"""Reference maps and modal Legendre bases over prismatic elements."""

from __future__ import annotations

import math

import numpy as np

from ivo.fem.legendre import legendre
from ivo.geometry.edge import Edge21
from ivo.geometry.point import distance
from ivo.geometry.polygon import box2, triangulate
from ivo.mesh.element import Element21


def _space_nodes(nodes) -> tuple[np.ndarray, np.ndarray]:
    nodes_x, nodes_y = nodes
    nodes_x = np.asarray(nodes_x, dtype=float)
    nodes_y = np.asarray(nodes_y, dtype=float)
    if nodes_x.shape != nodes_y.shape:
        raise ValueError(f"x and y nodes differ in shape: {nodes_x.shape} and {nodes_y.shape}")
    return nodes_x, nodes_y


def reference_to_interval(element: Element21, nodes) -> tuple[np.ndarray, float]:
    """Map nodes on [-1, 1] to the element's time interval; returns the nodes and the Jacobian."""
    a, b = element.interval()
    dt = (b - a) / 2.0
    return dt * np.asarray(nodes, dtype=float) + (a + b) / 2.0, dt


def reference_to_triangle(
    element: Element21, k: int, nodes
) -> tuple[tuple[np.ndarray, np.ndarray], float]:
    """Map nodes on the reference triangle to the ``k``-th triangle of the element's base.

    Returns the mapped (x, y) nodes and the Jacobian's determinant.
    """
    nodes_x, nodes_y = _space_nodes(nodes)
    triangle = triangulate(element.b_base())[k]
    p0, p1, p2 = triangle[0], triangle[1], triangle[2]

    jacobian = np.array([[p1.x - p0.x, p2.x - p0.x], [p1.y - p0.y, p2.y - p0.y]])
    determinant = float(jacobian[0, 0] * jacobian[1, 1] - jacobian[0, 1] * jacobian[1, 0])

    x = jacobian[0, 0] * nodes_x + jacobian[0, 1] * nodes_y + p0.x
    y = jacobian[1, 0] * nodes_x + jacobian[1, 1] * nodes_y + p0.y
    return (x, y), determinant


def reference_to_edge(
    element: Element21, k: int, nodes
) -> tuple[tuple[np.ndarray, np.ndarray], np.ndarray, float]:
    """Map nodes on [0, 1] to the ``k``-th edge of the element's base.

    Returns the mapped (x, y) nodes, the edge's unit normal and its length.
    """
    edges = element.b_base().edges()
    if not 0 <= k < len(edges):
        raise IndexError(f"edge index out of range: {k}")
    edge: Edge21 = edges[k]
    nodes = np.asarray(nodes, dtype=float)

    dx = edge.b.x - edge.a.x
    dy = edge.b.y - edge.a.y
    x = dx * nodes + edge.a.x
    y = dy * nodes + edge.a.y

    normal = np.array([dy, -dx])
    normal /= np.linalg.norm(normal)
    return (x, y), normal, distance(edge.a, edge.b)


def basis_t(element: Element21, nodes) -> tuple[np.ndarray, np.ndarray]:
    """Time basis functions and their time derivatives at the given physical times.

    Each matrix has one row per node and one column per basis function.
    """
    a, b = element.interval()
    dt = 2.0 / (b - a)
    t = dt * (np.asarray(nodes, dtype=float) - (a + b) / 2.0)

    columns = element.q + 1
    phi = np.empty((t.size, columns))
    gradt_phi = np.empty((t.size, columns))

    for k in range(columns):
        coefficient = math.sqrt(k + 0.5)
        phi[:, k] = coefficient * legendre(t, k, 0)
        gradt_phi[:, k] = dt * coefficient * legendre(t, k, 1)

    return phi, gradt_phi


def basis_xy(element: Element21, nodes) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Space basis functions and their x and y derivatives at the given physical points.

    Each matrix has one row per node and one column per basis function.
    """
    nodes_x, nodes_y = _space_nodes(nodes)
    p = element.p
    columns = (p + 1) * (p + 2) // 2

    low, high = box2(element.b_base())
    scale_x = 0.5 * (high.x - low.x)
    scale_y = 0.5 * (high.y - low.y)
    shift_x = 0.5 * (high.x + low.x)
    shift_y = 0.5 * (high.y + low.y)

    x = (nodes_x - shift_x) / scale_x
    y = (nodes_y - shift_y) / scale_y

    degrees = [(kx, ky) for kx in range(p + 1) for ky in range(p + 1 - kx)]

    phi = np.empty((x.size, columns))
    gradx_phi = np.empty((x.size, columns))
    grady_phi = np.empty((x.size, columns))

    for k, (px, py) in enumerate(degrees):
        legendre_x = legendre(x, px, 0)
        legendre_y = legendre(y, py, 0)
        coefficient = math.sqrt((2.0 * px + 1.0) * (2.0 * py + 1.0)) / 2.0

        phi[:, k] = coefficient * legendre_x * legendre_y
        gradx_phi[:, k] = coefficient * legendre(x, px, 1) * legendre_y / scale_x
        grady_phi[:, k] = coefficient * legendre_x * legendre(y, py, 1) / scale_y

    return phi, gradx_phi, grady_phi