import numpy as np
import pytest

from ivo.fem.basis import (
    basis_t,
    basis_xy,
    reference_to_edge,
    reference_to_interval,
    reference_to_triangle,
)
from ivo.fem.quadrature import quadrature1t, quadrature1x, quadrature2xy
from ivo.geometry.point import Point21
from ivo.geometry.polygon import Polygon21, area, triangulate
from ivo.mesh.element import Element21


def square(low, high, t=0.0):
    return Polygon21(
        [Point21(low, low, t), Point21(high, low, t), Point21(high, high, t), Point21(low, high, t)]
    )


@pytest.fixture
def element():
    return Element21(square(-1.0, 1.0, 0.5), 2.0, 2, 3)


@pytest.fixture
def pentagon_element():
    base = Polygon21(
        [Point21(0, 0), Point21(2, 0), Point21(3, 1), Point21(1, 2), Point21(-0.5, 1)]
    )
    return Element21(base, 1.0, 1, 1)


def test_reference_to_interval_maps_endpoints(element):
    times, dt = reference_to_interval(element, np.array([-1.0, 1.0]))
    a, b = element.interval()
    assert np.allclose(times, [a, b])
    assert dt == pytest.approx((b - a) / 2.0)


def test_reference_to_triangle_total_area(pentagon_element):
    x, y, w = quadrature2xy(5)
    triangles = triangulate(pentagon_element.b_base())
    total = 0.0
    for k in range(len(triangles)):
        (mx, my), dxy = reference_to_triangle(pentagon_element, k, (x, y))
        assert mx.shape == x.shape
        total += dxy * w.sum()
    assert total == pytest.approx(area(pentagon_element.b_base()))


def test_reference_to_triangle_maps_vertices(pentagon_element):
    triangle = triangulate(pentagon_element.b_base())[2]
    (mx, my), _ = reference_to_triangle(
        pentagon_element, 2, (np.array([0.0, 1.0, 0.0]), np.array([0.0, 0.0, 1.0]))
    )
    mapped = [Point21(a, b, triangle[0].t) for a, b in zip(mx, my)]
    assert mapped == [triangle[0], triangle[1], triangle[2]]


def test_reference_to_triangle_rejects_mismatched_nodes(element):
    with pytest.raises(ValueError):
        reference_to_triangle(element, 0, (np.zeros(3), np.zeros(2)))


def test_reference_to_edge(pentagon_element):
    nodes, _ = quadrature1x(5)
    edges = pentagon_element.b_base().edges()
    for k, edge in enumerate(edges):
        (x, y), normal, length = reference_to_edge(pentagon_element, k, nodes)
        assert length == pytest.approx(edge.size())
        assert np.linalg.norm(normal) == pytest.approx(1.0)
        direction = np.array([edge.b.x - edge.a.x, edge.b.y - edge.a.y])
        assert np.dot(normal, direction) == pytest.approx(0.0, abs=1e-12)
        for px, py in zip(x, y):
            assert edge.contains(Point21(px, py, edge.a.t))


def test_reference_to_edge_index_out_of_range(pentagon_element):
    with pytest.raises(IndexError):
        reference_to_edge(pentagon_element, 5, np.array([0.5]))


def test_basis_t_orthonormal(element):
    reference, weights = quadrature1t(5)
    times, _ = reference_to_interval(element, reference)
    phi, _ = basis_t(element, times)
    assert phi.shape == (5, element.q + 1)
    gram = phi.T @ (weights[:, None] * phi)
    assert np.allclose(gram, np.eye(element.q + 1))


def test_basis_t_derivative_matches_finite_differences(element):
    times = np.array([0.7, 1.3, 2.1])
    step = 1e-6
    _, gradient = basis_t(element, times)
    plus, _ = basis_t(element, times + step)
    minus, _ = basis_t(element, times - step)
    assert np.allclose(gradient, (plus - minus) / (2 * step), atol=1e-6)


def test_basis_xy_orthonormal_on_box(element):
    x, y, w = quadrature2xy(5)
    columns = (element.p + 1) * (element.p + 2) // 2
    gram = np.zeros((columns, columns))
    for k in range(len(element.b_base())):
        (mx, my), dxy = reference_to_triangle(element, k, (x, y))
        phi, _, _ = basis_xy(element, (mx, my))
        gram += phi.T @ ((dxy * w)[:, None] * phi)
    assert np.allclose(gram, np.eye(columns))


def test_basis_xy_gradients_match_finite_differences(pentagon_element):
    xs = np.array([0.5, 1.0, 1.8])
    ys = np.array([0.4, 1.1, 0.9])
    step = 1e-6
    _, gradx, grady = basis_xy(pentagon_element, (xs, ys))
    px, _, _ = basis_xy(pentagon_element, (xs + step, ys))
    mx, _, _ = basis_xy(pentagon_element, (xs - step, ys))
    py, _, _ = basis_xy(pentagon_element, (xs, ys + step))
    my, _, _ = basis_xy(pentagon_element, (xs, ys - step))
    assert np.allclose(gradx, (px - mx) / (2 * step), atol=1e-6)
    assert np.allclose(grady, (py - my) / (2 * step), atol=1e-6)


def test_basis_xy_shape(pentagon_element):
    xs = np.array([0.5, 1.0, 1.8, 0.2])
    phi, gradx, grady = basis_xy(pentagon_element, (xs, xs))
    expected = (4, (pentagon_element.p + 1) * (pentagon_element.p + 2) // 2)
    assert phi.shape == gradx.shape == grady.shape == expected


def test_basis_xy_rejects_mismatched_nodes(element):
    with pytest.raises(ValueError):
        basis_xy(element, (np.zeros(2), np.zeros(3)))