import pytest

from ivo.geometry.edge import Edge21
from ivo.geometry.point import Point21, distance


@pytest.fixture
def unit_edge():
    return Edge21(Point21(0, 0, 0), Point21(1, 0, 0))


def test_degenerate_edge_rejected():
    with pytest.raises(ValueError):
        Edge21(Point21(1, 1, 0), Point21(1, 1, 0))


def test_getitem(unit_edge):
    assert unit_edge[0] == Point21(0, 0, 0)
    assert unit_edge[1] == Point21(1, 0, 0)


def test_getitem_out_of_range(unit_edge):
    with pytest.raises(IndexError) as excinfo:
        unit_edge[2]
    assert excinfo.type is IndexError
    assert list(unit_edge) == [Point21(0, 0, 0), Point21(1, 0, 0)]


def test_equality_ignores_orientation(unit_edge):
    assert unit_edge == Edge21(Point21(1, 0, 0), Point21(0, 0, 0))
    assert unit_edge != Edge21(Point21(0, 0, 0), Point21(2, 0, 0))


def test_size_matches_endpoint_distance():
    edge = Edge21(Point21(1, 2, 0), Point21(-3, 5, 1))
    assert edge.size() == pytest.approx(distance(edge[0], edge[1]))


def test_contains_endpoints_and_midpoint(unit_edge):
    assert unit_edge.contains(unit_edge[0])
    assert unit_edge.contains(unit_edge[1])
    assert unit_edge.contains((unit_edge[0] + unit_edge[1]) / 2)


def test_does_not_contain_outside_points(unit_edge):
    assert not unit_edge.contains(Point21(2, 0, 0))
    assert not unit_edge.contains(Point21(0.5, 0.1, 0))


def test_contains_edge(unit_edge):
    assert unit_edge.contains_edge(Edge21(Point21(0.25, 0, 0), Point21(0.75, 0, 0)))
    assert not unit_edge.contains_edge(Edge21(Point21(0.5, 0, 0), Point21(1.5, 0, 0)))


def test_is_spatial(unit_edge):
    assert unit_edge.is_spatial()
    assert not Edge21(Point21(0, 0, 0), Point21(0, 0, 1)).is_spatial()


def test_str(unit_edge):
    assert str(unit_edge) == "[(0, 0; 0), (1, 0; 0)]"