"""Lines in 2 + 1 dimensions, with intersections, distances and bisectors."""

from __future__ import annotations

from itertools import permutations
from typing import Iterable, Protocol

import numpy as np

from ivo.constants import GEOMETRY_ZERO
from ivo.geometry.edge import Edge21
from ivo.geometry.point import Point21, distance


class _HasEdges(Protocol):
    def edges(self) -> Iterable[Edge21]: ...


class Line21:
    """Parametric line ``origin + s * direction`` through two distinct points."""

    __slots__ = ("_direction", "_origin")

    def __init__(self, p: Point21, q: Point21) -> None:
        if p == q:
            raise ValueError(f"a line needs two distinct points, got {p} twice")
        self._direction = (q.x - p.x, q.y - p.y, q.t - p.t)
        self._origin = (p.x, p.y, p.t)

    @classmethod
    def from_edge(cls, edge: Edge21) -> Line21:
        """Line supporting an edge, parametrised from its first to its second point."""
        return cls(edge.a, edge.b)

    def __call__(self, s: float) -> Point21:
        a, b, c = self._direction
        x0, y0, t0 = self._origin
        return Point21(a * s + x0, b * s + y0, c * s + t0)

    def direction(self) -> np.ndarray:
        """Direction vector (a, b, c)."""
        return np.array(self._direction, dtype=float)

    def origin(self) -> np.ndarray:
        """Reference point (x0, y0, t0)."""
        return np.array(self._origin, dtype=float)

    def contains(self, point: Point21) -> bool:
        """Whether the point lies on the line."""
        coordinates = (point.x, point.y, point.t)
        for j, (dj, oj) in enumerate(zip(self._direction, self._origin)):
            if abs(dj) <= GEOMETRY_ZERO:
                continue
            s = (coordinates[j] - oj) / dj
            for k, (dk, ok) in enumerate(zip(self._direction, self._origin)):
                if k != j and abs(coordinates[k] - s * dk - ok) > GEOMETRY_ZERO:
                    return False
        return True

    def contains_edge(self, edge: Edge21) -> bool:
        """Whether both endpoints of the edge lie on the line."""
        return self.contains(edge.a) and self.contains(edge.b)

    def is_spatial(self) -> bool:
        """Whether the line lies at a constant time."""
        return abs(self._direction[2]) <= GEOMETRY_ZERO

    def __str__(self) -> str:
        a, b, c = self._direction
        x0, y0, t0 = self._origin
        return f"x: {a:g}s + {x0:g}\ny: {b:g}s + {y0:g}\nt: {c:g}s + {t0:g}"

    def __repr__(self) -> str:
        return f"Line21(direction={self._direction}, origin={self._origin})"


# Intersections.


def intersect_lines(r: Line21, s: Line21) -> Point21 | None:
    """Intersection point of two lines, or None if they do not meet in one point."""
    if line_line_distance(r, s) > GEOMETRY_ZERO:
        return None

    rd, ro = r.direction(), r.origin()
    sd, so = s.direction(), s.origin()

    pivot = next(
        (
            (j, k)
            for j, k in permutations(range(3), 2)
            if abs(rd[j]) > GEOMETRY_ZERO
            and abs(sd[k]) > GEOMETRY_ZERO
            and abs(sd[k] * rd[j] - sd[j] * rd[k]) > GEOMETRY_ZERO
        ),
        None,
    )
    if pivot is None:
        return None

    rj, sj = pivot
    if abs(sd[rj]) > GEOMETRY_ZERO:
        t = (sd[sj] * (so[rj] - ro[rj]) - sd[rj] * (so[sj] - ro[sj])) / (
            sd[sj] * rd[rj] - sd[rj] * rd[sj]
        )
    else:
        t = (so[rj] - ro[rj]) / rd[rj]

    return r(float(t))


def intersect_line_edge(line: Line21, edge: Edge21) -> Point21 | None:
    """Intersection of a line with an edge, or None."""
    intersection = intersect_lines(line, Line21.from_edge(edge))
    if intersection is not None and edge.contains(intersection):
        return intersection
    return None


def intersect_line_polygon(line: Line21, polygon: _HasEdges) -> list[Point21]:
    """Distinct intersections of a line with the edges of a polygon, in edge order."""
    points: list[Point21] = []
    for edge in polygon.edges():
        intersection = intersect_line_edge(line, edge)
        if intersection is not None and intersection not in points:
            points.append(intersection)
    return points


def intersect_edges(ab: Edge21, cd: Edge21) -> Point21 | None:
    """Intersection of two edges, or None."""
    intersection = intersect_lines(Line21.from_edge(ab), Line21.from_edge(cd))
    if intersection is not None and ab.contains(intersection) and cd.contains(intersection):
        return intersection
    return None


# Distances.


def _closest_parameters(r: Line21, s: Line21) -> tuple[float, float] | None:
    """Parameters of the closest points of two lines, or None if they are parallel."""
    rv, p0 = r.direction(), r.origin()
    sv, q0 = s.direction(), s.origin()
    pq = p0 - q0

    rv_2 = float(np.dot(rv, rv))
    sv_2 = float(np.dot(sv, sv))
    rv_pq = float(np.dot(rv, pq))
    sv_pq = float(np.dot(sv, pq))
    rv_sv = float(np.dot(rv, sv))

    determinant = rv_2 * sv_2 - rv_sv * rv_sv
    if abs(determinant) <= GEOMETRY_ZERO:
        return None

    t = (rv_sv * sv_pq - sv_2 * rv_pq) / determinant
    u = (rv_2 * sv_pq - rv_sv * rv_pq) / determinant
    return t, u


def line_point_distance(line: Line21, point: Point21) -> float:
    """Distance between a line and a point."""
    rv, p0 = line.direction(), line.origin()
    t = float(np.dot(rv, point.to_array() - p0) / np.dot(rv, rv))
    return distance(line(t), point)


def line_edge_distance(line: Line21, edge: Edge21) -> float:
    """Distance between a line and an edge."""
    s = Line21.from_edge(edge)
    parameters = _closest_parameters(line, s)
    if parameters is None:
        return line_point_distance(line, edge.a)

    t, u = parameters
    if edge.contains(s(u)):
        return distance(line(t), s(u))

    return min(line_point_distance(line, edge.a), line_point_distance(line, edge.b))


def line_line_distance(r: Line21, s: Line21) -> float:
    """Distance between two lines."""
    parameters = _closest_parameters(r, s)
    if parameters is None:
        return line_point_distance(r, s(0.0))

    t, u = parameters
    return distance(r(t), s(u))


def edge_point_distance(edge: Edge21, point: Point21) -> float:
    """Distance between an edge and a point."""
    line = Line21.from_edge(edge)
    rv, p0 = line.direction(), line.origin()
    t = float(np.dot(rv, point.to_array() - p0) / np.dot(rv, rv))

    projection = line(t)
    if edge.contains(projection):
        return distance(projection, point)

    return min(distance(edge.a, point), distance(edge.b, point))


# Bisectors.


def edge_bisector2(edge: Edge21) -> Line21:
    """Spatial bisector of a spatial edge."""
    if not edge.is_spatial():
        raise ValueError(f"bisector of a non-spatial edge: {edge}")

    midpoint = (edge.a + edge.b) / 2.0
    difference = edge.b - edge.a

    normal = np.array([-difference.y, difference.x], dtype=float)
    normal /= np.linalg.norm(normal)

    shifted = Point21(midpoint.x + float(normal[0]), midpoint.y + float(normal[1]), midpoint.t)
    return Line21(midpoint, shifted)


def bisector2(p: Point21, q: Point21) -> Line21:
    """Spatial bisector of two points at the same time."""
    return edge_bisector2(Edge21(p, q))