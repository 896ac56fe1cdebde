"""Polygons in 2 + 1 dimensions and their basic methods."""

from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

from ivo.constants import GEOMETRY_ZERO
from ivo.geometry.edge import Edge21
from ivo.geometry.line import Line21, intersect_line_polygon
from ivo.geometry.point import Point21, x_point


class Polygon21:
    """A polygon given by at least three pairwise distinct points, in order."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Point21]) -> None:
        points = list(points)
        if len(points) <= 2:
            raise ValueError(f"a polygon needs at least three points, got {len(points)}")
        for j, p in enumerate(points):
            if any(p == q for q in points[j + 1:]):
                raise ValueError(f"repeated point in polygon: {p}")
        self._points = points

    def edges(self) -> list[Edge21]:
        """Edges joining consecutive points, the last one closing the polygon."""
        return [Edge21(a, b) for a, b in zip(self._points, self._points[1:] + self._points[:1])]

    def __getitem__(self, j: int) -> Point21:
        return self._points[j]

    def __setitem__(self, j: int, point: Point21) -> None:
        self._points[j] = point

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point21]:
        return iter(self._points)

    def __str__(self) -> str:
        return "{" + ", ".join(str(p) for p in self._points) + "}"

    def __repr__(self) -> str:
        return f"Polygon21({self._points!r})"


def area(polygon: Polygon21) -> float:
    """Area of a (planar) polygon."""
    points = [p.to_array() for p in polygon]
    closed = points + points[:1]
    total = sum(
        (np.cross(current, previous) for previous, current in zip(closed, closed[1:])),
        np.zeros(3),
    )
    return float(np.linalg.norm(0.5 * total))


def centre(polygon: Polygon21) -> Point21:
    """Average of the polygon's points."""
    total = Point21()
    for point in polygon:
        total = total + point
    return total / float(len(polygon))


def centroid(polygon: Polygon21) -> Point21:
    """Area-weighted centroid of a polygon."""
    if len(polygon) == 3:
        return centre(polygon)

    middle = centre(polygon)
    weighted = Point21()
    for edge in polygon.edges():
        triangle = Polygon21([edge.a, edge.b, middle])
        weighted = weighted + area(triangle) * centre(triangle)

    return weighted / area(polygon)


def triangulate(polygon: Polygon21) -> list[Polygon21]:
    """Triangles joining each edge of the polygon with its centroid."""
    middle = centroid(polygon)
    return [Polygon21([edge.a, edge.b, middle]) for edge in polygon.edges()]


def triangulate_all(polygons: Iterable[Polygon21]) -> list[Polygon21]:
    """Triangulations of many polygons, concatenated in order."""
    return [triangle for polygon in polygons for triangle in triangulate(polygon)]


def is_spatial(polygon: Polygon21) -> bool:
    """Whether all points of the polygon share the same time coordinate."""
    first = polygon[0].t
    return all(abs(point.t - first) <= GEOMETRY_ZERO for point in polygon)


def _require_spatial(polygon: Polygon21) -> None:
    if not is_spatial(polygon):
        raise ValueError(f"polygon is not spatial: {polygon}")


def box2(polygon: Polygon21) -> tuple[Point21, Point21]:
    """Spatial bounding box of a spatial polygon, as (minimum, maximum) corners."""
    _require_spatial(polygon)
    t = polygon[0].t
    xs = [point.x for point in polygon]
    ys = [point.y for point in polygon]
    return Point21(min(xs), min(ys), t), Point21(max(xs), max(ys), t)


def contains2(polygon: Polygon21, point: Point21) -> bool:
    """Whether a spatial polygon contains a point, by ray casting along x."""
    _require_spatial(polygon)
    if abs(point.t - polygon[0].t) > GEOMETRY_ZERO:
        return False

    ray = Line21(point, point + x_point(1.0))
    crossings = sum(
        1 for intersection in intersect_line_polygon(ray, polygon) if intersection.x >= point.x
    )
    return crossings % 2 == 1