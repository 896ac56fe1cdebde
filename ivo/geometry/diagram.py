"""Polygonal (Voronoi) diagrams over spatial polygonal domains."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from ivo.constants import DIAGRAM_COLLAPSE, DIAGRAM_STOP, GEOMETRY_ZERO
from ivo.geometry.line import Line21, bisector2, intersect_line_polygon
from ivo.geometry.point import Point21, distance
from ivo.geometry.polygon import Polygon21, box2, centroid, contains2, is_spatial

logger = logging.getLogger(__name__)


def mesher2(polygon: Polygon21, number: int) -> list[Polygon21]:
    """Relaxed and collapsed polygonal diagram of ``number`` cells over a spatial polygon."""
    if number <= 0:
        raise ValueError(f"the number of cells must be positive, got {number}")

    logger.info("Building a diagram of %d cells for: %s", number, polygon)
    diagram = voronoi2(polygon, random2(polygon, number))

    logger.info("Relaxing the diagram")
    diagram = lloyd2(polygon, diagram)

    logger.info("Collapsing the diagram")
    return collapse2(polygon, diagram)


def _distinct(points: list[Point21]) -> list[Point21]:
    unique: list[Point21] = []
    for point in points:
        if point not in unique:
            unique.append(point)
    return unique


def _polygon_or_none(points: list[Point21]) -> Polygon21 | None:
    points = _distinct(points)
    return Polygon21(points) if len(points) > 2 else None


def reduce2(polygon: Polygon21, line: Line21, point: Point21) -> Polygon21:
    """Part of a spatial polygon, cut by a spatial line, that holds the given point."""
    if not is_spatial(polygon):
        raise ValueError(f"polygon is not spatial: {polygon}")
    if not line.is_spatial():
        raise ValueError("the cutting line is not spatial")
    if not contains2(polygon, point):
        raise ValueError(f"point {point} is not inside {polygon}")
    p_points = list(polygon)
    if abs(float(line.origin()[2]) - p_points[0].t) > GEOMETRY_ZERO:
        raise ValueError("the cutting line does not lie at the polygon's time")

    i_points = intersect_line_polygon(line, polygon)
    if len(i_points) <= 1:
        return polygon

    points = [i_points[0], i_points[1]]
    if len(i_points) > 2:
        reference = distance(i_points[0], i_points[1])
        for pj in i_points:
            for pk in i_points:
                if distance(pj, pk) > reference:
                    points = [pj, pk]

    indices = [0, 1]
    for j, edge in enumerate(polygon.edges()):
        if edge.contains(points[0]) and edge.contains(points[1]):
            return polygon
        if edge.contains(points[0]) and edge.b != points[0]:
            indices[0] = j
        if edge.contains(points[1]) and edge.b != points[1]:
            indices[1] = j

    if indices[0] > indices[1]:
        indices.reverse()
        points.reverse()
    first, second = indices

    a_points: list[Point21] = []
    b_points: list[Point21] = []
    for j, current in enumerate(p_points):
        if j <= first or j > second:
            a_points.append(current)
        if j == first:
            if points[0] != a_points[-1]:
                a_points.append(points[0])
            b_points.append(points[0])
        if first < j <= second and current != b_points[-1]:
            b_points.append(current)
        if j == second:
            a_points.append(points[1])
            b_points.append(points[1])

    a = _polygon_or_none(a_points)
    if a is not None and contains2(a, point):
        return a
    b = _polygon_or_none(b_points)
    if b is not None and contains2(b, point):
        return b
    return polygon


def random2(
    polygon: Polygon21, number: int, rng: random.Random | None = None
) -> list[Point21]:
    """Distinct random points inside a spatial polygon."""
    if number <= 0:
        raise ValueError(f"the number of points must be positive, got {number}")
    if not is_spatial(polygon):
        raise ValueError(f"polygon is not spatial: {polygon}")
    rng = rng if rng is not None else random.Random()

    low, high = box2(polygon)
    points: list[Point21] = []
    while len(points) < number:
        x = low.x + (high.x - low.x) * rng.random()
        y = low.y + (high.y - low.y) * rng.random()
        candidate = Point21(x, y, low.t)
        if contains2(polygon, candidate) and candidate not in points:
            points.append(candidate)
    return points


def voronoi2(polygon: Polygon21, points: Sequence[Point21] | int) -> list[Polygon21]:
    """Voronoi diagram inside a spatial polygon of given points, or of that many random ones."""
    if isinstance(points, int):
        points = random2(polygon, points)
    if not is_spatial(polygon):
        raise ValueError(f"polygon is not spatial: {polygon}")

    cells: list[Polygon21] = []
    for j, generator in enumerate(points):
        if not contains2(polygon, generator):
            raise ValueError(f"point {generator} is not inside {polygon}")
        cell = polygon
        for k, other in enumerate(points):
            if j != k:
                cell = reduce2(cell, bisector2(generator, other), generator)
        cells.append(cell)
    return cells


def lloyd2(polygon: Polygon21, diagram: Sequence[Polygon21]) -> list[Polygon21]:
    """Lloyd's relaxation of a diagram; returns the relaxed diagram."""
    steps = 16 + len(diagram)
    centroids = [centroid(cell) for cell in diagram]
    diagram = voronoi2(polygon, centroids)

    for step in range(1, steps):
        updated = [centroid(cell) for cell in diagram]
        residual = sum(distance(old, new) for old, new in zip(centroids, updated))
        centroids = updated

        if residual <= DIAGRAM_STOP * len(diagram):
            return diagram

        logger.info("Relaxation step %d, residual: %g", step, residual)
        diagram = voronoi2(polygon, centroids)

    return diagram


def collapse2(polygon: Polygon21, diagram: Sequence[Polygon21]) -> list[Polygon21]:
    """Collapse the relatively short edges of a diagram; returns the new diagram."""
    diagram = list(diagram)
    boundary = polygon.edges()

    for j in range(len(diagram)):
        cell_j = diagram[j]
        edges_j = cell_j.edges()
        points_j = list(cell_j)
        size_j = max(edge.size() for edge in edges_j)

        for ej, edge_j in enumerate(edges_j):
            if edge_j.size() > DIAGRAM_COLLAPSE * size_j:
                continue

            target = (edge_j.a + edge_j.b) / 2.0
            for edge in boundary:
                if edge.contains(edge_j.a) and edge.contains(edge_j.b):
                    break
                if edge.contains(edge_j.a):
                    target = edge_j.a
                if edge.contains(edge_j.b):
                    target = edge_j.b

            for k in range(len(diagram)):
                if k == j:
                    continue
                cell_k = diagram[k]
                edges_k = cell_k.edges()
                points_k = list(cell_k)

                shared = next((ek for ek, e in enumerate(edges_k) if e == edge_j), None)
                if shared is not None:
                    if shared < len(edges_k) - 1:
                        del points_k[shared + 1]
                        points_k[shared] = target
                    else:
                        points_k.pop()
                        points_k[0] = target
                    diagram[k] = Polygon21(points_k)
                    continue

                for pk, point in enumerate(points_k):
                    if point == edge_j.a or point == edge_j.b:
                        points_k[pk] = target
                        diagram[k] = Polygon21(points_k)
                        break

            if ej < len(edges_j) - 1:
                del points_j[ej + 1]
                points_j[ej] = target
            else:
                points_j.pop()
                points_j[0] = target

            diagram[j] = Polygon21(points_j)

    return diagram