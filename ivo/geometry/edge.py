"""Segments between two points in 2 + 1 dimensions."""

from __future__ import annotations

from dataclasses import dataclass

from ivo.constants import GEOMETRY_ZERO
from ivo.geometry.point import Point21, distance


@dataclass(frozen=True, eq=False)
class Edge21:
    """An edge joining two distinct points."""

    a: Point21
    b: Point21

    __hash__ = None  # Equality is tolerance based.

    def __post_init__(self) -> None:
        if self.a == self.b:
            raise ValueError(f"degenerate edge: {self.a} and {self.b} coincide")

    def __getitem__(self, j: int) -> Point21:
        if j == 0:
            return self.a
        if j == 1:
            return self.b
        raise IndexError(f"edge index out of range: {j}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge21):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or (
            self.a == other.b and self.b == other.a
        )

    def size(self) -> float:
        """Length of the edge."""
        return distance(self.a, self.b)

    def contains(self, point: Point21) -> bool:
        """Whether the point lies on the edge, judged by distances."""
        if point == self.a or point == self.b:
            return True
        ap = distance(self.a, point)
        bp = distance(self.b, point)
        return abs(self.size() - (ap + bp)) <= GEOMETRY_ZERO

    def contains_edge(self, edge: Edge21) -> bool:
        """Whether both endpoints of another edge lie on this edge."""
        return self.contains(edge.a) and self.contains(edge.b)

    def is_spatial(self) -> bool:
        """Whether both endpoints share the same time coordinate."""
        return abs(self.a.t - self.b.t) <= GEOMETRY_ZERO

    def __str__(self) -> str:
        return f"[{self.a}, {self.b}]"