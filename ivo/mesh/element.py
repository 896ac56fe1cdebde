"""Prismatic 2 + 1 elements and their neighbouring structure."""

from __future__ import annotations

from dataclasses import dataclass, field

from ivo.constants import ZERO
from ivo.geometry.edge import Edge21
from ivo.geometry.point import t_point
from ivo.geometry.polygon import Polygon21


@dataclass(frozen=True, eq=False)
class Element21:
    """A prism: a spatial polygonal base extruded in time by a height."""

    base: Polygon21
    height: float
    p: int = 1
    q: int = 1

    def __post_init__(self) -> None:
        if self.height <= ZERO:
            raise ValueError(f"element height must be positive, got {self.height}")
        object.__setattr__(self, "base", Polygon21(self.base))
        object.__setattr__(self, "height", float(self.height))

    def _lift(self):
        return t_point(self.height)

    def dofs(self) -> int:
        """Number of degrees of freedom of the element."""
        return (self.q + 1) * (self.p + 1) * (self.p + 2) // 2

    def b_base(self) -> Polygon21:
        """Bottom base."""
        return Polygon21(self.base)

    def t_base(self) -> Polygon21:
        """Top base."""
        lift = self._lift()
        return Polygon21(point + lift for point in self.base)

    def b_edges(self) -> list[Edge21]:
        """Edges of the bottom base."""
        return self.base.edges()

    def t_edges(self) -> list[Edge21]:
        """Edges of the top base."""
        lift = self._lift()
        return [Edge21(edge.a + lift, edge.b + lift) for edge in self.base.edges()]

    def faces(self) -> list[Polygon21]:
        """Lateral faces, one per base edge."""
        lift = self._lift()
        return [
            Polygon21([edge.a, edge.b, edge.b + lift, edge.a + lift])
            for edge in self.base.edges()
        ]

    def interval(self) -> tuple[float, float]:
        """Time interval spanned by the element."""
        start = self.base[0].t
        return start, start + self.height

    def __str__(self) -> str:
        coordinates = [f"{c:g}" for point in self.base for c in (point.x, point.y, point.t)]
        return ",".join(coordinates + [f"{self.height:g}"])


@dataclass(frozen=True)
class Neighbour21:
    """Neighbours of an element: the elements above, below and across each face."""

    top: int
    bottom: int
    facing: tuple[tuple[int, int], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "facing", tuple((int(a), int(b)) for a, b in self.facing)
        )