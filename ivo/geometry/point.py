"""Points in 2 + 1 (space and time) dimensions."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from numbers import Real

import numpy as np

from ivo.constants import GEOMETRY_ZERO


@dataclass(frozen=True, eq=False)
class Point21:
    """A point with two space coordinates and one time coordinate."""

    x: float = 0.0
    y: float = 0.0
    t: float = 0.0

    __hash__ = None  # Equality is tolerance based.

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "t", float(self.t))

    def __getitem__(self, j: int) -> float:
        if j == 0:
            return self.x
        if j == 1:
            return self.y
        if j == 2:
            return self.t
        raise IndexError(f"point index out of range: {j}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point21):
            return NotImplemented
        return distance(self, other) <= GEOMETRY_ZERO

    def __neg__(self) -> Point21:
        return Point21(-self.x, -self.y, -self.t)

    def __pos__(self) -> Point21:
        return self

    def __add__(self, other: Point21 | float) -> Point21:
        if isinstance(other, Point21):
            return Point21(self.x + other.x, self.y + other.y, self.t + other.t)
        if isinstance(other, Real):
            return Point21(self.x + other, self.y + other, self.t + other)
        return NotImplemented

    def __radd__(self, other: float) -> Point21:
        if isinstance(other, Real):
            return Point21(other + self.x, other + self.y, other + self.t)
        return NotImplemented

    def __sub__(self, other: Point21 | float) -> Point21:
        if isinstance(other, Point21):
            return Point21(self.x - other.x, self.y - other.y, self.t - other.t)
        if isinstance(other, Real):
            return Point21(self.x - other, self.y - other, self.t - other)
        return NotImplemented

    def __rsub__(self, other: float) -> Point21:
        if isinstance(other, Real):
            return Point21(other - self.x, other - self.y, other - self.t)
        return NotImplemented

    def __mul__(self, scalar: float) -> Point21:
        if isinstance(scalar, Real):
            return Point21(self.x * scalar, self.y * scalar, self.t * scalar)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Point21:
        if isinstance(scalar, Real):
            return Point21(scalar * self.x, scalar * self.y, scalar * self.t)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Point21:
        if isinstance(scalar, Real):
            return Point21(self.x / scalar, self.y / scalar, self.t / scalar)
        return NotImplemented

    def __rtruediv__(self, scalar: float) -> Point21:
        if isinstance(scalar, Real):
            return Point21(scalar / self.x, scalar / self.y, scalar / self.t)
        return NotImplemented

    def to_array(self) -> np.ndarray:
        """Coordinates as a numpy array (x, y, t)."""
        return np.array(astuple(self), dtype=float)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}; {self.t:g})"


def x_point(x: float) -> Point21:
    """Point lying on the x axis."""
    return Point21(x, 0.0, 0.0)


def y_point(y: float) -> Point21:
    """Point lying on the y axis."""
    return Point21(0.0, y, 0.0)


def t_point(t: float) -> Point21:
    """Point lying on the time axis."""
    return Point21(0.0, 0.0, t)


def distance(p: Point21, q: Point21) -> float:
    """Euclidean distance between two points."""
    return math.dist(astuple(p), astuple(q))