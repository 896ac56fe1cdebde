"""Equation coefficients, problem data and initial conditions."""

from __future__ import annotations

from typing import Callable

import numpy as np

ScalarField = Callable[[float, float, float], float]
VectorField = Callable[[float, float, float], "tuple[float, float]"]


class Equation:
    """Convection, diffusion and reaction coefficients of an equation."""

    __slots__ = ("_convection", "_diffusion", "_reaction")

    def __init__(self, convection: VectorField, diffusion: float, reaction: ScalarField) -> None:
        self._convection = convection
        self._diffusion = float(diffusion)
        self._reaction = reaction

    def convection(self, x: float, y: float, t: float) -> tuple[float, float]:
        """Convection field at (x, y, t)."""
        bx, by = self._convection(x, y, t)
        return float(bx), float(by)

    @property
    def diffusion(self) -> float:
        """Constant diffusion coefficient."""
        return self._diffusion

    def reaction(self, x: float, y: float, t: float) -> float:
        """Reaction coefficient at (x, y, t)."""
        return float(self._reaction(x, y, t))


class Data:
    """Source term and Dirichlet and Neumann boundary data."""

    __slots__ = ("_source", "_dirichlet", "_neumann")

    def __init__(self, source: ScalarField, dirichlet: ScalarField, neumann: ScalarField) -> None:
        self._source = source
        self._dirichlet = dirichlet
        self._neumann = neumann

    def source(self, x: float, y: float, t: float) -> float:
        """Source term at (x, y, t)."""
        return float(self._source(x, y, t))

    def dirichlet(self, x: float, y: float, t: float) -> float:
        """Dirichlet boundary value at (x, y, t)."""
        return float(self._dirichlet(x, y, t))

    def neumann(self, x: float, y: float, t: float) -> float:
        """Neumann boundary value at (x, y, t)."""
        return float(self._neumann(x, y, t))


class Initial:
    """Initial condition u(x, y) at the starting time."""

    __slots__ = ("_condition",)

    def __init__(self, condition: Callable[[float, float], float]) -> None:
        self._condition = condition

    def __call__(self, x, y):
        """Evaluate at a point, or pointwise over two equally long arrays of coordinates."""
        if np.ndim(x) == 0 and np.ndim(y) == 0:
            return float(self._condition(x, y))
        xs = np.asarray(x, dtype=float)
        ys = np.asarray(y, dtype=float)
        if xs.shape != ys.shape:
            raise ValueError(f"coordinate arrays differ in shape: {xs.shape} and {ys.shape}")
        return np.array(
            [self._condition(float(a), float(b)) for a, b in zip(xs.ravel(), ys.ravel())],
            dtype=float,
        ).reshape(xs.shape)