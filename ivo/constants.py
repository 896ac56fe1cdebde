"""Numerical tolerances, solver limits and primitive type aliases."""

from typing import Final

Natural = int
Integer = int
Real = float

# Zeros.
ZERO: Final[float] = 1e-24
"""Generic zero tolerance."""

ALGEBRA_ZERO: Final[float] = 1e-18
"""Zero tolerance used by the algebraic solvers."""

GEOMETRY_ZERO: Final[float] = 1e-12
"""Geometrical zero tolerance."""

QUADRATURE_ZERO: Final[float] = 1e-14
"""Zero tolerance for the quadrature node iteration."""

# Diagrams.
DIAGRAM_STOP: Final[float] = 1e-4
"""Lloyd relaxation stopping multiplier."""

DIAGRAM_COLLAPSE: Final[float] = 1e-1
"""Relative edge length below which diagram edges are collapsed."""

# Quadrature.
QUADRATURE: Final[int] = 5
"""Default quadrature order."""

# Solvers.
SOLVERS_STOP: Final[int] = 10_000
"""Maximum number of solver iterations."""

GMRES_RESTART: Final[int] = 200
"""Restart threshold for restarted GMRES."""