# ivo

Building blocks for space-time (2 + 1) finite elements on polygonal meshes:
geometry in space-time, Voronoi diagrams inside a polygon, prismatic
elements, Legendre polynomials, Gauss-Legendre quadrature and the modal
bases on an element.

## Modules

- `ivo.constants`: tolerances (`GEOMETRY_ZERO`, `QUADRATURE_ZERO`, ...),
  diagram parameters (`DIAGRAM_STOP`, `DIAGRAM_COLLAPSE`) and the default
  quadrature order `QUADRATURE`.
- `ivo.geometry.point`: `Point21` (x, y, t) with arithmetic against points
  and scalars, `to_array()`, and equality up to `GEOMETRY_ZERO` (points are
  therefore not hashable); `x_point`, `y_point`, `t_point` and `distance`.
- `ivo.geometry.edge`: `Edge21` between two distinct points, with `size()`,
  `contains()`, `contains_edge()` and `is_spatial()`. Edges compare equal
  regardless of orientation.
- `ivo.geometry.line`: `Line21` through two points (or `Line21.from_edge`),
  evaluated by calling it with a parameter; `intersect_lines`,
  `intersect_line_edge`, `intersect_line_polygon`, `intersect_edges`,
  `line_point_distance`, `line_edge_distance`, `line_line_distance`,
  `edge_point_distance`, and the spatial bisectors `edge_bisector2` and
  `bisector2`.
- `ivo.geometry.polygon`: `Polygon21` of at least three distinct points, with
  `edges()`, indexing, assignment and iteration; `area`, `centre`,
  `centroid`, `triangulate`, `triangulate_all`, `is_spatial`, `box2` and
  `contains2` (ray casting).
- `ivo.geometry.diagram`: `random2` (distinct random points inside a
  polygon, optionally with a given `random.Random`), `reduce2` (cut a polygon
  by a line, keeping the side with a point), `voronoi2`, `lloyd2` (Lloyd
  relaxation), `collapse2` (collapse short edges) and `mesher2`, which chains
  them. Progress is reported through the `logging` module.
- `ivo.mesh.element`: `Element21`, a prism over a spatial polygon with a
  height and space and time degrees `p` and `q` (both 1 by default), with
  `dofs()`, `b_base()`, `t_base()`, `b_edges()`, `t_edges()`, `faces()` and
  `interval()`; `Neighbour21` records the `top`, `bottom` and `facing`
  elements.
- `ivo.fem.legendre`: `binomial` and `legendre(x, n, k)`, the `k`-th
  derivative of the degree-`n` Legendre polynomial.
- `ivo.fem.quadrature`: `gauss1(n, a, b)` for odd `n`, `quadrature1t`
  (over [-1, 1]), `quadrature1x` (over [0, 1]) and `quadrature2xy` (collapsed
  rule over the triangle (0, 0), (1, 0), (0, 1)).
- `ivo.fem.basis`: `reference_to_interval`, `reference_to_triangle` and
  `reference_to_edge` map reference nodes onto an element; `basis_t` and
  `basis_xy` evaluate the time and space bases and their derivatives at
  physical nodes, one row per node and one column per basis function.
- `ivo.coefficients`: `Equation` (convection field, constant diffusion,
  reaction), `Data` (source, Dirichlet and Neumann data) and `Initial`
  (initial condition, evaluated at a point or pointwise over arrays).

## Installation

```
pip install .
```

## Example

```python
from ivo.geometry.point import Point21
from ivo.geometry.polygon import Polygon21, area, centroid
from ivo.geometry.diagram import mesher2
from ivo.mesh.element import Element21
from ivo.fem.quadrature import quadrature1t
from ivo.fem.basis import basis_t, reference_to_interval

square = Polygon21([Point21(0, 0), Point21(1, 0), Point21(1, 1), Point21(0, 1)])
print(area(square), centroid(square))

cells = mesher2(square, 8)  # relaxed Voronoi cells, random seeds each run

element = Element21(square, 0.5, 2, 2)
nodes, weights = quadrature1t(5)
times, jacobian = reference_to_interval(element, nodes)
phi, dphi = basis_t(element, times)
```

## What is not included

The package provides the pieces only. It has no space-time mesh container
that assembles elements and their neighbours, no stiffness matrix, forcing
vector, linear solver, error evaluation or output of solutions, no
one-dimensional time mesher, and no reading or writing of diagrams to
files. It has no command-line interface.

## Tests

```
pip install .[test]
pytest
```