"""Space-time geometry, Voronoi meshing of polygons and finite element building blocks."""

__version__ = "0.1.0"