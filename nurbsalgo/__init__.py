"""Basis functions, knot vector tools, quadrature, interpolation helpers, intersections and Voronoi diagrams for NURBS work."""

__version__ = "0.1.0"