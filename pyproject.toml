[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nurbsalgo"
version = "0.1.0"
description = "Core algorithms for NURBS geometry: basis functions, knot vectors, quadrature, interpolation helpers, intersections and Voronoi diagrams."
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["nurbs", "b-spline", "bezier", "geometry", "knot vector", "quadrature", "voronoi", "delaunay"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nurbsalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
