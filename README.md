# nurbsalgo

Low-level algorithms for working with NURBS curves and surfaces, plus a
sweep-line Voronoi/Delaunay generator. Points are plain sequences: `(x, y, z)`
for Cartesian points and `(wx, wy, wz, w)` for homogeneous (weighted) points.

## Modules

- `nurbsalgo.validation` – tolerant float comparisons (`is_almost_equal`,
  `is_greater_than`, `is_less_than`, `is_greater_or_equal`,
  `is_less_or_equal`), `check_range` which raises `OutOfRangeError`, and
  validity checks `is_valid_bezier`, `is_valid_knot_vector`,
  `is_valid_bspline`, `is_valid_nurbs`, `is_valid_degree_reduction`,
  `compute_curve_modify_tolerance`.
- `nurbsalgo.polynomials` – `horner`, `horner_2d`, `bernstein`,
  `all_bernstein`, `knot_multiplicity`, `knot_span_index`, `basis_functions`,
  `basis_functions_derivatives`, `basis_functions_first_derivative`,
  `one_basis_function`, `one_basis_function_derivatives`,
  `all_basis_functions`, `bezier_to_power_matrix`, `power_to_bezier_matrix`.
- `nurbsalgo.knot_vectors` – `continuity`, `rescale`, `multiplicity_map`,
  `internal_multiplicity_map`, `knots_to_raise_multiplicity`,
  `knots_to_merge`, `knots_to_unify`, `mid_knots`, `is_uniform`.
- `nurbsalgo.integrator` – `simpson`, `simpson_2d`, 24-point
  `gauss_legendre`, and adaptive `clenshaw_curtis`, which takes a
  precomputed Chebyshev weight table (at least ten entries) from the caller.
- `nurbsalgo.control_points` – `to_xyz`, `to_xyz_grid`, `to_xyzw_grid`,
  and the grid products `multiply` and `multiply_left`.
- `nurbsalgo.intersection` – `compute_rays` (returns a `RayIntersection`
  whose `kind` is a `CurveCurveIntersection`) and `line_plane` (returns a
  `LinePlaneIntersection` and the point, or `None`).
- `nurbsalgo.projection` – `point_to_ray`, `point_to_line` (`None` when the
  foot falls outside the segment), `stereographic`.
- `nurbsalgo.interpolation` – `total_chord_length`, `chord_parameterization`,
  `centripetal_length`, `centripetal_parameterization`, `average_knot_vector`,
  `compute_knot_vector`, `rational_quadratic_weight`,
  `surface_mesh_parameterization`, `compute_tangents` (five or more points),
  `chord_tangents`.
- `nurbsalgo.bezier` – `point_on_quadratic_arc` and
  `quadratic_middle_control_points`.
- `nurbsalgo.sweepline` – the pieces of the sweep: `Site`, `Edge`,
  `Halfedge`, `EdgeList`, `EventQueue`, `bisect`, `intersect`, `right_of`,
  `distance`.
- `nurbsalgo.voronoi` – `VoronoiDiagramGenerator` and `GraphEdge`.

Invalid arguments raise `ValueError`; parameters outside their allowed range
raise `nurbsalgo.validation.OutOfRangeError` (a `ValueError` subclass).
Functions that can fail geometrically (`point_to_line`,
`rational_quadratic_weight`, `surface_mesh_parameterization`,
`quadratic_middle_control_points`) return `None` instead.

## Installation

```
pip install .
```

## Examples

```python
from nurbsalgo.polynomials import knot_span_index, basis_functions

knots = [0, 0, 0, 1, 2, 3, 4, 4, 5, 5, 5]
span = knot_span_index(2, knots, 2.5)
print(basis_functions(span, 2, knots, 2.5))   # about [0.125, 0.75, 0.125]
```

```python
from nurbsalgo.knot_vectors import knots_to_merge

insert0, insert1 = knots_to_merge([0, 0, 0, 1, 2, 2, 4, 4, 4],
                                  [0, 0, 0, 1, 2, 3, 4, 4, 4])
print(insert0, insert1)   # [3] [2]
```

```python
import math
from nurbsalgo.integrator import gauss_legendre

print(gauss_legendre(math.sin, 0.0, math.pi))   # about 2.0
```

```python
from nurbsalgo.voronoi import VoronoiDiagramGenerator

generator = VoronoiDiagramGenerator(generate_delaunay=True)
edges = generator.generate([0.0, 1.0, 0.0, 1.0], [0.0, 0.0, 1.0, 1.0],
                           -1.0, 2.0, -1.0, 2.0, 0.0, True)
print(edges)                     # clipped Voronoi edges (GraphEdge)
print(generator.triangles)       # Delaunay triangles as input indices
print(generator.delaunay_edges)
for pair in generator.vertex_pairs():
    print(pair)
```

## What the package does not do

There are no curve or surface objects here: the package does not evaluate
whole Bézier, B-spline or NURBS curves and surfaces, compute their lengths or
areas, or build them by interpolation. It supplies the basis functions, knot
vector tools, quadrature rules and helpers such code is built from. It also
does not generate the Chebyshev weight table for `clenshaw_curtis`, and it
has no command-line interface.

## Running the tests

```
pip install .[test]
pytest
```