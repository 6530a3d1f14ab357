# geoclip

Pure-Python geometry algorithms for working with polygons and meshes:

- small vector helpers on tuples (`geoclip.vec`)
- directed and undirected edges (`geoclip.edge`)
- 2D lines and line segments, segment intersection (`geoclip.segment`)
- 3D planes: point classification, projection, plane/plane and plane/segment
  intersection, clip tests (`geoclip.plane`)
- 2D polygon queries: convexity, point-in-polygon, signed area, winding and
  generalised (Wachspress) barycentric coordinates (`geoclip.poly2d`)
- clipping a 2D polygon against a line, handling keyholes and split pieces
  (`geoclip.clip2d`, with results described by `geoclip.clipped_poly.ClippedPoly`)
- mesh connectivity tables: point→face, face→face, edge→face, point→vertex
  (`geoclip.connectivity`)
- inserting new points on mesh edges (`geoclip.add_points`)
- axis-aligned cubes and normalised point sets for spatial acceleration
  (`geoclip.octree`)

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Polygon area and winding:

```python
from geoclip.poly2d import signed_area, is_clockwise, is_inside_polygon

square = [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]
signed_area(square)                     # 1.0, positive for clockwise
is_clockwise(square)                    # True
is_inside_polygon(square, (0.5, 0.5))   # True
```

Clipping a polygon against a line. Points on the line or to its right,
looking along its direction, are kept:

```python
from geoclip.segment import Line2
from geoclip.clip2d import clip_poly_2d

kind, pieces = clip_poly_2d(square, Line2((0.5, 0.0), (0.0, 1.0)))
for piece in pieces:
    print(piece)                        # vertices as indices and (a->b:u) intersections
    coords = [piece.position(square, v) for v in range(len(piece))]
```

`kind` is an `IntersectType` from `geoclip.plane`: `INSIDE`, `OUTSIDE` or
`INTERSECTS`. A `ClippingContext` may be passed to decide inside points from
precomputed flags and to tag the results with a polygon id.

Planes in 3D:

```python
from geoclip.plane import Plane, locate_point, intersect_segment

plane = Plane.from_point_normal((0, 0, 0), (0, 0, 1))
locate_point(plane, (0, 0, 2), 1e-6)                  # 1
intersect_segment(plane, (0, 0, -1), (0, 0, 1))       # (0.0, 0.0, 0.0)
```

Meshes are any object with `points` (positions) and `polys` (lists of point
indices); `geoclip.add_points.SimpleMesh` is one such object:

```python
from geoclip.add_points import SimpleMesh, add_mesh_points
from geoclip.clipped_poly import EdgeIntersection
from geoclip.connectivity import MeshConnectivity

mesh = SimpleMesh(
    points=[(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)],
    polys=[[0, 1, 2], [0, 2, 3]],
)
conn = MeshConnectivity(mesh, face_face=True)
conn.face_face[0]                       # {1}

result, added, point_map, poly_map = add_mesh_points(mesh, [EdgeIntersection(0, 2, 0.5)])
added                                   # 1
poly_map                                # [-1, -2]: both polys gained a point
```

## Limits

geoclip works on plain Python data and offers no command-line tool. It clips
2D polygons against a single line; it does not clip whole 3D meshes against
planes or hulls, and it does not build Voronoi cells. `geoclip.octree`
provides cubes and normalised point sets, not a full octree.