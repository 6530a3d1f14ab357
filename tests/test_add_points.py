import pytest

from geoclip.add_points import SimpleMesh, add_mesh_points
from geoclip.clipped_poly import EdgeIntersection


def _mesh():
    return SimpleMesh(
        points=[(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)],
        polys=[[0, 1, 2], [0, 2, 3]],
    )


def test_no_points_copies_mesh():
    mesh = _mesh()
    result, added, pmap, polymap = add_mesh_points(mesh, [])
    assert added == 0
    assert result.points == mesh.points
    assert result.polys == mesh.polys
    assert pmap == [0, 1, 2, 3]
    assert polymap == [1, 2]


def test_point_on_shared_edge_goes_into_both_polys():
    mesh = _mesh()
    inter = EdgeIntersection(0, 2, 0.5)
    result, added, pmap, polymap = add_mesh_points(mesh, [inter])
    assert added == 1
    assert result.points[4] == pytest.approx(inter.position(mesh.points))
    assert pmap == [0, 1, 2, 3, -1]
    assert polymap == [-1, -2]
    assert all(4 in poly for poly in result.polys)


def test_points_ordered_along_edge_direction():
    mesh = _mesh()
    inters = [EdgeIntersection(0, 2, 0.25), EdgeIntersection(2, 0, 0.25)]
    result, added, _, _ = add_mesh_points(mesh, inters)
    assert added == 2
    assert result.polys[1] == [0, 4, 5, 2, 3]
    assert result.polys[0] == [0, 1, 2, 5, 4]


def test_reversed_intersection_gives_same_position():
    mesh = _mesh()
    a, _, _, _ = add_mesh_points(mesh, [EdgeIntersection(0, 2, 0.3)])
    b, _, _, _ = add_mesh_points(mesh, [EdgeIntersection(2, 0, 0.7)])
    assert a.points[4] == pytest.approx(b.points[4])
    assert a.polys == b.polys


def test_invalid_points_skipped():
    mesh = _mesh()
    result, added, pmap, polymap = add_mesh_points(
        mesh, [EdgeIntersection(0, 9, 0.5), EdgeIntersection(1, 2, 0.5)]
    )
    assert added == 1
    assert len(result.points) == 5
    assert pmap.count(-1) == 1
    assert polymap == [-1, 2]


def test_untouched_poly_keeps_positive_id():
    mesh = SimpleMesh(
        points=[(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)],
        polys=[[0, 1, 2], [0, 2, 3], [1, 2, 3]],
    )
    result, _, _, polymap = add_mesh_points(mesh, [EdgeIntersection(0, 3, 0.5)])
    assert polymap == [1, -2, 3]
    assert result.polys[2] == [1, 2, 3]
    assert result.polys[0] == [0, 1, 2]