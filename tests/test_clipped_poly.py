import pytest

from geoclip.clipped_poly import ClippedPoly, EdgeIntersection

POINTS = [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)]


def _half_clip():
    # keeps points 0 and 3, plus intersections on edges 0->1 and 2->3
    return ClippedPoly(
        inside_points=[0, 3],
        onplane_points=[EdgeIntersection(0, 1, 0.5), EdgeIntersection(2, 3, 0.5)],
        vertices=[0, 2, 3, 1],
        poly_id=-1,
    )


def test_edge_intersection_endpoints():
    assert EdgeIntersection(1, 2, 0.0).position(POINTS) == POINTS[1]
    assert EdgeIntersection(1, 2, 1.0).position(POINTS) == POINTS[2]
    assert str(EdgeIntersection(1, 2, 0.5)) == "(1,2:0.5)"


def test_make_inside():
    cp = ClippedPoly()
    cp.onplane_points.append(EdgeIntersection(0, 1, 0.3))
    cp.make_inside([3, 5, 7])
    assert cp.inside_points == [3, 5, 7]
    assert cp.vertices == [0, 1, 2]
    assert cp.onplane_points == []
    assert all(cp.is_inside(v) for v in range(len(cp)))
    assert [cp.inside_index(v) for v in range(3)] == [3, 5, 7]


def test_default_poly_id():
    assert ClippedPoly().poly_id == 0


def test_vertex_kinds_and_counts():
    cp = _half_clip()
    assert cp.num_inside_vertices == 2
    assert cp.num_intersection_vertices == 2
    assert len(cp) == 4
    assert [cp.is_inside(v) for v in range(4)] == [True, False, False, True]
    assert cp.inside_index(3) == 3
    assert cp.intersection(1) == EdgeIntersection(0, 1, 0.5)
    assert cp.intersection(2) == EdgeIntersection(2, 3, 0.5)


def test_positions():
    cp = _half_clip()
    assert cp.position(POINTS, 0) == POINTS[0]
    assert cp.position(POINTS, 3) == POINTS[3]
    mid = cp.position(POINTS, 1)
    assert mid == pytest.approx(tuple((a + b) / 2 for a, b in zip(POINTS[0], POINTS[1])))


def test_wrong_kind_raises():
    cp = _half_clip()
    with pytest.raises(ValueError):
        cp.inside_index(1)
    with pytest.raises(ValueError):
        cp.intersection(0)


def test_position_out_of_range():
    with pytest.raises(IndexError):
        _half_clip().position(POINTS, 4)


def test_str_format():
    assert str(_half_clip()) == "0 -> (0->1:0.5) -> (2->3:0.5) -> 3"


def test_clear():
    cp = _half_clip()
    cp.clear()
    assert (cp.inside_points, cp.onplane_points, cp.vertices) == ([], [], [])
    assert str(cp) == ""