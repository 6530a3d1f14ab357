import pytest

from geoclip import vec
from geoclip.segment import Line2, LineSegment2, segments_intersect


def test_crossing_segments_intersect():
    a = LineSegment2((0.0, 0.0), (2.0, 2.0))
    b = LineSegment2((0.0, 2.0), (2.0, 0.0))
    assert segments_intersect(a, b)
    assert segments_intersect(b, a)


def test_parallel_segments_do_not_intersect():
    a = LineSegment2((0.0, 0.0), (2.0, 0.0))
    b = LineSegment2((0.0, 1.0), (2.0, 1.0))
    assert not segments_intersect(a, b)


def test_collinear_overlapping_segments_are_not_reported():
    a = LineSegment2((0.0, 0.0), (2.0, 0.0))
    b = LineSegment2((1.0, 0.0), (3.0, 0.0))
    assert not segments_intersect(a, b)


def test_disjoint_segments_do_not_intersect():
    a = LineSegment2((0.0, 0.0), (1.0, 1.0))
    b = LineSegment2((3.0, 0.0), (2.5, 1.0))
    assert not segments_intersect(a, b)


def test_touching_at_endpoint_intersects():
    a = LineSegment2((0.0, 0.0), (1.0, 1.0))
    b = LineSegment2((1.0, 1.0), (2.0, 0.0))
    assert segments_intersect(a, b)


def test_closest_distance_on_segment_is_zero():
    seg = LineSegment2((0.0, 0.0), (4.0, 2.0))
    assert seg.closest_distance((2.0, 1.0)) == pytest.approx(0.0)


def test_closest_distance_beyond_end_uses_endpoint():
    seg = LineSegment2((0.0, 0.0), (4.0, 0.0))
    p = (6.0, 3.0)
    assert seg.closest_distance(p) == pytest.approx(vec.length(vec.sub(p, seg.end)))


def test_closest_distance_degenerate_segment():
    seg = LineSegment2((1.0, 1.0), (1.0, 1.0))
    p = (4.0, 5.0)
    assert seg.closest_distance(p) == pytest.approx(vec.length(vec.sub(p, seg.start)))


def test_line_unit_dir():
    line = Line2((0.0, 0.0), (3.0, 4.0))
    assert vec.length(line.unit_dir()) == pytest.approx(1.0)


def test_line_sides():
    line = Line2((0.0, 0.0), (1.0, 0.0))
    assert line.is_right((0.5, -1.0))
    assert not line.is_right((0.5, 1.0))
    assert line.is_right((0.5, 0.0))


def test_line_intersect_lands_on_line():
    line = Line2((1.0, 1.0), (2.0, 1.0))
    p1, p2 = (0.0, 3.0), (1.0, -2.0)
    u = line.intersect(p1, p2)
    assert 0 < u < 1
    hit = vec.add(p1, vec.scale(vec.sub(p2, p1), u))
    assert vec.cross2(line.direction, vec.sub(hit, line.pos)) == pytest.approx(0.0)


def test_line_intersect_parallel_is_none():
    line = Line2((0.0, 0.0), (1.0, 1.0))
    assert line.intersect((0.0, 1.0), (2.0, 3.0)) is None