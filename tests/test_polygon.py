import math

import pytest

from softsim.polygon import (
    Polygon,
    angle,
    closest_point_on_segment,
    sort_points_by_angle,
)
from softsim.vector import length, sub

SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


def make_square():
    return Polygon(points=list(SQUARE))


def test_angle_points_straight_up():
    assert angle((0.0, 1.0), (0.0, 0.0)) == pytest.approx(math.pi / 2)


def test_sort_points_by_angle_is_ordered_permutation():
    middle = (5.0, 5.0)
    shuffled = [SQUARE[2], SQUARE[0], SQUARE[3], SQUARE[1]]
    ordered = sort_points_by_angle(shuffled, middle)
    assert sorted(ordered) == sorted(shuffled)
    angles = [angle(p, middle) for p in ordered]
    assert angles == sorted(angles)


def test_sort_points_by_angle_reverses_ties():
    ordered = sort_points_by_angle([(1.0, 1.0), (2.0, 2.0)], (0.0, 0.0))
    assert ordered == [(2.0, 2.0), (1.0, 1.0)]


def test_sort_points_empty():
    assert sort_points_by_angle([], (0.0, 0.0)) == []


def test_closest_point_on_segment_clamps_to_end():
    a, b = (0.0, 0.0), (4.0, 0.0)
    assert closest_point_on_segment(a, b, (9.0, 3.0)) == b
    assert closest_point_on_segment(a, b, (-9.0, 3.0)) == a


def test_closest_point_on_degenerate_segment_is_start():
    a = (2.0, 2.0)
    assert closest_point_on_segment(a, a, (7.0, 1.0)) == a


def test_closest_point_on_segment_inside_range_is_perpendicular():
    a, b, point = (0.0, 0.0), (10.0, 0.0), (3.0, 6.0)
    assert closest_point_on_segment(a, b, point) == (point[0], a[1])


def test_add_point_and_add_points():
    polygon = Polygon()
    polygon.add_point(SQUARE[0])
    polygon.add_points(SQUARE[1:])
    assert polygon.points == SQUARE


def test_middle_point_is_centroid_of_points():
    polygon = make_square()
    assert polygon.middle_point() == (5.0, 5.0)


def test_outline_is_closed_loop_over_all_points():
    polygon = Polygon(points=[SQUARE[2], SQUARE[0], SQUARE[1], SQUARE[3]])
    edges = polygon.outline()
    assert len(edges) == len(SQUARE)
    assert sorted(start for start, _ in edges) == sorted(SQUARE)
    for (_, end), (next_start, _) in zip(edges, edges[1:] + edges[:1]):
        assert end == next_start


def test_outline_of_single_point_is_self_loop():
    polygon = Polygon(points=[(3.0, 4.0)])
    assert polygon.outline() == [((3.0, 4.0), (3.0, 4.0))]


def test_outline_of_empty_polygon_is_empty():
    assert Polygon().outline() == []


def test_translate_round_trip():
    polygon = make_square()
    polygon.translate((3.0, -2.0))
    assert polygon.points != SQUARE
    polygon.translate((-3.0, 2.0))
    assert polygon.points == SQUARE


def test_point_inside_square_collides():
    polygon = make_square()
    assert polygon.is_colliding_with_point((5.0, 5.0)) is True


def test_point_outside_square_does_not_collide():
    polygon = make_square()
    assert polygon.is_colliding_with_point((15.0, 5.0)) is False
    assert polygon.is_colliding_with_point((5.0, -1.0)) is False


def test_collision_records_nearest_edge_data():
    polygon = make_square()
    point = (5.0, 2.0)
    assert polygon.is_colliding_with_point(point)
    assert polygon.last_closest_dist == pytest.approx(
        length(sub(point, polygon.last_closest_point))
    )
    assert polygon.last_closest_point == (point[0], 0.0)
    assert length(polygon.last_norm_push_vec) == pytest.approx(1.0)


def test_empty_polygon_never_collides():
    polygon = Polygon()
    assert polygon.is_colliding_with_point((0.0, 0.0)) is False
    assert math.isinf(polygon.last_closest_dist)