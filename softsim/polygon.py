"""Static polygons: ordering, outline and point containment."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from softsim.vector import Vec2, add, average, length, normalized, sub


def angle(point: Vec2, middle_point: Vec2) -> float:
    """Angle of ``point`` around ``middle_point`` in radians."""
    return math.atan2(point[1] - middle_point[1], point[0] - middle_point[0])


def sort_points_by_angle(points: Iterable[Vec2], middle_point: Vec2) -> list[Vec2]:
    """Order points by angle around ``middle_point``.

    Points of equal angle come out in the reverse of their input order.
    """
    return sorted(reversed(list(points)), key=lambda p: angle(p, middle_point))


def closest_point_on_segment(a: Vec2, b: Vec2, point: Vec2) -> Vec2:
    """Closest point to ``point`` on the segment from ``a`` to ``b``."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    len2 = dx * dx + dy * dy
    if len2 == 0:
        return a
    t = ((point[0] - a[0]) * dx + (point[1] - a[1]) * dy) / len2
    t = min(max(t, 0.0), 1.0)
    return (a[0] + t * dx, a[1] + t * dy)


@dataclass
class Polygon:
    """A polygon whose last containment test leaves the nearest edge data behind."""

    points: list[Vec2] = field(default_factory=list)
    debug: bool = False
    last_closest_point: Vec2 = (0.0, 0.0)
    last_closest_dist: float = 0.0
    last_norm_push_vec: Vec2 = (0.0, 0.0)

    def add_point(self, point: Vec2) -> None:
        self.points.append(point)

    def add_points(self, points: Iterable[Vec2]) -> None:
        self.points.extend(points)

    def middle_point(self) -> Vec2:
        return average(self.points)

    def outline(self) -> list[tuple[Vec2, Vec2]]:
        """Closed loop of edges through the points sorted around their centre."""
        ordered = sort_points_by_angle(self.points, self.middle_point())
        return list(zip(ordered, ordered[1:] + ordered[:1]))

    def translate(self, delta: Vec2) -> None:
        self.points = [add(p, delta) for p in self.points]

    def is_colliding_with_point(self, point: Vec2) -> bool:
        """Even-odd containment test that also records the nearest edge point."""
        pts = self.points
        crossings = 0
        self.last_closest_dist = math.inf

        for p1, p2 in zip(pts, pts[1:] + pts[:1]):
            closest = closest_point_on_segment(p1, p2, point)
            dist = length(sub(point, closest))

            if dist < self.last_closest_dist:
                self.last_closest_dist = dist
                self.last_closest_point = closest
                edge = sub(p2, p1)
                self.last_norm_push_vec = normalized((-edge[1], edge[0]))

            if (p1[1] > point[1]) != (p2[1] > point[1]):
                x_inter = p1[0] + (point[1] - p1[1]) * (p2[0] - p1[0]) / (p2[1] - p1[1])
                if x_inter > point[0]:
                    crossings += 1

        return crossings % 2 == 1