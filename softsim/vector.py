"""Two-dimensional vector helpers and the simulation's physical constants."""

from __future__ import annotations

import math
from collections.abc import Iterable

Vec2 = tuple[float, float]

GRAVITY: float = 20.0
TARGET_FPS: int = 0


def _divide(numerator: float, divisor: float) -> float:
    """Divide with IEEE semantics: a zero divisor yields inf or nan."""
    try:
        return numerator / divisor
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, divisor)


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def mul(a: Vec2, b: Vec2) -> Vec2:
    """Component-wise product."""
    return (a[0] * b[0], a[1] * b[1])


def scale(vec: Vec2, factor: float) -> Vec2:
    return (vec[0] * factor, vec[1] * factor)


def div(a: Vec2, b: Vec2) -> Vec2:
    """Component-wise quotient; a zero vector divisor leaves ``a`` unchanged."""
    if b[0] == 0 and b[1] == 0:
        return (a[0], a[1])
    return (_divide(a[0], b[0]), _divide(a[1], b[1]))


def descale(vec: Vec2, divisor: float) -> Vec2:
    """Divide both components by ``divisor``; a zero divisor leaves ``vec`` unchanged."""
    if divisor == 0:
        return (vec[0], vec[1])
    return (vec[0] / divisor, vec[1] / divisor)


def rotate(vec: Vec2, degrees: float) -> Vec2:
    radians = degrees / 360 * 2 * math.pi
    cos, sin = math.cos(radians), math.sin(radians)
    return (cos * vec[0] - sin * vec[1], sin * vec[0] + cos * vec[1])


def length(vec: Vec2) -> float:
    return math.sqrt(vec[0] * vec[0] + vec[1] * vec[1])


def normalized(vec: Vec2) -> Vec2:
    """Unit vector in the direction of ``vec``; the zero vector stays zero."""
    if vec[0] == 0 and vec[1] == 0:
        return (vec[0], vec[1])
    size = length(vec)
    return (vec[0] / size, vec[1] / size)


def dot(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def average(vecs: Iterable[Vec2]) -> Vec2:
    """Mean of the given vectors; an empty collection gives ``(nan, nan)``."""
    items = list(vecs)
    if not items:
        return (math.nan, math.nan)
    count = float(len(items))
    return (sum(v[0] for v in items) / count, sum(v[1] for v in items) / count)


def absolute(vec: Vec2) -> Vec2:
    return (abs(vec[0]), abs(vec[1]))


def closest_point_on_line(p1: Vec2, p2: Vec2, point: Vec2) -> Vec2:
    """Project ``point`` onto the infinite line through ``p1`` and ``p2``."""
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    px = point[0] - p1[0]
    py = point[1] - p1[1]
    t = _divide(px * dx + py * dy, dx * dx + dy * dy)
    return (p1[0] + t * dx, p1[1] + t * dy)