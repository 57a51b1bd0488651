"""Mass points joined by damped springs that form a soft body."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from softsim.polygon import Polygon
from softsim.vector import (
    GRAVITY,
    Vec2,
    add,
    average,
    descale,
    dot,
    length,
    mul,
    normalized,
    scale,
    sub,
)


def _reflect(velocity: Vec2, normal: Vec2) -> Vec2:
    return sub(velocity, mul(scale(mul(velocity, normal), 2), normal))


@dataclass
class MassPoint:
    """A point mass that integrates its accumulated force each step."""

    pos: Vec2
    vel: Vec2 = (0.0, 0.0)
    force: Vec2 = (0.0, 0.0)
    mass: float = 0.0
    radius: float = 0.0
    index: int = 0

    def update(self, delta_time: float) -> None:
        self.force = add(self.force, (0.0, GRAVITY * self.mass))
        self.vel = add(self.vel, descale(scale(self.force, delta_time), self.mass))
        self.pos = add(self.pos, scale(self.vel, delta_time))
        self.force = (0.0, 0.0)

    def apply_force(self, force: Vec2) -> None:
        self.force = add(self.force, force)

    def resolve_collision(
        self, polygons: Sequence[Polygon], points: Sequence[MassPoint]
    ) -> None:
        """Push this point away from overlapping points and out of polygons."""
        for other in points:
            dist = length(sub(other.pos, self.pos))
            if dist < self.radius + other.radius:
                push_dir = normalized(sub(self.pos, other.pos))
                self.pos = add(self.pos, scale(push_dir, dist / 2))
                self.vel = _reflect(self.vel, push_dir)

        for polygon in polygons:
            if polygon.is_colliding_with_point(self.pos):
                self.pos = polygon.last_closest_point
                self.vel = _reflect(self.vel, polygon.last_norm_push_vec)


@dataclass
class Spring:
    """A damped Hooke spring between two mass points."""

    point_a: MassPoint
    point_b: MassPoint
    stiffness: float = 0.0
    rest_length: float = 0.0
    damping: float = 0.0
    index: int = 0

    def update(self, delta_time: float) -> None:
        spring_vector = sub(self.point_a.pos, self.point_b.pos)
        direction = normalized(spring_vector)
        displacement = length(spring_vector) - self.rest_length
        spring_force = -self.stiffness * displacement

        relative_vel = sub(self.point_a.vel, self.point_b.vel)
        damping_force = -self.damping * dot(relative_vel, direction)

        total = spring_force + damping_force
        self.point_a.apply_force(scale(direction, total))
        self.point_b.apply_force(scale(direction, -total))


@dataclass
class SoftBody:
    """A set of mass points and springs with an outward volume force."""

    points: list[MassPoint] = field(default_factory=list)
    springs: list[Spring] = field(default_factory=list)
    stiffness: float = 0.0
    damping: float = 0.0
    mass: float = 0.0
    point_radius: float = 0.0
    physic_steps: int = 0
    collision_steps: int = 0
    volume_force: float = 0.0

    def update(self, delta_time: float, polygons: Sequence[Polygon]) -> None:
        if self.physic_steps <= 0:
            return
        step_time = delta_time / self.physic_steps

        for _ in range(self.physic_steps):
            for index, point in enumerate(self.points):
                point.update(step_time)
                point.index = index

            for index, spring in enumerate(self.springs):
                spring.update(step_time)
                spring.index = index

            middle = average(p.pos for p in self.points)

            for _ in range(self.collision_steps):
                for point in self.points:
                    point.resolve_collision(polygons, self.points)
                    outward = normalized(sub(point.pos, middle))
                    point.apply_force(scale(outward, self.volume_force))

    def add_point(self, pos: Vec2, mass: float, point_radius: float) -> int:
        """Add a mass point and return its index."""
        index = len(self.points)
        self.points.append(MassPoint(pos=pos, mass=mass, radius=point_radius, index=index))
        return index

    def add_spring(
        self,
        index_a: int,
        index_b: int,
        stiffness: float,
        rest_length: float,
        damping: float,
    ) -> int:
        """Join two existing points with a spring and return its index."""
        for point_index in (index_a, index_b):
            if not 0 <= point_index < len(self.points):
                raise IndexError(f"no mass point with index {point_index}")
        index = len(self.springs)
        self.springs.append(
            Spring(
                point_a=self.points[index_a],
                point_b=self.points[index_b],
                stiffness=stiffness,
                rest_length=rest_length,
                damping=damping,
                index=index,
            )
        )
        return index

    def add_point_default(self, pos: Vec2) -> int:
        return self.add_point(pos, self.mass, self.point_radius)

    def add_spring_default(self, index_a: int, index_b: int, rest_length: float) -> int:
        return self.add_spring(index_a, index_b, self.stiffness, rest_length, self.damping)