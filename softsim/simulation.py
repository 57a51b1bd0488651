"""The simulation world: static polygons and the soft bodies moving among them."""

from __future__ import annotations

from dataclasses import dataclass, field

from softsim.polygon import Polygon
from softsim.softbody import SoftBody
from softsim.vector import Vec2, add, length, rotate, sub


@dataclass
class Simulation:
    """Holds every polygon and soft body and advances them in sub-steps."""

    polygons: list[Polygon] = field(default_factory=list)
    soft_bodies: list[SoftBody] = field(default_factory=list)
    physic_steps: int = 1

    def update(self, delta_time: float) -> None:
        """Advance all soft bodies by ``delta_time`` split over ``physic_steps``."""
        if self.physic_steps <= 0:
            return
        step_time = delta_time / self.physic_steps
        for _ in range(self.physic_steps):
            for soft_body in self.soft_bodies:
                soft_body.update(step_time, self.polygons)

    def add_polygon(self, polygon: Polygon) -> None:
        self.polygons.append(polygon)

    def add_soft_body(self, soft_body: SoftBody) -> None:
        self.soft_bodies.append(soft_body)

    def add_rect_soft_body(
        self,
        pos: Vec2,
        width: int,
        height: int,
        spacing: float,
        stiffness: float,
        damping: float,
        mass: float,
        point_radius: float,
    ) -> SoftBody:
        """Add a grid of points joined by straight and diagonal springs."""
        diagonal_spacing = length((spacing, spacing))
        soft_body = SoftBody(
            stiffness=stiffness, damping=damping, mass=mass, point_radius=point_radius
        )

        grid: dict[tuple[int, int], int] = {}
        for y in range(height):
            for x in range(width):
                grid[x, y] = soft_body.add_point_default(
                    (x * spacing + pos[0], y * spacing + pos[1])
                )

        for y in range(height):
            for x in range(width):
                here = grid[x, y]
                if x < width - 1:
                    soft_body.add_spring_default(here, grid[x + 1, y], spacing)
                if y < height - 1:
                    soft_body.add_spring_default(here, grid[x, y + 1], spacing)
                if x < width - 1 and y < height - 1:
                    soft_body.add_spring_default(here, grid[x + 1, y + 1], diagonal_spacing)
                if x < width - 1 and y > 0:
                    soft_body.add_spring_default(here, grid[x + 1, y - 1], diagonal_spacing)

        soft_body.collision_steps = 1
        soft_body.physic_steps = 5
        soft_body.volume_force = 1000

        self.add_soft_body(soft_body)
        return soft_body

    def add_circle_soft_body(
        self,
        pos: Vec2,
        radius: float,
        point_count: int,
        stiffness: float,
        damping: float,
        mass: float,
        point_radius: float,
    ) -> SoftBody:
        """Add a ring of points joined to their neighbours by springs."""
        if point_count < 2:
            raise ValueError("a circular soft body needs at least two points")

        soft_body = SoftBody(
            stiffness=stiffness, damping=damping, mass=mass, point_radius=point_radius
        )
        base_point: Vec2 = (0.0, radius)
        for i in range(point_count):
            rotation = 360 / point_count * i
            soft_body.add_point_default(add(rotate(base_point, rotation), pos))

        rest_length = length(sub(soft_body.points[1].pos, soft_body.points[0].pos))
        for index in range(point_count):
            soft_body.add_spring_default(index, (index + 1) % point_count, rest_length)

        soft_body.collision_steps = 1
        soft_body.physic_steps = 5
        soft_body.volume_force = 50000 / (point_count * 4)

        self.add_soft_body(soft_body)
        return soft_body