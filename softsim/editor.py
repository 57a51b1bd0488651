"""Interactive creation, dragging and deletion of polygons."""

from __future__ import annotations

from dataclasses import dataclass, field

from softsim.polygon import Polygon
from softsim.simulation import Simulation
from softsim.vector import Vec2


@dataclass(frozen=True)
class InputState:
    """The user input seen during one frame."""

    mouse_pos: Vec2 = (0.0, 0.0)
    mouse_delta: Vec2 = (0.0, 0.0)
    create_key_down: bool = False
    left_pressed: bool = False
    left_down: bool = False
    enter_down: bool = False
    delete_pressed: bool = False


def _new_polygon() -> Polygon:
    return Polygon(debug=True)


@dataclass
class PolygonCreator:
    """Builds a polygon point by point and moves polygons with the mouse."""

    current_polygon: Polygon = field(default_factory=_new_polygon)
    drag_polygon_index: int = -1
    last_dragged_index: int = 0

    def update(self, delta_time: float, simulation: Simulation, inputs: InputState) -> None:
        """Apply one frame of input to the polygon being built and the simulation."""
        mouse_pos = inputs.mouse_pos

        if inputs.create_key_down:
            if inputs.left_pressed:
                self.current_polygon.add_point(mouse_pos)
                self.last_dragged_index = -1
        elif inputs.left_down:
            self._drag(simulation, mouse_pos, inputs.mouse_delta)
        else:
            self.drag_polygon_index = -1

        if inputs.enter_down:
            self.current_polygon.debug = False
            simulation.add_polygon(self.current_polygon)
            self.current_polygon = _new_polygon()

        if inputs.delete_pressed:
            if self.last_dragged_index > -1:
                if len(simulation.polygons) > 1:
                    del simulation.polygons[self.last_dragged_index]
                    self.last_dragged_index = -2
            else:
                self.current_polygon = _new_polygon()

    def _drag(self, simulation: Simulation, mouse_pos: Vec2, delta: Vec2) -> None:
        if self.drag_polygon_index != -1:
            simulation.polygons[self.drag_polygon_index].translate(delta)
        elif self.current_polygon.is_colliding_with_point(mouse_pos):
            self.current_polygon.translate(delta)
            self.last_dragged_index = -1
        else:
            for index, polygon in enumerate(simulation.polygons):
                if polygon.is_colliding_with_point(mouse_pos):
                    self.drag_polygon_index = index
                    self.last_dragged_index = index
                    polygon.translate(delta)
                    break