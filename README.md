# softsim

softsim is an interactive 2D soft-body physics sandbox. A soft body is a set
of mass points joined by damped springs. Gravity pulls the points down, and an
outward volume force pushes each point away from the body's centre. You draw
polygon obstacles with the mouse. Mass points that end up inside a polygon are
moved to its nearest edge, and their velocity is reflected.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
softsim
```

This opens a 1080×720 window titled "Softbody Simulation". The window shows a
10×10 rectangular soft body and a frame-rate counter in the top-left corner.
The frame rate is not capped. `softsim --help` prints a short summary of the
controls.

### Controls

| Input | Action |
|-------|--------|
| `P` | Pause or resume the physics |
| Hold `C` + left click | Add a point at the cursor to the polygon being drawn |
| `Enter` | Place the polygon being drawn into the simulation and start a new one |
| Left drag | Move the polygon under the cursor, either the one being drawn or a placed one |
| `Delete` | Remove the last placed polygon you dragged, or discard the polygon being drawn if that was touched last |
| `Escape` or closing the window | Quit |

`Delete` only removes a placed polygon when more than one polygon is in the
simulation. When only one is placed, the key has no effect on it.

## Using the library

```python
from softsim.simulation import Simulation
from softsim.polygon import Polygon

sim = Simulation()
body = sim.add_rect_soft_body((100, 100), 10, 10, 20, 200, 5, 0.1, 5)

ground = Polygon()
ground.add_points([(0, 600), (1080, 600), (1080, 720), (0, 720)])
sim.add_polygon(ground)

for _ in range(60):
    sim.update(1 / 60)

print(body.points[0].pos)
```

`Simulation.add_circle_soft_body(pos, radius, point_count, ...)` builds a ring
of points instead. It raises `ValueError` if `point_count` is less than two.

### Modules

- `softsim.vector` contains the 2D vector helpers on plain tuples: `add`,
  `sub`, `mul`, `scale`, `div`, `descale`, `rotate` (takes degrees), `length`,
  `normalized`, `dot`, `average`, `absolute` and `closest_point_on_line`. It
  also defines the constants `GRAVITY` and `TARGET_FPS`.
- `softsim.polygon` contains `Polygon` and the helpers `angle`,
  `sort_points_by_angle` and `closest_point_on_segment`.
  `Polygon.is_colliding_with_point` performs an even-odd containment test. It
  also records `last_closest_point`, `last_closest_dist` and
  `last_norm_push_vec`, which describe the nearest edge.
- `softsim.softbody` contains `MassPoint`, `Spring` and `SoftBody`.
  `SoftBody.add_point` and `SoftBody.add_spring` return the index of the new
  item. `add_spring` raises `IndexError` when given an unknown point index.
- `softsim.simulation` contains `Simulation`, which holds the polygons and soft
  bodies and advances them in sub-steps.
- `softsim.editor` contains `PolygonCreator`, the polygon editor.
  `PolygonCreator.update` applies one frame of `InputState` to a simulation.
- `softsim.app` contains the pygame front end: `draw_polygon`,
  `draw_soft_body`, `draw_simulation`, `build_default_simulation` and `main`.

## Limitations

- There is no way to save or load a scene. Polygons you draw last only until
  the window closes.
- Soft bodies can only be added from code. The window has no control for
  adding a body.
- Soft bodies do not collide with each other. A mass point only checks for
  overlap with the points of its own body and with the polygons.