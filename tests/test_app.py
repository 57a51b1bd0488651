from unittest import mock

import pygame
import pytest

from softsim import app
from softsim.polygon import Polygon
from softsim.softbody import SoftBody


def _surface(size=(200, 200)):
    surface = pygame.Surface(size)
    surface.fill(app.BLACK)
    return surface


def _rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def _square(debug):
    return Polygon(points=[(10.0, 10.0), (50.0, 10.0), (50.0, 50.0), (10.0, 50.0)], debug=debug)


def test_draw_polygon_outline():
    surface = _surface()
    app.draw_polygon(surface, _square(debug=False))
    assert _rgb(surface, (30, 10)) == app.WHITE
    assert _rgb(surface, (10, 30)) == app.WHITE
    assert _rgb(surface, (30, 30)) == app.BLACK


def test_draw_polygon_debug_marks_centre():
    surface = _surface()
    app.draw_polygon(surface, _square(debug=True))
    assert _rgb(surface, (30, 30)) == app.RED
    assert _rgb(surface, (10, 10)) == app.GRAY


def test_draw_empty_polygon_draws_nothing():
    surface = _surface()
    app.draw_polygon(surface, Polygon(debug=True))
    assert pygame.mask.from_threshold(surface, app.BLACK, (1, 1, 1, 255)).count() == 200 * 200


def test_draw_soft_body():
    body = SoftBody(point_radius=2.0)
    a = body.add_point_default((10.0, 10.0))
    b = body.add_point_default((40.0, 10.0))
    body.add_spring_default(a, b, 30.0)
    surface = _surface()
    app.draw_soft_body(surface, body)
    assert _rgb(surface, (25, 10)) == app.RAY_WHITE
    assert _rgb(surface, (10, 10)) == app.RED
    assert _rgb(surface, (25, 30)) == app.BLACK


def test_draw_soft_body_skips_non_finite_points():
    body = SoftBody(point_radius=2.0)
    body.add_point_default((float("nan"), 10.0))
    surface = _surface()
    app.draw_soft_body(surface, body)
    assert _rgb(surface, (0, 10)) == app.BLACK


def test_build_default_simulation():
    sim = app.build_default_simulation()
    assert sim.physic_steps == 1
    assert len(sim.soft_bodies) == 1
    body = sim.soft_bodies[0]
    assert len(body.points) == 10 * 10
    assert body.points[0].pos == (100.0, 100.0)
    assert body.stiffness == 200
    assert body.damping == 5
    assert body.mass == 0.1
    assert body.point_radius == 5


def test_draw_simulation_draws_bodies_and_polygons():
    sim = app.build_default_simulation()
    sim.add_polygon(Polygon(points=[(600.0, 600.0), (700.0, 600.0), (700.0, 700.0), (600.0, 700.0)]))
    surface = _surface(app.WINDOW_SIZE)
    app.draw_simulation(surface, sim)
    assert _rgb(surface, (100, 100)) == app.RED
    assert _rgb(surface, (650, 600)) == app.WHITE
    assert _rgb(surface, (1000, 50)) == app.BLACK


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        app.main(["--unknown"])
    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    "event",
    [
        pygame.event.Event(pygame.QUIT),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
    ],
)
def test_main_stops_on_close(monkeypatch, event):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with mock.patch("pygame.event.get", return_value=[event]):
        assert app.main([]) == 0
    assert pygame.display.get_init() is False