"""Window, drawing and main loop of the soft-body simulation."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

import pygame

from softsim.editor import InputState, PolygonCreator
from softsim.polygon import Polygon
from softsim.simulation import Simulation
from softsim.softbody import SoftBody
from softsim.vector import TARGET_FPS, Vec2

WINDOW_SIZE = (1080, 720)
TITLE = "Softbody Simulation"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RAY_WHITE = (245, 245, 245)
GRAY = (130, 130, 130)
RED = (230, 41, 55)
LIME = (0, 158, 47)

_COORD_LIMIT = 2**31 - 1


def _pixel(vec: Vec2) -> tuple[int, int] | None:
    """Screen coordinates of ``vec``, or None when it is not finite."""
    if not (math.isfinite(vec[0]) and math.isfinite(vec[1])):
        return None
    return (
        max(-_COORD_LIMIT, min(_COORD_LIMIT, int(vec[0]))),
        max(-_COORD_LIMIT, min(_COORD_LIMIT, int(vec[1]))),
    )


def _line(surface: pygame.Surface, color, start: Vec2, end: Vec2) -> None:
    a, b = _pixel(start), _pixel(end)
    if a is not None and b is not None:
        pygame.draw.line(surface, color, a, b)


def _circle(surface: pygame.Surface, color, centre: Vec2, radius: float) -> None:
    c = _pixel(centre)
    if c is not None and radius > 0:
        pygame.draw.circle(surface, color, c, radius)


def draw_polygon(surface: pygame.Surface, polygon: Polygon) -> None:
    """Draw the outline, and in debug mode the corners and the centre."""
    if not polygon.points:
        return
    for start, end in polygon.outline():
        _line(surface, WHITE, start, end)
        if polygon.debug:
            _circle(surface, GRAY, start, 3)
    if polygon.debug:
        _circle(surface, RED, polygon.middle_point(), 5)


def draw_soft_body(surface: pygame.Surface, soft_body: SoftBody) -> None:
    """Draw springs first, then the mass points on top."""
    for spring in soft_body.springs:
        _line(surface, RAY_WHITE, spring.point_a.pos, spring.point_b.pos)
    for point in soft_body.points:
        _circle(surface, RED, point.pos, point.radius)


def draw_simulation(surface: pygame.Surface, simulation: Simulation) -> None:
    for polygon in simulation.polygons:
        draw_polygon(surface, polygon)
    for soft_body in simulation.soft_bodies:
        draw_soft_body(surface, soft_body)


def build_default_simulation() -> Simulation:
    """The scene shown at start-up: one rectangular soft body."""
    sim = Simulation(physic_steps=1)
    sim.add_rect_soft_body((100.0, 100.0), 10, 10, 20, 200, 5, 0.1, 5)
    return sim


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="softsim",
        description="Interactive soft-body simulation. P pauses, hold C and click to "
        "add polygon points, Enter places the polygon, Delete removes one.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run until it is closed."""
    _parse_args(argv)

    pygame.display.init()
    pygame.font.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        font = pygame.font.Font(None, 24)
        clock = pygame.time.Clock()

        sim = build_default_simulation()
        creator = PolygonCreator()
        paused = False
        pygame.mouse.get_rel()
        clock.tick()

        while True:
            delta_time = clock.tick(TARGET_FPS) / 1000.0
            left_pressed = False
            delete_pressed = False
            quit_requested = False

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quit_requested = True
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        quit_requested = True
                    elif event.key == pygame.K_p:
                        paused = not paused
                    elif event.key == pygame.K_DELETE:
                        delete_pressed = True
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    left_pressed = True

            if quit_requested:
                break

            if not paused:
                sim.update(delta_time)

            keys = pygame.key.get_pressed()
            mouse_x, mouse_y = pygame.mouse.get_pos()
            delta_x, delta_y = pygame.mouse.get_rel()
            inputs = InputState(
                mouse_pos=(float(mouse_x), float(mouse_y)),
                mouse_delta=(float(delta_x), float(delta_y)),
                create_key_down=bool(keys[pygame.K_c]),
                left_pressed=left_pressed,
                left_down=bool(pygame.mouse.get_pressed()[0]),
                enter_down=bool(keys[pygame.K_RETURN]),
                delete_pressed=delete_pressed,
            )
            creator.update(delta_time, sim, inputs)

            screen.fill(BLACK)
            draw_simulation(screen, sim)
            draw_polygon(screen, creator.current_polygon)
            fps_text = font.render(f"{round(clock.get_fps())} FPS", True, LIME)
            screen.blit(fps_text, (5, 5))
            pygame.display.flip()
    finally:
        pygame.font.quit()
        pygame.display.quit()
    return 0