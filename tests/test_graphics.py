import pygame
import pytest

from mpicollide.collider import Body
from mpicollide.graphics import Renderer, circle_template, frame_delay
from mpicollide.vectors import Vector


@pytest.fixture
def renderer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    r = Renderer(1, 50, 50)
    yield r
    r.close()


def _rgb(surface, xy):
    return tuple(surface.get_at(xy))[:3]


def test_circle_template_unit_radius():
    points = circle_template(1.0)
    assert sorted(points) == sorted([(0.0, 0.0), (1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0)])


def test_circle_template_invariants():
    radius = 3.0
    points = circle_template(radius)
    assert (0.0, 0.0) in points
    assert all(x * x + y * y <= radius * radius for x, y in points)
    assert set(points) == {(-x, y) for x, y in points}
    assert set(points) == {(y, x) for x, y in points}


def test_frame_delay_caps_frame_rate():
    full = frame_delay(0)
    assert full > 0
    assert frame_delay(5) + 5 == full
    assert frame_delay(full) == 0
    assert frame_delay(full + 100) == 0


def test_renderer_caption_and_size(renderer):
    renderer.render([], 50, 52, 50)
    assert pygame.display.get_caption()[0] == "Collider Renderer rank 1"
    assert renderer.surface.get_size() == (500, 500)


def test_render_draws_body_background_and_line(renderer):
    body = Body(position=Vector(5, 5, 0), colour=Vector(0, 0, 1))
    renderer.render([body], 0, 48, 50)
    surface = renderer.surface
    assert _rgb(surface, (50, 50)) == (0, 0, 255)
    assert _rgb(surface, (60, 50)) == (0, 0, 255)
    assert _rgb(surface, (62, 50)) == (255, 255, 255)
    assert _rgb(surface, (0, 0)) == (255, 255, 255)
    assert _rgb(surface, (480, 100)) == (255, 0, 0)


def test_render_clamps_colours_and_applies_offset(renderer):
    body = Body(position=Vector(55, 10, 0), colour=Vector(255, 0, 0))
    renderer.render([body], 50, 52, 50)
    surface = renderer.surface
    assert _rgb(surface, (50, 100)) == (255, 0, 0)
    assert _rgb(surface, (100, 100)) == (255, 255, 255)


def test_poll_quit(renderer):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert renderer.poll_quit() is True
    assert renderer.poll_quit() is False


def test_close_shuts_display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with Renderer(0, 10, 10) as r:
        assert pygame.display.get_init() is True
        assert r.surface.get_size() == (100, 100)
    assert pygame.display.get_init() is False