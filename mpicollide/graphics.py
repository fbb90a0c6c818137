"""Optional on-screen rendering of a partition's bodies."""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

import pygame

from mpicollide.collider import Body

PIXELS_PER_UNIT = 10
FRAME_MIN_MS = 1000 // 60
_BACKGROUND = (255, 255, 255)
_BUFFER_LINE = (255, 0, 0)


def circle_template(radius: float) -> List[Tuple[float, float]]:
    """Return the pixel offsets of a filled circle of ``radius`` pixels."""
    half = int(radius * PIXELS_PER_UNIT)
    span = range(2 * half + 1)
    return [
        (float(half - i), float(half - j))
        for i in span
        for j in span
        if (half - i) ** 2 + (half - j) ** 2 <= radius * radius
    ]


def frame_delay(frame_time_ms: float) -> float:
    """Return how long to wait so that frames run no faster than 60 per second."""
    if frame_time_ms < FRAME_MIN_MS:
        return FRAME_MIN_MS - frame_time_ms
    return 0


def _to_rgb(colour: Iterable[float]) -> Tuple[int, int, int]:
    r, g, b = (round(255 * min(max(c, 0.0), 1.0)) for c in list(colour)[:3])
    return r, g, b


class Renderer:
    """A window showing one partition, scaled ten pixels per unit."""

    def __init__(self, rank: int, width: int, height: int) -> None:
        pygame.display.init()
        try:
            self.surface = pygame.display.set_mode(
                (width * PIXELS_PER_UNIT, height * PIXELS_PER_UNIT)
            )
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError("Failed to create window / renderer") from exc
        pygame.display.set_caption(f"Collider Renderer rank {rank}")
        self._template = circle_template(PIXELS_PER_UNIT)

    def __enter__(self) -> "Renderer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def render(
        self, bodies: Iterable[Body], x_offset: float, x_buffer: float, height: float
    ) -> None:
        """Draw the buffer line and every body, then show the frame."""
        self.surface.fill(_BACKGROUND)

        buffer_x = PIXELS_PER_UNIT * (x_buffer - x_offset)
        pygame.draw.line(
            self.surface,
            _BUFFER_LINE,
            (buffer_x, 0),
            (buffer_x, height * PIXELS_PER_UNIT),
        )

        for body in bodies:
            colour = _to_rgb(body.colour)
            cx = (body.position[0] - x_offset) * PIXELS_PER_UNIT
            cy = body.position[1] * PIXELS_PER_UNIT
            for dx, dy in self._template:
                self.surface.set_at((math.floor(dx + cx), math.floor(dy + cy)), colour)

        pygame.display.flip()

    def poll_quit(self) -> bool:
        """Drain pending events and report whether a quit was requested."""
        return any(event.type == pygame.QUIT for event in pygame.event.get())

    def close(self) -> None:
        pygame.display.quit()