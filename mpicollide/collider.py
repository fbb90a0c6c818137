"""Circular bodies and the collision rules between them and the walls."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import ClassVar

from mpicollide.vectors import Vector, dot, mag, norm

_ids = itertools.count()


def _zero() -> Vector:
    return Vector(0.0, 0.0, 0.0)


@dataclass
class Body:
    """A circular body with a position, a velocity, a colour and a unique id."""

    position: Vector = field(default_factory=_zero)
    velocity: Vector = field(default_factory=_zero)
    colour: Vector = field(default_factory=_zero)
    id: int = field(default_factory=lambda: next(_ids))

    radius: ClassVar[float] = 1.0

    def __str__(self) -> str:
        return f"{{{self.id}: {self.position}, {self.velocity}}}"


def check_collision(b1: Body, b2: Body) -> bool:
    """Return True when the two bodies are in contact."""
    return mag(b1.position - b2.position) <= 2.0


def reverse(b1: Body, b2: Body) -> None:
    """Bounce two colliding bodies of equal mass off each other, in place."""
    contact = (b1.position + b2.position) * 0.5

    b1_to_contact = norm(contact - b1.position)
    b2_to_contact = norm(contact - b2.position)
    v1_parallel = dot(b1.velocity, b1_to_contact) * b1_to_contact
    v1_perp = b1.velocity - v1_parallel
    v2_parallel = dot(b2.velocity, b2_to_contact) * b2_to_contact
    v2_perp = b2.velocity - v2_parallel

    # Work in the frame where the parallel motions are symmetric.
    delta_v = (v1_parallel + v2_parallel) * 0.5
    v_symm = (v1_parallel - v2_parallel) * 0.5

    b1.velocity = v1_perp + (delta_v - v_symm)
    b2.velocity = v2_perp + (delta_v + v_symm)


def wall_bounce(body: Body, width: float, height: float) -> None:
    """Reflect the body's velocity off any wall of the box it has crossed."""
    x, y, *rest = body.velocity
    px, py = body.position[0], body.position[1]
    if px < 0 or px > float(width):
        x = -x
    if py < 0 or py > float(height):
        y = -y
    body.velocity = Vector(x, y, *rest)