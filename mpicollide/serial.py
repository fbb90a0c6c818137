"""Single-process simulation of bodies bouncing in a box."""

from __future__ import annotations

import argparse
import itertools
from typing import Callable, List, Optional, Sequence, Tuple

from mpicollide.collider import Body, check_collision, reverse, wall_bounce
from mpicollide.vectors import Vector

WIDTH = 100
HEIGHT = 50

FrameCallback = Callable[[List[Body], List[Tuple[int, int]]], Optional[bool]]


def initial_bodies() -> List[Body]:
    """Return the two bodies that start on a head-on course."""
    return [
        Body(
            position=Vector(30, 25, 0),
            velocity=Vector(1, 0, 0),
            colour=Vector(0, 0, 255),
        ),
        Body(
            position=Vector(90, 25, 0),
            velocity=Vector(-2, 0, 0),
            colour=Vector(255, 0, 0),
        ),
    ]


def step(
    bodies: List[Body], dt: float, width: float = WIDTH, height: float = HEIGHT
) -> List[Tuple[int, int]]:
    """Advance the bodies by one time step; return the ids of colliding pairs."""
    for b in bodies:
        b.position = b.position + b.velocity * dt

    collisions = []
    for a, b in itertools.combinations(bodies, 2):
        if check_collision(a, b):
            collisions.append((a.id, b.id))
            reverse(a, b)

    for b in bodies:
        wall_bounce(b, width, height)
    return collisions


def run(
    t_max: float = 100.0,
    dt: float = 0.1,
    width: float = WIDTH,
    height: float = HEIGHT,
    on_frame: Optional[FrameCallback] = None,
) -> List[Body]:
    """Simulate until ``t_max`` and return the final bodies.

    ``on_frame`` is called after every step with the bodies and the
    collisions of that step; returning False stops the simulation.
    """
    bodies = initial_bodies()
    t = 0.0
    for steps in itertools.count():
        if t >= t_max:
            break
        t = steps * dt
        collisions = step(bodies, dt, width, height)
        if on_frame is not None and on_frame(bodies, collisions) is False:
            break
    return bodies


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the serial collision simulation.")
    parser.add_argument("--t-max", type=float, default=100.0)
    parser.add_argument("--dt", type=float, default=0.1)
    args = parser.parse_args(argv)

    def report(_bodies: List[Body], collisions: List[Tuple[int, int]]) -> None:
        for _ in collisions:
            print("Collision on rank 0")

    run(args.t_max, args.dt, WIDTH, HEIGHT, report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())