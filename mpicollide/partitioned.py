"""Two-partition collision simulation with bodies exchanged across a buffer zone."""

from __future__ import annotations

import argparse
import itertools
import math
import random
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Iterator, List, Optional, Sequence, Tuple

from mpicollide.collider import Body, check_collision, reverse, wall_bounce
from mpicollide.vectors import Vector

WIDTH_FULL = 100
HEIGHT = 50
N_PROC = 2
_N_CANDIDATES = 100

BufferCollision = Tuple[Body, Body]


class MessageTag(IntEnum):
    """Kinds of message passed between partitions."""

    TERMINATE = 0
    BUFFER_ZONE = 1


def beyond_boundary(body: Body, rank: int, x_buffer: float) -> bool:
    """Return True when the body lies past the buffer line towards the neighbour."""
    x = body.position[0]
    return x > x_buffer if rank == 0 else x < x_buffer


def remove_body(bodies: List[Body], body: Body) -> bool:
    """Remove the first body sharing ``body``'s id; return whether one was removed."""
    for index, candidate in enumerate(bodies):
        if candidate.id == body.id:
            del bodies[index]
            return True
    return False


def trivial_setup(x_offset: float, width: float) -> List[Body]:
    """Return a single body heading towards the far edge of the partition."""
    x = float(x_offset) + 25
    return [
        Body(
            position=Vector(x, 25, 0),
            velocity=Vector((width - x) / 12, 0, 0),
        )
    ]


def random_setup(x_offset: float, width: float, seed: Optional[int] = 0) -> List[Body]:
    """Scatter non-overlapping bodies over the whole box and keep this partition's.

    Every partition given the same seed draws the same bodies, so together
    they share out one consistent initial state.
    """
    rng = random.Random(seed)
    bodies: List[Body] = []
    for _ in range(_N_CANDIDATES):
        candidate = Body(
            position=Vector(rng.uniform(5, 95), rng.uniform(5, 45), 0),
            velocity=Vector(rng.uniform(-2, 2), rng.uniform(-2, 2), 0),
            colour=Vector(rng.random(), rng.random(), rng.random()),
        )
        if not any(check_collision(candidate, other) for other in bodies):
            bodies.append(candidate)
    return [b for b in bodies if x_offset <= b.position[0] < x_offset + width]


@dataclass
class Partition:
    """One vertical slab of the box, owning the bodies whose centres lie in it."""

    rank: int
    bodies: List[Body] = field(default_factory=list)
    width_full: int = WIDTH_FULL
    height: int = HEIGHT
    n_proc: int = N_PROC
    transfer_list: List[Body] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if self.n_proc != N_PROC:
            raise ValueError("This solution is only designed for two processes.")
        if not 0 <= self.rank < self.n_proc:
            raise ValueError(f"rank {self.rank} out of range for {self.n_proc} processes")

    @property
    def half_width(self) -> int:
        return self.width_full // self.n_proc

    @property
    def x_offset(self) -> int:
        return self.half_width * self.rank

    @property
    def x_buffer(self) -> int:
        shift = -2 * Body.radius if self.rank == 0 else 2 * Body.radius
        return int(self.half_width + shift)

    def _owns(self, x: float) -> bool:
        return self.x_offset <= x < self.x_offset + self.half_width

    def advance(self, dt: float) -> List[Body]:
        """Move every body and return copies of those to send to the neighbour."""
        for b in self.bodies:
            b.position = b.position + b.velocity * dt
        self.transfer_list = [
            replace(b) for b in self.bodies if beyond_boundary(b, self.rank, self.x_buffer)
        ]
        return [replace(b) for b in self.transfer_list]

    def exchange(self, received: Sequence[Body]) -> List[BufferCollision]:
        """Merge the neighbour's buffer bodies and resolve all collisions.

        Returns snapshots of each (local, foreign) pair that met in the buffer zone.
        """
        foreign_bodies = [replace(b) for b in received]

        for b in foreign_bodies:
            if self._owns(b.position[0]):
                self.bodies.append(replace(b))

        for b in self.transfer_list:
            if not self._owns(b.position[0]):
                remove_body(self.bodies, b)

        for a, b in itertools.combinations(self.bodies, 2):
            if check_collision(a, b):
                reverse(a, b)

        collisions: List[BufferCollision] = []
        for local in self.transfer_list:
            for foreign in foreign_bodies:
                if check_collision(local, foreign):
                    collisions.append((replace(local), replace(foreign)))
                    for b in self.bodies:
                        if b.id == local.id:
                            reverse(b, foreign)

        for b in self.bodies:
            wall_bounce(b, self.width_full, self.height)
        return collisions


def _setup(seed: Optional[int]) -> List[Partition]:
    partitions = [Partition(rank) for rank in range(N_PROC)]
    for p in partitions:
        p.bodies = random_setup(p.x_offset, p.half_width, seed)
    return partitions


def _steps(
    partitions: List[Partition], t_max: float, dt: float
) -> Iterator[List[List[BufferCollision]]]:
    t = 0.0
    for steps in itertools.count():
        if t >= t_max:
            break
        t = steps * dt
        outgoing = [p.advance(dt) for p in partitions]
        n = len(partitions)
        yield [p.exchange(outgoing[(p.rank + 1) % n]) for p in partitions]


def run_partitioned(
    t_max: float = 200.0, dt: float = 0.1, seed: Optional[int] = 0
) -> List[Partition]:
    """Run both partitions in lockstep until ``t_max`` and return them."""
    partitions = _setup(seed)
    for _ in _steps(partitions, t_max, dt):
        pass
    return partitions


def _expected_buffer_size(height: float) -> int:
    buffer_area = 4 * Body.radius * height
    return int(buffer_area / (math.pi * Body.radius * Body.radius))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run the space-partitioned collision simulation."
    )
    parser.add_argument("--t-max", type=float, default=200.0)
    parser.add_argument("--dt", type=float, default=0.1)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args(argv)

    partitions = _setup(args.seed)
    for p in partitions:
        print(f"Rank {p.rank} has buffer pos {p.x_buffer}")
    print(f"Expected maximum size of buffer is {_expected_buffer_size(HEIGHT)}")
    for p in partitions:
        for b in p.bodies:
            print(b)

    for collisions in _steps(partitions, args.t_max, args.dt):
        for rank, pairs in enumerate(collisions):
            for local, foreign in pairs:
                print(f"Buffer collision on rank {rank} {local}, {foreign}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())