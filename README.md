# mpicollide

A small physics playground: rigid circles of radius 1 move in a box, bounce off its
walls and collide elastically with each other. It comes in two forms:

- **serial**: all bodies live in one domain, and every pair is checked for a
  collision on each step.
- **partitioned**: the box is split into two vertical halves. Each half owns the
  bodies whose centres lie inside it. Bodies that pass a buffer line near the shared
  edge are handed to the neighbour, so collisions across the border are still seen.

The package also has a toy brute-force search for the preimage of a weak hash. It
shows how a search range is shared out between several workers.

## Installation

```
pip install .
```

`pygame` is installed as a dependency. It is used by `mpicollide.graphics`.

## Commands

```
mpicollide-serial [--t-max 100] [--dt 0.1]
mpicollide-partitioned [--t-max 200] [--dt 0.1] [--seed 0]
mpicollide-hash [--target 504981] [--limit 10000] [--ranks N]
```

- `mpicollide-serial` runs two bodies on a head-on course in a 100 x 50 box. It prints
  `Collision on rank 0` for every collision.
- `mpicollide-partitioned` scatters a seeded random field of non-overlapping bodies
  and splits them between two halves. It prints each half's buffer line, the expected
  buffer size and the starting bodies. After that it prints each collision that
  happens across the buffer zone.
- `mpicollide-hash` searches `0 .. limit-1` for an `x` with `rubbish_hash(x) == target`.
  It prints `Found x = ..., hash(x) = ...`. With `--ranks N` it runs the lockstep
  search over `N` partitions instead and reports which partition found the key.

## Library use

### Vectors and bodies

```python
from mpicollide.vectors import Vector, dot, norm, mag
from mpicollide.collider import Body, check_collision, reverse, wall_bounce
```

- `Vector` is an immutable float vector with `+`, `-`, scalar `*` and unary `-`.
  Adding or subtracting vectors of different lengths raises `ValueError`.
- `mag(v)` returns the *squared* magnitude.
- `norm(v)` returns the unit vector and raises `ValueError` for a zero vector.
- `Body` holds a `position`, a `velocity`, a `colour` and a unique `id`. Every body has
  `Body.radius == 1.0`.
- `check_collision(b1, b2)` is true when the squared distance between the two centres
  is at most 2.
- `reverse(b1, b2)` exchanges the velocity components along the line between the
  centres, in place.
- `wall_bounce(body, width, height)` flips the x or y velocity when the body is
  outside the box along that axis.

### Serial simulation

```python
from mpicollide.serial import initial_bodies, step, run

bodies = initial_bodies()
pairs = step(bodies, 0.1, 100, 50)   # ids of the pairs that collided in this step
final = run(t_max=100.0, dt=0.1, on_frame=lambda bodies, collisions: None)
```

`run` calls `on_frame(bodies, collisions)` after every step. If the callback returns
`False`, the run stops early.

### Partitioned simulation

```python
from mpicollide.partitioned import (
    Partition, MessageTag, beyond_boundary, remove_body,
    trivial_setup, random_setup, run_partitioned,
)

halves = run_partitioned(t_max=200.0, dt=0.1, seed=0)
```

- A `Partition(rank)` exists only for two partitions. Any other `n_proc`, or a rank
  outside the range, raises `ValueError`.
- `Partition.advance(dt)` moves the partition's bodies. It returns copies of the bodies
  that lie past the buffer line.
- `Partition.exchange(received)` does four things:
  - adopts the neighbour's bodies that are now inside this half;
  - drops its own bodies that have left the half;
  - resolves collisions inside the half and across the buffer zone;
  - applies the wall bounces.

  It returns snapshots of each pair of bodies that met across the buffer zone.
- `random_setup(x_offset, width, seed)` draws the same field of bodies for a given
  seed, then keeps the bodies that lie in the given slab.
- `trivial_setup` returns a single body.

### Hash search

```python
from mpicollide.hashcrack import rubbish_hash, crack, partition_range, crack_partitioned

crack(504981, 10000)                 # smallest matching x, or None
partition_range(10000, 4, 3)         # (7500, 10000)
crack_partitioned(504981, 10000, 4)  # (winner, key), or None
```

- `rubbish_hash` accepts unsigned 32-bit integers only.
- In `partition_range`, the last worker also takes the remainder of the range.

### Rendering

```python
from mpicollide.graphics import Renderer, circle_template, frame_delay

with Renderer(rank=0, width=50, height=50) as renderer:
    renderer.render(bodies, x_offset=0, x_buffer=48, height=50)
    quit_requested = renderer.poll_quit()
```

- `Renderer` opens a pygame window scaled to ten pixels per unit. If the window cannot
  be created, it raises `RuntimeError`.
- `frame_delay(frame_time_ms)` returns how many milliseconds to wait to stay at or
  below 60 frames per second.
- `circle_template(radius)` returns the pixel offsets of a filled circle.

## What it does not do

- The partitioned simulation runs both halves side by side in a single process. It
  does not spread them over separate processes or machines.
- The hash search with `--ranks` likewise runs every partition in this one process.
- None of the commands opens a window. To draw frames, call `Renderer` from your own
  loop, for example from an `on_frame` callback.

## Tests

```
pip install .[test]
pytest
```