"""Small fixed-length float vectors used by the collision simulation."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator, Union, overload


class Vector:
    """An immutable vector of floats supporting the usual arithmetic."""

    __slots__ = ("_components",)

    def __init__(self, *components: float) -> None:
        self._components = tuple(float(c) for c in components)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> tuple: ...

    def __getitem__(self, index: Union[int, slice]):
        return self._components[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._components == other._components

    def __hash__(self) -> int:
        return hash(self._components)

    def _check_same_length(self, other: "Vector") -> None:
        if len(self) != len(other):
            raise ValueError(
                f"vector lengths differ: {len(self)} and {len(other)}"
            )

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_length(other)
        return Vector(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_length(other)
        return Vector(*(a - b for a, b in zip(self, other)))

    def __mul__(self, scalar: float) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector(*(a * scalar for a in self))

    __rmul__ = __mul__

    def __neg__(self) -> "Vector":
        return Vector(*(-a for a in self))

    def __str__(self) -> str:
        return "(" + ", ".join(f"{c:g}" for c in self) + ")"

    def __repr__(self) -> str:
        return f"Vector{self._components!r}"


def dot(v1: Vector, v2: Vector) -> float:
    """Return the dot product of two vectors of equal length."""
    v1._check_same_length(v2)
    return sum(a * b for a, b in zip(v1, v2))


def norm(v: Vector) -> Vector:
    """Return the unit vector in the direction of ``v``."""
    magnitude = dot(v, v)
    if magnitude == 0:
        raise ValueError("Vector with magnitude zero in norm")
    return v * (1.0 / math.sqrt(magnitude))


def mag(v: Vector) -> float:
    """Return the squared magnitude of ``v``."""
    return dot(v, v)