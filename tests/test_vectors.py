import math

import pytest

from mpicollide.vectors import Vector, dot, mag, norm


def test_addition_and_subtraction_round_trip():
    a = Vector(1.5, -2.0, 3.0)
    b = Vector(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_scalar_multiplication_is_commutative():
    v = Vector(1.0, 2.0, 3.0)
    assert v * 2.5 == 2.5 * v
    assert list(v * 2.0) == [2.0, 4.0, 6.0]


def test_dot_is_symmetric_and_matches_mag():
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(-4.0, 0.5, 2.0)
    assert dot(a, b) == dot(b, a)
    assert mag(a) == dot(a, a)


def test_mag_is_squared_length():
    assert mag(Vector(3.0, 4.0, 0.0)) == 25.0


def test_norm_has_unit_length_and_same_direction():
    v = Vector(3.0, -7.0, 2.0)
    n = norm(v)
    assert math.isclose(mag(n), 1.0)
    scale = math.sqrt(mag(v))
    for component, original in zip(n, v):
        assert math.isclose(component * scale, original)


def test_norm_of_zero_vector_raises():
    with pytest.raises(ValueError, match="magnitude zero"):
        norm(Vector(0.0, 0.0, 0.0))


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        Vector(1.0, 2.0) + Vector(1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        dot(Vector(1.0), Vector(1.0, 2.0))


def test_str_format():
    assert str(Vector(1, 2.5, 3)) == "(1, 2.5, 3)"


def test_indexing_and_length():
    v = Vector(7.0, 8.0, 9.0)
    assert len(v) == 3
    assert v[2] == 9.0
    assert v[1:] == (8.0, 9.0)


def test_equal_vectors_hash_equal():
    assert hash(Vector(1.0, 2.0)) == hash(Vector(1, 2))