import math

import pytest

from gravity.Vec2 import Vec2


def test_arithmetic_returns_new_vectors():
    a = Vec2(1, 2)
    b = Vec2(3, -4)

    assert a + b == Vec2(4, -2)
    assert a - b == Vec2(-2, 6)
    assert -a == Vec2(-1, -2)
    assert a == Vec2(1, 2)
    assert (a + b) is not a


def test_scale_by_scalar_and_vector():
    v = Vec2(2, -3)

    assert v * 2 == Vec2(4, -6)
    assert 2 * v == Vec2(4, -6)
    assert v * Vec2(0.5, 2) == Vec2(1, -6)


def test_divide_by_scalar_and_vector():
    v = Vec2(4, -6)

    assert v / 2 == Vec2(2, -3)
    assert v / Vec2(4, -3) == Vec2(1, 2)


def test_divide_by_zero_is_left_to_caller():
    with pytest.raises(ZeroDivisionError):
        Vec2(1, 1) / 0
    with pytest.raises(ZeroDivisionError):
        Vec2(1, 1) / Vec2(1, 0)


def test_length_and_distance():
    assert Vec2(3, 4).length() == 5.0
    assert Vec2(3, 4).length_sq() == 25.0
    assert Vec2(1, 1).distance_to(Vec2(4, 5)) == 5.0


def test_normalize():
    n = Vec2(3, 4).normalize()
    assert n.x == pytest.approx(0.6)
    assert n.y == pytest.approx(0.8)


def test_normalize_zero_vector_is_zero():
    n = Vec2(0, 0).normalize()
    assert n == Vec2(0, 0)
    assert not math.isnan(n.x) and not math.isnan(n.y)


def test_clamp_scalar_bounds():
    assert Vec2(2, -3).clamp(-1, 1) == Vec2(1, -1)
    assert Vec2(0.5, -0.25).clamp(-1, 1) == Vec2(0.5, -0.25)


def test_clamp_vector_bounds():
    clamped = Vec2(5, 5).clamp(Vec2(0, 0), Vec2(2, 10))
    assert clamped == Vec2(2, 5)

    clamped = Vec2(-5, 5).clamp(Vec2(-1, 6), 10)
    assert clamped == Vec2(-1, 6)


def test_hash_by_value():
    assert len({Vec2(1, 2), Vec2(1, 2), Vec2(2, 1)}) == 2
