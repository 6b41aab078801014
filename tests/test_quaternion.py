import math

import pytest

from motobridge.quaternion import (
    Quaternion,
    clamp,
    euler_to_quaternion,
    quaternion_to_euler,
)


def _norm(q):
    return math.sqrt(q.x**2 + q.y**2 + q.z**2 + q.w**2)


def test_clamp_limits():
    assert clamp(5.0, -1.0, 1.0) == 1.0
    assert clamp(-5.0, -1.0, 1.0) == -1.0
    assert clamp(0.25, -1.0, 1.0) == 0.25


def test_zero_angles_give_identity():
    q = euler_to_quaternion(0, 0, 0)
    assert q == Quaternion(0.0, 0.0, 0.0, 1.0)


def test_identity_gives_zero_angles():
    assert quaternion_to_euler(Quaternion()) == (0, 0, 0)


def test_quarter_turn_about_z():
    q = euler_to_quaternion(0, 0, 900000)
    assert q.x == pytest.approx(0.0, abs=1e-12)
    assert q.y == pytest.approx(0.0, abs=1e-12)
    assert q.z == pytest.approx(q.w)
    assert q.w == pytest.approx(math.sqrt(0.5))


@pytest.mark.parametrize(
    "angles",
    [
        (100000, 200000, 300000),
        (-450000, 123456, -1700000),
        (1750000, -800000, 50000),
        (1, -1, 1),
        (0, 0, -1799999),
    ],
)
def test_unit_norm(angles):
    assert _norm(euler_to_quaternion(*angles)) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "angles",
    [
        (100000, 200000, 300000),
        (-450000, 123456, -1700000),
        (1750000, -800000, 50000),
        (0, 0, 0),
        (-1000000, 450000, 1200000),
    ],
)
def test_round_trip(angles):
    result = quaternion_to_euler(euler_to_quaternion(*angles))
    for got, expected in zip(result, angles):
        assert abs(got - expected) <= 1


def test_gimbal_lock_sets_rx_to_zero():
    rx, ry, _ = quaternion_to_euler(euler_to_quaternion(300000, 900000, 0))
    assert rx == 0
    assert abs(ry - 900000) <= 1


def test_results_are_integers():
    result = quaternion_to_euler(euler_to_quaternion(12345, 23456, 34567))
    assert all(isinstance(v, int) for v in result)
    assert len(result) == 3