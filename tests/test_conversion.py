import pytest

from motobridge.conversion import (
    MpCoord,
    Pose,
    Transform,
    Vector3,
    coord_to_pose,
    coord_to_transform,
)
from motobridge.quaternion import Quaternion, euler_to_quaternion, quaternion_to_euler


def test_position_in_meters():
    pose = coord_to_pose(MpCoord(x=1_000_000, y=-2_000_000, z=500_000))
    assert pose.position.x == pytest.approx(1.0)
    assert pose.position.y == pytest.approx(-2.0)
    assert pose.position.z == pytest.approx(0.5)


def test_zero_coord_gives_default_pose():
    pose = coord_to_pose(MpCoord())
    assert pose == Pose(Vector3(0.0, 0.0, 0.0), Quaternion(0.0, 0.0, 0.0, 1.0))


def test_orientation_matches_quaternion_conversion():
    coord = MpCoord(10, 20, 30, 100000, -200000, 300000)
    assert coord_to_pose(coord).orientation == euler_to_quaternion(100000, -200000, 300000)


def test_pose_and_transform_agree():
    coord = MpCoord(123456, -654321, 42, -450000, 120000, 1750000)
    pose = coord_to_pose(coord)
    transform = coord_to_transform(coord)
    assert transform == Transform(pose.position, pose.orientation)


def test_transform_rotation_round_trips():
    coord = MpCoord(0, 0, 0, 250000, -300000, 600000)
    rotation = coord_to_transform(coord).rotation
    result = quaternion_to_euler(rotation)
    for got, expected in zip(result, (coord.rx, coord.ry, coord.rz)):
        assert abs(got - expected) <= 1


def test_translation_scales_linearly():
    small = coord_to_transform(MpCoord(x=1000, y=2000, z=3000)).translation
    large = coord_to_transform(MpCoord(x=10000, y=20000, z=30000)).translation
    assert large.x == pytest.approx(small.x * 10)
    assert large.y == pytest.approx(small.y * 10)
    assert large.z == pytest.approx(small.z * 10)