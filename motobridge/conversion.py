"""Conversion of controller coordinates to pose and transform values.

Positions are converted from micrometres to metres; orientations from
0.0001 degree Euler angles to quaternions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .quaternion import Quaternion, euler_to_quaternion

__all__ = ["MpCoord", "Vector3", "Pose", "Transform", "coord_to_pose", "coord_to_transform"]

_METERS_PER_MICROMETER = 1e-6


@dataclass(frozen=True)
class MpCoord:
    """A controller Cartesian coordinate (micrometres and 0.0001 degrees)."""

    x: int = 0
    y: int = 0
    z: int = 0
    rx: int = 0
    ry: int = 0
    rz: int = 0


@dataclass(frozen=True)
class Vector3:
    """A three-component vector in metres."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Pose:
    """A position and an orientation."""

    position: Vector3 = field(default_factory=Vector3)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass(frozen=True)
class Transform:
    """A translation and a rotation."""

    translation: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion)


def _translation(coord: MpCoord) -> Vector3:
    return Vector3(
        coord.x * _METERS_PER_MICROMETER,
        coord.y * _METERS_PER_MICROMETER,
        coord.z * _METERS_PER_MICROMETER,
    )


def coord_to_pose(coord: MpCoord) -> Pose:
    """Convert a controller coordinate to a pose."""
    return Pose(_translation(coord), euler_to_quaternion(coord.rx, coord.ry, coord.rz))


def coord_to_transform(coord: MpCoord) -> Transform:
    """Convert a controller coordinate to a transform."""
    return Transform(_translation(coord), euler_to_quaternion(coord.rx, coord.ry, coord.rz))