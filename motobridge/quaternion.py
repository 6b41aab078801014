"""Conversion between controller Euler angles and quaternions.

Euler angles are ZYX-intrinsic and expressed in units of 0.0001 degree,
as used for the orientation fields of controller coordinates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Quaternion", "clamp", "euler_to_quaternion", "quaternion_to_euler"]

_RAD_PER_UNIT = math.pi / 180.0 * 0.0001
_UNITS_PER_RAD = 180.0 / math.pi * 10000
_GIMBAL_THRESHOLD = 0.9999999


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the closed range [low, high]."""
    return max(low, min(high, value))


def euler_to_quaternion(rx: int, ry: int, rz: int) -> Quaternion:
    """Convert Euler angles in 0.0001 degree units to a quaternion."""
    half_x = rx * _RAD_PER_UNIT / 2
    half_y = ry * _RAD_PER_UNIT / 2
    half_z = rz * _RAD_PER_UNIT / 2

    c1, c2, c3 = math.cos(half_x), math.cos(half_y), math.cos(half_z)
    s1, s2, s3 = math.sin(half_x), math.sin(half_y), math.sin(half_z)

    return Quaternion(
        x=s1 * c2 * c3 - c1 * s2 * s3,
        y=c1 * s2 * c3 + s1 * c2 * s3,
        z=c1 * c2 * s3 - s1 * s2 * c3,
        w=c1 * c2 * c3 + s1 * s2 * s3,
    )


def quaternion_to_euler(q: Quaternion) -> tuple[int, int, int]:
    """Convert a quaternion to Euler angles ``(rx, ry, rz)`` in 0.0001 degree units.

    Results are truncated toward zero.
    """
    x, y, z, w = q.x, q.y, q.z, q.w
    x2, y2, z2 = x + x, y + y, z + z
    xx, xy, xz = x * x2, x * y2, x * z2
    yy, yz, zz = y * y2, y * z2, z * z2
    wx, wy, wz = w * x2, w * y2, w * z2

    m11 = 1 - (yy + zz)
    m12 = xy - wz
    m21 = xy + wz
    m22 = 1 - (xx + zz)
    m31 = xz - wy
    m32 = yz + wx
    m33 = 1 - (xx + yy)

    ry = int(math.asin(-clamp(m31, -1, 1)) * _UNITS_PER_RAD)

    if abs(m31) < _GIMBAL_THRESHOLD:
        rx = int(math.atan2(m32, m33) * _UNITS_PER_RAD)
        rz = int(math.atan2(m21, m11) * _UNITS_PER_RAD)
    else:
        rx = 0
        rz = int(math.atan2(-m12, m22) * _UNITS_PER_RAD)

    return rx, ry, rz