"""Line interpolation, clamping and Euler/quaternion conversions."""

from __future__ import annotations

import math

from countryguess.vectors import PI, Vector2, Vector3, Vector4, to_degrees, to_radians


def line_x(a: Vector2, b: Vector2, y: float) -> float:
    """The x at height ``y`` on the line through ``a`` and ``b``."""
    return ((y - a.y) * (b.x - a.x)) / (b.y - a.y) + a.x


def line_y(a: Vector2, b: Vector2, x: float) -> float:
    """The y at ``x`` on the line through ``a`` and ``b``."""
    return ((b.y - a.y) * (x - a.x)) / (b.x - a.x) + a.y


def normalize(value: float, lower: float, upper: float) -> float:
    """Where ``value`` lies between ``lower`` (0.0) and ``upper`` (1.0)."""
    return (float(value) - float(lower)) / (float(upper) - float(lower))


def minmax(value, min_value, max_value):
    """Clamp ``value`` into ``[min_value, max_value]``."""
    return min(max(value, min_value), max_value)


def to_quaternion(euler: Vector3) -> Vector4:
    """Convert Euler angles in degrees (roll, pitch, yaw) to a quaternion (x, y, z, w)."""
    cr = math.cos(to_radians(euler.x) * 0.5)
    sr = math.sin(to_radians(euler.x) * 0.5)
    cp = math.cos(to_radians(euler.y) * 0.5)
    sp = math.sin(to_radians(euler.y) * 0.5)
    cy = math.cos(to_radians(euler.z) * 0.5)
    sy = math.sin(to_radians(euler.z) * 0.5)
    return Vector4(
        sr * cp * cy - cr * sp * sy,
        cr * sp * cy + sr * cp * sy,
        cr * cp * sy - sr * sp * cy,
        cr * cp * cy + sr * sp * sy,
    )


def to_euler(quaternion: Vector4) -> Vector3:
    """Convert a quaternion (x, y, z, w) to Euler angles in degrees."""
    q = quaternion
    sin_p = 2.0 * (q.w * q.y - q.z * q.x)
    sin_r_cos_p = 2.0 * (q.w * q.x + q.y * q.z)
    cos_r_cos_p = 1.0 - 2.0 * (q.x * q.x + q.y * q.y)
    sin_y_cos_p = 2.0 * (q.w * q.z + q.x * q.y)
    cos_y_cos_p = 1.0 - 2.0 * (q.y * q.y + q.z * q.z)
    pitch = math.copysign(PI * 0.5, sin_p) if abs(sin_p) >= 1.0 else math.asin(sin_p)
    return Vector3(
        to_degrees(math.atan2(sin_r_cos_p, cos_r_cos_p)),
        to_degrees(pitch),
        to_degrees(math.atan2(sin_y_cos_p, cos_y_cos_p)),
    )