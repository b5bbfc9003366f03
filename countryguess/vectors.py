"""Small immutable 2-, 3- and 4-component float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Sequence, TypeVar, Union

PI = 3.14159265358979

_DEG_TO_RAD = PI / 180.0
_RAD_TO_DEG = 180.0 / PI

Number = Union[int, float]
_V = TypeVar("_V", bound="_Vector")


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * _DEG_TO_RAD


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * _RAD_TO_DEG


def to_float_color(value: int) -> float:
    """Map a colour byte (0-255) onto the range 0.0-1.0."""
    return float(value) * (1.0 / 255.0)


def to_byte_color(value: float) -> int:
    """Map a 0.0-1.0 colour channel onto a byte, clamping out-of-range values."""
    return min(max(int(value * 255), 0), 255)


def _clamped_acos(value: float) -> float:
    return math.acos(min(max(value, -1.0), 1.0))


class _Vector:
    """Shared component-wise operators of the concrete vector types."""

    __slots__ = ()
    _fields: ClassVar[tuple[str, ...]] = ()

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, name) for name in self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._fields[index])

    def __str__(self) -> str:
        return "(" + ", ".join(f"{c:.2f}" for c in self) + ")"

    def _map(self: _V, other: object, op) -> _V:
        if isinstance(other, type(self)):
            return type(self)(*(op(a, b) for a, b in zip(self, other)))
        if isinstance(other, (int, float)):
            return type(self)(*(op(a, other) for a in self))
        return NotImplemented

    def __add__(self: _V, other: _V) -> _V:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._map(other, lambda a, b: a + b)

    def __sub__(self: _V, other: _V) -> _V:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._map(other, lambda a, b: a - b)

    def __mul__(self: _V, other: Union[_V, Number]) -> _V:
        return self._map(other, lambda a, b: a * b)

    def __rmul__(self: _V, other: Number) -> _V:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self._map(other, lambda a, b: a * b)

    def __truediv__(self: _V, other: Union[_V, Number]) -> _V:
        return self._map(other, lambda a, b: a / b)

    def __neg__(self: _V) -> _V:
        return self * -1.0

    def _unsigned_angle(self, other) -> float:
        a = self / math.sqrt(sum(c * c for c in self))
        b = other / math.sqrt(sum(c * c for c in other))
        return to_degrees(_clamped_acos(sum(x * y for x, y in zip(a, b))))


@dataclass(frozen=True, slots=True)
class Vector2(_Vector):
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    _fields: ClassVar[tuple[str, ...]] = ("x", "y")

    @property
    def width(self) -> float:
        return self.x

    @property
    def height(self) -> float:
        return self.y

    @classmethod
    def splash(cls, value: Number) -> Vector2:
        """Build a vector with every component set to ``value``."""
        return cls(float(value), float(value))

    def absolute(self) -> Vector2:
        """Component-wise absolute value."""
        return Vector2(abs(self.x), abs(self.y))

    def negate(self) -> Vector2:
        """The vector pointing the opposite way."""
        return self * -1.0

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vector2:
        """The unit vector in the same direction; a zero vector raises ZeroDivisionError."""
        return self / self.length()

    def dot(self, other: Vector2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def angle(self, other: Vector2, full: bool = False) -> float:
        """Angle to ``other`` in degrees; signed in (-180, 180] when ``full`` is set."""
        if full:
            return to_degrees(
                math.atan2(self.x * other.y - self.y * other.x, self.x * other.x + self.y * other.y)
            )
        return self._unsigned_angle(other)

    def rotate(self, angle: float) -> Vector2:
        """Rotate counter-clockwise by ``angle`` degrees."""
        sin_a = math.sin(to_radians(angle))
        cos_a = math.cos(to_radians(angle))
        return Vector2(cos_a * self.x - sin_a * self.y, sin_a * self.x + cos_a * self.y)

    def reflect(self, normal: Vector2) -> Vector2:
        """Reflect across the line whose normal is ``normal``."""
        n = normal.normalize()
        return self - n * self.dot(n) * 2.0


@dataclass(frozen=True, slots=True)
class Vector3(_Vector):
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _fields: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    @classmethod
    def from_color(cls, color: Sequence[int]) -> Vector3:
        """Build from the red, green and blue bytes of ``color``."""
        return cls(*(to_float_color(c) for c in color[:3]))

    def to_color(self) -> tuple[int, int, int]:
        """Convert to a tuple of red, green and blue bytes."""
        return (to_byte_color(self.x), to_byte_color(self.y), to_byte_color(self.z))

    @property
    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    @classmethod
    def splash(cls, value: Number) -> Vector3:
        """Build a vector with every component set to ``value``."""
        return cls(float(value), float(value), float(value))

    def absolute(self) -> Vector3:
        """Component-wise absolute value."""
        return Vector3(abs(self.x), abs(self.y), abs(self.z))

    def negate(self) -> Vector3:
        """The vector pointing the opposite way."""
        return self * -1.0

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3:
        """The unit vector in the same direction; a zero vector raises ZeroDivisionError."""
        return self / self.length()

    def dot(self, other: Vector3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Cross product."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def angle(self, other: Vector3) -> float:
        """Unsigned angle to ``other`` in degrees."""
        return self._unsigned_angle(other)

    def rotate(self, angle: float, axis: Vector3) -> Vector3:
        """Rotate by ``angle`` degrees around the unit vector ``axis``."""
        half = to_radians(angle) * 0.5
        angle_sin = math.sin(half)
        angle_cos = math.cos(half)
        qx = axis.x * angle_sin
        qy = axis.y * angle_sin
        qz = axis.z * angle_sin
        x2, y2, z2 = qx * qx, qy * qy, qz * qz
        w2 = angle_cos * angle_cos
        xy, xz, yz = qx * qy, qx * qz, qy * qz
        xw, yw, zw = qx * angle_cos, qy * angle_cos, qz * angle_cos
        x, y, z = self.x, self.y, self.z
        return Vector3(
            x * (w2 + x2 - z2 - y2) + y * (-zw + xy - zw + xy) + z * (yw + xz + xz + yw),
            x * (xy + zw + zw + xy) + y * (y2 - z2 + w2 - x2) + z * (yz + yz - xw - xw),
            x * (xz - yw + xz - yw) + y * (yz + yz + xw + xw) + z * (z2 - y2 - x2 + w2),
        )

    def reflect(self, normal: Vector3) -> Vector3:
        """Reflect across the plane whose normal is ``normal``."""
        n = normal.normalize()
        return self - n * self.dot(n) * 2.0


@dataclass(frozen=True, slots=True)
class Vector4(_Vector):
    """A four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    _fields: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")

    @classmethod
    def from_color(cls, color: Sequence[int]) -> Vector4:
        """Build from the red, green, blue and alpha bytes of ``color``."""
        return cls(*(to_float_color(c) for c in color[:4]))

    def to_color(self) -> tuple[int, int, int, int]:
        """Convert to a tuple of red, green, blue and alpha bytes."""
        return (
            to_byte_color(self.x),
            to_byte_color(self.y),
            to_byte_color(self.z),
            to_byte_color(self.w),
        )

    @property
    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    @property
    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    @classmethod
    def splash(cls, value: Number) -> Vector4:
        """Build a vector with every component set to ``value``."""
        return cls(float(value), float(value), float(value), float(value))

    def absolute(self) -> Vector4:
        """Component-wise absolute value."""
        return Vector4(abs(self.x), abs(self.y), abs(self.z), abs(self.w))

    def negate(self) -> Vector4:
        """The vector pointing the opposite way."""
        return self * -1.0

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> Vector4:
        """The unit vector in the same direction; a zero vector raises ZeroDivisionError."""
        return self / self.length()

    def dot(self, other: Vector4) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def angle(self, other: Vector4) -> float:
        """Unsigned angle to ``other`` in degrees."""
        return self._unsigned_angle(other)