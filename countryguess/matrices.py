"""Immutable row-major float matrices with 2x2, 3x3 and 4x4 specialisations."""

from __future__ import annotations

import math
from itertools import chain
from typing import ClassVar, Iterable, Iterator, Mapping, Optional, TypeVar, Union

from countryguess.vectors import Vector2, Vector3, Vector4, to_radians

Number = Union[int, float]
_AnyVector = Union[Vector2, Vector3, Vector4]
_VT = TypeVar("_VT", Vector2, Vector3, Vector4)


def _identity_data(width: int, height: int) -> list[float]:
    data = [0.0] * (width * height)
    if width == height:
        for i in range(0, width * height, width + 1):
            data[i] = 1.0
    return data


class Matrix:
    """A ``width`` x ``height`` matrix stored row by row.

    Without values a square matrix starts as the identity and any other as zeros.
    """

    __slots__ = ("_width", "_height", "_data")

    def __init__(self, width: int, height: int, values: Optional[Iterable[Number]] = None):
        if width < 1 or height < 1:
            raise ValueError("matrix dimensions must be positive")
        if values is None:
            data = tuple(_identity_data(width, height))
        else:
            data = tuple(float(v) for v in values)
            if len(data) != width * height:
                raise ValueError(f"expected {width * height} values, got {len(data)}")
        self._width = width
        self._height = height
        self._data = data

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def is_square(self) -> bool:
        return self._width == self._height

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> float:
        return self._data[index]

    def get(self, x: int, y: int) -> float:
        """The element in column ``x`` of row ``y``."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"({x}, {y}) is outside a {self._width}x{self._height} matrix")
        return self._data[y * self._width + x]

    def rows(self) -> list[tuple[float, ...]]:
        """The matrix as a list of row tuples."""
        w = self._width
        return [self._data[start:start + w] for start in range(0, len(self._data), w)]

    def _new(self, width: int, height: int, data: Iterable[float]) -> Matrix:
        return _make(width, height, data)

    def _same_shape(self, other: Matrix) -> bool:
        return self._width == other._width and self._height == other._height

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if not self._same_shape(other):
            raise ValueError("matrices must have the same shape")
        return self._new(self._width, self._height, (a + b for a, b in zip(self, other)))

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if not self._same_shape(other):
            raise ValueError("matrices must have the same shape")
        return self._new(self._width, self._height, (a - b for a, b in zip(self, other)))

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return self._new(self._width, self._height, (a * other for a in self))
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, (Vector2, Vector3, Vector4)):
            return self._transform(other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Matrix:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self * other

    def __neg__(self) -> Matrix:
        return self.negate()

    def _matmul(self, other: Matrix) -> Matrix:
        if other._height != self._width:
            raise ValueError(
                f"cannot multiply {self._width}x{self._height} by {other._width}x{other._height}"
            )
        rows = self.rows()
        columns = list(zip(*other.rows()))
        data = (sum(a * b for a, b in zip(row, column)) for row in rows for column in columns)
        return self._new(other._width, self._height, data)

    def _transform(self, vector: _VT) -> _VT:
        size = len(vector)
        if not (self._width == self._height == size):
            raise ValueError(f"a {self._width}x{self._height} matrix cannot transform a {size}-vector")
        return type(vector)(*(sum(a * b for a, b in zip(row, vector)) for row in self.rows()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._same_shape(other) and self._data == other._data

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._width}x{self._height}, {list(self._data)!r})"

    def __str__(self) -> str:
        cells = [[f"{v:.2f}" for v in row] for row in self.rows()]
        widths = [max(len(c) for c in column) for column in zip(*cells)]
        last = self._height - 1
        lines = []
        for y, row in enumerate(cells):
            left = "┌" if y == 0 else ("└" if y == last else "│")
            right = "┐" if y == 0 else ("┘" if y == last else "│")
            body = " ".join(cell.rjust(width) for cell, width in zip(row, widths))
            lines.append(left + body + right)
        return "\n".join(lines)

    def absolute(self) -> Matrix:
        """Element-wise absolute value."""
        return self._new(self._width, self._height, (abs(v) for v in self))

    def negate(self) -> Matrix:
        """Every element with its sign flipped."""
        return self * -1.0

    def transpose(self) -> Matrix:
        """Rows turned into columns."""
        return self._new(self._height, self._width, chain.from_iterable(zip(*self.rows())))

    def _require_square(self) -> None:
        if not self.is_square:
            raise ValueError("operation needs a square matrix")

    def minor(self, pos_x: int, pos_y: int) -> Matrix:
        """The matrix left after removing column ``pos_x`` and row ``pos_y``."""
        self._require_square()
        if self._width < 2:
            raise ValueError("a 1x1 matrix has no minor")
        data = (
            value
            for y, row in enumerate(self.rows())
            if y != pos_y
            for x, value in enumerate(row)
            if x != pos_x
        )
        return self._new(self._width - 1, self._height - 1, data)

    def cofactor(self) -> Matrix:
        """The matrix of signed minor determinants."""
        self._require_square()
        n = self._width
        data = (
            (-1.0 if (x + y) % 2 else 1.0) * self.minor(x, y).determinant()
            for y in range(n)
            for x in range(n)
        )
        return self._new(n, n, data)

    def determinant(self) -> float:
        """The determinant, expanded along the first row."""
        self._require_square()
        n = self._width
        if n == 1:
            return self._data[0]
        if n == 2:
            return self._data[0] * self._data[3] - self._data[1] * self._data[2]
        return sum(
            (-1.0 if i % 2 else 1.0) * value * self.minor(i, 0).determinant()
            for i, value in enumerate(self._data[:n])
        )

    def adjoint(self) -> Matrix:
        """The transposed cofactor matrix."""
        return self.cofactor().transpose()

    def inverse(self) -> Matrix:
        """The inverse; a singular matrix yields the identity."""
        det = self.determinant()
        if not det:
            return self._new(self._width, self._height, _identity_data(self._width, self._height))
        return self.adjoint() * (1.0 / det)


class _FixedSquare(Matrix):
    __slots__ = ()
    size: ClassVar[int] = 0

    def __init__(self, values: Optional[Iterable[Number]] = None):
        super().__init__(self.size, self.size, values)

    @classmethod
    def _identity_with(cls, entries: Mapping[int, float]):
        data = _identity_data(cls.size, cls.size)
        for index, value in entries.items():
            data[index] = value
        return cls(data)


class Matrix2(_FixedSquare):
    """A 2x2 matrix."""

    __slots__ = ()
    size: ClassVar[int] = 2

    @classmethod
    def from_rows(cls, r0: Vector2, r1: Vector2) -> Matrix2:
        """Build from two row vectors."""
        return cls(chain(r0, r1))


class Matrix3(_FixedSquare):
    """A 3x3 matrix, with 2D affine transform builders."""

    __slots__ = ()
    size: ClassVar[int] = 3

    @classmethod
    def from_rows(cls, r0: Vector3, r1: Vector3, r2: Vector3) -> Matrix3:
        """Build from three row vectors."""
        return cls(chain(r0, r1, r2))

    @classmethod
    def translation(cls, value: Vector2) -> Matrix3:
        """Translation by ``value``."""
        return cls._identity_with({2: value.x, 5: value.y})

    @classmethod
    def rotation(cls, angle: float) -> Matrix3:
        """Counter-clockwise rotation by ``angle`` degrees."""
        s = math.sin(to_radians(angle))
        c = math.cos(to_radians(angle))
        return cls._identity_with({0: c, 1: -s, 3: s, 4: c})

    @classmethod
    def scaling(cls, value: Vector2) -> Matrix3:
        """Scaling by ``value``."""
        return cls._identity_with({0: value.x, 4: value.y})


class Matrix4(_FixedSquare):
    """A 4x4 matrix, with 3D transform and projection builders."""

    __slots__ = ()
    size: ClassVar[int] = 4

    @classmethod
    def from_rows(cls, r0: Vector4, r1: Vector4, r2: Vector4, r3: Vector4) -> Matrix4:
        """Build from four row vectors."""
        return cls(chain(r0, r1, r2, r3))

    @classmethod
    def translation(cls, value: Vector3) -> Matrix4:
        """Translation by ``value``."""
        return cls._identity_with({3: value.x, 7: value.y, 11: value.z})

    @classmethod
    def rotation(cls, rotation: Vector3) -> Matrix4:
        """Rotation by Euler angles in degrees, applied as Z * Y * X."""
        xs, xc = math.sin(to_radians(rotation.x)), math.cos(to_radians(rotation.x))
        ys, yc = math.sin(to_radians(rotation.y)), math.cos(to_radians(rotation.y))
        zs, zc = math.sin(to_radians(rotation.z)), math.cos(to_radians(rotation.z))
        x_rot = cls._identity_with({5: xc, 6: -xs, 9: xs, 10: xc})
        y_rot = cls._identity_with({0: yc, 2: ys, 8: -ys, 10: yc})
        z_rot = cls._identity_with({0: zc, 1: -zs, 4: zs, 5: zc})
        return z_rot * y_rot * x_rot

    @classmethod
    def scaling(cls, scale: Vector3) -> Matrix4:
        """Scaling by ``scale``."""
        return cls._identity_with({0: scale.x, 5: scale.y, 10: scale.z})

    @classmethod
    def perspective(
        cls, field_of_view: float, aspect_ratio: float, near_plane: float, far_plane: float
    ) -> Matrix4:
        """Perspective projection; ``field_of_view`` is in degrees."""
        tan_half = 1.0 / math.tan(to_radians(field_of_view) * 0.5)
        return cls._identity_with({
            0: tan_half / aspect_ratio,
            5: tan_half,
            10: (-far_plane - near_plane) / (near_plane - far_plane),
            11: (2.0 * near_plane * far_plane) / (near_plane - far_plane),
            14: 1.0,
            15: 0.0,
        })

    @classmethod
    def orthographic(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near_plane: float,
        far_plane: float,
    ) -> Matrix4:
        """Orthographic projection of the given box."""
        return cls._identity_with({
            0: 2.0 / (right - left),
            5: 2.0 / (top - bottom),
            10: -2.0 / (far_plane - near_plane),
            3: -(right + left) / (right - left),
            7: -(top + bottom) / (top - bottom),
            11: -(far_plane + near_plane) / (far_plane - near_plane),
        })

    @classmethod
    def look_at(cls, position: Vector3, target: Vector3, up: Vector3) -> Matrix4:
        """View matrix of a camera at ``position`` looking at ``target``."""
        f = (target - position).normalize()
        s = up.cross(f).normalize()
        u = f.cross(s)
        return cls._identity_with({
            0: s.x, 1: s.y, 2: s.z, 3: -s.dot(position),
            4: u.x, 5: u.y, 6: u.z, 7: -u.dot(position),
            8: f.x, 9: f.y, 10: f.z, 11: -f.dot(position),
        })


_FIXED: dict[int, type[_FixedSquare]] = {2: Matrix2, 3: Matrix3, 4: Matrix4}


def _make(width: int, height: int, data: Iterable[float]) -> Matrix:
    fixed = _FIXED.get(width) if width == height else None
    if fixed is not None:
        return fixed(data)
    return Matrix(width, height, data)