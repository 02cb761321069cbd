"""Square and rectangular float matrices stored as rows of vectors."""

from __future__ import annotations

import math
from typing import ClassVar, Iterable, Iterator, Optional

from .vector import Vec2, Vec3, Vec4, VecN


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Mat2:
    """A 2x2 matrix."""

    def __init__(self, row0: Optional[Iterable[float]] = None,
                 row1: Optional[Iterable[float]] = None) -> None:
        self.rows = [
            Vec2(*row0) if row0 is not None else Vec2(),
            Vec2(*row1) if row1 is not None else Vec2(),
        ]

    def __getitem__(self, index: int) -> Vec2:
        return self.rows[index]

    def __iter__(self) -> Iterator[Vec2]:
        return iter(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat2):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"Mat2({self.rows[0]!r}, {self.rows[1]!r})"

    def __add__(self, other: Mat2) -> Mat2:
        return Mat2(*(a + b for a, b in zip(self.rows, other.rows)))

    def __mul__(self, scalar: float) -> Mat2:
        if not _is_scalar(scalar):
            return NotImplemented
        return Mat2(*(row * scalar for row in self.rows))

    __rmul__ = __mul__

    def determinant(self) -> float:
        return self.rows[0].x * self.rows[1].y - self.rows[0].y * self.rows[1].x


class _SquareMatrix:
    """Operations shared by Mat3 and Mat4."""

    _SIZE: ClassVar[int] = 0
    _ROW: ClassVar[type] = Vec3

    rows: list

    def _set_rows(self, rows: tuple) -> None:
        given = [r for r in rows if r is not None]
        if not given:
            self.rows = [self._ROW() for _ in range(self._SIZE)]
            return
        if len(given) != self._SIZE:
            raise ValueError(f"expected {self._SIZE} rows, got {len(given)}")
        self.rows = [self._ROW(*row) for row in given]

    def __getitem__(self, index: int):
        return self.rows[index]

    def __iter__(self):
        return iter(self.rows)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        inner = ", ".join(repr(row) for row in self.rows)
        return f"{type(self).__name__}({inner})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._SIZE:
            raise IndexError(f"matrix index {index} out of range")

    def _minor_rows(self, i: int, j: int) -> list[list[float]]:
        self._check_index(i)
        self._check_index(j)
        return [
            [value for col, value in enumerate(row) if col != j]
            for r, row in enumerate(self.rows)
            if r != i
        ]

    def trace(self) -> float:
        """Sum of the squared diagonal entries."""
        return sum(row[k] * row[k] for k, row in enumerate(self.rows))

    def transpose(self):
        return type(self)(*zip(*self.rows))

    def cofactor(self, i: int, j: int) -> float:
        return (-1.0) ** (i + j) * self.minor(i, j).determinant()

    def inverse(self):
        det = self.determinant()
        if det == 0.0 or not math.isfinite(det):
            raise ValueError("matrix is singular")
        adjugate = type(self)(
            *(
                [self.cofactor(i, j) for i in range(self._SIZE)]
                for j in range(self._SIZE)
            )
        )
        return adjugate * (1.0 / det)

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self.rows, other.rows)))

    def __mul__(self, other):
        if isinstance(other, self._ROW):
            return self._ROW(*(row.dot(other) for row in self.rows))
        if type(other) is type(self):
            columns = [self._ROW(*col) for col in zip(*other.rows)]
            return type(self)(
                *([row.dot(col) for col in columns] for row in self.rows)
            )
        if _is_scalar(other):
            return type(self)(*(row * other for row in self.rows))
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self * other
        return NotImplemented

    # Implemented by subclasses.
    def minor(self, i: int, j: int):  # pragma: no cover - overridden
        raise NotImplementedError

    def determinant(self) -> float:  # pragma: no cover - overridden
        raise NotImplementedError


class Mat3(_SquareMatrix):
    """A 3x3 matrix."""

    _SIZE = 3
    _ROW = Vec3

    def __init__(self, row0=None, row1=None, row2=None) -> None:
        self._set_rows((row0, row1, row2))

    @classmethod
    def zero(cls) -> Mat3:
        return cls()

    @classmethod
    def identity(cls) -> Mat3:
        return cls(Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1))

    def trace(self) -> float:
        return super().trace()

    def determinant(self) -> float:
        r = self.rows
        i = r[0][0] * (r[1][1] * r[2][2] - r[1][2] * r[2][1])
        j = r[0][1] * (r[1][0] * r[2][2] - r[1][2] * r[2][0])
        k = r[0][2] * (r[1][0] * r[2][1] - r[1][1] * r[2][0])
        return i - j + k

    def transpose(self) -> Mat3:
        return super().transpose()

    def inverse(self) -> Mat3:
        return super().inverse()

    def minor(self, i: int, j: int) -> Mat2:
        """The 2x2 matrix left after removing row ``i`` and column ``j``."""
        return Mat2(*self._minor_rows(i, j))

    def cofactor(self, i: int, j: int) -> float:
        return super().cofactor(i, j)

    def __mul__(self, other):
        return super().__mul__(other)

    def __add__(self, other):
        return super().__add__(other)


_VULKAN_CLIP = (
    Vec4(1, 0, 0, 0),
    Vec4(0, -1, 0, 0),
    Vec4(0, 0, 0.5, 0.5),
    Vec4(0, 0, 0, 1),
)


class Mat4(_SquareMatrix):
    """A 4x4 matrix."""

    _SIZE = 4
    _ROW = Vec4

    def __init__(self, row0=None, row1=None, row2=None, row3=None) -> None:
        self._set_rows((row0, row1, row2, row3))

    @classmethod
    def zero(cls) -> Mat4:
        return cls()

    @classmethod
    def identity(cls) -> Mat4:
        return cls(Vec4(1, 0, 0, 0), Vec4(0, 1, 0, 0), Vec4(0, 0, 1, 0), Vec4(0, 0, 0, 1))

    def trace(self) -> float:
        return super().trace()

    def determinant(self) -> float:
        return sum(
            (-1.0) ** j * value * self.minor(0, j).determinant()
            for j, value in enumerate(self.rows[0])
        )

    def transpose(self) -> Mat4:
        return super().transpose()

    def inverse(self) -> Mat4:
        return super().inverse()

    def minor(self, i: int, j: int) -> Mat3:
        """The 3x3 matrix left after removing row ``i`` and column ``j``."""
        return Mat3(*self._minor_rows(i, j))

    def cofactor(self, i: int, j: int) -> float:
        return super().cofactor(i, j)

    @classmethod
    def orient(cls, pos: Vec3, fwd: Vec3, up: Vec3) -> Mat4:
        """Model matrix with +x forward, +y left, +z up, placed at ``pos``."""
        left = up.cross(fwd)
        return cls(
            Vec4(fwd.x, left.x, up.x, pos.x),
            Vec4(fwd.y, left.y, up.y, pos.y),
            Vec4(fwd.z, left.z, up.z, pos.z),
            Vec4(0, 0, 0, 1),
        )

    @classmethod
    def look_at(cls, pos: Vec3, target: Vec3, up: Vec3) -> Mat4:
        """View matrix for a camera at ``pos`` looking at ``target``."""
        fwd = (pos - target).normalize()
        right = up.cross(fwd).normalize()
        true_up = fwd.cross(right).normalize()
        return cls(
            Vec4(right.x, right.y, right.z, -pos.dot(right)),
            Vec4(true_up.x, true_up.y, true_up.z, -pos.dot(true_up)),
            Vec4(fwd.x, fwd.y, fwd.z, -pos.dot(fwd)),
            Vec4(0, 0, 0, 1),
        )

    @classmethod
    def perspective_opengl(cls, fovy: float, aspect_ratio: float,
                           near: float, far: float) -> Mat4:
        """Perspective projection into clip space with depth in [-1, 1]."""
        f = 1.0 / math.tan(math.radians(fovy) * 0.5)
        return cls(
            Vec4(f, 0, 0, 0),
            Vec4(0, f / aspect_ratio, 0, 0),
            Vec4(0, 0, (far + near) / (near - far), (2.0 * far * near) / (near - far)),
            Vec4(0, 0, -1, 0),
        )

    @classmethod
    def perspective_vulkan(cls, fovy: float, aspect_ratio: float,
                           near: float, far: float) -> Mat4:
        """Perspective projection with y pointing down and depth in [0, 1]."""
        return cls(*_VULKAN_CLIP) * cls.perspective_opengl(fovy, aspect_ratio, near, far)

    @classmethod
    def ortho_opengl(cls, xmin: float, xmax: float, ymin: float, ymax: float,
                     znear: float, zfar: float) -> Mat4:
        """Orthographic projection with depth in [-1, 1]."""
        width = xmax - xmin
        height = ymax - ymin
        depth = zfar - znear
        return cls(
            Vec4(2.0 / width, 0, 0, -(xmax + xmin) / width),
            Vec4(0, 2.0 / height, 0, -(ymax + ymin) / height),
            Vec4(0, 0, -2.0 / depth, -(zfar + znear) / depth),
            Vec4(0, 0, 0, 1),
        )

    @classmethod
    def ortho_vulkan(cls, xmin: float, xmax: float, ymin: float, ymax: float,
                     znear: float, zfar: float) -> Mat4:
        """Orthographic projection with y pointing down and depth in [0, 1]."""
        return cls(*_VULKAN_CLIP) * cls.ortho_opengl(xmin, xmax, ymin, ymax, znear, zfar)

    @classmethod
    def scaling(cls, s: Vec3) -> Mat4:
        return cls(Vec4(s.x, 0, 0, 0), Vec4(0, s.y, 0, 0), Vec4(0, 0, s.z, 0), Vec4(0, 0, 0, 1))

    def scale(self, s: Vec3) -> Mat4:
        """Post-multiply by a scaling matrix in place."""
        self.rows = (self * Mat4.scaling(s)).rows
        return self

    def to_list(self) -> list[float]:
        """The sixteen entries in row-major order."""
        return [value for row in self.rows for value in row]

    def __mul__(self, other):
        return super().__mul__(other)


class MatMN:
    """An M-by-N matrix whose rows are VecN."""

    def __init__(self, m: int, n: int) -> None:
        if m < 0 or n < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.m = m
        self.n = n
        self.rows = [VecN.zeros(n) for _ in range(m)]

    def __getitem__(self, index: int) -> VecN:
        return self.rows[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatMN):
            return NotImplemented
        return (self.m, self.n, self.rows) == (other.m, other.n, other.rows)

    def __repr__(self) -> str:
        return f"MatMN({self.m}, {self.n}, rows={self.rows!r})"

    def zero(self) -> None:
        for row in self.rows:
            row.zero()

    def transpose(self) -> MatMN:
        result = MatMN(self.n, self.m)
        if self.m:
            result.rows = [VecN(col) for col in zip(*self.rows)]
        return result

    def __mul__(self, other):
        if isinstance(other, VecN):
            if len(other) != self.n:
                raise ValueError(
                    f"vector of length {len(other)} does not fit {self.m}x{self.n} matrix"
                )
            return VecN(row.dot(other) for row in self.rows)
        if isinstance(other, MatMN):
            if other.m != self.n:
                raise ValueError(
                    f"cannot multiply {self.m}x{self.n} by {other.m}x{other.n}"
                )
            columns = other.transpose().rows
            result = MatMN(self.m, other.n)
            result.rows = [VecN(row.dot(col) for col in columns) for row in self.rows]
            return result
        if _is_scalar(other):
            result = MatMN(self.m, self.n)
            result.rows = [row * other for row in self.rows]
            return result
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self * other
        return NotImplemented


class MatN:
    """An N-by-N matrix whose rows are VecN."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("matrix dimension must not be negative")
        self.n = n
        self.rows = [VecN.zeros(n) for _ in range(n)]

    @classmethod
    def from_matmn(cls, other: MatMN) -> MatN:
        if other.m != other.n:
            raise ValueError(f"matrix {other.m}x{other.n} is not square")
        result = cls(other.n)
        result.rows = [VecN(row) for row in other.rows]
        return result

    def __getitem__(self, index: int) -> VecN:
        return self.rows[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatN):
            return NotImplemented
        return self.n == other.n and self.rows == other.rows

    def __repr__(self) -> str:
        return f"MatN({self.n}, rows={self.rows!r})"

    def identity(self) -> None:
        self.rows = [
            VecN(1.0 if col == r else 0.0 for col in range(self.n))
            for r in range(self.n)
        ]

    def zero(self) -> None:
        for row in self.rows:
            row.zero()

    def transpose(self) -> None:
        """Transpose in place."""
        if self.n:
            self.rows = [VecN(col) for col in zip(*self.rows)]

    def __mul__(self, other):
        if isinstance(other, VecN):
            if len(other) != self.n:
                raise ValueError(
                    f"vector of length {len(other)} does not fit {self.n}x{self.n} matrix"
                )
            return VecN(row.dot(other) for row in self.rows)
        if isinstance(other, MatN):
            # Entry (i, j) is self[i][j] * other[j][i].
            if other.n != self.n:
                raise ValueError("matrix sizes differ")
            result = MatN(self.n)
            result.rows = [
                VecN(value * other.rows[j][i] for j, value in enumerate(row))
                for i, row in enumerate(self.rows)
            ]
            return result
        if _is_scalar(other):
            result = MatN(self.n)
            result.rows = [row * other for row in self.rows]
            return result
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self * other
        return NotImplemented