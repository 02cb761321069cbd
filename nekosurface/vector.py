"""Small fixed-size and variable-size float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator


class _VectorOps:
    """Behaviour shared by the fixed-size vectors; subclasses name their axes."""

    _AXES: ClassVar[tuple[str, ...]] = ()

    def _index_name(self, index: int) -> str:
        if not isinstance(index, int) or not 0 <= index < len(self._AXES):
            raise IndexError(f"vector index {index!r} out of range")
        return self._AXES[index]

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._index_name(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._index_name(index), float(value))

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, axis) for axis in self._AXES)

    def __add__(self, other):
        return type(self)(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other):
        return type(self)(*(a - b for a, b in zip(self, other)))

    def __mul__(self, scalar: float):
        return type(self)(*(a * scalar for a in self))

    __rmul__ = __mul__

    def dot(self, other) -> float:
        return sum(a * b for a, b in zip(self, other))

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self):
        """Scale to unit length in place; a zero or NaN length leaves it unchanged."""
        mag = self.magnitude()
        if mag == 0.0:
            return self
        inv = 1.0 / mag
        if math.isnan(inv):
            return self
        for axis in self._AXES:
            setattr(self, axis, getattr(self, axis) * inv)
        return self

    def is_valid(self) -> bool:
        """True when every component is finite."""
        return all(math.isfinite(a) for a in self)

    def zero(self) -> None:
        for axis in self._AXES:
            setattr(self, axis, 0.0)


@dataclass
class Vec2(_VectorOps):
    """Two-component vector."""

    x: float = 0.0
    y: float = 0.0

    _AXES: ClassVar[tuple[str, ...]] = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    def __add__(self, other: Vec2) -> Vec2:
        return super().__add__(other)

    def __sub__(self, other: Vec2) -> Vec2:
        return super().__sub__(other)

    def __mul__(self, scalar: float) -> Vec2:
        return super().__mul__(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __getitem__(self, index: int) -> float:
        return super().__getitem__(index)

    def __setitem__(self, index: int, value: float) -> None:
        super().__setitem__(index, value)

    def __iter__(self) -> Iterator[float]:
        return super().__iter__()

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def magnitude(self) -> float:
        return super().magnitude()

    def normalize(self) -> Vec2:
        return super().normalize()

    def is_valid(self) -> bool:
        return super().is_valid()


@dataclass
class Vec3(_VectorOps):
    """Three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _AXES: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def splat(cls, value: float) -> Vec3:
        """A vector with every component set to ``value``."""
        return cls(value, value, value)

    def __add__(self, other: Vec3) -> Vec3:
        return super().__add__(other)

    def __sub__(self, other: Vec3) -> Vec3:
        return super().__sub__(other)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        return super().__mul__(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __getitem__(self, index: int) -> float:
        return super().__getitem__(index)

    def __setitem__(self, index: int, value: float) -> None:
        super().__setitem__(index, value)

    def __iter__(self) -> Iterator[float]:
        return super().__iter__()

    def zero(self) -> None:
        super().zero()

    def cross(self, other: Vec3) -> Vec3:
        """The cross product self x other."""
        return Vec3(
            self.y * other.z - other.y * self.z,
            other.x * self.z - self.x * other.z,
            self.x * other.y - other.x * self.y,
        )

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude(self) -> float:
        return super().magnitude()

    def length_sqr(self) -> float:
        return self.dot(self)

    def normalize(self) -> Vec3:
        return super().normalize()

    def is_valid(self) -> bool:
        return super().is_valid()

    def ortho(self) -> tuple[Vec3, Vec3]:
        """Two unit vectors that with this direction form an orthonormal basis."""
        n = Vec3(self.x, self.y, self.z).normalize()
        w = Vec3(1, 0, 0) if n.z * n.z > 0.9 * 0.9 else Vec3(0, 0, 1)
        u = w.cross(n).normalize()
        v = n.cross(u).normalize()
        u = v.cross(n).normalize()
        return u, v


@dataclass
class Vec4(_VectorOps):
    """Four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    _AXES: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0
    ) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    def __add__(self, other: Vec4) -> Vec4:
        return super().__add__(other)

    def __sub__(self, other: Vec4) -> Vec4:
        return super().__sub__(other)

    def __mul__(self, scalar: float) -> Vec4:
        return super().__mul__(scalar)

    __rmul__ = __mul__

    def __getitem__(self, index: int) -> float:
        return super().__getitem__(index)

    def __setitem__(self, index: int, value: float) -> None:
        super().__setitem__(index, value)

    def __iter__(self) -> Iterator[float]:
        return super().__iter__()

    def scale_by(self, other: Vec4) -> Vec4:
        """Multiply component-wise in place."""
        for axis in self._AXES:
            setattr(self, axis, getattr(self, axis) * getattr(other, axis))
        return self

    def divide_by(self, other: Vec4) -> Vec4:
        """Divide component-wise in place."""
        for axis in self._AXES:
            setattr(self, axis, getattr(self, axis) / getattr(other, axis))
        return self

    def dot(self, other: Vec4) -> float:
        return super().dot(other)

    def magnitude(self) -> float:
        return super().magnitude()

    def normalize(self) -> Vec4:
        return super().normalize()

    def is_valid(self) -> bool:
        return super().is_valid()

    def zero(self) -> None:
        super().zero()


class VecN:
    """A vector of any length."""

    def __init__(self, values: Iterable[float]) -> None:
        self._data = [float(v) for v in values]

    @classmethod
    def zeros(cls, n: int) -> VecN:
        if n < 0:
            raise ValueError("vector length must not be negative")
        return cls([0.0] * n)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> float:
        return self._data[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecN):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"VecN({self._data!r})"

    def _check_length(self, other: VecN) -> None:
        if len(other) != len(self):
            raise ValueError(
                f"vector lengths differ: {len(self)} and {len(other)}"
            )

    def __add__(self, other: VecN) -> VecN:
        self._check_length(other)
        return VecN(a + b for a, b in zip(self._data, other))

    def __sub__(self, other: VecN) -> VecN:
        self._check_length(other)
        return VecN(a - b for a, b in zip(self._data, other))

    def __mul__(self, scalar: float) -> VecN:
        return VecN(a * scalar for a in self._data)

    __rmul__ = __mul__

    def dot(self, other: VecN) -> float:
        self._check_length(other)
        return sum(a * b for a, b in zip(self._data, other))

    def zero(self) -> None:
        self._data = [0.0] * len(self._data)


@dataclass
class IVec2:
    """Integer pair."""

    x: int = 0
    y: int = 0