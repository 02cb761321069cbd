"""Axis-aligned bounding boxes."""

from __future__ import annotations

from typing import Iterable, Union

from .vector import Vec3

_EXTENT = 1e6


class Bounds:
    """An axis-aligned box; empty boxes have mins above maxs."""

    def __init__(self) -> None:
        self.mins = Vec3.splat(_EXTENT)
        self.maxs = Vec3.splat(-_EXTENT)

    def __repr__(self) -> str:
        return f"Bounds(mins={self.mins!r}, maxs={self.maxs!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bounds):
            return NotImplemented
        return self.mins == other.mins and self.maxs == other.maxs

    def clear(self) -> None:
        self.mins = Vec3.splat(_EXTENT)
        self.maxs = Vec3.splat(-_EXTENT)

    def does_intersect(self, other: Bounds) -> bool:
        if (
            self.maxs.x < other.mins.x
            or self.maxs.y < other.mins.y
            or self.maxs.z < other.mins.z
        ):
            return False
        if (
            other.maxs.x < self.mins.x
            or other.maxs.y < self.mins.y
            or other.maxs.z < self.mins.z
        ):
            return False
        return True

    def expand(self, item: Union[Vec3, Bounds, Iterable[Vec3]]) -> None:
        """Grow to contain a point, another box, or every point of an iterable."""
        if isinstance(item, Bounds):
            self._expand_point(item.mins)
            self._expand_point(item.maxs)
        elif isinstance(item, Vec3):
            self._expand_point(item)
        else:
            for point in item:
                self._expand_point(point)

    def _expand_point(self, point: Vec3) -> None:
        self.mins = Vec3(
            min(self.mins.x, point.x),
            min(self.mins.y, point.y),
            min(self.mins.z, point.z),
        )
        self.maxs = Vec3(
            max(self.maxs.x, point.x),
            max(self.maxs.y, point.y),
            max(self.maxs.z, point.z),
        )

    def width_x(self) -> float:
        return self.maxs.x - self.mins.x

    def width_y(self) -> float:
        return self.maxs.y - self.mins.y

    def width_z(self) -> float:
        return self.maxs.z - self.mins.z