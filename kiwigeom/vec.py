"""Mutable 2D and 3D float vectors with in-place and value-returning operations."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

# Focal lengths used by the perspective projection, proportional to display size.
_FOCAL_LENGTH_X = 0.6
_FOCAL_LENGTH_Y = 1.0


def _unpack(values: Iterable[float], count: int) -> tuple[float, ...]:
    """Return exactly ``count`` floats taken from ``values``."""
    items = tuple(float(v) for v in values)
    if len(items) != count:
        raise ValueError(f"expected {count} components, got {len(items)}")
    return items


@dataclass
class Vec2:
    """A two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    def copy(self) -> Vec2:
        """Return an independent copy of this vector."""
        return Vec2(self.x, self.y)

    def set(self, other: Iterable[float]) -> Vec2:
        """Overwrite the components with those of ``other``."""
        self.x, self.y = _unpack(other, 2)
        return self

    def scale(self, factor: float) -> Vec2:
        """Multiply every component by ``factor`` in place."""
        self.x *= factor
        self.y *= factor
        return self

    def inverse_scale(self, factor: float) -> Vec2:
        """Divide every component by ``factor`` in place."""
        self.x /= factor
        self.y /= factor
        return self

    def normalize(self, to_magnitude: float = 1.0) -> Vec2:
        """Rescale to the given magnitude, keeping the direction."""
        length = self.magnitude()
        if length == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return self.scale(to_magnitude / length)

    def magnitude(self) -> float:
        """Return the Euclidean length."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Iterable[float]) -> float:
        """Return the distance between this point and ``other``."""
        ox, oy = _unpack(other, 2)
        return math.hypot(self.x - ox, self.y - oy)

    def midpoint(self, other: Iterable[float]) -> Vec2:
        """Return a new vector halfway between this one and ``other``."""
        ox, oy = _unpack(other, 2)
        return Vec2((self.x + ox) / 2.0, (self.y + oy) / 2.0)

    def dot(self, other: Iterable[float]) -> float:
        """Return the dot product with ``other``."""
        ox, oy = _unpack(other, 2)
        return self.x * ox + self.y * oy

    def rotate(self, degrees: float, around: Optional[Iterable[float]] = None) -> Vec2:
        """Rotate counter-clockwise by ``degrees`` around a point (default origin)."""
        if degrees == 0:
            return self
        ax, ay = _unpack(around, 2) if around is not None else (0.0, 0.0)
        rel_x = self.x - ax
        rel_y = self.y - ay
        radians = math.radians(degrees)
        s = math.sin(radians)
        c = math.cos(radians)
        self.x = c * rel_x - s * rel_y + ax
        self.y = c * rel_y + s * rel_x + ay
        return self

    def __add__(self, other: Iterable[float]) -> Vec2:
        ox, oy = _unpack(other, 2)
        return Vec2(self.x + ox, self.y + oy)

    def __sub__(self, other: Iterable[float]) -> Vec2:
        ox, oy = _unpack(other, 2)
        return Vec2(self.x - ox, self.y - oy)

    def __iadd__(self, other: Iterable[float]) -> Vec2:
        ox, oy = _unpack(other, 2)
        self.x += ox
        self.y += oy
        return self

    def __isub__(self, other: Iterable[float]) -> Vec2:
        ox, oy = _unpack(other, 2)
        self.x -= ox
        self.y -= oy
        return self

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"Vec2( {self.x}, {self.y} )"


@dataclass
class Vec3:
    """A three-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def copy(self) -> Vec3:
        """Return an independent copy of this vector."""
        return Vec3(self.x, self.y, self.z)

    def set(self, other: Iterable[float]) -> Vec3:
        """Overwrite the components with those of ``other``."""
        self.x, self.y, self.z = _unpack(other, 3)
        return self

    def scale(self, factor: float) -> Vec3:
        """Multiply every component by ``factor`` in place."""
        return self.scale_axes(factor, factor, factor)

    def scale_axes(self, fx: float, fy: float, fz: float) -> Vec3:
        """Multiply each component by its own factor in place."""
        self.x *= fx
        self.y *= fy
        self.z *= fz
        return self

    def inverse_scale(self, factor: float) -> Vec3:
        """Divide every component by ``factor`` in place."""
        self.x /= factor
        self.y /= factor
        self.z /= factor
        return self

    def normalize(self, to_magnitude: float = 1.0) -> Vec3:
        """Rescale to the given magnitude, keeping the direction."""
        length = self.magnitude()
        if length == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return self.scale(to_magnitude / length)

    def magnitude(self) -> float:
        """Return the Euclidean length."""
        return math.hypot(self.x, self.y, self.z)

    def distance_to(self, other: Iterable[float]) -> float:
        """Return the distance between this point and ``other``."""
        ox, oy, oz = _unpack(other, 3)
        return math.hypot(self.x - ox, self.y - oy, self.z - oz)

    def midpoint(self, other: Iterable[float]) -> Vec3:
        """Return a new vector halfway between this one and ``other``."""
        ox, oy, oz = _unpack(other, 3)
        return Vec3((self.x + ox) / 2, (self.y + oy) / 2, (self.z + oz) / 2)

    def dot(self, other: Iterable[float]) -> float:
        """Return the dot product with ``other``."""
        ox, oy, oz = _unpack(other, 3)
        return self.x * ox + self.y * oy + self.z * oz

    def cross(self, other: Iterable[float]) -> Vec3:
        """Return a new vector perpendicular to this one and ``other``."""
        ox, oy, oz = _unpack(other, 3)
        return Vec3(
            self.y * oz - self.z * oy,
            self.z * ox - self.x * oz,
            self.x * oy - self.y * ox,
        )

    def angle_to(self, other: Iterable[float]) -> float:
        """Return the angle to ``other`` in degrees, between 0 and 180."""
        a = self.copy().normalize()
        b = Vec3(*_unpack(other, 3)).normalize()
        cosine = a.dot(b)
        # Rounding can push the cosine just outside [-1, 1].
        if cosine < -1:
            return 180.0
        if cosine > 1:
            return 0.0
        return math.degrees(math.acos(cosine))

    def rotate(
        self,
        yaw: float,
        pitch: float,
        roll: float,
        around: Optional[Iterable[float]] = None,
    ) -> Vec3:
        """Rotate by yaw, then pitch, then roll (degrees) around a point."""
        if yaw == 0 and pitch == 0 and roll == 0:
            return self
        ax, ay, az = _unpack(around, 3) if around is not None else (0.0, 0.0, 0.0)
        rel_x = self.x - ax
        rel_y = self.y - ay
        rel_z = self.z - az

        if yaw != 0:
            r = math.radians(yaw)
            s, c = math.sin(r), math.cos(r)
            self.x = c * rel_x - s * rel_z + ax
            self.z = c * rel_z + s * rel_x + az

        rel_x = self.x - ax
        rel_z = self.z - az

        if pitch != 0:
            r = math.radians(pitch)
            s, c = math.sin(r), math.cos(r)
            self.y = c * rel_y - s * rel_z + ay
            self.z = c * rel_z + s * rel_y + az

        rel_y = self.y - ay
        rel_z = self.z - az

        if roll != 0:
            r = math.radians(roll)
            s, c = math.sin(r), math.cos(r)
            self.y = c * rel_y - s * rel_x + ay
            self.x = c * rel_x + s * rel_y + ax

        return self

    def project(self) -> Vec3:
        """Apply the perspective projection in place.

        x and y become FOV-normalised screen coordinates relative to the top
        left; z is kept. A point behind the camera becomes (-1, -1, inf).
        """
        if self.z < 0:
            self.x = -1.0
            self.y = -1.0
            self.z = math.inf
            return self
        self.x = (self.x * _FOCAL_LENGTH_X) / self.z + 0.5
        self.y = (self.y * _FOCAL_LENGTH_Y) / self.z + 0.5
        return self

    def __add__(self, other: Iterable[float]) -> Vec3:
        ox, oy, oz = _unpack(other, 3)
        return Vec3(self.x + ox, self.y + oy, self.z + oz)

    def __sub__(self, other: Iterable[float]) -> Vec3:
        ox, oy, oz = _unpack(other, 3)
        return Vec3(self.x - ox, self.y - oy, self.z - oz)

    def __iadd__(self, other: Iterable[float]) -> Vec3:
        ox, oy, oz = _unpack(other, 3)
        self.x += ox
        self.y += oy
        self.z += oz
        return self

    def __isub__(self, other: Iterable[float]) -> Vec3:
        ox, oy, oz = _unpack(other, 3)
        self.x -= ox
        self.y -= oy
        self.z -= oz
        return self

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"Vec3( {self.x}, {self.y}, {self.z} )"