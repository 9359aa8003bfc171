"""Triangles in 2D and 3D space built from vectors."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from kiwigeom.vec import Vec2, Vec3


@dataclass
class Tri2:
    """A triangle in the plane."""

    v1: Vec2 = field(default_factory=Vec2)
    v2: Vec2 = field(default_factory=Vec2)
    v3: Vec2 = field(default_factory=Vec2)

    def copy(self) -> Tri2:
        """Return a deep copy of this triangle."""
        return Tri2(self.v1.copy(), self.v2.copy(), self.v3.copy())

    def rotate(self, degrees: float, around: Optional[Iterable[float]] = None) -> Tri2:
        """Rotate every vertex counter-clockwise around a point (default origin)."""
        pivot = tuple(around) if around is not None else None
        for vertex in (self.v1, self.v2, self.v3):
            vertex.rotate(degrees, pivot)
        return self

    def __str__(self) -> str:
        return f"Tri2(\n  {self.v1}\n  {self.v2}\n  {self.v3}\n)"


@dataclass
class Tri3:
    """A triangle in space with a normal vector."""

    v1: Vec3 = field(default_factory=Vec3)
    v2: Vec3 = field(default_factory=Vec3)
    v3: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)

    def copy(self) -> Tri3:
        """Return a deep copy of this triangle."""
        return Tri3(self.v1.copy(), self.v2.copy(), self.v3.copy(), self.normal.copy())

    def update_normal(self) -> Vec3:
        """Recompute the unit normal from the vertices and return it.

        The normal may face either side of the triangle. A degenerate
        triangle raises ValueError.
        """
        edge_a = self.v1 - self.v2
        edge_b = self.v1 - self.v3
        self.normal.set(edge_a.cross(edge_b).normalize())
        return self.normal

    def is_facing(self, vec: Iterable[float]) -> bool:
        """True if ``vec`` makes an angle of at least 90 degrees with the normal."""
        return Vec3(*vec).angle_to(self.normal) >= 90

    def center(self) -> Vec3:
        """Return the centroid of the three vertices."""
        return (self.v1 + self.v2 + self.v3).inverse_scale(3.0)

    def __str__(self) -> str:
        return f"Tri3(\n  {self.v1}\n  {self.v2}\n  {self.v3}\n)"