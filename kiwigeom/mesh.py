"""Triangle meshes stored as shared vertices, normals and per-triangle indices."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from kiwigeom.vec import Vec3

_DEFAULT_COLOR = 0xFFFFFFFF
_NORMAL_PROBE = 0.01


@dataclass(frozen=True)
class TriangleIndices:
    """Indices of a triangle's three vertices and of its normal."""

    v1: int
    v2: int
    v3: int
    normal: int


class Mesh:
    """A mesh of triangles referring to shared vertex and normal lists.

    The vertex and normal lists have a fixed length chosen at construction;
    their contents are edited in place.
    """

    def __init__(self, vertex_count: int, normal_count: int, tri_count: int) -> None:
        if min(vertex_count, normal_count, tri_count) < 0:
            raise ValueError("mesh counts must not be negative")
        self.vertices: list[Vec3] = [Vec3() for _ in range(vertex_count)]
        self.normals: list[Vec3] = [Vec3() for _ in range(normal_count)]
        self._triangles: list[TriangleIndices] = [
            TriangleIndices(0, 0, 0, 0) for _ in range(tri_count)
        ]
        self.color: int = _DEFAULT_COLOR
        self._center: Optional[Vec3] = None

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def normal_count(self) -> int:
        return len(self.normals)

    @property
    def tri_count(self) -> int:
        return len(self._triangles)

    @property
    def triangles(self) -> tuple[TriangleIndices, ...]:
        """All triangles, in index order."""
        return tuple(self._triangles)

    def copy(self) -> Mesh:
        """Return a deep copy of this mesh."""
        other = Mesh(self.vertex_count, self.normal_count, self.tri_count)
        other.vertices = [v.copy() for v in self.vertices]
        other.normals = [n.copy() for n in self.normals]
        other._triangles = list(self._triangles)
        other.color = self.color
        return other

    def center(self) -> Vec3:
        """Return the average of all vertices (cached until the mesh changes)."""
        if self._center is None:
            if not self.vertices:
                raise ValueError("a mesh without vertices has no center")
            total = Vec3()
            for vertex in self.vertices:
                total += vertex
            self._center = total.inverse_scale(len(self.vertices))
        return self._center.copy()

    def _invalidate_center(self) -> None:
        self._center = None

    def set_triangle(self, index: int, v1: int, v2: int, v3: int, normal: int) -> None:
        """Store the vertex and normal indices of triangle ``index``."""
        self._check_triangle_index(index)
        for vertex_index in (v1, v2, v3):
            if not 0 <= vertex_index < self.vertex_count:
                raise IndexError(
                    f"vertex index {vertex_index} out of range for {self.vertex_count} vertices"
                )
        if not 0 <= normal < self.normal_count:
            raise IndexError(
                f"normal index {normal} out of range for {self.normal_count} normals"
            )
        self._triangles[index] = TriangleIndices(v1, v2, v3, normal)

    def triangle(self, index: int) -> TriangleIndices:
        """Return the indices stored for triangle ``index``."""
        self._check_triangle_index(index)
        return self._triangles[index]

    def _check_triangle_index(self, index: int) -> None:
        if not 0 <= index < self.tri_count:
            raise IndexError(
                f"triangle index {index} out of range for {self.tri_count} triangles"
            )

    def move(self, dx: float, dy: float, dz: float) -> Mesh:
        """Translate every vertex by (dx, dy, dz)."""
        for vertex in self.vertices:
            vertex += (dx, dy, dz)
        self._invalidate_center()
        return self

    def scale(self, factor: float) -> Mesh:
        """Scale every vertex uniformly about the origin."""
        for vertex in self.vertices:
            vertex.scale(factor)
        self._invalidate_center()
        return self

    def scale_axes(self, fx: float, fy: float, fz: float) -> Mesh:
        """Scale every vertex per axis about the origin and recompute normals."""
        for vertex in self.vertices:
            vertex.scale_axes(fx, fy, fz)
        self._invalidate_center()
        self.update_normals()
        return self

    def rotate(
        self,
        yaw: float,
        pitch: float,
        roll: float,
        around: Optional[Iterable[float]] = None,
    ) -> Mesh:
        """Rotate the mesh in degrees around a point (default: its center).

        Normals are rotated around the origin.
        """
        pivot = tuple(around) if around is not None else tuple(self.center())
        for vertex in self.vertices:
            vertex.rotate(yaw, pitch, roll, pivot)
        for normal in self.normals:
            normal.rotate(yaw, pitch, roll)
        self._invalidate_center()
        return self

    def set_color(self, color: int) -> Mesh:
        """Set the 32-bit ARGB color of the mesh."""
        if not 0 <= color <= 0xFFFFFFFF:
            raise ValueError("color must fit in 32 bits")
        self.color = color
        return self

    def update_normals(self) -> None:
        """Recompute each triangle's unit normal, facing away from the mesh center."""
        mesh_center = self.center()
        for tri in self._triangles:
            a = self.vertices[tri.v1]
            b = self.vertices[tri.v2]
            c = self.vertices[tri.v3]
            normal = (a - b).cross(a - c).normalize()

            tri_center = (a + b + c).inverse_scale(3)
            offset = normal.copy().scale(_NORMAL_PROBE)
            outward = (tri_center + offset).distance_to(mesh_center)
            inward = (tri_center - offset).distance_to(mesh_center)
            if outward < inward:
                normal.scale(-1)

            self.normals[tri.normal].set(normal)