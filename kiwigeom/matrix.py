"""4x4 float matrices for affine transforms of 3D points."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Optional, Union

from kiwigeom.vec import Vec3

_SIZE = 4


def _identity_rows() -> list[list[float]]:
    return [[1.0 if i == j else 0.0 for j in range(_SIZE)] for i in range(_SIZE)]


class Matrix4:
    """A 4x4 matrix of floats, stored row by row."""

    __slots__ = ("_m",)

    def __init__(self, rows: Optional[Iterable[Iterable[float]]] = None) -> None:
        if rows is None:
            self._m = [[0.0] * _SIZE for _ in range(_SIZE)]
            return
        m = [[float(v) for v in row] for row in rows]
        if len(m) != _SIZE or any(len(row) != _SIZE for row in m):
            raise ValueError("a Matrix4 needs 4 rows of 4 values")
        self._m = m

    def copy(self) -> Matrix4:
        """Return an independent copy of this matrix."""
        return Matrix4(self._m)

    @classmethod
    def identity(cls) -> Matrix4:
        """Return the identity matrix."""
        return cls(_identity_rows())

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Matrix4:
        """Return a matrix translating by (x, y, z)."""
        m = cls.identity()
        m._m[0][3] = float(x)
        m._m[1][3] = float(y)
        m._m[2][3] = float(z)
        return m

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Matrix4:
        """Return a matrix scaling each axis by its factor."""
        m = cls.identity()
        m._m[0][0] = float(x)
        m._m[1][1] = float(y)
        m._m[2][2] = float(z)
        return m

    @classmethod
    def rotation_x(cls, angle: float) -> Matrix4:
        """Return a rotation about the X axis by ``angle`` degrees."""
        r = math.radians(angle)
        s, c = math.sin(r), math.cos(r)
        m = cls.identity()
        m._m[1][1] = c
        m._m[1][2] = -s
        m._m[2][1] = s
        m._m[2][2] = c
        return m

    @classmethod
    def rotation_y(cls, angle: float) -> Matrix4:
        """Return a rotation about the Y axis by ``angle`` degrees."""
        r = math.radians(angle)
        s, c = math.sin(r), math.cos(r)
        m = cls.identity()
        m._m[0][0] = c
        m._m[2][0] = -s
        m._m[0][2] = s
        m._m[2][2] = c
        return m

    @classmethod
    def rotation_z(cls, angle: float) -> Matrix4:
        """Return a rotation about the Z axis by ``angle`` degrees."""
        r = math.radians(angle)
        s, c = math.sin(r), math.cos(r)
        m = cls.identity()
        m._m[0][0] = c
        m._m[0][1] = -s
        m._m[1][0] = s
        m._m[1][1] = c
        return m

    def apply(self, vec: Vec3) -> Vec3:
        """Transform ``vec`` in place (w taken as 1) and return it."""
        x, y, z = vec
        vec.set(a * x + b * y + c * z + d for a, b, c, d in self._m[:3])
        return vec

    def __matmul__(self, other: object) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        columns = list(zip(*other._m))
        return Matrix4(
            [sum(a * b for a, b in zip(row, col)) for col in columns]
            for row in self._m
        )

    def __imatmul__(self, other: object) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        self._m = (self @ other)._m
        return self

    def __getitem__(self, index: Union[int, tuple[int, int]]):
        if isinstance(index, tuple):
            row, col = index
            return self._m[row][col]
        return tuple(self._m[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._m == other._m

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix4({self._m!r})"

    def __str__(self) -> str:
        rows = [" ".join(str(v) for v in row) for row in self._m]
        first, *rest = rows
        lines = [f"Matrix4: [ {first} ]"]
        lines.extend(f"         [ {row} ]" for row in rest)
        return "\n".join(lines)