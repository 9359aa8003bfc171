"""Factories for the built-in meshes: a single triangle, a cube and a sphere."""

from __future__ import annotations

from collections.abc import Iterator

from kiwigeom.mesh import Mesh
from kiwigeom.vec import Vec3

_RING_SIZE = 20
_RING_STEP = 360 / _RING_SIZE

# First vertex index of each ring of the sphere.
_EQUATOR = 0
_BELOW_30 = 20
_ABOVE_30 = 40
_BELOW_60 = 60
_ABOVE_60 = 80
_BOTTOM_POLE = 100
_TOP_POLE = 101

_SPHERE_VERTEX_COUNT = 102
_SPHERE_TRI_COUNT = 200

_CUBE_VERTICES = (
    (-0.5, -0.5, -0.5),
    (-0.5, -0.5, 0.5),
    (0.5, -0.5, -0.5),
    (0.5, -0.5, 0.5),
    (-0.5, 0.5, -0.5),
    (-0.5, 0.5, 0.5),
    (0.5, 0.5, -0.5),
    (0.5, 0.5, 0.5),
)

_CUBE_NORMALS = (
    (0, -1, 0),
    (0, 1, 0),
    (-1, 0, 0),
    (1, 0, 0),
    (0, 0, -1),
    (0, 0, 1),
)

# (v1, v2, v3, normal) for each triangle, two per face.
_CUBE_TRIANGLES = (
    (0, 3, 1, 0),  # -y
    (0, 3, 2, 0),
    (4, 7, 5, 1),  # +y
    (4, 7, 6, 1),
    (0, 5, 4, 2),  # -x
    (0, 5, 1, 2),
    (2, 7, 3, 3),  # +x
    (2, 7, 6, 3),
    (0, 6, 2, 4),  # -z
    (0, 6, 4, 4),
    (1, 7, 3, 5),  # +z
    (1, 7, 5, 5),
)


def temp_mesh() -> Mesh:
    """Return a mesh holding one upright triangle facing -z."""
    mesh = Mesh(3, 1, 1)
    mesh.vertices[0].set((-0.5, -0.5, 0))
    mesh.vertices[1].set((0.5, -0.5, 0))
    mesh.vertices[2].set((0, 1, 0))
    mesh.normals[0].set((0, 0, -1))
    mesh.set_triangle(0, 0, 1, 2, 0)
    return mesh


def cube_mesh() -> Mesh:
    """Return a unit cube centred on the origin."""
    mesh = Mesh(len(_CUBE_VERTICES), len(_CUBE_NORMALS), len(_CUBE_TRIANGLES))
    for vertex, position in zip(mesh.vertices, _CUBE_VERTICES):
        vertex.set(position)
    for normal, direction in zip(mesh.normals, _CUBE_NORMALS):
        normal.set(direction)
    for index, (v1, v2, v3, normal) in enumerate(_CUBE_TRIANGLES):
        mesh.set_triangle(index, v1, v2, v3, normal)
    return mesh


def _ring_positions(pitch: float, half_offset: bool) -> Iterator[Vec3]:
    """Yield the points of one horizontal ring of the sphere."""
    v = Vec3(0, 0, 0.5)
    v.rotate(0, pitch, 0)
    if half_offset:
        v.rotate(_RING_STEP / 2, 0, 0)
    for _ in range(_RING_SIZE):
        v.rotate(_RING_STEP, 0, 0)
        yield v.copy()


def _ring(base: int, k: int) -> int:
    return base + k % _RING_SIZE


def _sphere_triangles() -> Iterator[tuple[int, int, int]]:
    """Yield the vertex indices of the sphere's triangles, band by band."""
    bands = range(_RING_SIZE)
    for k in bands:
        yield _TOP_POLE, _ring(_ABOVE_60, k), _ring(_ABOVE_60, k + 1)
    for k in bands:
        yield _ring(_ABOVE_60, k + 1), _ring(_ABOVE_30, k), _ring(_ABOVE_30, k + 1)
    for k in bands:
        yield _ring(_ABOVE_30, k), _ring(_ABOVE_60, k), _ring(_ABOVE_60, k + 1)
    for k in bands:
        yield _ring(_EQUATOR, k + 1), _ring(_ABOVE_30, k), _ring(_ABOVE_30, k + 1)
    for k in bands:
        yield _ring(_ABOVE_30, k), _ring(_EQUATOR, k), _ring(_EQUATOR, k + 1)
    for k in bands:
        yield _ring(_BELOW_30, k), _ring(_EQUATOR, k), _ring(_EQUATOR, k + 1)
    for k in bands:
        yield _ring(_EQUATOR, k + 1), _ring(_BELOW_30, k), _ring(_BELOW_30, k + 1)
    for k in bands:
        yield _ring(_BELOW_60, k + 1), _ring(_BELOW_30, k), _ring(_BELOW_30, k + 1)
    for k in bands:
        yield _ring(_BELOW_30, k), _ring(_BELOW_60, k), _ring(_BELOW_60, k + 1)
    for k in bands:
        yield _BOTTOM_POLE, _ring(_BELOW_60, k), _ring(_BELOW_60, k + 1)


def sphere_mesh() -> Mesh:
    """Return a sphere of diameter 1 centred on the origin, normals facing out."""
    mesh = Mesh(_SPHERE_VERTEX_COUNT, _SPHERE_TRI_COUNT, _SPHERE_TRI_COUNT)

    mesh.vertices[_BOTTOM_POLE].set((0, -0.5, 0))
    mesh.vertices[_TOP_POLE].set((0, 0.5, 0))

    rings = (
        (_EQUATOR, 0, False),
        (_BELOW_30, 30, True),
        (_ABOVE_30, -30, True),
        (_BELOW_60, 60, False),
        (_ABOVE_60, -60, False),
    )
    for base, pitch, half_offset in rings:
        for offset, position in enumerate(_ring_positions(pitch, half_offset)):
            mesh.vertices[base + offset].set(position)

    for index, (v1, v2, v3) in enumerate(_sphere_triangles()):
        mesh.set_triangle(index, v1, v2, v3, index)

    mesh.update_normals()
    return mesh