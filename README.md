# kiwigeom

A small, dependency-free toolkit for 3D geometry: 2D and 3D vectors,
4x4 transformation matrices, triangles and indexed triangle meshes,
with a few ready-made shapes.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Vectors (`kiwigeom.vec`)

`Vec2` and `Vec3` are mutable dataclasses. In-place operations (`set`,
`scale`, `inverse_scale`, `normalize`, `rotate`, `+=`, `-=`) return the
vector itself, so calls can be chained. `+`, `-`, `midpoint` and `cross`
return new vectors. Anywhere another vector is expected, any iterable of
the right number of numbers is accepted; a wrong length raises
`ValueError`.

```python
from kiwigeom.vec import Vec3

v = Vec3(1, 2, 2)
v.magnitude()            # 3.0
v.normalize(1.0)         # now unit length
a = Vec3(1, 0, 0)
b = Vec3(0, 1, 0)
a.cross(b)               # a new vector (0, 0, 1)
a.angle_to(b)            # 90.0 (degrees, always 0..180)
a.rotate(90, 0, 0, None) # yaw, pitch, roll in degrees, counter-clockwise
```

Normalizing a zero-length vector raises `ValueError`. `Vec3.scale_axes`
scales each component by its own factor.

`Vec3.project()` performs an in-place perspective projection: x and y
become field-of-view normalised coordinates measured from the top left,
z is kept, and a point with negative z becomes `(-1, -1, inf)`.

## Matrices (`kiwigeom.matrix`)

`Matrix4` is a 4x4 matrix of floats. `Matrix4()` is all zeros;
`Matrix4(rows)` takes four rows of four values. The class methods
`identity`, `translation`, `scaling`, `rotation_x`, `rotation_y` and
`rotation_z` (angles in degrees) build the standard transforms. `@`
multiplies two matrices, `@=` does so in place, `m[row]` returns a row as
a tuple and `m[row, col]` a single entry. `apply` transforms a `Vec3` in
place, taking w as 1.

```python
from kiwigeom.matrix import Matrix4
from kiwigeom.vec import Vec3

m = Matrix4.translation(1, 2, 3) @ Matrix4.rotation_y(90)
m.apply(Vec3(1, 0, 0))
```

## Triangles (`kiwigeom.tri`)

`Tri2` holds three `Vec2` vertices and can be copied and rotated. `Tri3`
holds three `Vec3` vertices and a normal; `update_normal()` recomputes a
unit normal from the vertices (it may face either side, and a degenerate
triangle raises `ValueError`), `is_facing(vec)` is true when `vec` makes
an angle of at least 90 degrees with the normal, and `center()` returns
the centroid.

## Meshes (`kiwigeom.mesh`)

A `Mesh(vertex_count, normal_count, tri_count)` holds fixed-length lists
`vertices` and `normals` of `Vec3`, a table of `TriangleIndices`
(`v1`, `v2`, `v3`, `normal`) set with `set_triangle` and read with
`triangle` or `triangles`, and a 32-bit ARGB `color` (white by default).
Out-of-range indices raise `IndexError`.

`center()` returns the average of the vertices, cached until the mesh is
changed. `move`, `scale`, `scale_axes`, `rotate` and `set_color` return
the mesh, so they chain. `rotate` turns the vertices around the given
point or, with `None`, around the mesh centre; normals are turned around
the origin. `scale_axes` recomputes the normals afterwards.
`update_normals()` sets each triangle's normal to a unit vector facing
away from the mesh centre.

## Shapes (`kiwigeom.shapes`)

`temp_mesh()`, `cube_mesh()` and `sphere_mesh()` build a fresh mesh on
every call: one upright triangle, a unit cube centred on the origin, and
a sphere of diameter 1 with 102 vertices and 200 triangles.

```python
from kiwigeom.shapes import cube_mesh

cube = cube_mesh().scale(10).move(0, 5, 50).rotate(40, 20, 60, None)
cube.center()
```

## What it does not do

kiwigeom only computes geometry. It does not draw anything, open windows,
rasterise triangles, handle input or load meshes from files.