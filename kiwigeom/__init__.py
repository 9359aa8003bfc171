"""Vectors, 4x4 matrices, triangles, indexed meshes and stock shapes for 3D geometry."""

__version__ = "0.1.0"
__all__ = ["matrix", "mesh", "shapes", "tri", "vec"]