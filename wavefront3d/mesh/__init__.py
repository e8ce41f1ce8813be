"""
Пакет mesh – CPU‑буферы объекта, распаковка граней, нормали.
"""

from wavefront3d.mesh.mesh import Mesh
from wavefront3d.mesh.normals import calculate_normals
from wavefront3d.mesh.unpacker import UnpackedObject, VertexArena, unpack_object

__all__ = ["Mesh", "calculate_normals", "UnpackedObject", "VertexArena", "unpack_object"]
