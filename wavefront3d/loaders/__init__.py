"""
Пакет loaders – разбор OBJ документа и сборка модели.
"""

from wavefront3d.loaders.segmenter import IndexOffsets, ObjectGroup, segment_lines
from wavefront3d.loaders.model import Model
from wavefront3d.loaders.obj_loader import ObjLoader, load_obj

__all__ = ["IndexOffsets", "ObjectGroup", "segment_lines", "Model", "ObjLoader", "load_obj"]
