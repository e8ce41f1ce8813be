# wavefront3d/assets/__init__.py
"""Пакет с материалами и парсером библиотек материалов."""
from wavefront3d.assets.material import (
    DEFAULT_MATERIAL_NAME, IlluminationMode, Material,
)
from wavefront3d.assets.library import MaterialLibrary
from wavefront3d.assets.mtl_parser import parse_material_library

__all__ = [
    "DEFAULT_MATERIAL_NAME",
    "IlluminationMode",
    "Material",
    "MaterialLibrary",
    "parse_material_library",
]
