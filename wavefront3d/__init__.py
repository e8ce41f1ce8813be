"""
Wavefront3D – загрузчик Wavefront OBJ/MTL в индексированные меши,
готовые для GPU: позиции, UV, гладкие нормали, индексы треугольников
и материалы с путями к текстурам.
"""

from wavefront3d.utils import logger, Config
from wavefront3d.errors import WavefrontError, FormatError, OutOfRangeError, ModelIOError
from wavefront3d.assets import IlluminationMode, Material, MaterialLibrary, parse_material_library
from wavefront3d.mesh import Mesh, calculate_normals, unpack_object
from wavefront3d.loaders import Model, ObjLoader, load_obj, segment_lines

__version__ = "1.0.0"

__all__ = [
    "logger",
    "Config",
    "WavefrontError",
    "FormatError",
    "OutOfRangeError",
    "ModelIOError",
    "IlluminationMode",
    "Material",
    "MaterialLibrary",
    "parse_material_library",
    "Mesh",
    "calculate_normals",
    "unpack_object",
    "Model",
    "ObjLoader",
    "load_obj",
    "segment_lines",
]
