# -*- coding: utf-8 -*-
"""
Материал Wavefront MTL – цвета Ka/Kd/Ks, Ns, прозрачность d, режим
освещения illum и (опционально) диффузная текстура map_Kd.

Материал не знает о GPU: текстура хранится как CPU‑объект ``Texture``,
а ``program`` – непрозрачная ссылка на шейдер, которую передал
вызывающий код. Привязку к пайплайну делает внешний рендер.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

from wavefront3d.utils import logger
from wavefront3d.utils.texture_loader import Texture

DEFAULT_MATERIAL_NAME = "wavefront3d-default"

Color = tuple[float, float, float]


class IlluminationMode(IntEnum):
    """Значения директивы ``illum`` (0–10)."""
    COLOR_ON_AMBIENT_OFF = 0
    COLOR_ON_AMBIENT_ON = 1
    HIGHLIGHT_ON = 2
    REFLECTION_ON_RAYTRACE_ON = 3
    TRANSPARENCY_GLASS_ON_REFLECTION_RAYTRACE_ON = 4
    REFLECTION_FRESNEL_ON_RAYTRACE_ON = 5
    TRANSPARENCY_REFRACTION_ON_REFLECTION_FRESNEL_OFF_RAYTRACE_ON = 6
    TRANSPARENCY_REFRACTION_ON_REFLECTION_FRESNEL_ON_RAYTRACE_ON = 7
    REFLECTION_ON_RAYTRACE_OFF = 8
    TRANSPARENCY_GLASS_ON_REFLECTION_RAYTRACE_OFF = 9
    CASTS_SHADOWS_ONTO_INVISIBLE_SURFACES = 10


class Material:
    """
    Хранит параметры одного ``newmtl`` блока.
    После загрузки считается неизменяемым.
    """

    def __init__(
        self,
        name: str,
        ambient: Color = (0.0, 0.0, 0.0),
        diffuse: Color = (0.0, 0.0, 0.0),
        specular: Color = (0.0, 0.0, 0.0),
        specular_exponent: float = 0.0,
        transparency: float = 1.0,
        illumination: IlluminationMode = IlluminationMode.COLOR_ON_AMBIENT_OFF,
        diffuse_map_path: str | Path | None = None,
        diffuse_map: Texture | None = None,
        program=None,
    ) -> None:
        self.name = name
        self.ambient = tuple(float(c) for c in ambient)
        self.diffuse = tuple(float(c) for c in diffuse)
        self.specular = tuple(float(c) for c in specular)
        self.specular_exponent = float(specular_exponent)
        self.transparency = float(transparency)
        self.illumination = IlluminationMode(illumination)
        self.diffuse_map_path = Path(diffuse_map_path) if diffuse_map_path else None
        self.diffuse_map = diffuse_map
        self.program = program

    @classmethod
    def default(cls, program=None) -> "Material":
        """Непрозрачный белый материал без текстуры."""
        return cls(
            DEFAULT_MATERIAL_NAME,
            ambient=(1.0, 1.0, 1.0),
            diffuse=(1.0, 1.0, 1.0),
            program=program,
        )

    @property
    def is_transparent(self) -> bool:
        return self.transparency != 1.0

    @property
    def has_texture(self) -> bool:
        return self.diffuse_map is not None

    def dispose(self) -> None:
        """Освободить текстуру материала."""
        if self.diffuse_map is not None:
            self.diffuse_map.release()
            logger.debug(f"[Material] Released texture of '{self.name}'")
            self.diffuse_map = None

    def __repr__(self):
        return (f"Material({self.name!r}, diffuse={self.diffuse}, "
                f"d={self.transparency}, illum={int(self.illumination)})")
