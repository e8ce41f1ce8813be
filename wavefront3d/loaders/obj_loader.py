# -*- coding: utf-8 -*-
"""
Загрузчик Wavefront OBJ (+ MTL) → список Mesh‑ов с материалами.

Порядок работы:
    1. ``segment_lines`` режет документ на объекты; на ``mtllib`` сразу
       грузится библиотека материалов.
    2. ``unpack_object`` триангулирует грани и дублирует вершины по швам UV.
    3. ``calculate_normals`` считает гладкие нормали.
    4. Объекту назначается последний указанный в нём ``usemtl``
       (или материал по‑умолчанию).
"""

from __future__ import annotations

from pathlib import Path

from wavefront3d.assets.library import MaterialLibrary
from wavefront3d.assets.material import Material
from wavefront3d.assets.mtl_parser import parse_material_library
from wavefront3d.errors import ModelIOError
from wavefront3d.loaders.model import Model
from wavefront3d.loaders.segmenter import segment_lines
from wavefront3d.mesh.mesh import Mesh
from wavefront3d.mesh.normals import calculate_normals
from wavefront3d.mesh.unpacker import unpack_object
from wavefront3d.utils import Config, Profiler, logger
from wavefront3d.utils.paths import resolve_path
from wavefront3d.utils.text import decoded_lines
from wavefront3d.utils.texture_loader import load_texture


class ObjLoader:
    """Один вызов ``load()`` – один полностью разобранный документ."""

    def __init__(self, path, config: Config | None = None, program=None,
                 texture_loader=load_texture):
        self.path = Path(path)
        self.program = program
        self.texture_loader = texture_loader
        self.config = config if config is not None else Config()

    # -----------------------------------------------------------------
    def _load_materials(self, library: MaterialLibrary, reference: str, lineno: int):
        # "mtllib a.mtl b.mtl" – несколько библиотек, если целиком такого файла нет
        resolved = resolve_path(reference, self.path)
        if resolved.is_file() or len(reference.split()) == 1:
            paths = [resolved]
        else:
            paths = [resolve_path(name, self.path) for name in reference.split()]

        for path in paths:
            logger.debug(f"[ObjLoader] {self.path}:{lineno}: mtllib {path}")
            parse_material_library(
                path,
                program=self.program,
                library=library,
                texture_loader=self.texture_loader,
                load_textures=self.config.loader_option("load_textures"),
            )

    def _build_mesh(self, group, library: MaterialLibrary) -> Mesh | None:
        unpacked = unpack_object(
            group.lines,
            group.offsets.vertex,
            group.offsets.uv,
            source=self.path,
            zero_uv_sentinel=self.config.loader_option("zero_uv_sentinel"),
        )
        if len(unpacked.indices) == 0:
            logger.debug(f"[ObjLoader] Object '{unpacked.name}' has no faces – skipped")
            return None

        normals = calculate_normals(unpacked.positions, unpacked.indices)
        mesh = Mesh(
            unpacked.positions,
            normals,
            unpacked.indices,
            texcoords=unpacked.texcoords,
            material=library.resolve(unpacked.material_name),
            name=unpacked.name or self.path.stem,
        )
        logger.debug(f"[ObjLoader] {mesh}")
        return mesh

    # -----------------------------------------------------------------
    def load(self) -> Model:
        """
        Прочитать документ целиком. Либо возвращает полную модель,
        либо бросает ``WavefrontError`` – частичного результата нет.
        """
        library = MaterialLibrary(Material.default(self.program))
        meshes = []

        try:
            with Profiler(f"load {self.path}", self.config.loader_option("profile")) as prof:
                try:
                    stream = self.path.open("rb")
                except OSError as exc:
                    raise ModelIOError(f"cannot open model: {exc.strerror or exc}",
                                       self.path) from exc
                with stream:
                    groups = segment_lines(
                        decoded_lines(stream, self.path),
                        on_mtllib=lambda ref, lineno: self._load_materials(library, ref, lineno),
                    )
                    for group in groups:
                        mesh = self._build_mesh(group, library)
                        if mesh is not None:
                            meshes.append(mesh)
        except Exception:
            library.dispose()
            raise

        if self.config.loader_option("profile"):
            logger.info(f"[ObjLoader] Loaded {len(meshes)} object(s) from {self.path} "
                        f"in {prof.elapsed_ms:.1f} ms")
        return Model(meshes, library, name=self.path.stem)


def load_obj(path, config: Config | None = None, program=None,
             texture_loader=load_texture) -> Model:
    """Короткая форма: ``ObjLoader(path, ...).load()``."""
    return ObjLoader(path, config=config, program=program,
                     texture_loader=texture_loader).load()
