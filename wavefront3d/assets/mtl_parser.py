# -*- coding: utf-8 -*-
"""
Парсер библиотеки материалов Wavefront (.mtl).

Файл режется на блоки по строкам ``newmtl <name>``; каждый блок
превращается в ``Material``. Поддерживаются директивы
Ka, Kd, Ks, Ns, d, illum, map_Kd – остальные молча пропускаются.
"""

from __future__ import annotations

from pathlib import Path

from wavefront3d.assets.library import MaterialLibrary
from wavefront3d.assets.material import IlluminationMode, Material
from wavefront3d.errors import FormatError, ModelIOError
from wavefront3d.utils import logger
from wavefront3d.utils.paths import resolve_path
from wavefront3d.utils.text import decoded_lines
from wavefront3d.utils.texture_loader import load_texture


def _floats(parts, count, path, lineno):
    if len(parts) < count + 1:
        raise FormatError(f"'{parts[0]}' expects {count} value(s)", path, lineno)
    try:
        return tuple(float(p) for p in parts[1:count + 1])
    except ValueError:
        raise FormatError(f"malformed number in '{' '.join(parts)}'", path, lineno) from None


def _illumination(parts, path, lineno) -> IlluminationMode:
    if len(parts) < 2:
        raise FormatError("'illum' expects a value", path, lineno)
    try:
        return IlluminationMode(int(parts[1]))
    except ValueError:
        raise FormatError(f"invalid illumination mode '{parts[1]}'", path, lineno) from None


def _load_diffuse_map(material, reference, path, texture_loader, load_textures):
    resolved = resolve_path(reference, path)
    material.diffuse_map_path = resolved
    if not load_textures:
        return
    if not resolved.is_file():
        logger.warning(f"[MaterialLibrary] Texture '{reference}' of '{material.name}' not found")
        return
    try:
        material.diffuse_map = texture_loader(resolved)
    except (OSError, ValueError) as exc:
        # Битая картинка – материал остаётся без текстуры.
        logger.error(f"[MaterialLibrary] Failed to load texture '{resolved}': {exc}")


def _build_material(block, path, program, texture_loader, load_textures) -> Material:
    lineno, header = block[0]
    parts = header.split(None, 1)
    if len(parts) < 2 or not parts[1].strip():
        raise FormatError("'newmtl' without a material name", path, lineno)

    material = Material(parts[1].strip(), program=program)
    try:
        for lineno, line in block[1:]:
            parts = line.split()
            # некоторые экспортёры ставят табуляцию сразу после ключа
            keyword = parts[0].replace("\t", "")

            if keyword == "Ka":
                material.ambient = _floats(parts, 3, path, lineno)
            elif keyword == "Kd":
                material.diffuse = _floats(parts, 3, path, lineno)
            elif keyword == "Ks":
                material.specular = _floats(parts, 3, path, lineno)
            elif keyword == "Ns":
                material.specular_exponent = _floats(parts, 1, path, lineno)[0]
            elif keyword == "d":
                material.transparency = _floats(parts, 1, path, lineno)[0]
            elif keyword == "illum":
                material.illumination = _illumination(parts, path, lineno)
            elif keyword == "map_Kd":
                rest = line.split(None, 1)
                if len(rest) < 2:
                    raise FormatError("'map_Kd' without a file name", path, lineno)
                _load_diffuse_map(material, rest[1].strip(), path,
                                  texture_loader, load_textures)
    except Exception:
        material.dispose()
        raise
    return material


def parse_material_library(
    path,
    program=None,
    library: MaterialLibrary | None = None,
    texture_loader=load_texture,
    load_textures: bool = True,
) -> MaterialLibrary:
    """
    Прочитать ``path`` и добавить его материалы в ``library``
    (или в новую библиотеку). Повторяющиеся имена отбрасываются.

    При ошибке формата материалы, созданные этим вызовом, освобождаются,
    а исключение уходит наверх.
    """
    path = Path(path)
    if library is None:
        library = MaterialLibrary(Material.default(program))

    blocks: list[list[tuple[int, str]]] = []
    try:
        with path.open("rb") as f:
            for lineno, raw in enumerate(decoded_lines(f, path), 1):
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                if line.split(None, 1)[0] == "newmtl" or not blocks:
                    blocks.append([])
                blocks[-1].append((lineno, line))
    except OSError as exc:
        raise ModelIOError(f"cannot open material library: {exc.strerror or exc}", path) from exc

    created = []
    try:
        for block in blocks:
            if block[0][1].split(None, 1)[0] != "newmtl":
                logger.warning(f"[MaterialLibrary] {path}: directives before first 'newmtl' ignored")
                continue
            material = _build_material(block, path, program, texture_loader, load_textures)
            if library.add(material):
                created.append(material)
    except Exception:
        for material in created:
            material.dispose()
        raise

    logger.debug(f"[MaterialLibrary] Loaded {len(created)} material(s) from {path}")
    return library
