# -*- coding: utf-8 -*-
"""
Распаковка граней одного объекта OBJ.

Грани‑треугольники идут как есть, квадраты режутся веером от первого
угла: (0, 1, 2) + (0, 2, 3). Для каждой позиции хранится «занятый» UV;
если позиция встречается с другим UV, она дублируется, так что в
итоговых массивах позиция и UV соответствуют друг другу один‑к‑одному.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from wavefront3d.errors import FormatError, OutOfRangeError

ZERO_UV = (0.0, 0.0)


class UnpackedObject(NamedTuple):
    name: str | None
    positions: np.ndarray            # (N, 3) float32
    texcoords: np.ndarray | None     # (N, 2) float32
    indices: np.ndarray              # (3 * T,) uint32
    material_name: str | None


class VertexArena:
    """
    Растущий массив render‑вершин одного объекта.

    Индекс, однажды выданный ``render_index``, больше не меняется.

    При ``zero_uv_sentinel=True`` незанятый слот обозначается UV (0, 0),
    как в исходном загрузчике: законный UV (0, 0) при первом
    использовании позиции неотличим от «не занято», и следующий UV
    просто перезапишет слот вместо дублирования вершины.
    """

    def __init__(self, positions, zero_uv_sentinel: bool = True):
        self.positions = [tuple(p) for p in positions]
        self.raw_count = len(self.positions)
        self.texcoords = None
        self.indices = []
        self.zero_uv_sentinel = zero_uv_sentinel
        self._seams = {}

    def _unclaimed(self):
        return ZERO_UV if self.zero_uv_sentinel else None

    def render_index(self, position: int, uv=None) -> int:
        """Индекс render‑вершины для пары (позиция, UV)."""
        if uv is None:
            return position
        if self.texcoords is None:
            self.texcoords = [self._unclaimed()] * len(self.positions)

        claimed = self.texcoords[position]
        if claimed == self._unclaimed():
            self.texcoords[position] = uv
            return position
        if claimed == uv:
            return position

        # шов: новая копия позиции на каждый новый UV
        key = (position, uv)
        index = self._seams.get(key)
        if index is None:
            index = len(self.positions)
            self.positions.append(self.positions[position])
            self.texcoords.append(uv)
            self._seams[key] = index
        return index

    def add_triangle(self, a: int, b: int, c: int) -> None:
        self.indices.extend((a, b, c))

    def to_arrays(self):
        positions = np.array(self.positions, dtype=np.float32).reshape((-1, 3))
        texcoords = None
        if self.texcoords is not None:
            texcoords = np.array(
                [uv if uv is not None else ZERO_UV for uv in self.texcoords],
                dtype=np.float32,
            ).reshape((-1, 2))
        indices = np.array(self.indices, dtype=np.uint32)
        return positions, texcoords, indices


def _numbers(parts, minimum, source, lineno):
    if len(parts) < minimum + 1:
        raise FormatError(f"'{parts[0]}' expects at least {minimum} value(s)", source, lineno)
    try:
        return tuple(float(p) for p in parts[1:])
    except ValueError:
        raise FormatError(f"malformed number in '{' '.join(parts)}'", source, lineno) from None


def _parse_corner(token, source, lineno):
    # форматы: v, v/vt, v/vt/vn, v//vn – нормаль игнорируется
    fields = token.split("/")
    try:
        position = int(fields[0])
        texcoord = int(fields[1]) if len(fields) > 1 and fields[1] else None
    except ValueError:
        raise FormatError(f"malformed face corner '{token}'", source, lineno) from None
    return position, texcoord


def unpack_object(lines, vertex_offset: int = 0, uv_offset: int = 0,
                  source=None, zero_uv_sentinel: bool = True) -> UnpackedObject:
    """
    Разобрать строки одного объекта ``[(lineno, text), ...]``.

    ``vertex_offset``/``uv_offset`` – сколько v/vt записей объявили все
    предыдущие объекты документа; индексы граней считаются от них.
    """
    name = None
    material_name = None
    positions = []
    uvs = []
    faces = []

    for lineno, line in lines:
        parts = line.split()
        keyword = parts[0]
        if keyword in ("o", "g"):
            rest = line.split(None, 1)
            name = rest[1].strip() if len(rest) > 1 else name
        elif keyword == "v":
            positions.append(_numbers(parts, 3, source, lineno)[:3])
        elif keyword == "vt":
            uv = _numbers(parts, 1, source, lineno)
            uvs.append((uv[0], uv[1] if len(uv) > 1 else 0.0))
        elif keyword == "f":
            faces.append((lineno, parts[1:]))
        elif keyword == "usemtl":
            rest = line.split(None, 1)
            material_name = rest[1].strip() if len(rest) > 1 else None

    arena = VertexArena(positions, zero_uv_sentinel)
    for lineno, tokens in faces:
        if len(tokens) not in (3, 4):
            raise FormatError(f"face with {len(tokens)} corners is not supported", source, lineno)

        corners = []
        for token in tokens:
            p, t = _parse_corner(token, source, lineno)
            local_p = p - 1 - vertex_offset
            if not 0 <= local_p < arena.raw_count:
                raise OutOfRangeError(f"position index {p} out of range", source, lineno)
            uv = None
            if t is not None:
                local_t = t - 1 - uv_offset
                if not 0 <= local_t < len(uvs):
                    raise OutOfRangeError(f"texcoord index {t} out of range", source, lineno)
                uv = uvs[local_t]
            corners.append((local_p, uv))

        if len({uv is None for _, uv in corners}) > 1:
            raise FormatError("face mixes corners with and without texcoords", source, lineno)

        rendered = [arena.render_index(p, uv) for p, uv in corners]
        arena.add_triangle(rendered[0], rendered[1], rendered[2])
        if len(rendered) == 4:
            arena.add_triangle(rendered[0], rendered[2], rendered[3])

    positions, texcoords, indices = arena.to_arrays()
    return UnpackedObject(name, positions, texcoords, indices, material_name)
