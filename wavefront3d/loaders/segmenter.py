# -*- coding: utf-8 -*-
"""
Разбиение OBJ документа на группы строк по объектам.

Строки v/vt копятся в «объектном» буфере (сбрасывается только на ``o``),
всё остальное – в «преамбуле». Группа = объектный буфер + преамбула.
Смещения индексов передаются дальше как неизменяемое значение.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, NamedTuple


class IndexOffsets(NamedTuple):
    """Сколько v/vt записей объявлено до текущего объекта."""
    vertex: int = 0
    uv: int = 0

    def advance(self, counts: "IndexOffsets") -> "IndexOffsets":
        return IndexOffsets(self.vertex + counts.vertex, self.uv + counts.uv)


class ObjectGroup(NamedTuple):
    lines: tuple            # ((lineno, text), ...)
    offsets: IndexOffsets


def segment_lines(lines: Iterable[str],
                  on_mtllib: Callable[[str, int], None] | None = None) -> Iterator[ObjectGroup]:
    """
    Выдавать ``ObjectGroup`` по мере чтения ``lines``.

    ``on_mtllib(reference, lineno)`` вызывается сразу, как только
    встретилась строка ``mtllib`` – до того, как разбор пойдёт дальше.
    """
    preamble = []
    object_lines = []
    offsets = IndexOffsets()
    counts = IndexOffsets()

    for lineno, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        keyword = line.split(None, 1)[0]

        if (keyword == "o" and preamble) or (keyword == "g" and object_lines):
            yield ObjectGroup(tuple(object_lines + preamble), offsets)
            preamble = []
            if keyword == "o":
                object_lines = []
                offsets = offsets.advance(counts)
                counts = IndexOffsets()

        if keyword == "v":
            counts = counts._replace(vertex=counts.vertex + 1)
            object_lines.append((lineno, line))
        elif keyword == "vt":
            counts = counts._replace(uv=counts.uv + 1)
            object_lines.append((lineno, line))
        elif keyword == "vn":
            continue            # нормали всё равно пересчитываются
        else:
            preamble.append((lineno, line))

        if keyword == "mtllib" and on_mtllib is not None:
            rest = line.split(None, 1)
            if len(rest) > 1:
                on_mtllib(rest[1].strip(), lineno)

    if preamble or object_lines:
        yield ObjectGroup(tuple(object_lines + preamble), offsets)
