# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: запись OBJ/MTL/PNG во временную папку
и «ленивый» загрузчик текстур, который только запоминает вызовы.
"""

import textwrap

import numpy as np
import pytest
from PIL import Image

from wavefront3d.utils.texture_loader import Texture


@pytest.fixture
def write_file(tmp_path):
    """write_file("a.obj", "...") → путь к файлу с обрезанным отступом."""
    def _write(name: str, content: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def write_png(tmp_path):
    def _write(name: str, size=(4, 2), color=(255, 0, 0, 255)):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGBA", size, color).save(path)
        return path
    return _write


class RecordingTextureLoader:
    """Подменяет Pillow: отдаёт 1×1 текстуру и помнит, что грузил."""

    def __init__(self):
        self.loaded: list[Texture] = []

    def __call__(self, path):
        tex = Texture(path, np.zeros((1, 1, 4), dtype=np.uint8))
        self.loaded.append(tex)
        return tex


@pytest.fixture
def texture_loader():
    return RecordingTextureLoader()


def numbered(text: str):
    """Строки документа в виде [(lineno, line), ...] без пустых."""
    lines = textwrap.dedent(text).strip().splitlines()
    return [(i, line.strip()) for i, line in enumerate(lines, 1) if line.strip()]


@pytest.fixture
def lines():
    return numbered
