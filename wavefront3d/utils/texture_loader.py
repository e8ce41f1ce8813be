"""
Загружает PNG/JPG → CPU‑текстуру (RGBA8, numpy), которую потом забирает рендер.
"""

from pathlib import Path
from PIL import Image
import numpy as np
from wavefront3d.utils.logger import logger


class Texture:
    """Пиксели RGBA8 в виде массива (height, width, 4)."""

    def __init__(self, path, pixels: np.ndarray):
        self.path = Path(path)
        self.pixels = pixels
        self.height, self.width = pixels.shape[:2]

    @property
    def released(self) -> bool:
        return self.pixels is None

    def release(self):
        """Освободить память изображения."""
        if self.pixels is not None:
            logger.debug(f"[Texture] Released {self.path}")
        self.pixels = None

    def __repr__(self):
        return f"Texture({str(self.path)!r}, {self.width}x{self.height})"


def load_texture(path) -> Texture:
    """
    Загружает изображение через Pillow и возвращает Texture.
    Файл закрывается сразу после декодирования.
    """
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise FileNotFoundError(f"Texture not found: {p}")

    with Image.open(p) as img:
        pixels = np.array(img.convert("RGBA"), dtype=np.uint8)

    tex = Texture(p, pixels)
    logger.debug(f"[TextureLoader] Loaded texture {p} ({tex.width}x{tex.height})")
    return tex
