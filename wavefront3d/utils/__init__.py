# wavefront3d/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger        – готовый объект logging.Logger (с level INFO)
    * Config        – JSON‑настройки загрузчика
    * Profiler      – замер времени блока кода
    * resolve_path  – исправление путей к mtl/текстурам
    * load_texture  – загрузка изображения в Texture
    * decoded_lines – строки файла в UTF‑8 без BOM
"""

from .logger import logger, set_log_level
from .config import Config, DEFAULT_CONFIG
from .profiler import Profiler
from .paths import resolve_path
from .texture_loader import Texture, load_texture
from .text import decoded_lines

__all__ = [
    "logger",
    "set_log_level",
    "Config",
    "DEFAULT_CONFIG",
    "Profiler",
    "resolve_path",
    "Texture",
    "load_texture",
    "decoded_lines",
]
