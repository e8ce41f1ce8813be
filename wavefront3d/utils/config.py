"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
Без пути конфигурация живёт только в памяти.
"""

import copy
import json
from pathlib import Path
from wavefront3d.utils.logger import logger, set_log_level

DEFAULT_CONFIG = {
    "log_level": "INFO",
    "loader": {
        # (0, 0) считается «незанятым» UV – поведение исходного загрузчика
        "zero_uv_sentinel": True,
        "load_textures": True,
        "profile": True,
    },
}


def _merged(defaults: dict, data: dict) -> dict:
    result = copy.deepcopy(defaults)
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merged(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Настройки загрузчика (уровень лога, поведение распаковки граней)."""

    def __init__(self, path: str | None = None, **overrides):
        self.path = Path(path) if path is not None else None
        self._load()
        for key, value in overrides.items():
            self.data.setdefault("loader", {})[key] = value

    def _load(self):
        if self.path is None:
            self.data = copy.deepcopy(DEFAULT_CONFIG)
        elif self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = _merged(DEFAULT_CONFIG, json.load(f))
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        if self.path is None:
            return
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def apply_logging(self):
        """Выставить уровень логгера из ``log_level`` (явный вызов, не при загрузке)."""
        set_log_level(self["log_level"])

    def loader_option(self, name: str):
        """Значение из секции ``loader`` с откатом на значение по‑умолчанию."""
        section = self.data.get("loader") or {}
        return section.get(name, DEFAULT_CONFIG["loader"].get(name))
