"""
Библиотека материалов: имя → Material.

Первое определение имени выигрывает, повторные отбрасываются.
Поиск по неизвестному имени через ``resolve`` возвращает материал
по‑умолчанию, а не ``None``.
"""

from collections.abc import Mapping

from wavefront3d.assets.material import Material
from wavefront3d.utils import logger


class MaterialLibrary(Mapping):
    """Неизменяемое снаружи отображение name → Material."""

    def __init__(self, default: Material | None = None):
        self._materials: dict[str, Material] = {}
        self.default = default if default is not None else Material.default()

    # Mapping -------------------------------------------------------
    def __getitem__(self, name: str) -> Material:
        return self._materials[name]

    def __iter__(self):
        return iter(self._materials)

    def __len__(self):
        return len(self._materials)

    # ---------------------------------------------------------------
    def add(self, material: Material) -> bool:
        """Добавить материал. ``False`` – имя уже занято, материал освобождён."""
        if material.name in self._materials:
            logger.warning(f"[MaterialLibrary] Duplicate material '{material.name}' discarded")
            material.dispose()
            return False
        self._materials[material.name] = material
        return True

    def resolve(self, name: str | None) -> Material:
        """Материал по имени; неизвестное или пустое имя → default."""
        if name is None:
            return self.default
        material = self._materials.get(name)
        if material is None:
            logger.warning(f"[MaterialLibrary] Unknown material '{name}', using default")
            return self.default
        return material

    def dispose(self) -> None:
        for material in self._materials.values():
            material.dispose()
        self.default.dispose()
