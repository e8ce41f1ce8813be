"""
Объединяет несколько Mesh‑ов в одну модель.
"""

from wavefront3d.assets.library import MaterialLibrary
from wavefront3d.utils import logger


class Model:
    """Результат загрузки: список Mesh‑ов и библиотека их материалов."""

    def __init__(self, meshes, materials: MaterialLibrary, name="Model"):
        self.name = name
        self.meshes = list(meshes)
        self.materials = materials

    def __iter__(self):
        return iter(self.meshes)

    def __len__(self):
        return len(self.meshes)

    def __getitem__(self, index):
        return self.meshes[index]

    def find(self, name):
        """Первый Mesh с таким именем или None."""
        return next((m for m in self.meshes if m.name == name), None)

    def draw_order(self):
        """Сначала непрозрачные, потом прозрачные – порядок документа сохраняется."""
        opaque = [m for m in self.meshes if not m.material.is_transparent]
        transparent = [m for m in self.meshes if m.material.is_transparent]
        return opaque + transparent

    # -----------------------------------------------------------------
    def dispose(self):
        """Освободить текстуры материалов и забыть Mesh‑и."""
        self.materials.dispose()
        self.meshes = []
        logger.debug(f"[Model] {self.name} disposed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.dispose()
