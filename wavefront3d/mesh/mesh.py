# wavefront3d/mesh/mesh.py
import numpy as np

from wavefront3d.assets.material import Material


def _frozen(array, dtype, width=None):
    if array is None:
        return None
    arr = np.array(array, dtype=dtype)
    if width is not None:
        arr = arr.reshape((-1, width))
    arr.setflags(write=False)
    return arr


class Mesh:
    """
    Один объект OBJ, готовый для рендера: позиции, UV, нормали,
    индексы треугольников и материал.

    Все массивы только для чтения; UV равны ``None``, если у объекта
    нет текстурных координат.
    """

    def __init__(self,
                 vertices: np.ndarray,
                 normals: np.ndarray,
                 indices: np.ndarray,
                 texcoords: np.ndarray = None,
                 material: Material = None,
                 name="Mesh"):
        self.name = name
        self.vertices = _frozen(vertices, np.float32, 3)
        self.normals = _frozen(normals, np.float32, 3)
        self.texcoords = _frozen(texcoords, np.float32, 2)
        self.indices = _frozen(indices, np.uint32).ravel()
        self.material = material if material is not None else Material.default()

        # Bounding‑sphere (для culling во внешнем рендере)
        verts = self.vertices
        if len(verts):
            self._bounding_center = verts.mean(axis=0).astype(np.float32)
            self._bounding_radius = float(
                np.linalg.norm(verts - self._bounding_center, axis=1).max())
        else:
            self._bounding_center = np.zeros(3, dtype=np.float32)
            self._bounding_radius = 0.0

    # -----------------------------------------------------------------
    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    @property
    def has_texcoords(self) -> bool:
        return self.texcoords is not None

    @property
    def bounding_sphere(self) -> tuple[np.ndarray, float]:
        """(центр, радиус) в координатах модели."""
        return self._bounding_center, self._bounding_radius

    # -----------------------------------------------------------------
    def interleaved(self) -> np.ndarray:
        """Позиция + нормаль (+ UV) в одном float32‑буфере на вершину."""
        components = [self.vertices, self.normals]
        if self.texcoords is not None:
            components.append(self.texcoords)
        return np.column_stack(components).astype(np.float32)

    def __repr__(self):
        return (f"Mesh({self.name!r}, vertices={self.vertex_count}, "
                f"triangles={self.triangle_count}, material={self.material.name!r})")
