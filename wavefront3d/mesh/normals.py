"""
Гладкие нормали по вершинам, взвешенные площадью треугольников.
"""

import numpy as np
from numba import njit


@njit(cache=False)
def _accumulate(positions, indices, out):
    # ненормированное векторное произведение ∝ удвоенной площади
    for i in range(indices.shape[0] // 3):
        a = indices[3 * i]
        b = indices[3 * i + 1]
        c = indices[3 * i + 2]

        e1x = positions[b, 0] - positions[a, 0]
        e1y = positions[b, 1] - positions[a, 1]
        e1z = positions[b, 2] - positions[a, 2]
        e2x = positions[c, 0] - positions[a, 0]
        e2y = positions[c, 1] - positions[a, 1]
        e2z = positions[c, 2] - positions[a, 2]

        nx = e1y * e2z - e1z * e2y
        ny = e1z * e2x - e1x * e2z
        nz = e1x * e2y - e1y * e2x

        for v in (a, b, c):
            out[v, 0] += nx
            out[v, 1] += ny
            out[v, 2] += nz


def calculate_normals(positions, indices) -> np.ndarray:
    """
    Вернуть массив (N, 3) float32 – по одной единичной нормали на позицию.
    Изолированные вершины и вершины только вырожденных треугольников
    получают нулевой вектор.
    """
    pos = np.ascontiguousarray(positions, dtype=np.float64).reshape(-1, 3)
    idx = np.ascontiguousarray(indices, dtype=np.int64).ravel()

    acc = np.zeros_like(pos)
    _accumulate(pos, idx, acc)

    lengths = np.linalg.norm(acc, axis=1)
    normals = np.zeros_like(acc)
    nonzero = lengths > 0.0
    normals[nonzero] = acc[nonzero] / lengths[nonzero, None]
    return normals.astype(np.float32)
