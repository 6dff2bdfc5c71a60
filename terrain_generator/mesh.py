# terrain_generator/mesh.py

"""
================================================================================
GRID MESH ASSEMBLY
================================================================================
Turns a heightfield and its vertex colors into a triangulated grid mesh.

Data Contract:
---------------
- Inputs:
    - x_grid, z_grid: World-space grids from heightfield.grid_world_coordinates().
    - heights: The heightfield, same shape, used as the Y (up) coordinate.
    - colors: Per-vertex RGB in [0, 1], shape heights.shape + (3,).
- Outputs:
    - A TerrainMesh with (segments + 1)^2 vertices and 2 * segments^2
      triangles. Vertex k = j * (segments + 1) + i.
- Side Effects: None. Returned arrays are read-only.
- Invariants: Every triangle winds counter-clockwise when viewed from +Y.
================================================================================
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class TerrainMesh:
    """Vertex positions, vertex colors and the triangle index list."""
    positions: np.ndarray  # (N, 3) float32
    colors: np.ndarray     # (N, 3) float32
    indices: np.ndarray    # (T, 3) uint32

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.indices)

    def to_dict(self) -> dict:
        """Flat, JSON-serializable buffers in the layout 3D engines expect."""
        return {
            "positions": self.positions.ravel().tolist(),
            "colors": self.colors.ravel().tolist(),
            "indices": self.indices.ravel().tolist(),
        }


def triangulate_grid(segments: int) -> np.ndarray:
    """
    Splits each of the segments x segments cells into two triangles.

    For the cell with top-left vertex a, neighbours b (next column),
    c (next row) and d (diagonal), the triangles are (a, c, b) and (b, c, d).
    """
    stride = segments + 1
    rows, cols = np.meshgrid(np.arange(segments), np.arange(segments), indexing='ij')
    a = (rows * stride + cols).ravel()
    b = a + 1
    c = a + stride
    d = c + 1

    indices = np.empty((2 * segments * segments, 3), dtype=np.uint32)
    indices[0::2] = np.column_stack((a, c, b))
    indices[1::2] = np.column_stack((b, c, d))
    return indices


def _freeze(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


def build_grid_mesh(x_grid: np.ndarray, z_grid: np.ndarray, heights: np.ndarray, colors: np.ndarray) -> TerrainMesh:
    """Assembles the final mesh from pre-computed grids."""
    segments = heights.shape[0] - 1

    positions = np.column_stack((x_grid.ravel(), heights.ravel(), z_grid.ravel())).astype(np.float32)
    vertex_colors = np.ascontiguousarray(colors.reshape(-1, 3), dtype=np.float32)

    return TerrainMesh(
        positions=_freeze(positions),
        colors=_freeze(vertex_colors.copy()),
        indices=_freeze(triangulate_grid(segments)),
    )
