# terrain_generator/analysis.py

"""
================================================================================
HEIGHTFIELD ANALYSIS
================================================================================
Summary statistics attached to every generated terrain: height range, slope
and a high-frequency energy measure used to compare octave settings.
================================================================================
"""

import numpy as np
from scipy.ndimage import laplace


def slope_map(heights: np.ndarray, spacing_x: float = 1.0, spacing_z: float = 1.0) -> np.ndarray:
    """
    Calculates the steepness (rise over run) at every vertex.
    `spacing_x` and `spacing_z` are the world distances between grid columns
    and rows.
    """
    dz, dx = np.gradient(heights, spacing_z, spacing_x)
    return np.sqrt(dx**2 + dz**2)


def high_frequency_energy(heights: np.ndarray) -> float:
    """
    Mean squared discrete Laplacian of the grid.

    Fine detail dominates this measure: an octave of frequency f and
    amplitude a contributes roughly (a * f^2)^2 until f approaches the grid
    resolution.
    """
    curvature = laplace(np.asarray(heights, dtype=np.float64), mode='nearest')
    return float(np.mean(curvature**2))


def roughness_index(heights: np.ndarray) -> float:
    """
    High-frequency energy relative to the field's variance.

    Unlike the raw energy this is independent of the fBm amplitude
    normalization, so it only grows when finer detail is layered on. The
    finest octave has the highest curvature-to-variance ratio of any layer,
    even once it aliases on a coarse grid. A flat field has index 0.
    """
    heights = np.asarray(heights, dtype=np.float64)
    variance = float(np.var(heights))
    if variance == 0.0:
        return 0.0
    return high_frequency_energy(heights) / variance


def heightfield_statistics(heights: np.ndarray, width: float, depth: float) -> dict:
    """Returns a JSON-serializable summary of a heightfield."""
    segments = heights.shape[0] - 1
    slopes = slope_map(heights, width / segments, depth / segments)
    return {
        "min_height": float(np.min(heights)),
        "max_height": float(np.max(heights)),
        "mean_height": float(np.mean(heights)),
        "std_height": float(np.std(heights)),
        "mean_slope": float(np.mean(slopes)),
        "max_slope": float(np.max(slopes)),
        "high_frequency_energy": high_frequency_energy(heights),
        "roughness_index": roughness_index(heights),
    }
