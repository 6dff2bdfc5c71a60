# terrain_generator/heightfield.py

"""
================================================================================
HEIGHTFIELD BUILDER
================================================================================
Samples the fractal noise signal over the regular terrain grid and scales it
into world-unit heights.

Data Contract:
---------------
- Inputs:
    - perm: A permutation table from noise.build_permutation_table().
    - segments: Number of grid cells per side.
    - height_scale, octaves: Pre-validated generation parameters.
- Outputs:
    - A (segments + 1, segments + 1) float64 array indexed [j, i], where j
      runs along the depth (Z) axis and i along the width (X) axis.
- Side Effects: None.
- Invariants: Noise coordinates depend only on the normalized grid index, so
  the macro shape is independent of world size and mesh resolution.
================================================================================
"""

import numpy as np

from . import config as DEFAULTS
from . import noise


def grid_fractions(segments: int) -> np.ndarray:
    """Normalized grid positions i / segments for i in [0, segments]."""
    return np.arange(segments + 1, dtype=np.float64) / segments


def grid_world_coordinates(width: float, depth: float, segments: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Returns (x, z) world-coordinate grids centered on the origin, each of
    shape (segments + 1, segments + 1) and indexed [j, i].
    """
    fractions = grid_fractions(segments)
    xs = (fractions - 0.5) * width
    zs = (fractions - 0.5) * depth
    x_grid, z_grid = np.meshgrid(xs, zs)
    return x_grid, z_grid


def grid_noise_coordinates(
    segments: int,
    feature_wavelength: float = DEFAULTS.TERRAIN_FEATURE_WAVELENGTH,
    noise_origin: float = DEFAULTS.NOISE_ORIGIN_OFFSET,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Maps grid indices to noise-space coordinates.
    One base-octave lattice cell spans `feature_wavelength` of the terrain side.
    """
    fractions = grid_fractions(segments)
    coords = noise_origin + fractions / feature_wavelength
    nx_grid, ny_grid = np.meshgrid(coords, coords)
    return nx_grid, ny_grid


def build_heightfield(
    perm: np.ndarray,
    segments: int,
    height_scale: float,
    octaves: int,
    feature_wavelength: float = DEFAULTS.TERRAIN_FEATURE_WAVELENGTH,
    noise_origin: float = DEFAULTS.NOISE_ORIGIN_OFFSET,
) -> np.ndarray:
    """
    Generates the terrain heightfield in world units.
    Every value is the fBm signal at the vertex times `height_scale`.
    """
    nx_grid, ny_grid = grid_noise_coordinates(segments, feature_wavelength, noise_origin)
    fbm_values = noise.fbm_grid(perm, nx_grid, ny_grid, octaves)
    return fbm_values * height_scale
