# terrain_generator/color_maps.py

"""
================================================================================
BIOME COLOR MAPPING UTILITIES
================================================================================
This module converts terrain heights into per-vertex RGB colors using the
static biome ramps defined in config.BIOME_COLOR_RAMPS.

It is a pure, stateless utility: a color depends only on the normalized
height and the biome. There is no per-biome branching; every biome is a row
in the ramp table and is interpolated the same way.
================================================================================
"""
import numpy as np
from . import config as DEFAULTS


def get_biome_ramp(biome: str, ramps: dict = None) -> tuple[np.ndarray, np.ndarray]:
    """
    Splits a biome's control points into a (K,) array of height fractions and
    a (K, 3) array of colors in [0, 1].
    """
    ramp = (ramps or DEFAULTS.BIOME_COLOR_RAMPS)[biome]
    stops = np.array([point[0] for point in ramp], dtype=np.float64)
    colors = np.array([point[1] for point in ramp], dtype=np.float64) / 255.0
    return stops, colors


def normalize_heights(heights: np.ndarray, height_range: tuple = None) -> np.ndarray:
    """
    Maps heights to t in [0, 1].

    Uses the realized min/max of `heights` unless `height_range` is given
    (e.g. (-height_scale, height_scale) as a stable proxy). A flat field maps
    to 0.
    """
    heights = np.asarray(heights, dtype=np.float64)
    if height_range is None:
        low, high = float(np.min(heights)), float(np.max(heights))
    else:
        low, high = height_range

    span = high - low
    if span <= 0:
        return np.zeros_like(heights)
    return np.clip((heights - low) / span, 0.0, 1.0)


def interpolate_ramp(t: np.ndarray, stops: np.ndarray, colors: np.ndarray) -> np.ndarray:
    """Piecewise-linear interpolation of each color channel between stops."""
    t = np.asarray(t, dtype=np.float64)
    channels = [np.interp(t, stops, colors[:, c]) for c in range(3)]
    return np.stack(channels, axis=-1)


def biome_color(t: float, biome: str, ramps: dict = None) -> tuple[float, float, float]:
    """Returns the RGB color in [0, 1] for a single normalized height."""
    stops, colors = get_biome_ramp(biome, ramps)
    rgb = interpolate_ramp(np.clip(t, 0.0, 1.0), stops, colors)
    return float(rgb[0]), float(rgb[1]), float(rgb[2])


def colorize_heights(heights: np.ndarray, biome: str, height_range: tuple = None, ramps: dict = None) -> np.ndarray:
    """
    Converts a heightfield into a float32 RGB array of shape heights.shape + (3,).
    """
    stops, colors = get_biome_ramp(biome, ramps)
    t = normalize_heights(heights, height_range)
    return interpolate_ramp(t, stops, colors).astype(np.float32)



def get_vertex_color_array(vertex_colors: np.ndarray, segments: int) -> np.ndarray:
    """
    Converts flat per-vertex colors in [0, 1] back into a uint8 RGB image of
    shape (segments + 1, segments + 1, 3), indexed [j, i] like the heightfield.
    """
    side = segments + 1
    image = np.asarray(vertex_colors, dtype=np.float64).reshape(side, side, 3)
    return np.round(np.clip(image, 0.0, 1.0) * 255).astype(np.uint8)
