# terrain_generator/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the terrain
generator: the parameter contract exposed to the tool-calling layer, the noise
tunables, and the biome color ramps.

DO NOT MODIFY THIS FILE FOR A SPECIFIC TERRAIN.
Instead, pass a configuration dictionary to the TerrainGenerator instance, or
pass per-terrain parameters to TerrainGenerator.generate().
================================================================================
"""

# --- Parameter Contract (bounds are inclusive) ---
# Each entry is (minimum, maximum, default).
WIDTH_RANGE = (5.0, 100.0, 20.0)
DEPTH_RANGE = (5.0, 100.0, 20.0)
HEIGHT_SCALE_RANGE = (0.1, 20.0, 3.0)
SEGMENTS_RANGE = (16, 128, 64)
OCTAVES_RANGE = (1, 6, 4)

DEFAULT_BIOME = "grass"
DEFAULT_POSITION = (0.0, 0.0, 0.0)

# Seeds are signed 32-bit integers.
SEED_MIN = -(2 ** 31)
SEED_MAX = 2 ** 31 - 1

# Seeds drawn when the caller omits one fall in [0, RANDOM_SEED_CEILING).
# Small numbers are easier to read back to the user in a conversation.
RANDOM_SEED_CEILING = 100000

# --- Permutation LCG (Numerical Recipes constants) ---
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
UINT32_MASK = 0xFFFFFFFF
PERMUTATION_SIZE = 256

# --- Fractal Noise ---
# Each octave halves the amplitude and doubles the frequency.
FBM_PERSISTENCE = 0.5
FBM_LACUNARITY = 2.0

# --- Feature Scale ---
# Fraction of the terrain side covered by one lattice cell of the base octave.
# 0.35 gives just under three hills across the terrain whatever its world
# size. Its reciprocal (20/7) is not a dyadic rational, so no octave ever
# samples a power-of-two grid at a fixed offset inside every lattice cell.
# Noise coordinates are derived from the normalized grid index, so changing
# `segments` only refines detail; the macro shape stays put.
TERRAIN_FEATURE_WAVELENGTH = 0.35

# Offset added to both noise axes so the grid does not start on a lattice
# point, where every octave of gradient noise is exactly zero.
NOISE_ORIGIN_OFFSET = 0.37

# Gradient noise is only approximately bounded, so heights are checked
# against height_scale * (1 + HEIGHT_BOUND_TOLERANCE).
HEIGHT_BOUND_TOLERANCE = 0.05

# --- Biome Color Ramps ---
# Ordered (height_fraction, (r, g, b)) control points from valley (0.0) to
# peak (1.0). Fractions must be strictly increasing so the ramp is continuous.
BIOME_COLOR_RAMPS = {
    "grass": (
        (0.00, (38, 92, 30)),      # Deep valley green
        (0.45, (86, 150, 58)),     # Meadow
        (0.75, (122, 98, 62)),     # Dirt
        (1.00, (140, 136, 128)),   # Exposed rock
    ),
    "desert": (
        (0.00, (166, 124, 72)),    # Dark tan
        (0.50, (212, 178, 120)),   # Tan
        (1.00, (240, 224, 182)),   # Pale sand
    ),
    "snow": (
        (0.00, (96, 96, 100)),     # Gray rock
        (0.45, (168, 170, 176)),   # Light gray
        (0.75, (222, 226, 232)),   # Old snow
        (1.00, (255, 255, 255)),   # Fresh snow
    ),
    "rocky": (
        (0.00, (58, 58, 60)),      # Dark gray
        (0.50, (112, 112, 114)),   # Mid gray
        (1.00, (180, 180, 178)),   # Light gray
    ),
    "volcanic": (
        (0.00, (28, 24, 24)),      # Basalt
        (0.55, (70, 62, 60)),      # Ash
        (0.80, (140, 36, 20)),     # Cooling lava
        (1.00, (255, 110, 30)),    # Glowing lava
    ),
}

BIOMES = tuple(BIOME_COLOR_RAMPS.keys())
