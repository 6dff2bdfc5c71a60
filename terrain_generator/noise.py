# terrain_generator/noise.py

"""
================================================================================
NOISE GENERATION UTILITIES
================================================================================
This module provides the seeded permutation table, 2D gradient (Perlin) noise
and fractal Brownian motion built on top of it. It is designed to be a pure,
stateless utility: every function takes the permutation table explicitly.

Data Contract:
---------------
- Inputs:
    - seed: A signed 32-bit integer (permutation builder only).
    - perm: A 512-entry uint8 permutation table.
    - x, y: Scalar coordinates, or 2D NumPy arrays of coordinates.
    - octaves: Number of fractal layers.
- Outputs:
    - Noise values, approximately in the range [-1, 1]. No clamp is applied.
- Side Effects: None.
- Invariants: Given the same table and coordinates, the output is
  bit-identical. Grid outputs match the shape of the input arrays.
================================================================================
"""

import numpy as np
from numba import njit

from . import config as DEFAULTS

# The four diagonals, each listed three times so a hash range of 12 keeps a
# uniform angular distribution.
_GRADIENT_VECTORS = np.array(
    [[1, 1], [-1, 1], [1, -1], [-1, -1]] * 3, dtype=np.float64
)

# Frozen into the compiled kernels as constants.
_PERSISTENCE = DEFAULTS.FBM_PERSISTENCE
_LACUNARITY = DEFAULTS.FBM_LACUNARITY


def build_permutation_table(seed: int) -> np.ndarray:
    """
    Builds the 512-entry permutation table for a seed.

    A 256-entry identity table is Fisher-Yates shuffled with a 32-bit linear
    congruential generator, then duplicated so corner lookups never wrap.
    The LCG state is kept in [0, 2**32) by masking, which reproduces
    two's-complement wraparound exactly for negative seeds too.
    """
    p = list(range(DEFAULTS.PERMUTATION_SIZE))
    state = seed & DEFAULTS.UINT32_MASK
    for i in range(DEFAULTS.PERMUTATION_SIZE - 1, 0, -1):
        state = (state * DEFAULTS.LCG_MULTIPLIER + DEFAULTS.LCG_INCREMENT) & DEFAULTS.UINT32_MASK
        j = state % (i + 1)
        p[i], p[j] = p[j], p[i]

    base = np.array(p, dtype=np.uint8)
    return np.concatenate([base, base])


@njit
def _lerp(a, b, t):
    "Linear interpolation."
    return a + t * (b - a)


@njit
def _fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)


@njit
def _gradient(h, x, y):
    """Dot product between the hashed gradient vector and a corner offset."""
    g = _GRADIENT_VECTORS[h % 12]
    return g[0] * x + g[1] * y


@njit
def gradient_noise_2d(perm, x, y):
    """
    Samples 2D gradient noise at a single continuous coordinate.
    """
    x_floor = np.floor(x)
    y_floor = np.floor(y)
    xi = int(x_floor) & 255
    yi = int(y_floor) & 255

    xf = x - x_floor
    yf = y - y_floor

    u = _fade(xf)
    v = _fade(yf)

    h00 = perm[perm[xi] + yi]
    h01 = perm[perm[xi] + yi + 1]
    h10 = perm[perm[xi + 1] + yi]
    h11 = perm[perm[xi + 1] + yi + 1]

    g00 = _gradient(h00, xf, yf)
    g10 = _gradient(h10, xf - 1, yf)
    g01 = _gradient(h01, xf, yf - 1)
    g11 = _gradient(h11, xf - 1, yf - 1)

    return _lerp(_lerp(g00, g10, u), _lerp(g01, g11, u), v)


@njit
def fbm_2d(perm, x, y, octaves):
    """
    Fractal Brownian motion at a single coordinate, normalized by the summed
    amplitude so the result stays in the same range for any octave count.
    """
    value = 0.0
    amplitude = 1.0
    frequency = 1.0
    total_amplitude = 0.0

    for _ in range(octaves):
        value += gradient_noise_2d(perm, x * frequency, y * frequency) * amplitude
        total_amplitude += amplitude
        amplitude *= _PERSISTENCE
        frequency *= _LACUNARITY

    return value / total_amplitude


@njit
def gradient_noise_grid(perm, x, y):
    """Single-octave gradient noise over 2D coordinate arrays."""
    rows, cols = x.shape
    out = np.zeros((rows, cols))
    for i in range(rows):
        for j in range(cols):
            out[i, j] = gradient_noise_2d(perm, x[i, j], y[i, j])
    return out


@njit
def fbm_grid(perm, x, y, octaves):
    """
    Fractal noise over 2D coordinate arrays.
    This function is JIT-compiled with Numba; the explicit loops compile to
    efficient machine code.
    """
    rows, cols = x.shape
    out = np.zeros((rows, cols))
    for i in range(rows):
        for j in range(cols):
            out[i, j] = fbm_2d(perm, x[i, j], y[i, j], octaves)
    return out
