"""
Plain-Python rendition of the terrain pipeline, written independently of the
numba kernels. Tests compare the two to catch drift in either.
"""

import math

GRADIENTS = [(1, 1), (-1, 1), (1, -1), (-1, -1)] * 3


def reference_permutation(seed):
    p = list(range(256))
    state = seed % 2**32
    for i in range(255, 0, -1):
        state = (state * 1664525 + 1013904223) % 2**32
        j = state % (i + 1)
        p[i], p[j] = p[j], p[i]
    return p + p


def _fade(t):
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a, b, t):
    return a + t * (b - a)


def _dot(h, x, y):
    gx, gy = GRADIENTS[h % 12]
    return gx * x + gy * y


def reference_noise(perm, x, y):
    x0 = math.floor(x)
    y0 = math.floor(y)
    xi = x0 & 255
    yi = y0 & 255
    xf = x - x0
    yf = y - y0
    u = _fade(xf)
    v = _fade(yf)

    top = _lerp(_dot(perm[perm[xi] + yi], xf, yf), _dot(perm[perm[xi + 1] + yi], xf - 1, yf), u)
    bottom = _lerp(_dot(perm[perm[xi] + yi + 1], xf, yf - 1), _dot(perm[perm[xi + 1] + yi + 1], xf - 1, yf - 1), u)
    return _lerp(top, bottom, v)


def reference_fbm(perm, x, y, octaves):
    total = 0.0
    amp = 1.0
    freq = 1.0
    amp_sum = 0.0
    for _ in range(octaves):
        total += reference_noise(perm, x * freq, y * freq) * amp
        amp_sum += amp
        amp *= 0.5
        freq *= 2.0
    return total / amp_sum


def reference_height(perm, segments, height_scale, octaves, i, j, wavelength=0.35, origin=0.37):
    nx = origin + (i / segments) / wavelength
    ny = origin + (j / segments) / wavelength
    return reference_fbm(perm, nx, ny, octaves) * height_scale
