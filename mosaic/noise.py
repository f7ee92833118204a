"""
Coherent value noise for sampling the mosaic's color field.

This is the classic sketchbook noise: random values on a wrapped 1D
lattice, cosine-interpolated, summed over a few octaves. It is smooth
under small input changes, deterministic for a given seed, and always
returns a value in [0, 1).
"""

import math

import numpy as np

# Lattice layout (y rows are offset by 16 cells in the wrapped table)
YWRAPB = 4
YWRAP = 1 << YWRAPB
TABLE_SIZE = 4095

DEFAULT_OCTAVES = 4
DEFAULT_FALLOFF = 0.5


def _scaled_cosine(t):
    return 0.5 * (1.0 - math.cos(t * math.pi))


class ValueNoise:
    """2D noise source with a seeded lookup table.

    Args:
        seed: Seed for the lattice values, None for a random field
        octaves: Number of octaves summed per sample
        falloff: Amplitude multiplier applied per octave, in (0, 0.5]
    """

    def __init__(self, seed=None, octaves=DEFAULT_OCTAVES, falloff=DEFAULT_FALLOFF):
        self.seed = seed
        rng = np.random.RandomState(seed)
        self._lattice = rng.random_sample(TABLE_SIZE + 1)
        # Plain floats are much faster than numpy scalars in the scalar loop
        self._table = self._lattice.tolist()
        self.noise_detail(octaves, falloff)

    def noise_detail(self, octaves, falloff):
        """Change the octave count and per-octave amplitude falloff"""
        if octaves < 1:
            raise ValueError(f"octaves must be at least 1, got {octaves}")
        # Above 0.5 the octave sum can reach 1 and leave the [0, 1) range
        if not 0 < falloff <= 0.5:
            raise ValueError(f"falloff must be in (0, 0.5], got {falloff}")
        self.octaves = int(octaves)
        self.falloff = falloff

    def sample(self, x, y):
        """Sample the field at (x, y).

        Scalars give a float in [0, 1). Array-likes are broadcast against
        each other and give an ndarray of samples.
        """
        if np.ndim(x) or np.ndim(y):
            return self._sample_array(x, y)
        return self._sample_scalar(x, y)

    def _sample_scalar(self, x, y):
        table = self._table
        x = abs(x)
        y = abs(y)

        xi = int(x)
        yi = int(y)
        xf = x - xi
        yf = y - yi

        result = 0.0
        amplitude = 0.5

        for _ in range(self.octaves):
            offset = xi + (yi << YWRAPB)

            rxf = _scaled_cosine(xf)
            ryf = _scaled_cosine(yf)

            n1 = table[offset & TABLE_SIZE]
            n1 += rxf * (table[(offset + 1) & TABLE_SIZE] - n1)
            n2 = table[(offset + YWRAP) & TABLE_SIZE]
            n2 += rxf * (table[(offset + YWRAP + 1) & TABLE_SIZE] - n2)
            n1 += ryf * (n2 - n1)

            result += n1 * amplitude
            amplitude *= self.falloff

            xi <<= 1
            xf *= 2
            yi <<= 1
            yf *= 2

            if xf >= 1.0:
                xi += 1
                xf -= 1
            if yf >= 1.0:
                yi += 1
                yf -= 1

        return result

    def _sample_array(self, x, y):
        table = self._lattice
        x, y = np.broadcast_arrays(np.abs(np.asarray(x, dtype=float)),
                                   np.abs(np.asarray(y, dtype=float)))

        xi = x.astype(np.int64)
        yi = y.astype(np.int64)
        xf = x - xi
        yf = y - yi

        result = np.zeros(x.shape)
        amplitude = 0.5

        for _ in range(self.octaves):
            offset = xi + (yi << YWRAPB)

            rxf = 0.5 * (1.0 - np.cos(xf * np.pi))
            ryf = 0.5 * (1.0 - np.cos(yf * np.pi))

            n1 = table[offset & TABLE_SIZE]
            n1 = n1 + rxf * (table[(offset + 1) & TABLE_SIZE] - n1)
            n2 = table[(offset + YWRAP) & TABLE_SIZE]
            n2 = n2 + rxf * (table[(offset + YWRAP + 1) & TABLE_SIZE] - n2)
            n1 = n1 + ryf * (n2 - n1)

            result += n1 * amplitude
            amplitude *= self.falloff

            xi = xi << 1
            xf = xf * 2
            yi = yi << 1
            yf = yf * 2

            x_carry = xf >= 1.0
            xi = xi + x_carry
            xf = np.where(x_carry, xf - 1, xf)
            y_carry = yf >= 1.0
            yi = yi + y_carry
            yf = np.where(y_carry, yf - 1, yf)

        return result

    __call__ = sample
