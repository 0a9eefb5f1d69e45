"""Seedable 3D coherent noise for the curve field."""

import time

from opensimplex import OpenSimplex


class NoiseField:
    """Callable 3D OpenSimplex noise.

    ``field(x, y, z)`` returns a value in [-1, 1]. The generator passes the
    parameter seed as ``z``, so one field serves every parameter seed.

    Args:
        seed: Integer seed of the underlying noise permutation. Derived
            from the current time when omitted.
    """

    def __init__(self, seed=None):
        if seed is None:
            seed = time.time_ns() % (2**31)
        self.seed = int(seed)
        self._simplex = OpenSimplex(seed=self.seed)

    def __call__(self, x, y, z):
        value = self._simplex.noise3(x, y, z)
        return max(-1.0, min(1.0, value))

    def __repr__(self):
        return f"NoiseField(seed={self.seed})"
