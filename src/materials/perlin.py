# materials/perlin.py
import math
from typing import Optional
import numpy as np
from core.vector import Vector3

POINT_COUNT = 256

class Perlin:
    """
    Gradient noise over a 256-cell lattice.

    Each axis has its own permutation table; the XOR of the three permuted lattice
    indices selects one of 256 random unit gradients. Values are Hermite-smoothed
    trilinear blends of gradient/offset dot products, so noise() stays within [-1, 1].
    """
    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        if rng is None:
            rng = np.random.default_rng(seed)
        gradients = rng.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        lengths = np.linalg.norm(gradients, axis=1)
        lengths[lengths == 0] = 1.0
        gradients = gradients / lengths[:, np.newaxis]

        # Plain lists: scalar indexing into them is much faster than into ndarrays.
        self.ranvec = [Vector3(*g) for g in gradients.tolist()]
        self.perm_x = rng.permutation(POINT_COUNT).tolist()
        self.perm_y = rng.permutation(POINT_COUNT).tolist()
        self.perm_z = rng.permutation(POINT_COUNT).tolist()

    def noise(self, p: Vector3) -> float:
        fx = math.floor(p.x)
        fy = math.floor(p.y)
        fz = math.floor(p.z)
        u = p.x - fx
        v = p.y - fy
        w = p.z - fz
        i = int(fx)
        j = int(fy)
        k = int(fz)

        # Hermite smoothing
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)

        accum = 0.0
        for di in (0, 1):
            wx = uu if di else 1 - uu
            px = self.perm_x[(i + di) & 255]
            for dj in (0, 1):
                wy = vv if dj else 1 - vv
                py = self.perm_y[(j + dj) & 255]
                for dk in (0, 1):
                    wz = ww if dk else 1 - ww
                    g = self.ranvec[px ^ py ^ self.perm_z[(k + dk) & 255]]
                    accum += wx * wy * wz * (g.x * (u - di) + g.y * (v - dj) + g.z * (w - dk))
        return accum

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        """Sum of `depth` octaves at halving amplitude and doubling frequency, made non-negative."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)
