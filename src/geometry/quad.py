# geometry/quad.py
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from geometry.hittable import Hittable, HitRecord

class Quad(Hittable):
    """
    Planar parallelogram spanned by a corner q and two edge vectors u and v.

    The plane normal n, the offset d (n . p = d) and w = n / (n . n) are precomputed so
    the in-plane coordinates of a hit need two cross products and no per-call basis.
    """
    def __init__(self, q: Vector3, u: Vector3, v: Vector3, material):
        n = u.cross(v)
        if n.length() <= 1e-12 * u.length() * v.length() or n.length_squared() == 0:
            raise ValueError(f"Degenerate quad: edges {u!r} and {v!r} are parallel")

        self.q = q
        self.u = u
        self.v = v
        self.material = material
        self.w = n / n.dot(n)
        self.normal = n.normalize()
        self.d = self.normal.dot(q)
        self.bbox = AABB.from_points(q, q + u, q + v, q + u + v)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)
        # Parallel to the plane.
        if denom == 0:
            return None

        t = (self.d - self.normal.dot(ray.origin)) / denom
        if not ray_t.contains(t):
            return None

        p = ray.at(t)
        planar = p - self.q
        alpha = self.w.dot(planar.cross(self.v))
        beta = self.w.dot(self.u.cross(planar))
        if alpha < 0 or alpha > 1 or beta < 0 or beta > 1:
            return None

        return HitRecord(p, self.normal, t, ray, self.material, UV(alpha, beta))

    def bounding_box(self) -> AABB:
        return self.bbox
