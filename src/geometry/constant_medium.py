# geometry/constant_medium.py
import math
import random
from typing import Optional, Union
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable, HitRecord
from materials.isotropic import Isotropic
from materials.textures import Texture

class ConstantMedium(Hittable):
    """
    A volume of constant density bounded by another hittable (smoke, fog).

    A ray crossing the boundary scatters after an exponentially distributed free path,
    or passes through if that path is longer than the chord inside the boundary.
    The boundary must be convex.
    """
    def __init__(self, boundary: Hittable, density: float, albedo: Union[Vector3, Texture]):
        if density <= 0:
            raise ValueError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        if rng is None:
            rng = random

        rec1 = self.boundary.hit(ray, Interval.UNIVERSE, rng)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, Interval(rec1.t + 0.0001, math.inf), rng)
        if rec2 is None:
            return None

        t_enter = max(rec1.t, ray_t.min)
        t_exit = min(rec2.t, ray_t.max)
        if t_enter >= t_exit:
            return None
        t_enter = max(t_enter, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        hit_distance = self.neg_inv_density * math.log(1.0 - rng.random())
        if hit_distance > distance_inside_boundary:
            return None

        t = t_enter + hit_distance / ray_length
        # Normal is arbitrary; the isotropic phase function ignores it.
        return HitRecord(ray.at(t), Vector3(1, 0, 0), t, None, self.phase_function)

    def bounding_box(self) -> AABB:
        return self.boundary.bounding_box()
