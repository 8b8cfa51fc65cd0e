# geometry/sphere.py
import math
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from geometry.hittable import Hittable, HitRecord

def sphere_uv(p: Vector3) -> UV:
    """
    Maps a point on the unit sphere to texture coordinates.

    u runs around the Y axis starting at X = -1; v runs from Y = -1 to Y = +1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    When center1 is given the sphere moves linearly from center (time 0) to
    center1 (time 1) and is sampled at each ray's time.
    """
    def __init__(self, center: Vector3, radius: float, material,
                 center1: Optional[Vector3] = None):
        self.center = center
        self.radius = max(0.0, radius)
        self.material = material
        self.is_moving = center1 is not None
        self.center_vec = (center1 - center) if self.is_moving else Vector3(0, 0, 0)

        offset = Vector3(self.radius, self.radius, self.radius)
        self.bbox = AABB.from_points(center - offset, center + offset)
        if self.is_moving:
            box1 = AABB.from_points(center1 - offset, center1 + offset)
            self.bbox = AABB.surrounding_box(self.bbox, box1)

    def center_at(self, time: float) -> Vector3:
        if not self.is_moving:
            return self.center
        return self.center + self.center_vec * time

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        center = self.center_at(ray.time)
        oc = ray.origin - center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0 or a == 0 or self.radius == 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if not ray_t.surrounds(root):
            root = (-half_b + sqrt_disc) / a
            if not ray_t.surrounds(root):
                return None

        p = ray.at(root)
        outward_normal = (p - center) / self.radius
        return HitRecord(p, outward_normal, root, ray, self.material, sphere_uv(outward_normal))

    def bounding_box(self) -> AABB:
        return self.bbox
