# geometry/hittable.py
from typing import Optional
from core.aabb import AABB
from core.interval import Interval
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV

class HitRecord:
    """
    Records details of a ray-object intersection.

    The stored normal always opposes the incoming ray. front_face tells whether the
    geometric (outward) normal already did, i.e. whether the ray arrived from outside.
    Without a ray the normal is stored as given and counts as a front face.
    """
    __slots__ = ("p", "normal", "t", "uv", "front_face", "material")

    def __init__(self, p: Vector3, outward_normal: Vector3, t: float, ray: Optional[Ray],
                 material=None, uv: Optional[UV] = None):
        self.p = p              # Intersection point
        self.t = t              # Ray parameter at intersection
        self.uv = uv if uv is not None else UV(0.0, 0.0)
        self.material = material
        self.front_face = True
        self.normal = outward_normal
        if ray is not None:
            self.set_face_normal(ray, outward_normal)

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, front_face={self.front_face})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    rng is only consumed by objects whose intersection is stochastic
    (participating media); aggregates pass it through.
    """
    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
