# src/geometry/world.py
from typing import Iterable, List, Optional
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from geometry.bvh import BVH
from geometry.hittable import Hittable, HitRecord

class HittableList(Hittable):
    """
    A flat list of Hittable objects, queried by linear scan.

    The list doubles as the object arena for a BVH: to_bvh() builds a tree that
    refers to the objects by index instead of sharing the list itself.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = []
        self.bbox = AABB.EMPTY
        if objects is not None:
            self.extend(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bbox = AABB.surrounding_box(self.bbox, obj.bounding_box())

    def extend(self, objects: Iterable[Hittable]):
        for obj in objects:
            self.add(obj)

    def clear(self):
        self.objects.clear()
        self.bbox = AABB.EMPTY

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def to_bvh(self, rng=None):
        return BVH(self.objects, rng=rng)

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far), rng)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.bbox
