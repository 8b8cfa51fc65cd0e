# src/geometry/bvh.py
import logging
import random
from typing import List, Optional, Sequence
from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class BVHNode:
    """
    One node of the hierarchy. Leaves carry the arena index of a single object;
    internal nodes carry two children. Every node carries the union box of its subtree.
    """
    __slots__ = ("box", "left", "right", "index")

    def __init__(self, box: AABB, left: "BVHNode" = None, right: "BVHNode" = None,
                 index: int = -1):
        self.box = box
        self.left = left
        self.right = right
        self.index = index

    @property
    def is_leaf(self) -> bool:
        return self.index >= 0

    def hit(self, objects: Sequence[Hittable], ray: Ray, ray_t: Interval,
            rng=None) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        if self.is_leaf:
            return objects[self.index].hit(ray, ray_t, rng)

        hit_left = self.left.hit(objects, ray, ray_t, rng)
        if hit_left is None:
            return self.right.hit(objects, ray, ray_t, rng)

        # Only a strictly closer hit on the right can replace the left one.
        hit_right = self.right.hit(objects, ray, Interval(ray_t.min, hit_left.t), rng)
        return hit_right if hit_right is not None else hit_left

    def depth(self) -> int:
        if self.is_leaf:
            return 1
        return 1 + max(self.left.depth(), self.right.depth())


def _build(indices: List[int], boxes: List[AABB], rng: random.Random) -> BVHNode:
    if len(indices) == 1:
        index = indices[0]
        return BVHNode(boxes[index], index=index)

    axis = rng.randrange(3)
    indices = sorted(indices, key=lambda i: boxes[i].axis(axis).min)

    mid = len(indices) // 2
    left = _build(indices[:mid], boxes, rng)
    right = _build(indices[mid:], boxes, rng)
    return BVHNode(AABB.surrounding_box(left.box, right.box), left, right)


class BVH(Hittable):
    """
    Bounding volume hierarchy over an arena of objects.

    The arena is copied into a tuple at construction and never mutated afterwards, so a
    built tree can be shared read-only between render workers.
    """
    def __init__(self, objects: Sequence[Hittable], rng: Optional[random.Random] = None):
        if len(objects) == 0:
            raise ValueError("Cannot build a BVH from an empty object list")
        if rng is None:
            rng = random.Random()

        self.objects = tuple(objects)
        boxes = [obj.bounding_box() for obj in self.objects]
        self.root = _build(list(range(len(self.objects))), boxes, rng)
        logger.info("built BVH over %d objects, depth %d", len(self.objects), self.root.depth())

    def hit(self, ray: Ray, ray_t: Interval, rng=None) -> Optional[HitRecord]:
        return self.root.hit(self.objects, ray, ray_t, rng)

    def bounding_box(self) -> AABB:
        return self.root.box
