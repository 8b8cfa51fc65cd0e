# src/core/aabb.py
import math
from core.interval import Interval
from core.vector import Vector3

class AABB:
    """
    Axis-aligned bounding box stored as one Interval per axis.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: Interval = Interval.EMPTY, y: Interval = Interval.EMPTY,
                 z: Interval = Interval.EMPTY):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def from_points(cls, *points: Vector3) -> "AABB":
        """Smallest box enclosing all the given points."""
        if not points:
            raise ValueError("AABB.from_points needs at least one point")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        zs = [p.z for p in points]
        return cls(Interval(min(xs), max(xs)),
                   Interval(min(ys), max(ys)),
                   Interval(min(zs), max(zs)))

    @property
    def minimum(self) -> Vector3:
        return Vector3(self.x.min, self.y.min, self.z.min)

    @property
    def maximum(self) -> Vector3:
        return Vector3(self.x.max, self.y.max, self.z.max)

    def axis(self, n: int) -> Interval:
        if n == 0:
            return self.x
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        raise IndexError(f"Invalid AABB axis: {n}")

    def is_empty(self) -> bool:
        return self.x.is_empty() or self.y.is_empty() or self.z.is_empty()

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: narrow [t_min, t_max] by each axis' entry/exit distances.
        t_min = ray_t.min
        t_max = ray_t.max
        for a in range(3):
            slab = self.axis(a)
            origin = ray.origin[a]
            inv_d = ray.inv_direction[a]
            if math.isinf(inv_d):
                # Parallel to this slab: inside it for every t, or never.
                if origin < slab.min or origin > slab.max:
                    return False
                continue
            t0 = (slab.min - origin) * inv_d
            t1 = (slab.max - origin) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max < t_min:
                return False
        return True

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(
            Interval.surrounding(box0.x, box1.x),
            Interval.surrounding(box0.y, box1.y),
            Interval.surrounding(box0.z, box1.z)
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"


AABB.EMPTY = AABB(Interval.EMPTY, Interval.EMPTY, Interval.EMPTY)
