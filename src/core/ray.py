# core/ray.py
import math
from core.vector import Vector3

def _reciprocal(value: float) -> float:
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value

class Ray:
    """
    Represents a ray in 3D space with an origin, a direction and a time value
    used for motion blur.

    The component-wise reciprocal of the direction is computed once so the slab test
    can multiply instead of divide. Zero components map to a signed infinity.
    """
    __slots__ = ("origin", "direction", "time", "inv_direction")

    def __init__(self, origin: Vector3, direction: Vector3, time: float = 0.0):
        self.origin = origin
        self.direction = direction
        self.time = time
        self.inv_direction = Vector3(
            _reciprocal(direction.x),
            _reciprocal(direction.y),
            _reciprocal(direction.z)
        )

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, time={self.time})"
