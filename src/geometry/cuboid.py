# geometry/cuboid.py
import math
from core.vector import Vector3
from geometry.quad import Quad
from geometry.world import HittableList

def cuboid(center: Vector3, u: Vector3, v: Vector3, w: Vector3, material) -> HittableList:
    """
    Six quads forming a parallelepiped centred on `center` with edge vectors u, v, w.

    Every face normal points out of the solid.
    """
    if u.cross(v).dot(w) < 0:
        u, v = v, u
    corner = center - u / 2 - v / 2 - w / 2

    sides = HittableList()
    sides.add(Quad(corner + w, u, v, material))   # +w
    sides.add(Quad(corner, v, u, material))       # -w
    sides.add(Quad(corner + u, v, w, material))   # +u
    sides.add(Quad(corner, w, v, material))       # -u
    sides.add(Quad(corner + v, w, u, material))   # +v
    sides.add(Quad(corner, u, w, material))       # -v
    return sides

def axis_aligned_cuboid(center: Vector3, size: Vector3, material) -> HittableList:
    return cuboid(center,
                  Vector3(size.x, 0, 0),
                  Vector3(0, size.y, 0),
                  Vector3(0, 0, size.z),
                  material)

def yaw_rotated_cuboid(center: Vector3, size: Vector3, yaw_degrees: float, material) -> HittableList:
    """Axis-aligned box of the given size rotated about the vertical axis through its center."""
    yaw = math.radians(yaw_degrees)
    u = Vector3(size.x * math.cos(yaw), 0, -size.x * math.sin(yaw))
    v = Vector3(0, size.y, 0)
    w = Vector3(size.z * math.sin(yaw), 0, size.z * math.cos(yaw))
    return cuboid(center, u, v, w, material)
