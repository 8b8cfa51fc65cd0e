from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere
from geometry.quad import Quad
from geometry.bvh import BVH, BVHNode
from geometry.world import HittableList
from geometry.cuboid import cuboid, axis_aligned_cuboid, yaw_rotated_cuboid
from geometry.constant_medium import ConstantMedium
