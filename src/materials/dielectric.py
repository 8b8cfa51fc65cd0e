# src/materials/dielectric.py
import math
from typing import Tuple
from core.ray import Ray
from core.utils import reflect, refract
from core.vector import Vector3, WHITE
from materials.material import Material

def schlick(cos_theta: float, ref_idx: float) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)

class Dielectric(Material):
    """Clear refractive material (glass, water). Never absorbs."""
    def __init__(self, ref_idx: float):
        if ref_idx <= 0:
            raise ValueError(f"Refractive index must be positive, got {ref_idx}")
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec, rng) -> Tuple[Vector3, Ray]:
        # Entering the surface when the ray hits the front face
        ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)

        return WHITE, Ray(rec.p, direction, ray_in.time)
