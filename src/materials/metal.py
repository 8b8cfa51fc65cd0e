# materials/metal.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_unit_vector
from materials.material import Material
from materials.textures import Texture, as_texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.

    fuzz perturbs the mirror direction; it is clamped to [0, 1].
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Vector3, Ray]]:
        reflected = reflect(ray_in.direction, rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz

        # Absorb the ray if fuzz pushed it below the surface
        if reflected.dot(rec.normal) <= 0:
            return None

        scattered = Ray(rec.p, reflected, ray_in.time)
        return self.texture.value(rec.uv, rec.p), scattered
