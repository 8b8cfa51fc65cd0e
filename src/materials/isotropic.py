# materials/isotropic.py
from typing import Tuple, Union
from core.ray import Ray
from core.utils import random_unit_vector
from core.vector import Vector3
from materials.material import Material
from materials.textures import Texture, as_texture

class Isotropic(Material):
    """Phase function of a participating medium: scatters uniformly in every direction."""
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng) -> Tuple[Vector3, Ray]:
        scattered = Ray(rec.p, random_unit_vector(rng), ray_in.time)
        return self.texture.value(rec.uv, rec.p), scattered
