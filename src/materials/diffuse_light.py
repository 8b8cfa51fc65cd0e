# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from core.ray import Ray
from core.vector import Vector3, WHITE
from core.uv import UV
from materials.material import Material
from materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.texture = as_texture(emit)

    @classmethod
    def white(cls, intensity: float = 1.0) -> "DiffuseLight":
        return cls(WHITE * intensity)

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Vector3, Ray]]:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, uv: UV, p: Vector3) -> Vector3:
        """
        Return the emitted radiance from the texture at the hit point.
        """
        return self.texture.value(uv, p)
