# materials/material.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3, BLACK
from core.uv import UV

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Vector3, Ray]]:
        """
        Computes the attenuation and scattered ray for a hit.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, uv: UV, p: Vector3) -> Vector3:
        """
        Radiance emitted at the hit point. Black for everything but lights.
        """
        return BLACK
