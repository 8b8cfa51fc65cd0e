# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from core.vector import Vector3
from core.uv import UV
from materials.perlin import Perlin

class Texture:
    """Base class for all textures."""
    def value(self, uv: UV, p: Vector3) -> Vector3:
        """Color of the texture at surface coordinates uv and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a SolidTexture; passes textures through."""
    if isinstance(albedo, Texture):
        return albedo
    if isinstance(albedo, Vector3):
        return SolidTexture(albedo)
    raise TypeError(f"Expected a Vector3 color or a Texture, got {type(albedo).__name__}")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "SolidTexture":
        return cls(Vector3(r, g, b))

    def value(self, uv: UV, p: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A 3-D checker pattern: space is cut into cubes of side `scale` and alternate
    cubes take the even or odd sub-texture.
    """
    def __init__(self, even: Union[Vector3, Texture], odd: Union[Vector3, Texture],
                 scale: float = 1.0):
        if scale <= 0:
            raise ValueError(f"Checker scale must be positive, got {scale}")
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.inv_scale = 1.0 / scale

    def value(self, uv: UV, p: Vector3) -> Vector3:
        x = math.floor(self.inv_scale * p.x)
        y = math.floor(self.inv_scale * p.y)
        z = math.floor(self.inv_scale * p.z)
        if (x + y + z) % 2 == 0:
            return self.even.value(uv, p)
        return self.odd.value(uv, p)

class ImageTexture(Texture):
    """
    A texture backed by a decoded RGB raster of shape (height, width, 3), uint8.

    Decoding files is left to materials.texture_loader.
    """
    def __init__(self, data: np.ndarray):
        data = np.asarray(data)
        if data.ndim != 3 or data.shape[2] < 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"Image texture needs a (height, width, 3) raster, got shape {data.shape}")
        # Normalize to [0,1]
        self.data = data[:, :, :3].astype(np.float64) / 255.0
        self.height = data.shape[0]
        self.width = data.shape[1]

    def value(self, uv: UV, p: Vector3) -> Vector3:
        u = min(max(uv.u, 0.0), 1.0)
        v = 1.0 - min(max(uv.v, 0.0), 1.0)  # Image rows run top to bottom

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        r, g, b = self.data[y, x]
        return Vector3(float(r), float(g), float(b))

class NoiseTexture(Texture):
    """Grey Perlin noise remapped from [-1, 1] to [0, 1]."""
    def __init__(self, scale: float = 1.0, seed: Optional[int] = None):
        self.noise = Perlin(seed)
        self.scale = scale

    def value(self, uv: UV, p: Vector3) -> Vector3:
        n = 0.5 * (1.0 + self.noise.noise(p * self.scale))
        return Vector3(n, n, n)

class MarbleTexture(NoiseTexture):
    """A marble-like procedural texture."""
    def __init__(self, scale: float = 4.0, turbulence_depth: int = 7, seed: Optional[int] = None):
        super().__init__(scale, seed)
        self.turbulence_depth = turbulence_depth

    def value(self, uv: UV, p: Vector3) -> Vector3:
        phase = self.scale * p.z + 10.0 * self.noise.turbulence(p, self.turbulence_depth)
        n = 0.5 * (1.0 + math.sin(phase))
        return Vector3(n, n, n)
