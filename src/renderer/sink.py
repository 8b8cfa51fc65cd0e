# renderer/sink.py
from typing import Protocol
import numpy as np
from PIL import Image
from core.vector import Vector3
from renderer.tone_mapping import to_rgb8

class PixelSink(Protocol):
    """Receives every finished, gamma-corrected pixel exactly once per render."""
    def set_at(self, x: int, y: int, color: Vector3) -> None:
        ...

class FrameBuffer:
    """In-memory sink that can hand the image to Pillow."""
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def set_at(self, x: int, y: int, color: Vector3) -> None:
        self.pixels[y, x] = (color.x, color.y, color.z)

    def to_image(self) -> Image.Image:
        return Image.fromarray(to_rgb8(self.pixels))

    def save(self, path: str) -> None:
        """Write the image; the format follows the file extension. OSError propagates."""
        self.to_image().save(path)
