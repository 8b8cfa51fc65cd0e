# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit
from core.vector import Vector3

@njit
def gamma_correct_kernel(linear_image, output_image, inv_gamma):
    """
    Gamma-correct a (n, 3) linear radiance array into output_image, clamped to [0, 1].
    NaN and negative samples map to 0.
    """
    for i in range(linear_image.shape[0]):
        for c in range(3):
            value = linear_image[i, c]
            if not value > 0.0:
                output_image[i, c] = 0.0
                continue
            value = value ** inv_gamma
            output_image[i, c] = min(value, 1.0)

def gamma_correct(linear, gamma: float = 2.0) -> np.ndarray:
    """
    Apply gamma correction to a linear radiance buffer of any shape ending in 3.

    Linear values are never clamped upstream; this is the single point where the
    image is brought into [0, 1].
    """
    linear = np.ascontiguousarray(linear, dtype=np.float64)
    flat = linear.reshape(-1, 3)
    out = np.empty_like(flat)
    gamma_correct_kernel(flat, out, 1.0 / gamma)
    return out.reshape(linear.shape)

def linear_to_gamma(color: Vector3, gamma: float = 2.0) -> Vector3:
    """Scalar counterpart of gamma_correct for a single color."""
    def channel(value: float) -> float:
        if not value > 0.0:
            return 0.0
        return min(math.pow(value, 1.0 / gamma), 1.0)
    return Vector3(channel(color.x), channel(color.y), channel(color.z))

def to_rgb8(image: np.ndarray) -> np.ndarray:
    """Convert a [0, 1] float image to 8-bit channels."""
    return np.floor(np.clip(image, 0.0, 1.0) * 255.999).astype(np.uint8)
