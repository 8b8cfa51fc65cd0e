# materials/texture_loader.py
import logging
import os
from typing import Union
import numpy as np
from PIL import Image, UnidentifiedImageError
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

def read_raster(image_path: PathLike) -> np.ndarray:
    """
    Decode an image file into a (height, width, 3) uint8 RGB array.

    Palette, greyscale and alpha images are converted to plain RGB.

    Raises:
        FileNotFoundError: the path does not exist
        ValueError: Pillow cannot decode the file
    """
    if not os.path.isfile(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            raster = np.asarray(img.convert("RGB"), dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Cannot decode texture {image_path}: {e}") from e
    return raster

def load_texture(image_path: PathLike) -> ImageTexture:
    """Image texture backed by the decoded file; see read_raster for the errors raised."""
    raster = read_raster(image_path)
    logger.info("loaded texture %s (%dx%d)", image_path, raster.shape[1], raster.shape[0])
    return ImageTexture(raster)

def create_image_material(image_path: PathLike, material_class, **material_params):
    """
    Build a material whose albedo (or emission) is an image texture.

    Args:
        image_path: image file to wrap
        material_class: any material taking a texture first, e.g. Lambertian or DiffuseLight
        **material_params: remaining constructor arguments, e.g. fuzz for Metal
    """
    return material_class(load_texture(image_path), **material_params)
