"""Unit tests for textures, Perlin noise and image loading.

Tests cover:
- Solid and checker textures, including negative coordinates
- Image lookups: row flip, clamping and edge texels
- Perlin noise range, lattice zeros, turbulence and seeding
- Loading textures from files with Pillow
"""

import random

import numpy as np
import pytest
from PIL import Image

from core.uv import UV
from core.vector import Vector3
from materials.lambertian import Lambertian
from materials.perlin import Perlin
from materials.texture_loader import create_image_material, load_texture, read_raster
from materials.textures import (
    CheckerTexture,
    ImageTexture,
    MarbleTexture,
    NoiseTexture,
    SolidTexture,
    as_texture,
)

ORIGIN_UV = UV(0.0, 0.0)

RED = Vector3(1.0, 0.0, 0.0)
GREEN = Vector3(0.0, 1.0, 0.0)
BLUE = Vector3(0.0, 0.0, 1.0)
WHITE = Vector3(1.0, 1.0, 1.0)


@pytest.fixture
def quadrants():
    """2x2 raster: red, green on the top row; blue, white on the bottom row."""
    return np.array([
        [[255, 0, 0], [0, 255, 0]],
        [[0, 0, 255], [255, 255, 255]],
    ], dtype=np.uint8)


class TestSimpleTextures:
    """Tests for solid and checker textures."""

    def test_solid(self):
        texture = SolidTexture(Vector3(0.1, 0.2, 0.3))
        assert texture.value(ORIGIN_UV, Vector3(5, 5, 5)) == Vector3(0.1, 0.2, 0.3)
        assert SolidTexture.from_rgb(0.1, 0.2, 0.3).color == Vector3(0.1, 0.2, 0.3)

    def test_as_texture(self):
        solid = SolidTexture(RED)
        assert as_texture(solid) is solid
        assert as_texture(GREEN).color == GREEN
        with pytest.raises(TypeError):
            as_texture("red")

    @pytest.mark.parametrize("point, expected", [
        (Vector3(0.5, 0.5, 0.5), "even"),
        (Vector3(1.5, 0.5, 0.5), "odd"),
        (Vector3(1.5, 1.5, 0.5), "even"),
        (Vector3(-0.5, 0.5, 0.5), "odd"),
        (Vector3(-0.5, -0.5, 0.5), "even"),
        (Vector3(0.0, 0.0, 0.0), "even"),
    ])
    def test_checker_parity(self, point, expected):
        checker = CheckerTexture(RED, BLUE, 1.0)
        assert checker.value(ORIGIN_UV, point) == (RED if expected == "even" else BLUE)

    def test_checker_scale(self):
        checker = CheckerTexture(RED, BLUE, 2.0)
        assert checker.value(ORIGIN_UV, Vector3(1.5, 0.5, 0.5)) == RED
        assert checker.value(ORIGIN_UV, Vector3(2.5, 0.5, 0.5)) == BLUE

    def test_checker_nests_textures(self):
        inner = CheckerTexture(GREEN, WHITE, 0.5)
        checker = CheckerTexture(inner, BLUE, 1.0)
        assert checker.value(ORIGIN_UV, Vector3(0.75, 0.25, 0.25)) == WHITE

    def test_checker_rejects_bad_scale(self):
        with pytest.raises(ValueError):
            CheckerTexture(RED, BLUE, 0.0)


class TestImageTexture:
    """Tests for raster lookups."""

    @pytest.mark.parametrize("uv, expected", [
        (UV(0.0, 1.0), RED),
        (UV(1.0, 1.0), GREEN),
        (UV(0.0, 0.0), BLUE),
        (UV(1.0, 0.0), WHITE),
        (UV(0.25, 0.75), RED),
        (UV(0.9, 0.1), WHITE),
    ])
    def test_lookup_flips_rows(self, quadrants, uv, expected):
        assert ImageTexture(quadrants).value(uv, Vector3(0, 0, 0)) == expected

    def test_uv_is_clamped(self, quadrants):
        texture = ImageTexture(quadrants)
        assert texture.value(UV(-1.0, 2.0), Vector3(0, 0, 0)) == RED
        assert texture.value(UV(3.0, -2.0), Vector3(0, 0, 0)) == WHITE

    def test_values_normalized(self):
        texture = ImageTexture(np.full((1, 1, 3), 51, dtype=np.uint8))
        color = texture.value(ORIGIN_UV, Vector3(0, 0, 0))
        assert color.x == pytest.approx(0.2)

    def test_alpha_channel_dropped(self):
        texture = ImageTexture(np.full((1, 1, 4), 255, dtype=np.uint8))
        assert texture.value(ORIGIN_UV, Vector3(0, 0, 0)) == WHITE

    @pytest.mark.parametrize("shape", [(2, 2), (0, 2, 3), (2, 0, 3), (2, 2, 2)])
    def test_bad_shape_raises(self, shape):
        with pytest.raises(ValueError):
            ImageTexture(np.zeros(shape, dtype=np.uint8))


class TestPerlin:
    """Tests for gradient noise."""

    def test_range(self):
        perlin = Perlin(seed=11)
        rng = random.Random(11)
        for _ in range(10000):
            p = Vector3(rng.uniform(-20, 20), rng.uniform(-20, 20), rng.uniform(-20, 20))
            assert -1.0 <= perlin.noise(p) <= 1.0

    def test_zero_on_lattice(self):
        perlin = Perlin(seed=3)
        for p in (Vector3(0, 0, 0), Vector3(3, -7, 12), Vector3(-256, 1, 300)):
            assert perlin.noise(p) == 0.0

    def test_not_constant(self):
        perlin = Perlin(seed=3)
        values = {perlin.noise(Vector3(x * 0.37, 0.5, 0.5)) for x in range(20)}
        assert len(values) > 10

    def test_turbulence_non_negative(self):
        perlin = Perlin(seed=5)
        rng = random.Random(5)
        for _ in range(500):
            p = Vector3(rng.uniform(-5, 5), rng.uniform(-5, 5), rng.uniform(-5, 5))
            assert perlin.turbulence(p) >= 0.0

    def test_seeded_tables_are_reproducible(self):
        p = Vector3(1.3, -2.7, 0.4)
        assert Perlin(seed=42).noise(p) == Perlin(seed=42).noise(p)
        assert Perlin(seed=42).perm_x == Perlin(seed=42).perm_x
        assert Perlin(seed=42).perm_x != Perlin(seed=43).perm_x

    def test_tables(self):
        perlin = Perlin(seed=1)
        assert sorted(perlin.perm_x) == list(range(256))
        assert len(perlin.ranvec) == 256
        for g in perlin.ranvec:
            assert g.length() == pytest.approx(1.0)

    @pytest.mark.parametrize("texture_class", [NoiseTexture, MarbleTexture])
    def test_noise_textures_in_unit_range(self, texture_class):
        texture = texture_class(4.0, seed=9)
        rng = random.Random(9)
        for _ in range(300):
            p = Vector3(rng.uniform(-3, 3), rng.uniform(-3, 3), rng.uniform(-3, 3))
            color = texture.value(ORIGIN_UV, p)
            assert 0.0 <= color.x <= 1.0
            assert color.x == color.y == color.z


class TestTextureLoader:
    """Tests for decoding image files."""

    def test_load_rgb(self, tmp_path):
        path = tmp_path / "solid.png"
        Image.new("RGB", (3, 2), (255, 0, 51)).save(path)
        texture = load_texture(str(path))
        assert texture.width == 3
        assert texture.height == 2
        color = texture.value(UV(0.5, 0.5), Vector3(0, 0, 0))
        assert color.x == pytest.approx(1.0)
        assert color.y == pytest.approx(0.0)
        assert color.z == pytest.approx(0.2)

    def test_greyscale_converted(self, tmp_path):
        path = tmp_path / "grey.png"
        Image.new("L", (2, 2), 255).save(path)
        assert load_texture(str(path)).value(ORIGIN_UV, Vector3(0, 0, 0)) == WHITE

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_texture(str(tmp_path / "missing.png"))

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "garbage.png"
        path.write_bytes(b"definitely not an image")
        with pytest.raises(ValueError):
            load_texture(str(path))

    def test_create_image_material(self, tmp_path):
        path = tmp_path / "solid.png"
        Image.new("RGB", (1, 1), (0, 255, 0)).save(path)
        material = create_image_material(str(path), Lambertian)
        assert isinstance(material.texture, ImageTexture)
        assert material.texture.value(ORIGIN_UV, Vector3(0, 0, 0)) == GREEN

    def test_read_raster_drops_alpha(self, tmp_path):
        path = tmp_path / "rgba.png"
        Image.new("RGBA", (4, 3), (10, 20, 30, 0)).save(path)
        raster = read_raster(path)
        assert raster.shape == (3, 4, 3)
        assert raster.dtype == np.uint8
        assert raster[0, 0].tolist() == [10, 20, 30]
