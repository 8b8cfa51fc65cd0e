"""Unit tests for spheres.

Tests cover:
- Hit distance, point and normal orientation
- Misses and the open hit interval
- Rays starting inside the sphere
- Moving spheres and their bounding boxes
- Sphere texture coordinates
"""

import math

import pytest

from core.aabb import AABB
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3
from geometry.sphere import Sphere, sphere_uv
from materials.lambertian import Lambertian


@pytest.fixture
def material():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


class TestSphereHit:
    """Tests for ray-sphere intersection."""

    def test_hit_from_outside(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, material)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        rec = sphere.hit(ray, Interval(0.001, math.inf))

        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert rec.p.z == pytest.approx(1.0)
        assert rec.normal == Vector3(0, 0, 1)
        assert rec.front_face
        assert rec.normal.dot(ray.direction) < 0
        assert rec.material is material

    def test_miss(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, material)
        ray = Ray(Vector3(0, 2, 5), Vector3(0, 0, -1))
        assert sphere.hit(ray, Interval(0.001, math.inf)) is None

    def test_sphere_behind_ray(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, material)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, 1))
        assert sphere.hit(ray, Interval(0.001, math.inf)) is None

    def test_far_root_when_near_root_excluded(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, material)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        rec = sphere.hit(ray, Interval(4.5, math.inf))
        assert rec.t == pytest.approx(6.0)
        assert not rec.front_face

    def test_interval_bounds_are_exclusive(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, material)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert sphere.hit(ray, Interval(0.001, 4.0)) is None

    def test_from_inside_reports_back_face(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 2.0, material)
        ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))
        rec = sphere.hit(ray, Interval(0.001, math.inf))

        assert rec.t == pytest.approx(2.0)
        assert not rec.front_face
        assert rec.normal == Vector3(-1, 0, 0)
        assert rec.normal.dot(ray.direction) < 0

    def test_unnormalized_direction(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, material)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -2))
        rec = sphere.hit(ray, Interval(0.001, math.inf))
        assert rec.t == pytest.approx(2.0)
        assert rec.normal.length() == pytest.approx(1.0)

    def test_negative_radius_clamped(self, material):
        sphere = Sphere(Vector3(0, 0, 0), -1.0, material)
        assert sphere.radius == 0.0
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert sphere.hit(ray, Interval(0.001, math.inf)) is None


class TestMovingSphere:
    """Tests for spheres with linear motion."""

    def test_center_at(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, material, Vector3(0, 2, 0))
        assert sphere.center_at(0.0) == Vector3(0, 0, 0)
        assert sphere.center_at(0.5) == Vector3(0, 1, 0)
        assert sphere.center_at(1.0) == Vector3(0, 2, 0)

    def test_static_sphere_ignores_time(self, material):
        sphere = Sphere(Vector3(1, 2, 3), 1.0, material)
        assert sphere.center_at(0.7) == Vector3(1, 2, 3)

    def test_hit_depends_on_ray_time(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 0.5, material, Vector3(0, 3, 0))
        early = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1), time=0.0)
        late = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1), time=1.0)
        assert sphere.hit(early, Interval(0.001, math.inf)) is not None
        assert sphere.hit(late, Interval(0.001, math.inf)) is None

    def test_bounding_box_covers_both_ends(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, material, Vector3(4, 0, 0))
        expected = AABB.from_points(Vector3(-1, -1, -1), Vector3(5, 1, 1))
        assert sphere.bounding_box() == expected

    def test_static_bounding_box(self, material):
        sphere = Sphere(Vector3(1, 2, 3), 2.0, material)
        assert sphere.bounding_box() == AABB.from_points(Vector3(-1, 0, 1), Vector3(3, 4, 5))


class TestSphereUV:
    """Tests for the sphere texture mapping."""

    @pytest.mark.parametrize("point, u, v", [
        (Vector3(1, 0, 0), 0.5, 0.5),
        (Vector3(0, 1, 0), None, 1.0),
        (Vector3(0, -1, 0), None, 0.0),
        (Vector3(0, 0, 1), 0.25, 0.5),
        (Vector3(0, 0, -1), 0.75, 0.5),
    ])
    def test_known_points(self, point, u, v):
        uv = sphere_uv(point)
        if u is not None:
            assert uv.u == pytest.approx(u)
        assert uv.v == pytest.approx(v)

    def test_range(self, rng):
        for _ in range(200):
            p = Vector3(rng.gauss(0, 1), rng.gauss(0, 1), rng.gauss(0, 1)).normalize()
            uv = sphere_uv(p)
            assert 0.0 <= uv.u <= 1.0
            assert 0.0 <= uv.v <= 1.0

    def test_hit_record_carries_uv(self, material):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, material)
        ray = Ray(Vector3(5, 0, 0), Vector3(-1, 0, 0))
        rec = sphere.hit(ray, Interval(0.001, math.inf))
        assert rec.uv.u == pytest.approx(0.5)
        assert rec.uv.v == pytest.approx(0.5)
