# camera/camera.py
import math
from typing import Optional
from core.vector import Vector3, WHITE
from core.ray import Ray
from core.utils import random_in_unit_disk
from camera.settings import RenderSettings

SKY_BLUE = Vector3(0.5, 0.7, 1.0)

class Camera:
    """
    Thin-lens perspective camera.

    All derived vectors (viewport basis, pixel deltas, first pixel center, defocus disk)
    are recomputed by set(); nothing else mutates the camera, so one instance can be
    shared by every render worker.
    """
    def __init__(self, vfov: float, settings: RenderSettings,
                 background: Optional[Vector3] = None):
        self.vfov = vfov  # Vertical field of view in degrees
        self.settings = settings
        self.background = background
        self.set(Vector3(0, 0, 0), Vector3(0, 0, -1), focus_dist=10.0, defocus_angle=0.0)

    @property
    def image_width(self) -> int:
        return self.settings.width

    @property
    def image_height(self) -> int:
        return self.settings.height

    def set(self, look_from: Vector3, look_at: Vector3, focus_dist: float,
            defocus_angle: float = 0.0, up: Vector3 = Vector3(0, 1, 0)):
        """Places the camera and recomputes the projection geometry."""
        if focus_dist <= 0:
            raise ValueError(f"focus_dist must be positive, got {focus_dist}")
        forward = look_from - look_at
        if forward.near_zero():
            raise ValueError("look_from and look_at must be distinct points")
        right = up.cross(forward)
        if right.near_zero():
            raise ValueError("up vector must not be parallel to the viewing direction")

        self.look_from = look_from
        self.look_at = look_at
        self.up_hint = up
        self.focus_dist = focus_dist
        self.defocus_angle = defocus_angle

        # Orthonormal basis; the camera looks along -w.
        self.w = forward.normalize()
        self.u = right.normalize()
        self.v = self.w.cross(self.u)

        # Compute viewport dimensions based on fov, placed on the focus plane
        h = math.tan(math.radians(self.vfov) / 2)
        viewport_height = 2.0 * h * focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height  # Rows run downwards

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (look_from - self.w * focus_dist
                               - viewport_u / 2 - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = focus_dist * math.tan(math.radians(defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def set_background(self, color: Optional[Vector3]):
        """Constant color for escaping rays; None restores the sky gradient."""
        self.background = color

    def get_ray(self, x: int, y: int, rng) -> Ray:
        """Ray through a random point of pixel (x, y), from the lens disk, at a random time."""
        offset_x = rng.random() - 0.5
        offset_y = rng.random() - 0.5
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (x + offset_x)
                        + self.pixel_delta_v * (y + offset_y))

        if self.defocus_angle <= 0:
            ray_origin = self.look_from
        else:
            p = random_in_unit_disk(rng)
            ray_origin = self.look_from + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

        return Ray(ray_origin, pixel_sample - ray_origin, rng.random())

    def background_color(self, ray: Ray) -> Vector3:
        if self.background is not None:
            return self.background
        unit_direction = ray.direction.normalize()
        a = 0.5 * (unit_direction.y + 1.0)
        return WHITE.lerp(SKY_BLUE, a)
