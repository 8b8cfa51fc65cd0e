# main.py
import argparse
import logging
import random
import sys
from core.vector import Vector3
from camera.camera import Camera
from camera.settings import QUALITY_LEVELS, RenderSettings
from geometry.constant_medium import ConstantMedium
from geometry.cuboid import yaw_rotated_cuboid
from geometry.quad import Quad
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.texture_loader import create_image_material
from materials.textures import CheckerTexture, MarbleTexture, NoiseTexture
from renderer.raytracer import Renderer
from renderer.sink import FrameBuffer

logger = logging.getLogger("main")

BLACK_BACKGROUND = Vector3(0, 0, 0)

# Each scene returns (world, vfov, look_from, look_at, focus_dist, defocus_angle, background).

def bouncing_spheres(rng: random.Random, args):
    world = HittableList()
    checker = CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9), 0.32)
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Vector3(rng.random(), rng.random(), rng.random()) * \
                         Vector3(rng.random(), rng.random(), rng.random())
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = Vector3(rng.uniform(0.5, 1), rng.uniform(0.5, 1), rng.uniform(0.5, 1))
                material = Metal(albedo, rng.uniform(0, 0.5))
            else:
                material = Dielectric(1.5)

            if rng.random() < 0.2:
                center1 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(Sphere(center, 0.2, material, center1))
            else:
                world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))
    return world, 20.0, Vector3(13, 2, 3), Vector3(0, 0, 0), 10.0, 0.6, None

def checkered_spheres(rng: random.Random, args):
    world = HittableList()
    checker = Lambertian(CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9), 0.32))
    world.add(Sphere(Vector3(0, -10, 0), 10, checker))
    world.add(Sphere(Vector3(0, 10, 0), 10, checker))
    return world, 20.0, Vector3(13, 2, 3), Vector3(0, 0, 0), 10.0, 0.0, None

def earth(rng: random.Random, args):
    if not args.texture:
        raise SystemExit("the earth scene needs --texture PATH")
    surface = create_image_material(args.texture, Lambertian)
    world = HittableList([Sphere(Vector3(0, 0, 0), 2, surface)])
    return world, 20.0, Vector3(0, 0, 12), Vector3(0, 0, 0), 12.0, 0.0, None

def perlin_spheres(rng: random.Random, args):
    marble = Lambertian(MarbleTexture(4.0, seed=args.seed))
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, marble))
    world.add(Sphere(Vector3(0, 2, 0), 2, marble))
    return world, 20.0, Vector3(13, 2, 3), Vector3(0, 0, 0), 10.0, 0.0, None

def quads(rng: random.Random, args):
    world = HittableList()
    world.add(Quad(Vector3(-3, -2, 5), Vector3(0, 0, -4), Vector3(0, 4, 0), Lambertian(Vector3(1.0, 0.2, 0.2))))
    world.add(Quad(Vector3(-2, -2, 0), Vector3(4, 0, 0), Vector3(0, 4, 0), Lambertian(Vector3(0.2, 1.0, 0.2))))
    world.add(Quad(Vector3(3, -2, 1), Vector3(0, 0, 4), Vector3(0, 4, 0), Lambertian(Vector3(0.2, 0.2, 1.0))))
    world.add(Quad(Vector3(-2, 3, 1), Vector3(4, 0, 0), Vector3(0, 0, 4), Lambertian(Vector3(1.0, 0.5, 0.0))))
    world.add(Quad(Vector3(-2, -3, 5), Vector3(4, 0, 0), Vector3(0, 0, -4), Lambertian(Vector3(0.2, 0.8, 0.8))))
    return world, 80.0, Vector3(0, 0, 9), Vector3(0, 0, 0), 9.0, 0.0, None

def simple_light(rng: random.Random, args):
    noise = Lambertian(NoiseTexture(4.0, seed=args.seed))
    light = DiffuseLight(Vector3(4, 4, 4))
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, noise))
    world.add(Sphere(Vector3(0, 2, 0), 2, noise))
    world.add(Quad(Vector3(3, 1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), light))
    world.add(Sphere(Vector3(0, 7, 0), 2, light))
    look_from = Vector3(26, 3, 6)
    look_at = Vector3(0, 2, 0)
    return world, 20.0, look_from, look_at, (look_from - look_at).length(), 0.0, BLACK_BACKGROUND

def _cornell_walls(world: HittableList, light_intensity: float):
    red = Lambertian(Vector3(0.65, 0.05, 0.05))
    white = Lambertian(Vector3(0.73, 0.73, 0.73))
    green = Lambertian(Vector3(0.12, 0.45, 0.15))
    light = DiffuseLight.white(light_intensity)

    world.add(Quad(Vector3(555, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), green))
    world.add(Quad(Vector3(0, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), red))
    world.add(Quad(Vector3(343, 554, 332), Vector3(-130, 0, 0), Vector3(0, 0, -105), light))
    world.add(Quad(Vector3(0, 0, 0), Vector3(555, 0, 0), Vector3(0, 0, 555), white))
    world.add(Quad(Vector3(555, 555, 555), Vector3(-555, 0, 0), Vector3(0, 0, -555), white))
    world.add(Quad(Vector3(0, 0, 555), Vector3(555, 0, 0), Vector3(0, 555, 0), white))
    return white

def cornell_box(rng: random.Random, args):
    world = HittableList()
    white = _cornell_walls(world, 15.0)
    world.add(yaw_rotated_cuboid(Vector3(212.5, 82.5, 147.5), Vector3(165, 165, 165), -18, white))
    world.add(yaw_rotated_cuboid(Vector3(347.5, 165, 377.5), Vector3(165, 330, 165), 15, white))
    return world, 40.0, Vector3(278, 278, -800), Vector3(278, 278, 0), 800.0, 0.0, BLACK_BACKGROUND

def cornell_smoke(rng: random.Random, args):
    world = HittableList()
    white = _cornell_walls(world, 7.0)
    box1 = yaw_rotated_cuboid(Vector3(212.5, 82.5, 147.5), Vector3(165, 165, 165), -18, white)
    box2 = yaw_rotated_cuboid(Vector3(347.5, 165, 377.5), Vector3(165, 330, 165), 15, white)
    world.add(ConstantMedium(box1, 0.01, Vector3(0, 0, 0)))
    world.add(ConstantMedium(box2, 0.01, Vector3(1, 1, 1)))
    return world, 40.0, Vector3(278, 278, -800), Vector3(278, 278, 0), 800.0, 0.0, BLACK_BACKGROUND

SCENES = {
    "spheres": (bouncing_spheres, 16.0 / 9.0),
    "checkers": (checkered_spheres, 16.0 / 9.0),
    "earth": (earth, 16.0 / 9.0),
    "perlin": (perlin_spheres, 16.0 / 9.0),
    "quads": (quads, 1.0),
    "lights": (simple_light, 16.0 / 9.0),
    "cornell": (cornell_box, 1.0),
    "cornell-smoke": (cornell_smoke, 1.0),
}

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Monte-Carlo path tracer")
    parser.add_argument("scene", choices=sorted(SCENES))
    parser.add_argument("-o", "--output", default="render.png",
                        help="output image; format follows the extension")
    parser.add_argument("--width", type=int, default=400)
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="preview")
    parser.add_argument("--samples", type=int, help="overrides the quality preset")
    parser.add_argument("--depth", type=int, help="overrides the quality preset")
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--shuffle", action="store_true",
                        help="emit pixels in shuffled order")
    parser.add_argument("--no-bvh", action="store_true",
                        help="query the flat object list instead of a BVH")
    parser.add_argument("--texture", help="image used by the earth scene")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    build_scene, aspect_ratio = SCENES[args.scene]
    settings = RenderSettings.from_quality(args.quality, args.width, aspect_ratio)
    if args.samples is not None or args.depth is not None:
        settings = RenderSettings(
            settings.width, settings.height,
            args.samples if args.samples is not None else settings.samples_per_pixel,
            args.depth if args.depth is not None else settings.max_depth,
        )

    rng = random.Random(args.seed)
    try:
        world, vfov, look_from, look_at, focus_dist, defocus_angle, background = build_scene(rng, args)
    except (OSError, ValueError) as e:
        logger.error("could not build scene %s: %s", args.scene, e)
        return 1
    logger.info("scene %s has %d objects", args.scene, len(world))
    if not args.no_bvh:
        world = world.to_bvh(rng)

    camera = Camera(vfov, settings, background)
    camera.set(look_from, look_at, focus_dist, defocus_angle)

    frame = FrameBuffer(settings.width, settings.height)
    Renderer(camera, world, workers=args.workers, seed=args.seed, shuffle=args.shuffle).render(frame)

    try:
        frame.save(args.output)
    except (OSError, ValueError) as e:
        logger.error("could not write %s: %s", args.output, e)
        return 1
    logger.info("wrote %s", args.output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
