# renderer/raytracer.py
import logging
import math
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Optional, Sequence, Tuple
import numpy as np
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3, BLACK, WHITE
from camera.camera import Camera
from geometry.hittable import Hittable
from renderer.sink import PixelSink
from renderer.tone_mapping import gamma_correct

logger = logging.getLogger(__name__)

# Hits closer than this are self-intersections of the surface a ray just left.
T_MIN = 0.001

def ray_color(ray: Ray, world: Hittable, camera: Camera, max_depth: int, rng) -> Vector3:
    """
    Radiance carried back along `ray`.

    Iterative form of L(ray, depth) = emitted + attenuation * L(scattered, depth - 1):
    `throughput` is the product of attenuations so far and `radiance` the weighted
    emission collected on the way. Running out of depth contributes black.
    """
    radiance = BLACK
    throughput = WHITE
    hit_interval = Interval(T_MIN, math.inf)
    for _ in range(max_depth):
        rec = world.hit(ray, hit_interval, rng)
        if rec is None:
            return radiance + throughput * camera.background_color(ray)

        emitted = rec.material.emitted(rec.uv, rec.p)
        radiance = radiance + throughput * emitted

        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return radiance
        attenuation, ray = scattered
        throughput = throughput * attenuation
    return radiance

def row_rng(seed: int, y: int) -> random.Random:
    """Independent, reproducible random stream for scanline y."""
    return random.Random(f"{seed}:{y}")

def render_rows(camera: Camera, world: Hittable, rows: Sequence[int],
                seed: int) -> List[Tuple[int, np.ndarray]]:
    """
    Average linear radiance for each pixel of the given scanlines.

    Module-level so it can run in a worker process.
    """
    settings = camera.settings
    samples = settings.samples_per_pixel
    scale = 1.0 / samples
    results = []
    for y in rows:
        rng = row_rng(seed, y)
        row = np.zeros((settings.width, 3), dtype=np.float64)
        for x in range(settings.width):
            r = g = b = 0.0
            for _ in range(samples):
                ray = camera.get_ray(x, y, rng)
                color = ray_color(ray, world, camera, settings.max_depth, rng)
                r += color.x
                g += color.y
                b += color.z
            row[x] = (r * scale, g * scale, b * scale)
        results.append((y, row))
    return results

# Scene installed once per worker process by the pool initializer.
_worker_scene = None

def _install_scene(camera: Camera, world: Hittable):
    global _worker_scene
    _worker_scene = (camera, world)

def _render_installed(rows: Sequence[int], seed: int) -> List[Tuple[int, np.ndarray]]:
    camera, world = _worker_scene
    return render_rows(camera, world, rows, seed)

class Renderer:
    """
    Drives a render: splits the image into scanlines, integrates them inline or on a
    process pool, gamma-corrects the results and hands every pixel to the sink once.

    The world and camera are only read, so each worker process receives one pickled
    copy when it starts and writes back whole rows into disjoint parts of the output buffer.
    """
    def __init__(self, camera: Camera, world: Hittable, workers: int = 1,
                 seed: Optional[int] = None, shuffle: bool = False, rows_per_task: int = 4):
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        if rows_per_task < 1:
            raise ValueError(f"rows_per_task must be >= 1, got {rows_per_task}")
        self.camera = camera
        self.world = world
        self.workers = workers
        self.seed = seed if seed is not None else random.SystemRandom().randrange(2 ** 32)
        self.shuffle = shuffle
        self.rows_per_task = rows_per_task

    def _row_order(self) -> List[int]:
        rows = list(range(self.camera.image_height))
        if self.shuffle:
            random.Random(self.seed).shuffle(rows)
        return rows

    def _emit_row(self, y: int, row: np.ndarray, image: np.ndarray, sink: Optional[PixelSink]):
        corrected = gamma_correct(row)
        image[y] = corrected
        if sink is None:
            return
        columns = list(range(self.camera.image_width))
        if self.shuffle:
            random.Random(f"{self.seed}:columns:{y}").shuffle(columns)
        for x in columns:
            r, g, b = corrected[x]
            sink.set_at(x, y, Vector3(float(r), float(g), float(b)))

    def render(self, sink: Optional[PixelSink] = None) -> np.ndarray:
        """
        Render the full frame.

        Returns the gamma-corrected image as a (height, width, 3) float array in [0, 1].
        """
        settings = self.camera.settings
        logger.info("rendering %dx%d, %d samples per pixel, depth %d, %d worker(s), seed %d",
                    settings.width, settings.height, settings.samples_per_pixel,
                    settings.max_depth, self.workers, self.seed)
        start = time.perf_counter()

        image = np.zeros((settings.height, settings.width, 3), dtype=np.float64)
        rows = self._row_order()
        chunks = [rows[i:i + self.rows_per_task] for i in range(0, len(rows), self.rows_per_task)]

        if self.workers == 1:
            for chunk in chunks:
                for y, row in render_rows(self.camera, self.world, chunk, self.seed):
                    self._emit_row(y, row, image, sink)
        else:
            with ProcessPoolExecutor(max_workers=self.workers, initializer=_install_scene,
                                     initargs=(self.camera, self.world)) as pool:
                futures = [pool.submit(_render_installed, chunk, self.seed) for chunk in chunks]
                for future in as_completed(futures):
                    for y, row in future.result():
                        self._emit_row(y, row, image, sink)

        logger.info("render done in %.2fs", time.perf_counter() - start)
        return image
