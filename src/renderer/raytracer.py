# renderer/raytracer.py
import functools
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import List, Tuple
import numpy as np
from tqdm import tqdm
from core.vector import Color
from core.ray import Ray
from renderer.config import RenderConfig
from renderer.tone_mapping import postprocess_colors

logger = logging.getLogger(__name__)

# Closest-hit search interval. The lower bound keeps a bounced ray from
# re-hitting the surface it starts on.
T_MIN = 0.001
T_MAX = 100.0

SKY_HORIZON = Color(1.0, 1.0, 1.0)
SKY_ZENITH = Color(0.5, 0.7, 1.0)
BLACK = Color(0.0, 0.0, 0.0)

def sky_color(ray: Ray) -> Color:
    """Vertical white-to-blue gradient seen by rays that escape the scene."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return SKY_HORIZON * (1.0 - t) + SKY_ZENITH * t

def ray_color(ray: Ray, world, depth: int, rng=random) -> Color:
    """
    Estimate the radiance arriving along `ray` with at most `depth` bounces.

    An absorbed path (scatter returns no ray) contributes its attenuation
    rather than black.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, T_MAX)
    if rec is None:
        return sky_color(ray)

    attenuation, scattered = rec.material.scatter(ray, rec, rng)
    if scattered is None:
        return attenuation
    return attenuation * ray_color(scattered, world, depth - 1, rng)

def sample_pixel(index: int, camera, world, width: int, height: int,
                 samples: int, max_depth: int, rng=random) -> Color:
    """
    Sum `samples` radiance estimates for the pixel at row-major `index`
    (row 0 is the top of the image).
    """
    col = index % width
    line = height - 1 - index // width
    pixel_color = Color(0.0, 0.0, 0.0)
    for _ in range(samples):
        if samples == 1:
            du = dv = 0.5
        else:
            du = rng.random()
            dv = rng.random()
        ray = camera.get_ray((col + du) / width, (line + dv) / height, rng)
        pixel_color = pixel_color + ray_color(ray, world, max_depth, rng)
    return pixel_color

def render_batch(camera, world, config: RenderConfig, start: int, end: int,
                 rng=random) -> np.ndarray:
    """
    Render the pixels [start, end) and return them as uint8 RGB rows.
    """
    accumulated = np.empty((end - start, 3), dtype=np.float32)
    for k, index in enumerate(range(start, end)):
        c = sample_pixel(index, camera, world, config.width, config.height,
                         config.samples_per_pixel, config.max_depth, rng)
        accumulated[k] = (c.x, c.y, c.z)
    return postprocess_colors(accumulated, config.samples_per_pixel)

def _render_seeded(camera, world, config: RenderConfig, start: int, end: int,
                   seed: int) -> Tuple[int, np.ndarray]:
    return start, render_batch(camera, world, config, start, end, random.Random(seed))

# Render state of a worker process, installed once by the pool initializer.
# Only process pools use it; thread pools get the state bound into each job.
_process_state = {}

def _init_process(camera, world, config: RenderConfig):
    _process_state['camera'] = camera
    _process_state['world'] = world
    _process_state['config'] = config

def _run_process_batch(start: int, end: int, seed: int) -> Tuple[int, np.ndarray]:
    return _render_seeded(_process_state['camera'], _process_state['world'],
                          _process_state['config'], start, end, seed)

class Renderer:
    """
    Renders a scene into a framebuffer of row-major uint8 RGB triples, top
    row first, by spreading contiguous pixel batches over a worker pool.

    Every batch owns a disjoint slice of the framebuffer and its own random
    generator, seeded from the config seed, so a seeded render is
    reproducible whatever the worker count or scheduling order.
    """
    def __init__(self, config: RenderConfig):
        self.config = config
        self.framebuffer = None

    def batches(self) -> List[Tuple[int, int]]:
        total = self.config.pixel_count
        step = self.config.batch_size
        return [(start, min(start + step, total)) for start in range(0, total, step)]

    def batch_seeds(self, count: int) -> List[int]:
        children = np.random.SeedSequence(self.config.seed).spawn(count)
        return [int.from_bytes(child.generate_state(4).tobytes(), 'little') for child in children]

    def _executor(self, camera, world):
        """Pool plus the job it runs per batch as ``job(start, end, seed)``."""
        if self.config.use_processes:
            executor = ProcessPoolExecutor(max_workers=self.config.workers,
                                           initializer=_init_process,
                                           initargs=(camera, world, self.config))
            return executor, _run_process_batch
        executor = ThreadPoolExecutor(max_workers=self.config.workers)
        return executor, functools.partial(_render_seeded, camera, world, self.config)

    def render(self, camera, world) -> np.ndarray:
        config = self.config
        world.freeze()
        batches = self.batches()
        seeds = self.batch_seeds(len(batches))
        framebuffer = np.zeros((config.pixel_count, 3), dtype=np.uint8)

        logger.info("Rendering %dx%d, %d spp, depth %d, %d objects, %d batches on %d %s",
                    config.width, config.height, config.samples_per_pixel,
                    config.max_depth, len(world), len(batches), config.workers,
                    "processes" if config.use_processes else "threads")
        started = time.perf_counter()

        executor, job = self._executor(camera, world)
        with executor:
            futures = [executor.submit(job, start, end, seed)
                       for (start, end), seed in zip(batches, seeds)]
            logger.debug("Dispatched %d batches of up to %d pixels",
                         len(futures), config.batch_size)
            for future in tqdm(as_completed(futures), total=len(futures),
                               desc="batches", disable=not config.show_progress):
                start, pixels = future.result()
                framebuffer[start:start + len(pixels)] = pixels

        logger.info("Rendered in %.2fs", time.perf_counter() - started)
        self.framebuffer = framebuffer
        return framebuffer

    def image(self) -> np.ndarray:
        """The last framebuffer as an array of shape (height, width, 3)."""
        if self.framebuffer is None:
            raise RuntimeError("nothing has been rendered yet")
        return self.framebuffer.reshape(self.config.height, self.config.width, 3)
