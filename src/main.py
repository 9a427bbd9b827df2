# main.py
import argparse
import logging
import random
import sys
from camera.camera import Camera
from renderer.config import RenderConfig
from renderer.image_io import save_image
from renderer.raytracer import Renderer
from scenes.builders import SCENES

logger = logging.getLogger("pathtracer")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a scene of spheres with a stochastic path tracer."
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="random",
                        help="scene to render (default: random)")
    parser.add_argument("--width", type=int, default=400, help="image width in pixels")
    parser.add_argument("--aspect-ratio", type=float, default=16.0 / 9.0,
                        help="width / height (default: 16/9)")
    parser.add_argument("--samples", type=int, default=100, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, default=50, help="maximum bounces per path")
    parser.add_argument("--workers", type=int, default=None,
                        help="size of the worker pool (default: CPU count)")
    parser.add_argument("--batch-size", type=int, default=256,
                        help="pixels per work batch")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for a reproducible render")
    parser.add_argument("--threads", action="store_true",
                        help="use a thread pool instead of processes")
    parser.add_argument("--aperture", type=float, default=None,
                        help="override the scene's lens aperture")
    parser.add_argument("--progress", action="store_true", help="show a progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("-o", "--output", default="render.ppm",
                        help="output image; .ppm is written as plain text (default: render.ppm)")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )

    options = dict(
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        batch_size=args.batch_size,
        seed=args.seed,
        use_processes=not args.threads,
        show_progress=args.progress,
    )
    if args.workers is not None:
        options["workers"] = args.workers
    config = RenderConfig.from_aspect_ratio(args.width, args.aspect_ratio, **options)

    build_scene, camera_options = SCENES[args.scene]
    camera_options = dict(camera_options)
    if args.aperture is not None:
        camera_options["aperture"] = args.aperture
    camera = Camera(aspect_ratio=config.aspect_ratio, **camera_options)

    # Scene population draws from its own generator so a seed fixes the layout too.
    world = build_scene(random.Random(args.seed)) if args.scene == "random" else build_scene()
    logger.info("Built scene '%s' with %d objects", args.scene, len(world))

    renderer = Renderer(config)
    framebuffer = renderer.render(camera, world)
    save_image(args.output, framebuffer, config.width, config.height)
    return 0

if __name__ == "__main__":
    sys.exit(main())
