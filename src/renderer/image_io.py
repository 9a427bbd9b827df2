# renderer/image_io.py
import logging
from pathlib import Path
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def framebuffer_to_image(framebuffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Reshape a flat row-major framebuffer into an (height, width, 3) uint8 image.
    """
    pixels = np.asarray(framebuffer, dtype=np.uint8)
    if pixels.size != width * height * 3:
        raise ValueError(
            f"framebuffer holds {pixels.size // 3} pixels, expected {width}x{height}"
        )
    return pixels.reshape(height, width, 3)

def write_ppm(path, framebuffer: np.ndarray, width: int, height: int) -> Path:
    """
    Write a plain-text PPM (P3): a header with the dimensions and maximum
    channel value, then one "r g b" line per pixel, top row first.
    """
    image = framebuffer_to_image(framebuffer, width, height)
    path = Path(path)
    with path.open("w") as fh:
        fh.write(f"P3\n{width} {height}\n255\n")
        for r, g, b in image.reshape(-1, 3):
            fh.write(f"{r} {g} {b}\n")
    return path

def save_image(path, framebuffer: np.ndarray, width: int, height: int) -> Path:
    """
    Save the framebuffer, as plain PPM for .ppm paths and through Pillow for
    any other format Pillow recognises from the extension.
    """
    path = Path(path)
    if path.suffix.lower() == ".ppm":
        write_ppm(path, framebuffer, width, height)
    else:
        Image.fromarray(framebuffer_to_image(framebuffer, width, height)).save(path)
    logger.info("Saved %dx%d image to %s", width, height, path)
    return path
