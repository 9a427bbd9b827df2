"""Tests for image output."""

import numpy as np
import pytest
from PIL import Image

from renderer.image_io import framebuffer_to_image, save_image, write_ppm


@pytest.fixture
def framebuffer():
    # 3x2 image, row-major, top row first
    return np.array([
        [255, 0, 0], [0, 255, 0], [0, 0, 255],
        [10, 20, 30], [40, 50, 60], [70, 80, 90],
    ], dtype=np.uint8)


def test_framebuffer_to_image(framebuffer):
    image = framebuffer_to_image(framebuffer, 3, 2)
    assert image.shape == (2, 3, 3)
    assert image[1, 0].tolist() == [10, 20, 30]


def test_size_mismatch(framebuffer):
    with pytest.raises(ValueError):
        framebuffer_to_image(framebuffer, 4, 2)


def test_write_ppm(tmp_path, framebuffer):
    path = write_ppm(tmp_path / "out.ppm", framebuffer, 3, 2)
    lines = path.read_text().splitlines()
    assert lines[:3] == ["P3", "3 2", "255"]
    assert lines[3] == "255 0 0"
    assert lines[-1] == "70 80 90"
    assert len(lines) == 3 + 6


def test_save_png_through_pillow(tmp_path, framebuffer):
    path = save_image(tmp_path / "out.png", framebuffer, 3, 2)
    with Image.open(path) as image:
        assert image.size == (3, 2)
        assert image.getpixel((2, 0)) == (0, 0, 255)
        assert image.getpixel((0, 1)) == (10, 20, 30)


def test_save_ppm_is_plain_text(tmp_path, framebuffer):
    path = save_image(tmp_path / "out.PPM", framebuffer, 3, 2)
    assert path.read_text().startswith("P3\n")
