"""Tests for color post-processing."""

import numpy as np

from core.vector import Color
from renderer.tone_mapping import postprocess_color, postprocess_colors


class TestPostprocessColor:
    def test_black_and_saturated(self):
        assert postprocess_color(Color(0, 0, 0), 10) == (0, 0, 0)
        assert postprocess_color(Color(10, 10, 10), 10) == (255, 255, 255)
        assert postprocess_color(Color(50, 1e6, 10.5), 10) == (255, 255, 255)

    def test_gamma_two(self):
        # 0.25 average -> sqrt -> 0.5 -> 128
        assert postprocess_color(Color(1.0, 2.0, 0.0), 4) == (128, 181, 0)

    def test_monotonic_per_channel(self):
        samples = 8
        previous = -1
        for value in np.linspace(0.0, 1.2 * samples, 200):
            r, g, b = postprocess_color(Color(value, value, value), samples)
            assert r == g == b
            assert r >= previous
            previous = r
        assert previous == 255

    def test_degenerate_channels_map_to_zero(self):
        assert postprocess_color(Color(-1.0, float("nan"), 0.0), 1) == (0, 0, 0)


def test_batch_kernel_shape_and_dtype():
    accumulated = np.array([[0.0, 0.0, 0.0], [4.0, 1.0, 0.25]], dtype=np.float32)
    pixels = postprocess_colors(accumulated, 4)
    assert pixels.dtype == np.uint8
    assert pixels.shape == (2, 3)
    assert pixels.tolist() == [[0, 0, 0], [255, 128, 64]]
