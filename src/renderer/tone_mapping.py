# renderer/tone_mapping.py
import math
from typing import Tuple
import numpy as np
from numba import njit
from core.vector import Color

@njit(cache=True)
def postprocess_colors(accumulated, samples):
    """
    Turn summed radiance samples of shape (n, 3) into 8-bit RGB.

    Each channel is averaged over the sample count, gamma corrected with
    gamma 2 (square root), clamped to [0, 0.999] and scaled to [0, 255].
    Negative and non-finite channels map to 0.
    """
    n = accumulated.shape[0]
    output = np.empty((n, 3), dtype=np.uint8)
    scale = 1.0 / samples
    for i in range(n):
        for c in range(3):
            value = accumulated[i, c] * scale
            if not (value > 0.0):
                value = 0.0
            value = math.sqrt(value)
            if value > 0.999:
                value = 0.999
            output[i, c] = int(256.0 * value)
    return output

def postprocess_color(pixel_color: Color, samples: int) -> Tuple[int, int, int]:
    """
    Post-process a single accumulated pixel color.
    """
    accumulated = np.array([[pixel_color.x, pixel_color.y, pixel_color.z]], dtype=np.float32)
    r, g, b = postprocess_colors(accumulated, samples)[0]
    return int(r), int(g), int(b)
