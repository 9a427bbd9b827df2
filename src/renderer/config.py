# renderer/config.py
"""Configuration for an offline render."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class RenderConfig:
    """Parameters of a render.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        samples_per_pixel: Stochastic estimates averaged per pixel
        max_depth: Bounce budget of a single light path
        workers: Size of the worker pool
        batch_size: Number of consecutive pixels handed to a worker at once
        seed: Seed for reproducible renders; None draws fresh entropy
        use_processes: Run workers in processes (True) or threads (False)
        show_progress: Display a progress bar over completed batches
    """

    width: int
    height: int
    samples_per_pixel: int = 100
    max_depth: int = 50
    workers: int = os.cpu_count() or 1
    batch_size: int = 256
    seed: Optional[int] = None
    use_processes: bool = True
    show_progress: bool = False

    def __post_init__(self):
        """Validate configuration before anything is rendered."""
        for name in ("width", "height", "samples_per_pixel", "workers", "batch_size"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value}")

        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

    @classmethod
    def from_aspect_ratio(cls, width: int, aspect_ratio: float, **kwargs) -> "RenderConfig":
        """Build a config whose height follows from the width and aspect ratio."""
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        height = max(1, int(width / aspect_ratio))
        return cls(width=width, height=height, **kwargs)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height
