# materials/material.py
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Color
from geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials hold no mutable state after construction and are shared by
    every primitive that uses them and every render worker.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Color, Optional[Ray]]:
        """
        Computes the attenuation and the scattered ray.
        Returns a tuple (attenuation, scattered_ray); scattered_ray is None
        when the ray is absorbed, in which case the attenuation is the final
        color of the path.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
