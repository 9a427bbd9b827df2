# materials/metal.py
import random
from typing import Optional, Tuple
from core.ray import Ray, reflect
from core.vector import Color
from core.utils import clamp, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material

class Metal(Material):
    """
    Metal material with reflective properties. fuzz perturbs the mirror
    direction; 0 is a perfect mirror. It is clamped into [0, 1], so a
    negative fuzz becomes 0 and anything above 1 becomes 1.
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = clamp(fuzz, 0.0, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Color, Optional[Ray]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo, scattered

        # Absorb the ray if it does not scatter forward
        return self.albedo, None

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
