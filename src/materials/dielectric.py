# src/materials/dielectric.py
import math
import random
from typing import Tuple
from core.ray import Ray, reflect, refract
from core.vector import Color
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """
    Clear dielectric (glass, water, ...) that either reflects or refracts,
    choosing by Schlick's approximation of the Fresnel term.
    """
    def __init__(self, refractive_index: float):
        self.refractive_index = refractive_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Color, Ray]:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        relative_index = 1.0 / self.refractive_index if rec.front_face else self.refractive_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = relative_index * sin_theta >= 1.0
        if cannot_refract or self._reflects(cos_theta, relative_index, rng):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, relative_index)
        return attenuation, Ray(rec.p, direction)

    def _reflects(self, cos_theta: float, relative_index: float, rng) -> bool:
        # An index-matched boundary is invisible and never reflects.
        if self.refractive_index == 1.0:
            return False
        return schlick(cos_theta, relative_index) > rng.random()

    def __repr__(self) -> str:
        return f"Dielectric({self.refractive_index})"

def schlick(cos_theta: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the reflectance at incidence angle theta.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
