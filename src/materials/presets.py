# materials/presets.py
"""Albedos and materials shared by the built-in scenes."""

from core.vector import Color
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric

GLASS_INDEX = 1.5

YELLOW = Color(0.8, 0.8, 0.0)
BLUE = Color(0.1, 0.2, 0.5)
BROWN = Color(0.4, 0.2, 0.1)
GRAY = Color(0.5, 0.5, 0.5)
BRONZE = Color(0.7, 0.6, 0.5)

def matte(albedo: Color) -> Lambertian:
    return Lambertian(albedo)

def glass() -> Dielectric:
    return Dielectric(GLASS_INDEX)

def mirror(albedo: Color = BRONZE) -> Metal:
    """Polished metal without fuzz."""
    return Metal(albedo, fuzz=0.0)
