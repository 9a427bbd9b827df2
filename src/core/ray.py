# core/ray.py
import math
from core.vector import Vector3, Point3

class Ray:
    """
    Represents a ray in 3D space with an origin and direction. The direction
    is not required to be unit length.
    """
    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Point3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the unit normal n.
    """
    return v - n * (2 * v.dot(n))

def refract(uv: Vector3, n: Vector3, eta_ratio: float) -> Vector3:
    """
    Refracts the unit direction uv through a surface with unit normal n,
    following Snell's law with eta_ratio = eta_in / eta_out.

    Total internal reflection must be ruled out by the caller; the parallel
    component is not checked for a negative radicand.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * eta_ratio
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel
