# geometry/hittable.py
from typing import Optional
from core.vector import Vector3, Point3
from core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection. Created and consumed within
    a single intersect-then-scatter step.
    """
    __slots__ = ('p', 'normal', 't', 'front_face', 'material')

    def __init__(self, p: Point3 = None, normal: Vector3 = None,
                 t: float = 0.0, front_face: bool = True, material=None):
        self.p = p              # Intersection point
        self.normal = normal    # Unit normal, facing against the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
