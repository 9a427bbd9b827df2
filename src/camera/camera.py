# camera/camera.py
import math
import random
from core.vector import Vector3, Point3
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk

class Camera:
    """
    Thin-lens camera looking from `lookfrom` towards `lookat`.

    get_ray(s, t) maps normalized image-plane coordinates, (0, 0) at the
    lower-left corner and (1, 1) at the upper-right, to a world-space ray.
    A non-zero aperture jitters the ray origin over the lens for depth of
    field, with `focus_dist` the distance to the plane in perfect focus.
    """
    def __init__(self, lookfrom: Point3, lookat: Point3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0):
        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.update_camera()

    def update_camera(self):
        """Validates the setup and computes the basis vectors and viewport."""
        if not 0.0 < self.vfov < 180.0:
            raise ValueError(f"vfov must be in (0, 180) degrees, got {self.vfov}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.focus_dist <= 0:
            raise ValueError(f"focus_dist must be positive, got {self.focus_dist}")
        if self.aperture < 0:
            raise ValueError(f"aperture must be non-negative, got {self.aperture}")

        view = self.lookfrom - self.lookat
        if view.near_zero():
            raise ValueError("lookfrom and lookat must be distinct points")
        self.w = view.normalize()

        right = self.vup.cross(self.w)
        if right.near_zero():
            raise ValueError("vup must not be parallel to the view direction")
        self.u = right.normalize()
        self.v = self.w.cross(self.u)

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(degrees_to_radians(self.vfov) / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Scale by focus distance
        self.origin = self.lookfrom
        self.horizontal = self.u * viewport_width * self.focus_dist
        self.vertical = self.v * viewport_height * self.focus_dist

        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng=random) -> Ray:
        """Generates a ray with depth of field effect."""
        if self.lens_radius <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         self.origin)
            return Ray(self.origin, direction)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        # Update ray origin and direction for depth of field
        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)

        return Ray(ray_origin, ray_direction)
