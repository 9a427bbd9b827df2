# scenes/builders.py
"""Ready-made scenes and the camera placements that frame them."""

import random
from core.vector import Color, Point3, Vector3
from geometry.world import Scene
from geometry.sphere import Sphere
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials import presets

def three_spheres_scene() -> Scene:
    """
    Diffuse, hollow glass and metal spheres side by side on a yellow ground.
    """
    world = Scene()
    glass = presets.glass()

    world.add(Sphere(Point3(0, -100.5, -1), 100, presets.matte(presets.YELLOW)))
    world.add(Sphere(Point3(0, 0, -1), 0.5, presets.matte(presets.BLUE)))
    # Hollow glass: the inner sphere's negative radius flips its normals.
    world.add(Sphere(Point3(-1, 0, -1), 0.5, glass))
    world.add(Sphere(Point3(-1, 0, -1), -0.4, glass))
    world.add(Sphere(Point3(1, 0, -1), 0.5, Metal(Color(0.8, 0.6, 0.2), fuzz=0.05)))
    return world

def random_scene(rng=random) -> Scene:
    """
    A large ground sphere covered in a grid of small random spheres, with
    three large feature spheres in the middle.
    """
    world = Scene()
    world.add(Sphere(Point3(0, -1000, 0), 1000, presets.matte(presets.GRAY)))

    clearing = Point3(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearing).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # Diffuse
                albedo = Color.random(rng) * Color.random(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                # Metal
                albedo = Color.random(rng, 0.5, 1.0)
                material = Metal(albedo, fuzz=rng.uniform(0.0, 0.5))
            else:
                material = presets.glass()
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(0, 1, 0), 1.0, presets.glass()))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, presets.matte(presets.BROWN)))
    world.add(Sphere(Point3(4, 1, 0), 1.0, presets.mirror()))
    return world

def single_sphere_scene() -> Scene:
    """
    A single large diffuse sphere below the camera, nothing else.
    """
    return Scene([Sphere(Point3(0, -100.5, -1), 100, presets.matte(presets.GRAY))])

# Scene name -> (builder, camera keyword arguments without aspect ratio)
SCENES = {
    "random": (random_scene, dict(
        lookfrom=Point3(13, 2, 3), lookat=Point3(0, 0, 0), vup=Vector3(0, 1, 0),
        vfov=20.0, aperture=0.1, focus_dist=10.0,
    )),
    "spheres": (three_spheres_scene, dict(
        lookfrom=Point3(-2, 2, 1), lookat=Point3(0, 0, -1), vup=Vector3(0, 1, 0),
        vfov=30.0, aperture=0.0, focus_dist=3.4,
    )),
    "ground": (single_sphere_scene, dict(
        lookfrom=Point3(0, 0, 0), lookat=Point3(0, 0, -1), vup=Vector3(0, 1, 0),
        vfov=90.0, aperture=0.0, focus_dist=1.0,
    )),
}
