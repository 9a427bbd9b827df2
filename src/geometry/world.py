# src/geometry/world.py
from typing import Iterable, Optional
from geometry.hittable import Hittable, HitRecord
from core.ray import Ray

class Scene(Hittable):
    """
    An ordered collection of Hittable objects answering closest-hit queries.

    Members are appended during setup. Once frozen (the renderer freezes the
    scene before dispatching work) the collection is read-only, so it can be
    shared by every render worker.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects = list(objects)
        self.frozen = False

    def add(self, obj: Hittable):
        if self.frozen:
            raise RuntimeError("cannot add objects to a frozen scene")
        self.objects.append(obj)

    def freeze(self) -> "Scene":
        if not self.frozen:
            self.objects = tuple(self.objects)
            self.frozen = True
        return self

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
