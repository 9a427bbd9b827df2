"""Shared fixtures for the path tracer tests."""

import random

import pytest

from core.ray import Ray
from core.vector import Point3, Vector3
from geometry.hittable import HitRecord


class SequenceRng:
    """Random source replaying fixed draws, for forcing sampling outcomes."""

    def __init__(self, uniforms=(), randoms=()):
        self._uniforms = iter(uniforms)
        self._randoms = iter(randoms)

    def uniform(self, a, b):
        return next(self._uniforms)

    def random(self):
        return next(self._randoms)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def sequence_rng():
    return SequenceRng


@pytest.fixture
def upward_hit():
    """Front-face hit at the origin of a surface whose normal is +y."""
    def make(material=None):
        return HitRecord(p=Point3(0, 0, 0), normal=Vector3(0, 1, 0), t=1.0,
                         front_face=True, material=material)
    return make


@pytest.fixture
def incoming():
    """Ray travelling down and to the right onto the origin."""
    return Ray(Point3(-1, 1, 0), Vector3(1, -1, 0))
