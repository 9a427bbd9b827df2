"""Tests for vector algebra and random sampling."""

import math
import pickle
import random
from fractions import Fraction

import numpy as np
import pytest

from core.utils import (
    clamp,
    degrees_to_radians,
    random_in_unit_disk,
    random_in_unit_sphere,
    random_unit_vector,
)
from core.vector import Color, Point3, Vector3


class TestVector3:
    """Tests for Vector3 arithmetic."""

    def test_componentwise_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert a * b == Vector3(4, 10, 18)
        assert -a == Vector3(-1, -2, -3)

    def test_scalar_arithmetic(self):
        a = Vector3(1, 2, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a / 2 == Vector3(0.5, 1.0, 1.5)

    def test_scales_by_any_real_number(self):
        a = Vector3(1, 2, 3)
        assert a * np.float32(2) == Vector3(2, 4, 6)
        assert a * np.int64(2) == Vector3(2, 4, 6)
        assert a * np.float64(0.5) == Vector3(0.5, 1.0, 1.5)
        assert a * Fraction(1, 2) == Vector3(0.5, 1.0, 1.5)

    def test_dot_and_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)
        assert Vector3(1, 2, 3).dot(Vector3(4, 5, 6)) == 32

    def test_length(self):
        v = Vector3(3, 4, 12)
        assert v.length_squared() == 169
        assert v.length() == 13

    def test_normalize(self):
        n = Vector3(0, 3, 4).normalize()
        assert n.length() == pytest.approx(1.0)
        assert tuple(n) == pytest.approx((0.0, 0.6, 0.8))

    def test_normalize_zero_vector_is_degenerate(self):
        with pytest.raises(ZeroDivisionError):
            Vector3(0, 0, 0).normalize()

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-9, 1e-3, 0).near_zero()

    def test_unpacking_and_aliases(self):
        x, y, z = Point3(1, 2, 3)
        assert (x, y, z) == (1, 2, 3)
        assert Color is Vector3

    def test_pickle_round_trip(self):
        v = Vector3(0.1, 0.2, 0.3)
        assert pickle.loads(pickle.dumps(v)) == v

    def test_random_in_range(self, rng):
        for _ in range(100):
            v = Vector3.random(rng, 0.5, 1.0)
            assert all(0.5 <= c <= 1.0 for c in v)


class TestSampling:
    """Tests for rejection samplers."""

    def test_unit_sphere_points_inside(self, rng):
        for _ in range(500):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_unit_vectors_have_unit_length(self, rng):
        for _ in range(500):
            assert random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_unit_disk_points_flat_and_inside(self, rng):
        for _ in range(500):
            p = random_in_unit_disk(rng)
            assert p.z == 0.0
            assert p.length_squared() < 1.0

    def test_rejects_points_outside_ball(self, sequence_rng):
        # First candidate is a cube corner, second lies inside the ball.
        rng = sequence_rng(uniforms=[0.9, 0.9, 0.9, 0.1, 0.2, 0.3])
        assert random_in_unit_sphere(rng) == Vector3(0.1, 0.2, 0.3)

    def test_disk_covers_all_quadrants(self, rng):
        quadrants = set()
        for _ in range(200):
            p = random_in_unit_disk(rng)
            quadrants.add((p.x > 0, p.y > 0))
        assert len(quadrants) == 4

    def test_seeded_sampling_is_reproducible(self):
        a = [random_unit_vector(random.Random(5)) for _ in range(3)]
        b = [random_unit_vector(random.Random(5)) for _ in range(3)]
        assert a == b


class TestHelpers:
    def test_clamp(self):
        assert clamp(-1.0, 0.0, 1.0) == 0.0
        assert clamp(2.0, 0.0, 1.0) == 1.0
        assert clamp(0.25, 0.0, 1.0) == 0.25

    def test_degrees_to_radians(self):
        assert degrees_to_radians(180.0) == pytest.approx(math.pi)
