"""Tests for the backend pipeline."""

import random

import pytest

from cg2d.errors import GeometryError
from cg2d.pipeline import triangulate


def random_points(n, seed):
    rng = random.Random(seed)
    return [(rng.random(), rng.random()) for _ in range(n)]


class TestBackends:
    """Test internal and SciPy backends."""

    def test_internal(self):
        pts, tris = triangulate(random_points(20, 1))
        assert len(pts) == 20
        assert all(len(t) == 3 for t in tris)
        assert [p.id for p in pts] == list(range(1, 21))

    def test_scipy_agrees_on_count(self):
        raw = random_points(30, 2)
        _, internal = triangulate(raw, backend="internal")
        _, reference = triangulate(raw, backend="scipy")
        assert len(internal) == len(reference)

    def test_backend_name_case_insensitive(self):
        _, tris = triangulate(random_points(10, 3), backend="SciPy")
        assert tris

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Невідомий backend"):
            triangulate(random_points(5, 4), backend="qhull3d")


class TestDedupe:
    """Test optional duplicate removal."""

    POINTS = [(0, 0), (1, 0), (1, 1), (0, 1), (0.5, 0.5), (0.5, 0.5), (1, 1)]

    def test_dedupe(self):
        pts, tris = triangulate(self.POINTS, dedupe=True)
        assert len(pts) == 5
        assert len(tris) == 4
        assert max(i for t in tris for i in t) == 4

    def test_duplicate_three_points(self):
        """Three points with a duplicate collapse to a degenerate set."""
        with pytest.raises(GeometryError):
            triangulate([(0, 0), (1, 1), (1, 1)])
