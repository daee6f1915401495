"""Tests for edges, triangles and the triangle mesh."""

import numpy as np
import pytest

from cg2d.errors import ErrorKind, GeometryError
from cg2d.geom import Pt
from cg2d.mesh import Edge, Triangle, TriMesh


UNIT_SQUARE = [Pt(0, 0), Pt(1, 0), Pt(1, 1), Pt(0, 1)]


class TestEdge:
    """Test unordered edge identity."""

    def test_same_in_either_order(self):
        assert Edge(3, 7).same(Edge(7, 3))
        assert Edge(3, 7).key == (3, 7)
        assert Edge(7, 3).key == (3, 7)

    def test_different(self):
        assert not Edge(1, 2).same(Edge(1, 3))

    def test_length_and_midpoint(self):
        pts = [Pt(0, 0), Pt(3, 4)]
        e = Edge(0, 1)
        assert e.length(pts) == 5.0
        assert e.midpoint(pts) == (1.5, 2.0)


class TestTriangle:
    """Test triangle construction and queries."""

    def test_edges_in_vertex_order(self):
        t = Triangle.build(UNIT_SQUARE, 0, 1, 2)
        assert t.e1 == Edge(0, 1)
        assert t.e2 == Edge(1, 2)
        assert t.e3 == Edge(2, 0)
        assert (t.p1, t.p2, t.p3) == (UNIT_SQUARE[0], UNIT_SQUARE[1], UNIT_SQUARE[2])

    def test_cached_circumcircle(self):
        t = Triangle.build(UNIT_SQUARE, 0, 1, 2)
        assert (t.ccx, t.ccy) == (0.5, 0.5)
        assert t.ccr == pytest.approx(2 ** 0.5 / 2)
        assert t.circle_contains(Pt(0.5, 0.9))
        assert not t.circle_contains(Pt(2.0, 2.0))

    def test_collinear_rejected(self):
        pts = [Pt(0, 0), Pt(1, 1), Pt(2, 2)]
        with pytest.raises(GeometryError) as exc_info:
            Triangle.build(pts, 0, 1, 2)
        assert exc_info.value.kind is ErrorKind.GEOMETRY
        assert exc_info.value.indices == (0, 1, 2)

    def test_heron_underflow_rejected(self):
        """Non-zero orientation but zero Heron area gives no NaN/inf circle."""
        pts = [Pt(0.0, 0.0), Pt(1.0, 0.0), Pt(2.0, 1e-300)]
        with pytest.raises(GeometryError, match="degenerate circumcircle") as exc_info:
            Triangle.build(pts, 0, 1, 2)
        assert exc_info.value.indices == (0, 1, 2)

    def test_winding(self):
        assert Triangle.build(UNIT_SQUARE, 0, 1, 2).is_ccw()
        assert Triangle.build(UNIT_SQUARE, 0, 2, 1).is_cw()

    def test_measures(self):
        t = Triangle.build([Pt(0, 0), Pt(1, 0), Pt(0, 1)], 0, 1, 2)
        a, b, c = t.side_lengths()
        assert (a, c) == (1.0, 1.0)
        assert b == pytest.approx(2 ** 0.5)
        assert t.area() == pytest.approx(0.5)
        assert t.center() == pytest.approx((1 / 3, 1 / 3))

    def test_same_vertices(self):
        t1 = Triangle.build(UNIT_SQUARE, 0, 1, 2)
        t2 = Triangle.build(UNIT_SQUARE, 2, 0, 1)
        assert t1.same_vertices(t2)


class TestTriMesh:
    """Test mesh container, diagnostics and export."""

    @pytest.fixture
    def square_mesh(self):
        mesh = TriMesh(UNIT_SQUARE)
        mesh.add_triangle(0, 1, 2)
        mesh.add_triangle(0, 2, 3)
        return mesh

    def test_points_copied(self):
        pts = list(UNIT_SQUARE)
        mesh = TriMesh(pts)
        mesh.points.append(Pt(9, 9))
        assert len(pts) == 4

    def test_validate_clean(self, square_mesh):
        report = square_mesh.validate()
        assert report["triangles"] == 2
        assert report["unique_vertices"] == 4
        assert report["bad_edges"] == []
        assert report["degenerate"] == []
        assert report["non_delaunay"] == []

    def test_validate_detects_empty_circle_violation(self):
        # тонкий трикутник, у чиєму колі лежить точка 3
        pts = [Pt(0, 0), Pt(4, 0), Pt(2, 0.1), Pt(2, -0.5)]
        mesh = TriMesh(pts)
        mesh.add_triangle(0, 1, 2)
        mesh.add_triangle(0, 3, 1)
        report = mesh.validate()
        assert (0, 3) in report["non_delaunay"]

    def test_boundary_edges(self, square_mesh):
        boundary = sorted(square_mesh.extract_boundary_edges())
        assert boundary == [(0, 1), (0, 3), (1, 2), (2, 3)]

    def test_remove_triangles_touching(self, square_mesh):
        square_mesh.remove_triangles_touching(3)
        assert [t.v for t in square_mesh.triangles] == [(0, 1, 2)]

    def test_simplices(self, square_mesh):
        s = square_mesh.simplices()
        assert s.shape == (2, 3)
        np.testing.assert_array_equal(s, [[0, 1, 2], [0, 2, 3]])

    def test_simplices_empty(self):
        assert TriMesh(UNIT_SQUARE).simplices().shape == (0, 3)

    def test_to_off(self, square_mesh):
        lines = square_mesh.to_off().splitlines()
        assert lines[0] == "OFF"
        assert lines[1] == "4 2 0"
        assert lines[2] == "0 0 0.0"
        assert lines[-1] == "3 0 2 3"

    def test_write_off(self, square_mesh, tmp_path):
        path = tmp_path / "square.off"
        square_mesh.write_off(str(path))
        assert path.read_text(encoding="utf-8") == square_mesh.to_off()
