"""
cg2d — мінімальна бібліотека для 2D комп'ютерної геометрії.
Зараз: інкрементальна тріангуляція Делоне (Bowyer–Watson) із супер-трикутником.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, EPS, centroid, unique_points, as_points
from cg2d.predicates import orientation, circumcircle, point_in_circle, incircle
from cg2d.errors import ErrorKind, TriangulationError, InputError, GeometryError, InternalLimitError
from cg2d.mesh import Edge, Triangle, TriMesh
from cg2d.delaunay import Delaunay2D, triangulate_points, triangulate_vec2s

__all__ = [
    "Pt", "EPS", "centroid", "unique_points", "as_points",
    "orientation", "circumcircle", "point_in_circle", "incircle",
    "ErrorKind", "TriangulationError", "InputError", "GeometryError", "InternalLimitError",
    "Edge", "Triangle", "TriMesh",
    "Delaunay2D", "triangulate_points", "triangulate_vec2s", "__version__",
]
