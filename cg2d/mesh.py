# cg2d/mesh.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .errors import GeometryError
from .geom import Pt, EPS, distance
from .predicates import orientation, circumcircle, point_in_circle, incircle, _quat_cross

EdgeKey = Tuple[int, int]  # неорієнтоване ребро (min(u,v), max(u,v))


@dataclass(frozen=True)
class Edge:
    """
    Ребро між двома вершинами робочого масиву (індекси, не координати).
    Два ребра «однакові», якщо збігаються їхні пари індексів у будь-якому порядку.
    """
    u: int
    v: int

    @property
    def key(self) -> EdgeKey:
        return (self.u, self.v) if self.u < self.v else (self.v, self.u)

    def same(self, other: Edge) -> bool:
        return self.key == other.key

    def length(self, points: Sequence[Pt]) -> float:
        return distance(points[self.u], points[self.v])

    def midpoint(self, points: Sequence[Pt]) -> Tuple[float, float]:
        a, b = points[self.u], points[self.v]
        return a.x + (b.x - a.x) / 2, a.y + (b.y - a.y) / 2


@dataclass
class Triangle:
    """
    Трикутник у сітці.
    v      — індекси вершин (p1, p2, p3) у робочому масиві точок;
    pts    — самі вершини;
    ccx, ccy, ccr — описане коло, обчислене один раз при створенні.
    Ребра: e1 = (p1,p2), e2 = (p2,p3), e3 = (p3,p1).
    """
    v: Tuple[int, int, int]
    pts: Tuple[Pt, Pt, Pt]
    ccx: float
    ccy: float
    ccr: float
    edges: Tuple[Edge, Edge, Edge] = field(init=False)

    def __post_init__(self):
        a, b, c = self.v
        self.edges = (Edge(a, b), Edge(b, c), Edge(c, a))

    @classmethod
    def build(cls, points: Sequence[Pt], i: int, j: int, k: int) -> Triangle:
        """
        Створити трикутник з вершин points[i], points[j], points[k]; колінеарні -> GeometryError.
        Якщо орієнтація ненульова, але площа за Героном через округлення стала 0,
        теж GeometryError: коло з NaN/inf радіусом у сітку не потрапляє.
        """
        p1, p2, p3 = points[i], points[j], points[k]
        if orientation(p1, p2, p3) == 0:
            raise GeometryError("flat triangle", (i, j, k))
        try:
            ccx, ccy, ccr = circumcircle(p1, p2, p3)
        except ZeroDivisionError as e:
            # ненульова орієнтація, але площа за Героном зникла через округлення
            raise GeometryError("degenerate circumcircle", (i, j, k)) from e
        return cls((i, j, k), (p1, p2, p3), ccx, ccy, ccr)

    @property
    def p1(self) -> Pt:
        return self.pts[0]

    @property
    def p2(self) -> Pt:
        return self.pts[1]

    @property
    def p3(self) -> Pt:
        return self.pts[2]

    @property
    def e1(self) -> Edge:
        return self.edges[0]

    @property
    def e2(self) -> Edge:
        return self.edges[1]

    @property
    def e3(self) -> Edge:
        return self.edges[2]

    def circle_contains(self, p: Pt) -> bool:
        return point_in_circle(p, self.ccx, self.ccy, self.ccr)

    def is_cw(self) -> bool:
        return orientation(*self.pts) < 0

    def is_ccw(self) -> bool:
        return orientation(*self.pts) > 0

    def side_lengths(self) -> Tuple[float, float, float]:
        p1, p2, p3 = self.pts
        return distance(p1, p2), distance(p2, p3), distance(p3, p1)

    def center(self) -> Tuple[float, float]:
        p1, p2, p3 = self.pts
        return (p1.x + p2.x + p3.x) / 3, (p1.y + p2.y + p3.y) / 3

    def area(self) -> float:
        return _quat_cross(*self.side_lengths()) / 4

    def same_vertices(self, other: Triangle) -> bool:
        return sorted(self.v) == sorted(other.v)


class TriMesh:
    """
    Мінімальна структура 2D трикутної сітки:
      - points: робочий масив Pt (точки користувача + тимчасові супер-вершини)
      - triangles: активні трикутники (порядок значущий для детермінізму)
    """
    def __init__(self, points: List[Pt]):
        self.points: List[Pt] = points[:]  # глобальна таблиця вершин
        self.triangles: List[Triangle] = []

    def add_triangle(self, i: int, j: int, k: int) -> Triangle:
        t = Triangle.build(self.points, i, j, k)
        self.triangles.append(t)
        return t

    def remove_triangles_touching(self, limit: int) -> None:
        """Прибрати всі трикутники, що мають вершину з індексом >= limit (супер-вершини)."""
        self.triangles = [t for t in self.triangles if max(t.v) < limit]

    def edge_map(self) -> Dict[EdgeKey, List[int]]:
        """ключ ребра -> список індексів трикутників, що його містять."""
        out: Dict[EdgeKey, List[int]] = {}
        for ti, t in enumerate(self.triangles):
            for e in t.edges:
                out.setdefault(e.key, []).append(ti)
        return out

    def extract_boundary_edges(self) -> List[EdgeKey]:
        """Граничні ребра — ті, що належать рівно одному трикутнику."""
        return [key for key, lst in self.edge_map().items() if len(lst) == 1]

    def simplices(self) -> np.ndarray:
        """(m, 3) масив індексів вершин, як scipy.spatial.Delaunay.simplices."""
        return np.array([t.v for t in self.triangles], dtype=np.intp).reshape(-1, 3)

    # ---------- валідація сітки ----------
    def validate(self, eps: float = EPS, vertices: Optional[Sequence[int]] = None) -> dict:
        """
        Швидка перевірка коректності трикутної сітки:
          - кожне ребро належить 1 (межа) або 2 (внутрішнє) трикутникам;
          - жоден трикутник не вироджений;
          - порожнє коло: жодна точка з `vertices` не лежить строго всередині описаного кола.
        Повертає словник з діагностикою (порожні списки = все ок).
        """
        if vertices is None:
            vertices = range(len(self.points))

        bad_edges = [(key, len(lst)) for key, lst in self.edge_map().items() if len(lst) not in (1, 2)]

        degenerate = [ti for ti, t in enumerate(self.triangles) if orientation(*t.pts) == 0]

        non_delaunay: list[tuple[int, int]] = []
        for ti, t in enumerate(self.triangles):
            a, b, c = t.pts
            # масштаб допуску: квадрат радіуса (детермінант має розмірність довжини^4)
            tol = eps * t.ccr ** 4 if t.ccr > 0 else eps
            for pi in vertices:
                if pi in t.v:
                    continue
                if incircle(a, b, c, self.points[pi]) > tol:
                    non_delaunay.append((ti, pi))

        return {
            "triangles": len(self.triangles),
            "unique_vertices": len({i for t in self.triangles for i in t.v}),
            "bad_edges": bad_edges,                 # [(edge_key, count not in 1/2), ...]
            "degenerate": degenerate,               # [tid, ...]
            "non_delaunay": non_delaunay,           # [(tid, point_idx), ...]
        }

    # ---------- OFF-експорт (z = 0) ----------
    def to_off(self) -> str:
        """OFF для трикутників сітки; лише вершини, що використовуються."""
        used = sorted({i for t in self.triangles for i in t.v})
        remap = {old: new for new, old in enumerate(used)}
        lines = ["OFF", f"{len(used)} {len(self.triangles)} 0"]
        for i in used:
            p = self.points[i]
            lines.append(f"{p.x} {p.y} 0.0")
        for t in self.triangles:
            a, b, c = (remap[i] for i in t.v)
            lines.append(f"3 {a} {b} {c}")
        return "\n".join(lines)

    def write_off(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_off())
