# cg2d/delaunay.py
from __future__ import annotations
from collections import Counter
from typing import Any, Iterable, List, Optional, Tuple

import structlog

from .errors import InputError, InternalLimitError
from .geom import Pt, EPS, as_points
from .mesh import Edge, Triangle, TriMesh

logger = structlog.get_logger()

CONVEX_MULTIPLIER = 1000.0  # у скільки разів супер-трикутник більший за bounding box
TRIANGLE_CAP_FACTOR = 4     # ліміт активних трикутників: cap_factor * n


class Delaunay2D:
    """
    Інкрементальна 2D тріангуляція Делоне з порожнім колом (Bowyer–Watson).

    Вхідні точки копіюються у власний робочий масив (id = 1..n), тож об'єкти
    й послідовності викликача не змінюються. Супер-вершини отримують id n+1..n+3
    і живуть у масиві лише під час build().
    """
    def __init__(
        self,
        points: Iterable[Any],
        convex_multiplier: float = CONVEX_MULTIPLIER,
        cap_factor: int = TRIANGLE_CAP_FACTOR,
        eps: float = EPS,
    ):
        pts = as_points(points)
        if len(pts) < 3:
            raise InputError(f"Cannot triangulate, needs at least 3 points, got {len(pts)}")
        self.n = len(pts)
        self.convex_multiplier = convex_multiplier
        self.cap = cap_factor * self.n
        self.eps = eps
        self.mesh = TriMesh(pts)
        self.super_verts: Tuple[int, int, int] | None = None
        self._built = False

    @property
    def triangles(self) -> List[Triangle]:
        return self.mesh.triangles

    # ---- супер-трикутник ----
    def _build_super_triangle(self) -> Tuple[int, int, int]:
        pts = self.mesh.points[:self.n]
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        min_x, max_x = min(xs), max(xs)
        min_y, max_y = min(ys), max(ys)
        dx = (max_x - min_x) * self.convex_multiplier
        dy = (max_y - min_y) * self.convex_multiplier
        delta = max(dx, dy)
        mx = (min_x + max_x) * 0.5
        my = (min_y + max_y) * 0.5

        # 3 вершини великого трикутника навколо всіх точок
        n = self.n
        a = Pt(mx - 2 * delta, my - delta, n + 1)
        b = Pt(mx, my + 2 * delta, n + 2)
        c = Pt(mx + 2 * delta, my - delta, n + 3)
        self.mesh.points.extend((a, b, c))
        self.super_verts = (n, n + 1, n + 2)
        self.mesh.add_triangle(*self.super_verts)
        logger.debug("super triangle built", delta=delta, center=(mx, my))
        return self.super_verts

    # ---- вставка однієї точки ----
    def insert(self, p_idx: int) -> None:
        p = self.mesh.points[p_idx]
        triangles = self.mesh.triangles

        # 1) знайти «порушників»: трикутники, у чиєму колі лежить p (прохід з кінця)
        edges: List[Edge] = []
        for j in range(len(triangles) - 1, -1, -1):
            t = triangles[j]
            if t.circle_contains(p):
                edges.extend(t.edges)
                del triangles[j]

        # 2) спільні ребра скорочуються попарно; при непарній кратності лишається перша поява
        counts = Counter(e.key for e in edges)
        kept: set = set()
        boundary: List[Edge] = []
        for e in edges:
            if counts[e.key] % 2 and e.key not in kept:
                kept.add(e.key)
                boundary.append(e)

        # 3) заповнити порожнину віялом з p
        for e in boundary:
            if len(triangles) > self.cap:
                logger.error("triangle cap exceeded", cap=self.cap, point=p_idx)
                raise InternalLimitError(
                    f"Generated more than {self.cap} triangles", (e.u, e.v, p_idx)
                )
            triangles.append(Triangle.build(self.mesh.points, e.u, e.v, p_idx))

    def build(self, insert_order: Optional[List[int]] = None) -> List[Triangle]:
        """
        Побудувати тріангуляцію для всіх вхідних точок.
        Порядок вставки — порядок вводу (він визначає вибір діагоналі для коцикличних точок).
        """
        if self._built:
            raise RuntimeError("triangulation already built")
        self._built = True

        if self.n == 3:
            # супер-трикутник не потрібен
            self.mesh.add_triangle(0, 1, 2)
            return self.triangles

        self._build_super_triangle()
        order = range(self.n) if insert_order is None else insert_order
        for vi in order:
            self.insert(vi)
        logger.debug("points inserted", points=self.n, triangles_with_super=len(self.triangles))

        self.remove_super_triangle()
        logger.info("triangulation complete", points=self.n, triangles=len(self.triangles))
        return self.triangles

    def validate(self) -> dict:
        """Діагностика поточної сітки (див. TriMesh.validate) з допуском self.eps."""
        return self.mesh.validate(self.eps)

    def remove_super_triangle(self) -> None:
        """Прибрати трикутники, що торкаються супер-вершин, і самі супер-вершини."""
        if not self.super_verts:
            return
        self.mesh.remove_triangles_touching(self.n)
        del self.mesh.points[self.n:]
        self.super_verts = None


def triangulate_points(points: Iterable[Any], **kwargs) -> List[Triangle]:
    """
    Тріангуляція Делоне послідовності точок ((x, y), Pt, об'єкти з .x/.y, рядки numpy (N, 2)).
    Повертає трикутники, що посилаються лише на вхідні точки (свіжі Pt з id = 1..n).
    """
    d2 = Delaunay2D(points, **kwargs)
    return d2.build()


def triangulate_vec2s(vectors: Iterable[Any], **kwargs) -> List[Triangle]:
    """Адаптер для векторних об'єктів з атрибутами .x/.y."""
    return triangulate_points([Pt(v.x, v.y) for v in vectors], **kwargs)
