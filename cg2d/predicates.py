# cg2d/predicates.py
from __future__ import annotations
from math import sqrt
from typing import List, Tuple
from .geom import Pt, sub, cross, distance

def orientation(p1: Pt, p2: Pt, p3: Pt) -> float:
    """
    Векторний добуток ребер (p1->p2) x (p2->p3).
      >0  обхід p1-p2-p3 проти годинникової стрілки,
      <0  за годинниковою,
       0  точки колінеарні.
    """
    return cross(sub(p2, p1), sub(p3, p2))

def _quat_cross(a: float, b: float, c: float) -> float:
    """4 * площа трикутника зі сторонами a, b, c (формула Герона)."""
    p = (a + b + c) * (a + b - c) * (a - b + c) * (-a + b + c)
    return sqrt(p) if p > 0.0 else 0.0

def circumcenter(p1: Pt, p2: Pt, p3: Pt) -> Tuple[float, float]:
    """Центр описаного кола через детермінантну формулу. Для колінеарних точок D == 0 -> ZeroDivisionError."""
    s1 = p1.x*p1.x + p1.y*p1.y
    s2 = p2.x*p2.x + p2.y*p2.y
    s3 = p3.x*p3.x + p3.y*p3.y
    d = (p1.x*(p2.y - p3.y) + p2.x*(p3.y - p1.y) + p3.x*(p1.y - p2.y)) * 2.0
    x = s1*(p2.y - p3.y) + s2*(p3.y - p1.y) + s3*(p1.y - p2.y)
    y = s1*(p3.x - p2.x) + s2*(p1.x - p3.x) + s3*(p2.x - p1.x)
    return x / d, y / d

def circumradius(p1: Pt, p2: Pt, p3: Pt) -> float:
    """R = a*b*c / (4*Area)."""
    a, b, c = distance(p1, p2), distance(p2, p3), distance(p3, p1)
    return (a * b * c) / _quat_cross(a, b, c)

def circumcircle(p1: Pt, p2: Pt, p3: Pt) -> Tuple[float, float, float]:
    x, y = circumcenter(p1, p2, p3)
    return x, y, circumradius(p1, p2, p3)

def point_in_circle(p: Pt, cx: float, cy: float, r: float) -> bool:
    """Точка на самому колі теж вважається «всередині» (нестрогий тест)."""
    dx = cx - p.x
    dy = cy - p.y
    return (dx*dx + dy*dy) <= r*r

# ---------- інструмент для детермінанта ----------
def _det(m: List[List[float]]) -> float:
    """Детермінант через Гауса з частковим вибором опорного елемента (float)."""
    n = len(m)
    a = [row[:] for row in m]
    det = 1.0
    for i in range(n):
        # півод
        piv = i
        maxv = abs(a[i][i])
        for r in range(i+1, n):
            v = abs(a[r][i])
            if v > maxv:
                maxv = v; piv = r
        if maxv == 0.0:
            return 0.0
        if piv != i:
            a[i], a[piv] = a[piv], a[i]
            det = -det
        det *= a[i][i]
        inv = 1.0 / a[i][i]
        # елімінація
        for r in range(i+1, n):
            factor = a[r][i] * inv
            if factor != 0.0:
                for c in range(i, n):
                    a[r][c] -= factor * a[i][c]
    return det

def incircle(a: Pt, b: Pt, c: Pt, d: Pt) -> float:
    """
    Знак тесту «чи лежить d всередині кола, що проходить через a, b, c?».
    Повертає:
      >0  якщо d всередині,
      <0  якщо зовні,
       0  якщо на колі (з точністю до похибки) або a, b, c колінеарні.
    Рядки зсунуті на d — так детермінант 3x3 і менша похибка.
    """
    def row(p: Pt) -> list[float]:
        dx, dy = p.x - d.x, p.y - d.y
        return [dx, dy, dx*dx + dy*dy]

    val = _det([row(a), row(b), row(c)])
    ori = orientation(a, b, c)
    if ori > 0:
        return val
    elif ori < 0:
        return -val
    return 0.0
