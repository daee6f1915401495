from __future__ import annotations
from dataclasses import dataclass, field
from math import sqrt
from typing import Any, Iterable, List, Mapping, Tuple

from .errors import InputError

EPS = 1e-10  # обережний епс для перевірок (лише діагностика/валідація)

@dataclass(frozen=True)
class Pt:
    """
    Точка площини.
    id — 1-based позиція у робочій послідовності (0 = ще не призначено).
    Рівність і хеш — лише за координатами (x, y), без епсилону.
    """
    x: float
    y: float
    id: int = field(default=0, compare=False)
    def __iter__(self):
        yield self.x; yield self.y

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y

def cross(a: Pt, b: Pt) -> float:
    """z-компонента векторного добутку a x b."""
    return a.x*b.y - a.y*b.x

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def distance2(a: Pt, b: Pt) -> float:
    dx, dy = a.x - b.x, a.y - b.y
    return dx*dx + dy*dy

def distance(a: Pt, b: Pt) -> float:
    return sqrt(distance2(a, b))

def points_equal(a: Pt, b: Pt) -> bool:
    return a.x == b.x and a.y == b.y

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv)

def as_points(points: Iterable[Any]) -> List[Pt]:
    """
    Копіювання вхідних даних у свіжі Pt з id = 1..n.
    Приймає пари (x, y), записи {"x": .., "y": ..}, об'єкти з атрибутами .x/.y (у т.ч. Pt)
    або рядки numpy-масиву (N, 2). Вхідні об'єкти не змінюються.
    Нерозпізнаний запис -> InputError з його 0-based індексом.
    """
    out: List[Pt] = []
    for i, p in enumerate(points, start=1):
        try:
            if hasattr(p, "x") and hasattr(p, "y"):
                x, y = p.x, p.y
            elif isinstance(p, Mapping):
                x, y = p["x"], p["y"]
            else:
                x, y = p[0], p[1]
        except (KeyError, IndexError, TypeError) as e:
            raise InputError(f"Cannot read point coordinates from {p!r}", (i - 1,)) from e
        out.append(Pt(float(x), float(y), i))
    return out

def unique_points(points: Iterable[Tuple[float, float]], scale: float = 1e9) -> list[Pt]:
    """
    Груба дедуплікація з квантуванням (стабільніше для float).
    `scale=1e9` ≈ EPS=1e-9 на координату. Порядок першої появи зберігається.
    """
    seen: dict[Tuple[int, int], Pt] = {}
    for x, y in points:
        key = (int(round(x*scale)), int(round(y*scale)))
        if key not in seen:
            seen[key] = Pt(float(x), float(y))
    return list(seen.values())
