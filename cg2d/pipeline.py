from __future__ import annotations
from typing import Any, Iterable, List, Tuple

from .delaunay import Delaunay2D
from .geom import Pt, as_points, unique_points


def triangulate(
    points: Iterable[Any],
    backend: str = "internal",
    dedupe: bool = False,
) -> Tuple[List[Pt], List[Tuple[int, int, int]]]:
    """
    Повний пайплайн:
      - (опційно) прибирає дублікати точок;
      - будує 2D Делоне-тріангуляцію нашим Delaunay2D або через SciPy Delaunay.

    Повертає:
      pts       — список Pt у фінальному порядку (id = 1..n);
      triangles — список трикутників (0-based індекси у pts).
    """
    pts: List[Pt] = as_points(points)
    if dedupe:
        pts = as_points(unique_points(pts))

    if backend.lower() == "internal":
        d2 = Delaunay2D(pts)
        d2.build()
        return d2.mesh.points, [t.v for t in d2.triangles]

    elif backend.lower() == "scipy":
        try:
            import numpy as np
            from scipy.spatial import Delaunay
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', але SciPy не встановлено. "
                "Встанови scipy або використай backend='internal'."
            ) from e

        arr = np.array([(p.x, p.y) for p in pts], dtype=float)
        dela = Delaunay(arr)  # Qhull під капотом
        tris = [tuple(int(i) for i in simplex) for simplex in dela.simplices]

        return pts, tris

    else:
        raise ValueError(f"Невідомий backend: {backend}")
