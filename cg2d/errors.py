# cg2d/errors.py
from __future__ import annotations
from enum import Enum
from typing import Sequence, Tuple


class ErrorKind(Enum):
    INPUT = "input"
    GEOMETRY = "geometry"
    INTERNAL_LIMIT = "internal_limit"


class TriangulationError(Exception):
    """
    Базова фатальна помилка тріангуляції.
    kind    — вид помилки (ErrorKind),
    indices — 0-based індекси точок у робочому масиві, що спричинили помилку.
    Часткового результату немає: виклик переривається цілком.
    """
    kind: ErrorKind = ErrorKind.INPUT

    def __init__(self, message: str, indices: Sequence[int] = ()):
        super().__init__(message)
        self.indices: Tuple[int, ...] = tuple(indices)

    def __str__(self) -> str:
        msg = super().__str__()
        if self.indices:
            return f"{msg} (points: {', '.join(map(str, self.indices))})"
        return msg


class InputError(TriangulationError, ValueError):
    """Замало точок (потрібно щонайменше 3)."""
    kind = ErrorKind.INPUT


class GeometryError(TriangulationError, ValueError):
    """Спроба побудувати вироджений (колінеарний) трикутник."""
    kind = ErrorKind.GEOMETRY


class InternalLimitError(TriangulationError, RuntimeError):
    """Кількість активних трикутників перевищила ліміт cap_factor * n."""
    kind = ErrorKind.INTERNAL_LIMIT
