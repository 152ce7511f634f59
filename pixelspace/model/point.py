"""
Точка облака: неизменяемые координаты + стабильный индекс в коллекции.
"""

from dataclasses import dataclass
from typing import Protocol


class PointLike(Protocol):
    """Всё, что умеет Vector3.from_point: x, y, z и index."""
    x: float
    y: float
    z: float
    index: int


@dataclass(frozen=True)
class Point:
    """Адресуемая точка (пиксель / светодиод) инсталляции."""
    x: float
    y: float
    z: float
    index: int = -1
