"""
pixelspace – изменяемые векторы для трансформаций облака точек
(пиксели / светодиоды 3‑D инсталляций).
"""

from pixelspace.utils import logger
from pixelspace.math import Vector3, lerp
from pixelspace.model import Point

__version__ = "1.0.0"

__all__ = [
    "Vector3",
    "Point",
    "lerp",
    "logger",
]
