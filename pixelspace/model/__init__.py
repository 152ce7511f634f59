"""
Модель облака точек (только запись Point – управление облаком вне пакета).
"""

from pixelspace.model.point import Point, PointLike

__all__ = ["Point", "PointLike"]
