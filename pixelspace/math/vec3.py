# -*- coding: utf-8 -*-
"""
Изменяемый трёхмерный вектор (float32) для трансформаций точек облака.

Все мутаторы меняют объект на месте и возвращают ``self``, поэтому вызовы
складываются в цепочку::

    v = Vector3.from_point(p).rotate(theta, 0, 1, 0).limit(2.0)

Привязка к исходной точке (``source_point`` / ``source_index``) задаётся один
раз при создании и дальше не меняется, какие бы трансформации ни применялись
к координатам.
"""

from math import cos, nan, sin, sqrt
from typing import Optional, Tuple

import numpy as np

from pixelspace.math.utils import lerp
from pixelspace.model.point import PointLike
from pixelspace.utils.config import Config

NO_INDEX = -1


def _ieee():
    """Переполнение, inf·0 и деление на 0 дают inf/NaN без RuntimeWarning."""
    return np.errstate(over="ignore", invalid="ignore", divide="ignore")


class Vector3:
    """Вектор‑3 с привязкой к точке облака. Ошибки не бросает: inf/NaN идут дальше."""

    __slots__ = ("_v", "_point", "_index")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        with _ieee():
            self._v = np.array([x, y, z], dtype=np.float32)
        self._point = None
        self._index = NO_INDEX

    # -----------------------------------------------------------------
    # конструкторы
    # -----------------------------------------------------------------
    @classmethod
    def from_point(cls, point: PointLike) -> "Vector3":
        """Скопировать координаты точки и запомнить её саму и её индекс."""
        v = cls(point.x, point.y, point.z)
        v._point = point
        v._index = int(point.index)
        return v

    @classmethod
    def from_vector(cls, other: "Vector3") -> "Vector3":
        """Копия координат; привязка к точке та же самая (не клонируется)."""
        v = cls.__new__(cls)
        v._v = other._v.copy()
        v._point = other._point
        v._index = other._index
        return v

    @classmethod
    def from_coordinates(cls, x: float, y: float, z: float) -> "Vector3":
        return cls(x, y, z)

    # -----------------------------------------------------------------
    # свойства
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        with _ieee():
            self._v[0] = value

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        with _ieee():
            self._v[1] = value

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        with _ieee():
            self._v[2] = value

    @property
    def source_point(self):
        """Точка, из которой построен вектор (или None)."""
        return self._point

    @property
    def source_index(self) -> int:
        """Индекс исходной точки в облаке, -1 если точки нет."""
        return self._index

    # -----------------------------------------------------------------
    # мутаторы (меняют объект, возвращают self)
    # -----------------------------------------------------------------
    def set(self, x, y: Optional[float] = None, z: Optional[float] = None) -> "Vector3":
        """set(x, y[, z]) или set(other). Без z координата z не меняется."""
        if y is None:
            self._v[:] = x._v
            return self
        with _ieee():
            if z is None:
                self._v[:2] = (x, y)
            else:
                self._v[:] = (x, y, z)
        return self

    def copy(self) -> "Vector3":
        return type(self).from_vector(self)

    def add(self, x, y: Optional[float] = None, z: Optional[float] = None) -> "Vector3":
        with _ieee():
            if y is None:
                self._v += x._v
            elif z is None:
                self._v[:2] += (x, y)
            else:
                self._v += (x, y, z)
        return self

    def sub(self, x, y: Optional[float] = None, z: Optional[float] = None) -> "Vector3":
        with _ieee():
            if y is None:
                self._v -= x._v
            elif z is None:
                self._v[:2] -= (x, y)
            else:
                self._v -= (x, y, z)
        return self

    def mult(self, n: float) -> "Vector3":
        with _ieee():
            self._v *= n
        return self

    def div(self, n: float) -> "Vector3":
        with _ieee():
            self._v /= n
        return self

    def cross(self, x, y: Optional[float] = None, z: Optional[float] = None) -> "Vector3":
        """Перезаписывает self результатом self × (x, y, z)."""
        if y is None:
            x, y, z = x._v.tolist()
        sx, sy, sz = self._v.tolist()
        return self.set(sy * z - sz * y,
                        sz * x - sx * z,
                        sx * y - sy * x)

    def normalize(self) -> "Vector3":
        m = self.mag()
        if m != 0.0 and m != 1.0:
            self.div(m)
        return self

    def limit(self, max_mag: float) -> "Vector3":
        mag2 = self.mag_sq()
        if mag2 > max_mag * max_mag:
            self.mult(max_mag / sqrt(mag2))
        return self

    def set_mag(self, mag: float) -> "Vector3":
        self.normalize()
        return self.mult(mag)

    def lerp(self, other: "Vector3", amt: float) -> "Vector3":
        """Покоординатная интерполяция, amt вне [0, 1] экстраполирует."""
        with _ieee():
            self._v[:] = lerp(self._v, other._v, amt)
        return self

    # -----------------------------------------------------------------
    # вращения
    # -----------------------------------------------------------------
    def rotate(self, theta: float, l: Optional[float] = None,
               m: Optional[float] = None, n: Optional[float] = None) -> "Vector3":
        """
        rotate(theta)          – поворот в плоскости x‑y, z не меняется;
        rotate(theta, l, m, n) – поворот вокруг произвольной оси (l, m, n).

        Угол в радианах. Ось нормализуется, если она не единичная.
        Нулевая ось даёт NaN.
        """
        if l is None:
            return self._rotate_xy(theta)

        ss = l * l + m * m + n * n
        if ss != 1:
            sr = sqrt(ss)
            if sr == 0.0:
                l = m = n = nan
            else:
                l, m, n = l / sr, m / sr, n / sr

        if l == 0.0 and m == 0.0 and n == 1.0:
            return self._rotate_xy(theta)

        s = sin(theta)
        c = cos(theta)
        t = 1.0 - c
        a1, a2, a3 = l * l * t + c,     l * m * t - n * s, l * n * t + m * s
        b1, b2, b3 = l * m * t + n * s, m * m * t + c,     m * n * t - l * s
        c1, c2, c3 = l * n * t - m * s, m * n * t + l * s, n * n * t + c

        # все три результата считаются от координат до поворота
        x, y, z = self._v.tolist()
        xp = x * a1 + y * a2 + z * a3
        yp = x * b1 + y * b2 + z * b3
        zp = x * c1 + y * c2 + z * c3
        with _ieee():
            self._v[:] = (xp, yp, zp)
        return self

    def _rotate_xy(self, theta: float) -> "Vector3":
        c = cos(theta)
        s = sin(theta)
        xx, yy, _ = self._v.tolist()
        with _ieee():
            self._v[:2] = (xx * c - yy * s, xx * s + yy * c)
        return self

    # -----------------------------------------------------------------
    # скалярные величины
    # -----------------------------------------------------------------
    def mag(self) -> float:
        with _ieee():
            return float(np.sqrt(np.dot(self._v, self._v)))

    def mag_sq(self) -> float:
        with _ieee():
            return float(np.dot(self._v, self._v))

    def dist(self, other: "Vector3") -> float:
        with _ieee():
            d = self._v - other._v
            return float(np.sqrt(np.dot(d, d)))

    def dot(self, x, y: Optional[float] = None, z: Optional[float] = None) -> float:
        with _ieee():
            if y is None:
                return float(np.dot(self._v, x._v))
            return float(np.dot(self._v, np.array((x, y, z), dtype=np.float32)))

    def is_close(self, other: "Vector3", tol: Optional[float] = None) -> bool:
        """Сравнение координат с допуском (привязка к точке не учитывается)."""
        if tol is None:
            tol = Config()["math"]["tolerance"]
        return bool(np.allclose(self._v, other._v, rtol=0.0, atol=tol))

    # -----------------------------------------------------------------
    # приведение типов
    # -----------------------------------------------------------------
    def as_np(self) -> np.ndarray:
        """Копия 3‑элементного массива float32."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    # -----------------------------------------------------------------
    # сравнение / представление
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return (self._point is other._point
                and self._index == other._index
                and bool(np.array_equal(self._v, other._v)))

    def __hash__(self):
        # +0.0 сводит -0.0 к 0.0: равные векторы дают одинаковый хэш
        result = 1
        for bits in (self._v + np.float32(0.0)).view(np.int32):
            result = 31 * result + int(bits)
        return 31 * result + self._index

    def __str__(self):
        return "[ {}, {}, {} ]".format(*(str(c) for c in self._v))

    def __repr__(self):
        return f"Vector3({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, index={self._index})"
