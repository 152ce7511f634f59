# pixelspace/math/utils.py
"""
Скалярные помощники для math‑пакета.
"""


def lerp(a, b, amount):
    """
    Линейная интерполяция a + amount·(b − a).

    Работает и со скалярами, и с ndarray – Vector3.lerp передаёт сюда
    весь массив координат сразу.
    """
    return a + amount * (b - a)
