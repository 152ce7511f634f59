"""
Математический суб‑пакет: Vector3 и скалярные помощники.
"""

from pixelspace.math.utils import lerp
from pixelspace.math.vec3 import Vector3, NO_INDEX

__all__ = ["Vector3", "NO_INDEX", "lerp"]
