"""
Вращение сетки точек: один Vector3 на точку, результат сопоставляется
с исходной точкой через source_index.
"""

import math

import numpy as np

import pixelspace as ps
from pixelspace.utils import Profiler, logger


def make_grid(size: int = 8, spacing: float = 0.25):
    """Куб size×size×size точек с центром в нуле."""
    offset = (size - 1) * spacing * 0.5
    points = []
    for i in range(size):
        for j in range(size):
            for k in range(size):
                points.append(ps.Point(i * spacing - offset,
                                       j * spacing - offset,
                                       k * spacing - offset,
                                       index=len(points)))
    return points


def render_frame(vectors, theta: float, out: np.ndarray) -> np.ndarray:
    """Повернуть каждую точку и записать её x, y, z в строку out[source_index]."""
    for v in vectors:
        v.set(v.source_point.x, v.source_point.y, v.source_point.z)
        v.rotate(theta, 1.0, 1.0, 0.0).limit(1.0)
        out[v.source_index] = v.as_np()
    return out


if __name__ == "__main__":
    points = make_grid()
    vectors = [ps.Vector3.from_point(p) for p in points]
    positions = np.zeros((len(points), 3), dtype=np.float32)

    logger.info(f"Rotating {len(points)} points...")
    for frame in range(60):
        with Profiler(f"frame {frame}") as prof:
            render_frame(vectors, frame * math.pi / 30.0, positions)
    logger.info(f"Last frame took {prof.elapsed_ms:.2f} ms, "
                f"max radius {np.linalg.norm(positions, axis=1).max():.3f}")
