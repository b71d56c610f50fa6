"""Polygon generators for demos, tests and benchmarks.

All generators return counter-clockwise ``(n, 2)`` float64 arrays.
"""
from __future__ import annotations

import math

import numpy as np
from scipy.spatial import ConvexHull


def _rng(seed):
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def regular_polygon(n: int, radius: float = 1.0, center=(0.0, 0.0), phase: float = 0.0) -> np.ndarray:
    ang = phase + 2.0 * np.pi * np.arange(n) / n
    return np.column_stack([center[0] + radius * np.cos(ang), center[1] + radius * np.sin(ang)])


def random_star_polygon(n: int, seed=None) -> np.ndarray:
    """Random polygon that is star-shaped around the origin.

    Vertex ``i`` sits at angle ``2*pi*i/n``; its radius follows a damped
    random walk ``r = (r + U[0,1)) / 1.5`` so neighbouring vertices have
    correlated distances and the outline has many reflex corners.
    """
    rng = _rng(seed)
    pts = np.empty((n, 2), dtype=np.float64)
    r = 0.0
    for i in range(n):
        phi = 2.0 * math.pi * i / n
        r = (r + rng.random()) / 1.5
        pts[i, 0] = 0.5 * r * math.cos(phi)
        pts[i, 1] = 0.5 * r * math.sin(phi)
    return pts


def random_convex_polygon(n_samples: int = 64, seed=None) -> np.ndarray:
    """Convex hull of ``n_samples`` uniform points in the unit square.

    For 2-D input scipy returns hull vertices in counter-clockwise order.
    """
    rng = _rng(seed)
    samples = rng.random((n_samples, 2))
    hull = ConvexHull(samples)
    return samples[hull.vertices]


def l_shape(size: float = 2.0) -> np.ndarray:
    """L-shaped hexagon with one reflex corner at ``(size/2, size/2)``."""
    h = size / 2.0
    return np.array([[0.0, 0.0], [size, 0.0], [size, h], [h, h], [h, size], [0.0, size]])


def arrow_shape() -> np.ndarray:
    """Chevron hexagon; vertex 5 at ``(1, 1)`` is reflex."""
    return np.array([[0.0, 0.0], [2.0, 0.0], [3.0, 1.0], [2.0, 2.0], [0.0, 2.0], [1.0, 1.0]])


def comb_polygon(teeth: int) -> np.ndarray:
    """Comb with ``teeth`` unit-wide teeth of height 2 on a base of height 1.

    Has ``4 * teeth`` vertices, ``2 * (teeth - 1)`` of them reflex.
    """
    if teeth < 1:
        raise ValueError(f"comb needs at least one tooth, got {teeth}")
    w = 2 * teeth - 1
    pts = [(0.0, 0.0), (float(w), 0.0)]
    for k in reversed(range(teeth)):
        x0 = 2.0 * k
        pts += [(x0 + 1.0, 3.0), (x0, 3.0)]
        if k > 0:
            pts += [(x0, 1.0), (x0 - 1.0, 1.0)]
    return np.array(pts, dtype=np.float64)


__all__ = ['regular_polygon', 'random_star_polygon', 'random_convex_polygon',
           'l_shape', 'arrow_shape', 'comb_polygon']
