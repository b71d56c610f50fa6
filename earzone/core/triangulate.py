"""Ear-clipping triangulation of simple polygons.

The caller's index buffer doubles as the polygon ring, the classification
scratch space and the output. Its rows are kept in four zones (removed,
reflex, convex, ear; see :mod:`earzone.core.zones`). Each step clips the ear
at the front of the ear zone, rotates it into the removed zone, relinks its
two neighbours and relocates them. When three records remain the first
``n - 2`` rows hold the triangles.

Example
-------
    >>> import numpy as np
    >>> from earzone.core.triangulate import triangulate
    >>> pts = np.array([[0., 0.], [1., 0.], [1., 1.], [0., 1.]])
    >>> buf = np.empty(triangulate(pts, 4, None), dtype=np.uint32)
    >>> triangulate(pts, 4, buf)
    2
"""
from __future__ import annotations

import time
from typing import Optional

import numpy as np

from .classify import is_convex, is_empty
from .config import TriangulateConfig
from .geometry import as_points, polygon_signed_area
from .logging_utils import get_logger
from .ring import SELF, ring_view, init_ring
from .stats import TriangulationStats, format_stats_table
from .validation import validate_polygon
from .zones import TriangulationState, partition, relocate

logger = get_logger('earzone.triangulate')


def required_capacity(point_count: int) -> int:
    """Number of index slots ``triangulate`` needs for ``point_count`` points."""
    return 3 * max(int(point_count), 0)


def _winding_sign(points, orientation: str) -> int:
    if orientation == 'cw':
        return -1
    if orientation == 'auto':
        return -1 if polygon_signed_area(points) < 0 else 1
    return 1


def _update_neighbour(state: TriangulationState, ear, side: int) -> None:
    """Relink the neighbour on ``side`` (0 = prev, 2 = next) of a clipped ear."""
    j = state.locate(ear[side])
    state.ring[j, 2 - side] = ear[2 - side]
    relocate(state, j)


def clip_ear(state: TriangulationState):
    """Clip the ear at the front of the ear zone and return its triangle.

    The ear row moves to row ``r``; the records that occupied rows ``r`` and
    ``c`` shift up one zone so every zone keeps its population. Afterwards
    the ear's prev neighbour points forward to the ear's next and vice versa.
    """
    ring = state.ring
    n = state.n
    if state.e >= n:
        # ears unblocked by a vertex that left the reflex zone are not promoted
        # until their own neighbourhood changes; pick them up here
        state.e = partition(state, state.c, is_empty)
        if state.stats is not None:
            state.stats.ear_refreshes += 1
    if state.e >= n:
        # no ear at all: input is not a simple polygon of the assumed winding
        state.e = n - 1
        state.c = min(state.c, state.e)
        state.forced_clips += 1
    r, c, e = state.r, state.c, state.e
    ear = tuple(int(v) for v in ring[e])
    ring[e] = ring[c]
    ring[c] = ring[r]
    ring[r] = ear
    state.r, state.c, state.e = r + 1, c + 1, e + 1
    if state.slot_of is not None:
        for s in (e, c, r):
            state.slot_of[int(ring[s, SELF])] = s
    if state.stats is not None:
        state.stats.ears_clipped += 1
    _update_neighbour(state, ear, 0)
    _update_neighbour(state, ear, 2)
    return ear


def triangulate(points, point_count: int, out_indices, config: Optional[TriangulateConfig] = None,
                stats: Optional[TriangulationStats] = None) -> int:
    """Triangulate a simple polygon into ``out_indices``.

    Parameters
    ----------
    points : array-like
        ``(n, 2)`` coordinates or a flat ``x0, y0, x1, y1, ...`` sequence,
        counter-clockwise unless ``config.orientation`` says otherwise.
        Never modified.
    point_count : int
        Number of polygon vertices ``n``.
    out_indices : numpy.ndarray
        Writable integer buffer with at least ``3 * n`` slots (1-D) or ``n``
        rows of 3 (2-D). It is used as working storage; on return its first
        ``3 * (n - 2)`` slots hold the triangle list.
    config : TriangulateConfig, optional
    stats : TriangulationStats, optional
        Reset and filled with counters for this call.

    Returns
    -------
    int
        ``0`` when ``point_count <= 0``; ``3 * point_count`` (the required
        capacity) when ``points`` or ``out_indices`` is None, in which case
        nothing is touched; otherwise the number of triangles, ``n - 2``
        (``0`` for ``n < 3``).

    Raises
    ------
    ValueError
        If the buffer or point array cannot hold ``point_count`` vertices.
    PolygonValidationError
        If ``config.validate`` is set and the polygon is malformed.
    """
    n = int(point_count)
    if n <= 0:
        return 0
    if points is None or out_indices is None:
        return required_capacity(n)
    cfg = config or TriangulateConfig()
    pts = as_points(points, n)
    ring = ring_view(out_indices, n)
    if np.may_share_memory(pts, ring):
        raise ValueError("points and out_indices must not share memory")
    if cfg.validate:
        validate_polygon(pts, raise_on_error=True, verbose=cfg.verbose)
    if stats is None and cfg.verbose:
        stats = TriangulationStats()
    if stats is not None:
        stats.reset()
        stats.n = n

    t0 = time.perf_counter()
    init_ring(ring, n)
    if n < 3:
        return 0

    state = TriangulationState(pts, ring, sign=_winding_sign(pts, cfg.orientation),
                               track_positions=(cfg.lookup == 'index'), stats=stats)
    state.c = partition(state, state.r, is_convex)
    state.e = partition(state, state.c, is_empty)
    logger.debug("n=%d zones: reflex=%d convex=%d ears=%d", n,
                 state.c - state.r, state.e - state.c, n - state.e)
    if stats is not None:
        stats.initial_reflex = state.c - state.r
        stats.initial_convex = state.e - state.c
        stats.initial_ears = n - state.e

    while state.r < n - 3:
        clip_ear(state)

    count = state.r + 1
    if state.forced_clips:
        logger.warning("%d of %d clips found no ear; polygon is not simple or its winding is not %s",
                       state.forced_clips, n - 3, cfg.orientation)
    if stats is not None:
        stats.time_total = time.perf_counter() - t0
        stats.forced_clips = state.forced_clips
        if cfg.verbose:
            logger.info("triangulation summary\n%s", format_stats_table({'triangulate': stats}))
    logger.debug("n=%d produced %d triangles", n, count)
    return count


def triangulate_polygon(points, config: Optional[TriangulateConfig] = None,
                        stats: Optional[TriangulationStats] = None) -> np.ndarray:
    """Convenience wrapper returning an ``(n-2, 3)`` int32 array of triangles."""
    pts = as_points(points)
    n = len(pts)
    buf = np.empty(required_capacity(n), dtype=np.int32)
    count = triangulate(pts, n, buf, config=config, stats=stats)
    return buf[:3 * count].reshape(count, 3).copy()


__all__ = ['triangulate', 'triangulate_polygon', 'required_capacity', 'clip_ear']
