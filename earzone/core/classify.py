"""Vertex classifiers used to sort ring records into zones.

Both predicates take the triangulation state and a buffer row and read the
record ``(prev, self, next)`` stored there. They never modify the buffer.
"""
from __future__ import annotations

from .geometry import turn, point_in_triangle
from .ring import SELF


def is_convex(state, slot: int) -> bool:
    """True when the vertex in ``slot`` is a strictly convex corner.

    ``state.sign`` is +1 for counter-clockwise rings and -1 for clockwise
    ones; collinear corners are never convex.
    """
    p, s, q = state.ring[slot]
    xy = state.xy
    if state.stats is not None:
        state.stats.convexity_tests += 1
    return state.sign * turn(xy[p], xy[s], xy[q]) > 0


def is_empty(state, slot: int) -> bool:
    """True when no currently-reflex vertex lies inside the triangle at ``slot``.

    Only rows ``[state.r, state.c)`` are examined: in a simple polygon any
    vertex inside a convex corner's triangle is reflex. The triangle's own
    three vertices are skipped.
    """
    ring = state.ring
    xy = state.xy
    ia, ib, ic = (int(v) for v in ring[slot])
    a = xy[ia]; b = xy[ib]; c = xy[ic]
    stats = state.stats
    if stats is not None:
        stats.emptiness_tests += 1
    for j in range(state.r, state.c):
        v = int(ring[j, SELF])
        if v == ia or v == ib or v == ic:
            continue
        if stats is not None:
            stats.reflex_point_tests += 1
        if point_in_triangle(xy[v], a, b, c):
            return False
    return True


def is_ear(state, slot: int) -> bool:
    return is_convex(state, slot) and is_empty(state, slot)


__all__ = ['is_convex', 'is_empty', 'is_ear']
