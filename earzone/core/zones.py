"""Zone partitioning of the working buffer.

The buffer rows are split by three boundaries ``r <= c <= e``::

    [0, r)  removed ears (the output triangles)
    [r, c)  reflex vertices
    [c, e)  convex vertices that are not ears
    [e, n)  ears

Records change zone only through single row swaps. ``partition`` builds the
zones once; ``relocate`` moves one record after its neighbourhood changed.
"""
from __future__ import annotations

from typing import Callable, List, Optional

from .classify import is_convex, is_empty
from .ring import SELF
from .stats import TriangulationStats


class TriangulationState:
    """Mutable state of one triangulation call.

    Holds the point coordinates as ``(x, y)`` tuples, the ``(n, 3)`` ring view
    of the caller's buffer and the zone boundaries. With ``track_positions``
    a vertex -> row list is kept in step with every swap so that neighbour
    lookup is O(1); otherwise :meth:`locate` scans the active rows.
    """

    def __init__(self, points, ring, sign: int = 1, track_positions: bool = True,
                 stats: Optional[TriangulationStats] = None):
        self.xy = [(float(x), float(y)) for x, y in points]
        self.ring = ring
        self.n = len(ring)
        self.sign = 1 if sign >= 0 else -1
        self.stats = stats
        self.r = 0
        self.c = 0
        self.e = 0
        self.forced_clips = 0
        self.slot_of: Optional[List[int]] = None
        if track_positions:
            self.slot_of = [0] * self.n
            for j in range(self.n):
                self.slot_of[int(ring[j, SELF])] = j

    @property
    def active(self) -> int:
        """Number of records not yet emitted."""
        return self.n - self.r

    def swap(self, i: int, j: int) -> None:
        if i == j:
            return
        ring = self.ring
        ring[[i, j]] = ring[[j, i]]
        if self.slot_of is not None:
            self.slot_of[int(ring[i, SELF])] = i
            self.slot_of[int(ring[j, SELF])] = j

    def locate(self, vertex: int) -> int:
        """Return the row currently holding ``vertex`` among the active rows."""
        if self.slot_of is not None:
            return self.slot_of[vertex]
        ring = self.ring
        for j in range(self.r, self.n):
            if self.stats is not None:
                self.stats.scan_steps += 1
            if ring[j, SELF] == vertex:
                return j
        raise RuntimeError(f"vertex {vertex} is not in the active ring")

    def zones(self):
        """Return the (removed, reflex, convex, ear) row ranges."""
        return (range(0, self.r), range(self.r, self.c),
                range(self.c, self.e), range(self.e, self.n))


def partition(state: TriangulationState, lo: int, predicate: Callable[[TriangulationState, int], bool]) -> int:
    """Move rows of ``[lo, n)`` failing ``predicate`` to the front of the range.

    Returns the first row of the part that satisfies the predicate.
    """
    for i in range(lo, state.n):
        if not predicate(state, i):
            state.swap(i, lo)
            lo += 1
    return lo


def relocate(state: TriangulationState, slot: int) -> None:
    """Re-classify the record in ``slot`` and move it to its zone.

    Called for the two neighbours of a freshly clipped ear. A reflex vertex
    can only become convex and possibly an ear; a convex one can only become
    an ear; an ear can lose its status and fall back to convex or reflex.
    """
    stats = state.stats
    if slot < state.c:
        if not is_convex(state, slot):
            return
        state.c -= 1
        state.swap(state.c, slot)
        if stats is not None:
            stats.promotions += 1
        if is_empty(state, state.c):
            state.e -= 1
            state.swap(state.e, state.c)
            if stats is not None:
                stats.promotions += 1
    elif slot < state.e:
        if is_empty(state, slot):
            state.e -= 1
            state.swap(state.e, slot)
            if stats is not None:
                stats.promotions += 1
    else:
        if is_convex(state, slot) and is_empty(state, slot):
            return
        state.swap(state.e, slot)
        state.e += 1
        if stats is not None:
            stats.demotions += 1
        if not is_convex(state, state.e - 1):
            state.swap(state.c, state.e - 1)
            state.c += 1
            if stats is not None:
                stats.demotions += 1


def check_zones(state: TriangulationState, strict: bool = False) -> List[str]:
    """Return messages for every record whose zone disagrees with its class.

    Reflex and ear zones are always exact. A convex vertex that became an ear
    because some other vertex stopped being reflex stays in the convex zone
    until its own neighbourhood changes; only ``strict`` reports those.
    Classifier counters are not touched. Intended for tests and debugging.
    """
    msgs = []
    if not (0 <= state.r <= state.c <= state.e <= state.n):
        return [f"zone boundaries out of order: r={state.r} c={state.c} e={state.e} n={state.n}"]
    saved = state.stats
    state.stats = None
    try:
        for j in range(state.r, state.n):
            v = int(state.ring[j, SELF])
            convex = is_convex(state, j)
            if j < state.c:
                if convex:
                    msgs.append(f"row {j} (vertex {v}) in reflex zone is convex")
            elif not convex:
                msgs.append(f"row {j} (vertex {v}) in convex zone is reflex")
            elif j < state.e:
                if strict and is_empty(state, j):
                    msgs.append(f"row {j} (vertex {v}) in non-ear zone is an ear")
            elif not is_empty(state, j):
                msgs.append(f"row {j} (vertex {v}) in ear zone is not empty")
            if state.slot_of is not None and state.slot_of[v] != j:
                msgs.append(f"position index maps vertex {v} to row {state.slot_of[v]}, found in row {j}")
    finally:
        state.stats = saved
    return msgs


__all__ = ['TriangulationState', 'partition', 'relocate', 'check_zones']
