"""Ring model: the working buffer of ``(prev, self, next)`` vertex records.

The caller's index buffer is viewed as ``n`` rows of three indices. Row ``i``
starts out as ``(i-1 mod n, i, i+1 mod n)``; rows are later swapped between
zones and their prev/next fields rewritten as ears are clipped, but never
created or destroyed.
"""
from __future__ import annotations

from typing import List

import numpy as np

PREV, SELF, NEXT = 0, 1, 2


def ring_view(buffer, n: int) -> np.ndarray:
    """Return the first ``n`` records of ``buffer`` as an ``(n, 3)`` view.

    ``buffer`` must be a writable integer numpy array, either 1-D with at
    least ``3n`` slots or 2-D with at least ``n`` rows of 3. Writing to the
    returned view writes the caller's buffer; nothing is copied.
    """
    if not isinstance(buffer, np.ndarray):
        raise ValueError(f"index buffer must be a numpy array, got {type(buffer).__name__}")
    if not np.issubdtype(buffer.dtype, np.integer):
        raise ValueError(f"index buffer must have an integer dtype, got {buffer.dtype}")
    if not buffer.flags.writeable:
        raise ValueError("index buffer is read-only")
    if buffer.ndim == 1:
        if buffer.size < 3 * n:
            raise ValueError(f"index buffer needs {3 * n} slots, got {buffer.size}")
        head = buffer[:3 * n]
        if not head.flags.c_contiguous:
            raise ValueError("1-D index buffer must be contiguous")
        view = head.reshape(n, 3)
    elif buffer.ndim == 2 and buffer.shape[1] == 3:
        if buffer.shape[0] < n:
            raise ValueError(f"index buffer needs {n} rows, got {buffer.shape[0]}")
        view = buffer[:n]
    else:
        raise ValueError(f"index buffer must be (3N,) or (N, 3), got shape {buffer.shape}")
    if np.iinfo(buffer.dtype).max < n - 1:
        raise ValueError(f"index dtype {buffer.dtype} cannot hold vertex index {n - 1}")
    return view


def init_ring(ring: np.ndarray, n: int) -> int:
    """Write the identity ring into ``ring`` and return ``n``.

    Returns 0 without writing anything when ``n <= 0``.
    """
    if n <= 0:
        return 0
    idx = np.arange(n)
    ring[:n, PREV] = (idx - 1) % n
    ring[:n, SELF] = idx
    ring[:n, NEXT] = (idx + 1) % n
    return n


def active_cycle(ring: np.ndarray, lo: int = 0) -> List[int]:
    """Follow ``next`` links through the records in rows ``[lo, n)``.

    Returns the vertex ids in ring order starting at the vertex of row ``lo``.
    Raises ValueError if a link leaves the active rows or the walk does not
    close after visiting every active record exactly once.
    """
    n = len(ring)
    if lo >= n:
        return []
    by_vertex = {int(ring[j, SELF]): j for j in range(lo, n)}
    start = int(ring[lo, SELF])
    order = [start]
    v = int(ring[lo, NEXT])
    while v != start:
        if v not in by_vertex:
            raise ValueError(f"ring link to vertex {v} leaves the active records")
        if len(order) >= len(by_vertex):
            raise ValueError("ring does not close over the active records")
        j = by_vertex[v]
        prev_v = int(ring[j, PREV])
        if prev_v != order[-1]:
            raise ValueError(f"vertex {v} has prev {prev_v}, expected {order[-1]}")
        order.append(v)
        v = int(ring[j, NEXT])
    if len(order) != len(by_vertex):
        raise ValueError(f"ring visits {len(order)} of {len(by_vertex)} active records")
    if int(ring[lo, PREV]) != order[-1]:
        raise ValueError(f"vertex {start} has prev {int(ring[lo, PREV])}, expected {order[-1]}")
    return order


__all__ = ['PREV', 'SELF', 'NEXT', 'ring_view', 'init_ring', 'active_cycle']
