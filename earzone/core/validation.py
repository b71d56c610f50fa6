"""Input validation and post-hoc verification of triangulations.

``triangulate`` does not validate its input by default: malformed polygons
give best-effort output. ``validate_polygon`` is the explicit opt-in pass
(``TriangulateConfig(validate=True)``); ``check_triangulation`` verifies a
result after the fact.
"""
from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .constants import EPS_AREA_REL
from .geometry import (area_tolerance, as_points, polygon_signed_area, triangles_signed_areas,
                       polygon_self_intersections, vectorized_seg_intersect)
from .logging_utils import get_logger

logger = get_logger('earzone.validation')


class PolygonValidationError(ValueError):
    """Raised by validate_polygon(raise_on_error=True); ``messages`` lists every problem found."""

    def __init__(self, messages):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages) if self.messages else "invalid polygon")


def polygon_orientation(points) -> str:
    """Return 'ccw', 'cw' or 'degenerate' from the sign of the signed area."""
    pts = as_points(points)
    area = polygon_signed_area(pts)
    if abs(area) <= area_tolerance(pts):
        return 'degenerate'
    return 'ccw' if area > 0 else 'cw'


def validate_polygon(points, raise_on_error: bool = False, verbose: bool = False) -> Tuple[bool, List[str]]:
    """Check that ``points`` describe a simple polygon the driver can handle.

    Detects fewer than 3 vertices, non-finite coordinates, repeated
    vertices, (near) zero area and crossing edges. Winding is not an error.

    Returns ``(ok, msgs)``; with ``raise_on_error`` a failing polygon raises
    PolygonValidationError instead.
    """
    pts = as_points(points)
    n = len(pts)
    msgs = []
    if n < 3:
        msgs.append(f"Polygon needs at least 3 vertices, got {n}.")
    elif not np.all(np.isfinite(pts)):
        bad = np.nonzero(~np.all(np.isfinite(pts), axis=1))[0]
        msgs.append(f"Non-finite coordinates at vertices {bad[:10].tolist()}.")
    else:
        _, first, counts = np.unique(pts, axis=0, return_index=True, return_counts=True)
        if np.any(counts > 1):
            dup = sorted(int(i) for i in first[counts > 1])
            msgs.append(f"Repeated vertices at {dup[:10]}.")
        area = polygon_signed_area(pts)
        if abs(area) <= area_tolerance(pts):
            msgs.append(f"Polygon has near-zero area ({area:.3e}).")
        crossings = polygon_self_intersections(pts)
        if crossings:
            shown = ", ".join(f"{i}x{j}" for i, j in crossings[:10])
            msgs.append(f"Self-intersecting edges: {shown} ({len(crossings)} total).")
    ok = not msgs
    if verbose:
        for m in msgs:
            logger.info("Validation: %s", m)
    if raise_on_error and not ok:
        raise PolygonValidationError(msgs)
    return ok, msgs


def check_triangulation(points, triangles, polygon_count=None, verbose: bool = False) -> Tuple[bool, List[str]]:
    """Verify that ``triangles`` tile the polygon given by ``points``.

    ``polygon_count`` limits the polygon to the first points (defaults to all).
    Checks index range, triangle count, degenerate and duplicate triangles,
    edges shared by more than two triangles, boundary edges that are not
    polygon sides, total area against the polygon area and proper crossings
    between triangle edges. Returns ``(ok, msgs)``.
    """
    pts = as_points(points, polygon_count)
    n = len(pts)
    tris = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    msgs = []
    if tris.shape[0] != max(n - 2, 0):
        msgs.append(f"Expected {max(n - 2, 0)} triangles, got {tris.shape[0]}.")
    if tris.size == 0:
        return (not msgs), msgs
    if tris.min() < 0 or tris.max() >= n:
        msgs.append("Triangle indices out of range.")
        return False, msgs

    areas = triangles_signed_areas(pts, tris)
    abs_areas = np.abs(areas)
    min_area = area_tolerance(pts)
    for ti in np.nonzero(abs_areas <= min_area)[0][:50]:
        msgs.append(f"Triangle {int(ti)} has near-zero area ({abs_areas[ti]:.3e}).")
    poly_area = polygon_signed_area(pts)
    if poly_area != 0.0:
        flipped = np.nonzero(np.sign(areas) == -np.sign(poly_area))[0]
        for ti in flipped[:50]:
            msgs.append(f"Triangle {int(ti)} is oriented against the polygon ({areas[ti]:.3e}).")

    _, tri_counts = np.unique(np.sort(tris, axis=1), axis=0, return_counts=True)
    if np.any(tri_counts > 1):
        msgs.append("Duplicate triangles detected.")

    edges = np.vstack((tris[:, [0, 1]], tris[:, [1, 2]], tris[:, [2, 0]]))
    edges.sort(axis=1)
    uniq_edges, counts = np.unique(edges, axis=0, return_counts=True)
    for e in uniq_edges[counts > 2][:10]:
        msgs.append(f"Non-manifold edge ({int(e[0])}, {int(e[1])}) shared by >2 triangles.")
    sides = {tuple(sorted((i, (i + 1) % n))) for i in range(n)}
    for e in uniq_edges[counts == 1][:n + 10]:
        if (int(e[0]), int(e[1])) not in sides:
            msgs.append(f"Edge ({int(e[0])}, {int(e[1])}) is on the boundary but is not a polygon side.")

    tri_area = float(abs_areas.sum())
    tol = max(min_area, EPS_AREA_REL * abs(poly_area))
    if abs(tri_area - abs(poly_area)) > tol:
        msgs.append(f"Triangle area {tri_area:.12g} differs from polygon area {abs(poly_area):.12g}.")

    # proper crossings between distinct edges
    m = len(uniq_edges)
    if m > 1:
        ii, jj = np.triu_indices(m, k=1)
        hits = vectorized_seg_intersect(pts[uniq_edges[ii, 0]], pts[uniq_edges[ii, 1]],
                                        pts[uniq_edges[jj, 0]], pts[uniq_edges[jj, 1]])
        if np.any(hits):
            msgs.append(f"{int(np.count_nonzero(hits))} crossing edge pairs detected.")

    if verbose:
        for msg in msgs:
            logger.info("Triangulation check: %s", msg)
    return (not msgs), msgs


__all__ = ['PolygonValidationError', 'polygon_orientation', 'validate_polygon', 'check_triangulation']
