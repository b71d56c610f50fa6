"""Matplotlib rendering of polygon triangulations.

Draws a filled pass and a wireframe pass over the triangle list, the same
two passes an indexed triangle-list renderer would issue.
"""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .geometry import as_points, turn
from .logging_utils import get_logger
from .validation import check_triangulation

logger = get_logger('earzone.viz')


def reflex_vertices(points, orientation_sign: int = 1):
    """Indices of reflex corners of the ring (collinear corners included)."""
    pts = as_points(points)
    n = len(pts)
    out = []
    for i in range(n):
        if orientation_sign * turn(pts[i - 1], pts[i], pts[(i + 1) % n]) <= 0:
            out.append(i)
    return out


def plot_triangulation(points, triangles, outname="triangulation.png", title=None,
                       fill_color=(0.95, 0.95, 0.95), edge_color=(0.1, 0.1, 0.1),
                       show_outline=True, mark_reflex=False, label_vertices=False,
                       check=True):
    """Save a picture of ``triangles`` over the polygon ``points``.

    Args:
        points: (N, 2) polygon vertices
        triangles: (M, 3) triangles or flat index buffer of 3M indices
        outname: output image path
        title: plot title; defaults to vertex / triangle counts
        show_outline: draw the polygon ring on top
        mark_reflex: mark reflex vertices in red
        label_vertices: print vertex indices next to the points
        check: run check_triangulation and log a warning when it fails
    """
    pts = as_points(points)
    tris = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    if check and len(pts) >= 3:
        ok, msgs = check_triangulation(pts, tris)
        if not ok:
            logger.warning('Plotting triangulation that fails checks: %s', msgs[:5])
    fig = plt.figure(figsize=(6, 6))
    ax = fig.gca()
    for tri in tris:
        corners = pts[tri]
        ax.fill(corners[:, 0], corners[:, 1], facecolor=fill_color, edgecolor='none')
    if len(tris):
        ax.triplot(pts[:, 0], pts[:, 1], tris, color=edge_color, lw=0.6)
    if show_outline and len(pts) >= 2:
        xs = list(pts[:, 0]) + [pts[0, 0]]
        ys = list(pts[:, 1]) + [pts[0, 1]]
        ax.plot(xs, ys, color=(0.2, 0.6, 0.8), linewidth=1.4)
    # scale markers by vertex count
    npts = max(1, pts.shape[0])
    s = max(0.6, min(12.0, 200.0 / float(npts)))
    ax.scatter(pts[:, 0], pts[:, 1], s=s, color='black', zorder=3)
    if mark_reflex:
        rv = reflex_vertices(pts)
        if rv:
            ax.scatter(pts[rv, 0], pts[rv, 1], s=4 * s, color=(0.85, 0.2, 0.2), zorder=4)
    if label_vertices:
        for i, p in enumerate(pts):
            ax.annotate(str(i), (p[0], p[1]), fontsize=7, xytext=(2, 2), textcoords='offset points')
    ax.set_aspect('equal')
    ax.set_title(title or f"{len(pts)} vertices, {len(tris)} triangles")
    fig.savefig(outname, dpi=150)
    plt.close(fig)
    logger.debug('Saved triangulation plot to %s', outname)
    return outname


__all__ = ['plot_triangulation', 'reflex_vertices']
