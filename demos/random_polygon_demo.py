#!/usr/bin/env python3
"""
Demo: triangulate a random star-shaped polygon, log the run statistics and
save a plot (and optionally a legacy VTK file) of the result.
"""
from __future__ import annotations

import argparse

import numpy as np

from earzone.core.config import TriangulateConfig
from earzone.core.io import load_polygon, write_vtk
from earzone.core.logging_utils import configure_logging, get_logger
from earzone.core.shapes import random_star_polygon
from earzone.core.stats import TriangulationStats, format_stats_table
from earzone.core.triangulate import triangulate
from earzone.core.validation import check_triangulation
from earzone.core.visualization import plot_triangulation

logger = get_logger('earzone.demo')


def run_random_polygon_demo(npoints=200, seed=None, polygon_file=None, out='random_polygon.png',
                            vtk=None, orientation='ccw', lookup='index'):
    """Triangulate one polygon and return ``(points, triangles, stats)``."""
    if polygon_file:
        pts = load_polygon(polygon_file)
    else:
        pts = random_star_polygon(npoints, seed=seed)
    n = len(pts)
    cfg = TriangulateConfig(orientation=orientation, lookup=lookup)
    stats = TriangulationStats()
    buf = np.empty(triangulate(pts, n, None), dtype=np.uint32)
    count = triangulate(pts, n, buf, config=cfg, stats=stats)
    tris = buf[:3 * count].reshape(count, 3)

    ok, msgs = check_triangulation(pts, tris)
    if ok:
        logger.info('Triangulated %d vertices into %d triangles', n, count)
    else:
        logger.warning('Triangulation check failed: %s', msgs[:5])
    logger.info('\n%s', format_stats_table({'demo': stats}))

    plot_triangulation(pts, tris, outname=out, mark_reflex=(n <= 400), check=False)
    logger.info('Wrote %s', out)
    if vtk:
        write_vtk(vtk, pts, tris)
        logger.info('Wrote %s', vtk)
    return pts, tris, stats


def main():
    ap = argparse.ArgumentParser(description='Random polygon triangulation demo')
    ap.add_argument('--npoints', type=int, default=200, help='Number of polygon vertices (default: 200)')
    ap.add_argument('--seed', type=int, default=None)
    ap.add_argument('--polygon', type=str, default=None, help='Read vertices from a text file instead')
    ap.add_argument('--out', type=str, default='random_polygon.png')
    ap.add_argument('--vtk', type=str, default=None, help='Also write a legacy VTK file')
    ap.add_argument('--orientation', choices=['ccw', 'cw', 'auto'], default='ccw')
    ap.add_argument('--lookup', choices=['index', 'scan'], default='index')
    ap.add_argument('--log-level', type=str, default='INFO')
    args = ap.parse_args()

    configure_logging(args.log_level)

    run_random_polygon_demo(npoints=args.npoints, seed=args.seed, polygon_file=args.polygon,
                            out=args.out, vtk=args.vtk, orientation=args.orientation,
                            lookup=args.lookup)


if __name__ == '__main__':  # pragma: no cover
    main()
