"""Benchmark triangulation time against polygon size.

Compares the vertex -> row position index against the reference linear
scan for locating a clipped ear's neighbours, on convex and star-shaped
input. Convex polygons should scale linearly in both modes; the scan mode
degrades to quadratic once neighbours sit deep in the active range.
"""

import time

import numpy as np

from earzone.core.config import TriangulateConfig
from earzone.core.shapes import regular_polygon, random_star_polygon
from earzone.core.stats import TriangulationStats, format_stats_table
from earzone.core.triangulate import triangulate


def time_one(points, lookup, repeats=3):
    n = len(points)
    buf = np.empty(triangulate(points, n, None), dtype=np.uint32)
    cfg = TriangulateConfig(lookup=lookup)
    stats = TriangulationStats()
    best = float('inf')
    for _ in range(repeats):
        t0 = time.perf_counter()
        triangulate(points, n, buf, config=cfg, stats=stats)
        best = min(best, time.perf_counter() - t0)
    stats.time_total = best
    return stats


def benchmark(sizes=(100, 300, 1000, 3000)):
    print(f"\n{'='*70}")
    print("TRIANGULATION BENCHMARK (best of 3)")
    print(f"{'='*70}")
    for name, make in (('convex', regular_polygon),
                       ('star', lambda n: random_star_polygon(n, seed=42))):
        results = {}
        for n in sizes:
            pts = make(n)
            for lookup in ('index', 'scan'):
                results[f"{name}-{n:05d}-{lookup}"] = time_one(pts, lookup)
        print(format_stats_table(results))
        print()


if __name__ == "__main__":
    benchmark()
