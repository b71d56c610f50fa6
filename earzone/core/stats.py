"""Triangulation statistics and presentation utilities.

A TriangulationStats instance can be passed to ``triangulate(stats=...)`` to
collect counters about one run: initial zone sizes, classifier work and the
number of zone moves performed by the incremental relocation.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass
class TriangulationStats:
    n: int = 0
    initial_reflex: int = 0
    initial_convex: int = 0
    initial_ears: int = 0
    ears_clipped: int = 0
    convexity_tests: int = 0
    emptiness_tests: int = 0
    reflex_point_tests: int = 0
    promotions: int = 0
    demotions: int = 0
    scan_steps: int = 0
    ear_refreshes: int = 0
    forced_clips: int = 0
    # Timing (seconds)
    time_total: float = 0.0

    def reset(self) -> None:
        for k in asdict(self):
            setattr(self, k, type(getattr(self, k))())

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['reflex_tests_per_ear'] = (self.reflex_point_tests / self.emptiness_tests) if self.emptiness_tests else 0.0
        d['time_per_vertex_us'] = (self.time_total / self.n * 1e6) if self.n else 0.0
        return d


def format_stats_table(stats_by_label) -> str:
    """Return a human readable multi-line table, one row per labelled run."""
    if not stats_by_label:
        return "<no stats>"
    header = ["run", "n", "reflex", "ears0", "clipped", "empty", "ptTests", "promo", "demo", "scan", "ms"]
    rows = []
    for label in sorted(stats_by_label.keys()):
        s = stats_by_label[label]
        if isinstance(s, TriangulationStats):
            s = s.to_dict()
        rows.append([
            str(label), str(s['n']), str(s['initial_reflex']), str(s['initial_ears']),
            str(s['ears_clipped']), str(s['emptiness_tests']), str(s['reflex_point_tests']),
            str(s['promotions']), str(s['demotions']), str(s['scan_steps']),
            f"{s['time_total'] * 1000.0:8.3f}",
        ])
    col_w = [len(h) for h in header]
    for r in rows:
        for i, v in enumerate(r):
            if len(v) > col_w[i]: col_w[i] = len(v)
    def fmt(r):
        return " ".join(r[i].rjust(col_w[i]) for i in range(len(r)))
    lines = [fmt(header), "-" * (sum(col_w) + len(col_w) - 1)] + [fmt(r) for r in rows]
    return "\n".join(lines)


__all__ = ["TriangulationStats", "format_stats_table"]
