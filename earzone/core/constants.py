"""Central numerical tolerances.

Tiny thresholds used by the classifiers and the post-hoc checks live here so
they can be tuned consistently and referenced without scattering literals.
"""
from __future__ import annotations

# Geometry tolerances
EPS_AREA: float = 1e-12           # minimum triangle area, relative to the bounding-box diagonal squared
EPS_AREA_REL: float = 1e-9        # relative tolerance for area-sum comparisons

# sin^2 of a triangle angle at or below which the triangle is degenerate
EPS_COLINEAR: float = 1e-15

__all__ = [
    'EPS_AREA',
    'EPS_AREA_REL',
    'EPS_COLINEAR',
]
