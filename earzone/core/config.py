"""Configuration object for the ear-clipping driver."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

ORIENTATIONS = ('ccw', 'cw', 'auto')
LOOKUPS = ('index', 'scan')


@dataclass
class TriangulateConfig:
    """Options for :func:`earzone.core.triangulate.triangulate`.

    Attributes
    ----------
    orientation : str
        Winding assumed by the convexity test. ``'ccw'`` (default) treats a
        positive cross product as convex; ``'cw'`` flips the sign; ``'auto'``
        picks the sign from the polygon's signed area.
    lookup : str
        How a neighbour's buffer row is located after an ear is clipped.
        ``'index'`` keeps a vertex -> row map updated on every swap (O(1));
        ``'scan'`` walks the active range like the reference design.
    validate : bool
        Run :func:`earzone.core.validation.validate_polygon` first and raise
        ``PolygonValidationError`` on malformed input.
    verbose : bool
        Log a statistics summary at INFO after each call.
    """
    orientation: str = 'ccw'
    lookup: str = 'index'
    validate: bool = False
    verbose: bool = False

    def __post_init__(self):
        if self.orientation not in ORIENTATIONS:
            raise ValueError(f"orientation must be one of {ORIENTATIONS}, got {self.orientation!r}")
        if self.lookup not in LOOKUPS:
            raise ValueError(f"lookup must be one of {LOOKUPS}, got {self.lookup!r}")

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'TriangulateConfig':
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known})


__all__ = ['TriangulateConfig', 'ORIENTATIONS', 'LOOKUPS']
