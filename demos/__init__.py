"""Demos for the earzone triangulator.

Each module exposes a run_* function callable from Python and a module-level
__main__ guard so it can be executed via:

    python -m demos.random_polygon_demo
"""
from .random_polygon_demo import run_random_polygon_demo

__all__ = ['run_random_polygon_demo']
