import numpy as np
import pytest

from earzone.core.geometry import polygon_signed_area
from earzone.core.shapes import (
    regular_polygon, random_star_polygon, random_convex_polygon,
    l_shape, arrow_shape, comb_polygon,
)
from earzone.core.validation import validate_polygon


def n_reflex(pts):
    n = len(pts)
    count = 0
    for i in range(n):
        p, c, q = pts[i - 1], pts[i], pts[(i + 1) % n]
        if (q[0]-c[0])*(p[1]-c[1]) - (p[0]-c[0])*(q[1]-c[1]) < 0:
            count += 1
    return count


@pytest.mark.parametrize("pts", [
    regular_polygon(7), random_star_polygon(50, seed=0), random_convex_polygon(30, seed=1),
    l_shape(), arrow_shape(), comb_polygon(3),
])
def test_generators_are_ccw_and_simple(pts):
    assert polygon_signed_area(pts) > 0
    ok, msgs = validate_polygon(pts)
    assert ok, msgs


def test_regular_polygon_radius_and_center():
    pts = regular_polygon(12, radius=3.0, center=(1.0, -2.0))
    assert pts.shape == (12, 2)
    d = np.hypot(pts[:, 0] - 1.0, pts[:, 1] + 2.0)
    assert np.allclose(d, 3.0)


@pytest.mark.parametrize("teeth", [1, 2, 5])
def test_comb_vertex_and_reflex_counts(teeth):
    pts = comb_polygon(teeth)
    assert len(pts) == 4 * teeth
    assert n_reflex(pts) == 2 * (teeth - 1)


def test_comb_needs_a_tooth():
    with pytest.raises(ValueError):
        comb_polygon(0)


def test_fixed_shapes_have_single_reflex_corner():
    assert n_reflex(l_shape()) == 1
    assert n_reflex(arrow_shape()) == 1


def test_seeded_generators_are_reproducible():
    assert np.array_equal(random_star_polygon(40, seed=9), random_star_polygon(40, seed=9))
    assert not np.array_equal(random_star_polygon(40, seed=9), random_star_polygon(40, seed=10))
    assert np.array_equal(random_convex_polygon(20, seed=4), random_convex_polygon(20, seed=4))
    rng = np.random.default_rng(0)
    assert random_star_polygon(10, seed=rng).shape == (10, 2)
