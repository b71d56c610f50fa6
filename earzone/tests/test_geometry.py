import warnings

import numpy as np
import pytest

from earzone.core.geometry import (
    as_points,
    turn,
    point_in_triangle,
    polygon_signed_area,
    triangle_area,
    triangles_signed_areas,
    polygon_self_intersections,
    seg_intersect,
    point_in_polygon,
)


def test_as_points_accepts_flat_and_2d():
    flat = [0.0, 0.0, 1.0, 0.0, 0.0, 1.0]
    a = as_points(flat)
    b = as_points(np.array(flat).reshape(3, 2))
    assert a.shape == (3, 2)
    assert np.array_equal(a, b)
    assert as_points(flat, 2).shape == (2, 2)


def test_as_points_rejects_bad_shapes():
    with pytest.raises(ValueError):
        as_points([0.0, 1.0, 2.0])
    with pytest.raises(ValueError):
        as_points(np.zeros((4, 3)))
    with pytest.raises(ValueError):
        as_points(np.zeros((2, 2)), 3)


def test_turn_sign_matches_ccw_convexity():
    # corner (1,0) of the CCW unit square is convex
    assert turn((0, 0), (1, 0), (1, 1)) > 0
    # walking the same corner clockwise flips the sign
    assert turn((1, 1), (1, 0), (0, 0)) < 0
    assert turn((0, 0), (1, 0), (2, 0)) == 0


def test_point_in_triangle_interior_and_exterior():
    a, b, c = (0.0, 0.0), (2.0, 0.0), (0.0, 2.0)
    assert point_in_triangle((0.5, 0.5), a, b, c)
    assert not point_in_triangle((2.0, 2.0), a, b, c)
    assert not point_in_triangle((-0.1, 0.5), a, b, c)


def test_point_in_triangle_edge_bc_is_outside():
    a, b, c = (0.0, 0.0), (2.0, 0.0), (0.0, 2.0)
    # midpoint of b-c gives u + v == 1
    assert not point_in_triangle((1.0, 1.0), a, b, c)


def test_point_in_triangle_degenerate_contains_nothing():
    a, b, c = (0.0, 0.0), (1.0, 0.0), (2.0, 0.0)
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        assert not point_in_triangle((1.0, 0.0), a, b, c)
        assert not point_in_triangle((0.5, 0.0), a, a, a)


@pytest.mark.parametrize("scale", [1.0, 1e-4, 1e-7, 1e5])
def test_point_in_triangle_does_not_depend_on_scale(scale):
    a, b, c = (0.0, 0.0), (2.0 * scale, 0.0), (0.0, 2.0 * scale)
    assert point_in_triangle((0.5 * scale, 0.5 * scale), a, b, c)
    assert not point_in_triangle((2.0 * scale, 2.0 * scale), a, b, c)
    assert not point_in_triangle((scale, 0.0), a, (scale, 0.0), (2.0 * scale, 0.0))


def test_polygon_signed_area_ccw_positive():
    square = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert abs(polygon_signed_area(square) - 1.0) < 1e-12
    assert abs(polygon_signed_area(square[::-1]) + 1.0) < 1e-12
    assert polygon_signed_area([(0, 0), (1, 1)]) == 0.0


def test_triangle_area_scalar_and_batch_agree():
    pts = np.array([[0.0, 0.0], [2.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    tris = np.array([[0, 1, 2], [1, 3, 2]])
    batch = triangles_signed_areas(pts, tris)
    assert batch.shape == (2,)
    assert abs(batch[0] - triangle_area(pts[0], pts[1], pts[2])) < 1e-15
    assert abs(batch[0] - 1.0) < 1e-15
    assert triangles_signed_areas(pts, np.empty((0, 3), dtype=int)).shape == (0,)


def test_self_intersections_bowtie_and_simple():
    bowtie = [(0, 0), (2, 2), (0, 2), (2, 0)]
    assert polygon_self_intersections(bowtie) == [(0, 2)]
    square = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert polygon_self_intersections(square) == []


def test_seg_intersect_shared_endpoint_is_not_crossing():
    assert seg_intersect((0, 0), (1, 1), (0, 1), (1, 0))
    assert not seg_intersect((0, 0), (1, 1), (1, 1), (2, 0))


def test_point_in_polygon_basic():
    square = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert point_in_polygon(0.5, 0.5, square)
    assert not point_in_polygon(1.5, 0.5, square)
