import numpy as np
import pytest

from earzone.core.shapes import l_shape, regular_polygon
from earzone.core.triangulate import triangulate_polygon
from earzone.core.validation import (
    validate_polygon, check_triangulation, polygon_orientation, PolygonValidationError,
)


def test_valid_polygon_passes():
    ok, msgs = validate_polygon(l_shape())
    assert ok
    assert msgs == []


def test_clockwise_is_not_a_validation_error():
    ok, _ = validate_polygon(l_shape()[::-1])
    assert ok
    assert polygon_orientation(l_shape()) == 'ccw'
    assert polygon_orientation(l_shape()[::-1]) == 'cw'
    assert polygon_orientation([(0, 0), (1, 0), (2, 0)]) == 'degenerate'


@pytest.mark.parametrize("points, needle", [
    ([(0.0, 0.0), (1.0, 0.0)], "at least 3"),
    ([(0.0, 0.0), (1.0, np.nan), (0.0, 1.0)], "Non-finite"),
    ([(0.0, 0.0), (1.0, 0.0), (1.0, 0.0), (0.0, 1.0)], "Repeated"),
    ([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)], "zero area"),
    ([(0.0, 0.0), (2.0, 2.0), (0.0, 2.0), (2.0, 0.0)], "Self-intersecting"),
])
def test_invalid_polygons_are_reported(points, needle):
    ok, msgs = validate_polygon(points)
    assert not ok
    assert any(needle in m for m in msgs), msgs


def test_raise_on_error_carries_messages():
    with pytest.raises(PolygonValidationError) as exc:
        validate_polygon([(0.0, 0.0), (2.0, 2.0), (0.0, 2.0), (2.0, 0.0)], raise_on_error=True)
    assert exc.value.messages
    assert isinstance(exc.value, ValueError)


def test_check_triangulation_accepts_fan_of_convex_polygon():
    pts = regular_polygon(6)
    fan = [[0, i, i + 1] for i in range(1, 5)]
    ok, msgs = check_triangulation(pts, fan)
    assert ok, msgs


def test_check_triangulation_flags_duplicates_and_area():
    pts = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    ok, msgs = check_triangulation(pts, [[0, 1, 2], [0, 1, 2]])
    assert not ok
    assert any('Duplicate' in m for m in msgs)
    ok, msgs = check_triangulation(pts, [[0, 1, 2]])
    assert not ok
    assert any('differs from polygon area' in m for m in msgs)


def test_check_triangulation_flags_outside_triangle():
    # the diagonal 5-1 of the L passes through the reflex corner, 0-3 does not
    pts = l_shape()
    bad = [[5, 0, 1], [1, 2, 3], [3, 4, 5], [5, 1, 3]]
    ok, msgs = check_triangulation(pts, bad)
    assert not ok


def test_check_triangulation_flags_out_of_range_and_count():
    pts = regular_polygon(5)
    ok, msgs = check_triangulation(pts, [[0, 1, 7]])
    assert not ok
    assert any('Expected 3 triangles' in m for m in msgs)
    assert any('out of range' in m for m in msgs)


def test_check_triangulation_accepts_flat_index_buffer():
    pts = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    ok, msgs = check_triangulation(pts, np.array([0, 1, 2, 0, 2, 3], dtype=np.uint32))
    assert ok, msgs


@pytest.mark.parametrize("scale", [1e-6, 1e-9, 1e6])
def test_tolerances_follow_polygon_scale(scale):
    pts = l_shape() * scale
    ok, msgs = validate_polygon(pts)
    assert ok, msgs
    assert polygon_orientation(pts) == 'ccw'
    tris = triangulate_polygon(pts)
    ok, msgs = check_triangulation(pts, tris)
    assert ok, msgs


def test_collinear_polygon_is_degenerate_at_any_scale():
    for scale in (1e-6, 1.0, 1e6):
        pts = np.array([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]) * scale
        assert polygon_orientation(pts) == 'degenerate'
        ok, msgs = validate_polygon(pts)
        assert not ok
