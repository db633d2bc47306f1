"""
Tests for the scalar segment intersection test and its helpers.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from segment_intersect.geometry import (
    IntersectionResult,
    as_point,
    intersect_segments,
    lerp,
    segment_parameters,
)


def point_on_segment(start, end, point, tol=1e-9) -> bool:
    """True if point lies on the finite segment start->end within tol."""
    start = np.asarray(start, dtype=np.float64)
    end = np.asarray(end, dtype=np.float64)
    point = np.asarray(point, dtype=np.float64)
    direction = end - start
    rel = point - start
    cross = direction[0] * rel[1] - direction[1] * rel[0]
    if abs(cross) > tol * max(1.0, float(np.dot(direction, direction))):
        return False
    proj = float(np.dot(rel, direction))
    return -tol <= proj <= float(np.dot(direction, direction)) + tol


# =============================================================================
# Helpers
# =============================================================================

class TestLerp:
    """Tests for lerp()."""

    def test_lerp_endpoints(self):
        assert lerp(2.0, 8.0, 0.0) == 2.0
        assert lerp(2.0, 8.0, 1.0) == 8.0

    def test_lerp_midpoint(self):
        assert lerp(-4.0, 4.0, 0.5) == 0.0

    def test_lerp_does_not_clamp(self):
        """Range checking is the caller's job."""
        assert lerp(0.0, 10.0, 1.5) == 15.0
        assert lerp(0.0, 10.0, -0.5) == -5.0


class TestAsPoint:
    """Tests for as_point()."""

    def test_as_point_from_tuple(self):
        point = as_point((1, 2))
        assert point.dtype == np.float64
        assert_allclose(point, [1.0, 2.0])

    def test_as_point_from_array(self):
        point = as_point(np.array([3.5, -1.0], dtype=np.float32))
        assert point.shape == (2,)
        assert point.dtype == np.float64

    def test_as_point_wrong_shape(self):
        with pytest.raises(ValueError, match="shape"):
            as_point((1.0, 2.0, 3.0), "a")

    def test_as_point_non_numeric(self):
        with pytest.raises(ValueError, match="numeric"):
            as_point(("x", "y"), "a")

    def test_as_point_accepts_nan(self):
        """Non-finite coordinates are not validated."""
        point = as_point((math.nan, 1.0))
        assert math.isnan(point[0])


class TestSegmentParameters:
    """Tests for segment_parameters()."""

    def test_segment_parameters_crossing(self):
        t_top, u_top, bottom = segment_parameters(
            as_point((0, 0)), as_point((10, 0)), as_point((5, -5)), as_point((5, 5))
        )
        assert (t_top, u_top, bottom) == (50.0, 50.0, 100.0)

    def test_segment_parameters_parallel_bottom_zero(self):
        _, _, bottom = segment_parameters(
            as_point((0, 0)), as_point((10, 0)), as_point((0, 1)), as_point((10, 1))
        )
        assert bottom == 0.0


# =============================================================================
# intersect_segments
# =============================================================================

class TestIntersectSegments:
    """Tests for intersect_segments()."""

    def test_perpendicular_cross_at_midpoint(self):
        result = intersect_segments((0, 0), (10, 0), (5, -5), (5, 5))
        assert result == IntersectionResult(x=5.0, y=0.0, offset=0.5)

    def test_parallel_segments(self):
        assert intersect_segments((0, 0), (10, 0), (0, 1), (10, 1)) is None

    def test_collinear_non_overlapping(self):
        assert intersect_segments((0, 0), (1, 1), (2, 2), (3, 3)) is None

    def test_collinear_overlapping_reports_no_intersection(self):
        """Shared sub-segment is treated like any parallel pair."""
        assert intersect_segments((0, 0), (10, 0), (5, 0), (15, 0)) is None

    def test_lines_cross_outside_first_segment(self):
        assert intersect_segments((0, 0), (10, 0), (20, -5), (20, 5)) is None

    def test_lines_cross_outside_second_segment(self):
        """t is in range but u is not."""
        assert intersect_segments((0, 0), (10, 0), (5, 1), (5, 5)) is None

    def test_diagonal_cross(self):
        result = intersect_segments((0, 0), (4, 4), (0, 4), (4, 0))
        assert result is not None
        assert result.x == pytest.approx(2.0)
        assert result.y == pytest.approx(2.0)
        assert result.offset == pytest.approx(0.5)

    def test_offset_is_fraction_along_first_segment(self):
        result = intersect_segments((0, 0), (10, 0), (2, -1), (2, 1))
        assert result is not None
        assert result.offset == pytest.approx(0.2)
        assert result.x == pytest.approx(2.0)

    def test_shared_endpoint_end_of_first(self):
        result = intersect_segments((0, 0), (10, 0), (10, 0), (10, 5))
        assert result is not None
        assert result.offset == 1.0
        assert result.as_tuple() == (10.0, 0.0)

    def test_shared_endpoint_start_of_first(self):
        result = intersect_segments((0, 0), (10, 0), (0, -3), (0, 0))
        assert result is not None
        assert result.offset == 0.0
        assert result.as_tuple() == (0.0, 0.0)

    def test_t_junction(self):
        """Second segment ends on the interior of the first."""
        result = intersect_segments((0, 0), (10, 0), (4, 6), (4, 0))
        assert result is not None
        assert result.offset == pytest.approx(0.4)

    def test_zero_length_first_segment(self):
        """Degenerate segment makes the denominator vanish."""
        assert intersect_segments((1, 1), (1, 1), (0, 0), (2, 2)) is None

    def test_zero_length_second_segment(self):
        assert intersect_segments((0, 0), (10, 0), (5, 0), (5, 0)) is None

    def test_nan_coordinate_yields_none(self):
        assert intersect_segments((math.nan, 0), (10, 0), (5, -5), (5, 5)) is None

    def test_accepts_numpy_points(self):
        result = intersect_segments(
            np.array([0.0, 0.0], dtype=np.float32),
            np.array([10.0, 0.0], dtype=np.float32),
            np.array([5.0, -5.0], dtype=np.float32),
            np.array([5.0, 5.0], dtype=np.float32),
        )
        assert result is not None
        assert_allclose(result.point, [5.0, 0.0])

    def test_rejects_malformed_point(self):
        with pytest.raises(ValueError, match="c must have shape"):
            intersect_segments((0, 0), (10, 0), (5, -5, 1), (5, 5))

    def test_result_is_immutable(self):
        result = intersect_segments((0, 0), (10, 0), (5, -5), (5, 5))
        with pytest.raises(AttributeError):
            result.x = 1.0  # type: ignore[misc]


class TestIntersectSegmentsProperties:
    """Property-style checks over a handful of generated crossings."""

    @pytest.fixture
    def crossing_pairs(self):
        rng = np.random.default_rng(1234)
        pairs = []
        while len(pairs) < 50:
            a, b, c, d = rng.uniform(-100.0, 100.0, size=(4, 2))
            if intersect_segments(a, b, c, d) is not None:
                pairs.append((a, b, c, d))
        return pairs

    def test_point_lies_on_both_segments(self, crossing_pairs):
        for a, b, c, d in crossing_pairs:
            result = intersect_segments(a, b, c, d)
            assert point_on_segment(a, b, result.point, tol=1e-7)
            assert point_on_segment(c, d, result.point, tol=1e-7)

    def test_offset_in_unit_interval(self, crossing_pairs):
        for a, b, c, d in crossing_pairs:
            result = intersect_segments(a, b, c, d)
            assert 0.0 <= result.offset <= 1.0

    def test_offset_matches_point(self, crossing_pairs):
        for a, b, c, d in crossing_pairs:
            result = intersect_segments(a, b, c, d)
            assert_allclose(result.point, a + result.offset * (b - a))

    def test_symmetric_point(self, crossing_pairs):
        for a, b, c, d in crossing_pairs:
            forward = intersect_segments(a, b, c, d)
            backward = intersect_segments(c, d, a, b)
            assert backward is not None
            assert_allclose(forward.point, backward.point, rtol=1e-9, atol=1e-9)

    def test_symmetric_offsets_are_relative_to_own_segment(self):
        forward = intersect_segments((0, 0), (10, 0), (2, -1), (2, 3))
        backward = intersect_segments((2, -1), (2, 3), (0, 0), (10, 0))
        assert forward.offset == pytest.approx(0.2)
        assert backward.offset == pytest.approx(0.25)
        assert forward.as_tuple() == pytest.approx(backward.as_tuple())
