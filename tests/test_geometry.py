"""
Unit tests for the geometric helpers.
"""

import pytest

from scatter_chart.bounds import Rect
from scatter_chart.errors import DegenerateBounds
from scatter_chart import geometry as g


DATA = Rect(left=-3.0, right=5.0, top=10.0, bottom=2.0)
PIXELS = Rect(left=40.0, right=360.0, top=40.0, bottom=360.0)


class TestScalars:
    """Test lerp / inv_lerp / clamp / sign."""

    def test_lerp(self):
        assert g.lerp(2, 6, 0) == 2
        assert g.lerp(2, 6, 1) == 6
        assert g.lerp(2, 6, 0.25) == 3

    def test_inv_lerp_inverts_lerp(self):
        assert g.inv_lerp(2, 6, g.lerp(2, 6, 0.3)) == pytest.approx(0.3)

    def test_inv_lerp_degenerate_range_fails(self):
        with pytest.raises(ZeroDivisionError):
            g.inv_lerp(1.0, 1.0, 1.0)

    def test_clamp_and_sign(self):
        assert g.clamp(5, 0, 3) == 3
        assert g.clamp(-1, 0, 3) == 0
        assert g.sign(-0.2) == -1
        assert g.sign(7) == 1
        assert g.sign(0) == 0


class TestVectors:
    def test_arithmetic(self):
        assert g.add((1, 2), (3, 4)) == (4, 6)
        assert g.subtract((1, 2), (3, 4)) == (-2, -2)
        assert g.scale((1, -2), 0.5) == (0.5, -1.0)

    def test_equals_with_tolerance(self):
        assert g.equals((1.0, 1.0), (1.0, 1.0))
        assert not g.equals((1.0, 1.0), (1.0, 1.001))
        assert g.equals((1.0, 1.0), (1.0, 1.001), tol=0.01)

    def test_distance(self):
        assert g.distance((0, 0), (3, 4)) == 5


class TestNearest:
    def test_picks_closest(self):
        assert g.nearest((2.1, 2.0), [(0, 0), (1, 1), (2, 2)]) == 2

    def test_coincident_points_resolve_to_lowest_index(self):
        pts = [(5, 5), (1, 1), (1, 1), (1, 1)]
        assert g.nearest((1, 1), pts) == 1

    def test_equidistant_points_resolve_to_lowest_index(self):
        assert g.nearest((0, 0), [(1, 0), (0, 1), (-1, 0)]) == 0

    def test_empty_points_rejected(self):
        with pytest.raises(ValueError):
            g.nearest((0, 0), [])


class TestRemapPoint:
    """Test remapping between rectangles with opposite y orientation."""

    def test_data_corners_land_on_pixel_corners(self):
        # data top-left (y up) -> pixel top-left (y down)
        assert g.remap_point(DATA, PIXELS, (-3.0, 10.0)) == (40.0, 40.0)
        assert g.remap_point(DATA, PIXELS, (5.0, 2.0)) == (360.0, 360.0)

    def test_y_axis_flips_between_orientations(self):
        _, y_low = g.remap_point(DATA, PIXELS, (0.0, 3.0))
        _, y_high = g.remap_point(DATA, PIXELS, (0.0, 9.0))
        assert y_high < y_low

    @pytest.mark.parametrize("p", [(-3.0, 2.0), (0.5, 7.25), (5.0, 10.0)])
    def test_identity(self, p):
        assert g.remap_point(DATA, DATA, p) == pytest.approx(p)

    @pytest.mark.parametrize("p", [(-2.5, 3.3), (1.0, 9.9), (100.0, -50.0)])
    def test_round_trip(self, p):
        there = g.remap_point(DATA, PIXELS, p)
        assert g.remap_point(PIXELS, DATA, there) == pytest.approx(p)

    def test_zero_extent_source_raises(self):
        flat = Rect(left=1.0, right=1.0, top=2.0, bottom=0.0)
        with pytest.raises(DegenerateBounds):
            g.remap_point(flat, PIXELS, (1.0, 1.0))


class TestFormatNumber:
    def test_fixed_point(self):
        assert g.format_number(1.23456, 2) == "1.23"
        assert g.format_number(2, 2) == "2.00"
        assert g.format_number(1234567.891, 1) == "1234567.9"

    def test_default_has_no_decimals(self):
        assert g.format_number(3.7) == "4"
