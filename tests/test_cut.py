"""Tests for cutting a polygon by a sequence of lines."""

import warnings

import numpy as np
import pytest
from shapely.geometry import LineString, Polygon

from polycut import (
    CutConfig,
    MatchMode,
    PreconditionWarning,
    cut_polygon,
    cut_polygon_geometries,
    get_largest_polygon_area,
    largest_fragment_area,
    polygon_area,
)


UNIT_SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


def _round6(value):
    return round(value * 1_000_000) / 1_000_000


class TestLargestFragmentArea:
    """Reference scenarios on the unit square."""

    def test_diagonal_then_vertical(self):
        lines = [[(0, 0), (1, 1)], [(0.5, 0), (0.5, 1)]]
        assert _round6(largest_fragment_area(UNIT_SQUARE, lines)) == 0.375

    def test_no_cut(self):
        """Test a line outside the polygon leaves it whole."""
        assert _round6(largest_fragment_area(UNIT_SQUARE, [[(2, 2), (3, 3)]])) == 1.0

    def test_segment_touches_one_vertex(self):
        """Test a segment that ends at the polygon does not cut it."""
        assert _round6(largest_fragment_area(UNIT_SQUARE, [[(2, 2), (0.5, 0.5)]])) == 1.0

    def test_vertical_bisector(self):
        assert _round6(largest_fragment_area(UNIT_SQUARE, [[(0.5, 0), (0.5, 1)]])) == 0.5

    def test_perpendicular_bisectors(self):
        lines = [[(0.5, 0), (0.5, 1)], [(0, 0.5), (1, 0.5)]]
        assert _round6(largest_fragment_area(UNIT_SQUARE, lines)) == 0.25

    def test_corner_to_corner_diagonal(self):
        assert _round6(largest_fragment_area(UNIT_SQUARE, [[(0, 0), (1, 1)]])) == 0.5

    def test_off_center_diagonal(self):
        assert _round6(largest_fragment_area(UNIT_SQUARE, [[(0.1, 0), (1, 1)]])) == 0.55

    def test_six_digits_of_accuracy(self):
        lines = [[(0.123456789, 0), (0.123456789, 1)]]
        assert _round6(largest_fragment_area(UNIT_SQUARE, lines)) == 0.876543

    @pytest.mark.parametrize("mode", list(MatchMode))
    def test_match_modes_agree(self, mode):
        lines = [[(0, 0), (1, 1)], [(0.5, 0), (0.5, 1)]]
        config = CutConfig(match_mode=mode)
        assert _round6(largest_fragment_area(UNIT_SQUARE, lines, config=config)) == 0.375

    def test_alias(self):
        lines = [[(0.1, 0), (1, 1)]]
        assert largest_fragment_area(UNIT_SQUARE, lines) == get_largest_polygon_area(UNIT_SQUARE, lines)


class TestLargestFragmentAreaProperties:
    """General properties of the cutting driver."""

    @pytest.mark.parametrize("polygon", [
        UNIT_SQUARE,
        [(0, 0), (4, 0), (2, 3)],
        [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)],
    ])
    def test_no_lines_is_polygon_area(self, polygon):
        assert largest_fragment_area(polygon, []) == polygon_area(polygon)

    def test_line_far_outside_bounds(self):
        """Test a convex polygon is untouched by a line outside its bounds."""
        hexagon = [(0, 0), (2, -1), (4, 0), (4, 2), (2, 3), (0, 2)]
        lines = [[(10, -5), (10, 5)], [(-5, 10), (5, 12)]]
        assert largest_fragment_area(hexagon, lines) == polygon_area(hexagon)

    def test_degenerate_polygon(self):
        """Test polygons with fewer than 3 vertices have zero area."""
        assert largest_fragment_area([(0, 0), (1, 1)], [[(0, 1), (1, 0)]]) == 0.0
        assert largest_fragment_area([], [[(0, 1), (1, 0)]]) == 0.0

    def test_missed_cut_keeps_fragment(self):
        """Test a later line that misses a fragment carries it through."""
        # The second line only reaches the left half of the square.
        lines = [[(0.5, 0), (0.5, 1)], [(0, 0.5), (0.4, 0.5)]]
        fragments = cut_polygon(UNIT_SQUARE, lines)

        assert len(fragments) == 2
        assert max(polygon_area(f) for f in fragments) == 0.5

    def test_concave_polygon(self):
        l_shape = [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]
        assert largest_fragment_area(l_shape, [[(0.5, -1), (0.5, 3)]]) == 2.0

    def test_shapely_inputs(self):
        polygon = Polygon(UNIT_SQUARE)
        lines = [LineString([(0.5, 0), (0.5, 1)]), LineString([(0, 0.5), (1, 0.5)])]
        assert largest_fragment_area(polygon, lines) == 0.25

    def test_lines_consumed_once(self):
        """Test a generator of lines is accepted."""
        lines = ([(x, 0), (x, 1)] for x in (0.25, 0.5, 0.75))
        assert largest_fragment_area(UNIT_SQUARE, lines) == 0.25


class TestCutPolygon:
    """Tests for cut_polygon and cut_polygon_geometries."""

    def test_two_bisectors_give_four_fragments(self):
        lines = [[(0.5, 0), (0.5, 1)], [(0, 0.5), (1, 0.5)]]
        fragments = cut_polygon(UNIT_SQUARE, lines)

        assert len(fragments) == 4
        assert all(isinstance(f, np.ndarray) for f in fragments)
        assert sum(polygon_area(f) for f in fragments) == pytest.approx(1.0, abs=1e-6)

    def test_no_lines_returns_copy_of_input(self):
        fragments = cut_polygon(UNIT_SQUARE, [])

        assert len(fragments) == 1
        np.testing.assert_array_equal(fragments[0], np.array(UNIT_SQUARE))

    def test_fragments_cover_original(self):
        """Test fragment areas always add up to the original area."""
        pentagon = [(0, 0), (3, 0), (4, 2), (1.5, 4), (-1, 2)]
        lines = [[(-2, 1), (5, 1.5)], [(1.5, -1), (1.7, 5)], [(-2, 3.5), (5, 0)]]
        fragments = cut_polygon(pentagon, lines)

        total = sum(polygon_area(f) for f in fragments)
        assert total == pytest.approx(polygon_area(pentagon), abs=1e-6)

    def test_geometries(self):
        """Test fragments come back as valid Shapely polygons."""
        lines = [[(0, 0), (1, 1)], [(0.5, 0), (0.5, 1)]]
        polygons = cut_polygon_geometries(UNIT_SQUARE, lines)

        assert len(polygons) == 4
        assert all(isinstance(p, Polygon) for p in polygons)
        assert sum(p.area for p in polygons) == pytest.approx(1.0)
        assert max(p.area for p in polygons) == pytest.approx(0.375)

    def test_geometries_drop_degenerate(self):
        """Test fragments with fewer than 3 vertices are left out."""
        polygons = cut_polygon_geometries([(0, 0), (1, 1)], [])
        assert polygons == []


class TestPreconditions:
    """Tests for input precondition warnings."""

    BOWTIE = [(0, 0), (1, 1), (0, 1), (1, 0)]

    def test_non_simple_polygon_warns(self):
        with pytest.warns(PreconditionWarning, match="not simple"):
            largest_fragment_area(self.BOWTIE, [])

    @pytest.mark.parametrize("func", [
        cut_polygon,
        cut_polygon_geometries,
        get_largest_polygon_area,
        largest_fragment_area,
    ])
    def test_warning_points_at_caller(self, func):
        """Test the warning is attributed to the calling code, not polycut."""
        with pytest.warns(PreconditionWarning) as record:
            func(self.BOWTIE, [])

        assert record[0].filename == __file__

    def test_check_can_be_disabled(self):
        config = CutConfig(check_simple=False)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            largest_fragment_area(self.BOWTIE, [], config=config)

    def test_simple_polygon_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            largest_fragment_area(UNIT_SQUARE, [[(0.5, 0), (0.5, 1)]])
