"""Unit tests for the Gaussian breakpoint tables."""
import numpy as np
import pytest
from scipy.stats import norm

from symtseries.core.breakpoints import (
    MAX_CARDINALITY,
    MIN_CARDINALITY,
    breakpoints_for,
    distance_table,
    region_bounds,
    region_distance,
    symbol_for,
    symbols_for,
)
from symtseries.exceptions import InvalidParameter


class TestBreakpointTable:
    """Tests for the constant quantile tables."""

    @pytest.mark.parametrize("c", range(MIN_CARDINALITY, MAX_CARDINALITY + 1))
    def test_matches_normal_quantiles(self, c):
        beta = breakpoints_for(c)
        expected = norm.ppf(np.arange(1, c) / c)
        assert len(beta) == c - 1
        assert np.allclose(beta, expected, atol=1e-8)

    @pytest.mark.parametrize("c", range(MIN_CARDINALITY, MAX_CARDINALITY + 1))
    def test_ascending_and_symmetric(self, c):
        beta = breakpoints_for(c)
        assert np.all(np.diff(beta) > 0)
        assert np.allclose(beta, -beta[::-1])

    def test_identical_across_calls(self):
        assert breakpoints_for(8) is breakpoints_for(8)
        assert np.array_equal(breakpoints_for(8), breakpoints_for(8))

    def test_read_only(self):
        beta = breakpoints_for(4)
        with pytest.raises(ValueError):
            beta[0] = 1.0

    @pytest.mark.parametrize("c", [0, 1, 17, 100, -3])
    def test_invalid_cardinality(self, c):
        with pytest.raises(InvalidParameter):
            breakpoints_for(c)

    def test_invalid_cardinality_is_value_error(self):
        with pytest.raises(ValueError):
            breakpoints_for(17)


class TestSymbolAssignment:
    """Tests for mapping normalized values to symbols."""

    def test_regions(self):
        assert symbol_for(-10.0, 4) == 0
        assert symbol_for(-0.5, 4) == 1
        assert symbol_for(0.5, 4) == 2
        assert symbol_for(10.0, 4) == 3

    def test_breakpoint_belongs_to_upper_region(self):
        assert symbol_for(0.0, 4) == 2
        assert symbol_for(0.0, 2) == 1
        assert symbol_for(float(breakpoints_for(4)[2]), 4) == 3

    def test_vectorised(self):
        values = np.array([-2.0, -0.1, 0.1, 2.0])
        assert symbols_for(values, 4).tolist() == [0, 1, 2, 3]
        assert symbols_for(values, 4).dtype == np.uint8

    @pytest.mark.parametrize("c", [2, 5, 16])
    def test_result_in_range(self, c):
        values = np.linspace(-5, 5, 101)
        symbols = symbols_for(values, c)
        assert symbols.min() == 0
        assert symbols.max() == c - 1

    def test_region_bounds(self):
        low, high = region_bounds(0, 4)
        assert low == -np.inf
        assert np.isclose(high, -0.6744897502)
        low, high = region_bounds(3, 4)
        assert np.isclose(low, 0.6744897502)
        assert high == np.inf
        with pytest.raises(InvalidParameter):
            region_bounds(4, 4)


class TestRegionDistance:
    """Tests for the symbol-to-symbol distance lookup."""

    def test_equal_and_adjacent_are_zero(self):
        for c in (2, 4, 16):
            for s in range(c):
                assert region_distance(s, s, c) == 0.0
                if s + 1 < c:
                    assert region_distance(s, s + 1, c) == 0.0

    def test_gap_between_breakpoints(self):
        beta = breakpoints_for(4)
        assert np.isclose(region_distance(0, 2, 4), beta[1] - beta[0])
        assert np.isclose(region_distance(0, 3, 4), beta[2] - beta[0])
        assert np.isclose(region_distance(0, 3, 4), 2 * 0.6744897502)

    def test_symmetric(self):
        table = distance_table(10)
        assert np.array_equal(table, table.T)
        assert region_distance(1, 8, 10) == region_distance(8, 1, 10)

    def test_invalid_symbol(self):
        with pytest.raises(InvalidParameter):
            region_distance(0, 4, 4)
