"""Unit tests for MinDist and word equality."""
import math

import numpy as np
import pytest

from symtseries.core.breakpoints import breakpoints_for, region_distance
from symtseries.core.encoder import to_sax
from symtseries.core.window import Window
from symtseries.core.word import Word
from symtseries.distances import (
    MinDistResult,
    mindist,
    mindist_ab,
    words_equal,
    znorm_euclidean,
)


class TestMinDist:
    """Basic tests for the single-resolution lower bound."""

    def test_self_distance_is_zero(self, rng):
        for c in (2, 4, 9, 16):
            word = to_sax(rng.standard_normal(64), 8, c)
            assert mindist(word, word) == 0.0

    def test_symmetric(self, rng):
        for _ in range(20):
            a = to_sax(rng.standard_normal(32), 8, 6)
            b = to_sax(rng.standard_normal(32), 8, 6)
            assert mindist(a, b) == mindist(b, a)

    def test_known_value(self):
        a = Word([0, 3], 4, 8)
        b = Word([3, 0], 4, 8)
        gap = region_distance(0, 3, 4)
        assert np.isclose(mindist(a, b), math.sqrt(8 / 2) * math.sqrt(2 * gap ** 2))

    def test_adjacent_symbols_are_zero(self):
        assert mindist(Word([0, 1, 2], 4), Word([1, 2, 3], 4)) == 0.0

    def test_different_lengths_are_undefined(self):
        assert math.isnan(mindist(Word([0, 1], 4), Word([0, 1, 2], 4)))
        result = mindist_ab(Word([0, 1], 4), Word([0, 1, 2], 4))
        assert not result.is_defined
        assert all(math.isnan(v) for v in result)

    def test_source_length_scaling(self):
        a = Word([0, 3], 4, 2)
        b = Word([3, 0], 4, 2)
        a_long = Word([0, 3], 4, 32)
        b_long = Word([3, 0], 4, 32)
        assert np.isclose(mindist(a_long, b_long), 4 * mindist(a, b))
        # the shorter source length wins
        assert mindist(a, b_long) == mindist(a_long, b) == mindist(a, b)

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            mindist("abcd", Word([0, 1, 2, 3], 4))


class TestMinDistBounds:
    """Tests for the multi-resolution variant."""

    def test_equal_cardinality(self):
        a = Word([0, 3, 1], 4, 12)
        b = Word([2, 0, 3], 4, 12)
        result = mindist_ab(a, b)
        assert isinstance(result, MinDistResult)
        assert result.distance == result.above == result.below == mindist(a, b)

    def test_coarse_against_fine(self):
        coarse = Word([0, 0], 2)
        fine = Word([15, 15], 16)
        beta = breakpoints_for(16)
        result = mindist_ab(coarse, fine)
        # nearest fine region under the coarse "below zero" region is 7
        assert np.isclose(result.below, math.sqrt(2) * (beta[14] - beta[7]))
        # the widest one is the unbounded region 0
        assert np.isclose(result.above, math.sqrt(2) * (beta[14] - beta[0]))
        assert result.distance == result.below

    def test_bounds_ordering_and_symmetry(self, rng):
        for _ in range(50):
            x = rng.standard_normal(64)
            y = rng.standard_normal(64)
            ca, cb = rng.integers(2, 17, size=2)
            a = to_sax(x, 8, int(ca))
            b = to_sax(y, 8, int(cb))
            ab = mindist_ab(a, b)
            ba = mindist_ab(b, a)
            assert 0.0 <= ab.below <= ab.above
            assert ab.distance == ba.distance
            assert ab.above == ba.above

    def test_nested_cardinalities_agree(self):
        # every region at c=2 is a union of regions at c=4
        a = Word([0, 1, 0, 1], 2, 16)
        b = Word([3, 0, 2, 1], 4, 16)
        result = mindist_ab(a, b)
        expected = math.sqrt(16 / 4) * math.sqrt(
            region_distance(3, 1, 4) ** 2 + region_distance(0, 2, 4) ** 2)
        assert np.isclose(result.below, expected)

    def test_above_is_not_a_reencoding_bound(self):
        x = np.array([-1.0] * 4 + [1.0] * 4)
        coarse = to_sax(x, 2, 2)
        fine = Word([0, 15], 16, 8)
        result = mindist_ab(coarse, fine)
        assert result.above == 0.0
        assert mindist(to_sax(x, 2, 16), fine) > result.above

    def test_result_unpacks(self):
        distance, above, below = mindist_ab(Word([0, 3], 4), Word([3, 0], 4))
        assert distance == above == below


class TestWordLikeOperands:
    """Windows can be used wherever a word is expected."""

    def test_window_operand(self, rng):
        x = rng.standard_normal(32)
        win = Window(32, 8, 4)
        win.append_sequence(x)
        word = to_sax(x, 8, 4)
        assert mindist(win, word) == 0.0
        assert words_equal(win, word)

    def test_filling_window(self):
        win = Window(8, 4, 4)
        win.append_sequence([1, 2, 3])
        assert math.isnan(mindist(win, Word([0, 1, 2, 3], 4)))
        assert not words_equal(win, Word([0, 1, 2, 3], 4))


class TestWordsEqual:
    """Tests for value equality."""

    def test_equal(self):
        assert words_equal(Word([0, 1, 2], 4, 6), Word([0, 1, 2], 4, 6))

    @pytest.mark.parametrize("other", [
        Word([0, 1, 3], 4, 6),
        Word([0, 1, 2], 5, 6),
        Word([0, 1, 2], 4, 3),
        Word([0, 1, 2, 3], 4, 8),
    ])
    def test_not_equal(self, other):
        assert not words_equal(Word([0, 1, 2], 4, 6), other)


class TestZnormEuclidean:
    """Tests for the reference distance."""

    def test_identical_and_shifted(self, sample_time_series):
        assert znorm_euclidean(sample_time_series, sample_time_series) == 0.0
        assert np.isclose(znorm_euclidean(sample_time_series, 2 * sample_time_series + 5), 0.0)

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            znorm_euclidean(np.arange(4.0), np.arange(5.0))
