"""Unit tests for the Word value type."""
import dataclasses

import numpy as np
import pytest

from symtseries.core.word import Word
from symtseries.exceptions import InvalidParameter


class TestWordConstruction:
    """Tests for direct construction and validation."""

    def test_defaults(self):
        word = Word([0, 1, 2], 4)
        assert word.symbol_count == 3
        assert len(word) == 3
        assert word.source_length == 3
        assert word.tolist() == [0, 1, 2]

    def test_symbols_are_private_and_read_only(self):
        raw = np.array([0, 1, 2, 3])
        word = Word(raw, 4, 8)
        raw[0] = 3
        assert word.symbols[0] == 0
        with pytest.raises(ValueError):
            word.symbols[0] = 1

    def test_frozen(self):
        word = Word([0, 1], 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            word.cardinality = 4

    @pytest.mark.parametrize("symbols,c,n", [
        ([0, 4], 4, None),
        ([-1, 0], 4, None),
        ([], 4, None),
        ([0, 1], 1, None),
        ([0, 1], 17, None),
        ([0, 1, 2], 4, 2),
        ([[0, 1]], 4, None),
        ([0.5, 1.0], 4, None),
    ])
    def test_invalid(self, symbols, c, n):
        with pytest.raises(InvalidParameter):
            Word(symbols, c, n)


class TestWordBehaviour:
    """Tests for copy, equality and constructors."""

    def test_copy_is_independent_and_equal(self):
        word = Word([3, 0, 1, 2], 4, 16)
        dup = word.copy()
        assert dup is not word
        assert dup.symbols is not word.symbols
        assert dup == word
        assert hash(dup) == hash(word)

    def test_equality(self):
        assert Word([0, 1], 4, 8) == Word([0, 1], 4, 8)
        assert Word([0, 1], 4, 8) != Word([0, 1], 4, 4)
        assert Word([0, 1], 4, 8) != Word([0, 1], 8, 8)
        assert Word([0, 1], 4, 8) != Word([1, 0], 4, 8)
        assert Word([0, 1], 4) != "ab"

    def test_from_array(self, ramp):
        word = Word.from_array(ramp, 4, 4)
        assert word.symbols.tolist() == [0, 1, 2, 3]
        assert word.source_length == 8

    def test_from_array_limits(self):
        with pytest.raises(InvalidParameter):
            Word.from_array(np.random.randn(5000), 2, 4)
        with pytest.raises(InvalidParameter):
            Word.from_array(np.random.randn(5), 2, 4)

    def test_from_array_rejects_fractional_parameters(self):
        with pytest.raises(InvalidParameter):
            Word.from_array(np.arange(10.0), 2.5, 4)
        with pytest.raises(InvalidParameter):
            Word.from_array(np.arange(8.0), 2, 4.5)

    def test_string_forms(self):
        word = Word.from_string("abcd", 4)
        assert word.to_string() == "abcd"
        assert str(word) == "abcd"
        assert "abcd" in repr(word)
