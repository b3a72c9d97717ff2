"""Unit tests for sliding-window batch encoding."""
import numpy as np
import pytest

from symtseries.api_windows import sax_windows, window_starts
from symtseries.core.encoder import to_sax
from symtseries.core.window import Window
from symtseries.exceptions import InvalidParameter


class TestWindowStarts:
    """Tests for window offsets."""

    def test_counts(self):
        assert list(window_starts(10, width=4, by=2)) == [0, 2, 4, 6]
        assert len(window_starts(100, width=10, by=1)) == 91

    @pytest.mark.parametrize("kwargs", [
        dict(width=0), dict(width=4, by=0), dict(width=4, start=10),
        dict(width=4, end=11), dict(width=20),
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(InvalidParameter):
            window_starts(10, **kwargs)


class TestSaxWindows:
    """Tests for sax_windows."""

    def test_each_window_encoded(self, sample_time_series):
        words = sax_windows(sample_time_series, window=32, w=8, c=4, step=16)
        assert len(words) == 7
        for k, word in enumerate(words):
            assert word == to_sax(sample_time_series[16 * k:16 * k + 32], 8, 4)

    def test_matches_streaming_window(self, sample_time_series):
        words = sax_windows(sample_time_series, window=16, w=4, c=6)
        win = Window(16, 4, 6)
        streamed = [win.append_value(v) for v in sample_time_series]
        assert words == streamed[15:]

    def test_invalid_parameters(self, sample_time_series):
        with pytest.raises(InvalidParameter):
            sax_windows(sample_time_series, window=30, w=8, c=4)
        with pytest.raises(InvalidParameter):
            sax_windows(sample_time_series, window=256, w=8, c=4)
