"""
Unit tests for elapsed time parsing.
"""

import pandas as pd
import pytest

from jit_times.timestamps import parse_elapsed, to_milliseconds


class TestParseElapsed:
    def test_mono_timing_format(self):
        """seconds, milliseconds and nanoseconds are all kept."""
        value = parse_elapsed("2s:345::678900")
        assert value == pd.Timedelta(seconds=2, milliseconds=345, nanoseconds=678900)

    def test_clock_format(self):
        assert parse_elapsed("00:00:01.500") == pd.Timedelta(milliseconds=1500)

    def test_surrounding_whitespace(self):
        assert parse_elapsed("  0s:1::0 ") == pd.Timedelta(milliseconds=1)

    def test_garbage_raises(self):
        with pytest.raises(ValueError):
            parse_elapsed("not a time")


class TestMilliseconds:
    def test_sub_millisecond_resolution(self):
        assert to_milliseconds(pd.Timedelta(microseconds=1500)) == pytest.approx(1.5)

    def test_negative_difference(self):
        """Subtracting a later time is allowed and stays negative."""
        diff = parse_elapsed("00:00:01") - parse_elapsed("00:00:03")
        assert to_milliseconds(diff) == pytest.approx(-2000.0)
