"""
Tests for the total vs. self time chart.
"""

import pytest

from jit_times.intervals import compute_self_times, ingest
from jit_times.plot import plot_method_times
from jit_times.report import SortKind, build_report


def test_plot_top_methods(nested_log_lines, tmp_path):
    context = ingest(nested_log_lines)
    compute_self_times(context)
    df = build_report(context, SortKind.TOTAL)

    outfile = tmp_path / "times.svg"
    melted_df = plot_method_times(df, outfile, top_n=1)

    assert outfile.exists()
    assert list(melted_df["Method"]) == ["Foo", "Foo"]
    assert sorted(melted_df["Time (ms)"]) == pytest.approx([1500.0, 2000.0])


def test_plot_nothing(tmp_path):
    context = ingest([])
    compute_self_times(context)
    with pytest.raises(ValueError):
        plot_method_times(build_report(context), tmp_path / "times.svg")
