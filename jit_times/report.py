import enum

import pandas as pd
from rich.console import Console

from jit_times.intervals import self_times_of
from jit_times.timestamps import to_milliseconds

HEADER = "Total (ms) |  Self (ms) | Method"

columns = ["method", "level", "total_time", "self_time"]


class SortKind(enum.Enum):
    UNSORTED = "unsorted"
    SELF = "self"
    TOTAL = "total"


def should_print(method, filters):
    """
    A method is shown when no filters are given or any filter is found in its name.
    """
    if not filters:
        return True
    return any(regex.search(method) for regex in filters)


def _nested_rows(context, self_times, filters):
    """
    Depth first walk from the top level methods, in completion order.

    A method that is filtered out hides the methods nested under it, and a
    method reachable twice is only listed the first time.
    """
    rows = []
    visited = set()
    pending = [(method, 0) for method in reversed(context.roots)]
    while pending:
        method, level = pending.pop()
        if method in visited or not should_print(method, filters):
            continue
        visited.add(method)
        rows.append(
            {
                "method": method,
                "level": level,
                "total_time": context.total_times[method],
                "self_time": self_times[method],
            }
        )
        for inner in reversed(context.children.get(method, [])):
            pending.append((inner, level + 1))
    return rows


def build_report(context, sort_kind=SortKind.SELF, filters=None):
    """
    Build the rows to print, in print order, as a data frame.

    The context is only read, so the same context can be reported any number
    of times with different orderings. Self times are worked out here when
    compute_self_times has not been run on the context.
    """
    filters = filters or []
    self_times = context.self_times
    if self_times.keys() != context.total_times.keys():
        self_times = self_times_of(context)

    if sort_kind == SortKind.UNSORTED:
        rows = _nested_rows(context, self_times, filters)
    else:
        times = self_times if sort_kind == SortKind.SELF else context.total_times
        rows = [
            {
                "method": method,
                "level": 0,
                "total_time": context.total_times[method],
                "self_time": self_times[method],
            }
            for method in times
            if should_print(method, filters)
        ]

    df = pd.DataFrame(rows, columns=columns)
    df["level"] = df["level"].astype(int)
    df["total_time"] = pd.to_timedelta(df["total_time"])
    df["self_time"] = pd.to_timedelta(df["self_time"])

    if sort_kind == SortKind.SELF:
        df = df.sort_values(by="self_time", ascending=False, kind="stable")
    elif sort_kind == SortKind.TOTAL:
        df = df.sort_values(by="total_time", ascending=False, kind="stable")
    return df.reset_index(drop=True)


def self_time_sum(df):
    return pd.Timedelta(df["self_time"].sum())


def format_row(total_ms, self_ms, method, level=0):
    return f"{total_ms:10.2f} | {self_ms:10.2f} | {'  ' * level}{method}"


def write_report(df, console=None):
    """
    Print the report rows framed by the header and the self time sum.
    """
    console = console or Console(highlight=False, soft_wrap=True, emoji=False)
    console.print(HEADER, style="yellow", markup=False, highlight=False, emoji=False, soft_wrap=True)
    for row in df.itertuples(index=False):
        line = format_row(
            to_milliseconds(row.total_time), to_milliseconds(row.self_time), row.method, row.level
        )
        console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)

    self_sum = to_milliseconds(self_time_sum(df))
    console.print(
        f"Sum of self time (ms): {self_sum:.2f}",
        style="yellow",
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def write_csv(df, outfile):
    """
    Save the report rows with millisecond columns.
    """
    out = pd.DataFrame(
        {
            "method": df["method"],
            "level": df["level"],
            "total_ms": [to_milliseconds(x) for x in df["total_time"]],
            "self_ms": [to_milliseconds(x) for x in df["self_time"]],
        }
    )
    out.to_csv(outfile, index=False)
    return out
