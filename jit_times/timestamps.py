import re

import pandas as pd

# mono writes "elapsed: <seconds>s:<milliseconds>::<nanoseconds>"
mono_regex = re.compile(r"^\s*(\d+)s:(\d+)::(\d+)\s*$")

ONE_MS = pd.Timedelta(milliseconds=1)


def parse_elapsed(text):
    """
    Parse the elapsed reading of a JIT event into a pandas Timedelta.

    The mono timing format (e.g. '0s:12::345678') is tried first, anything
    else is handed to pandas, which understands '00:00:01.500', '1.5s', etc.
    A ValueError is raised when neither works.
    """
    match = mono_regex.match(text)
    if match:
        seconds, millis, nanos = match.groups()
        return pd.Timedelta(
            seconds=int(seconds), milliseconds=int(millis), nanoseconds=int(nanos)
        )
    try:
        value = pd.Timedelta(text.strip())
    except (TypeError, ValueError) as e:
        raise ValueError(f"Cannot parse elapsed time '{text}'") from e
    if pd.isna(value):
        raise ValueError(f"Cannot parse elapsed time '{text}'")
    return value


def to_milliseconds(value: pd.Timedelta) -> float:
    return value / ONE_MS
