import logging
import re

from jit_times.timestamps import parse_elapsed

logger = logging.getLogger(__name__)

begin_regex = re.compile(r"^JIT method +begin: (.*) elapsed: (.*)$")
done_regex = re.compile(r"^JIT method +done: (.*) elapsed: (.*)$")


def match_event(regex, line):
    """
    Match one log line against a begin or done pattern.

    Returns (method, elapsed_text), or None when the line is something else.
    """
    match = regex.match(line.rstrip("\r\n"))
    if not match or len(match.groups()) < 2:
        return None
    method, elapsed = match.groups()[:2]
    # done lines are padded to line up with begin lines
    return method.strip(), elapsed.strip()


def record_timestamp(times, regex, line):
    """
    Record the timestamp of a begin or done event into times.

    The first event seen for a method wins: a repeated name still counts as
    matched, so the caller consumes the line, but the stored time is kept.
    Returns the method name, or None if the line was not an event.
    """
    event = match_event(regex, line)
    if event is None:
        return None

    method, elapsed = event
    if method in times:
        logger.warning(f"method {method} already measured, dropping the second JIT time")
        return method

    try:
        times[method] = parse_elapsed(elapsed)
    except ValueError as e:
        logger.warning(f"ignoring event for method {method}: {e}")
        return None
    return method
