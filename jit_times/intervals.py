import logging

from jit_times.events import begin_regex, done_regex, record_timestamp

logger = logging.getLogger(__name__)


class TimingContext:
    """
    Everything learned from one methods file.

    begin_times / done_times hold the first timestamp seen per method,
    open_stack the methods whose compilation is still in progress (innermost
    last). total_times keeps first-done order, children maps a method to the
    methods that completed while it was innermost, and roots lists the
    methods whose done event left the stack empty.
    """

    def __init__(self):
        self.begin_times = {}
        self.done_times = {}
        self.open_stack = []
        self.total_times = {}
        self.children = {}
        self.roots = []
        self.self_times = {}
        self.lines_read = 0
        self.events_matched = 0


def process_line(context, line):
    """
    Feed a single log line to the tracker.
    """
    context.lines_read += 1

    method = record_timestamp(context.begin_times, begin_regex, line)
    if method is not None:
        context.events_matched += 1
        context.open_stack.append(method)
        return

    method = record_timestamp(context.done_times, done_regex, line)
    if method is None:
        return
    context.events_matched += 1

    begin = context.begin_times.get(method)
    if begin is None:
        logger.warning(f"missing JIT begin for method {method}")
        return

    context.total_times[method] = context.done_times[method] - begin

    # The stack only counts nesting, the popped name is not checked
    if context.open_stack:
        context.open_stack.pop()
    else:
        logger.warning(f"no JIT method open when {method} was done")

    if context.open_stack:
        outer = context.open_stack[-1]
        context.children.setdefault(outer, []).append(method)
    else:
        context.roots.append(method)


def ingest(lines, context=None):
    if context is None:
        context = TimingContext()
    for line in lines:
        process_line(context, line)
    return context


def self_times_of(context):
    """
    Subtract the total time of each nested compilation from its parent.

    Must run after all lines are ingested, a child total can show up after
    the parent's done event in odd logs. The context is not changed.
    """
    self_times = {}
    for method, total in context.total_times.items():
        self_time = total
        for inner in context.children.get(method, []):
            inner_total = context.total_times.get(inner)
            if inner_total is not None:
                self_time -= inner_total
        self_times[method] = self_time
    return self_times


def compute_self_times(context):
    context.self_times = self_times_of(context)
    return context.self_times


def read_methods_file(filepath):
    """
    Parse a methods file and return a TimingContext with self times filled.
    """
    logger.debug(f"Parsing '{filepath}'...")
    with open(filepath, "r", encoding="utf-8", errors="replace") as f:
        context = ingest(f)
    compute_self_times(context)
    logger.debug(
        f"Processed {context.lines_read} lines, matched {context.events_matched} JIT events."
    )
    return context
