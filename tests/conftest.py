import logging

import pytest


@pytest.fixture(autouse=True)
def reset_jit_times_logger():
    """The CLI sets the package logger level, do not leak it between tests."""
    yield
    logging.getLogger("jit_times").setLevel(logging.NOTSET)


@pytest.fixture
def nested_log_lines():
    """Foo compiles Bar while it is being compiled."""
    return [
        "JIT method    begin: Foo elapsed: 00:00:01.000\n",
        "JIT method    begin: Bar elapsed: 00:00:01.500\n",
        "JIT method    done:  Bar elapsed: 00:00:02.000\n",
        "JIT method    done:  Foo elapsed: 00:00:03.000\n",
    ]


@pytest.fixture
def methods_file(tmp_path, nested_log_lines):
    path = tmp_path / "methods.txt"
    lines = ["Some unrelated log line\n"] + nested_log_lines + [
        "JIT method  begin: Baz elapsed: 0s:4::0\n",
        "JIT method   done: Baz elapsed: 0s:4::250000\n",
    ]
    path.write_text("".join(lines))
    return path
