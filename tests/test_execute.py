import sys
import time

import pytest

from ovpager.execute import exec_command


def wait_closed(*docs, timeout=10.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if all(doc.closed for doc in docs):
            return True
        time.sleep(0.01)
    return False


def test_exec_command_collects_output():
    out, err, process = exec_command(
        [sys.executable, "-c", "import sys; print('hello'); print('oops', file=sys.stderr)"]
    )
    assert process.wait(timeout=10) == 0
    assert wait_closed(out, err)
    assert out.buf_eof() and err.buf_eof()
    assert out.get_line(0) == "hello"
    assert err.get_line(0) == "oops"
    assert out.file_name == "STDOUT"
    assert err.file_name == "STDERR"
    assert out.caption == f"({sys.executable})STDOUT"
    assert out.prevent_reload


def test_exec_command_not_found():
    with pytest.raises(FileNotFoundError):
        exec_command(["notFoundExec"])


def test_exec_command_no_arguments():
    with pytest.raises(ValueError):
        exec_command([])


def test_exec_command_many_lines():
    out, err, process = exec_command([sys.executable, "-c", "for i in range(500): print(i)"])
    process.wait(timeout=10)
    assert wait_closed(out, err)
    assert out.buf_end_num() == 500
    assert out.get_line(499) == "499"
    assert err.buf_end_num() == 0