import io
import os
import subprocess
import sys

import pytest

from lefthook.system import CMD, NULL_READER, NullReader, OsCommand, max_cmd_len


def test_null_reader_reads_nothing():
    assert NULL_READER.read() == b""


def test_null_reader_sized_read():
    assert NullReader().read(10) == b""


def test_null_reader_readinto():
    buffer = bytearray(4)
    assert NullReader().readinto(buffer) == 0
    assert buffer == bytearray(4)


@pytest.mark.parametrize(
    "platform, expected",
    [("win32", 7000), ("darwin", 260000), ("linux", 130000)],
)
def test_max_cmd_len(monkeypatch, platform, expected):
    monkeypatch.setattr(sys, "platform", platform)
    assert max_cmd_len() == expected


def _python(code):
    return [sys.executable, "-c", code]


def test_run_sets_lefthook_env():
    out = io.BytesIO()
    CMD.run(_python("import os; print(os.environ['LEFTHOOK'])"), None, None, out, None)
    assert out.getvalue().strip() == b"0"


def test_run_writes_to_text_stream():
    out = io.StringIO()
    CMD.run(_python("print('hello')"), None, None, out, None)
    assert out.getvalue().strip() == "hello"


def test_run_passes_stdin():
    out = io.BytesIO()
    CMD.run(
        _python("import sys; sys.stdout.write(sys.stdin.read().upper())"),
        None,
        io.BytesIO(b"abc"),
        out,
        None,
    )
    assert out.getvalue() == b"ABC"


def test_run_null_reader_stdin():
    out = io.BytesIO()
    CMD.run(
        _python("import sys; print(len(sys.stdin.read()))"),
        None,
        NULL_READER,
        out,
        None,
    )
    assert out.getvalue().strip() == b"0"


def test_run_captures_stderr():
    err = io.BytesIO()
    CMD.run(_python("import sys; sys.stderr.write('oops')"), None, None, None, err)
    assert err.getvalue() == b"oops"


def test_run_in_root(tmp_path):
    out = io.StringIO()
    CMD.run(_python("import os; print(os.getcwd())"), tmp_path, None, out, None)
    assert os.path.realpath(out.getvalue().strip()) == os.path.realpath(tmp_path)


def test_without_envs_drops_matching(monkeypatch):
    monkeypatch.setenv("LH_TEST_DROP", "1")
    out = io.StringIO()
    command = _python("import os; print(os.environ.get('LH_TEST_DROP', 'missing'))")
    CMD.without_envs("LH_TEST_").run(command, None, None, out, None)
    assert out.getvalue().strip() == "missing"


def test_without_envs_keeps_others(monkeypatch):
    monkeypatch.setenv("LH_TEST_KEEP", "yes")
    out = io.StringIO()
    command = _python("import os; print(os.environ.get('LH_TEST_KEEP', 'missing'))")
    OsCommand().without_envs("OTHER_").run(command, None, None, out, None)
    assert out.getvalue().strip() == "yes"


def test_without_envs_returns_new_runner():
    runner = CMD.without_envs("A", "B")
    assert runner.exclude_envs == ("A", "B")
    assert CMD.exclude_envs == ()


def test_run_failure_raises():
    with pytest.raises(subprocess.CalledProcessError) as excinfo:
        CMD.run(_python("import sys; sys.exit(3)"), None, None, None, None)
    assert excinfo.value.returncode == 3


def test_run_empty_command_raises():
    with pytest.raises(ValueError):
        CMD.run([], None, None, None, None)