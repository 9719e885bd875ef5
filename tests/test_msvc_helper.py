import os
import shlex
import subprocess
import sys

import pytest

from ninjacore.msvc_helper import (
    CLWrapper,
    escape_for_depfile,
    push_path_into_environment,
)
from ninjacore.util import FatalError


def _command(*args: str) -> str:
    if os.name == "nt":
        return subprocess.list2cmdline(list(args))
    return shlex.join(args)


def _python(code: str) -> str:
    return _command(sys.executable, "-c", code)


def _base_env_block() -> str:
    block = ""
    for name in ("SYSTEMROOT", "SystemRoot"):
        if name in os.environ:
            block += f"{name}={os.environ[name]}\0"
            break
    return block


def test_spaces_in_filename():
    assert escape_for_depfile("sub\\some sdk\\foo.h") == "sub\\some\\ sdk\\foo.h"


def test_escape_without_spaces_is_unchanged():
    assert escape_for_depfile("sub\\sdk\\foo.h") == "sub\\sdk\\foo.h"


def test_env_block():
    cl = CLWrapper()
    cl.set_env_block(_base_env_block() + "foo=bar\0")
    result = cl.run(
        _python(
            "import os, sys; "
            "sys.stdout.buffer.write(('foo is ' + os.environ.get('foo', '')"
            " + '\\n').encode())"
        )
    )
    assert result.exit_code == 0
    assert result.output == b"foo is bar\n"


def test_env_block_replaces_environment():
    cl = CLWrapper()
    cl.set_env_block(_base_env_block() + "only=this\0")
    result = cl.run(
        _python(
            "import os, sys; "
            "sys.stdout.buffer.write(os.environ.get('NINJACORE_MARK', 'absent').encode())"
        )
    )
    assert result.output == b"absent"


def test_no_read_of_stderr(capfd):
    cl = CLWrapper()
    result = cl.run(
        _python(
            "import sys; "
            "sys.stdout.buffer.write(b'to stdout\\n'); sys.stdout.flush(); "
            "sys.stderr.write('to stderr\\n')"
        )
    )
    assert result.output == b"to stdout\n"
    assert "to stderr" in capfd.readouterr().err


def test_exit_code_is_returned():
    cl = CLWrapper()
    result = cl.run(_python("import sys; sys.exit(3)"))
    assert result.exit_code == 3
    assert result.output == b""


def test_missing_program_is_fatal():
    cl = CLWrapper()
    with pytest.raises(FatalError):
        cl.run(_command(os.path.join(os.getcwd(), "no-such-program-here")))


def test_push_path_into_environment(monkeypatch):
    monkeypatch.setenv("PATH", os.environ.get("PATH", ""))
    value = push_path_into_environment("foo=bar\0Path=/x/y\0other=1\0\0")
    assert value == "/x/y"
    assert os.environ["PATH"] == "/x/y"


def test_push_path_without_path_entry(monkeypatch):
    monkeypatch.setenv("PATH", "/original")
    assert push_path_into_environment("foo=bar\0baz=qux\0") is None
    assert os.environ["PATH"] == "/original"


def test_push_path_stops_at_block_end(monkeypatch):
    monkeypatch.setenv("PATH", "/original")
    assert push_path_into_environment("foo=bar\0\0PATH=/late\0") is None
    assert os.environ["PATH"] == "/original"