import sys

import pytest
from clang_format_hook.errors import ToolLaunchError
from clang_format_hook.models import CmdResult
from clang_format_hook.runner import run_command


def test_run_command_captures_stdout_and_status():
    res = run_command([sys.executable, "-c", "import sys; sys.stdout.write('hi\\n'); sys.exit(4)"])
    assert res.output == b"hi\n"
    assert res.return_status == 4


def test_run_command_passes_arguments_verbatim():
    arg = "name with spaces; $(echo no).cpp"
    res = run_command([sys.executable, "-c", "import sys; sys.stdout.write(sys.argv[1])", arg])
    assert res.output == arg.encode()
    assert res.return_status == 0


def test_run_command_empty_args():
    assert run_command([]) == CmdResult(output=b"", return_status=0)


def test_run_command_launch_failure(tmp_path):
    with pytest.raises(ToolLaunchError) as excinfo:
        run_command([str(tmp_path / "no-such-formatter"), "a.cpp"])
    assert "no-such-formatter" in str(excinfo.value)
