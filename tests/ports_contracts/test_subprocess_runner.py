from __future__ import annotations

import sys
from pathlib import Path

import pytest
from adapters.process import SubprocessRunner
from ports.process import ProcessRunnerPort
from shared.errors import InvalidCommandError, ProcessLaunchError, SubmissionTimeoutError


def _py(code: str) -> list[str]:
    return [sys.executable, "-c", code]


def test_exit_status_is_returned():
    runner = SubprocessRunner.create()
    assert isinstance(runner, ProcessRunnerPort)
    assert runner.execute(_py("pass")) == 0
    assert runner.execute(_py("import sys; sys.exit(3)")) == 3


def test_output_is_captured_not_inherited(capfd: pytest.CaptureFixture[str]):
    runner = SubprocessRunner()
    code = runner.execute(_py("import sys; print('out'); sys.stderr.write('err'); sys.exit(1)"))
    assert code == 1
    captured = capfd.readouterr()
    assert "out" not in captured.out
    assert "err" not in captured.err


def test_missing_executable_is_a_launch_error(tmp_path: Path):
    missing = tmp_path / "no-such-gmetric"
    with pytest.raises(ProcessLaunchError) as ei:
        SubprocessRunner().execute([str(missing), "-n", "x"])
    assert isinstance(ei.value.cause, FileNotFoundError)
    assert ei.value.argv[0] == str(missing)


def test_nul_byte_in_argv_is_an_invalid_command():
    with pytest.raises(InvalidCommandError) as ei:
        SubprocessRunner().execute(_py("pass") + ["-n", "a\x00b"])
    assert isinstance(ei.value.cause, ValueError)
    assert not isinstance(ei.value, ProcessLaunchError)


def test_timeout_kills_and_raises():
    runner = SubprocessRunner(timeout_s=0.2)
    with pytest.raises(SubmissionTimeoutError) as ei:
        runner.execute(_py("import time; time.sleep(10)"))
    assert ei.value.timeout_s == pytest.approx(0.2)
