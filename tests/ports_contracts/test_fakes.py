from __future__ import annotations

import io

import pytest
from adapters.process import DryRunProcessRunner, FakeProcessRunner
from adapters.telemetry import FakeMetricsPort
from ports.process import ProcessRunnerPort
from ports.telemetry import MetricsPort
from rich.console import Console
from shared.errors import ProcessLaunchError


def test_fake_runner_records_and_scripts_exit_codes():
    runner = FakeProcessRunner(exit_codes=[0, 2])
    assert isinstance(runner, ProcessRunnerPort)

    assert runner.execute(["gmetric", "-n", "a"]) == 0
    assert runner.execute(["gmetric", "-n", "b"]) == 2
    assert runner.execute(["gmetric", "-n", "c"]) == 0  # script exhausted → 0
    assert runner.calls[1] == ("gmetric", "-n", "b")
    assert len(runner.completed) == 3


def test_fake_runner_launch_error():
    runner = FakeProcessRunner(launch_error=PermissionError(13, "Permission denied"))
    with pytest.raises(ProcessLaunchError) as ei:
        runner.execute(["/usr/bin/gmetric"])
    assert isinstance(ei.value.cause, PermissionError)
    assert ei.value.argv == ("/usr/bin/gmetric",)
    assert runner.completed == []


def test_dry_run_prints_and_succeeds():
    buf = io.StringIO()
    runner = DryRunProcessRunner(console=Console(file=buf, width=200, color_system=None))
    assert isinstance(runner, ProcessRunnerPort)

    assert runner.execute(["/usr/bin/gmetric", "-n", "heap used", "-u", ""]) == 0
    out = buf.getvalue()
    assert "/usr/bin/gmetric -n 'heap used' -u ''" in out
    assert runner.count == 1


def test_metrics_fake():
    metrics = FakeMetricsPort()
    assert isinstance(metrics, MetricsPort)
    metrics.observe("gmetric_submitted", 1, type="double")
    metrics.observe("gmetric_submit_failed", 1, type="int32", reason="exit")
    assert metrics.samples[0] == ("gmetric_submitted", 1.0, {"type": "double"})
    assert metrics.named("gmetric_submit_failed")[0][2]["reason"] == "exit"
