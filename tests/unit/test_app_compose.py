from __future__ import annotations

from adapters.process import DryRunProcessRunner, SubprocessRunner
from domain.gmetric import GmetricWriter
from ports.process import ProcessRunnerPort
from shared.contracts.v1.writer import WriterConfig

from apps.gmetric_writer.compose import build_runner, build_writer
from apps.gmetric_writer.settings import WriterAppSettings


def test_compose_subprocess_runner_carries_timeout():
    settings = WriterAppSettings(runner_impl="subprocess", timeout_s=3.0)
    runner = build_runner(settings)

    # Interface types
    assert isinstance(runner, ProcessRunnerPort)
    assert isinstance(runner, SubprocessRunner)
    assert runner.timeout_s == 3.0


def test_compose_dryrun_writer():
    settings = WriterAppSettings(runner_impl="dryrun")
    config = WriterConfig(group_name="jvm")
    writer = build_writer(settings, config)

    # Settings wired correctly
    assert isinstance(writer, GmetricWriter)
    assert isinstance(writer.runner, DryRunProcessRunner)
    assert writer.config is config
