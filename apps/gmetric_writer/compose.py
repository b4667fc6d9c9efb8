from __future__ import annotations

from domain.gmetric import GmetricWriter
from ports.process import ProcessRunnerPort
from ports.telemetry import MetricsPort
from shared.contracts.v1.writer import WriterConfig

from apps.gmetric_writer.settings import WriterAppSettings


def build_runner(settings: WriterAppSettings) -> ProcessRunnerPort:
    runner: ProcessRunnerPort

    if settings.runner_impl == "subprocess":
        from adapters.process import SubprocessRunner

        runner = SubprocessRunner.create(timeout_s=settings.timeout_s)
    elif settings.runner_impl == "dryrun":
        from adapters.process import DryRunProcessRunner

        runner = DryRunProcessRunner.create()
    else:
        raise ValueError(f"Unknown runner impl: {settings.runner_impl}")

    return runner


def build_writer(
    settings: WriterAppSettings,
    config: WriterConfig,
    metrics: MetricsPort | None = None,
) -> GmetricWriter:
    return GmetricWriter(config=config, runner=build_runner(settings), metrics=metrics)
