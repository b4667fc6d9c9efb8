# libs/domain/gmetric/writer.py
from __future__ import annotations

import logging
import shlex
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from ports.naming import KeyNamer
from ports.process import ProcessRunnerPort
from ports.telemetry import MetricsPort
from shared.contracts.v1.results import QueryResult
from shared.contracts.v1.writer import WriterConfig
from shared.errors import InvalidCommandError, SubmissionTimeoutError

from .command import build_command
from .naming import DefaultKeyNamer
from .values import MeasurementValue, classify, coerce, format_value, is_numeric

LOG: Final = logging.getLogger("gmetric.writer")


@dataclass(frozen=True)
class Measurement:
    key: str
    value: MeasurementValue


@dataclass
class WriteSummary:
    attempted: int = 0
    failed: int = 0
    skipped: int = 0

    @property
    def succeeded(self) -> int:
        return self.attempted - self.failed


class GmetricWriter:
    """Turns polled results into one gmetric invocation per numeric value.

    Synchronous: each process is awaited before the next starts. A non-zero
    exit, a timeout (if the runner has one) or an unusable argv is logged and
    the batch goes on;
    ProcessLaunchError is not caught and aborts the rest of the batch.
    """

    def __init__(
        self,
        config: WriterConfig,
        runner: ProcessRunnerPort,
        metrics: MetricsPort | None = None,
        namer: KeyNamer | None = None,
    ) -> None:
        self.config: Final = config
        self.runner: Final = runner
        self.metrics: Final = metrics
        self.namer: Final[KeyNamer] = namer or DefaultKeyNamer(config.type_names)

    def write(self, results: Iterable[QueryResult]) -> WriteSummary:
        """One polling cycle's worth of results, in their natural order."""
        summary = WriteSummary()
        for result in results:
            for value_key, raw in result.values.items():
                value = coerce(raw)
                if value is None or not is_numeric(value):
                    summary.skipped += 1
                    continue
                self._submit(Measurement(self.namer(result, value_key), value), summary)
        return summary

    def write_measurements(self, measurements: Iterable[Measurement]) -> WriteSummary:
        """Same as write() for measurements that already carry their key."""
        summary = WriteSummary()
        for m in measurements:
            if not is_numeric(m.value):
                summary.skipped += 1
                continue
            self._submit(m, summary)
        return summary

    def submit(self, measurement: Measurement) -> bool:
        """Send a single measurement, whatever its type. True on clean exit."""
        summary = WriteSummary()
        self._submit(measurement, summary)
        return summary.failed == 0

    def _submit(self, m: Measurement, summary: WriteSummary) -> None:
        wire_type = classify(m.value)
        argv = build_command(self.config, m.key, format_value(m.value), wire_type)
        summary.attempted += 1
        LOG.debug("executing: %s", shlex.join(argv))

        try:
            code = self.runner.execute(argv)
        except (SubmissionTimeoutError, InvalidCommandError) as e:
            summary.failed += 1
            LOG.error("failed to execute %s, %s", shlex.join(argv), e)
            reason = "timeout" if isinstance(e, SubmissionTimeoutError) else "invalid_argv"
            self._observe("gmetric_submit_failed", wire_type.value, reason=reason)
            return

        if code != 0:
            summary.failed += 1
            LOG.error("failed to execute %s, exited: %d", shlex.join(argv), code)
            self._observe("gmetric_submit_failed", wire_type.value, reason="exit")
            return
        self._observe("gmetric_submitted", wire_type.value)

    def _observe(self, name: str, wire_type: str, **labels: str) -> None:
        if self.metrics is not None:
            self.metrics.observe(name, 1.0, type=wire_type, **labels)
