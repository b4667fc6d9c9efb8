from __future__ import annotations

from ports.telemetry import MetricsPort


class FakeMetricsPort(MetricsPort):
    def __init__(self) -> None:
        self.samples: list[tuple[str, float, dict[str, str]]] = []

    def observe(self, name: str, value: float, **labels: str) -> None:
        self.samples.append((name, float(value), labels))

    def named(self, name: str) -> list[tuple[str, float, dict[str, str]]]:
        return [s for s in self.samples if s[0] == name]
