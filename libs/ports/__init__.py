from .naming import KeyNamer
from .process import ProcessRunnerPort
from .telemetry import MetricsPort

__all__ = [
    "KeyNamer",
    "ProcessRunnerPort",
    "MetricsPort",
]
