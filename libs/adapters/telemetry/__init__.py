from .fakes import FakeMetricsPort

__all__ = ["FakeMetricsPort"]
