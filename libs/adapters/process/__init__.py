from .dryrun import DryRunProcessRunner
from .fakes import FakeProcessRunner
from .subprocess_runner import SubprocessRunner

__all__ = [
    "SubprocessRunner",
    "DryRunProcessRunner",
    "FakeProcessRunner",
]
