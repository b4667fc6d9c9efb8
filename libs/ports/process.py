from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class ProcessRunnerPort(ABC):
    """Runs one external command to completion; domain never sees subprocess."""

    @abstractmethod
    def execute(self, argv: Sequence[str]) -> int:
        """Return the exit status.

        Raises ProcessLaunchError if the executable cannot be started, and
        InvalidCommandError if the argv itself is unusable (NUL byte).
        """
