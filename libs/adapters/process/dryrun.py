from __future__ import annotations

import shlex
from collections.abc import Sequence

from ports.process import ProcessRunnerPort
from rich.console import Console
from rich.text import Text


class DryRunProcessRunner(ProcessRunnerPort):
    """Prints each command instead of running it; always reports success."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True, highlight=False)
        self.count = 0

    @classmethod
    def create(cls) -> DryRunProcessRunner:
        return cls()

    def execute(self, argv: Sequence[str]) -> int:
        self.count += 1
        line = Text()
        line.append(f"[{self.count:>4}] ", style="dim")
        line.append(shlex.join(argv))
        self.console.print(line)
        return 0
