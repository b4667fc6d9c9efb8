from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from ports.process import ProcessRunnerPort
from shared.errors import ProcessLaunchError


class FakeProcessRunner(ProcessRunnerPort):
    """Records every argv; exit codes come from a script, default 0.

    `exit_codes` is consumed one per call. `launch_error` (or `fail_on`)
    makes execute() raise ProcessLaunchError instead, as a missing binary would.
    """

    def __init__(
        self,
        exit_codes: Iterable[int] = (),
        launch_error: OSError | None = None,
        fail_on: Callable[[tuple[str, ...]], BaseException | None] | None = None,
    ) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.completed: list[tuple[str, ...]] = []
        self._codes = list(exit_codes)
        self._launch_error = launch_error
        self._fail_on = fail_on

    def execute(self, argv: Sequence[str]) -> int:
        cmd = tuple(argv)
        self.calls.append(cmd)
        if self._launch_error is not None:
            raise ProcessLaunchError(cmd, self._launch_error)
        if self._fail_on is not None:
            err = self._fail_on(cmd)
            if err is not None:
                raise err
        code = self._codes.pop(0) if self._codes else 0
        self.completed.append(cmd)
        return code
