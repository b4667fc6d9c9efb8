from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from typing import Final

from ports.process import ProcessRunnerPort
from shared.errors import InvalidCommandError, ProcessLaunchError, SubmissionTimeoutError

LOG: Final = logging.getLogger("gmetric.process")


class SubprocessRunner(ProcessRunnerPort):
    """Blocking subprocess.run wrapper. Output is captured, never inherited."""

    def __init__(self, timeout_s: float | None = None) -> None:
        self.timeout_s = timeout_s

    @classmethod
    def create(cls, timeout_s: float | None = None) -> SubprocessRunner:
        return cls(timeout_s=timeout_s)

    def execute(self, argv: Sequence[str]) -> int:
        cmd = tuple(argv)
        try:
            result = subprocess.run(
                cmd,
                check=False,
                capture_output=True,
                text=True,
                timeout=self.timeout_s,
            )
        except subprocess.TimeoutExpired as e:
            # run() has already killed the child at this point
            raise SubmissionTimeoutError(cmd, e.timeout) from e
        except OSError as e:
            raise ProcessLaunchError(cmd, e) from e
        except ValueError as e:
            # argv rejected before fork (embedded NUL); nothing was started
            raise InvalidCommandError(cmd, e) from e

        if result.returncode != 0 and result.stderr:
            LOG.debug("%s stderr: %s", cmd[0], result.stderr.strip())
        return result.returncode
