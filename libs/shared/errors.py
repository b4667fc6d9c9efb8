from __future__ import annotations


class GmetricError(Exception):
    """Base class for everything the writer raises on purpose."""


class ConfigurationError(GmetricError, ValueError):
    """A writer option is present but cannot be resolved (e.g. tmax="abc")."""

    def __init__(self, message: str, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option


class ProcessLaunchError(GmetricError):
    """The gmetric executable could not be started at all.

    Missing binary, permission denied, fork failure. Aborts the batch.
    """

    def __init__(self, argv: tuple[str, ...], cause: OSError) -> None:
        super().__init__(f"failed to launch {argv[0] if argv else '?'}: {cause}")
        self.argv = argv
        self.cause = cause


class SubmissionTimeoutError(GmetricError):
    """The gmetric process did not exit within the configured timeout."""

    def __init__(self, argv: tuple[str, ...], timeout_s: float) -> None:
        super().__init__(f"{argv[0] if argv else '?'} did not exit within {timeout_s}s")
        self.argv = argv
        self.timeout_s = timeout_s


class InvalidCommandError(GmetricError):
    """The argv cannot be passed to the OS at all, e.g. a NUL byte in the metric name."""

    def __init__(self, argv: tuple[str, ...], cause: ValueError) -> None:
        super().__init__(f"cannot run {argv[0] if argv else '?'}: {cause}")
        self.argv = argv
        self.cause = cause
