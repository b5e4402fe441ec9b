"""Errors raised while installing a service."""

from collections.abc import Sequence


class MkserviceError(Exception):
    """Base error for service installation failures."""


class CapabilityUnavailableError(MkserviceError):
    """No supported service manager was detected on this host."""


class ExternalToolError(MkserviceError):
    """An external tool could not be run or reported failure.

    Attributes:
        argv: The command line that was run.
        returncode: Exit status, or None if the process never started.
    """

    def __init__(
        self,
        message: str,
        argv: Sequence[str] = (),
        returncode: int | None = None,
    ):
        super().__init__(message)
        self.argv = tuple(argv)
        self.returncode = returncode


class ServiceIOError(MkserviceError):
    """Unit directory or unit file could not be resolved, created or written."""


class UnitFormatError(MkserviceError):
    """A unit could not be serialized."""
