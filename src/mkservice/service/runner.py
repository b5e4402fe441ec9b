"""Synchronous execution of external commands."""

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from mkservice.service.errors import ExternalToolError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a finished process."""

    returncode: int
    stdout: bytes = b""


class ProcessRunner(Protocol):
    """Runs a command to completion."""

    def run(self, argv: Sequence[str], capture: bool = False) -> ProcessResult:
        """Run argv and wait for it to exit.

        Args:
            argv: Executable followed by its arguments.
            capture: Capture stdout instead of passing it through.

        Raises:
            ExternalToolError: If the process could not be started.
        """
        ...


class SubprocessRunner:
    """ProcessRunner backed by subprocess.run."""

    def run(self, argv: Sequence[str], capture: bool = False) -> ProcessResult:
        logger.debug("Running %s", " ".join(argv))
        try:
            result = subprocess.run(
                list(argv),
                stdout=subprocess.PIPE if capture else None,
                check=False,
            )
        except OSError as e:
            raise ExternalToolError(
                f"Failed to run {argv[0]}: {e}", argv=argv
            ) from e
        return ProcessResult(returncode=result.returncode, stdout=result.stdout or b"")
