"""Systemd backend for Linux."""

import logging
from collections.abc import Sequence
from pathlib import Path

from mkservice.config.models import ServiceConfig, ServiceLevel, ToolsConfig
from mkservice.config.paths import (
    SYSTEM_UNIT_DIR,
    UNIT_SUFFIX,
    get_home_dir,
    get_user_unit_dir,
)
from mkservice.logging import redact
from mkservice.service.base import ServiceOperator
from mkservice.service.errors import ExternalToolError, ServiceIOError
from mkservice.service.runner import ProcessRunner, SubprocessRunner
from mkservice.service.unit import render

logger = logging.getLogger(__name__)

# Prefix for each line of unit content in log output
LOG_PREFIX = "\n>  "


class SystemdBackend(ServiceOperator):
    """Systemd backend.

    System services go to /etc/systemd/system and are managed with plain
    systemctl. User services go to ~/.config/systemd/user and every
    systemctl call gets --user.
    """

    def __init__(
        self,
        service: ServiceConfig,
        runner: ProcessRunner | None = None,
        tools: ToolsConfig | None = None,
    ):
        super().__init__(service)
        self._runner = runner or SubprocessRunner()
        self._tools = tools or ToolsConfig()

    @property
    def name(self) -> str:
        return "systemd"

    def systemctl_command(self, *args: str) -> list[str]:
        """Build a systemctl argv for this service's level."""
        argv = [self._tools.systemctl]
        if self.service.level == ServiceLevel.USER:
            argv.append("--user")
        argv.extend(args)
        return argv

    def escape(self, name: str, args: Sequence[str] = ()) -> str:
        """Escape a name with systemd-escape.

        Args:
            name: Raw name.
            args: Extra systemd-escape flags (e.g. --path).

        Raises:
            ExternalToolError: If systemd-escape fails or its output is
                not a single UTF-8 line.
        """
        argv = [self._tools.systemd_escape, *args, "--", name]
        result = self._runner.run(argv, capture=True)
        if result.returncode != 0:
            raise ExternalToolError(
                f"systemd-escape exited with status {result.returncode}",
                argv=argv,
                returncode=result.returncode,
            )

        stdout = result.stdout
        if not stdout.endswith(b"\n"):
            raise ExternalToolError(
                f"Unexpected systemd-escape output: {stdout!r}",
                argv=argv,
                returncode=result.returncode,
            )
        try:
            escaped = stdout[:-1].decode("utf-8")
        except UnicodeDecodeError as e:
            raise ExternalToolError(
                f"systemd-escape output is not valid UTF-8: {e}",
                argv=argv,
                returncode=result.returncode,
            ) from e

        if "\n" in escaped or "\r" in escaped:
            raise ExternalToolError(
                f"systemd-escape returned more than one line: {stdout!r}",
                argv=argv,
                returncode=result.returncode,
            )

        if not escaped:
            raise ExternalToolError(
                "systemd-escape returned an empty name",
                argv=argv,
                returncode=result.returncode,
            )
        return escaped

    def unit_dir(self) -> Path:
        """Resolve the unit directory, creating it for user services."""
        if self.service.level == ServiceLevel.SYSTEM:
            return SYSTEM_UNIT_DIR

        home = get_home_dir()
        if home is None:
            raise ServiceIOError("HOME is not set, cannot locate user unit directory")
        unit_dir = get_user_unit_dir(home)
        try:
            unit_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ServiceIOError(f"Failed to create {unit_dir}: {e}") from e
        return unit_dir

    def _systemctl(self, *args: str) -> None:
        argv = self.systemctl_command(*args)
        result = self._runner.run(argv)
        if result.returncode != 0:
            raise ExternalToolError(
                f"{' '.join(argv)} exited with status {result.returncode}",
                argv=argv,
                returncode=result.returncode,
            )

    def install(self) -> Path:
        """Write the unit file, reload systemd and enable the service."""
        unit_dir = self.unit_dir()
        safe_name = self.escape(self.service.name)
        content = render(self.service)
        unit_path = unit_dir / f"{safe_name}{UNIT_SUFFIX}"

        logger.info(
            "Writing systemd unit to %s:%s%s",
            unit_path,
            LOG_PREFIX,
            redact(content.rstrip("\n")).replace("\n", LOG_PREFIX),
        )
        try:
            unit_path.write_text(content, encoding="utf-8", newline="\n")
        except OSError as e:
            raise ServiceIOError(f"Failed to write {unit_path}: {e}") from e

        logger.info("Reloading systemd daemon...")
        self._systemctl("daemon-reload")

        # systemctl resolves the unescaped name itself
        logger.info("Enabling service...")
        self._systemctl("enable", self.service.name)

        return unit_path

    def start(self) -> None:
        """Start the service via systemctl."""
        logger.info("Starting service...")
        self._systemctl("start", self.service.name)
