"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from mkservice import __version__
from mkservice.cli.console import dim, error, success
from mkservice.cli.validation import parse_env, validate_name
from mkservice.config import ConfigError, ServiceConfig, ServiceLevel, load_config
from mkservice.logging import configure_logging, configure_redaction
from mkservice.service import CapabilityUnavailableError, MkserviceError, get_backend

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="mkservice",
    help="Install a command as a systemd service",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mkservice {__version__}")
        raise typer.Exit()


@app.command()
def main(
    name: Annotated[
        str,
        typer.Argument(
            help="Service name",
            callback=validate_name,
        ),
    ],
    command: Annotated[
        list[str] | None,
        typer.Argument(
            help="Command to run, separated from options with --",
        ),
    ] = None,
    env: Annotated[
        list[str] | None,
        typer.Option(
            "--env",
            "-e",
            help="Environment variable as KEY=VALUE (repeatable)",
        ),
    ] = None,
    level: Annotated[
        ServiceLevel | None,
        typer.Option(
            "--level",
            help="Install as a user or system service",
            case_sensitive=False,
        ),
    ] = None,
    start: Annotated[
        bool | None,
        typer.Option(
            "--start/--no-start",
            help="Start the service after installing it",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Log level (DEBUG, INFO, WARNING, ERROR)",
        ),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Install COMMAND as a service called NAME and enable it."""
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ConfigError) as e:
        error(str(e))
        raise typer.Exit(1) from None

    configure_logging(
        log_level, use_rich=config.rich_logs, default=config.log_level
    )
    configure_redaction(enabled=config.redact_logs)

    service = ServiceConfig(
        name=name,
        command=command or [],
        env=parse_env(env or []),
        level=level or config.level,
    )
    logger.debug("Service: %r", service)

    should_start = config.start if start is None else start

    operator = get_backend(None, service, tools=config.tools)
    try:
        if operator is None:
            raise CapabilityUnavailableError(
                "Unknown init system, cannot add service."
            )
        logger.info("%s detected, creating service...", operator.name)
        unit_path = operator.install()
        if should_start:
            operator.start()
    except MkserviceError as e:
        logger.error("Failed creating service: %s", e)
        logger.debug("Install failed", exc_info=True)
        error(f"Failed creating service: {e}")
        raise typer.Exit(1) from None

    logger.info("Service %r installed.", service.name)
    success(f"Service '{service.name}' installed")
    dim(str(unit_path))


if __name__ == "__main__":
    app()
