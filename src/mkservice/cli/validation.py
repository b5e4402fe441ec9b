"""Argument validation and parsing for the CLI."""

import re

import typer

NAME_PATTERN = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9_-]*$")
MAX_NAME_LENGTH = 256


def validate_name(value: str) -> str:
    """Check a service name before it reaches the installer.

    Raises:
        typer.BadParameter: If the name has invalid characters or is too long.
    """
    if not NAME_PATTERN.fullmatch(value):
        raise typer.BadParameter(
            f"Name includes invalid characters. Pattern: {NAME_PATTERN.pattern}"
        )
    if len(value) > MAX_NAME_LENGTH:
        raise typer.BadParameter(
            f"Name must not exceed {MAX_NAME_LENGTH} characters."
        )
    return value


def parse_env(entries: list[str]) -> dict[str, str]:
    """Parse KEY=VALUE entries.

    Splits at the first '='. An entry without '=' gets an empty value.
    Later entries override earlier ones with the same key.
    """
    env: dict[str, str] = {}
    for entry in entries:
        key, _, value = entry.partition("=")
        env[key] = value
    return env
