"""Centralized logging configuration for mkservice.

The CLI calls configure_logging() once before doing any work.

Logging Levels:
- DEBUG: Parsed service description, external commands being run
- INFO: Each install step (write unit, reload, enable, start)
- ERROR: Failures that abort an install

Unit content is logged at INFO and may carry credentials in Environment=
lines, so it goes through redact() first.
"""

import logging
import os
import re
from dataclasses import dataclass, field

ENV_VAR = "MKSERVICE_LOG_LEVEL"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Default patterns for secret detection and redaction
DEFAULT_REDACT_PATTERNS: list[str] = [
    # API key prefixes (Anthropic, OpenAI, GitHub, Slack, etc.)
    r"\b(sk-[A-Za-z0-9_-]{20,})\b",
    r"\b(ghp_[A-Za-z0-9]{20,})\b",
    r"\b(github_pat_[A-Za-z0-9_]{20,})\b",
    r"\b(xox[baprs]-[A-Za-z0-9-]{10,})\b",
    r"\b(AIza[0-9A-Za-z\-_]{20,})\b",
    # ENV-style assignments: API_KEY=secret or DB_PASSWORD=secret
    r"\b[A-Z0-9_]*(?:KEY|TOKEN|SECRET|PASSWORD|PASSWD)\s*=\s*([^\s\"']{8,})",
]


@dataclass
class SecretRedactor:
    """Redacts sensitive information from log messages.

    Matched secrets keep their first and last four characters.
    """

    patterns: list[re.Pattern[str]] = field(default_factory=list)
    enabled: bool = True

    def __post_init__(self) -> None:
        if not self.patterns:
            self.patterns = [re.compile(p) for p in DEFAULT_REDACT_PATTERNS]

    def redact(self, text: str) -> str:
        """Redact secrets from text, preserving partial info for debugging."""
        if not self.enabled or not text:
            return text
        result = text
        for pattern in self.patterns:
            result = pattern.sub(self._mask_match, result)
        return result

    def _mask_match(self, match: re.Match[str]) -> str:
        full = match.group(0)
        token = match.group(1) if match.lastindex else full

        # Already masked by an earlier pattern
        if "..." in token:
            return full

        if len(token) < 12:
            masked = "***"
        else:
            masked = f"{token[:4]}...{token[-4:]}"
        return full.replace(token, masked) if token != full else masked


# Module-level redactor instance
_redactor = SecretRedactor()


def configure_redaction(
    enabled: bool = True, extra_patterns: list[str] | None = None
) -> None:
    """Configure secret redaction for logged unit content.

    Args:
        enabled: Whether to enable redaction.
        extra_patterns: Additional regex patterns to match secrets.
    """
    global _redactor
    patterns = [re.compile(p) for p in DEFAULT_REDACT_PATTERNS]
    if extra_patterns:
        patterns.extend(re.compile(p) for p in extra_patterns)
    _redactor = SecretRedactor(patterns=patterns, enabled=enabled)


def redact(text: str) -> str:
    """Redact secrets using the module-level redactor."""
    return _redactor.redact(text)


class ComponentFormatter(logging.Formatter):
    """Formatter that extracts component name from logger path.

    - mkservice.service.backends.systemd -> service
    - mkservice.config.loader -> config
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        if len(parts) >= 2 and parts[0] == "mkservice":
            record.component = parts[1]
        else:
            record.component = parts[0]
        return super().format(record)


def resolve_level(level: str | None = None, default: str = "INFO") -> str:
    """Pick the log level name.

    Resolution order: explicit level, MKSERVICE_LOG_LEVEL, default.
    Unknown names resolve to INFO.
    """
    if level is None:
        level = os.environ.get(ENV_VAR) or default
    level = level.upper()
    return level if level in LEVELS else "INFO"


def configure_logging(
    level: str | None = None,
    use_rich: bool = False,
    default: str = "INFO",
) -> None:
    """Configure logging for mkservice.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
            If None, uses MKSERVICE_LOG_LEVEL or default.
        use_rich: Use Rich handler for colorful output.
        default: Level used when neither level nor the env var is set.
    """
    log_level = getattr(logging, resolve_level(level, default))

    if use_rich:
        from rich.console import Console
        from rich.logging import RichHandler

        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=False,
            show_path=False,
            show_time=False,
            markup=False,
        )
        handler.setFormatter(ComponentFormatter("%(component)s | %(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            ComponentFormatter(
                "%(asctime)s | %(levelname)-8s | %(component)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )

    logging.basicConfig(
        level=log_level,
        handlers=[handler],
        force=True,
    )
