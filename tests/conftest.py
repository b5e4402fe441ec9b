"""Shared test fixtures and factories."""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from mkservice.config.models import ServiceConfig, ServiceLevel
from mkservice.logging import configure_redaction
from mkservice.service.runner import ProcessResult

# =============================================================================
# Process Runner Fakes
# =============================================================================


class FakeRunner:
    """ProcessRunner that records argv and answers from a handler.

    By default systemd-escape echoes its last argument followed by a
    newline and every other command exits 0.
    """

    def __init__(
        self,
        handler: Callable[[list[str]], ProcessResult] | None = None,
    ):
        self.calls: list[list[str]] = []
        self._handler = handler or self._default

    @staticmethod
    def _default(argv: list[str]) -> ProcessResult:
        if argv[0] == "systemd-escape":
            return ProcessResult(returncode=0, stdout=argv[-1].encode() + b"\n")
        return ProcessResult(returncode=0)

    def run(self, argv: Sequence[str], capture: bool = False) -> ProcessResult:
        argv = list(argv)
        self.calls.append(argv)
        return self._handler(argv)

    def commands(self, executable: str) -> list[list[str]]:
        """Calls made to one executable."""
        return [call for call in self.calls if call[0] == executable]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def make_runner() -> type[FakeRunner]:
    """Build a FakeRunner with a custom handler."""
    return FakeRunner


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def hello_service() -> ServiceConfig:
    """The service from the README example."""
    return ServiceConfig(
        name="hello",
        command=["/bin/sh", "-c", "echo hello"],
        env={"FOO": "foo", "BAR": "bar"},
        level=ServiceLevel.SYSTEM,
    )


@pytest.fixture
def system_unit_dir(tmp_path: Path, monkeypatch) -> Path:
    """Redirect the system unit directory into tmp_path."""
    unit_dir = tmp_path / "etc" / "systemd" / "system"
    unit_dir.mkdir(parents=True)
    monkeypatch.setattr(
        "mkservice.service.backends.systemd.SYSTEM_UNIT_DIR", unit_dir
    )
    return unit_dir


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch) -> Path:
    """Point HOME at an empty directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def hello_unit() -> str:
    """Rendered unit for hello_service."""
    return (
        "[Unit]\n"
        "Description=hello\n"
        "[Install]\n"
        "WantedBy=multi-user.target\n"
        "[Service]\n"
        "Environment=BAR=bar\n"
        "Environment=FOO=foo\n"
        'ExecStart="/bin/sh" "-c" "echo hello"\n'
        "Type=simple\n"
    )


# =============================================================================
# CLI Fixtures
# =============================================================================


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch):
    """Keep the developer's config and log level out of tests."""
    monkeypatch.setenv("MKSERVICE_CONFIG", str(tmp_path / "no-config.toml"))
    monkeypatch.delenv("MKSERVICE_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo configure_logging() calls made by CLI tests."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers, root.level = handlers, level
    configure_redaction()
