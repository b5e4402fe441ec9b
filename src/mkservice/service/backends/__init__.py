"""Service backend detection and factory."""

import importlib
from pathlib import Path

from mkservice.config.models import ServiceConfig, ToolsConfig
from mkservice.config.paths import SYSTEMD_RUNTIME_DIR
from mkservice.service.base import ServiceOperator
from mkservice.service.runner import ProcessRunner

BACKENDS = {
    "systemd": "mkservice.service.backends.systemd.SystemdBackend",
}


def _load_backend(name: str) -> type[ServiceOperator]:
    module_path, class_name = BACKENDS[name].rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)


def detect_backend(
    service: ServiceConfig,
    runner: ProcessRunner | None = None,
    tools: ToolsConfig | None = None,
    runtime_dir: Path = SYSTEMD_RUNTIME_DIR,
) -> ServiceOperator | None:
    """Detect the service manager running on this host.

    Args:
        service: Service the returned operator will manage.
        runner: Process runner handed to the backend.
        tools: External tool names handed to the backend.
        runtime_dir: Path whose existence means systemd is running.

    Returns:
        An operator for the detected manager, or None if unsupported.
    """
    if runtime_dir.exists():
        return _load_backend("systemd")(service, runner=runner, tools=tools)
    return None


def get_backend(
    name: str | None,
    service: ServiceConfig,
    runner: ProcessRunner | None = None,
    tools: ToolsConfig | None = None,
) -> ServiceOperator | None:
    """Get a specific backend by name, or auto-detect.

    Args:
        name: Backend name ('systemd') or None for auto.
        service: Service the returned operator will manage.
        runner: Process runner handed to the backend.
        tools: External tool names handed to the backend.

    Raises:
        ValueError: If the named backend doesn't exist.
    """
    if name is None:
        return detect_backend(service, runner=runner, tools=tools)

    if name not in BACKENDS:
        raise ValueError(f"Unknown backend: {name}. Available: {list(BACKENDS)}")

    return _load_backend(name)(service, runner=runner, tools=tools)


__all__ = ["detect_backend", "get_backend"]
