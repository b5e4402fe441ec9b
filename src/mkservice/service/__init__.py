"""Service installation for mkservice.

Renders a systemd unit for a ServiceConfig, writes it, reloads the
manager and enables the service.

Example:
    from mkservice.config import ServiceConfig
    from mkservice.service import detect_backend

    operator = detect_backend(ServiceConfig(name="hello", command=["/bin/true"]))
    if operator is not None:
        operator.install()
        operator.start()
"""

from mkservice.service.backends import detect_backend, get_backend
from mkservice.service.base import ServiceOperator
from mkservice.service.errors import (
    CapabilityUnavailableError,
    ExternalToolError,
    MkserviceError,
    ServiceIOError,
    UnitFormatError,
)
from mkservice.service.runner import ProcessResult, ProcessRunner, SubprocessRunner
from mkservice.service.unit import render, systemd_quote

__all__ = [
    "CapabilityUnavailableError",
    "ExternalToolError",
    "MkserviceError",
    "ProcessResult",
    "ProcessRunner",
    "ServiceIOError",
    "ServiceOperator",
    "SubprocessRunner",
    "UnitFormatError",
    "detect_backend",
    "get_backend",
    "render",
    "systemd_quote",
]
