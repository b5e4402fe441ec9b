"""Abstract base for service manager backends."""

from abc import ABC, abstractmethod
from pathlib import Path

from mkservice.config.models import ServiceConfig


class ServiceOperator(ABC):
    """Installs and starts one service through a host service manager.

    Callers obtain an operator from mkservice.service.backends and never
    need to know which service manager is behind it.
    """

    def __init__(self, service: ServiceConfig):
        self.service = service

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name (e.g., 'systemd')."""
        ...

    @abstractmethod
    def install(self) -> Path:
        """Write the service definition, reload the manager and enable it.

        Returns:
            Path of the written service definition.

        Raises:
            MkserviceError: If any step fails. Later steps are not attempted.
        """
        ...

    @abstractmethod
    def start(self) -> None:
        """Start the installed service.

        Raises:
            MkserviceError: If the service manager could not start it.
        """
        ...
