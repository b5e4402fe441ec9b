"""mkservice - install a command as a managed background service."""

__version__ = "0.1.0"
