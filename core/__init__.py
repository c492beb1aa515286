"""Core package exposing the server configuration and shared exceptions."""

from .config import ServerConfig
from .errors import StartupError

__all__ = ["ServerConfig", "StartupError"]
