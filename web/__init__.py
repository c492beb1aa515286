"""HTTP layer: Flask app factory, content-type table and the listener."""

from .app import create_app
from .server import build_server, serve

__all__ = ["create_app", "build_server", "serve"]
