"""Threaded WSGI listener around the Flask app."""

from __future__ import annotations

import logging

from flask import Flask
from werkzeug.serving import ThreadedWSGIServer

from core.config import ServerConfig
from core.errors import StartupError
from web.app import create_app

logger = logging.getLogger("publicserve.server")


class ExclusiveThreadedServer(ThreadedWSGIServer):
    """One thread per connection; never shares its port with another listener."""

    allow_reuse_port = False
    daemon_threads = True


def build_server(app: Flask, config: ServerConfig) -> ExclusiveThreadedServer:
    """Bind ``app`` on ``config.host:config.port`` or raise `StartupError`."""
    try:
        return ExclusiveThreadedServer(config.host, config.port, app)
    except OSError as exc:
        raise StartupError(f"Cannot listen on {config.host}:{config.port}: {exc.strerror or exc}") from exc
    except SystemExit as exc:
        # werkzeug prints the bind error and exits instead of raising it.
        raise StartupError(f"Cannot listen on {config.host}:{config.port}") from exc


def serve(config: ServerConfig) -> int:
    """Run until interrupted and return the process exit code."""
    try:
        config.validate()
        app = create_app(config)
        server = build_server(app, config)
    except StartupError as exc:
        logger.error({"evt": "startup_failed", "error": str(exc)})
        return 1

    logger.info("Listening on %s", server.server_port)
    logger.debug({"evt": "listening", "host": config.host, "port": server.server_port})
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        # werkzeug's loop usually handles the interrupt itself.
        pass
    finally:
        server.server_close()
    logger.info({"evt": "shutdown", "port": server.server_port})
    return 0


__all__ = ["ExclusiveThreadedServer", "build_server", "serve"]
