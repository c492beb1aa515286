#!/usr/bin/env python
"""Flask application serving the index page and everything under the public directory."""

from __future__ import annotations

import logging
import os
from urllib.parse import quote

from flask import Flask, Response, abort, redirect, request, send_from_directory
from flask_cors import CORS
from werkzeug.security import safe_join

from core.config import ServerConfig
from web.mime_types import guess_mimetype

logger = logging.getLogger("publicserve.web")


def _is_hidden(filename: str) -> bool:
    """Dotfiles and dot-directories (including ``.`` and ``..``) are never served."""
    return any(part.startswith(".") for part in filename.split("/"))


def _send_public_file(directory: str, filename: str) -> Response:
    return send_from_directory(directory, filename, mimetype=guess_mimetype(filename))


def _plain(text: str, status: int) -> Response:
    return Response(text, status=status, mimetype="text/plain")


def create_app(config: ServerConfig) -> Flask:
    """Build the app serving ``config.public_dir``."""
    # Flask's own /static route would shadow files under public/static.
    app = Flask(__name__, static_folder=None)
    if config.cors:
        CORS(app, supports_credentials=True)

    public_dir = str(config.public_dir)
    index_path = config.index_path
    logger.info({"evt": "index_path", "path": str(index_path)})

    @app.route('/')
    def index():
        if not index_path.is_file():
            logger.error({"evt": "index_missing", "path": str(index_path)})
            abort(500)
        return _send_public_file(public_dir, config.index_file)

    @app.route('/<path:filename>')
    def send_public(filename):
        if _is_hidden(filename):
            abort(404)
        target = safe_join(public_dir, filename)
        if target is None:
            abort(404)
        if os.path.isdir(target):
            if not filename.endswith("/"):
                location = quote(request.script_root + request.path, safe="/") + "/"
                if request.query_string:
                    location += "?" + request.query_string.decode("latin-1")
                return redirect(location, code=301)
            filename = filename + config.index_file
        elif filename.endswith("/"):
            abort(404)
        return _send_public_file(public_dir, filename)

    @app.errorhandler(404)
    def not_found(_exc):
        return _plain("Not Found", 404)

    @app.errorhandler(500)
    def server_error(_exc):
        return _plain("Internal Server Error", 500)

    @app.errorhandler(OSError)
    def read_error(exc):
        logger.error({"evt": "read_error", "path": request.path, "error": str(exc)})
        return _plain("Internal Server Error", 500)

    return app


__all__ = ["create_app"]
