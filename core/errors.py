"""Exceptions shared by the config layer and the listener."""

from __future__ import annotations


class StartupError(RuntimeError):
    """Fatal problem detected before the server starts accepting requests."""


__all__ = ["StartupError"]
