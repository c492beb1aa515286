"""Immutable server settings, read once from the environment at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .errors import StartupError

REPO_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_PUBLIC_DIR = REPO_ROOT / "public"
DEFAULT_INDEX = "index.html"


def _read_env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return default


def _read_env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "on", "yes")


def _read_env_str(environ: Mapping[str, str], name: str, default: str) -> str:
    raw = (environ.get(name) or "").strip()
    return raw or default


@dataclass(frozen=True)
class ServerConfig:
    """Everything the app factory and the listener need to know."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    public_dir: Path = field(default=DEFAULT_PUBLIC_DIR)
    index_file: str = DEFAULT_INDEX
    cors: bool = True
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        # Relative directories are anchored at the process working directory.
        object.__setattr__(self, "public_dir", Path(self.public_dir).resolve())

    @property
    def index_path(self) -> Path:
        return self.public_dir / self.index_file

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Build a config from ``PUBLICSERVE_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        port = _read_env_int(env, "PUBLICSERVE_PORT", DEFAULT_PORT)
        if not 0 <= port <= 65535:
            port = DEFAULT_PORT
        return cls(
            host=_read_env_str(env, "PUBLICSERVE_HOST", DEFAULT_HOST),
            port=port,
            public_dir=Path(_read_env_str(env, "PUBLICSERVE_PUBLIC_DIR", str(DEFAULT_PUBLIC_DIR))),
            index_file=_read_env_str(env, "PUBLICSERVE_INDEX", DEFAULT_INDEX),
            cors=_read_env_bool(env, "PUBLICSERVE_CORS", True),
            log_level=_read_env_str(env, "LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> None:
        """Raise `StartupError` when the public directory cannot be served."""
        if not self.public_dir.exists():
            raise StartupError(f"Public directory '{self.public_dir}' does not exist")
        if not self.public_dir.is_dir():
            raise StartupError(f"Public directory '{self.public_dir}' is not a directory")


__all__ = ["ServerConfig", "DEFAULT_PORT", "DEFAULT_INDEX", "DEFAULT_PUBLIC_DIR"]
