"""Configuration objects for kubedepot."""

from collections.abc import Mapping
from dataclasses import dataclass, field
import logging
import os
from pathlib import Path

from .exceptions import InputException

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_CONFIGS_DIR = "./configs"
DEFAULT_WEB_DIR = "./web"

TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}


def _env_bool(value: str | None, default: bool) -> bool:
    if not value:
        return default
    return value.strip().lower() in TRUE_VALUES


def configs_dir_from_env(environ: Mapping[str, str] | None = None) -> Path:
    """Return the kubeconfig directory named by CONFIGS_DIR."""
    if environ is None:
        environ = os.environ
    return Path(environ.get("CONFIGS_DIR") or DEFAULT_CONFIGS_DIR)


@dataclass
class ServerConfig:
    """Configuration for the kubedepot server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    configs_dir: Path = field(default_factory=lambda: Path(DEFAULT_CONFIGS_DIR))
    web_dir: Path = field(default_factory=lambda: Path(DEFAULT_WEB_DIR))
    debug: bool = False

    @property
    def log_level(self) -> int:
        """Logging level implied by the debug flag."""
        return logging.DEBUG if self.debug else logging.INFO

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServerConfig":
        """Build the configuration from PORT, CONFIGS_DIR, WEB_DIR and DEBUG."""
        if environ is None:
            environ = os.environ
        port = environ.get("PORT") or str(DEFAULT_PORT)
        try:
            port_number = int(port)
        except ValueError as err:
            raise InputException(f"Invalid PORT value '{port}'") from err
        return cls(
            port=port_number,
            configs_dir=configs_dir_from_env(environ),
            web_dir=Path(environ.get("WEB_DIR") or DEFAULT_WEB_DIR),
            debug=_env_bool(environ.get("DEBUG"), False),
        )
