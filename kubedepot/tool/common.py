"""Flags and setup shared by the kubedepot commands."""

from argparse import ArgumentParser
import pathlib
from typing import Any

from kubedepot.config import ServerConfig, configs_dir_from_env
from kubedepot.store import InMemoryStore, load_store


def add_configs_dir_flag(args: ArgumentParser) -> None:
    """Add the flag selecting the directory of kubeconfig files."""
    args.add_argument(
        "--configs-dir",
        help="Directory containing one kubeconfig file per cluster "
        "(default: $CONFIGS_DIR or ./configs)",
        type=pathlib.Path,
        default=None,
    )


def server_config(**overrides: Any) -> ServerConfig:
    """Return the environment configuration with any flags that were set."""
    config = ServerConfig.from_env()
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    return config


async def bootstrap(configs_dir: pathlib.Path | None) -> InMemoryStore:
    """Load the store for the flag or CONFIGS_DIR directory."""
    return await load_store(configs_dir or configs_dir_from_env())
