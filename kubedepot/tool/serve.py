"""Kubedepot serve action."""

import logging
from argparse import (
    ArgumentParser,
    _SubParsersAction as SubParsersAction,
)
import pathlib
from typing import cast

import uvicorn

from kubedepot.server import create_app
from kubedepot.store import load_store

from . import common

_LOGGER = logging.getLogger(__name__)


class ServeAction:
    """Serve kubeconfigs over HTTP."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "serve",
                help="Serve kubeconfigs over HTTP",
                description="Load every kubeconfig in the configs directory and "
                "serve them, merged on request, over HTTP",
            ),
        )
        common.add_configs_dir_flag(args)
        args.add_argument(
            "--web-dir",
            help="Directory with an index.html overriding the default page "
            "(default: $WEB_DIR or ./web)",
            type=pathlib.Path,
            default=None,
        )
        args.add_argument(
            "--host",
            help="Address to listen on",
            default=None,
        )
        args.add_argument(
            "--port",
            help="Port to listen on (default: $PORT or 8080)",
            type=int,
            default=None,
        )
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        configs_dir: pathlib.Path | None,
        web_dir: pathlib.Path | None,
        host: str | None,
        port: int | None,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        config = common.server_config(
            configs_dir=configs_dir, web_dir=web_dir, host=host, port=port
        )
        _LOGGER.info(
            "Configuration loaded: port=%s configs_dir=%s web_dir=%s debug=%s",
            config.port,
            config.configs_dir,
            config.web_dir,
            config.debug,
        )
        store = await load_store(config.configs_dir)
        app = create_app(store, web_dir=config.web_dir)

        _LOGGER.info("Server starting on %s:%s", config.host, config.port)
        level = logging.getLogger().getEffectiveLevel()
        server = uvicorn.Server(
            uvicorn.Config(
                app,
                host=config.host,
                port=config.port,
                log_level=logging.getLevelName(level).lower(),
            )
        )
        await server.serve()
