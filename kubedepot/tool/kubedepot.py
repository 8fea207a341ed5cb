"""Command line tool for serving and merging kubeconfig files."""

import argparse
import asyncio
import logging
import sys
import traceback
from typing import Any

import yaml

from kubedepot.config import ServerConfig
from kubedepot.exceptions import KubedepotException
from . import get, list_configs, serve

_LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Command line utility for serving kubeconfig files.",
    )
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    )

    subparsers = parser.add_subparsers(dest="command", help="Command", required=True)

    serve.ServeAction.register(subparsers)
    list_configs.ListAction.register(subparsers)
    get.GetAction.register(subparsers)
    return parser


def _log_level(args: argparse.Namespace) -> str | int:
    if args.log_level:
        return args.log_level  # type: ignore[no-any-return]
    try:
        return ServerConfig.from_env().log_level
    except KubedepotException:
        return logging.INFO


def main(argv: list[str] | None = None) -> None:
    """Kubedepot command line tool main entry point."""

    def str_presenter(dumper: yaml.Dumper, data: Any) -> Any:
        """Represent multi-line yaml strings as you'd expect.

        See https://github.com/yaml/pyyaml/issues/240
        """
        return dumper.represent_scalar(
            "tag:yaml.org,2002:str", data, style="|" if data.count("\n") > 0 else None
        )

    yaml.add_representer(str, str_presenter)

    parser = _make_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=_log_level(args), format=LOG_FORMAT)

    action = args.cls()
    try:
        asyncio.run(action.run(**vars(args)))
    except KubedepotException as err:
        if args.log_level == "DEBUG":
            traceback.print_exc(file=sys.stderr)
        print(f"kubedepot error: {err}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
