"""Kubedepot list action."""

import logging
from argparse import (
    ArgumentParser,
    _SubParsersAction as SubParsersAction,
)
import pathlib
from typing import Any, cast

from .format import FORMATTERS, PrintFormatter
from . import common

_LOGGER = logging.getLogger(__name__)


class ListAction:
    """List the available kubeconfigs."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "list",
                aliases=["ls"],
                help="List the available kubeconfigs",
                description="Print the name of every kubeconfig in the configs "
                "directory",
            ),
        )
        common.add_configs_dir_flag(args)
        args.add_argument(
            "--output",
            "-o",
            choices=sorted(FORMATTERS),
            default="table",
            help="Output format of the command",
        )
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        configs_dir: pathlib.Path | None,
        output: str,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        store = await common.bootstrap(configs_dir)

        if output != "table":
            FORMATTERS[output]().print(store.list_names())
            return

        cols = ["name", "cluster", "server"]
        results: list[dict[str, Any]] = []
        for name, kubeconfig in store.items():
            cluster = kubeconfig.clusters[0]
            results.append(
                {
                    "name": name,
                    "cluster": cluster.name,
                    "server": cluster.cluster.server,
                }
            )
        if not results:
            print("No kubeconfigs found")
            return
        PrintFormatter(cols).print(results)
