"""Kubedepot get action."""

import logging
from argparse import (
    ArgumentParser,
    _SubParsersAction as SubParsersAction,
)
import pathlib
from typing import cast

from kubedepot.resolver import resolve

from . import common

_LOGGER = logging.getLogger(__name__)


class GetAction:
    """Print a merged kubeconfig."""

    @classmethod
    def register(
        cls, subparsers: SubParsersAction  # type: ignore[type-arg]
    ) -> ArgumentParser:
        """Register the subparser commands."""
        args = cast(
            ArgumentParser,
            subparsers.add_parser(
                "get",
                help="Print a merged kubeconfig",
                description="Merge the selected kubeconfigs, or all of them, "
                "into a single kubeconfig",
            ),
        )
        common.add_configs_dir_flag(args)
        args.add_argument(
            "--name",
            "-n",
            dest="names",
            action="append",
            default=[],
            help="Name of a kubeconfig to include, may be repeated "
            "(default: all kubeconfigs)",
        )
        args.add_argument(
            "--output",
            "-o",
            choices=["yaml", "json"],
            default="yaml",
            help="Output format of the command",
        )
        args.add_argument(
            "--output-file",
            type=str,
            default="/dev/stdout",
            help="Output file for the results of the command",
        )
        args.set_defaults(cls=cls)
        return args

    async def run(  # type: ignore[no-untyped-def]
        self,
        configs_dir: pathlib.Path | None,
        names: list[str],
        output: str,
        output_file: str,
        **kwargs,  # pylint: disable=unused-argument
    ) -> None:
        """Async Action implementation."""
        store = await common.bootstrap(configs_dir)
        kubeconfig = resolve(store, names)
        if output == "json":
            content = kubeconfig.to_json() + "\n"
        else:
            content = kubeconfig.to_yaml()
        with open(output_file, "w") as file:
            file.write(content)
