"""Entry point of the ``zxstim`` command line interface."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from zxstim._cli.subcommands.base import ZXStimSubCommand
from zxstim._cli.subcommands.convert import ConvertZXStimSubCommand
from zxstim.utils.exceptions import ZXStimError

SUBCOMMANDS: list[type[ZXStimSubCommand]] = [ConvertZXStimSubCommand]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zxstim",
        description="Translate ZX diagrams of QEC experiments into stim circuits.",
    )
    subparsers = parser.add_subparsers(required=True)
    for subcommand in SUBCOMMANDS:
        subcommand.add_subcommand(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except ZXStimError as e:
        sys.exit(f"zxstim: error: {e}")


if __name__ == "__main__":
    main()
