"""Defines :class:`ZXStimSubCommand`, the common shape of the ``zxstim`` CLI commands."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from typing import ClassVar


class ZXStimSubCommand(ABC):
    """A ``zxstim <name> ...`` command.

    Subclasses give the name and the description of the command, declare its arguments in
    :meth:`add_arguments` and run it in :meth:`execute`. :meth:`add_subcommand` creates the
    command parser and binds it to :meth:`execute` through the ``func`` default.
    """

    name: ClassVar[str]
    description: ClassVar[str]

    @classmethod
    def add_subcommand(
        cls,
        main_parser: argparse._SubParsersAction[argparse.ArgumentParser],
    ) -> argparse.ArgumentParser:
        """Register the command on the subparsers of the main ``zxstim`` parser."""
        parser: argparse.ArgumentParser = main_parser.add_parser(
            cls.name, description=cls.description
        )
        cls.add_arguments(parser)
        parser.set_defaults(func=cls.execute)
        return parser

    @staticmethod
    @abstractmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        """Declare the positional and optional arguments of the command."""

    @staticmethod
    @abstractmethod
    def execute(args: argparse.Namespace) -> None:
        """Run the command. Errors are reported by raising :class:`.ZXStimError`."""
