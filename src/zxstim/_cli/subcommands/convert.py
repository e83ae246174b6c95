from __future__ import annotations

import argparse
import json
from pathlib import Path

from pyzx.graph.base import BaseGraph
from pyzx.graph.graph_s import GraphS
from typing_extensions import override

from zxstim._cli.subcommands.base import ZXStimSubCommand
from zxstim.computation.web import DetectionWeb
from zxstim.translate.translator import zx_to_stim
from zxstim.utils.exceptions import ZXStimError


def read_zx_graph(path: Path) -> BaseGraph:
    """Load a ZX diagram saved in the PyZX JSON format (``.zxg`` / ``.json``).

    Raises:
        ZXStimError: if the file cannot be read or is not a valid PyZX diagram.

    """
    try:
        return GraphS.from_json(path.read_text())
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise ZXStimError(f"Cannot load the ZX diagram {path}: {e}") from e


def read_detection_webs(path: Path) -> list[DetectionWeb]:
    """Load detection webs from a JSON file.

    The file holds a list of webs, each web being a list of ``[u, v, pauli]`` entries where
    ``u`` and ``v`` are vertex ids of the diagram and ``pauli`` is ``"X"`` or ``"Z"``.

    Raises:
        ZXStimError: if the file cannot be read or does not follow that format.

    """
    try:
        data = json.loads(path.read_text())
    except (OSError, ValueError) as e:
        raise ZXStimError(f"Cannot load the detection webs {path}: {e}") from e
    if not isinstance(data, list):
        raise ZXStimError(f"Expected a list of webs in {path}, got {type(data).__name__}.")
    webs: list[DetectionWeb] = []
    for i, entries in enumerate(data):
        try:
            webs.append(DetectionWeb({(int(u), int(v)): pauli for u, v, pauli in entries}))
        except (TypeError, ValueError) as e:
            raise ZXStimError(f"Malformed web at index {i} in {path}: {e}") from e
    return webs


class ConvertZXStimSubCommand(ZXStimSubCommand):
    name = "convert"
    description = (
        "Convert a ZX diagram of a QEC experiment saved in the PyZX JSON format "
        "into a stim circuit."
    )

    @staticmethod
    @override
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "diagram",
            help="A .zxg/.json file saved by PyZX, with qubit and row coordinates.",
            type=Path,
        )
        parser.add_argument(
            "--webs",
            help=(
                "A JSON file listing the detection webs of the diagram. Each web is a list "
                'of [u, v, "X" | "Z"] entries. If not provided, no detector is generated.'
            ),
            type=Path,
        )
        parser.add_argument(
            "--out",
            help="File to write the stim circuit to. Printed on stdout if not provided.",
            type=Path,
        )

    @staticmethod
    @override
    def execute(args: argparse.Namespace) -> None:
        graph = read_zx_graph(args.diagram.resolve())
        webs = read_detection_webs(args.webs.resolve()) if args.webs is not None else []
        program = zx_to_stim(graph, webs)
        out: Path | None = args.out
        if out is None:
            print(program)
            return
        out = out.resolve()
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(program + "\n")
        print(f"Write circuit to {out}.")
