"""Defines the stim instruction lines emitted when translating a ZX diagram.

Only five instructions are ever produced: ``H``, ``MR``, ``CNOT``, ``TICK`` and
``DETECTOR``. Gate lines carry a trailing comment with the original ``qubit``
coordinate(s) so the generated program can be read against the diagram.
Unsupported shapes are reported as comment-only lines.

"""

from __future__ import annotations

from collections.abc import Iterable

from pyzx.utils import FloatInt

from zxstim.interop.pyzx.utils import format_coordinate

BASIS_CHANGE = "H"
MEASURE_RESET = "MR"
CONTROLLED_NOT = "CNOT"
TICK = "TICK"
DETECTOR = "DETECTOR"

INSTRUCTION_NAMES: frozenset[str] = frozenset(
    [BASIS_CHANGE, MEASURE_RESET, CONTROLLED_NOT, TICK, DETECTOR]
)


def basis_change(qubit: int, coordinate: FloatInt) -> str:
    return f"{BASIS_CHANGE} {qubit} # mapped from qubit {format_coordinate(coordinate)}"


def measure_reset(qubit: int, coordinate: FloatInt) -> str:
    return f"{MEASURE_RESET} {qubit} # mapped from qubit {format_coordinate(coordinate)}"


def controlled_not(
    control: int, target: int, control_coordinate: FloatInt, target_coordinate: FloatInt
) -> str:
    return (
        f"{CONTROLLED_NOT} {control} {target} # mapped from qubits "
        f"{format_coordinate(control_coordinate)} {format_coordinate(target_coordinate)}"
    )


def tick() -> str:
    return TICK


def detector(lookbacks: Iterable[int]) -> str:
    """Build a ``DETECTOR`` line from positive measurement lookbacks.

    Args:
        lookbacks: for each term, the ``k`` in ``rec[-k]``.

    Raises:
        ValueError: if a lookback is not strictly positive or if no lookback is provided.

    """
    terms = []
    for k in lookbacks:
        if k <= 0:
            raise ValueError(f"Measurement record lookbacks must be positive, got {k}.")
        terms.append(f"rec[-{k}]")
    if not terms:
        raise ValueError("A DETECTOR instruction needs at least one measurement record.")
    return f"{DETECTOR} {' '.join(terms)}"


def comment(text: str) -> str:
    return f"# {text}"


def is_comment(line: str) -> bool:
    """Check if ``line`` is a comment-only line."""
    return line.lstrip().startswith("#")


def instruction_name(line: str) -> str | None:
    """Return the name of the instruction on ``line``, or ``None`` for comment-only lines."""
    if is_comment(line):
        return None
    parts = line.split("#", 1)[0].split()
    return parts[0] if parts else None
