"""Defines :class:`TranslationContext`, the state owned by a single ZX to stim translation."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field

from pyzx.graph.base import BaseGraph

from zxstim.translate.instructions import comment
from zxstim.translate.qubits import QubitIndexMap
from zxstim.translate.records import MeasurementRecords
from zxstim.utils.exceptions import ZXStimWarning


@dataclass
class TranslationContext:
    """Mutable state threaded through the translation of one diagram.

    A new instance is created by each call to :func:`~zxstim.translate.translator.zx_to_stim`
    and dropped when it returns.

    Attributes:
        g: the diagram being translated. Never modified.
        qubits: canonical stim index of each ``qubit`` coordinate of ``g``.
        records: measurements emitted so far.
        lines: instruction lines emitted so far.

    """

    g: BaseGraph
    qubits: QubitIndexMap
    records: MeasurementRecords = field(default_factory=MeasurementRecords)
    lines: list[str] = field(default_factory=list)

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def diagnose(self, message: str) -> None:
        """Report a shape that cannot be translated without aborting the translation.

        The message is emitted as a comment line in the program and as a
        :class:`~zxstim.utils.exceptions.ZXStimWarning`.
        """
        self.lines.append(comment(message))
        warnings.warn(message, ZXStimWarning, stacklevel=3)

    def qubit_index(self, v: int) -> int:
        return self.qubits.index_of(self.g, v)
