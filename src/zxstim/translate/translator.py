"""Defines :func:`zx_to_stim`, translating a ZX diagram of a QEC experiment into stim.

The generic circuit extraction of PyZX requires a graph with gflow, which QEC diagrams do not
have because of their mid-circuit measurements. The translation implemented here relies on
the layout of the diagram instead: the ``qubit`` coordinate of a vertex gives its stim qubit
and the ``row`` coordinate gives its time-step.

"""

from __future__ import annotations

from collections.abc import Iterable

import stim
from pyzx.graph.base import BaseGraph
from pyzx.utils import VertexType

from zxstim.computation.web import WebLike, as_detection_webs
from zxstim.interop.pyzx.utils import is_boundary, is_zx_no_phase
from zxstim.translate.context import TranslationContext
from zxstim.translate.detectors import synthesize_detectors
from zxstim.translate.instructions import tick
from zxstim.translate.qubits import QubitIndexMap
from zxstim.translate.rules import TranslationRules, default_translation_rules
from zxstim.translate.schedule import RowSchedule

_TRANSLATABLE_VERTEX_TYPES = frozenset([VertexType.BOUNDARY, VertexType.Z, VertexType.X])


def translate_vertex(ctx: TranslationContext, v: int, rules: TranslationRules) -> None:
    """Emit the instructions of the vertex ``v`` into ``ctx``.

    Vertices that are not covered by ``rules``, as well as phased spiders and vertex types
    other than Z, X and boundary, are reported with
    :meth:`~zxstim.translate.context.TranslationContext.diagnose`.
    """
    g = ctx.g
    vertex_type = g.type(v)
    if vertex_type not in _TRANSLATABLE_VERTEX_TYPES:
        ctx.diagnose(f"Unsupported vertex type {vertex_type.name}: {v}")
        return
    degree = g.vertex_degree(v)
    handler = rules.lookup(vertex_type, degree)
    if handler is None:
        ctx.diagnose(f"Unsupported node degree {degree}: {v}")
        return
    if not is_boundary(g, v) and not is_zx_no_phase(g, v):
        ctx.diagnose(f"Unsupported phase {g.phase(v)}: {v}")
        return
    handler(ctx, v)


def zx_to_stim(
    g: BaseGraph,
    webs: Iterable[WebLike] = (),
    rules: TranslationRules | None = None,
) -> str:
    """Translate a bipartite phase-free ZX diagram into a stim program.

    Vertices are processed row by row in ascending ``row`` order, and by ascending vertex id
    within a row. Each row is closed by a ``TICK``. Once all the rows are translated, one
    ``DETECTOR`` is appended for each web that involves at least one measurement.

    Unsupported vertices do not abort the translation: they are replaced by a comment line
    and a :class:`~zxstim.utils.exceptions.ZXStimWarning` is emitted.

    Args:
        g: the diagram to translate. Only read.
        webs: the detection webs of ``g``, as :class:`~zxstim.computation.web.DetectionWeb`,
            PyZX ``PauliWeb`` or ``{(u, v): pauli}`` mappings.
        rules: the translation table to use. Default to
            :func:`~zxstim.translate.rules.default_translation_rules`.

    Raises:
        InvalidCoordinateError: if a vertex has a NaN ``qubit`` or ``row`` coordinate.
        ZXStimError: if one of ``webs`` cannot be interpreted as a detection web.

    Returns:
        the stim program, one instruction per line.

    """
    detection_webs = as_detection_webs(webs)
    if rules is None:
        rules = default_translation_rules()
    schedule = RowSchedule.from_graph(g)
    ctx = TranslationContext(g, QubitIndexMap.from_graph(g))
    for row in schedule:
        for v in row:
            translate_vertex(ctx, v, rules)
        ctx.emit(tick())
    ctx.lines.extend(synthesize_detectors(g, detection_webs, ctx.records))
    return "\n".join(ctx.lines)


def zx_to_stim_circuit(
    g: BaseGraph,
    webs: Iterable[WebLike] = (),
    rules: TranslationRules | None = None,
) -> stim.Circuit:
    """Same as :func:`zx_to_stim`, but parse the program into a ``stim.Circuit``."""
    return stim.Circuit(zx_to_stim(g, webs, rules))
