"""Build the ``DETECTOR`` instructions of a translated diagram from its detection webs."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from pyzx.graph.base import BaseGraph

from zxstim.computation.web import DetectionWeb
from zxstim.interop.pyzx.utils import is_boundary, is_x_no_phase, is_z_no_phase
from zxstim.translate.instructions import detector
from zxstim.translate.records import MeasurementRecords
from zxstim.utils.enums import Pauli

# A Pauli operator on the leg of a spider is only measured by a spider of the dual colour.
_MEASURES: dict[Pauli, Callable[[BaseGraph, int], bool]] = {
    Pauli.X: is_z_no_phase,
    Pauli.Z: is_x_no_phase,
}


def measures_web(g: BaseGraph, v: int, pauli: Pauli, records: MeasurementRecords) -> bool:
    """Check if the measurement of ``v`` is part of a web carrying ``pauli`` on its leg.

    This is the case when ``v`` is a measured leaf spider whose type is the dual of
    ``pauli``.
    """
    if g.vertex_degree(v) != 1 or is_boundary(g, v):
        return False
    measures = _MEASURES.get(pauli)
    if measures is None or not measures(g, v):
        return False
    return v in records


def detector_lookbacks(
    g: BaseGraph, web: DetectionWeb, records: MeasurementRecords
) -> list[int]:
    """Return the ``rec[-k]`` lookbacks of the measurements involved in ``web``.

    Lookbacks are computed from the end of the measurement record, so ``records`` should
    hold every measurement of the circuit. Edges are scanned in the order of the web and
    the smaller endpoint of each edge comes first. Each endpoint is checked against the
    operator on its own half of the edge. Vertices that are not part of ``g`` are ignored.
    """
    vertices = g.vertex_set()
    lookbacks: list[int] = []
    for u, w in web.edges:
        for v, other in ((u, w), (w, u)):
            pauli = web.operator_at(v, other)
            if pauli is None or v not in vertices:
                continue
            if not measures_web(g, v, pauli, records):
                continue
            lookback = records.lookback(v)
            assert lookback is not None
            lookbacks.append(lookback)
    return lookbacks


def synthesize_detectors(
    g: BaseGraph, webs: Iterable[DetectionWeb], records: MeasurementRecords
) -> list[str]:
    """Return one ``DETECTOR`` line per web involving at least one measurement."""
    lines: list[str] = []
    for web in webs:
        lookbacks = detector_lookbacks(g, web, records)
        if lookbacks:
            lines.append(detector(lookbacks))
    return lines
