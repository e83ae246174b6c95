from collections.abc import Iterable, Mapping
from fractions import Fraction

from pyzx.graph.graph_s import GraphS
from pyzx.utils import FloatInt, VertexType


def make_zx_graph(
    vertices: list[tuple[VertexType, FloatInt, FloatInt]],
    edges: Iterable[tuple[int, int]] = (),
    phases: Mapping[int, Fraction] | None = None,
) -> GraphS:
    """Build a graph whose i-th vertex has the i-th ``(type, qubit, row)`` of ``vertices``."""
    g = GraphS()
    for i, (vt, qubit, row) in enumerate(vertices):
        v = g.add_vertex(vt, qubit, row)
        assert v == i
        if phases is not None and i in phases:
            g.set_phase(i, phases[i])
    for s, t in edges:
        g.add_edge((s, t))
    return g


def scenario_graph() -> GraphS:
    """A Z leaf on row 0 connected to an X leaf on row 1, both on qubit 0."""
    return make_zx_graph([(VertexType.Z, 0, 0), (VertexType.X, 0, 1)], [(0, 1)])


def cnot_graph() -> GraphS:
    """A CNOT between qubits 0 (control) and 1 (target), prepared and measured.

    Vertices:
        0: Z prep on qubit 0, row 0     1: X prep on qubit 1, row 0
        2: Z control on qubit 0, row 1  3: X target on qubit 1, row 1
        4: X meas on qubit 0, row 2     5: Z meas on qubit 1, row 2

    """
    return make_zx_graph(
        [
            (VertexType.Z, 0, 0),
            (VertexType.X, 1, 0),
            (VertexType.Z, 0, 1),
            (VertexType.X, 1, 1),
            (VertexType.X, 0, 2),
            (VertexType.Z, 1, 2),
        ],
        [(0, 2), (1, 3), (2, 3), (2, 4), (3, 5)],
    )
