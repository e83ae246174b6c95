"""Measure the ZZ parity of two data qubits prepared in |0> with one ancilla."""

from pyzx.graph.graph_s import GraphS
from pyzx.utils import VertexType

from zxstim import DetectionWeb, Pauli, zx_to_stim_circuit

g = GraphS()

# Preparations in |0>.
d0 = g.add_vertex(VertexType.X, qubit=0, row=0)
a = g.add_vertex(VertexType.X, qubit=1, row=0)
d1 = g.add_vertex(VertexType.X, qubit=2, row=0)

# CNOT from the first data qubit to the ancilla.
c0 = g.add_vertex(VertexType.Z, qubit=0, row=1)
t0 = g.add_vertex(VertexType.X, qubit=1, row=1)

# CNOT from the second data qubit to the ancilla.
c1 = g.add_vertex(VertexType.Z, qubit=2, row=2)
t1 = g.add_vertex(VertexType.X, qubit=1, row=2)

# Ancilla measurement and data outputs.
m = g.add_vertex(VertexType.X, qubit=1, row=3)
o0 = g.add_vertex(VertexType.BOUNDARY, qubit=0, row=3)
o1 = g.add_vertex(VertexType.BOUNDARY, qubit=2, row=3)

for edge in [(d0, c0), (c0, o0), (d1, c1), (c1, o1), (a, t0), (t0, t1), (t1, m)]:
    g.add_edge(edge)
for edge in [(c0, t0), (c1, t1)]:
    g.add_edge(edge)

web = DetectionWeb({(t1, m): Pauli.Z})
circuit = zx_to_stim_circuit(g, [web])
print(circuit)
print(circuit.detector_error_model())
