import pytest
from pyzx.utils import VertexType

from zxstim.translate._testing import make_zx_graph
from zxstim.translate.qubits import QubitIndexMap
from zxstim.utils.exceptions import InvalidCoordinateError, ZXStimError


def test_from_coordinates() -> None:
    qubits = QubitIndexMap.from_coordinates([3, -1.5, 3.0, 0, -0.0, 7])
    assert qubits.i2q == {0: -1.5, 1: 0.0, 2: 3.0, 3: 7.0}
    assert qubits.q2i == {-1.5: 0, 0.0: 1, 3.0: 2, 7.0: 3}
    assert qubits.num_qubits == len(qubits) == 4
    assert qubits[3] == qubits[3.0] == 2
    assert qubits[-0.0] == qubits[0] == 1


def test_from_coordinates_empty() -> None:
    assert QubitIndexMap.from_coordinates([]).num_qubits == 0


def test_from_coordinates_nan() -> None:
    with pytest.raises(InvalidCoordinateError):
        QubitIndexMap.from_coordinates([0, float("nan")])


def test_from_graph() -> None:
    g = make_zx_graph(
        [
            (VertexType.Z, 2.5, 0),
            (VertexType.X, -1, 0),
            (VertexType.Z, 2.5, 1),
            (VertexType.BOUNDARY, 10, 4),
        ]
    )
    qubits = QubitIndexMap.from_graph(g)
    assert qubits.i2q == {0: -1.0, 1: 2.5, 2: 10.0}
    assert [qubits.index_of(g, v) for v in range(4)] == [1, 0, 1, 2]


def test_from_graph_nan() -> None:
    g = make_zx_graph([(VertexType.Z, 0, 0), (VertexType.X, float("nan"), 1)])
    with pytest.raises(InvalidCoordinateError, match=r"Vertex 1 has a NaN qubit.*"):
        QubitIndexMap.from_graph(g)


def test_invalid_maps() -> None:
    with pytest.raises(ZXStimError, match=r"Qubit indices should be 0..N-1.*"):
        QubitIndexMap({1: 0.0})
    with pytest.raises(ZXStimError, match=r".*not strictly increasing.*"):
        QubitIndexMap({0: 1.0, 1: 0.0})


def test_unknown_coordinate() -> None:
    qubits = QubitIndexMap.from_coordinates([0, 1])
    with pytest.raises(KeyError):
        qubits[0.5]
    with pytest.raises(InvalidCoordinateError):
        qubits[float("nan")]
