from fractions import Fraction

import pytest
from pyzx.graph.graph_s import GraphS
from pyzx.utils import VertexType

from zxstim.interop.pyzx.utils import (
    coordinate_key,
    format_coordinate,
    is_boundary,
    is_x_no_phase,
    is_z_no_phase,
    is_zx_no_phase,
)
from zxstim.utils.exceptions import InvalidCoordinateError


def test_is_zx_no_phase() -> None:
    g = GraphS()
    v1 = g.add_vertex(VertexType.BOUNDARY)
    v2 = g.add_vertex(VertexType.Z, phase=Fraction(1, 2))
    v3 = g.add_vertex(VertexType.X)
    v4 = g.add_vertex(VertexType.Z)
    assert not is_zx_no_phase(g, v1)
    assert not is_zx_no_phase(g, v2)
    assert is_zx_no_phase(g, v3)
    assert is_zx_no_phase(g, v4)


def test_is_boundary() -> None:
    g = GraphS()
    v1 = g.add_vertex(VertexType.BOUNDARY)
    v2 = g.add_vertex(VertexType.Z)
    assert is_boundary(g, v1)
    assert not is_boundary(g, v2)


def test_is_z_and_x_no_phase() -> None:
    g = GraphS()
    v1 = g.add_vertex(VertexType.Z)
    v2 = g.add_vertex(VertexType.X, phase=Fraction(1, 2))
    v3 = g.add_vertex(VertexType.X)
    assert is_z_no_phase(g, v1)
    assert not is_x_no_phase(g, v1)
    assert not is_x_no_phase(g, v2)
    assert is_x_no_phase(g, v3)
    assert not is_z_no_phase(g, v3)


def test_coordinate_key() -> None:
    assert coordinate_key(2, 0, "row") == 2.0
    assert coordinate_key(float("inf"), 0, "row") == float("inf")
    assert str(coordinate_key(-0.0, 0, "row")) == "0.0"
    with pytest.raises(InvalidCoordinateError, match=r"Vertex 3 has a NaN qubit.*"):
        coordinate_key(float("nan"), 3, "qubit")


@pytest.mark.parametrize(
    "value,expected",
    [(0, "0"), (2.0, "2"), (-1.0, "-1"), (1.5, "1.5"), (-0.25, "-0.25")],
)
def test_format_coordinate(value: float, expected: str) -> None:
    assert format_coordinate(value) == expected
