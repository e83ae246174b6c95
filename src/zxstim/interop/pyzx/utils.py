"""Utility functions for PyZX interop."""

from __future__ import annotations

import math

from pyzx.graph.base import BaseGraph
from pyzx.utils import FloatInt, VertexType, vertex_is_zx

from zxstim.utils.exceptions import InvalidCoordinateError


def is_zx_no_phase(g: BaseGraph, v: int) -> bool:
    """Check if a vertex in a PyZX graph is a Z/X spider with phase 0."""
    return vertex_is_zx(g.type(v)) and g.phase(v) == 0


def is_z_no_phase(g: BaseGraph, v: int) -> bool:
    """Check if a vertex in a PyZX graph is a Z spider with phase 0."""
    return g.type(v) == VertexType.Z and g.phase(v) == 0


def is_x_no_phase(g: BaseGraph, v: int) -> bool:
    """Check if a vertex in a PyZX graph is a X spider with phase 0."""
    return g.type(v) == VertexType.X and g.phase(v) == 0


def is_boundary(g: BaseGraph, v: int) -> bool:
    """Check if a vertex in a PyZX graph is a boundary type spider."""
    return g.type(v) == VertexType.BOUNDARY


def coordinate_key(value: FloatInt, v: int, name: str) -> float:
    """Turn a vertex coordinate into a key usable to sort and group vertices.

    Python floats are totally ordered once NaN is excluded, and ``-0.0 == 0.0`` so both
    zeros end up under the same key.

    Args:
        value: the ``qubit`` or ``row`` coordinate of the vertex.
        v: the vertex the coordinate belongs to, only used in the error message.
        name: name of the coordinate, only used in the error message.

    Raises:
        InvalidCoordinateError: if ``value`` is NaN.

    Returns:
        ``value`` as a float.

    """
    key = float(value)
    if math.isnan(key):
        raise InvalidCoordinateError(
            f"Vertex {v} has a NaN {name} coordinate. Coordinates must be orderable."
        )
    return key + 0.0


def format_coordinate(value: FloatInt) -> str:
    """Format a coordinate the way it is written in the generated comments.

    Integral values are printed without a fractional part, e.g. ``2.0`` becomes ``"2"``.
    """
    key = float(value)
    if key.is_integer():
        return str(int(key))
    return repr(key)
