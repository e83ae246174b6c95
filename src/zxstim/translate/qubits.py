"""Defines :class:`QubitIndexMap`, the mapping from ``qubit`` coordinates to stim qubit indices.

ZX diagrams place vertices on arbitrary real-valued ``qubit`` coordinates while stim
addresses qubits through dense non-negative integers. The map built here sorts all the
distinct coordinates found in a diagram and numbers them from ``0``.

"""

from __future__ import annotations

import functools
import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from pyzx.graph.base import BaseGraph
from pyzx.utils import FloatInt

from zxstim.interop.pyzx.utils import coordinate_key
from zxstim.utils.exceptions import InvalidCoordinateError, ZXStimError


@dataclass(frozen=True)
class QubitIndexMap:
    """Represent a bijection between ``qubit`` coordinates and stim qubit indices.

    Raises:
        ZXStimError: if the provided indices are not ``0..N-1`` or if the coordinates are not
            strictly increasing with the index.

    """

    i2q: dict[int, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if sorted(self.i2q) != list(range(len(self.i2q))):
            raise ZXStimError(f"Qubit indices should be 0..N-1, got {sorted(self.i2q)}.")
        coordinates = [self.i2q[i] for i in range(len(self.i2q))]
        if any(a >= b for a, b in zip(coordinates, coordinates[1:])):
            raise ZXStimError(
                f"Qubit coordinates {coordinates} are not strictly increasing with their index."
            )

    @staticmethod
    def from_coordinates(coordinates: Iterable[FloatInt]) -> QubitIndexMap:
        """Create a qubit map from a multiset of ``qubit`` coordinates.

        Duplicated values are collapsed and the remaining ones are numbered in ascending order.

        Raises:
            InvalidCoordinateError: if any of the coordinates is NaN.

        """
        keys: set[float] = set()
        for i, coordinate in enumerate(coordinates):
            keys.add(coordinate_key(coordinate, i, "qubit"))
        return QubitIndexMap(dict(enumerate(sorted(keys))))

    @staticmethod
    def from_graph(g: BaseGraph) -> QubitIndexMap:
        """Create the qubit map of all the vertices of ``g``.

        Raises:
            InvalidCoordinateError: if a vertex of ``g`` has a NaN ``qubit`` coordinate.

        """
        return QubitIndexMap(
            dict(enumerate(sorted({coordinate_key(g.qubit(v), v, "qubit") for v in g.vertices()})))
        )

    @functools.cached_property
    def q2i(self) -> dict[float, int]:
        """Get a mapping from coordinates to indices."""
        return {q: i for i, q in self.i2q.items()}

    @property
    def num_qubits(self) -> int:
        """Number of distinct qubits."""
        return len(self.i2q)

    def index_of(self, g: BaseGraph, v: int) -> int:
        """Get the stim qubit index of the vertex ``v`` of ``g``."""
        return self[g.qubit(v)]

    def __getitem__(self, coordinate: FloatInt) -> int:
        if math.isnan(coordinate):
            raise InvalidCoordinateError("NaN is not a valid qubit coordinate.")
        return self.q2i[float(coordinate)]

    def __len__(self) -> int:
        return len(self.i2q)
