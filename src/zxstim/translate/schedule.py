"""Defines :class:`RowSchedule`, the grouping of ZX vertices into stim time-steps.

Each distinct ``row`` coordinate of a diagram becomes one time-step of the generated
circuit, closed by a ``TICK``. Rows are visited in ascending order and vertices sharing a
row are visited by ascending vertex id, which makes the generated program reproducible.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from pyzx.graph.base import BaseGraph

from zxstim.interop.pyzx.utils import coordinate_key
from zxstim.utils.exceptions import ZXStimError


@dataclass(frozen=True)
class Row:
    """Vertices sharing the same ``row`` coordinate.

    Attributes:
        row: the shared ``row`` coordinate.
        vertices: the vertices of the row, in ascending id order.

    """

    row: float
    vertices: tuple[int, ...]

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices)


@dataclass(frozen=True)
class RowSchedule:
    """Thin wrapper around ``tuple[Row, ...]`` ensuring rows are strictly ascending."""

    rows: tuple[Row, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if any(a.row >= b.row for a, b in zip(self.rows, self.rows[1:])):
            raise ZXStimError(
                f"The rows {[r.row for r in self.rows]} are not strictly ascending."
            )

    @staticmethod
    def from_graph(g: BaseGraph) -> RowSchedule:
        """Group the vertices of ``g`` by ``row`` coordinate.

        Raises:
            InvalidCoordinateError: if a vertex of ``g`` has a NaN ``row`` coordinate.

        """
        buckets: dict[float, list[int]] = {}
        for v in g.vertices():
            buckets.setdefault(coordinate_key(g.row(v), v, "row"), []).append(v)
        return RowSchedule(
            tuple(Row(row, tuple(sorted(buckets[row]))) for row in sorted(buckets))
        )

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, i: int) -> Row:
        return self.rows[i]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)
