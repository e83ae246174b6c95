"""Defines :class:`MeasurementRecords` to keep track of the measurements emitted for each vertex."""

from __future__ import annotations

from dataclasses import dataclass, field

from zxstim.utils.exceptions import ZXStimError


@dataclass
class MeasurementRecords:
    """Sequential indices of the measurements emitted during one translation.

    Attributes:
        count: number of measurements emitted so far. Never decreases.
        indices: index of the measurement emitted for each measured vertex.

    """

    count: int = 0
    indices: dict[int, int] = field(default_factory=dict)

    def record(self, v: int) -> int:
        """Register a new measurement produced by ``v`` and return its index.

        Raises:
            ZXStimError: if ``v`` already produced a measurement.

        """
        if v in self.indices:
            raise ZXStimError(f"Vertex {v} has already been measured.")
        index = self.count
        self.indices[v] = index
        self.count += 1
        return index

    def index_of(self, v: int) -> int | None:
        """Return the index of the measurement produced by ``v``, if any."""
        return self.indices.get(v)

    def lookback(self, v: int) -> int | None:
        """Return the distance from the end of the record to the measurement of ``v``.

        The returned value ``k`` is such that ``rec[-k]`` refers to the measurement of ``v``
        at the current point of the circuit, so ``1 <= k <= self.count``.
        """
        index = self.indices.get(v)
        if index is None:
            return None
        return self.count - index

    def __contains__(self, v: int) -> bool:
        return v in self.indices

    def __len__(self) -> int:
        return self.count
