"""Defines :class:`DetectionWeb`, the correlation surfaces consumed by the detector synthesis."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Union

from zxstim.utils.enums import Pauli
from zxstim.utils.exceptions import ZXStimError

if TYPE_CHECKING:
    from pyzx.pauliweb import PauliWeb


def normalise_edge(edge: tuple[int, int]) -> tuple[int, int]:
    """Return ``edge`` with its endpoints in ascending order.

    Raises:
        ZXStimError: if ``edge`` is a self-loop.

    """
    u, v = edge
    if u == v:
        raise ZXStimError(f"Self-loop edge ({u}, {v}) cannot be part of a detection web.")
    return (u, v) if u < v else (v, u)


@dataclass(frozen=True)
class DetectionWeb:
    """A correlation surface described by the Pauli operators carried by the edges it spans.

    A web can be given per edge or per half-edge. ``edge_operators`` associates an
    undirected edge, stored as a ``(min, max)`` vertex pair, to the operator carried by the
    whole edge. ``half_edge_operators`` associates a half-edge ``(v, u)``, i.e. the half of
    the edge ``v--u`` next to ``v``, to the operator carried by that half only. Both halves
    of a Hadamard edge carry conjugated operators, so they need to be given separately.

    The edges of the web keep their insertion order, whole edges first, and this is the
    order in which detector terms are emitted.

    Attributes:
        edge_operators: read-only mapping from edges to Pauli operators.
        half_edge_operators: read-only mapping from half-edges to Pauli operators.

    Raises:
        ZXStimError: if an edge is a self-loop or if a half-edge gets two different
            operators.

    """

    edge_operators: Mapping[tuple[int, int], Pauli] = field(default_factory=dict)
    half_edge_operators: Mapping[tuple[int, int], Pauli] = field(default_factory=dict)
    _halves: Mapping[tuple[int, int], Pauli] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )
    _edges: tuple[tuple[int, int], ...] = field(
        init=False, repr=False, compare=False, default_factory=tuple
    )

    def __post_init__(self) -> None:
        edges: dict[tuple[int, int], Pauli] = {}
        halves: dict[tuple[int, int], Pauli] = {}
        for edge, label in self.edge_operators.items():
            key = normalise_edge(edge)
            pauli = Pauli.from_label(label)
            _set_half_edge(halves, key, pauli)
            _set_half_edge(halves, key[::-1], pauli)
            edges[key] = pauli
        half_edges: dict[tuple[int, int], Pauli] = {}
        for (v, u), label in self.half_edge_operators.items():
            normalise_edge((v, u))
            pauli = Pauli.from_label(label)
            _set_half_edge(halves, (v, u), pauli)
            half_edges[(v, u)] = pauli
        ordered = dict.fromkeys(edges)
        ordered.update(dict.fromkeys(normalise_edge(e) for e in half_edges))
        object.__setattr__(self, "edge_operators", MappingProxyType(edges))
        object.__setattr__(self, "half_edge_operators", MappingProxyType(half_edges))
        object.__setattr__(self, "_halves", MappingProxyType(halves))
        object.__setattr__(self, "_edges", tuple(ordered))

    @staticmethod
    def from_mapping(edge_operators: Mapping[tuple[int, int], Pauli | str]) -> DetectionWeb:
        """Build a web from a mapping whose values are either :class:`Pauli` or labels."""
        return DetectionWeb({e: Pauli.from_label(p) for e, p in edge_operators.items()})

    @staticmethod
    def from_pauli_web(pauli_web: PauliWeb[int, tuple[int, int]]) -> DetectionWeb:
        """Create a detection web from a PyZX ``PauliWeb``.

        A ``PauliWeb`` labels half-edges: the key ``(u, v)`` is the half of the edge ``u--v``
        next to ``u``. Each non-identity half-edge is kept as is, so a Hadamard edge keeps a
        different operator on each of its halves.

        """
        half_edges: dict[tuple[int, int], Pauli] = {}
        for half_edge, label in sorted(pauli_web.half_edges().items()):
            pauli = Pauli.from_label(label)
            if pauli != Pauli.I:
                half_edges[half_edge] = pauli
        return DetectionWeb(half_edge_operators=half_edges)

    @property
    def edges(self) -> tuple[tuple[int, int], ...]:
        """Get the edges spanned by the web, as ``(min, max)`` pairs in insertion order."""
        return self._edges

    def operator_at(self, v: int, u: int) -> Pauli | None:
        """Return the operator on the half of the edge ``v--u`` next to ``v``, if any."""
        return self._halves.get((v, u))

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)


def _set_half_edge(
    halves: dict[tuple[int, int], Pauli], half_edge: tuple[int, int], pauli: Pauli
) -> None:
    if halves.get(half_edge, pauli) != pauli:
        raise ZXStimError(
            f"Half-edge {half_edge} is labelled with both {halves[half_edge]} and {pauli}."
        )
    halves[half_edge] = pauli


WebLike = Union[
    DetectionWeb,
    "PauliWeb[int, tuple[int, int]]",
    Mapping[tuple[int, int], Union[Pauli, str]],
]


def as_detection_webs(webs: Iterable[WebLike]) -> list[DetectionWeb]:
    """Convert every supported web representation to :class:`DetectionWeb`.

    Supported inputs are :class:`DetectionWeb` instances, PyZX ``PauliWeb`` instances and
    mappings from edges to Pauli operators or labels.

    Raises:
        ZXStimError: if one of the provided webs has an unsupported type.

    """
    converted: list[DetectionWeb] = []
    for web in webs:
        if isinstance(web, DetectionWeb):
            converted.append(web)
        elif isinstance(web, Mapping):
            converted.append(DetectionWeb.from_mapping(web))
        elif hasattr(web, "half_edges"):
            converted.append(DetectionWeb.from_pauli_web(web))
        else:
            raise ZXStimError(f"Cannot interpret {web!r} as a detection web.")
    return converted
