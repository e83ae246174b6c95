"""Defines the table deciding which instructions each ZX vertex translates to.

The instructions emitted for a phase-free spider only depend on its type and its degree.
:class:`TranslationRules` maps each supported ``(VertexType, degree)`` pair to a handler;
any pair missing from the table is reported as unsupported by the translator.

The default rules are:

- a degree-1 spider is a preparation or a measurement. Z spiders first get an ``H``. If the
  only neighbour lies on an earlier row, the qubit is measured and reset with ``MR`` and
  the measurement is recorded. stim allocates qubits in ``|0>`` on first use so nothing is
  needed for preparations.
- a degree-2 spider is the identity.
- a degree-3 Z spider is the control of a ``CNOT`` towards each neighbour living on
  another qubit. The degree-3 X spider on the other end is the target and emits nothing.
- boundary vertices never emit anything.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from pyzx.utils import VertexType

from zxstim.interop.pyzx.utils import coordinate_key
from zxstim.translate.context import TranslationContext
from zxstim.translate.instructions import basis_change, controlled_not, measure_reset
from zxstim.utils.exceptions import ZXStimError

VertexHandler = Callable[[TranslationContext, int], None]
"""Emit the instructions of a vertex (second argument) into the context (first argument)."""

RuleKey = tuple[VertexType, int]


def skip(ctx: TranslationContext, v: int) -> None:
    """Emit nothing for ``v``."""


def measure_if_after_neighbour(ctx: TranslationContext, v: int) -> None:
    """Measure and reset the qubit of the degree-1 vertex ``v`` if it closes a wire."""
    g = ctx.g
    (neighbour,) = g.neighbors(v)
    if coordinate_key(g.row(neighbour), neighbour, "row") < coordinate_key(g.row(v), v, "row"):
        ctx.emit(measure_reset(ctx.qubit_index(v), g.qubit(v)))
        ctx.records.record(v)


def z_leaf(ctx: TranslationContext, v: int) -> None:
    ctx.emit(basis_change(ctx.qubit_index(v), ctx.g.qubit(v)))
    measure_if_after_neighbour(ctx, v)


def x_leaf(ctx: TranslationContext, v: int) -> None:
    measure_if_after_neighbour(ctx, v)


def z_control(ctx: TranslationContext, v: int) -> None:
    """Emit one ``CNOT`` from ``v`` to each neighbour on a different qubit."""
    g = ctx.g
    control = ctx.qubit_index(v)
    for neighbour in sorted(g.neighbors(v)):
        target = ctx.qubit_index(neighbour)
        if target != control:
            ctx.emit(controlled_not(control, target, g.qubit(v), g.qubit(neighbour)))


class TranslationRules:
    """Extensible dispatch table from ``(VertexType, degree)`` to a :data:`VertexHandler`."""

    def __init__(self, handlers: dict[RuleKey, VertexHandler] | None = None) -> None:
        self._handlers: dict[RuleKey, VertexHandler] = dict(handlers or {})

    def register(
        self,
        vertex_type: VertexType,
        degree: int,
        handler: VertexHandler,
        override: bool = False,
    ) -> TranslationRules:
        """Add a rule to the table.

        Args:
            vertex_type: type of the vertices the rule applies to.
            degree: degree of the vertices the rule applies to.
            handler: function emitting the instructions of a matching vertex.
            override: if ``True``, replace an already registered rule for the same key.

        Raises:
            ZXStimError: if a rule already exists for ``(vertex_type, degree)`` and
                ``override`` is ``False``, or if ``degree`` is negative.

        Returns:
            ``self``, so that calls can be chained.

        """
        if degree < 0:
            raise ZXStimError(f"Degree should be non-negative, got {degree}.")
        key = (vertex_type, degree)
        if key in self._handlers and not override:
            raise ZXStimError(
                f"A rule is already registered for {vertex_type.name} vertices of degree "
                f"{degree}. Use override=True to replace it."
            )
        self._handlers[key] = handler
        return self

    def lookup(self, vertex_type: VertexType, degree: int) -> VertexHandler | None:
        """Return the handler registered for ``(vertex_type, degree)``, if any."""
        return self._handlers.get((vertex_type, degree))

    def copy(self) -> TranslationRules:
        return TranslationRules(self._handlers)

    def __contains__(self, key: RuleKey) -> bool:
        return key in self._handlers

    def __iter__(self) -> Iterator[RuleKey]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)


def default_translation_rules() -> TranslationRules:
    """Return a new table holding the rules for phase-free spiders of degree 1 to 3."""
    rules = TranslationRules()
    for degree in (1, 2, 3):
        rules.register(VertexType.BOUNDARY, degree, skip)
    rules.register(VertexType.Z, 1, z_leaf)
    rules.register(VertexType.X, 1, x_leaf)
    rules.register(VertexType.Z, 2, skip)
    rules.register(VertexType.X, 2, skip)
    rules.register(VertexType.Z, 3, z_control)
    rules.register(VertexType.X, 3, skip)
    return rules
