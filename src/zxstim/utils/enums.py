from __future__ import annotations

from enum import Flag


# Flag is preferred over IntFlag for a number of reasons, including boundary control,
# i.e., preventing Pauli(4), etc. (enum.FlagBoundary is not available in Python 3.10)
class Pauli(Flag):
    """Pauli operators as bit flags of X and Z supports."""

    I = 0  # noqa: E741
    X = 1
    Z = 2
    Y = X | Z

    def __str__(self) -> str:
        return str(self.name)

    @staticmethod
    def from_label(label: str | Pauli) -> Pauli:
        """Parse one of ``"I"``, ``"X"``, ``"Y"`` or ``"Z"`` into a Pauli operator.

        Raises:
            ValueError: if ``label`` is not a single Pauli letter.

        """
        if isinstance(label, Pauli):
            return label
        if not isinstance(label, str) or label.upper() not in _LABELS:
            raise ValueError(f"Unknown Pauli label {label!r}.")
        return _LABELS[label.upper()]


_LABELS: dict[str, Pauli] = {"I": Pauli.I, "X": Pauli.X, "Y": Pauli.Y, "Z": Pauli.Z}
