import pytest

from zxstim.utils.enums import Pauli


@pytest.mark.parametrize(
    "label,expected",
    [("I", Pauli.I), ("X", Pauli.X), ("y", Pauli.Y), ("Z", Pauli.Z), (Pauli.X, Pauli.X)],
)
def test_from_label(label: str, expected: Pauli) -> None:
    assert Pauli.from_label(label) == expected


@pytest.mark.parametrize("label", ["", "XZ", "W", 1])
def test_from_label_invalid(label: str) -> None:
    with pytest.raises(ValueError, match=r"Unknown Pauli label.*"):
        Pauli.from_label(label)


def test_str() -> None:
    assert str(Pauli.X) == "X"
    assert str(Pauli.Z) == "Z"
