import pytest

from zxstim.translate.instructions import (
    INSTRUCTION_NAMES,
    basis_change,
    comment,
    controlled_not,
    detector,
    instruction_name,
    is_comment,
    measure_reset,
    tick,
)


def test_gate_lines() -> None:
    assert basis_change(0, 0.0) == "H 0 # mapped from qubit 0"
    assert measure_reset(2, 1.5) == "MR 2 # mapped from qubit 1.5"
    assert controlled_not(0, 1, -1, 4.0) == "CNOT 0 1 # mapped from qubits -1 4"
    assert tick() == "TICK"


def test_detector() -> None:
    assert detector([1]) == "DETECTOR rec[-1]"
    assert detector([3, 1, 2]) == "DETECTOR rec[-3] rec[-1] rec[-2]"
    with pytest.raises(ValueError, match=r".*must be positive.*"):
        detector([1, 0])
    with pytest.raises(ValueError, match=r".*at least one measurement.*"):
        detector([])


def test_instruction_name() -> None:
    lines = [basis_change(0, 0), measure_reset(0, 0), controlled_not(0, 1, 0, 1), tick()]
    lines.append(detector([1]))
    assert {instruction_name(line) for line in lines} == INSTRUCTION_NAMES
    assert instruction_name(comment("Unsupported node degree 5: 3")) is None
    assert is_comment("# anything")
    assert not is_comment("TICK")
    assert instruction_name("") is None
