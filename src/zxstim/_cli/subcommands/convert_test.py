import json
from pathlib import Path

import pytest

from zxstim._cli.subcommands.convert import read_detection_webs, read_zx_graph
from zxstim._cli.zxstim import main
from zxstim.computation.web import DetectionWeb
from zxstim.translate._testing import cnot_graph
from zxstim.translate.translator import zx_to_stim
from zxstim.utils.enums import Pauli
from zxstim.utils.exceptions import ZXStimError


def _write_diagram(tmp_path: Path) -> Path:
    path = tmp_path / "cnot.zxg"
    path.write_text(cnot_graph().to_json())
    return path


def test_read_zx_graph_keeps_coordinates(tmp_path: Path) -> None:
    g = read_zx_graph(_write_diagram(tmp_path))
    assert g.num_vertices() == 6
    assert g.num_edges() == 5
    assert sorted(g.row(v) for v in g.vertices()) == [0, 0, 1, 1, 2, 2]
    assert sorted(g.qubit(v) for v in g.vertices()) == [0, 0, 0, 1, 1, 1]


def test_read_detection_webs(tmp_path: Path) -> None:
    path = tmp_path / "webs.json"
    path.write_text(json.dumps([[[4, 2, "Z"], [3, 5, "X"]], []]))
    assert read_detection_webs(path) == [
        DetectionWeb({(2, 4): Pauli.Z, (3, 5): Pauli.X}),
        DetectionWeb(),
    ]


@pytest.mark.parametrize("content", ['{"a": 1}', '[[[0, 1]]]', '[[[0, 1, "W"]]]', "[3]"])
def test_read_detection_webs_malformed(tmp_path: Path, content: str) -> None:
    path = tmp_path / "webs.json"
    path.write_text(content)
    with pytest.raises(ZXStimError):
        read_detection_webs(path)


def test_convert_to_file(tmp_path: Path) -> None:
    diagram = _write_diagram(tmp_path)
    webs = tmp_path / "webs.json"
    webs.write_text(json.dumps([[[2, 4, "Z"]]]))
    out = tmp_path / "out" / "cnot.stim"
    main(["convert", str(diagram), "--webs", str(webs), "--out", str(out)])
    expected = zx_to_stim(read_zx_graph(diagram), read_detection_webs(webs))
    assert out.read_text() == expected + "\n"


def test_convert_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    diagram = _write_diagram(tmp_path)
    main(["convert", str(diagram)])
    assert capsys.readouterr().out == zx_to_stim(read_zx_graph(diagram)) + "\n"


def test_convert_reports_errors(tmp_path: Path) -> None:
    diagram = _write_diagram(tmp_path)
    webs = tmp_path / "webs.json"
    webs.write_text("{}")
    with pytest.raises(SystemExit, match=r"zxstim: error: Expected a list of webs.*"):
        main(["convert", str(diagram), "--webs", str(webs)])


def test_read_detection_webs_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "webs.json"
    path.write_text("[[[0, 1, ")
    with pytest.raises(ZXStimError, match=r"Cannot load the detection webs.*"):
        read_detection_webs(path)


def test_convert_reports_missing_files(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match=r"zxstim: error: Cannot load the ZX diagram.*"):
        main(["convert", str(tmp_path / "missing.zxg")])
    diagram = _write_diagram(tmp_path)
    with pytest.raises(SystemExit, match=r"zxstim: error: Cannot load the detection webs.*"):
        main(["convert", str(diagram), "--webs", str(tmp_path / "missing.json")])


def test_convert_reports_invalid_json(tmp_path: Path) -> None:
    diagram = _write_diagram(tmp_path)
    webs = tmp_path / "webs.json"
    webs.write_text("not json")
    with pytest.raises(SystemExit, match=r"zxstim: error: Cannot load the detection webs.*"):
        main(["convert", str(diagram), "--webs", str(webs)])
