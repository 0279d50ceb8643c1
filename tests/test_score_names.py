import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "scripts"))

import score_names  # noqa: E402


def test_prints_reply(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["score_names.py", "กข"])
    assert score_names.main() == 0
    assert "ผลรวม = 3" in capsys.readouterr().out


def test_json_output_from_file(monkeypatch, capsys, tmp_path):
    names = tmp_path / "names.txt"
    names.write_text("ก\n\nสมชาย\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["score_names.py", "--json", "--file", str(names)])

    assert score_names.main() == 0
    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert [(r["name"], r["total"]) for r in lines] == [("ก", 1), ("สมชาย", 23)]


def test_invalid_name_exit_code(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["score_names.py", "Somchai", "ก"])
    assert score_names.main() == 2
    captured = capsys.readouterr()
    assert "invalid character: S" in captured.err
    assert "ผลรวม = 1" in captured.out


def test_no_names(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["score_names.py"])
    with pytest.raises(SystemExit):
        score_names.main()
