import json
from pathlib import Path
from frontend.__main__ import main

def _seed(tmp: Path) -> str:
    root = tmp / "dict"; root.mkdir()
    (root / "all").write_text("cat\tnoun\ncar\ndog\n", encoding="utf-8")
    (root / "go-mode").write_text("chan\tkeyword\n", encoding="utf-8")
    return str(root)

def test_cli_json_query(tmp_path: Path, capsys):
    assert main(["--dicts", _seed(tmp_path), "--context", "go-mode", "--q", "c", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["label"] for r in rows] == ["car", "cat", "chan"]

def test_cli_table_and_cap(tmp_path: Path, capsys):
    assert main(["--dicts", _seed(tmp_path), "--q", "c", "-k", "1"]) == 0
    out = capsys.readouterr().out
    assert "car" in out and "cat" not in out

def test_cli_missing_folder(tmp_path: Path, capsys):
    assert main(["--dicts", str(tmp_path / "nope"), "--q", "c"]) == 2
    assert "not found" in capsys.readouterr().err
