from polycube_solver.cli import main
from polycube_solver.yaml_io import DEFAULT_PIECES, load_puzzle_yaml


def test_cli_solves_config(tripod_config, capsys):
    main(["--config", str(tripod_config)])
    out = capsys.readouterr().out
    assert "A: piece A face=0 spin=0 offset=(0, 0, 0)" in out
    assert out.rstrip().endswith("true")


def test_cli_prints_false_when_unsolvable(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("size: 2\npieces:\n  U: [1]\n", encoding="utf-8")
    main(["--config", str(path)])
    assert capsys.readouterr().out == "false\n"


def test_cli_write_template(tmp_path, capsys):
    path = tmp_path / "puzzle.yaml"
    main(["--config", str(path), "--write-template"])
    assert "Wrote template config" in capsys.readouterr().out
    assert load_puzzle_yaml(path) == (3, DEFAULT_PIECES)


def test_cli_writes_html(tripod_config, tmp_path, capsys):
    html = tmp_path / "solution.html"
    main(["--config", str(tripod_config), "--html", str(html)])
    assert html.exists()
    assert "Wrote figure" in capsys.readouterr().out
