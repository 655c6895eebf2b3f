import plotly.graph_objects as go
import pytest

from polycube_solver.api import (
    list_puzzle_assets,
    load_puzzle,
    resolve_puzzle_asset,
    solve_and_plot_cube,
    solve_puzzle,
)
from polycube_solver.yaml_io import DEFAULT_PIECES, load_puzzle_yaml


def test_bundled_assets():
    names = list_puzzle_assets()
    assert "cube2.yaml" in names
    assert "cube3.yaml" in names
    assert resolve_puzzle_asset("cube3") == resolve_puzzle_asset("cube3.yaml")


def test_bundled_default_matches_builtin_pieces():
    size, pieces = load_puzzle_yaml(resolve_puzzle_asset("cube3"))
    assert size == 3
    assert pieces == DEFAULT_PIECES


@pytest.mark.parametrize("name", ["", "  ", "../cube3", "sub/cube3", ".hidden"])
def test_resolve_rejects_invalid_names(name):
    with pytest.raises(ValueError):
        resolve_puzzle_asset(name)


def test_resolve_missing():
    with pytest.raises(FileNotFoundError):
        resolve_puzzle_asset("does-not-exist")


def test_load_and_solve_bundled_2x2x2():
    path = resolve_puzzle_asset("cube2")
    size, pieces = load_puzzle(path)
    assert size == 2
    assert [p.name for p in pieces] == ["A", "B"]

    size, placements = solve_puzzle(path)
    assert placements is not None
    assert len(placements) == 2


def test_solve_and_plot(tripod_config):
    fig, placements = solve_and_plot_cube(path=tripod_config)
    assert isinstance(fig, go.Figure)
    assert [p.name for p in placements] == ["A", "B"]


def test_solve_and_plot_unsolvable(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("size: 2\npieces:\n  U: [1]\n", encoding="utf-8")
    assert solve_and_plot_cube(path=path) == (None, None)
