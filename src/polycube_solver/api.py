from pathlib import Path

import plotly.graph_objects as go

from .cube_solver import solve_cube
from .plotting import plot_cube_solution
from .types import Piece, Placement
from .yaml_io import build_pieces, load_puzzle_yaml


def _repo_root() -> Path:
    # src/polycube_solver/api.py -> src -> repo root
    return Path(__file__).resolve().parents[2]


def puzzles_assets_dir() -> Path:
    return _repo_root() / "assets" / "puzzles"


def list_puzzle_assets() -> list[str]:
    """List available puzzle YAML filenames under assets/puzzles."""
    d = puzzles_assets_dir()
    if not d.exists():
        return []
    return sorted(p.name for p in d.glob("*.yaml") if p.is_file())


def resolve_puzzle_asset(name: str) -> Path:
    """Resolve a puzzle YAML within assets/puzzles by filename.

    Only files directly under assets/puzzles can be selected (no path
    separators).
    """
    n = str(name or "").strip()
    if not n:
        raise ValueError("Puzzle name is empty")
    if "/" in n or "\\" in n or n.startswith("."):
        raise ValueError(f"Invalid puzzle name: {n!r}")
    if not n.lower().endswith(".yaml"):
        n = f"{n}.yaml"

    p = puzzles_assets_dir() / n
    if not p.exists():
        raise FileNotFoundError(f"Puzzle not found: {n}")
    return p


def load_puzzle(path: str | Path = "puzzle.yaml") -> tuple[int, list[Piece]]:
    """Load a puzzle YAML file and build its pieces."""
    size, piece_inputs = load_puzzle_yaml(path)
    return size, build_pieces(size, piece_inputs)


def solve_puzzle(
    path: str | Path = "puzzle.yaml",
) -> tuple[int, list[Placement] | None]:
    size, pieces = load_puzzle(path)
    return size, solve_cube(pieces, size=size)


def solve_and_plot_cube(
    *, path: str | Path = "puzzle.yaml"
) -> tuple[go.Figure | None, list[Placement] | None]:
    """Solve the puzzle and return (figure, placements).

    Both are None when the pieces cannot be packed.
    """
    size, placements = solve_puzzle(path)
    if placements is None:
        return None, None
    return plot_cube_solution(size, placements), placements
