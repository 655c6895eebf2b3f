import matplotlib
import pytest

from polycube_solver.cube_solver import solve_cube
from polycube_solver.grids import VoxelGrid
from polycube_solver.types import Piece

matplotlib.use("Agg")

TRIPOD = (1, 1, 1, 0, 1)


@pytest.fixture
def tripod_pieces():
    grid = VoxelGrid.from_occupancy(2, TRIPOD)
    return [Piece("A", grid), Piece("B", grid)]


@pytest.fixture
def tripod_solution(tripod_pieces):
    placements = solve_cube(tripod_pieces, size=2)
    assert placements is not None
    return placements


@pytest.fixture
def tripod_config(tmp_path):
    path = tmp_path / "tripods.yaml"
    path.write_text(
        "size: 2\n"
        "pieces:\n"
        "  - {name: A, cells: [1, 1, 1, 0, 1]}\n"
        "  - {name: B, cells: [1, 1, 1, 0, 1]}\n",
        encoding="utf-8",
    )
    return path
