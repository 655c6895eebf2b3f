from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from .grids import VoxelGrid

Voxel = tuple[int, int, int]
Axis = Literal["X", "Y", "Z"]

AXES: tuple[Axis, ...] = ("X", "Y", "Z")


@dataclass(frozen=True)
class PieceInput:
    name: str
    cells: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Piece name must be non-empty")
        if any(v not in (0, 1) for v in self.cells):
            raise ValueError(f"Piece {self.name}: cells must be 0 or 1")
        if not any(self.cells):
            raise ValueError(f"Piece {self.name}: cells must not be all zero")


@dataclass(frozen=True)
class Piece:
    name: str
    grid: "VoxelGrid"


@dataclass(frozen=True)
class Placement:
    """One piece after rotation and translation, ready to be composed.

    `face` (0..5) and `spin` (0..3) identify the orientation in the order
    the search enumerates them; `offset` is the (dx, dy, dz) shift.
    """

    name: str
    face: int
    spin: int
    offset: Voxel
    grid: "VoxelGrid"

    @property
    def orientation(self) -> int:
        return self.face * 4 + self.spin
