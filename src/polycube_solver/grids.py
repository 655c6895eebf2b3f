from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .types import Axis, Voxel

_AXIS_INDEX: dict[Axis, int] = {"X": 0, "Y": 1, "Z": 2}


@dataclass(frozen=True)
class VoxelGrid:
    """Cubic voxel field of edge length `size`.

    Cell (x, y, z) lives at flat index ``x + size*y + size*size*z``. Each
    value counts how many pieces occupy the cell (0 = empty). Every
    operation returns a new grid; nothing is mutated in place.
    """

    size: int
    cells: tuple[int, ...]
    # Bit i is set when cells[i] == 1; lets `append` test overlap at once.
    _ones: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("size must be >= 1")
        if len(self.cells) != self.size**3:
            raise ValueError(
                f"cells must have length {self.size**3}, got {len(self.cells)}"
            )
        ones = 0
        for i, v in enumerate(self.cells):
            if v < 0:
                raise ValueError(f"cells[{i}] must be non-negative, got {v}")
            if v == 1:
                ones |= 1 << i
        object.__setattr__(self, "_ones", ones)

    @classmethod
    def from_occupancy(
        cls, size: int, occupancy: Sequence[int]
    ) -> "VoxelGrid | None":
        """Zero-pad `occupancy` to size**3 cells; None if it is too long."""
        volume = size**3
        if len(occupancy) > volume:
            return None
        cells = tuple(int(v) for v in occupancy)
        return cls(size, cells + (0,) * (volume - len(cells)))

    @classmethod
    def empty(cls, size: int) -> "VoxelGrid":
        return cls(size, (0,) * size**3)

    def index(self, x: int, y: int, z: int) -> int:
        s = self.size
        return x + s * y + s * s * z

    def coords(self) -> Iterator[Voxel]:
        """Yield (x, y, z) in flat-index order (x fastest)."""
        s = self.size
        for z in range(s):
            for y in range(s):
                for x in range(s):
                    yield (x, y, z)

    def get(self, x: int, y: int, z: int) -> int:
        return self.cells[self.index(x, y, z)]

    def occupied(self) -> set[Voxel]:
        return {c for c, v in zip(self.coords(), self.cells) if v}

    def count(self) -> int:
        return sum(self.cells)

    def is_filled(self) -> bool:
        return all(v == 1 for v in self.cells)

    def layer(self, z: int) -> list[list[int]]:
        """Rows (y) of x-values for one z-slice."""
        s = self.size
        return [[self.get(x, y, z) for x in range(s)] for y in range(s)]

    def append(self, other: "VoxelGrid") -> "VoxelGrid | None":
        """Cell-wise sum of both grids, or None where both hold a 1."""
        if other.size != self.size:
            raise ValueError(
                f"Cannot compose grids of size {self.size} and {other.size}"
            )
        if self._ones & other._ones:
            return None
        return VoxelGrid(
            self.size, tuple(a + b for a, b in zip(self.cells, other.cells))
        )

    def rotate_z(self) -> "VoxelGrid":
        """Quarter turn about the z-axis: (x, y, z) <- (y, s-1-x, z)."""
        s = self.size
        return VoxelGrid(
            s,
            tuple(self.get(y, s - 1 - x, z) for x, y, z in self.coords()),
        )

    def rotate_y(self) -> "VoxelGrid":
        """Quarter turn about the y-axis: (x, y, z) <- (z, y, s-1-x)."""
        s = self.size
        return VoxelGrid(
            s,
            tuple(self.get(z, y, s - 1 - x) for x, y, z in self.coords()),
        )

    def translate(self, offset: int, axis: Axis) -> "VoxelGrid | None":
        """Shift every cell by `offset` along `axis`.

        None if offset is 0, |offset| >= size, or an occupied cell would
        leave the volume.
        """
        s = self.size
        if offset == 0 or abs(offset) >= s:
            return None
        a = _AXIS_INDEX[axis]

        for c, v in zip(self.coords(), self.cells):
            if not v:
                continue
            if offset < 0 and c[a] < -offset:
                return None
            if offset > 0 and c[a] >= s - offset:
                return None

        cells: list[int] = []
        for c in self.coords():
            src = list(c)
            src[a] -= offset
            if 0 <= src[a] < s:
                cells.append(self.get(*src))
            else:
                cells.append(0)
        return VoxelGrid(s, tuple(cells))

    def render(self) -> str:
        """Text dump: one line per y, z-blocks of x-values side by side."""
        s = self.size
        lines = []
        for y in range(s):
            blocks = [
                "".join(f"{self.get(x, y, z)} " for x in range(s))
                for z in range(s)
            ]
            lines.append("   ".join(blocks) + "   ")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()
