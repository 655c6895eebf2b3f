import logging
from collections.abc import Sequence

from .grids import VoxelGrid
from .types import AXES, Piece, Placement

logger = logging.getLogger(__name__)

# Rotations applied after the four z-spins of faces 0..4 to reach the next
# face. Together with the spins this visits all 24 cube rotations once.
_FACE_STEPS: tuple[str, ...] = ("Y", "Y", "Y", "YZY", "YY")


def _apply_steps(grid: VoxelGrid, steps: str) -> VoxelGrid:
    for step in steps:
        grid = grid.rotate_y() if step == "Y" else grid.rotate_z()
    return grid


def enumerate_orientations(
    grid: VoxelGrid,
) -> list[tuple[int, int, VoxelGrid]]:
    """All 24 (face, spin, rotated grid) orientations of one grid."""
    out: list[tuple[int, int, VoxelGrid]] = []
    g = grid
    for face in range(6):
        for spin in range(4):
            out.append((face, spin, g))
            g = g.rotate_z()
        if face < len(_FACE_STEPS):
            g = _apply_steps(g, _FACE_STEPS[face])
    return out


def _shifts(size: int) -> range:
    return range(-(size - 1), size)


def enumerate_placements(piece: Piece) -> list[Placement]:
    """Every in-bounds (orientation, offset) candidate for one piece.

    Offsets run over X, then Y, then Z; 0 means no shift along that axis.
    Symmetric orientations are not deduplicated.
    """
    size = piece.grid.size
    placements: list[Placement] = []
    for face, spin, rotated in enumerate_orientations(piece.grid):
        for dx in _shifts(size):
            gx = rotated if dx == 0 else rotated.translate(dx, AXES[0])
            if gx is None:
                continue
            for dy in _shifts(size):
                gy = gx if dy == 0 else gx.translate(dy, AXES[1])
                if gy is None:
                    continue
                for dz in _shifts(size):
                    gz = gy if dz == 0 else gy.translate(dz, AXES[2])
                    if gz is None:
                        continue
                    placements.append(
                        Placement(piece.name, face, spin, (dx, dy, dz), gz)
                    )
    return placements


def _search(
    current: VoxelGrid,
    candidates: Sequence[list[Placement]],
    depth: int,
) -> list[Placement] | None:
    if depth == len(candidates):
        return [] if current.is_filled() else None

    for placement in candidates[depth]:
        composed = current.append(placement.grid)
        if composed is None:
            continue
        rest = _search(composed, candidates, depth + 1)
        if rest is not None:
            return [placement, *rest]

    logger.debug("Backtracking from depth %d", depth)
    return None


def compose_all(
    current: VoxelGrid, remaining: Sequence[Piece]
) -> list[Placement] | None:
    """Place `remaining` in order onto `current` by depth-first search.

    Returns one placement per piece for the first complete packing found,
    or None once every orientation and offset has been exhausted.
    """
    for p in remaining:
        if p.grid.size != current.size:
            raise ValueError(
                f"Piece {p.name}: size {p.grid.size} does not match "
                f"volume size {current.size}"
            )

    candidates = [enumerate_placements(p) for p in remaining]
    for p, cands in zip(remaining, candidates):
        logger.debug("Piece %s: %d candidate placements", p.name, len(cands))

    solution = _search(current, candidates, 0)
    if solution is None:
        logger.info("Search exhausted without a packing")
    else:
        logger.info("Found packing with %d pieces", len(solution))
    return solution


def solve(current: VoxelGrid, remaining: Sequence[Piece]) -> bool:
    solution = compose_all(current, remaining)
    if solution is None:
        return False
    for p in solution:
        logger.info(
            "Placed %s: face=%d spin=%d offset=%s\n%s",
            p.name,
            p.face,
            p.spin,
            p.offset,
            p.grid.render(),
        )
    return True


def solve_cube(
    pieces: Sequence[Piece], *, size: int = 3
) -> list[Placement] | None:
    """Pack `pieces` into an empty cube of edge length `size`."""
    if not pieces:
        raise ValueError("pieces is empty")
    return compose_all(VoxelGrid.empty(size), pieces)
