from pathlib import Path

import yaml

from .grids import VoxelGrid
from .types import Piece, PieceInput

DEFAULT_SIZE = 3

# Six single-layer pieces that exactly fill a 3x3x3 cube.
DEFAULT_PIECES: list[PieceInput] = [
    PieceInput("A", (0, 1, 1, 1, 1, 0, 1, 0, 0)),
    PieceInput("B", (1, 1, 1, 1, 0, 0, 1, 0, 0)),
    PieceInput("C", (1, 0, 0, 1, 1, 1, 1, 0, 0)),
    PieceInput("D", (1, 1, 0, 1, 1, 0, 1, 0, 0)),
    PieceInput("E", (0, 1, 0, 1, 1, 0, 1, 0, 0)),
    PieceInput("F", (0, 1, 0, 1, 1, 0, 0, 0, 0)),
]


def _coerce_cell_list(
    values: object, *, max_len: int, label: str
) -> tuple[int, ...]:
    if not isinstance(values, (list, tuple)):
        raise TypeError(f"{label} must be a list")
    if len(values) > max_len:
        raise ValueError(f"{label} must have at most {max_len} cells")

    out: list[int] = []
    for i, v in enumerate(values):
        if isinstance(v, bool):
            out.append(int(v))
        elif isinstance(v, int):
            if v not in (0, 1):
                raise ValueError(f"{label}[{i}] must be 0 or 1, got {v}")
            out.append(v)
        elif isinstance(v, str):
            s = v.strip().lower()
            if s in {"true", "t", "1", "yes", "y"}:
                out.append(1)
            elif s in {"false", "f", "0", "no", "n"}:
                out.append(0)
            else:
                raise ValueError(f"{label}[{i}] invalid cell string: {v!r}")
        else:
            raise TypeError(
                f"{label}[{i}] must be bool/int/str, got {type(v).__name__}"
            )
    return tuple(out)


def load_puzzle_yaml(path: str | Path) -> tuple[int, list[PieceInput]]:
    """Load the cube size and piece occupancy lists from a YAML file."""
    path = Path(path)
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return parse_puzzle(raw)


def parse_puzzle(raw: object) -> tuple[int, list[PieceInput]]:
    if not isinstance(raw, dict):
        raise ValueError("YAML root must be a mapping")

    size = raw.get("size", DEFAULT_SIZE)
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise ValueError(f"size must be a positive integer, got {size!r}")
    volume = size**3

    pieces_node = raw.get("pieces")
    if pieces_node is None:
        raise ValueError("YAML must contain key 'pieces'")

    pieces: list[PieceInput] = []
    if isinstance(pieces_node, dict):
        for name, arr in pieces_node.items():
            if not isinstance(name, str):
                raise ValueError("pieces mapping keys must be strings")
            cells = _coerce_cell_list(
                arr, max_len=volume, label=f"pieces.{name}"
            )
            pieces.append(PieceInput(name=name, cells=cells))
    elif isinstance(pieces_node, list):
        for idx, item in enumerate(pieces_node):
            if not isinstance(item, dict):
                raise ValueError(f"pieces[{idx}] must be a mapping")
            name = item.get("name")
            if not isinstance(name, str) or not name:
                raise ValueError(
                    f"pieces[{idx}].name must be a non-empty string"
                )
            cells = _coerce_cell_list(
                item.get("cells"),
                max_len=volume,
                label=f"pieces[{idx}].cells",
            )
            pieces.append(PieceInput(name=name, cells=cells))
    else:
        raise ValueError("pieces must be a list or mapping")

    if not pieces:
        raise ValueError("pieces must not be empty")
    names = [p.name for p in pieces]
    if len(set(names)) != len(names):
        raise ValueError("Piece names must be unique")

    return size, pieces


def build_pieces(size: int, piece_inputs: list[PieceInput]) -> list[Piece]:
    pieces: list[Piece] = []
    for p in piece_inputs:
        grid = VoxelGrid.from_occupancy(size, p.cells)
        if grid is None:
            raise ValueError(
                f"Piece {p.name}: {len(p.cells)} cells do not fit a "
                f"{size}x{size}x{size} volume"
            )
        pieces.append(Piece(p.name, grid))
    return pieces


def dump_puzzle_yaml(size: int, pieces: list[PieceInput]) -> str:
    doc = {
        "version": 1,
        "size": int(size),
        "pieces": [{"name": p.name, "cells": list(p.cells)} for p in pieces],
    }
    return yaml.safe_dump(doc, sort_keys=False, default_flow_style=None)


def write_puzzle_yaml(
    path: str | Path,
    *,
    size: int = DEFAULT_SIZE,
    pieces: list[PieceInput] | None = None,
    overwrite: bool = False,
) -> None:
    p = Path(path)
    if p.exists() and not overwrite:
        raise FileExistsError(f"Refusing to overwrite existing file: {p}")
    if pieces is None:
        pieces = DEFAULT_PIECES
    p.write_text(dump_puzzle_yaml(size, pieces), encoding="utf-8")
