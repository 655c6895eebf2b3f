from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .cube_solver import solve_cube
from .plotting import plot_cube_solution, print_solution
from .yaml_io import (
    DEFAULT_PIECES,
    DEFAULT_SIZE,
    build_pieces,
    load_puzzle_yaml,
    write_puzzle_yaml,
)

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Pack polycube pieces into a cube by backtracking search."
    )
    parser.add_argument(
        "--config",
        type=str,
        default="puzzle.yaml",
        help="Path to YAML puzzle definition (size + pieces[].cells)",
    )
    parser.add_argument(
        "--write-template",
        action="store_true",
        help="Write a template YAML (using the built-in pieces) and exit",
    )
    parser.add_argument(
        "--show-pieces",
        action="store_true",
        help="Show each piece's layers with matplotlib before solving",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Open a 3D Plotly figure of the solution",
    )
    parser.add_argument(
        "--html",
        type=str,
        default=None,
        help="Write the 3D Plotly figure of the solution to this HTML file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for solver diagnostics",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.write_template:
        write_puzzle_yaml(args.config, overwrite=True)
        print(f"Wrote template config to {args.config}")
        return

    config_path = Path(args.config)
    if config_path.exists():
        size, piece_inputs = load_puzzle_yaml(config_path)
    else:
        print(f"Config not found: {config_path}. Using built-in pieces.")
        size, piece_inputs = DEFAULT_SIZE, DEFAULT_PIECES

    pieces = build_pieces(size, piece_inputs)
    logger.info("Solving %d pieces in a %d^3 volume", len(pieces), size)

    if args.show_pieces:
        from .demo import demo_validate_patterns

        demo_validate_patterns(pieces)

    placements = solve_cube(pieces, size=size)
    if placements is None:
        print("false")
        return

    print_solution(size, placements)
    print("true")

    if args.plot or args.html:
        fig = plot_cube_solution(size, placements)
        if args.html:
            fig.write_html(args.html)
            print(f"Wrote figure to {args.html}")
        if args.plot:
            fig.show()


if __name__ == "__main__":
    main()
