"""Command line entry point for the maze library."""

from __future__ import annotations

import argparse
import sys

from .errors import MazeError
from .render import render_text
from .runner import MazeConfig, build_and_solve


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a perfect maze and draw its longest exit path.")
    parser.add_argument("width", type=int, help="Number of cells per row")
    parser.add_argument("height", type=int, help="Number of rows")
    parser.add_argument("--start", type=int, default=0, help="Entrance column in the top row (default: 0)")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible mazes (default: $MAZE_SEED or fresh entropy)",
    )
    parser.add_argument(
        "--no-solution",
        dest="show_solution",
        action="store_false",
        help="Draw the maze without marking the solution path",
    )
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while carving walls")
    parser.add_argument("--quiet", action="store_true", help="Only print the maze")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        config = MazeConfig(
            width=args.width,
            height=args.height,
            start_x=args.start,
            seed=args.seed,
            use_tqdm=args.progress,
            verbose=not args.quiet,
        )
        result = build_and_solve(config)
    except (MazeError, ValueError) as exc:
        print(f"ERROR: {exc}")
        return 2

    solution = result.solution if args.show_solution else None
    print(render_text(result.maze, start_x=args.start, solution=solution))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
