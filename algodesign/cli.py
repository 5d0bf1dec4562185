"""Command line entry point: solve one of the six problems from text input."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from .problems import (
    InputError,
    solve_digit_split,
    solve_job_assignment,
    solve_kth_smallest,
    solve_pawn_paths,
    solve_selection,
    solve_ski,
)

_PROBLEMS: dict[str, tuple[Callable[[str], int], str]] = {
    "kth": (solve_kth_smallest, "k-th smallest element (divide and conquer)"),
    "select": (solve_selection, "selection problem (divide and conquer)"),
    "digits": (solve_digit_split, "digit string decomposition (dynamic programming)"),
    "ski": (solve_ski, "longest ski slope (dynamic programming)"),
    "pawn": (solve_pawn_paths, "pawn paths blocked by a horse (dynamic programming)"),
    "jobs": (solve_job_assignment, "job assignment for maximum profit (greedy)"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algodesign",
        description="Solve classic algorithm design problems from text input.",
        epilog="\n".join(f"{name}: {doc}" for name, (_, doc) in _PROBLEMS.items()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS), help="problem to solve")
    parser.add_argument(
        "input", nargs="?", default="-", help="input file, or '-' for standard input"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    solve, _ = _PROBLEMS[args.problem]
    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
    except OSError as exc:
        print(f"error: cannot read input: {exc}", file=sys.stderr)
        return 1
    try:
        result = solve(text)
    except InputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())