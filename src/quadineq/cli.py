"""Command line entry point."""

from __future__ import annotations

import argparse
import sys

from quadineq.api import solve_inequality
from quadineq.config import get_settings
from quadineq.errors import InequalityError
from quadineq.logging_utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quadineq", description="Solve a quadratic inequality in one variable"
    )
    parser.add_argument("inequality", help='e.g. "x^2 - 3x + 2 > 0"')
    parser.add_argument(
        "--style",
        choices=("interval", "inequality"),
        default="interval",
        help="render the solution set in interval notation or as inequalities",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log pipeline steps to stderr"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        solution = solve_inequality(args.inequality, settings)
    except InequalityError as exc:
        print(exc.describe(), file=sys.stderr)
        return 1

    if args.style == "inequality":
        print(solution.as_inequality(settings))
    else:
        print(solution.as_intervals(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
