"""CLI entrypoint for the word grid placer."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from wordgrid.core.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from wordgrid.core.exceptions import InvalidInputError, NoSolutionFoundError
from wordgrid.data.numbers import spell_range
from wordgrid.data.words import parse_words_file, prepare_words
from wordgrid.engine.feasibility import FeasibilityConfig, check_feasibility
from wordgrid.engine.solver import BacktrackingSolver, RollbackStrategy, SolverConfig
from wordgrid.engine.validator import SolutionValidator
from wordgrid.utils.logger import configure_logging, get_logger
from wordgrid.utils.pretty import print_solution_stats

LOGGER = get_logger("wordgrid.cli")

EXIT_NO_SOLUTION = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Place words on a letter grid in any of eight directions",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Grid height in cells")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit words, placed in the given order",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=25,
        help="Without explicit words, place this many spelled-out numbers",
    )
    parser.add_argument("--start", type=int, default=0, help="First spelled-out number")
    parser.add_argument(
        "--keep-separators",
        action="store_true",
        help="Place words verbatim instead of reducing them to uppercase letters",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--rollback",
        type=str,
        choices=[strategy.value for strategy in RollbackStrategy],
        default=RollbackStrategy.CLONE.value,
        help="Board rollback strategy on backtracking",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="When no arrangement is found, confirm infeasibility with CP-SAT",
    )
    parser.add_argument(
        "--verify-timeout",
        type=float,
        default=30.0,
        help="CP-SAT time limit in seconds",
    )
    parser.add_argument("--blank", type=str, default=".", help="Glyph printed for empty cells")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_words(args: argparse.Namespace) -> List[str]:
    words: List[str] = []
    if args.words:
        words.extend(args.words)
    if args.words_file:
        words.extend(parse_words_file(args.words_file))
    if not args.words and not args.words_file:
        words = spell_range(args.start, args.count)
    return prepare_words(words, clean=not args.keep_separators)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if len(args.blank) != 1:
        parser.error("--blank must be a single character")

    try:
        words = collect_words(args)
        config = SolverConfig(
            width=args.width,
            height=args.height,
            seed=args.seed,
            rollback=RollbackStrategy(args.rollback),
        )
        solver = BacktrackingSolver(config)
    except InvalidInputError as exc:
        parser.error(str(exc))

    try:
        solution = solver.solve_or_raise(words)
    except NoSolutionFoundError as exc:
        print(f"No solution: {exc}")
        if args.verify:
            result = check_feasibility(
                words,
                args.width,
                args.height,
                FeasibilityConfig(timeout=args.verify_timeout),
            )
            print(f"CP-SAT verdict: {result.status.value}")
            if result.feasible:
                LOGGER.error("CP-SAT found an arrangement the backtracking search missed")
        return EXIT_NO_SOLUTION

    validation = SolutionValidator().validate(solution, words)
    print_solution_stats(solution, blank=args.blank)

    if args.output:
        payload = solution.to_jsonable()
        payload["validation"] = validation.messages
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Wrote %s", args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
