"""CLI entrypoint for the word search engine."""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Any, Dict, List

from .core.constants import level_settings
from .core.exceptions import WordSearchError
from .engine.clock import VirtualClock
from .engine.generator import GeneratorConfig, WordSearchGenerator
from .engine.grid import LetterGrid
from .engine.match import MatchConfig, VersusMatch
from .engine.opponent import OpponentConfig
from .engine.solver import WordSearchSolver
from .utils.logger import configure_logging, get_logger
from .utils.pretty import print_found_words, print_grid_state, print_match_summary


LOGGER = get_logger(__name__)


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def collect_words(args: argparse.Namespace) -> List[str]:
    words: List[str] = []
    if args.words:
        words.extend(args.words)
    if args.words_file:
        words.extend(parse_words_file(args.words_file))
    return words


def _add_word_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Words to place or search for")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate and solve word search puzzles")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Place words on a new grid")
    generate.add_argument("--rows", type=int, default=15, help="Grid height in cells")
    generate.add_argument("--cols", type=int, default=15, help="Grid width in cells")
    generate.add_argument("--attempts", type=int, default=100, help="Placement attempts per word")
    generate.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    generate.add_argument("--json", action="store_true", help="Emit the grid state as JSON")
    generate.add_argument("--answers", action="store_true", help="Highlight placed words")
    generate.add_argument("--solve", action="store_true", help="Search the new grid and list every word found")
    generate.add_argument("--output", type=Path, help="Optional path to JSON output")
    _add_word_arguments(generate)

    solve = subparsers.add_parser("solve", help="Find words on an existing grid")
    solve.add_argument(
        "--grid-file",
        type=Path,
        required=True,
        help="Grid text, one row per line (letters may be space separated)",
    )
    solve.add_argument("--json", action="store_true", help="Emit found words as JSON")
    _add_word_arguments(solve)

    versus = subparsers.add_parser("versus", help="Simulate a round against the opponent")
    versus.add_argument("--level", type=int, default=1, help="Level preset for grid size and time")
    versus.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    versus.add_argument("--budget", type=int, default=500, help="Opponent search budget per turn")
    _add_word_arguments(versus)
    return parser


def run_generate(args: argparse.Namespace) -> int:
    words = collect_words(args)
    config = GeneratorConfig(
        rows=args.rows,
        cols=args.cols,
        placement_attempts=args.attempts,
        seed=args.seed,
    )
    state = WordSearchGenerator(config).generate(words)
    found = WordSearchSolver(state.grid, words).find_all_words() if args.solve else None
    if args.json or args.output:
        payload: Dict[str, Any] = state.to_jsonable()
        if found is not None:
            payload["found"] = [item.to_jsonable() for item in found]
        output_text = json.dumps(payload, indent=2)
        if args.output:
            args.output.write_text(output_text, encoding="utf-8")
            LOGGER.info("Grid written to %s", args.output)
        else:
            print(output_text)
    else:
        print_grid_state(state, show_answers=args.answers)
        if found is not None:
            print("")
            print_found_words(found)
    return 0


def run_solve(args: argparse.Namespace) -> int:
    grid = LetterGrid.from_text(args.grid_file.read_text(encoding="utf-8"))
    found = WordSearchSolver(grid, collect_words(args)).find_all_words()
    if args.json:
        payload: Dict[str, Any] = {"found": [item.to_jsonable() for item in found]}
        print(json.dumps(payload, indent=2))
    else:
        print_found_words(found)
    return 0


def run_versus(args: argparse.Namespace) -> int:
    settings = level_settings(args.level)
    rng = random.Random(args.seed)
    state = WordSearchGenerator(
        GeneratorConfig(rows=settings.rows, cols=settings.cols),
        rng=rng,
    ).generate(collect_words(args)[: settings.word_count])

    clock = VirtualClock()
    match = VersusMatch(
        state,
        clock,
        MatchConfig(level=args.level, opponent=OpponentConfig(search_budget=args.budget)),
        rng=rng,
    )
    print_grid_state(state)
    print("")
    match.start()
    # The scripted player never submits a selection, so every player turn times out.
    clock.advance(settings.time_limit)
    print_match_summary(match)
    return 0


COMMANDS = {
    "generate": run_generate,
    "solve": run_solve,
    "versus": run_versus,
}


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if not (args.words or args.words_file):
        parser.error("provide --words or --words-file")

    try:
        return COMMANDS[args.command](args)
    except WordSearchError as exc:
        LOGGER.error("%s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
