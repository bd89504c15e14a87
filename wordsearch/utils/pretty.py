"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, Optional, Set

from ..core.models import Point
from ..engine.grid import line_between

if TYPE_CHECKING:
    from ..core.models import FoundWord
    from ..engine.grid import GridState, LetterGrid
    from ..engine.match import VersusMatch


def format_grid(grid: LetterGrid, highlight: Optional[Set[Point]] = None) -> str:
    """Render the grid with row/column headers; highlighted cells are bracketed."""

    highlight = highlight or set()
    width = grid.cols
    header_cells = [f"{c:>3}" for c in range(width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (3 * width))
    for r in range(grid.rows):
        rendered = []
        for c in range(width):
            letter = grid.letter(r, c)
            rendered.append(f"[{letter}]" if Point(r, c) in highlight else f" {letter} ")
        lines.append(f"{r:>2} |" + "".join(rendered))
    return "\n".join(lines)


def print_grid_state(state: GridState, *, show_answers: bool = False, stream=None) -> None:
    """Print a generated puzzle followed by its word list."""

    stream = stream or sys.stdout
    highlight: Set[Point] = set()
    if show_answers:
        for location in state.words:
            highlight.update(line_between(location.start, location.end) or ())
    print(format_grid(state.grid, highlight), file=stream)
    print("", file=stream)
    print(f"Words ({len(state.words)}):", file=stream)
    for location in state.words:
        print(
            f"  {location.word:<16} ({location.start.row},{location.start.col})"
            f" -> ({location.end.row},{location.end.col})",
            file=stream,
        )
    if state.dropped:
        print(f"Dropped ({len(state.dropped)}): {', '.join(state.dropped)}", file=stream)


def print_found_words(found: Iterable[FoundWord], *, stream=None) -> None:
    stream = stream or sys.stdout
    found = list(found)
    print(f"Found {len(found)} words:", file=stream)
    for item in found:
        trail = " ".join(f"{p.row},{p.col}" for p in item.path)
        print(f"  {item.word:<16} {trail}", file=stream)


def print_match_summary(match: VersusMatch, *, stream=None) -> None:
    stream = stream or sys.stdout
    for event in match.events:
        print(event.describe(), file=stream)
    print("", file=stream)
    for side, score in match.scores.items():
        words = ", ".join(match.found[side]) or "-"
        print(f"{side.value:<9} {score:>4}  {words}", file=stream)
    if match.outcome is not None:
        print(f"Outcome: {match.outcome.value}", file=stream)
