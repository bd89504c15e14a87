"""Letter grid representation and line helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from ..core.constants import Bounds
from ..core.exceptions import GridFormatError
from ..core.models import Point, WordLocation


RowInput = Union[str, Sequence[str]]


def line_between(start: Point, end: Point) -> Optional[List[Point]]:
    """Return the cells on the straight line from ``start`` to ``end``.

    Horizontal, vertical and 45 degree diagonal lines are accepted; any
    other shape yields ``None``. A zero-length selection is a single cell.
    """

    d_row = end.row - start.row
    d_col = end.col - start.col
    if d_row and d_col and abs(d_row) != abs(d_col):
        return None
    step_r = (d_row > 0) - (d_row < 0)
    step_c = (d_col > 0) - (d_col < 0)
    length = max(abs(d_row), abs(d_col)) + 1
    return [start.offset(step_r, step_c, i) for i in range(length)]


class LetterGrid:
    """Immutable ``rows x cols`` matrix of single uppercase letters."""

    def __init__(self, cells: Sequence[Sequence[str]], cols: Optional[int] = None) -> None:
        rows = tuple(tuple(row) for row in cells)
        width = len(rows[0]) if rows else (cols or 0)
        if cols is not None and rows and cols != width:
            raise GridFormatError(f"Expected {cols} columns, got {width}")
        for index, row in enumerate(rows):
            if len(row) != width:
                raise GridFormatError(
                    f"Row {index} has {len(row)} cells, expected {width}"
                )
            for letter in row:
                if len(letter) != 1 or not letter.isalpha() or not letter.isupper():
                    raise GridFormatError(f"Invalid letter {letter!r} in row {index}")
        self._cells: Tuple[Tuple[str, ...], ...] = rows
        self.bounds = Bounds(rows=len(rows), cols=width)

    @classmethod
    def from_rows(cls, rows: Sequence[RowInput]) -> "LetterGrid":
        """Build a grid from strings (``"CAT"`` or ``"C A T"``) or letter lists."""

        parsed: List[List[str]] = []
        for row in rows:
            if isinstance(row, str):
                letters = [char for char in row if not char.isspace()]
            else:
                letters = list(row)
            parsed.append([letter.upper() for letter in letters])
        return cls(parsed)

    @classmethod
    def from_text(cls, text: str) -> "LetterGrid":
        """Parse one row per line, ignoring blank lines and ``#`` comments."""

        lines = []
        for line in text.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            lines.append(line)
        return cls.from_rows(lines)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    def letter(self, row: int, col: int) -> str:
        return self._cells[row][col]

    def letter_at(self, point: Point) -> str:
        return self._cells[point.row][point.col]

    def contains(self, point: Point) -> bool:
        return self.bounds.contains(point.row, point.col)

    def points(self) -> Iterator[Point]:
        """Yield every cell in row-major order."""

        for row in range(self.rows):
            for col in range(self.cols):
                yield Point(row, col)

    def read_line(self, start: Point, end: Point) -> Optional[str]:
        """Letters along the straight line from ``start`` to ``end``, if any."""

        cells = line_between(start, end)
        if cells is None:
            return None
        if not self.contains(start) or not self.contains(end):
            return None
        return "".join(self.letter_at(point) for point in cells)

    def to_rows(self) -> List[List[str]]:
        return [list(row) for row in self._cells]

    def to_text(self) -> str:
        return "\n".join(" ".join(row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterGrid):
            return NotImplemented
        return self.bounds == other.bounds and self._cells == other._cells

    def __hash__(self) -> int:
        return hash((self.bounds, self._cells))

    def __repr__(self) -> str:
        return f"LetterGrid(rows={self.rows}, cols={self.cols})"


@dataclass
class GridState:
    """Generator output: the filled grid and the words actually placed."""

    grid: LetterGrid
    words: List[WordLocation]
    dropped: List[str] = field(default_factory=list)

    @property
    def placed_words(self) -> List[str]:
        return [location.word for location in self.words]

    def locate(self, word: str) -> Optional[WordLocation]:
        for location in self.words:
            if location.word == word:
                return location
        return None

    def match_selection(self, start: Point, end: Point) -> Optional[WordLocation]:
        """Return the placed word whose line is ``start``-``end`` (either order)."""

        selected = self.grid.read_line(start, end)
        if selected is None:
            return None
        for location in self.words:
            if location.word not in (selected, selected[::-1]):
                continue
            if location.matches_line(start, end):
                return location
        return None

    def to_jsonable(self) -> dict:
        return {
            "rows": self.grid.rows,
            "cols": self.grid.cols,
            "grid": self.grid.to_rows(),
            "words": [location.to_jsonable() for location in self.words],
            "dropped": list(self.dropped),
        }
