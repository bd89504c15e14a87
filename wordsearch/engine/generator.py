"""Word search grid generation.

Words are placed greedily, longest first, on random straight lines. A word
that finds no conflict-free line within the retry budget is dropped from
the round; callers should treat ``GridState.words`` as the authoritative
list of words to find.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..core.constants import (
    ALPHABET,
    DEFAULT_COLS,
    DEFAULT_PLACEMENT_ATTEMPTS,
    DEFAULT_ROWS,
    PLACEMENT_STEPS,
    Direction,
)
from ..core.exceptions import ConfigurationError
from ..core.models import Point, WordLocation
from ..data.normalization import blank_words, unique_words
from ..utils.logger import get_logger
from .grid import GridState, LetterGrid


LOGGER = get_logger(__name__)

Buffer = List[List[Optional[str]]]


@dataclass
class GeneratorConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    directions: Tuple[Direction, ...] = field(default_factory=lambda: tuple(Direction))
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ConfigurationError(
                f"Grid dimensions must be non-negative, got {self.rows}x{self.cols}"
            )
        if self.placement_attempts < 0:
            raise ConfigurationError("placement_attempts must be non-negative")
        if not self.directions:
            raise ConfigurationError("At least one placement direction is required")


class WordSearchGenerator:
    """Places words on a letter grid and fills the rest with noise."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.rng = rng or random.Random(self.config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(
        self,
        words: Sequence[str],
        rows: Optional[int] = None,
        cols: Optional[int] = None,
    ) -> GridState:
        rows = self.config.rows if rows is None else rows
        cols = self.config.cols if cols is None else cols
        if rows < 0 or cols < 0:
            raise ConfigurationError(f"Grid dimensions must be non-negative, got {rows}x{cols}")

        words = list(words)
        buffer: Buffer = [[None] * cols for _ in range(rows)]
        ordered = sorted(unique_words(words), key=len, reverse=True)
        LOGGER.debug("Placing %d words on a %dx%d grid", len(ordered), rows, cols)

        placed: List[WordLocation] = []
        dropped: List[str] = []
        for word in blank_words(words):
            LOGGER.warning("Word has no letters after normalization: %r", word)
            dropped.append(word)
        for word in ordered:
            location = self._place_word(buffer, word, rows, cols)
            if location is None:
                LOGGER.warning("Could not place word: %s", word)
                dropped.append(word)
                continue
            placed.append(location)

        self._fill_empty_cells(buffer)
        grid = LetterGrid(buffer, cols=cols)
        LOGGER.info(
            "Generated %dx%d grid with %d/%d words placed",
            rows,
            cols,
            len(placed),
            len(ordered),
        )
        return GridState(grid=grid, words=placed, dropped=dropped)

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def _place_word(self, buffer: Buffer, word: str, rows: int, cols: int) -> Optional[WordLocation]:
        if rows == 0 or cols == 0:
            return None
        for _ in range(self.config.placement_attempts):
            direction = self.rng.choice(self.config.directions)
            start = Point(self.rng.randrange(rows), self.rng.randrange(cols))
            if self._can_place(buffer, word, start, direction, rows, cols):
                end = self._insert(buffer, word, start, direction)
                return WordLocation(word=word, start=start, end=end)
        return None

    @staticmethod
    def _can_place(
        buffer: Buffer,
        word: str,
        start: Point,
        direction: Direction,
        rows: int,
        cols: int,
    ) -> bool:
        dr, dc = PLACEMENT_STEPS[direction]
        end = start.offset(dr, dc, len(word) - 1)
        if not (0 <= end.row < rows and 0 <= end.col < cols):
            return False
        for index, letter in enumerate(word):
            cell = start.offset(dr, dc, index)
            existing = buffer[cell.row][cell.col]
            if existing is not None and existing != letter:
                return False
        return True

    @staticmethod
    def _insert(buffer: Buffer, word: str, start: Point, direction: Direction) -> Point:
        dr, dc = PLACEMENT_STEPS[direction]
        for index, letter in enumerate(word):
            cell = start.offset(dr, dc, index)
            buffer[cell.row][cell.col] = letter
        return start.offset(dr, dc, len(word) - 1)

    def _fill_empty_cells(self, buffer: Buffer) -> None:
        for row in buffer:
            for col, letter in enumerate(row):
                if letter is None:
                    row[col] = self.rng.choice(ALPHABET)


def generate_grid(
    words: Sequence[str],
    rows: int,
    cols: int,
    rng: Optional[random.Random] = None,
) -> GridState:
    """Convenience wrapper around :class:`WordSearchGenerator`."""

    return WordSearchGenerator(GeneratorConfig(rows=rows, cols=cols), rng=rng).generate(words)
