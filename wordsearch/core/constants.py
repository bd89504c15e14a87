"""Shared constants and enumerations for the word search engine."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Placement directions used by the generator."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"
    DIAGONAL_DOWN = "DIAGONAL_DOWN"
    DIAGONAL_UP = "DIAGONAL_UP"


class OpponentState(str, Enum):
    """Lifecycle states of the automated opponent."""

    IDLE = "IDLE"
    WAITING_FOR_TURN = "WAITING_FOR_TURN"
    THINKING = "THINKING"
    ACTED = "ACTED"


class Side(str, Enum):
    """Participants of a versus match."""

    PLAYER = "PLAYER"
    OPPONENT = "OPPONENT"

    @property
    def other(self) -> "Side":
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


class Outcome(str, Enum):
    """Final result of a match, seen from the player's side."""

    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"
    DRAW = "DRAW"


PLACEMENT_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}

# Row-major neighbour order: top-left, top, top-right, left, right, bottom-left, bottom, bottom-right.
NEIGHBOR_STEPS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ALPHABET = string.ascii_uppercase

DEFAULT_ROWS = 15
DEFAULT_COLS = 15
DEFAULT_PLACEMENT_ATTEMPTS = 100
DEFAULT_SEARCH_ATTEMPTS = 100

DEFAULT_MIN_THINKING_DELAY = 2.0
DEFAULT_MAX_THINKING_DELAY = 5.0
DEFAULT_OPPONENT_BUDGET = 500

BASE_TURN_SECONDS = 30.0
MIN_TURN_SECONDS = 10.0
TURN_SECONDS_PER_FIND = 2.0
MISSED_TURN_PENALTY = 10


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols


@dataclass(frozen=True)
class LevelSettings:
    """Grid size, word count and time limit for one difficulty level."""

    level: int
    rows: int
    cols: int
    word_count: int
    time_limit: float


LEVELS: Tuple[LevelSettings, ...] = (
    LevelSettings(level=1, rows=10, cols=10, word_count=5, time_limit=60.0),
    LevelSettings(level=2, rows=12, cols=12, word_count=10, time_limit=120.0),
    LevelSettings(level=3, rows=15, cols=15, word_count=15, time_limit=180.0),
)


def level_settings(level: int) -> LevelSettings:
    """Return the preset for ``level``; levels past the last preset reuse it."""

    if level <= 1:
        return LEVELS[0]
    if level >= len(LEVELS):
        last = LEVELS[-1]
        return LevelSettings(
            level=level,
            rows=last.rows,
            cols=last.cols,
            word_count=last.word_count,
            time_limit=last.time_limit,
        )
    return LEVELS[level - 1]
