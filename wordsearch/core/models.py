"""Value types shared by the generator, solver and match driver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True)
class Point:
    """A grid coordinate."""

    row: int
    col: int

    def offset(self, dr: int, dc: int, steps: int = 1) -> "Point":
        return Point(self.row + dr * steps, self.col + dc * steps)

    def to_jsonable(self) -> dict:
        return {"row": self.row, "col": self.col}


@dataclass(frozen=True)
class WordLocation:
    """A placed word and the two endpoints of its straight line."""

    word: str
    start: Point
    end: Point

    def matches_line(self, start: Point, end: Point) -> bool:
        """True if ``start``/``end`` denote the same line, in either order."""

        forward = self.start == start and self.end == end
        reverse = self.start == end and self.end == start
        return forward or reverse

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "start": self.start.to_jsonable(),
            "end": self.end.to_jsonable(),
        }


@dataclass(frozen=True)
class FoundWord:
    """A solver hit: the word plus every cell visited to spell it."""

    word: str
    start: Point
    end: Point
    path: Tuple[Point, ...]

    def to_location(self) -> WordLocation:
        return WordLocation(word=self.word, start=self.start, end=self.end)

    def to_jsonable(self) -> dict:
        data = self.to_location().to_jsonable()
        data["path"] = [point.to_jsonable() for point in self.path]
        return data
