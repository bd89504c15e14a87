"""Word search solver: depth-first search pruned by a prefix tree.

From every starting cell the solver extends a path one neighbour at a
time in all eight directions, never reusing a cell within a path, and
abandons a branch as soon as the letters collected so far are not a prefix
of any indexed word.

Two modes share the same traversal:

* :meth:`WordSearchSolver.find_all_words` scans start cells row-major and
  records the first occurrence of every word it completes.
* :meth:`WordSearchSolver.find_next_word` scans start cells in shuffled
  order under a global step budget and returns the first word that is not
  excluded. Small budgets sometimes miss words that are on the board,
  which is what makes a simulated opponent beatable.
"""

from __future__ import annotations

import random
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple, Union

from ..core.constants import DEFAULT_SEARCH_ATTEMPTS, NEIGHBOR_STEPS
from ..core.models import FoundWord, Point
from ..data.normalization import normalize_word
from ..utils.logger import get_logger
from .grid import LetterGrid
from .trie import LexiconIndex, TrieNode


LOGGER = get_logger(__name__)

# Called with the completed word and the current path; returns True to stop the search.
WordVisitor = Callable[[str, List[Point]], bool]


class _StepBudget:
    """Counts DFS probes against an optional limit."""

    def __init__(self, limit: Optional[int] = None) -> None:
        self.limit = limit
        self.spent = 0

    def consume(self) -> bool:
        if self.limit is not None and self.spent >= self.limit:
            return False
        self.spent += 1
        return True

    @property
    def exhausted(self) -> bool:
        return self.limit is not None and self.spent >= self.limit


class WordSearchSolver:
    """Finds words from a word list on a letter grid."""

    def __init__(
        self,
        grid: Union[LetterGrid, Sequence[Sequence[str]]],
        words: Iterable[str],
        rng: Optional[random.Random] = None,
    ) -> None:
        self.grid = grid if isinstance(grid, LetterGrid) else LetterGrid.from_rows(grid)
        self.index = LexiconIndex.from_words(words)
        self.rng = rng or random.Random()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def find_all_words(self) -> List[FoundWord]:
        """Return the first occurrence of every indexed word on the grid."""

        found: List[FoundWord] = []
        recorded: Set[str] = set()

        def record(word: str, path: List[Point]) -> bool:
            if word not in recorded:
                recorded.add(word)
                found.append(_found_word(word, path))
            return False

        budget = _StepBudget()
        for start in self.grid.points():
            self._explore(start.row, start.col, self.index.root, [], set(), budget, record)
        LOGGER.debug("Exhaustive search found %d words in %d steps", len(found), budget.spent)
        return found

    def find_next_word(
        self,
        already_found: Iterable[str] = (),
        max_attempts: int = DEFAULT_SEARCH_ATTEMPTS,
    ) -> Optional[FoundWord]:
        """Return one word not in ``already_found`` within ``max_attempts`` steps."""

        if max_attempts <= 0:
            return None
        excluded = {normalize_word(word) for word in already_found}
        hit: List[FoundWord] = []

        def take(word: str, path: List[Point]) -> bool:
            if word in excluded:
                return False
            hit.append(_found_word(word, path))
            return True

        budget = _StepBudget(max_attempts)
        for start in self._shuffled_points():
            if budget.exhausted:
                break
            if self._explore(start.row, start.col, self.index.root, [], set(), budget, take):
                break

        if hit:
            LOGGER.debug("Bounded search found %s after %d/%d steps", hit[0].word, budget.spent, max_attempts)
            return hit[0]
        LOGGER.debug("Bounded search gave up after %d/%d steps", budget.spent, max_attempts)
        return None

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def _explore(
        self,
        row: int,
        col: int,
        node: TrieNode,
        path: List[Point],
        visited: Set[Tuple[int, int]],
        budget: _StepBudget,
        visit: WordVisitor,
    ) -> bool:
        """Depth-first step into ``(row, col)``; returns True when the search must stop."""

        if not budget.consume():
            return True
        if not self.grid.bounds.contains(row, col) or (row, col) in visited:
            return False
        child = self.index.step(node, self.grid.letter(row, col))
        if child is None:
            return False

        path.append(Point(row, col))
        visited.add((row, col))
        try:
            if child.word is not None and visit(child.word, path):
                return True
            for dr, dc in NEIGHBOR_STEPS:
                if self._explore(row + dr, col + dc, child, path, visited, budget, visit):
                    return True
            return False
        finally:
            path.pop()
            visited.discard((row, col))

    def _shuffled_points(self) -> List[Point]:
        points = list(self.grid.points())
        self.rng.shuffle(points)
        return points


def _found_word(word: str, path: List[Point]) -> FoundWord:
    return FoundWord(word=word, start=path[0], end=path[-1], path=tuple(path))
