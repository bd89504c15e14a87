"""Word search engine: grid generation, trie-pruned solving and an automated opponent.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.WordSearchGenerator``: places words on a letter grid.
- ``wordsearch.engine.solver.WordSearchSolver``: exhaustive and budgeted word search.
- ``wordsearch.engine.opponent.OpponentScheduler``: turn-gated, cancellable automated player.
- ``wordsearch.engine.match.VersusMatch``: turn, timer and scoring driver for a round.
"""

from .core.models import FoundWord, Point, WordLocation
from .engine.clock import VirtualClock
from .engine.generator import GeneratorConfig, WordSearchGenerator, generate_grid
from .engine.grid import GridState, LetterGrid
from .engine.match import MatchConfig, VersusMatch
from .engine.opponent import OpponentConfig, OpponentScheduler
from .engine.solver import WordSearchSolver
from .engine.trie import LexiconIndex

__all__ = [
    "FoundWord",
    "GeneratorConfig",
    "GridState",
    "LetterGrid",
    "LexiconIndex",
    "MatchConfig",
    "OpponentConfig",
    "OpponentScheduler",
    "Point",
    "VersusMatch",
    "VirtualClock",
    "WordLocation",
    "WordSearchGenerator",
    "WordSearchSolver",
    "generate_grid",
]

__version__ = "0.1.0"
