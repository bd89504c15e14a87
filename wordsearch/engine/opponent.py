"""Automated opponent that plays turns through the bounded solver.

The game loop reports its state through :meth:`OpponentScheduler.update`.
When the opponent owns the turn and the game is active, it "thinks" for a
random delay, then runs one budgeted search and reports the word it found.
Losing the turn or deactivating the game cancels a pending move
synchronously, so no stale move is ever reported.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..core.constants import (
    DEFAULT_MAX_THINKING_DELAY,
    DEFAULT_MIN_THINKING_DELAY,
    DEFAULT_OPPONENT_BUDGET,
    OpponentState,
)
from ..core.exceptions import ConfigurationError
from ..core.models import FoundWord
from ..utils.logger import get_logger
from .clock import TimerHandle, TimerSource
from .grid import LetterGrid
from .solver import WordSearchSolver


LOGGER = get_logger(__name__)


@dataclass
class OpponentConfig:
    min_thinking_delay: float = DEFAULT_MIN_THINKING_DELAY
    max_thinking_delay: float = DEFAULT_MAX_THINKING_DELAY
    search_budget: int = DEFAULT_OPPONENT_BUDGET

    def __post_init__(self) -> None:
        if self.min_thinking_delay < 0:
            raise ConfigurationError("min_thinking_delay must be non-negative")
        if self.max_thinking_delay < self.min_thinking_delay:
            raise ConfigurationError(
                f"Thinking delay range is inverted: "
                f"{self.min_thinking_delay} > {self.max_thinking_delay}"
            )
        if self.search_budget < 0:
            raise ConfigurationError("search_budget must be non-negative")


class OpponentScheduler:
    """Turn-gated, cancellable driver around :meth:`WordSearchSolver.find_next_word`."""

    def __init__(
        self,
        timers: TimerSource,
        on_word_found: Callable[[FoundWord], None],
        config: Optional[OpponentConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.timers = timers
        self.on_word_found = on_word_found
        self.config = config or OpponentConfig()
        self.rng = rng or random.Random()
        self.state = OpponentState.IDLE
        self.last_result: Optional[FoundWord] = None
        self._grid: Optional[LetterGrid] = None
        self._words: Sequence[str] = ()
        self._own_found: Sequence[str] = ()
        self._opponent_found: Sequence[str] = ()
        self._is_turn = False
        self._game_active = False
        self._solver: Optional[WordSearchSolver] = None
        self._handle: Optional[TimerHandle] = None
        self._generation = 0

    # ------------------------------------------------------------------
    # Inputs from the game loop
    # ------------------------------------------------------------------
    def update(
        self,
        *,
        grid: Optional[LetterGrid] = None,
        words: Optional[Sequence[str]] = None,
        own_found: Optional[Sequence[str]] = None,
        opponent_found: Optional[Sequence[str]] = None,
        is_turn: Optional[bool] = None,
        game_active: Optional[bool] = None,
    ) -> None:
        """Apply whichever inputs changed and re-evaluate the turn state."""

        board_changed = False
        if grid is not None and grid is not self._grid:
            self._grid = grid
            board_changed = True
        if words is not None and words is not self._words:
            self._words = words
            board_changed = True
        if own_found is not None:
            self._own_found = own_found
        if opponent_found is not None:
            self._opponent_found = opponent_found
        if is_turn is not None:
            self._is_turn = is_turn
        if game_active is not None:
            self._game_active = game_active

        if board_changed:
            self._rebuild_solver()
        self._reconcile()

    def cancel(self) -> None:
        """Drop any pending move without waiting for a state change."""

        self._cancel_pending()
        self.state = self._resting_state()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def solver(self) -> Optional[WordSearchSolver]:
        return self._solver

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------
    def _rebuild_solver(self) -> None:
        # A new board invalidates any move computed against the old one.
        self._cancel_pending()
        if self.state is not OpponentState.IDLE:
            self.state = OpponentState.WAITING_FOR_TURN
        if self._grid is None or not self._words:
            self._solver = None
            return
        self._solver = WordSearchSolver(self._grid, self._words, rng=self.rng)
        LOGGER.debug("Opponent solver rebuilt for %d words", len(self._words))

    def _reconcile(self) -> None:
        if not self._game_active or self._solver is None or not self._is_turn:
            if self._handle is not None:
                LOGGER.debug("Opponent move cancelled before it fired")
            self._cancel_pending()
            self.state = self._resting_state()
            return
        if self.state in (OpponentState.THINKING, OpponentState.ACTED):
            return
        self._arm()

    def _arm(self) -> None:
        self._cancel_pending()
        delay = self.rng.uniform(self.config.min_thinking_delay, self.config.max_thinking_delay)
        self._generation += 1
        generation = self._generation
        self._handle = self.timers.call_later(delay, lambda: self._act(generation))
        self.state = OpponentState.THINKING
        LOGGER.debug("Opponent thinking for %.2fs", delay)

    def _act(self, generation: int) -> None:
        if generation != self._generation or self.state is not OpponentState.THINKING:
            return
        self._handle = None
        self.state = OpponentState.ACTED
        if self._solver is None:
            return
        already_found = list(self._own_found) + list(self._opponent_found)
        result = self._solver.find_next_word(already_found, self.config.search_budget)
        self.last_result = result
        if result is None:
            LOGGER.info("Opponent found nothing within %d steps", self.config.search_budget)
            return
        LOGGER.info("Opponent found %s", result.word)
        self.on_word_found(result)

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._generation += 1

    def _resting_state(self) -> OpponentState:
        if not self._game_active or self._solver is None:
            return OpponentState.IDLE
        if self._is_turn and self.state is OpponentState.ACTED:
            return OpponentState.ACTED
        return OpponentState.WAITING_FOR_TURN
