"""Turn-based versus match between a human player and the opponent.

The match owns everything the opponent scheduler leaves to its caller:
scores, whose turn it is, the per-turn timer with its missed-turn penalty
and the global time limit. All timing goes through a timer source, so a
:class:`~wordsearch.engine.clock.VirtualClock` makes a whole match
deterministic.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..core.constants import (
    BASE_TURN_SECONDS,
    MIN_TURN_SECONDS,
    MISSED_TURN_PENALTY,
    TURN_SECONDS_PER_FIND,
    Outcome,
    Side,
    level_settings,
)
from ..core.exceptions import ConfigurationError, MatchStateError
from ..core.models import FoundWord, Point, WordLocation
from ..utils.logger import get_logger
from .clock import TimerHandle, TimerSource
from .grid import GridState
from .opponent import OpponentConfig, OpponentScheduler


LOGGER = get_logger(__name__)


class SelectionResult(str, Enum):
    FOUND = "FOUND"
    ALREADY_FOUND = "ALREADY_FOUND"
    WRONG = "WRONG"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    INACTIVE = "INACTIVE"


class EventKind(str, Enum):
    STARTED = "STARTED"
    WORD_FOUND = "WORD_FOUND"
    TURN_MISSED = "TURN_MISSED"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True)
class MatchEvent:
    kind: EventKind
    time: float
    side: Optional[Side] = None
    word: Optional[str] = None
    points: int = 0

    def describe(self) -> str:
        stamp = f"[{self.time:7.2f}s]"
        if self.kind is EventKind.WORD_FOUND:
            return f"{stamp} {self.side.value} found {self.word} (+{self.points})"
        if self.kind is EventKind.TURN_MISSED:
            return f"{stamp} {self.side.value.title()} missed the turn, {self.side.other.value} +{self.points}"
        return f"{stamp} {self.kind.value}"


@dataclass
class MatchConfig:
    level: int = 1
    time_limit: Optional[float] = None
    base_turn_seconds: float = BASE_TURN_SECONDS
    min_turn_seconds: float = MIN_TURN_SECONDS
    turn_seconds_per_find: float = TURN_SECONDS_PER_FIND
    missed_turn_penalty: int = MISSED_TURN_PENALTY
    opponent: OpponentConfig = field(default_factory=OpponentConfig)

    def __post_init__(self) -> None:
        if self.min_turn_seconds <= 0 or self.base_turn_seconds < self.min_turn_seconds:
            raise ConfigurationError("Turn seconds must be positive with base >= minimum")
        if self.time_limit is not None and self.time_limit <= 0:
            raise ConfigurationError("time_limit must be positive")
        if self.missed_turn_penalty < 0:
            raise ConfigurationError("missed_turn_penalty must be non-negative")

    def resolved_time_limit(self) -> float:
        if self.time_limit is not None:
            return self.time_limit
        return level_settings(self.level).time_limit


class VersusMatch:
    """One round of player-versus-opponent on a generated grid."""

    def __init__(
        self,
        state: GridState,
        timers: TimerSource,
        config: Optional[MatchConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.state = state
        self.timers = timers
        self.config = config or MatchConfig()
        self.words: List[str] = list(state.placed_words)
        self.turn = Side.PLAYER
        self.active = False
        self.finished = False
        self.outcome: Optional[Outcome] = None
        self.elapsed = 0.0
        self.scores: Dict[Side, int] = {Side.PLAYER: 0, Side.OPPONENT: 0}
        self.found: Dict[Side, List[str]] = {Side.PLAYER: [], Side.OPPONENT: []}
        self.locations: Dict[Side, List[WordLocation]] = {Side.PLAYER: [], Side.OPPONENT: []}
        self.events: List[MatchEvent] = []
        self.opponent = OpponentScheduler(
            timers,
            self._on_opponent_word,
            config=self.config.opponent,
            rng=rng,
        )
        self._turn_handle: Optional[TimerHandle] = None
        self._game_handle: Optional[TimerHandle] = None
        self._clock_offset = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        if self.finished:
            raise MatchStateError("Match already finished")
        if self.active:
            raise MatchStateError("Match already started")
        self.active = True
        self._clock_offset = self._now()
        self._record(EventKind.STARTED)
        LOGGER.info("Match started with %d words", len(self.words))
        if not self.words:
            self._finish()
            return
        self._game_handle = self.timers.call_later(
            self.config.resolved_time_limit(), self._on_time_up
        )
        self._begin_turn(Side.PLAYER)

    def stop(self) -> None:
        """End the match early; the current scores decide the outcome."""

        if self.active:
            self._finish()

    # ------------------------------------------------------------------
    # Player input
    # ------------------------------------------------------------------
    def submit_selection(self, start: Point, end: Point) -> SelectionResult:
        if not self.active:
            return SelectionResult.INACTIVE
        if self.turn is not Side.PLAYER:
            return SelectionResult.NOT_YOUR_TURN
        location = self.state.match_selection(start, end)
        if location is None:
            return SelectionResult.WRONG
        if location.word in self.found_words:
            return SelectionResult.ALREADY_FOUND
        self._award(Side.PLAYER, location)
        return SelectionResult.FOUND

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def found_words(self) -> List[str]:
        return self.found[Side.PLAYER] + self.found[Side.OPPONENT]

    @property
    def remaining_words(self) -> List[str]:
        taken = set(self.found_words)
        return [word for word in self.words if word not in taken]

    def turn_seconds(self) -> float:
        total = len(self.found_words)
        return max(
            self.config.min_turn_seconds,
            self.config.base_turn_seconds - self.config.turn_seconds_per_find * total,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _on_opponent_word(self, found: FoundWord) -> None:
        if not self.active or self.turn is not Side.OPPONENT:
            return
        if found.word in self.found_words:
            return
        location = self.state.locate(found.word) or found.to_location()
        self._award(Side.OPPONENT, location)

    def _award(self, side: Side, location: WordLocation) -> None:
        points = len(location.word)
        self.found[side].append(location.word)
        self.locations[side].append(location)
        self.scores[side] += points
        self._record(EventKind.WORD_FOUND, side=side, word=location.word, points=points)
        LOGGER.info("%s found %s (+%d)", side.value, location.word, points)
        if not self.remaining_words:
            self._finish()
            return
        self._begin_turn(side.other)

    def _begin_turn(self, side: Side) -> None:
        self._cancel(self._turn_handle)
        self.turn = side
        self._turn_handle = self.timers.call_later(self.turn_seconds(), self._on_turn_expired)
        self._sync_opponent()

    def _on_turn_expired(self) -> None:
        self._turn_handle = None
        if not self.active:
            return
        missed = self.turn
        penalty = self.config.missed_turn_penalty
        self.scores[missed.other] += penalty
        self._record(EventKind.TURN_MISSED, side=missed, points=penalty)
        LOGGER.info("%s missed the turn; %s +%d", missed.value, missed.other.value, penalty)
        self._begin_turn(missed.other)

    def _on_time_up(self) -> None:
        self._game_handle = None
        if self.active:
            LOGGER.info("Match time limit reached")
            self._finish()

    def _finish(self) -> None:
        self.active = False
        self.finished = True
        self._cancel(self._turn_handle)
        self._cancel(self._game_handle)
        self._turn_handle = None
        self._game_handle = None
        player, opponent = self.scores[Side.PLAYER], self.scores[Side.OPPONENT]
        if player > opponent:
            self.outcome = Outcome.VICTORY
        elif opponent > player:
            self.outcome = Outcome.DEFEAT
        else:
            self.outcome = Outcome.DRAW
        self._record(EventKind.GAME_OVER)
        LOGGER.info("Match over: %s (%d-%d)", self.outcome.value, player, opponent)
        self._sync_opponent()

    def _sync_opponent(self) -> None:
        self.opponent.update(
            grid=self.state.grid,
            words=self.words,
            own_found=self.found[Side.OPPONENT],
            opponent_found=self.found[Side.PLAYER],
            is_turn=self.active and self.turn is Side.OPPONENT,
            game_active=self.active,
        )

    def _record(self, kind: EventKind, side: Optional[Side] = None, word: Optional[str] = None, points: int = 0) -> None:
        self.elapsed = self._now() - self._clock_offset
        self.events.append(MatchEvent(kind=kind, time=self.elapsed, side=side, word=word, points=points))

    def _now(self) -> float:
        # VirtualClock exposes ``now``; asyncio loops expose ``time()``.
        now = getattr(self.timers, "now", None)
        if isinstance(now, (int, float)):
            return float(now)
        time_fn = getattr(self.timers, "time", None)
        return float(time_fn()) if callable(time_fn) else 0.0

    @staticmethod
    def _cancel(handle: Optional[TimerHandle]) -> None:
        if handle is not None:
            handle.cancel()
