from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Set

from yakusu.core.config import GameConfig
from yakusu.core.divisors import button_range, divisors_of
from yakusu.core.score import ScoreBackend

logger = logging.getLogger(__name__)

Scheduler = Callable[[int, Callable[[], None]], None]
Listener = Callable[[], None]


class Phase(Enum):
    READY = "ready"
    EVALUATING = "evaluating"
    LEVEL_TRANSITION = "level_transition"
    GAME_OVER = "game_over"


class Severity(Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class ButtonMark(Enum):
    NONE = "none"
    MISSED = "missed"  # a divisor the player left unselected
    WRONG = "wrong"  # a non-divisor the player selected


@dataclass(frozen=True)
class Notification:
    title: str
    detail: str
    severity: Severity = Severity.INFO


@dataclass
class GameState:
    """Everything the renderer needs to draw one frame of the quiz."""

    current_number: int = 1
    selected: Set[int] = field(default_factory=set)
    correct: Set[int] = field(default_factory=set)
    active: bool = True
    phase: Phase = Phase.READY
    best_level: int = 0


def _run_now(_delay_ms: int, callback: Callable[[], None]) -> None:
    callback()


class GameController:
    """Owns the GameState and applies every transition of the quiz.

    The UI forwards raw events (``toggle``, ``check``, ``restart``,
    ``dismiss_notification``) and redraws from ``state`` and
    ``notification`` whenever a subscribed listener fires. Events that are
    not valid in the current phase are ignored and return ``False``.

    ``schedule(delay_ms, callback)`` runs the level-up continuation after
    the cosmetic delay; the default runs it immediately.
    """

    def __init__(
        self,
        score_store: ScoreBackend,
        config: Optional[GameConfig] = None,
        schedule: Optional[Scheduler] = None,
    ) -> None:
        self._config = config or GameConfig()
        self._score_store = score_store
        self._schedule = schedule or _run_now
        self._listeners: List[Listener] = []
        self._generation = 0
        self.notification: Optional[Notification] = None
        self.state = GameState(
            correct=divisors_of(1, self._config.cap),
            best_level=self._score_store.load(),
        )

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def cap(self) -> int:
        return self._config.cap

    @property
    def score(self) -> int:
        """Levels cleared in the current run."""
        return self.state.current_number - 1

    def candidates(self) -> range:
        return button_range(self.state.current_number, self.cap)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _notify(self, key: str, severity: Severity, **values: object) -> None:
        title, detail = self._config.message(key).render(**values)
        self.notification = Notification(title=title, detail=detail, severity=severity)

    def _set_number(self, number: int) -> None:
        self.state.current_number = number
        self.state.correct = divisors_of(number, self.cap)
        logger.debug(
            "Current number: %d, correct divisors (1-%d): %s",
            number,
            min(number, self.cap),
            ", ".join(str(d) for d in sorted(self.state.correct)),
        )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def start(self) -> None:
        """First game of the session: a restart with a greeting."""
        self._reset()
        self._notify("start", Severity.INFO)
        self._emit()

    def restart(self) -> None:
        self._reset()
        self._notify("restart", Severity.INFO)
        logger.info("Game restarted (best level %d)", self.state.best_level)
        self._emit()

    def _reset(self) -> None:
        # Invalidates any level-up continuation still waiting on the scheduler.
        self._generation += 1
        self.state.selected.clear()
        self._set_number(1)
        self.state.active = True
        self.state.phase = Phase.READY

    def toggle(self, value: int) -> bool:
        if self.state.phase is not Phase.READY:
            return False
        if value not in self.candidates():
            return False
        if value in self.state.selected:
            self.state.selected.remove(value)
        else:
            self.state.selected.add(value)
        self._emit()
        return True

    def check(self) -> bool:
        """Evaluate the selection. Returns False when the event was ignored."""
        if self.state.phase is not Phase.READY:
            return False
        self.state.phase = Phase.EVALUATING
        if self.state.selected == self.state.correct:
            self.state.phase = Phase.LEVEL_TRANSITION
            self._emit()
            generation = self._generation
            self._schedule(self._config.level_up_delay_ms, lambda: self._advance(generation))
        else:
            self._game_over()
        return True

    def dismiss_notification(self) -> None:
        if self.notification is None:
            return
        self.notification = None
        self._emit()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _advance(self, generation: int) -> None:
        if generation != self._generation or self.state.phase is not Phase.LEVEL_TRANSITION:
            logger.debug("Dropping stale level-up continuation")
            return
        cleared = self.state.current_number
        self._set_number(cleared + 1)
        if cleared > self.state.best_level:
            self.state.best_level = cleared
            self._score_store.save(cleared)
            logger.info("New best level: %d", cleared)
        self.state.selected.clear()
        self.state.phase = Phase.READY
        self._notify(
            "level_up",
            Severity.SUCCESS,
            level=cleared,
            number=self.state.current_number,
            count=len(self.state.correct),
        )
        logger.info("Level %d cleared", cleared)
        self._emit()

    def _game_over(self) -> None:
        self.state.active = False
        self.state.phase = Phase.GAME_OVER
        self._notify("game_over", Severity.ERROR, score=self.score)
        logger.info(
            "Game over at %d: missed %s, wrong %s",
            self.state.current_number,
            sorted(self.state.correct - self.state.selected),
            sorted(self.state.selected - self.state.correct),
        )
        self._emit()

    def classify(self, value: int) -> ButtonMark:
        is_divisor = value in self.state.correct
        is_selected = value in self.state.selected
        if is_divisor and not is_selected:
            return ButtonMark.MISSED
        if is_selected and not is_divisor:
            return ButtonMark.WRONG
        return ButtonMark.NONE
