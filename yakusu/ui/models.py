"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from yakusu.core.game import ButtonMark, GameController, Phase


@dataclass
class DivisorButtonState:
    """UI state for a single divisor button."""

    value: int
    selected: bool
    mark: ButtonMark = ButtonMark.NONE
    enabled: bool = True


def build_button_states(controller: GameController) -> List[DivisorButtonState]:
    """Project the controller state onto the ordered button grid.

    Marks are only revealed once the game is over; every button is
    disabled outside the ready phase.
    """
    state = controller.state
    game_over = state.phase is Phase.GAME_OVER
    enabled = state.phase is Phase.READY
    return [
        DivisorButtonState(
            value=value,
            selected=value in state.selected,
            mark=controller.classify(value) if game_over else ButtonMark.NONE,
            enabled=enabled,
        )
        for value in controller.candidates()
    ]


def selection_heading(controller: GameController) -> str:
    return f"約数をすべて選択 (1〜{min(controller.state.current_number, controller.cap)})"
