"""Tests for yakusu.ui.models – button grid projection."""

from __future__ import annotations

import pytest

from yakusu.core.config import GameConfig
from yakusu.core.game import ButtonMark, GameController, Phase
from yakusu.core.score import MemoryScoreStore
from yakusu.ui.models import DivisorButtonState, build_button_states, selection_heading


def _controller(cap: int = 40, schedule=None) -> GameController:
    c = GameController(MemoryScoreStore(), GameConfig(cap=cap), schedule=schedule)
    c.start()
    return c


def _play_to(c: GameController, number: int) -> None:
    while c.state.current_number < number:
        for v in sorted(c.state.correct):
            c.toggle(v)
        c.check()


# ===========================================================================
# DivisorButtonState dataclass
# ===========================================================================

class TestDivisorButtonState:
    def test_defaults(self):
        s = DivisorButtonState(value=3, selected=False)
        assert s.mark is ButtonMark.NONE
        assert s.enabled is True

    def test_equality(self):
        assert DivisorButtonState(2, True) == DivisorButtonState(2, True)


# ===========================================================================
# build_button_states
# ===========================================================================

class TestBuildButtonStates:
    def test_ordered_values(self):
        c = _controller()
        _play_to(c, 6)
        assert [s.value for s in build_button_states(c)] == [1, 2, 3, 4, 5, 6]

    def test_capped(self):
        c = _controller(cap=4)
        _play_to(c, 9)
        assert [s.value for s in build_button_states(c)] == [1, 2, 3, 4]

    def test_selected_flags(self):
        c = _controller()
        _play_to(c, 4)
        c.toggle(2)
        states = build_button_states(c)
        assert [s.selected for s in states] == [False, True, False, False]
        assert all(s.enabled for s in states)
        assert all(s.mark is ButtonMark.NONE for s in states)

    def test_no_marks_before_game_over(self):
        c = _controller()
        _play_to(c, 6)
        c.toggle(5)
        assert all(s.mark is ButtonMark.NONE for s in build_button_states(c))

    def test_game_over_marks_and_disabled(self):
        c = _controller()
        _play_to(c, 12)
        for v in (1, 2, 4, 5):
            c.toggle(v)
        c.check()
        states = {s.value: s for s in build_button_states(c)}
        assert states[3].mark is ButtonMark.MISSED
        assert states[6].mark is ButtonMark.MISSED
        assert states[12].mark is ButtonMark.MISSED
        assert states[5].mark is ButtonMark.WRONG
        assert states[1].mark is ButtonMark.NONE
        assert states[7].mark is ButtonMark.NONE
        assert not any(s.enabled for s in states.values())

    def test_disabled_during_transition(self):
        pending = []
        c = _controller(schedule=lambda ms, cb: pending.append(cb))
        c.toggle(1)
        c.check()
        assert c.state.phase is Phase.LEVEL_TRANSITION
        states = build_button_states(c)
        assert [s.enabled for s in states] == [False]


# ===========================================================================
# selection_heading
# ===========================================================================

class TestSelectionHeading:
    def test_below_cap(self):
        c = _controller()
        _play_to(c, 7)
        assert selection_heading(c) == "約数をすべて選択 (1〜7)"

    @pytest.mark.parametrize("cap", [3, 5])
    def test_capped(self, cap: int):
        c = _controller(cap=cap)
        _play_to(c, 8)
        assert selection_heading(c) == f"約数をすべて選択 (1〜{cap})"
