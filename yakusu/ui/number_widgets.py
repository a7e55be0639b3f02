"""Quiz UI: current-number badge and divisor button grid."""

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QGridLayout, QLabel, QPushButton, QSizePolicy, QWidget

from yakusu.core.game import Phase
from yakusu.ui.colors import MARK_COLORS, QuizColors, blend_hex
from yakusu.ui.models import DivisorButtonState


class HeroNumberLabel(QLabel):
    """Large circle with the current number; tinted by game phase."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)
        self.setFixedSize(140, 140)
        self._phase = Phase.READY
        self._apply_style()

    def set_number(self, number: int, phase: Phase) -> None:
        self.setText(str(number))
        if phase is not self._phase:
            self._phase = phase
            self._apply_style()

    def _apply_style(self) -> None:
        if self._phase is Phase.LEVEL_TRANSITION:
            light, dark, size = blend_hex(QuizColors.SUCCESS, "#FFFFFF", 0.3), QuizColors.SUCCESS, 60
        elif self._phase is Phase.GAME_OVER:
            light, dark, size = blend_hex(QuizColors.ERROR, "#FFFFFF", 0.3), QuizColors.ERROR, 52
        else:
            light, dark, size = QuizColors.PRIMARY_LIGHT, QuizColors.PRIMARY, 52
        self.setStyleSheet(
            f"""
            QLabel {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 {light}, stop:1 {dark});
                color: white;
                border-radius: 70px;
                font-size: {size}px;
                font-weight: 900;
            }}
            """
        )


def _button_style(state: DivisorButtonState) -> str:
    if state.mark in MARK_COLORS:
        fill, ring = MARK_COLORS[state.mark]
        return f"""
            QPushButton {{
                background: {fill};
                color: white;
                border: 4px solid {ring};
                border-radius: 14px;
                font-size: 18px;
                font-weight: 800;
            }}
        """
    if state.selected:
        background, color, border = QuizColors.PRIMARY, "white", QuizColors.PRIMARY_DARK
    else:
        background, color, border = "#ffffff", QuizColors.PRIMARY, "#b0bec5"
    hover = blend_hex(background, QuizColors.PRIMARY_LIGHT, 0.25)
    disabled_color = color if state.selected else QuizColors.TEXT_MUTED
    return f"""
        QPushButton {{
            background: {background};
            color: {color};
            border: 2px solid {border};
            border-radius: 14px;
            font-size: 18px;
            font-weight: 700;
        }}
        QPushButton:hover {{ background: {hover}; }}
        QPushButton:disabled {{ color: {disabled_color}; }}
    """


class DivisorButtonGrid(QWidget):
    """Grid of numbered buttons; emits ``toggled(value)`` on click."""

    toggled = Signal(int)

    COLUMNS = 10

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._layout = QGridLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(10)
        self._buttons: List[QPushButton] = []

    def set_buttons(self, states: List[DivisorButtonState]) -> None:
        """Redraw the grid, rebuilding it only when the button count changes."""
        if len(states) != len(self._buttons):
            self._rebuild(len(states))
        for button, state in zip(self._buttons, states):
            button.setEnabled(state.enabled)
            button.setStyleSheet(_button_style(state))
            button.setCursor(Qt.PointingHandCursor if state.enabled else Qt.ArrowCursor)

    def _rebuild(self, count: int) -> None:
        for button in self._buttons:
            self._layout.removeWidget(button)
            button.deleteLater()
        self._buttons = []
        for i in range(count):
            value = i + 1
            button = QPushButton(str(value), self)
            button.setObjectName(f"btn-{value}")
            button.setMinimumSize(56, 56)
            button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
            button.clicked.connect(lambda checked=False, _v=value: self.toggled.emit(_v))
            self._layout.addWidget(button, i // self.COLUMNS, i % self.COLUMNS)
            self._buttons.append(button)
