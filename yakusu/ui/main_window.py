from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QColor, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from yakusu.core.game import GameController, Notification, Phase
from yakusu.ui.colors import QuizColors
from yakusu.ui.models import build_button_states, selection_heading
from yakusu.ui.notification_overlay import NotificationOverlay
from yakusu.ui.number_widgets import DivisorButtonGrid, HeroNumberLabel

logger = logging.getLogger(__name__)


def _action_button_style(start: str, stop: str) -> str:
    return f"""
        QPushButton {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {start}, stop:1 {stop});
            color: white;
            padding: 12px 24px;
            border: none;
            border-radius: 14px;
            font-weight: 700;
            font-size: 16px;
        }}
        QPushButton:hover {{ background: {stop}; }}
    """


class MainWindow(QMainWindow):
    """Single-screen quiz window.

    Renders the controller's state and forwards clicks back to it; the
    window itself holds no game state.
    """

    def __init__(self, controller: GameController) -> None:
        super().__init__()
        self._controller = controller
        self._shown_notification: Optional[Notification] = None
        self._build_ui()
        self._controller.subscribe(self._render)
        self._render()

    def _build_ui(self) -> None:
        """Construct the widget tree: header, number badge, grid, controls, overlay."""
        self.setWindowTitle("約数クイズ")
        self.setMinimumSize(900, 720)
        self.setStyleSheet(
            f"""
            QMainWindow {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {QuizColors.BG_TOP}, stop:1 {QuizColors.BG_BOTTOM});
            }}
            """
        )

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(20)

        header = QHBoxLayout()
        title = QLabel("約数クイズ")
        title.setStyleSheet(f"color: {QuizColors.PRIMARY_DARK}; font-size: 26px; font-weight: 800;")
        header.addWidget(title, 0)
        header.addStretch(1)
        self._best_level_label = QLabel()
        self._best_level_label.setStyleSheet(
            f"color: {QuizColors.TEXT_SECONDARY}; font-size: 16px; font-weight: 700;"
        )
        header.addWidget(self._best_level_label, 0)
        layout.addLayout(header)

        self._number_label = HeroNumberLabel()
        layout.addWidget(self._number_label, 0, Qt.AlignHCenter)

        card = QFrame()
        card.setObjectName("gridCard")
        card.setStyleSheet(
            f"""
            QFrame#gridCard {{
                background: {QuizColors.CARD_BG};
                border-radius: 20px;
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(26)
        shadow.setOffset(0, 10)
        shadow.setColor(QColor(15, 23, 42, 60))
        card.setGraphicsEffect(shadow)
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(20, 16, 20, 20)
        card_layout.setSpacing(14)

        self._heading = QLabel()
        self._heading.setStyleSheet(f"color: {QuizColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 700;")
        card_layout.addWidget(self._heading, 0)

        self._grid = DivisorButtonGrid()
        self._grid.toggled.connect(self._controller.toggle)
        card_layout.addWidget(self._grid, 0)
        card_layout.addStretch(1)
        layout.addWidget(card, 1)

        controls = QHBoxLayout()
        controls.addStretch(1)
        self._check_btn = QPushButton("次のレベルへ")
        self._check_btn.setStyleSheet(_action_button_style(QuizColors.PRIMARY_LIGHT, QuizColors.PRIMARY))
        self._check_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self._check_btn.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self._check_btn.clicked.connect(lambda: self._controller.check())
        controls.addWidget(self._check_btn, 0)

        self._restart_btn = QPushButton("もう一度プレイ")
        self._restart_btn.setStyleSheet(_action_button_style(QuizColors.CORAL, QuizColors.ERROR))
        self._restart_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self._restart_btn.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self._restart_btn.clicked.connect(lambda: self._controller.restart())
        controls.addWidget(self._restart_btn, 0)
        controls.addStretch(1)
        layout.addLayout(controls)

        self._notification_overlay = NotificationOverlay(central)
        self._notification_overlay.hide()
        self._notification_overlay.closed.connect(self._controller.dismiss_notification)

        QShortcut(QKeySequence(Qt.Key_Return), self, activated=self._on_return)

    def _on_return(self) -> None:
        """Enter dismisses an open notification, otherwise checks the selection."""
        if self._notification_overlay.isVisible():
            self._controller.dismiss_notification()
        elif self._controller.state.active:
            self._controller.check()

    def _render(self) -> None:
        state = self._controller.state
        self._number_label.set_number(state.current_number, state.phase)
        self._best_level_label.setText(f"最高レベル: {state.best_level}")
        self._heading.setText(selection_heading(self._controller))
        self._grid.set_buttons(build_button_states(self._controller))

        self._check_btn.setVisible(state.active)
        self._check_btn.setEnabled(state.phase is Phase.READY)
        self._restart_btn.setVisible(not state.active)

        notification = self._controller.notification
        if notification is None:
            self._shown_notification = None
            self._notification_overlay.hide()
        elif notification is not self._shown_notification:
            self._shown_notification = notification
            self._notification_overlay.show_notification(notification)

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Closing with best level %d", self._controller.state.best_level)
        super().closeEvent(event)
