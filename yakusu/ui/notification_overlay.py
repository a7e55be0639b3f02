"""In-window notification overlay (start, level up, game over)."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, QEvent, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from yakusu.core.game import Notification, Severity
from yakusu.ui.colors import SEVERITY_COLORS, QuizColors, blend_hex

_SEVERITY_ICONS = {
    Severity.INFO: "i",
    Severity.SUCCESS: "✓",
    Severity.ERROR: "✕",
}


def _overlay_background(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.2);")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setCursor(Qt.CursorShape.ArrowCursor)
    overlay_bg.setMinimumSize(1, 1)
    overlay_bg.mousePressEvent = lambda e: on_click()
    return overlay_bg


class NotificationOverlay(QWidget):
    """Dismissible card with a title, detail text and a severity accent.

    ``closed`` fires when the player clicks OK or the dimmed background.
    """

    closed = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        main_layout.addWidget(_overlay_background(self, self._dismiss), 0, 0)

        self._container = QFrame()
        self._container.setObjectName("notificationContainer")
        self._container.setMinimumWidth(400)
        self._container.setMaximumWidth(480)
        shadow = QGraphicsDropShadowEffect(self._container)
        shadow.setBlurRadius(20)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(0, 80, 100, 25))
        self._container.setGraphicsEffect(shadow)

        content = QVBoxLayout(self._container)
        content.setContentsMargins(28, 24, 28, 24)
        content.setSpacing(18)

        header = QHBoxLayout()
        header.setSpacing(12)
        self._icon = QLabel()
        self._icon.setFixedSize(44, 44)
        self._icon.setAlignment(Qt.AlignCenter)
        header.addWidget(self._icon, 0)
        self._title = QLabel()
        header.addWidget(self._title, 0)
        header.addStretch(1)
        content.addLayout(header)

        self._detail = QLabel()
        self._detail.setStyleSheet(f"color: {QuizColors.TEXT_PRIMARY}; font-size: 14px; font-weight: 500;")
        self._detail.setWordWrap(True)
        content.addWidget(self._detail, 0)

        self._ok_btn = QPushButton("OK")
        self._ok_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self._ok_btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self._ok_btn.clicked.connect(self._dismiss)
        content.addWidget(self._ok_btn, 0)

        main_layout.addWidget(self._container, 0, 0, 1, 1, Qt.AlignCenter)
        self._apply_accent(QuizColors.INFO)

    def show_notification(self, notification: Notification) -> None:
        self._title.setText(notification.title)
        self._detail.setText(notification.detail)
        self._icon.setText(_SEVERITY_ICONS[notification.severity])
        self._apply_accent(SEVERITY_COLORS[notification.severity])
        self._update_geometry()
        self.raise_()
        self.show()

    def _dismiss(self) -> None:
        self.hide()
        self.closed.emit()

    def _apply_accent(self, accent: str) -> None:
        self._container.setStyleSheet(
            f"""
            QFrame#notificationContainer {{
                background: #ffffff;
                border: 1px solid rgba(0, 131, 143, 0.12);
                border-top: 4px solid {accent};
                border-radius: 20px;
            }}
            """
        )
        self._icon.setStyleSheet(
            f"""
            QLabel {{
                background: {blend_hex(accent, "#FFFFFF", 0.85)};
                color: {accent};
                border-radius: 12px;
                font-size: 22px;
                font-weight: 900;
            }}
            """
        )
        self._title.setStyleSheet(f"color: {accent}; font-size: 18px; font-weight: 800;")
        self._ok_btn.setStyleSheet(
            f"""
            QPushButton {{
                background: {accent};
                color: white;
                padding: 10px 16px;
                border: none;
                border-radius: 12px;
                font-weight: 600;
                font-size: 13px;
            }}
            QPushButton:hover {{ background: {blend_hex(accent, "#000000", 0.15)}; }}
            """
        )

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._update_geometry()

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)
