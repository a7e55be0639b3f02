"""Application entry point and setup for the Yakusu divisor quiz."""

import logging
import sys

from PySide6.QtCore import QTimer
from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QApplication

from yakusu.core.config import load_config
from yakusu.core.game import GameController
from yakusu.core.score import ScoreStore
from yakusu.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def configure_application_font(app: QApplication) -> None:
    """Prefer a Japanese UI font, with emoji fonts as fallbacks."""
    app_font = QFont()
    app_font.setFamilies(
        [
            "Noto Sans CJK JP",  # Linux (common)
            "Hiragino Sans",  # macOS
            "Yu Gothic UI",  # Windows
            "Meiryo",
            "Noto Color Emoji",
            "Segoe UI Emoji",
            "Apple Color Emoji",
        ]
    )
    app_font.setPointSize(11)
    app.setFont(app_font)
    QGuiApplication.setFont(app_font)

    logging.info("Application font families: %s", ", ".join(app_font.families()))


def run() -> None:
    """Initialize the application, load settings and start the quiz window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Yakusu")
    app.setApplicationDisplayName("約数クイズ")

    configure_application_font(app)

    config = load_config()
    score_store = ScoreStore(config.score_file)
    controller = GameController(score_store, config, schedule=QTimer.singleShot)
    logging.info("Loaded best level %d from %s", controller.state.best_level, score_store.file_path)

    window = MainWindow(controller)
    window.resize(1000, 800)
    window.show()
    controller.start()

    sys.exit(app.exec())
