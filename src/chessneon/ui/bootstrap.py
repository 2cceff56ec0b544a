"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

from chessneon.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_LEVEL_ENV = "CHESSNEON_LOG_LEVEL"


def configure_logging(level: str | None = None) -> None:
    """Set up root logging; *level* defaults to ``$CHESSNEON_LOG_LEVEL`` or WARNING."""
    name = (level or os.environ.get(_LOG_LEVEL_ENV) or "WARNING").upper()
    numeric = logging.getLevelName(name)
    known = isinstance(numeric, int)
    logging.basicConfig(
        level=numeric if known else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not known:
        _LOGGER.warning("Unknown log level %r, using WARNING", name)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chessneon.ui.styles.theme import APP_STYLE

    app.setApplicationName("Chess Neon")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chessneon.ui.main_window import MainWindow

    configure_logging()
    try:
        settings = settings or AppSettings.from_env()
    except ValueError as exc:
        _LOGGER.warning("Ignoring invalid settings: %s", exc)
        settings = AppSettings()

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()
