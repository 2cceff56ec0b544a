"""ControlPanel: game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from chessneon.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for game actions: reset and the bot toggle."""

    reset_clicked = pyqtSignal()
    bot_toggled = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._bot_enabled = False
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._btn_reset = QPushButton()
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.clicked.connect(self.reset_clicked)
        layout.addWidget(self._btn_reset)

        self._btn_bot = QPushButton()
        self._btn_bot.setMinimumHeight(36)
        self._btn_bot.clicked.connect(self.bot_toggled)
        layout.addWidget(self._btn_bot)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_reset.setText(s.btn_reset)
        self._btn_bot.setText(s.btn_bot_off if self._bot_enabled else s.btn_bot_on)

    def set_bot_enabled(self, enabled: bool) -> None:
        """Update the toggle label to match the bot setting."""
        self._bot_enabled = enabled
        self.retranslate_ui()

    @property
    def reset_button(self) -> QPushButton:
        return self._btn_reset

    @property
    def bot_button(self) -> QPushButton:
        return self._btn_bot
