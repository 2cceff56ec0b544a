"""MainWindow: the top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from chessneon.core.enums import Color, GameResult
from chessneon.core.types import Square
from chessneon.engine import RandomEngine
from chessneon.game.controller import GameController
from chessneon.game.state import GameState
from chessneon.ui.board_widget import BoardWidget
from chessneon.ui.control_panel import ControlPanel
from chessneon.ui.i18n import set_language, t
from chessneon.ui.settings import AppSettings
from chessneon.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


def _color_name(color: Color) -> str:
    s = t()
    return s.color_white if color == Color.WHITE else s.color_black


class MainWindow(QMainWindow):
    """Main application window for Chess Neon."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        set_language(self._settings.language)

        self._bot_timer = QTimer(self)
        self._bot_timer.setSingleShot(True)

        self._controller = GameController(
            engine=RandomEngine(seed=self._settings.bot_seed),
            on_bot_request=self._schedule_bot_move,
        )

        self._setup_ui()
        self._connect_signals()
        self._apply_settings()

        self._controller.new_game(vs_bot=self._settings.bot_enabled)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(8)

        self._status_label = QLabel()
        root.addWidget(self._status_label)

        self._board_widget = BoardWidget()
        root.addWidget(self._board_widget, stretch=1)

        self._control_panel = ControlPanel()
        root.addWidget(self._control_panel)

    def _connect_signals(self) -> None:
        self._board_widget.square_clicked.connect(self._on_square_clicked)
        self._control_panel.reset_clicked.connect(self._on_reset)
        self._control_panel.bot_toggled.connect(self._on_bot_toggled)
        self._bot_timer.timeout.connect(self._on_bot_timeout)

        events = self._controller.events
        events.on_state_changed.append(self._on_state_changed)
        events.on_game_over.append(self._on_game_over)

    def _apply_settings(self) -> None:
        s = self._settings
        self._board_widget.set_theme(BoardTheme.by_name(s.board_theme))
        self._board_widget.set_show_legal_moves(s.show_legal_moves)
        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        self.setWindowTitle(t().window_title)
        self._board_widget.retranslate_ui()
        self._control_panel.retranslate_ui()
        self._update_status()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    @property
    def control_panel(self) -> ControlPanel:
        return self._control_panel

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_square_clicked(self, sq: Square) -> None:
        self._controller.click_square(sq)

    def _on_reset(self) -> None:
        self._bot_timer.stop()
        self._controller.new_game()

    def _on_bot_toggled(self) -> None:
        self._controller.toggle_bot()

    def _schedule_bot_move(self, _state: GameState) -> None:
        self._bot_timer.start(self._settings.bot_delay_ms)

    def _on_bot_timeout(self) -> None:
        self._controller.play_bot_move()

    # ── Controller events ────────────────────────────────────────────────

    def _on_state_changed(self, state: GameState) -> None:
        ctrl = self._controller
        self._board_widget.set_board(state.board, ctrl.selected, ctrl.targets)
        self._control_panel.set_bot_enabled(ctrl.bot_enabled)
        self._update_status()

    def _on_game_over(self, result: GameResult) -> None:
        _LOGGER.info("Game over: %s", result.name)
        self._update_status()

    def _update_status(self) -> None:
        s = t()
        state = self._controller.state
        if state.winner is not None:
            text = s.status_winner.format(
                color=_color_name(state.winner),
                loser=_color_name(state.winner.opposite).lower(),
            )
        else:
            text = s.status_turn.format(color=_color_name(state.side_to_move))
            if self._controller.bot_enabled and state.side_to_move == Color.BLACK:
                text += s.status_bot_suffix
        self._status_label.setText(text)
