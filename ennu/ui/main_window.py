from __future__ import annotations

import random
from typing import Optional

from PySide6.QtCore import Qt, QEventLoop, QPoint, QTimer
from PySide6.QtGui import QColor, QLinearGradient, QPainter, QRadialGradient
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ennu.core.locales import Locale, LocaleRepository
from ennu.core.session import (
    Announcer,
    CountingSession,
    Feedback,
    GameStatus,
    SessionSnapshot,
)
from ennu.ui.colors import GameColors
from ennu.ui.item_widgets import CountableItemTile, OptionButton
from ennu.ui.overlays import ExitConfirmOverlay, GameOverOverlay
from ennu.ui.qt_scheduler import QtScheduler


class PlayroomBackground(QWidget):
    """Warm gradient background with soft bubbles."""

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        gradient = QLinearGradient(0, 0, self.width(), self.height())
        gradient.setColorAt(0.0, QColor(GameColors.BG_TOP))
        gradient.setColorAt(0.5, QColor(GameColors.BG_MIDDLE))
        gradient.setColorAt(1.0, QColor(GameColors.BG_BOTTOM))
        painter.fillRect(self.rect(), gradient)

        painter.setPen(Qt.NoPen)
        bubbles = [(0.85, 0.15, 200), (0.12, 0.82, 160), (0.7, 0.62, 70), (0.2, 0.3, 90)]
        for x_ratio, y_ratio, radius in bubbles:
            radial = QRadialGradient(self.width() * x_ratio, self.height() * y_ratio, radius)
            radial.setColorAt(0, QColor(255, 255, 255, 60))
            radial.setColorAt(1, QColor(255, 255, 255, 0))
            painter.setBrush(radial)
            painter.drawEllipse(QPoint(int(self.width() * x_ratio), int(self.height() * y_ratio)), radius, radius)


class OverlayConfirmPrompt:
    """Blocking yes/no prompt shown as an in-window overlay."""

    def __init__(self, overlay: ExitConfirmOverlay) -> None:
        self._overlay = overlay
        self._confirm_label = "✓"

    def set_confirm_label(self, label: str) -> None:
        self._confirm_label = label

    def confirm(self, message: str) -> bool:
        overlay = self._overlay
        overlay.set_texts(message, self._confirm_label)
        overlay.raise_()
        overlay.show()
        overlay.focus_cancel()
        confirmed = [False]

        def on_closed(ok: bool) -> None:
            confirmed[0] = ok
            loop.quit()

        loop = QEventLoop()
        overlay.closed.connect(on_closed)
        loop.exec()
        overlay.closed.disconnect(on_closed)
        return confirmed[0]


class MainWindow(QMainWindow):
    """Game window: header with round and score, countable items, answer buttons.

    The window owns the ``CountingSession`` and redraws from its snapshot
    whenever the session reports a change.
    """

    MAX_TILES = 12
    TILE_COLUMNS = 4

    def __init__(
        self,
        locales: LocaleRepository,
        announcer: Announcer,
        rng: Optional[random.Random] = None,
        locale: Locale = Locale.ZH_TW,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Ennu")
        self.setMinimumSize(900, 680)

        self._tiles: list[CountableItemTile] = []
        self._option_buttons: list[OptionButton] = []

        self._build_ui()

        self._confirm_prompt = OverlayConfirmPrompt(self._exit_overlay)
        self._session = CountingSession(
            strings=locales,
            announcer=announcer,
            confirm=self._confirm_prompt,
            scheduler=QtScheduler(self),
            rng=rng,
            locale=locale,
        )
        self._session.add_listener(self._render)
        self._session.start_game()
        QTimer.singleShot(0, self.showMaximized)

    @property
    def session(self) -> CountingSession:
        return self._session

    def _build_ui(self) -> None:
        root = PlayroomBackground()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(32, 24, 32, 32)
        layout.setSpacing(20)

        header = QHBoxLayout()
        header.setSpacing(12)
        self._round_label = QLabel()
        self._round_label.setStyleSheet(f"color: {GameColors.PRIMARY_DARK}; font-size: 24px; font-weight: 800;")
        header.addWidget(self._round_label, 0)
        header.addStretch(1)
        self._score_label = QLabel()
        self._score_label.setStyleSheet(f"color: {GameColors.PRIMARY_DARK}; font-size: 24px; font-weight: 800;")
        header.addWidget(self._score_label, 0)
        header.addSpacing(16)

        self._language_button = QPushButton()
        self._language_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._language_button.setStyleSheet(self._pill_style(GameColors.LAVENDER))
        self._language_button.clicked.connect(lambda: self._session.toggle_language())
        header.addWidget(self._language_button, 0)

        self._exit_button = QPushButton()
        self._exit_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._exit_button.setStyleSheet(self._pill_style(GameColors.CORAL))
        self._exit_button.clicked.connect(self._on_exit_clicked)
        header.addWidget(self._exit_button, 0)
        layout.addLayout(header)

        board = QFrame()
        board.setObjectName("board")
        board.setStyleSheet(
            f"""
            QFrame#board {{
                background: {GameColors.CARD_BG};
                border: 1px solid {GameColors.CARD_BORDER};
                border-radius: 24px;
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(board)
        shadow.setBlurRadius(30)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(120, 80, 0, 40))
        board.setGraphicsEffect(shadow)
        board_layout = QVBoxLayout(board)
        board_layout.setContentsMargins(24, 24, 24, 24)

        grid_host = QWidget()
        grid = QGridLayout(grid_host)
        grid.setSpacing(14)
        for i in range(self.MAX_TILES):
            tile = CountableItemTile(i)
            tile.tapped.connect(lambda index: self._session.toggle_counted(index))
            grid.addWidget(tile, i // self.TILE_COLUMNS, i % self.TILE_COLUMNS, Qt.AlignCenter)
            self._tiles.append(tile)
        board_layout.addWidget(grid_host, 1, Qt.AlignCenter)

        self._count_label = QLabel()
        self._count_label.setAlignment(Qt.AlignCenter)
        self._count_label.setStyleSheet(f"color: {GameColors.TEXT_SECONDARY}; font-size: 20px; font-weight: 700;")
        board_layout.addWidget(self._count_label, 0)
        layout.addWidget(board, 1)

        self._feedback_label = QLabel()
        self._feedback_label.setAlignment(Qt.AlignCenter)
        self._feedback_label.setMinimumHeight(48)
        layout.addWidget(self._feedback_label, 0)

        options_row = QHBoxLayout()
        options_row.setSpacing(32)
        options_row.addStretch(1)
        for color in GameColors.OPTION_COLORS:
            button = OptionButton(color)
            button.chosen.connect(lambda number: self._session.check_answer(number))
            options_row.addWidget(button, 0)
            self._option_buttons.append(button)
        options_row.addStretch(1)
        layout.addLayout(options_row)

        self._exit_overlay = ExitConfirmOverlay(root)
        self._game_over_overlay = GameOverOverlay(root)
        self._game_over_overlay.restart_requested.connect(lambda: self._session.start_game())

    def _on_exit_clicked(self) -> None:
        self._exit_button.setEnabled(False)
        try:
            self._session.exit_game()
        finally:
            self._exit_button.setEnabled(True)

    @staticmethod
    def _pill_style(color: str) -> str:
        return f"""
            QPushButton {{
                background: {color};
                color: white;
                padding: 8px 18px;
                border: none;
                border-radius: 16px;
                font-size: 16px;
                font-weight: 700;
            }}
            QPushButton:hover {{ background: {GameColors.PRIMARY}; }}
        """

    def _render(self, snapshot: SessionSnapshot) -> None:
        strings = snapshot.strings
        self._round_label.setText(f"{strings.round} {snapshot.current_round} / {snapshot.total_rounds}")
        self._score_label.setText(f"⭐ {strings.score}: {snapshot.score}")
        self._language_button.setText("English" if snapshot.locale is Locale.ZH_TW else "中文")
        self._exit_button.setText(strings.exit)
        self._confirm_prompt.set_confirm_label(strings.exit)

        visible = snapshot.target_number or 0
        for tile in self._tiles:
            tile.setVisible(tile.index < visible)
            tile.set_item(snapshot.current_item)
            tile.set_counted(tile.index in snapshot.counted_indices)
        self._count_label.setText(str(len(snapshot.counted_indices)) if snapshot.counted_indices else "")

        playing = snapshot.status is GameStatus.PLAYING
        for button, number in zip(self._option_buttons, snapshot.options):
            button.set_number(number)
            button.setEnabled(playing)

        if snapshot.feedback is Feedback.CORRECT:
            self._feedback_label.setText(f"🎉 {strings.correct}")
            self._feedback_label.setStyleSheet(f"color: {GameColors.CORRECT}; font-size: 32px; font-weight: 900;")
        elif snapshot.feedback is Feedback.WRONG:
            self._feedback_label.setText(strings.try_again)
            self._feedback_label.setStyleSheet(f"color: {GameColors.WRONG}; font-size: 32px; font-weight: 900;")
        else:
            self._feedback_label.setText("")

        if snapshot.status is GameStatus.FINISHED:
            self._game_over_overlay.set_texts(strings.game_over_message(snapshot.score), strings.restart)
            self._game_over_overlay.raise_()
            self._game_over_overlay.show()
        elif self._game_over_overlay.isVisible():
            self._game_over_overlay.hide()
