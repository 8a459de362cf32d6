"""In-window overlays (exit confirm, game over)."""

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

from ennu.ui.colors import GameColors


def _themed_card_container(object_name: str, radius: int = 24) -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(400)
    container.setMaximumWidth(520)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: #ffffff;
            border: 1px solid rgba(0, 131, 143, 0.12);
            border-radius: {radius}px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(20)
    shadow.setOffset(0, 6)
    shadow.setColor(QColor(0, 80, 100, 25))
    container.setGraphicsEffect(shadow)
    return container


def _overlay_background(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.25);")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setMinimumSize(1, 1)
    overlay_bg.mousePressEvent = lambda e: on_click()
    return overlay_bg


def _secondary_button_style() -> str:
    return f"""
        QPushButton {{
            background: #fafafa;
            color: {GameColors.TEXT_PRIMARY};
            padding: 12px 18px;
            border: 1px solid #e0e0e0;
            border-radius: 14px;
            font-weight: 700;
            font-size: 16px;
        }}
        QPushButton:hover {{
            background: #f0f0f0;
            border-color: {GameColors.PRIMARY};
            color: {GameColors.PRIMARY};
        }}
    """


def _primary_button_style() -> str:
    return f"""
        QPushButton {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {GameColors.PRIMARY_LIGHT}, stop:1 {GameColors.PRIMARY});
            color: white;
            padding: 12px 18px;
            border: none;
            border-radius: 14px;
            font-weight: 700;
            font-size: 16px;
        }}
        QPushButton:hover {{ background: {GameColors.PRIMARY}; }}
    """


class _CardOverlay(QWidget):
    """Dimmed full-window backdrop with a centered card; tracks the parent's size."""

    def __init__(self, object_name: str, on_dismiss: Callable[[], None], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        main_layout.addWidget(_overlay_background(self, on_dismiss), 0, 0)

        self._container = _themed_card_container(object_name)
        self._content = QVBoxLayout(self._container)
        self._content.setContentsMargins(28, 24, 28, 24)
        self._content.setSpacing(18)
        main_layout.addWidget(self._container, 0, 0, 1, 1, Qt.AlignCenter)
        self.hide()

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

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


class ExitConfirmOverlay(_CardOverlay):
    """Asks whether to leave the current game."""

    closed = Signal(bool)  # True if the player confirmed

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__("exitContainer", lambda: self._finish(False), parent)

        self._message = QLabel()
        self._message.setStyleSheet(f"color: {GameColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 600;")
        self._message.setWordWrap(True)
        self._content.addWidget(self._message, 0)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(10)

        self._cancel_btn = QPushButton("✕")
        self._cancel_btn.setStyleSheet(_secondary_button_style())
        self._cancel_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self._cancel_btn.clicked.connect(lambda: self._finish(False))
        btn_row.addWidget(self._cancel_btn, 1)

        self._confirm_btn = QPushButton("✓")
        self._confirm_btn.setStyleSheet(_primary_button_style())
        self._confirm_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self._confirm_btn.clicked.connect(lambda: self._finish(True))
        btn_row.addWidget(self._confirm_btn, 1)

        self._content.addLayout(btn_row)

    def set_texts(self, message: str, confirm_label: str) -> None:
        self._message.setText(message)
        self._confirm_btn.setText(confirm_label)

    def focus_cancel(self) -> None:
        self._cancel_btn.setFocus(Qt.FocusReason.OtherFocusReason)

    def _finish(self, ok: bool) -> None:
        self.hide()
        self.closed.emit(ok)


class GameOverOverlay(_CardOverlay):
    """Final score card with a play-again button."""

    restart_requested = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__("gameOverContainer", lambda: None, parent)

        trophy = QLabel("🏆")
        trophy.setAlignment(Qt.AlignCenter)
        trophy.setStyleSheet("font-size: 64px;")
        self._content.addWidget(trophy, 0)

        self._message = QLabel()
        self._message.setAlignment(Qt.AlignCenter)
        self._message.setWordWrap(True)
        self._message.setStyleSheet(f"color: {GameColors.PRIMARY}; font-size: 22px; font-weight: 800;")
        self._content.addWidget(self._message, 0)

        self._restart_btn = QPushButton()
        self._restart_btn.setStyleSheet(_primary_button_style())
        self._restart_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self._restart_btn.clicked.connect(self._on_restart)
        self._content.addWidget(self._restart_btn, 0)

    def set_texts(self, message: str, restart_label: str) -> None:
        self._message.setText(message)
        self._restart_btn.setText(restart_label)

    def _on_restart(self) -> None:
        self.hide()
        self.restart_requested.emit()
