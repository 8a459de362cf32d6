"""Game board widgets: countable item tiles and answer buttons."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QGraphicsDropShadowEffect, QPushButton, QWidget

from ennu.ui.colors import GameColors, blend_hex

ITEM_EMOJI = {
    "apple": "🍎",
    "bird": "🐦",
    "elephant": "🐘",
    "car": "🚗",
    "star": "⭐",
    "bear": "🐻",
    "flower": "🌸",
    "duck": "🦆",
    "fish": "🐟",
    "cat": "🐱",
    "dog": "🐶",
    "ball": "⚽",
}


def emoji_for_item(item: str) -> str:
    return ITEM_EMOJI.get(item, ITEM_EMOJI["apple"])


class CountableItemTile(QWidget):
    """Round tile showing one item; tapping it marks it as counted."""

    tapped = Signal(int)

    def __init__(self, index: int, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._index = index
        self._emoji = emoji_for_item("apple")
        self._counted = False
        self.setFixedSize(96, 96)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    @property
    def index(self) -> int:
        return self._index

    def set_item(self, item: str) -> None:
        self._emoji = emoji_for_item(item)
        self.update()

    def set_counted(self, counted: bool) -> None:
        if counted != self._counted:
            self._counted = counted
            self.update()

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.tapped.emit(self._index)
        super().mousePressEvent(event)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)

        inset = 4
        size = min(self.width(), self.height()) - 2 * inset
        if self._counted:
            painter.setBrush(QColor(blend_hex("#ffffff", GameColors.MINT, 0.45)))
            painter.setPen(QPen(QColor(GameColors.CORRECT), 3))
        else:
            painter.setBrush(QColor("#ffffff"))
            painter.setPen(QPen(QColor(GameColors.AMBER), 2))
        painter.drawEllipse(inset, inset, size, size)

        font = painter.font()
        font.setPointSize(max(12, size // 2 - 6))
        painter.setFont(font)
        if self._counted:
            painter.setOpacity(0.55)
        painter.drawText(self.rect(), Qt.AlignCenter, self._emoji)
        if self._counted:
            painter.setOpacity(1.0)
            font.setPointSize(14)
            font.setBold(True)
            painter.setFont(font)
            painter.setPen(QColor(GameColors.CORRECT))
            painter.drawText(self.rect().adjusted(0, 0, -8, -4), Qt.AlignRight | Qt.AlignBottom, "✓")


class OptionButton(QPushButton):
    """Large numbered answer button."""

    chosen = Signal(int)

    def __init__(self, color: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._number = 0
        self._color = color
        self.setMinimumSize(120, 120)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.clicked.connect(lambda: self.chosen.emit(self._number))
        self._apply_style()

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(16)
        shadow.setOffset(0, 4)
        shadow.setColor(QColor(0, 0, 0, 50))
        self.setGraphicsEffect(shadow)

    def set_number(self, number: int) -> None:
        self._number = number
        self.setText(str(number))

    def _apply_style(self) -> None:
        hover = blend_hex(self._color, "#ffffff", 0.2)
        pressed = blend_hex(self._color, "#000000", 0.15)
        self.setStyleSheet(
            f"""
            QPushButton {{
                background: {self._color};
                color: white;
                border: none;
                border-radius: 60px;
                font-size: 48px;
                font-weight: 900;
            }}
            QPushButton:hover {{ background: {hover}; }}
            QPushButton:pressed {{ background: {pressed}; }}
            QPushButton:disabled {{ background: {blend_hex(self._color, '#cfd8dc', 0.6)}; }}
            """
        )
