"""QTimer-backed scheduler for the game session."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer


class QtTimerHandle:
    """Single-shot QTimer that can be cancelled until it fires."""

    def __init__(self, parent: Optional[QObject], delay_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._done = False
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._fire)
        self._timer.start(max(0, int(delay_ms)))

    @property
    def active(self) -> bool:
        return not self._done

    def cancel(self) -> None:
        if self._done:
            return
        self._done = True
        self._timer.stop()
        self._timer.deleteLater()

    def _fire(self) -> None:
        if self._done:
            return
        self._done = True
        self._timer.deleteLater()
        self._callback()


class QtScheduler:
    """Runs callbacks on the GUI thread after a delay."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        return QtTimerHandle(self._parent, delay_ms, callback)
