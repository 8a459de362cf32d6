"""Spoken feedback through Qt TextToSpeech."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QLocale, QObject
from PySide6.QtTextToSpeech import QTextToSpeech

from ennu.core.locales import Locale

logger = logging.getLogger(__name__)


class SpeechAnnouncer:
    """Fire-and-forget announcer. Silent when the platform has no speech engine."""

    def __init__(self, parent: Optional[QObject] = None, *, muted: bool = False) -> None:
        self._muted = muted
        self._engine: Optional[QTextToSpeech] = None
        if muted:
            logger.info("Speech muted")
            return
        engines = QTextToSpeech.availableEngines()
        if not engines:
            logger.warning("No text-to-speech engine available; announcements disabled")
            return
        self._engine = QTextToSpeech(parent)
        if self._engine.state() == QTextToSpeech.State.Error:
            logger.warning("Text-to-speech engine failed to start: %s", self._engine.errorString())
            self._engine = None

    @property
    def available(self) -> bool:
        return self._engine is not None

    def announce(self, text: str, locale: Locale) -> None:
        if self._engine is None or not text:
            return
        try:
            qlocale = QLocale(locale.value.replace("-", "_"))
            if self._engine.locale() != qlocale:
                self._engine.setLocale(qlocale)
            self._engine.say(text)
        except RuntimeError as e:
            logger.warning("Could not speak %r: %s", text, e)
