"""Shared fixtures: fake collaborators for the counting session."""

from __future__ import annotations

import random
from typing import Iterable, List, Tuple

import pytest

from ennu.core.locales import Locale, LocaleRepository
from ennu.core.scheduler import ManualScheduler
from ennu.core.session import CountingSession


class RecordingAnnouncer:
    def __init__(self) -> None:
        self.spoken: List[Tuple[str, Locale]] = []

    def announce(self, text: str, locale: Locale) -> None:
        self.spoken.append((text, locale))

    @property
    def texts(self) -> List[str]:
        return [text for text, _ in self.spoken]


class ScriptedConfirm:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.messages: List[str] = []

    def confirm(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer


class ScriptedRandom(random.Random):
    """Returns queued values from randint, then falls back to a seeded generator."""

    def __init__(self, values: Iterable[int] = (), seed: int = 0) -> None:
        super().__init__(seed)
        self._values = list(values)

    def push(self, *values: int) -> None:
        self._values.extend(values)

    def randint(self, a: int, b: int) -> int:
        if self._values:
            return self._values.pop(0)
        return super().randint(a, b)


@pytest.fixture()
def locales() -> LocaleRepository:
    return LocaleRepository()


@pytest.fixture()
def announcer() -> RecordingAnnouncer:
    return RecordingAnnouncer()


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def confirm() -> ScriptedConfirm:
    return ScriptedConfirm(True)


@pytest.fixture()
def confirm_factory():
    """Build a confirm prompt that always gives the supplied answer."""
    return ScriptedConfirm


@pytest.fixture()
def rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture()
def session(locales, announcer, confirm, scheduler, rng) -> CountingSession:
    return CountingSession(
        strings=locales,
        announcer=announcer,
        confirm=confirm,
        scheduler=scheduler,
        rng=rng,
    )
