from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from ennu.core.locales import Locale, LocaleRepository, Strings
from ennu.core.rounds import Round, generate_round, item_for_round
from ennu.core.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class GameStatus(str, enum.Enum):
    PLAYING = "playing"
    FEEDBACK = "feedback"
    FINISHED = "finished"


class Feedback(str, enum.Enum):
    CORRECT = "correct"
    WRONG = "wrong"


class Announcer(Protocol):
    def announce(self, text: str, locale: Locale) -> None: ...


class ConfirmPrompt(Protocol):
    def confirm(self, message: str) -> bool: ...


@dataclass(frozen=True)
class GameRules:
    total_rounds: int = 10
    max_number: int = 12
    option_count: int = 3
    correct_delay_ms: int = 2000
    wrong_delay_ms: int = 1000


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything the rendering layer needs to draw one frame of the game."""

    current_round: int
    total_rounds: int
    score: int
    target_number: Optional[int]
    options: tuple[int, ...]
    status: GameStatus
    feedback: Optional[Feedback]
    current_item: str
    counted_indices: frozenset[int]
    locale: Locale
    strings: Strings


class CountingSession:
    """Owns the state of one counting game and moves it between rounds.

    The session is single-threaded: every mutation happens inside one of the
    public operations or inside a callback fired by the injected scheduler.
    ``start_game`` must be called before the first guess; until then there is
    no round and guesses or counts are ignored.

    Pending timers are cancelled by ``start_game`` so that an exit or restart
    during the feedback window cannot advance the fresh game.
    """

    def __init__(
        self,
        strings: LocaleRepository,
        announcer: Announcer,
        confirm: ConfirmPrompt,
        scheduler: Scheduler,
        rng: Optional[random.Random] = None,
        rules: Optional[GameRules] = None,
        locale: Locale = Locale.ZH_TW,
    ) -> None:
        self._strings = strings
        self._announcer = announcer
        self._confirm = confirm
        self._scheduler = scheduler
        self._rng = rng if rng is not None else random.Random()
        self._rules = rules if rules is not None else GameRules()
        self._locale = locale

        self._current_round = 1
        self._score = 0
        self._round: Optional[Round] = None
        self._status = GameStatus.PLAYING
        self._feedback: Optional[Feedback] = None
        self._counted: set[int] = set()

        self._pending: list[TimerHandle] = []
        self._clear_timer: Optional[TimerHandle] = None
        self._confirming = False
        self._listeners: list[Callable[[SessionSnapshot], None]] = []

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def current_round(self) -> int:
        """Current round number (1-based)."""
        return self._current_round

    @property
    def score(self) -> int:
        """Number of rounds answered correctly so far."""
        return self._score

    @property
    def round(self) -> Optional[Round]:
        """The active round, or None before the first start_game."""
        return self._round

    @property
    def status(self) -> GameStatus:
        """Which operations the session currently accepts."""
        return self._status

    @property
    def feedback(self) -> Optional[Feedback]:
        """Feedback for the last guess, or None when nothing is shown."""
        return self._feedback

    @property
    def counted_indices(self) -> frozenset[int]:
        """Indices of items tapped in this round."""
        return frozenset(self._counted)

    @property
    def locale(self) -> Locale:
        """Active language for text and speech."""
        return self._locale

    @property
    def rules(self) -> GameRules:
        """Round count, number range and feedback delays."""
        return self._rules

    @property
    def strings(self) -> Strings:
        """Phrase bundle for the active locale."""
        return self._strings.get(self._locale)

    @property
    def current_item(self) -> str:
        """Item shown in the current round."""
        return item_for_round(self._current_round)

    def snapshot(self) -> SessionSnapshot:
        """Return an immutable copy of all observable state."""
        return SessionSnapshot(
            current_round=self._current_round,
            total_rounds=self._rules.total_rounds,
            score=self._score,
            target_number=self._round.target_number if self._round else None,
            options=self._round.options if self._round else (),
            status=self._status,
            feedback=self._feedback,
            current_item=self.current_item,
            counted_indices=frozenset(self._counted),
            locale=self._locale,
            strings=self.strings,
        )

    def add_listener(self, callback: Callable[[SessionSnapshot], None]) -> None:
        """Register a callable that receives a snapshot after every state change."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[SessionSnapshot], None]) -> None:
        """Unregister a callable added with add_listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def start_game(self) -> None:
        """Reset to round 1 with a zero score and draw the first round."""
        self._cancel_pending()
        self._current_round = 1
        self._score = 0
        logger.info("Starting new game (%d rounds)", self._rules.total_rounds)
        self.generate_round()

    def generate_round(self) -> None:
        """Draw a new target and options and return to PLAYING with nothing counted."""
        self._round = generate_round(
            self._rng,
            max_number=self._rules.max_number,
            option_count=self._rules.option_count,
        )
        self._status = GameStatus.PLAYING
        self._feedback = None
        self._counted.clear()
        logger.debug(
            "Round %d: target=%d options=%s item=%s",
            self._current_round,
            self._round.target_number,
            self._round.options,
            self.current_item,
        )
        self._notify()

    def toggle_counted(self, index: int) -> None:
        """Mark an item as counted and speak the running count."""
        if self._status is not GameStatus.PLAYING or self._round is None:
            return
        if index in self._counted:
            return
        self._counted.add(index)
        self._speak(str(len(self._counted)))
        self._notify()

    def check_answer(self, number: int) -> None:
        """Score a guess and schedule the matching feedback timer."""
        if self._status is not GameStatus.PLAYING or self._round is None:
            logger.debug("Ignoring answer %s while %s", number, self._status.value)
            return

        if number == self._round.target_number:
            self._score += 1
            self._feedback = Feedback.CORRECT
            self._status = GameStatus.FEEDBACK
            logger.info("Round %d correct (%d), score=%d", self._current_round, number, self._score)
            self._speak(self.strings.correct)
            scheduled_round = self._current_round
            self._schedule(
                self._rules.correct_delay_ms,
                lambda: self._advance_from(scheduled_round),
            )
        else:
            self._feedback = Feedback.WRONG
            logger.info("Round %d wrong guess %d", self._current_round, number)
            self._speak(self.strings.try_again)
            if self._clear_timer is not None:
                self._clear_timer.cancel()
            self._clear_timer = self._schedule(self._rules.wrong_delay_ms, self._clear_wrong_feedback)
        self._notify()

    def advance_round(self) -> None:
        """Leave the correct-answer feedback: next round, or finish after the last one.

        Only valid while a correct answer is being shown; in any other state
        the call is ignored.
        """
        if self._status is not GameStatus.FEEDBACK or self._feedback is not Feedback.CORRECT:
            logger.debug("Ignoring advance while %s", self._status.value)
            return
        if self._current_round >= self._rules.total_rounds:
            self._status = GameStatus.FINISHED
            logger.info("Game finished with score %d", self._score)
            self._speak(self.strings.game_over_message(self._score))
            self._notify()
        else:
            self._current_round += 1
            self.generate_round()

    def exit_game(self) -> None:
        """Ask for confirmation and restart the game if the player agrees.

        A second request while the prompt is still open is ignored.
        """
        if self._confirming:
            return
        self._confirming = True
        try:
            confirmed = self._confirm.confirm(self.strings.exit_confirm)
        finally:
            self._confirming = False
        if confirmed:
            logger.info("Exit confirmed, resetting game")
            self.start_game()

    def toggle_language(self) -> None:
        """Switch between the two supported languages; round state is untouched."""
        self._locale = self._locale.other()
        logger.info("Language switched to %s", self._locale.value)
        self._notify()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _advance_from(self, scheduled_round: int) -> None:
        if self._status is not GameStatus.FEEDBACK or self._current_round != scheduled_round:
            logger.debug("Dropping stale advance scheduled in round %d", scheduled_round)
            return
        self.advance_round()

    def _clear_wrong_feedback(self) -> None:
        self._clear_timer = None
        if self._feedback is Feedback.WRONG:
            self._feedback = None
            self._notify()

    def _schedule(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        self._pending = [handle for handle in self._pending if handle.active]
        handle = self._scheduler.call_later(delay_ms, callback)
        self._pending.append(handle)
        return handle

    def _cancel_pending(self) -> None:
        for handle in self._pending:
            handle.cancel()
        self._pending = []
        self._clear_timer = None

    def _speak(self, text: str) -> None:
        try:
            self._announcer.announce(text, self._locale)
        except Exception:
            logger.exception("Announcer failed for %r", text)

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Session listener %r failed", listener)
