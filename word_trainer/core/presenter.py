"""Flashcard presenter: shows word pairs and animates transitions between them"""

from collections.abc import Generator
from typing import Any

from ..config.settings import TrainerSettings
from ..logging_config import get_logger
from ..models.word_models import WordPair
from .animation import Coroutine, CountdownBarrier, FrameScheduler, Tween
from .constants import AnimationConstants
from .interfaces import ClickableControlInterface, TextDisplayInterface
from .word_store import WordStore

logger = get_logger(__name__)


class FlashcardPresenter:
    """Connects a WordStore to two text displays and a "next" button.

    Any of the displays or the button may be None, which disables that
    output. Starting a transition while one is still running cancels the
    running one first.
    """

    def __init__(
        self,
        store: WordStore,
        scheduler: FrameScheduler,
        term_display: TextDisplayInterface | None = None,
        meaning_display: TextDisplayInterface | None = None,
        next_button: ClickableControlInterface | None = None,
        settings: TrainerSettings | None = None,
    ) -> None:
        self.store = store
        self.scheduler = scheduler
        self.term_display = term_display
        self.meaning_display = meaning_display
        self.next_button = next_button
        self.settings = settings or TrainerSettings()

        self._transition: Coroutine | None = None
        self._pulse: Coroutine | None = None
        self._listening = False

    @property
    def is_transitioning(self) -> bool:
        return self._transition is not None and not self._transition.done

    def start(self) -> WordPair | None:
        """Hook up the button and show the first pair"""
        if self.next_button is not None and not self._listening:
            self.next_button.add_click_listener(self.on_next_pressed)
            self._listening = True
        return self.show_next()

    def on_next_pressed(self) -> None:
        """Button handler: press pulse plus a (possibly animated) advance"""
        self.press_pulse()
        if self.settings.use_animation:
            self.show_next_animated()
        else:
            self.show_next()

    def show_next(self) -> WordPair | None:
        """Advance and update the displays immediately, without animation"""
        self._cancel_transition()
        pair = self.store.advance()
        if pair is not None:
            self._display(pair)
        return pair

    def show_next_animated(self) -> Coroutine:
        """Fade both displays out, advance, then fade them back in.

        Returns the transition task; it is done once both fade-ins finish.
        """
        self._cancel_transition()
        transition = Coroutine(self._transition_steps(), name="flashcard transition")
        self._transition = transition
        self.scheduler.start(transition)
        return transition

    def press_pulse(self) -> Coroutine | None:
        """Shrink the button and scale it back; skipped without a button"""
        if self.next_button is None:
            return None

        if self._pulse is not None:
            self._pulse.cancel()
        pulse = Coroutine(self._pulse_steps(self.next_button), name="button press")
        self._pulse = pulse
        self.scheduler.start(pulse)
        return pulse

    def _transition_steps(self) -> Generator[Any, None, None]:
        fades: list[Tween] = []
        try:
            barrier, fades = self._fade_displays(
                AnimationConstants.VISIBLE_ALPHA, AnimationConstants.HIDDEN_ALPHA
            )
            yield barrier

            pair = self.store.advance()
            if pair is not None:
                self._display(pair)

            barrier, fades = self._fade_displays(
                AnimationConstants.HIDDEN_ALPHA, AnimationConstants.VISIBLE_ALPHA
            )
            yield barrier
        finally:
            # Cancelled mid-way: stop the fades and leave both displays visible
            for fade in fades:
                fade.cancel()
            for display in self._displays():
                display.set_alpha(AnimationConstants.VISIBLE_ALPHA)

    def _fade_displays(
        self, start: float, end: float
    ) -> tuple[CountdownBarrier, list[Tween]]:
        barrier = CountdownBarrier(AnimationConstants.FADE_EFFECTS_PER_PHASE)
        fades: list[Tween] = []
        for display in (self.term_display, self.meaning_display):
            fade = Tween(
                start,
                end,
                self.settings.fade_duration,
                apply=display.set_alpha if display is not None else None,
            )
            barrier.signal_on_completion(fade)
            self.scheduler.start(fade)
            fades.append(fade)
        return barrier, fades

    def _pulse_steps(
        self, button: ClickableControlInterface
    ) -> Generator[Any, None, None]:
        duration = self.settings.button_click_duration
        rest = AnimationConstants.REST_SCALE
        pressed = self.settings.button_click_scale

        tween = Tween(rest, pressed, duration, apply=button.set_scale)
        try:
            yield self.scheduler.start(tween)
            tween = Tween(pressed, rest, duration, apply=button.set_scale)
            yield self.scheduler.start(tween)
        finally:
            tween.cancel()
            button.set_scale(rest)

    def _cancel_transition(self) -> None:
        if self._transition is not None and self._transition.cancel():
            logger.debug("Interrupted a running transition")
        self._transition = None

    def _displays(self) -> list[TextDisplayInterface]:
        return [d for d in (self.term_display, self.meaning_display) if d is not None]

    def _display(self, pair: WordPair) -> None:
        if self.term_display is not None:
            self.term_display.set_text(pair.term)
        if self.meaning_display is not None:
            self.meaning_display.set_text(pair.meaning)
