"""Factory functions for creating configured presenters"""

import random

from ..config.settings import AppSettings
from ..config.settings import settings as default_settings
from ..logging_config import configure_logging, get_logger
from .animation import FrameScheduler
from .interfaces import ClickableControlInterface, TextDisplayInterface
from .presenter import FlashcardPresenter
from .resources import ResourceLoader
from .word_store import WordStore

logger = get_logger(__name__)


class FlashcardPresenterFactory:
    """Factory for creating FlashcardPresenter instances"""

    @staticmethod
    def create_default() -> FlashcardPresenter:
        """Create a presenter from global settings with headless widgets.

        Also applies the configured log level and log file.
        """
        from ..ui.widgets import PushButton, TextLabel

        configure_logging(default_settings.logging)
        return FlashcardPresenterFactory.create_from_settings(
            default_settings,
            term_display=TextLabel(),
            meaning_display=TextLabel(),
            next_button=PushButton(),
        )

    @staticmethod
    def create_from_settings(
        settings: AppSettings,
        term_display: TextDisplayInterface | None = None,
        meaning_display: TextDisplayInterface | None = None,
        next_button: ClickableControlInterface | None = None,
        scheduler: FrameScheduler | None = None,
        rng: random.Random | None = None,
        store: WordStore | None = None,
    ) -> FlashcardPresenter:
        """Create a presenter, loading the word file named in settings"""
        trainer = settings.trainer

        if rng is None:
            rng = random.Random(trainer.random_seed)

        if store is None:
            loader = ResourceLoader(trainer.words_dir)
            store = loader.load_store(trainer.word_file, rng=rng)

        logger.debug(
            f"Creating presenter: {len(store)} words, "
            f"animation {'on' if trainer.use_animation else 'off'}"
        )

        return FlashcardPresenter(
            store=store,
            scheduler=scheduler or FrameScheduler(),
            term_display=term_display,
            meaning_display=meaning_display,
            next_button=next_button,
            settings=trainer,
        )


def create_presenter(
    settings: AppSettings | None = None,
    term_display: TextDisplayInterface | None = None,
    meaning_display: TextDisplayInterface | None = None,
    next_button: ClickableControlInterface | None = None,
    scheduler: FrameScheduler | None = None,
    rng: random.Random | None = None,
    store: WordStore | None = None,
) -> FlashcardPresenter:
    """Convenience function to create a presenter"""
    return FlashcardPresenterFactory.create_from_settings(
        settings or default_settings,
        term_display=term_display,
        meaning_display=meaning_display,
        next_button=next_button,
        scheduler=scheduler,
        rng=rng,
        store=store,
    )
