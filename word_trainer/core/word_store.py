"""In-memory word list with non-repeating random selection"""

import random
from collections.abc import Iterator

from ..logging_config import get_logger
from ..models.word_models import WordPair
from .constants import WordFileConstants

logger = get_logger(__name__)


def parse_word_pairs(raw_text: str) -> list[WordPair]:
    """Parse ``term,meaning`` lines into word pairs.

    Blank lines and lines without a comma are skipped. Only the first two
    comma-separated fields of a line are used.
    """
    pairs: list[WordPair] = []
    for line in raw_text.split(WordFileConstants.LINE_SEPARATOR):
        if not line.strip():
            continue

        parts = line.strip().split(WordFileConstants.FIELD_SEPARATOR)
        if len(parts) >= 2:
            pairs.append(WordPair(term=parts[0].strip(), meaning=parts[1].strip()))

    return pairs


class WordStore:
    """Ordered word pairs plus the index of the pair currently shown"""

    def __init__(
        self,
        pairs: list[WordPair] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._pairs: list[WordPair] = list(pairs or [])
        self._rng = rng or random.Random()
        self._current_index = -1

    @classmethod
    def load(
        cls, raw_text: str | None, rng: random.Random | None = None
    ) -> "WordStore":
        """Build a store from the raw contents of a word file"""
        if not raw_text:
            logger.warning("No word content supplied, starting with an empty word list")
            return cls(rng=rng)

        store = cls(parse_word_pairs(raw_text), rng=rng)
        logger.info(f"Loaded {len(store)} words")
        return store

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def pairs(self) -> tuple[WordPair, ...]:
        return tuple(self._pairs)

    @property
    def is_empty(self) -> bool:
        return not self._pairs

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[WordPair]:
        return iter(self._pairs)

    def current(self) -> WordPair | None:
        """Return the pair at the current index, or None before the first advance"""
        if self._current_index == -1:
            return None
        return self._pairs[self._current_index]

    def advance(self) -> WordPair | None:
        """Select a new random pair, never the one currently selected.

        Returns None (and logs a warning) when the store is empty.
        """
        count = len(self._pairs)
        if count == 0:
            logger.warning("Word list is empty, nothing to show")
            return None

        if count == 1:
            self._current_index = 0
            return self._pairs[0]

        # Rejection sampling: terminates almost surely, expected count/(count-1) draws
        new_index = self._rng.randrange(count)
        while new_index == self._current_index:
            new_index = self._rng.randrange(count)

        self._current_index = new_index
        logger.debug(f"Advanced to word #{new_index}: {self._pairs[new_index].term}")
        return self._pairs[new_index]
