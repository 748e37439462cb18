"""Tests for word file parsing and non-repeating random selection"""

import logging
import random
from collections import Counter, defaultdict
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from word_trainer.core.word_store import WordStore, parse_word_pairs
from word_trainer.models.word_models import WordPair


class TestParsing:
    """Tests for turning raw text into word pairs"""

    def test_parses_pairs_in_file_order(self):
        """Two valid lines give two pairs in order."""
        store = WordStore.load("cat,貓\ndog,狗\n")

        assert list(store) == [
            WordPair(term="cat", meaning="貓"),
            WordPair(term="dog", meaning="狗"),
        ]

    def test_skips_blank_and_comma_less_lines(self):
        """Blank lines and lines without a comma do not take a slot."""
        store = WordStore.load("cat,貓\n\nfoo\ndog,狗")

        assert [p.term for p in store] == ["cat", "dog"]

    def test_trims_field_whitespace(self):
        """Whitespace around each field is stripped."""
        pairs = parse_word_pairs("  cat , 貓 \n")

        assert pairs == [WordPair(term="cat", meaning="貓")]

    def test_whitespace_only_lines_are_ignored(self):
        """Lines made of spaces and tabs are skipped."""
        pairs = parse_word_pairs("   \n\t\ncat,貓")

        assert pairs == [WordPair(term="cat", meaning="貓")]

    def test_only_first_two_fields_are_used(self):
        """Extra comma-separated fields are dropped."""
        pairs = parse_word_pairs("run,跑,verb")

        assert pairs == [WordPair(term="run", meaning="跑")]

    def test_windows_line_endings(self):
        """Carriage returns are stripped with the rest of the whitespace."""
        pairs = parse_word_pairs("cat,貓\r\ndog,狗\r\n")

        assert [p.meaning for p in pairs] == ["貓", "狗"]

    def test_load_starts_before_first_pair(self):
        """A freshly loaded store has no current pair."""
        store = WordStore.load("cat,貓")

        assert store.current_index == -1
        assert store.current() is None

    @pytest.mark.parametrize("raw", [None, ""])
    def test_missing_content_gives_empty_store(self, raw, caplog):
        """No content is a warning, not an error."""
        with caplog.at_level(logging.WARNING):
            store = WordStore.load(raw)

        assert store.is_empty
        assert len(store) == 0
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_load_logs_word_count(self, caplog):
        """Loading reports how many words were read."""
        with caplog.at_level(logging.INFO):
            WordStore.load("cat,貓\ndog,狗")

        assert "Loaded 2 words" in caplog.text

    def test_word_pair_is_immutable(self):
        """Word pairs cannot be modified after creation."""
        pair = WordPair(term="cat", meaning="貓")

        with pytest.raises(ValidationError):
            pair.term = "dog"  # type: ignore[misc]


class TestAdvance:
    """Tests for the advance/current selection rules"""

    def test_advance_on_empty_store_returns_none(self, caplog):
        """Every advance on an empty store returns None with a warning."""
        store = WordStore()

        with caplog.at_level(logging.WARNING):
            results = [store.advance() for _ in range(3)]

        assert results == [None, None, None]
        assert store.current_index == -1
        assert "empty" in caplog.text

    def test_single_pair_is_always_returned(self):
        """A one-word store keeps returning its only word."""
        only = WordPair(term="cat", meaning="貓")
        store = WordStore([only])

        for _ in range(10):
            assert store.advance() == only
            assert store.current_index == 0

    def test_single_pair_does_not_draw_randomly(self):
        """No random numbers are needed for a single word."""
        rng = Mock()
        store = WordStore([WordPair(term="cat", meaning="貓")], rng=rng)

        store.advance()

        rng.randrange.assert_not_called()

    def test_never_repeats_consecutively(self):
        """Two consecutive advances never pick the same index."""
        pairs = [WordPair(term=f"w{i}", meaning=f"m{i}") for i in range(3)]
        store = WordStore(pairs, rng=random.Random(42))

        previous = None
        for _ in range(2000):
            store.advance()
            assert store.current_index != previous
            previous = store.current_index

    def test_redraws_until_index_changes(self):
        """Draws equal to the current index are rejected."""
        rng = Mock()
        rng.randrange.side_effect = [1, 1, 1, 0]
        pairs = [
            WordPair(term="cat", meaning="貓"),
            WordPair(term="dog", meaning="狗"),
        ]
        store = WordStore(pairs, rng=rng)

        assert store.advance() == pairs[1]
        assert store.advance() == pairs[0]
        assert rng.randrange.call_count == 4
        rng.randrange.assert_called_with(2)

    def test_current_tracks_last_advance(self):
        """current() returns what the last advance returned."""
        pairs = [WordPair(term=f"w{i}", meaning=f"m{i}") for i in range(5)]
        store = WordStore(pairs, rng=random.Random(1))

        for _ in range(20):
            picked = store.advance()
            assert store.current() == picked
            assert store.current() == pairs[store.current_index]

    def test_selection_is_uniform_over_eligible_indices(self):
        """After any index, the other indices are picked equally often."""
        n = 4
        pairs = [WordPair(term=f"w{i}", meaning=f"m{i}") for i in range(n)]
        store = WordStore(pairs, rng=random.Random(1234))

        follow_counts: dict[int, Counter] = defaultdict(Counter)
        store.advance()
        for _ in range(24000):
            previous = store.current_index
            store.advance()
            follow_counts[previous][store.current_index] += 1

        for previous, counts in follow_counts.items():
            assert previous not in counts
            assert len(counts) == n - 1
            expected = sum(counts.values()) / (n - 1)
            for count in counts.values():
                assert abs(count - expected) < expected * 0.1

    def test_pairs_is_a_read_only_copy(self):
        """The exposed pairs cannot change the store."""
        store = WordStore.load("cat,貓\ndog,狗")

        assert isinstance(store.pairs, tuple)
        assert len(store.pairs) == 2
