"""Test cases for tokenizing, sentence splitting and chunking."""

from research_assistant.chunking import (
    MIN_CHUNK_LENGTH, chunk_sentences, chunk_text, normalize, split_sentences
)
from tests.conftest import AI_MARKET_SENTENCES, AI_MARKET_TEXT


class TestNormalize:
    """Test word normalization."""

    def test_lowercases_and_strips_punctuation(self):
        """Punctuation becomes a word break and case is folded."""
        assert normalize("Hello, World! AI-powered tools") == ["hello", "world", "ai", "powered", "tools"]

    def test_collapses_whitespace(self):
        """Runs of whitespace never produce empty words."""
        assert normalize("  alpha \n\n beta\t gamma  ") == ["alpha", "beta", "gamma"]

    def test_empty_input(self):
        """Empty and punctuation-only input yields no words."""
        assert normalize("") == []
        assert normalize("?!...") == []


class TestSplitSentences:
    """Test sentence splitting."""

    def test_splits_on_terminators(self):
        """Periods, exclamation and question marks end sentences."""
        assert split_sentences("First one. Second one! Third one? ") == ["First one", "Second one", "Third one"]

    def test_discards_empty_fragments(self):
        """Repeated terminators and blank fragments are dropped."""
        assert split_sentences("Wait?! Really...   . Yes") == ["Wait", "Really", "Yes"]
        assert split_sentences("   ") == []
        assert split_sentences("") == []


class TestChunking:
    """Test grouping sentences into citable chunks."""

    def test_groups_three_sentences(self):
        """Each chunk joins three sentences and ends with a period."""
        chunks = chunk_sentences(AI_MARKET_SENTENCES)

        assert len(chunks) == 4
        assert chunks[0] == ". ".join(AI_MARKET_SENTENCES[:3]) + "."
        assert chunks[3] == ". ".join(AI_MARKET_SENTENCES[9:]) + "."

    def test_last_window_may_be_shorter(self):
        """A trailing window with fewer than three sentences is kept when long enough."""
        long_sentence = "x" * 60
        chunks = chunk_sentences([long_sentence] * 4)

        assert len(chunks) == 2
        assert chunks[1] == long_sentence + "."

    def test_short_chunks_are_dropped(self):
        """Chunks of 50 characters or fewer are not citable."""
        assert chunk_sentences(["a", "b", "c"]) == []
        assert chunk_sentences(["y" * 49]) == []  # exactly 50 with the period
        assert chunk_sentences(["y" * 50]) == ["y" * 50 + "."]

    def test_no_chunk_below_minimum(self):
        """Whatever the input, every chunk is longer than the minimum."""
        text = "Tiny. " * 20 + AI_MARKET_TEXT + " Short one! Another? " + "z" * 30 + "."
        for chunk in chunk_text(text):
            assert len(chunk) > MIN_CHUNK_LENGTH

    def test_order_preserved(self):
        """Chunks appear in the order of their source sentences."""
        chunks = chunk_text(AI_MARKET_TEXT)
        positions = [AI_MARKET_TEXT.find(chunk.split(". ")[0]) for chunk in chunks]

        assert positions == sorted(positions)

    def test_deterministic(self):
        """Identical input gives identical chunks."""
        assert chunk_text(AI_MARKET_TEXT) == chunk_text(AI_MARKET_TEXT)

    def test_empty_input(self):
        assert chunk_text("") == []
