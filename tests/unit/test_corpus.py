"""
Unit tests for the canned response corpus.
"""

import pytest

from llminferencesim.core.random_source import RandomSource
from llminferencesim.text.corpus import DEFAULT_RESPONSES, ResponseCorpus


@pytest.fixture
def corpus():
    return ResponseCorpus()


class TestRandomResponse:
    """Test seeded response selection."""

    def test_always_returns_corpus_member(self, corpus):
        source = RandomSource(42)
        for _ in range(500):
            assert corpus.random_response(source) in DEFAULT_RESPONSES

    def test_selection_reproducible(self, corpus):
        """Test that the same seed yields the same sequence of responses."""
        source_a = RandomSource(11)
        source_b = RandomSource(11)
        assert [corpus.random_response(source_a) for _ in range(100)] == [
            corpus.random_response(source_b) for _ in range(100)
        ]

    def test_covers_whole_corpus(self, corpus):
        source = RandomSource(42)
        seen = {corpus.random_response(source) for _ in range(2000)}
        assert seen == set(DEFAULT_RESPONSES)

    def test_single_entry_corpus(self):
        corpus = ResponseCorpus(["only"])
        assert corpus.random_response(RandomSource(1)) == "only"


class TestFindContaining:
    """Test partial-match recovery."""

    def test_recovers_full_text_from_prefix(self, corpus):
        assert corpus.find_containing("I am fine, how") == "I am fine, how are you today?"

    def test_recovers_from_middle_fragment(self, corpus):
        assert corpus.find_containing("partially cloudy") == (
            "Today it is partially cloudy and raining."
        )

    def test_first_match_wins(self, corpus):
        """Test that a fragment shared by several entries resolves in corpus order."""
        assert corpus.find_containing("today?") == "I am fine, how are you today?"

    def test_empty_partial_matches_first_entry(self, corpus):
        assert corpus.find_containing("") == DEFAULT_RESPONSES[0]

    def test_not_found(self, corpus):
        assert corpus.find_containing("definitely not in the corpus") is None


class TestCorpusConstruction:
    """Test corpus container behaviour."""

    def test_default_corpus(self, corpus):
        assert len(corpus) == len(DEFAULT_RESPONSES)
        assert list(corpus) == list(DEFAULT_RESPONSES)
        assert "Testing, testing 1,2,3." in corpus

    def test_custom_responses_are_copied(self):
        responses = ["a", "b"]
        corpus = ResponseCorpus(responses)
        responses.append("c")
        assert corpus.responses == ("a", "b")

    def test_empty_corpus_rejected(self):
        with pytest.raises(ValueError):
            ResponseCorpus([])
