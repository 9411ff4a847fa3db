"""
Unit tests for troll_topics/features/document_term/vocabulary.py
No real data dependencies - runs in <1 second.
"""

import pytest

from troll_topics.features.document_term import Vocabulary


class TestVocabulary:
    """Tests for Vocabulary indexing."""

    def test_add_assigns_first_seen_indices(self):
        vocab = Vocabulary()
        assert vocab.add("trump") == 0
        assert vocab.add("clinton") == 1
        assert vocab.add("trump") == 0
        assert vocab.terms == ["trump", "clinton"]

    def test_lookup(self):
        vocab = Vocabulary(["trump", "clinton"])
        assert vocab.index_of("clinton") == 1
        assert vocab.index_of("obama") is None
        assert vocab[0] == "trump"
        assert "clinton" in vocab
        assert len(vocab) == 2

    def test_duplicates_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            Vocabulary(["trump", "trump"])

    def test_restrict_renumbers_without_mutating(self):
        vocab = Vocabulary(["a1", "b2", "c3"])
        restricted = vocab.restrict([2, 0])
        assert restricted.terms == ["c3", "a1"]
        assert restricted.index_of("c3") == 0
        assert vocab.terms == ["a1", "b2", "c3"]

    def test_copy_is_independent(self):
        vocab = Vocabulary(["trump"])
        clone = vocab.copy()
        clone.add("obama")
        assert len(vocab) == 1
        assert clone != vocab

    def test_gensim_mappings(self):
        vocab = Vocabulary(["trump", "clinton"])
        assert vocab.id2word == {0: "trump", 1: "clinton"}
        assert vocab.token2id == {"trump": 0, "clinton": 1}
