"""
Unit tests for troll_topics/features/document_term/cooccurrence.py
No real data dependencies - runs in <1 second.
"""

import pytest

from troll_topics.features.document_term import (
    build_document_term_matrix,
    cooccurrence_edges,
    feature_cooccurrence,
)


@pytest.fixture
def hashtag_dtm(hashtag_docs):
    return build_document_term_matrix(hashtag_docs)


class TestFeatureCooccurrence:
    """Tests for feature_cooccurrence."""

    def test_counts_documents_not_tokens(self):
        dtm = build_document_term_matrix([["wall", "wall", "border"], ["wall", "border"]])
        counts, terms = feature_cooccurrence(dtm)
        assert terms == ["wall", "border"]
        assert counts.toarray().tolist() == [[0, 2], [2, 0]]

    def test_symmetric_with_zero_diagonal(self, hashtag_dtm):
        counts, _ = feature_cooccurrence(hashtag_dtm)
        dense = counts.toarray()
        assert (dense == dense.T).all()
        assert (dense.diagonal() == 0).all()

    def test_feature_subset(self, hashtag_dtm):
        counts, terms = feature_cooccurrence(hashtag_dtm, ["@ten_gop", "#maga", "unknown"])
        assert terms == ["@ten_gop", "#maga"]
        assert counts.toarray().tolist() == [[0, 2], [2, 0]]

    def test_no_features(self, hashtag_dtm):
        counts, terms = feature_cooccurrence(hashtag_dtm, [])
        assert counts.shape == (0, 0)
        assert terms == []


class TestCooccurrenceEdges:
    """Tests for cooccurrence_edges."""

    def test_hashtag_edges(self, hashtag_dtm):
        edges = cooccurrence_edges(hashtag_dtm, top_n=10, pattern="#*")
        assert list(edges.columns) == ["source", "target", "weight"]
        assert edges.to_dict("records") == [
            {"source": "#maga", "target": "#trump", "weight": 2},
        ]

    def test_sorted_by_weight(self, hashtag_dtm):
        edges = cooccurrence_edges(hashtag_dtm, top_n=10)
        weights = edges["weight"].tolist()
        assert weights == sorted(weights, reverse=True)
        assert edges.iloc[0]["weight"] == 2

    def test_each_pair_once(self, hashtag_dtm):
        edges = cooccurrence_edges(hashtag_dtm, top_n=10)
        pairs = {frozenset(p) for p in zip(edges["source"], edges["target"])}
        assert len(pairs) == len(edges)

    def test_invalid_top_n(self, hashtag_dtm):
        with pytest.raises(ValueError, match="top_n"):
            cooccurrence_edges(hashtag_dtm, top_n=0)
