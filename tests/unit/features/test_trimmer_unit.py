"""
Unit tests for troll_topics/features/document_term/trimmer.py

Tests inclusive thresholds, row retention, idempotence and threshold
validation.
No real data dependencies - runs in <1 second.
"""

import pytest

from troll_topics.features.document_term import (
    build_document_term_matrix,
    trim_document_term_matrix,
    validate_thresholds,
)


@pytest.fixture
def scenario_dtm(scenario_docs):
    return build_document_term_matrix(scenario_docs)


class TestTrimThresholds:
    """Tests for min_count / min_docfreq / max_docfreq."""

    def test_min_count_above_every_term_empties_vocabulary(self, scenario_dtm):
        trimmed = trim_document_term_matrix(scenario_dtm, min_count=3)
        assert trimmed.n_terms == 0
        assert trimmed.n_documents == 2
        assert trimmed.doc_lengths().tolist() == [0, 0]

    def test_min_count_is_inclusive(self, scenario_dtm):
        trimmed = trim_document_term_matrix(scenario_dtm, min_count=2)
        assert trimmed.vocabulary.terms == ["trump", "obama"]
        assert trimmed.matrix.toarray().tolist() == [[2, 0], [0, 2]]

    def test_min_docfreq(self, hashtag_docs):
        dtm = build_document_term_matrix(hashtag_docs)
        trimmed = trim_document_term_matrix(dtm, min_docfreq=2)
        assert trimmed.vocabulary.terms == ["#maga", "#trump", "@ten_gop"]
        assert trimmed.n_documents == 4
        assert trimmed.doc_lengths().tolist() == [3, 2, 2, 0]

    def test_max_docfreq_drops_ubiquitous_terms(self, hashtag_docs):
        dtm = build_document_term_matrix(hashtag_docs)
        trimmed = trim_document_term_matrix(dtm, max_docfreq=0.5)
        assert "#maga" not in trimmed.vocabulary
        assert "#trump" in trimmed.vocabulary

    def test_zero_thresholds_keep_everything(self, scenario_dtm):
        trimmed = trim_document_term_matrix(scenario_dtm, min_count=0, min_docfreq=0)
        assert trimmed.equals(scenario_dtm)

    def test_kept_terms_satisfy_thresholds(self, hashtag_docs):
        dtm = build_document_term_matrix(hashtag_docs * 3 + [["wall"]])
        trimmed = trim_document_term_matrix(dtm, min_count=4, min_docfreq=3)
        assert (trimmed.term_counts() >= 4).all()
        assert (trimmed.doc_frequencies() >= 3).all()
        assert trimmed.n_documents == dtm.n_documents

    def test_input_not_modified(self, scenario_dtm):
        trim_document_term_matrix(scenario_dtm, min_count=3)
        assert scenario_dtm.vocabulary.terms == ["trump", "clinton", "obama"]
        assert scenario_dtm.total_count == 5


class TestIdempotence:
    """Trimming twice with the same thresholds is a no-op."""

    @pytest.mark.parametrize("min_count,min_docfreq", [(1, 1), (2, 1), (2, 2), (3, 1)])
    def test_trim_twice(self, hashtag_docs, min_count, min_docfreq):
        dtm = build_document_term_matrix(hashtag_docs * 2 + [["police"]])
        once = trim_document_term_matrix(dtm, min_count=min_count, min_docfreq=min_docfreq)
        twice = trim_document_term_matrix(once, min_count=min_count, min_docfreq=min_docfreq)
        assert twice.equals(once)


class TestValidateThresholds:
    """Tests for validate_thresholds."""

    @pytest.mark.parametrize("kwargs", [
        {"min_count": -1, "min_docfreq": 1},
        {"min_count": 1, "min_docfreq": -2},
        {"min_count": 1.5, "min_docfreq": 1},
        {"min_count": True, "min_docfreq": 1},
        {"min_count": "5", "min_docfreq": 1},
        {"min_count": 1, "min_docfreq": 1, "max_docfreq": 0.0},
        {"min_count": 1, "min_docfreq": 1, "max_docfreq": 1.5},
    ])
    def test_invalid_thresholds_raise(self, kwargs):
        with pytest.raises(ValueError):
            validate_thresholds(**kwargs)

    def test_valid_thresholds_pass(self):
        validate_thresholds(0, 0)
        validate_thresholds(5, 3, 1.0)

    def test_trim_rejects_invalid_thresholds(self, scenario_dtm):
        with pytest.raises(ValueError, match="min_count"):
            trim_document_term_matrix(scenario_dtm, min_count=-1)
