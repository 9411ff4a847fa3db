"""
Document-Term Matrix

Sparse document x term counts (scipy CSR) together with the vocabulary that
labels its columns and the metadata of each row.

Usage:
    from troll_topics.features.document_term import build_document_term_matrix

    dtm = build_document_term_matrix([["trump", "trump", "clinton"], ["obama", "obama"]])
    dtm.term_counts()          # array([2, 1, 2])
    dtm.top_features(2)        # [('trump', 2), ('obama', 2)]
    hashtags = dtm.select("#*")
"""

import fnmatch
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from gensim import matutils
from scipy import sparse

from .constants import MATRIX_FILENAME, METADATA_FILENAME, VOCABULARY_FILENAME
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)


class DocumentTermMatrix:
    """
    Sparse counts matrix with labelled columns and rows.

    Invariant: the column count equals len(vocabulary), so every nonzero
    entry's term index exists in the vocabulary. Rows are never dropped by
    column operations; a document can end up with an empty row.
    """

    def __init__(
        self,
        matrix: Any,
        vocabulary: Vocabulary,
        doc_metadata: Optional[List[Dict[str, Any]]] = None,
    ):
        """
        Args:
            matrix: Anything scipy.sparse.csr_matrix accepts (documents x terms)
            vocabulary: Column labels
            doc_metadata: One dict per row (defaults to empty dicts)

        Raises:
            ValueError: On shape mismatches or negative counts
        """
        matrix = sparse.csr_matrix(matrix, dtype=np.int64)
        matrix.sum_duplicates()
        matrix.eliminate_zeros()
        matrix.sort_indices()

        if matrix.shape[1] != len(vocabulary):
            raise ValueError(
                f"Matrix has {matrix.shape[1]} columns but vocabulary has {len(vocabulary)} terms"
            )
        if matrix.nnz and matrix.data.min() < 0:
            raise ValueError("Document-term matrix counts must be non-negative")

        if doc_metadata is None:
            doc_metadata = [{} for _ in range(matrix.shape[0])]
        if len(doc_metadata) != matrix.shape[0]:
            raise ValueError(
                f"Got {len(doc_metadata)} metadata rows for {matrix.shape[0]} documents"
            )

        self._matrix = matrix
        self._vocabulary = vocabulary
        self._doc_metadata = [dict(m) for m in doc_metadata]

    # ------------------------------------------------------------------
    # Shape and accessors
    # ------------------------------------------------------------------

    @property
    def matrix(self) -> sparse.csr_matrix:
        return self._matrix

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    @property
    def doc_metadata(self) -> List[Dict[str, Any]]:
        return [dict(m) for m in self._doc_metadata]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._matrix.shape

    @property
    def n_documents(self) -> int:
        return self._matrix.shape[0]

    @property
    def n_terms(self) -> int:
        return self._matrix.shape[1]

    @property
    def nnz(self) -> int:
        return self._matrix.nnz

    @property
    def total_count(self) -> int:
        return int(self._matrix.sum())

    def __len__(self) -> int:
        return self.n_documents

    def __repr__(self) -> str:
        return (
            f"DocumentTermMatrix(documents={self.n_documents}, terms={self.n_terms}, "
            f"nnz={self.nnz})"
        )

    def equals(self, other: "DocumentTermMatrix") -> bool:
        """Same vocabulary order and same counts."""
        if self.shape != other.shape or self.vocabulary != other.vocabulary:
            return False
        return (self._matrix != other._matrix).nnz == 0

    def row(self, index: int) -> Dict[str, int]:
        """Term -> count mapping for one document."""
        start, end = self._matrix.indptr[index], self._matrix.indptr[index + 1]
        return {
            self._vocabulary[int(col)]: int(count)
            for col, count in zip(self._matrix.indices[start:end], self._matrix.data[start:end])
        }

    # ------------------------------------------------------------------
    # Frequencies
    # ------------------------------------------------------------------

    def term_counts(self) -> np.ndarray:
        """Total count of each term across all documents."""
        return np.asarray(self._matrix.sum(axis=0), dtype=np.int64).ravel()

    def doc_frequencies(self) -> np.ndarray:
        """Number of documents each term appears in."""
        return np.asarray(self._matrix.getnnz(axis=0), dtype=np.int64)

    def doc_lengths(self) -> np.ndarray:
        """Number of tokens kept in each document."""
        return np.asarray(self._matrix.sum(axis=1), dtype=np.int64).ravel()

    def top_features(self, n: int = 10) -> List[Tuple[str, int]]:
        """
        Most frequent terms.

        Ties are broken by vocabulary index, so the result is deterministic.
        """
        counts = self.term_counts()
        order = np.argsort(-counts, kind='stable')[:n]
        return [(self._vocabulary[int(i)], int(counts[i])) for i in order]

    # ------------------------------------------------------------------
    # Column selection
    # ------------------------------------------------------------------

    def take_terms(self, indices: Sequence[int]) -> "DocumentTermMatrix":
        """
        Restrict to the given columns, renumbering the vocabulary.

        Args:
            indices: Column indices to keep, in their new order

        Returns:
            New DocumentTermMatrix with all rows retained
        """
        indices = np.asarray(indices, dtype=np.int64)
        return DocumentTermMatrix(
            self._matrix[:, indices],
            self._vocabulary.restrict(indices),
            self._doc_metadata,
        )

    def select(self, pattern: str) -> "DocumentTermMatrix":
        """
        Keep terms matching a glob pattern (e.g. "#*" for hashtags).

        Matching is case-sensitive against the normalized terms.
        """
        indices = [
            i for i, term in enumerate(self._vocabulary)
            if fnmatch.fnmatchcase(term, pattern)
        ]
        logger.debug(f"Pattern {pattern!r} matched {len(indices)} of {self.n_terms} terms")
        return self.take_terms(indices)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_corpus(self) -> List[List[Tuple[int, int]]]:
        """Bag-of-words corpus (one list of (term_id, count) per document) for gensim."""
        return [
            [(int(term_id), int(count)) for term_id, count in doc]
            for doc in matutils.Sparse2Corpus(self._matrix, documents_columns=False)
        ]

    def to_frame(self) -> pd.DataFrame:
        """Dense DataFrame (documents x terms). Only sensible for small matrices."""
        return pd.DataFrame(
            self._matrix.toarray(),
            columns=self._vocabulary.terms,
        )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, save_path: Path | str) -> None:
        """
        Save matrix, vocabulary and row metadata into a directory.

        Args:
            save_path: Directory to write into (created if missing)
        """
        save_path = Path(save_path)
        save_path.mkdir(parents=True, exist_ok=True)

        sparse.save_npz(save_path / MATRIX_FILENAME, self._matrix)
        with open(save_path / VOCABULARY_FILENAME, 'w', encoding='utf-8') as f:
            json.dump(self._vocabulary.terms, f, ensure_ascii=False, indent=2)
        with open(save_path / METADATA_FILENAME, 'w', encoding='utf-8') as f:
            json.dump(self._doc_metadata, f, ensure_ascii=False, indent=2, default=_json_default)

        logger.info(f"Saved document-term matrix {self.shape} to {save_path}")

    @classmethod
    def load(cls, load_path: Path | str) -> "DocumentTermMatrix":
        """
        Load a matrix saved with save().

        Raises:
            FileNotFoundError: If the directory or matrix file is missing
        """
        load_path = Path(load_path)
        matrix_path = load_path / MATRIX_FILENAME
        if not matrix_path.exists():
            raise FileNotFoundError(f"Document-term matrix not found: {matrix_path}")

        matrix = sparse.load_npz(matrix_path)
        with open(load_path / VOCABULARY_FILENAME, 'r', encoding='utf-8') as f:
            vocabulary = Vocabulary(json.load(f))

        metadata = None
        metadata_path = load_path / METADATA_FILENAME
        if metadata_path.exists():
            with open(metadata_path, 'r', encoding='utf-8') as f:
                metadata = [_restore_timestamp(m) for m in json.load(f)]

        logger.info(f"Loaded document-term matrix {matrix.shape} from {load_path}")
        return cls(matrix, vocabulary, metadata)


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def _restore_timestamp(meta: Dict[str, Any]) -> Dict[str, Any]:
    published_at = meta.get("published_at")
    if isinstance(published_at, str):
        meta["published_at"] = datetime.fromisoformat(published_at)
    return meta
