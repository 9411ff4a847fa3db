"""
Frequency Trimmer

Drops rare (and optionally ubiquitous) terms from a document-term matrix.
Thresholds are inclusive: min_count=2 keeps terms counted exactly twice.
Documents are never removed; a document whose terms were all trimmed keeps
an empty row. Trimming twice with the same thresholds changes nothing.
"""

import logging
import numbers
from typing import Optional

import numpy as np

from .constants import DEFAULT_MIN_COUNT, DEFAULT_MIN_DOCFREQ
from .matrix import DocumentTermMatrix

logger = logging.getLogger(__name__)


def trim_document_term_matrix(
    dtm: DocumentTermMatrix,
    min_count: int = DEFAULT_MIN_COUNT,
    min_docfreq: int = DEFAULT_MIN_DOCFREQ,
    max_docfreq: Optional[float] = None,
) -> DocumentTermMatrix:
    """
    Restrict a matrix to terms satisfying every threshold.

    Args:
        dtm: Matrix to trim (not modified)
        min_count: Minimum total count of a term
        min_docfreq: Minimum number of documents containing a term
        max_docfreq: Optional maximum share of documents (0, 1] containing a term

    Returns:
        New DocumentTermMatrix with a re-indexed vocabulary

    Raises:
        ValueError: On negative/non-integer counts or max_docfreq outside (0, 1]
    """
    validate_thresholds(min_count, min_docfreq, max_docfreq)

    counts = dtm.term_counts()
    docfreq = dtm.doc_frequencies()

    keep = (counts >= min_count) & (docfreq >= min_docfreq)
    if max_docfreq is not None:
        keep &= docfreq <= max_docfreq * dtm.n_documents

    indices = np.flatnonzero(keep)
    trimmed = dtm.take_terms(indices)

    empty_rows = int(np.count_nonzero(trimmed.doc_lengths() == 0))
    logger.info(
        f"Trimmed vocabulary {dtm.n_terms} -> {trimmed.n_terms} terms "
        f"(min_count={min_count}, min_docfreq={min_docfreq}, max_docfreq={max_docfreq}); "
        f"{empty_rows} empty documents"
    )
    return trimmed


def validate_thresholds(
    min_count: int,
    min_docfreq: int,
    max_docfreq: Optional[float] = None,
) -> None:
    """
    Check trimming thresholds before any computation.

    Raises:
        ValueError: If a threshold is malformed
    """
    for name, value in (("min_count", min_count), ("min_docfreq", min_docfreq)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise ValueError(f"{name} must be >= 0, got {value}")

    if max_docfreq is not None:
        if isinstance(max_docfreq, bool) or not isinstance(max_docfreq, numbers.Real):
            raise ValueError(f"max_docfreq must be a number, got {max_docfreq!r}")
        if not 0.0 < max_docfreq <= 1.0:
            raise ValueError(f"max_docfreq must be in (0, 1], got {max_docfreq}")
