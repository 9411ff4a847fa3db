"""
Document-term (document-feature) matrix construction and shaping.

Workflow:
    ```python
    from troll_topics.features.document_term import (
        build_document_term_matrix,
        trim_document_term_matrix,
        cooccurrence_edges,
    )

    dtm = build_document_term_matrix(documents)
    dtm = trim_document_term_matrix(dtm, min_count=5, min_docfreq=3)
    hashtag_edges = cooccurrence_edges(dtm, top_n=30, pattern="#*")
    ```
"""

from .vocabulary import Vocabulary
from .matrix import DocumentTermMatrix
from .builder import build_document_term_matrix
from .trimmer import trim_document_term_matrix, validate_thresholds
from .cooccurrence import feature_cooccurrence, cooccurrence_edges
from .constants import DOCUMENT_TERM_MODULE_VERSION

__all__ = [
    "Vocabulary",
    "DocumentTermMatrix",
    "build_document_term_matrix",
    "trim_document_term_matrix",
    "validate_thresholds",
    "feature_cooccurrence",
    "cooccurrence_edges",
    "DOCUMENT_TERM_MODULE_VERSION",
]
