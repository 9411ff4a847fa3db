"""
Document-Term Matrix Builder

Turns tokenized documents into a sparse counts matrix. Vocabulary indices
are assigned in first-seen order: documents in input order, tokens in text
order within each document. Identical input always yields an identical
matrix and vocabulary.
"""

import logging
from collections import Counter
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple, Union

import numpy as np
from scipy import sparse

from troll_topics.preprocessing.schemas import Document
from .matrix import DocumentTermMatrix
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)

DocumentLike = Union[Document, Sequence[str]]


def build_document_term_matrix(
    documents: Iterable[DocumentLike],
    vocabulary: Optional[Vocabulary] = None,
) -> DocumentTermMatrix:
    """
    Build a document-term matrix.

    Args:
        documents: Document objects or plain token sequences
        vocabulary: Optional fixed vocabulary. When given, columns follow it
            exactly and tokens outside it are ignored; it is never mutated.

    Returns:
        DocumentTermMatrix with one row per input document

    Raises:
        TypeError: If a document is a bare string instead of a token sequence
    """
    fixed = vocabulary is not None
    vocab = vocabulary.copy() if fixed else Vocabulary()

    rows: list = []
    cols: list = []
    data: list = []
    metadata: list = []
    ignored = 0

    for row, document in enumerate(documents):
        tokens, meta = _unpack(document)
        metadata.append(meta)

        # Counter keeps insertion order, so columns within a row follow the text
        counts: Counter = Counter()
        for token in tokens:
            if fixed:
                index = vocab.index_of(token)
                if index is None:
                    ignored += 1
                    continue
            else:
                index = vocab.add(token)
            counts[index] += 1

        for index, count in counts.items():
            rows.append(row)
            cols.append(index)
            data.append(count)

    matrix = sparse.csr_matrix(
        (
            np.asarray(data, dtype=np.int64),
            (np.asarray(rows, dtype=np.int64), np.asarray(cols, dtype=np.int64)),
        ),
        shape=(len(metadata), len(vocab)),
        dtype=np.int64,
    )

    if ignored:
        logger.info(f"Ignored {ignored} tokens outside the fixed vocabulary")
    logger.info(
        f"Built document-term matrix: {len(metadata)} documents x {len(vocab)} terms"
    )
    return DocumentTermMatrix(matrix, vocab, metadata)


def _unpack(document: DocumentLike) -> Tuple[Sequence[str], Dict[str, Any]]:
    if isinstance(document, Document):
        return document.tokens, document.metadata()
    if isinstance(document, str):
        raise TypeError(
            "Expected a token sequence, got a string. Tokenize documents first."
        )
    return list(document), {}
