"""
Feature Co-occurrence

Counts, for every pair of terms, the number of documents in which both
appear. The edge list is the data behind a co-occurrence network of the most
frequent hashtags, handles or words; drawing the network is left to the
caller.

Usage:
    from troll_topics.features.document_term import cooccurrence_edges

    edges = cooccurrence_edges(dtm, top_n=30, pattern="#*")
    # DataFrame[source, target, weight]
"""

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd
from scipy import sparse

from .constants import DEFAULT_TOP_FEATURES
from .matrix import DocumentTermMatrix

logger = logging.getLogger(__name__)

EDGE_COLUMNS = ["source", "target", "weight"]


def feature_cooccurrence(
    dtm: DocumentTermMatrix,
    features: Optional[Iterable[str]] = None,
) -> Tuple[sparse.csr_matrix, List[str]]:
    """
    Symmetric term x term document co-occurrence counts.

    Args:
        dtm: Source matrix
        features: Optional subset of terms (unknown terms are ignored);
            defaults to the whole vocabulary

    Returns:
        (matrix, terms) where matrix[i, j] is the number of documents
        containing both terms[i] and terms[j], with a zero diagonal
    """
    if features is not None:
        indices = []
        for term in features:
            index = dtm.vocabulary.index_of(term)
            if index is not None and index not in indices:
                indices.append(index)
        dtm = dtm.take_terms(indices)

    if dtm.n_terms == 0:
        return sparse.csr_matrix((0, 0), dtype=np.int64), []

    presence = (dtm.matrix > 0).astype(np.int64)
    counts = (presence.T @ presence).tocsr()
    counts = (counts - sparse.diags(counts.diagonal(), format='csr')).tocsr()
    counts.eliminate_zeros()
    return counts, dtm.vocabulary.terms


def cooccurrence_edges(
    dtm: DocumentTermMatrix,
    top_n: int = DEFAULT_TOP_FEATURES,
    pattern: Optional[str] = None,
) -> pd.DataFrame:
    """
    Weighted edge list between the most frequent features.

    Args:
        dtm: Source matrix
        top_n: Number of most frequent features to connect
        pattern: Optional glob applied first (e.g. "#*" or "@*")

    Returns:
        DataFrame with columns source, target, weight; each unordered pair
        appears once, sorted by weight (descending) then by names
    """
    if top_n < 1:
        raise ValueError(f"top_n must be >= 1, got {top_n}")

    if pattern is not None:
        dtm = dtm.select(pattern)

    features = [term for term, _ in dtm.top_features(top_n)]
    counts, terms = feature_cooccurrence(dtm, features)

    upper = sparse.triu(counts, k=1).tocoo()
    edges = pd.DataFrame({
        "source": [terms[i] for i in upper.row],
        "target": [terms[j] for j in upper.col],
        "weight": upper.data.astype(np.int64),
    }, columns=EDGE_COLUMNS)

    edges = edges.sort_values(
        ["weight", "source", "target"], ascending=[False, True, True]
    ).reset_index(drop=True)

    logger.info(f"Built {len(edges)} co-occurrence edges among {len(terms)} features")
    return edges
