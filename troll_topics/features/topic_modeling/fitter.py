"""
LDA Topic Model Fitter

Fits a gensim LDA model on a trimmed document-term matrix and returns
document-topic proportions and topic-term probabilities.

Training runs one pass over the corpus per iteration and tracks the
per-word variational bound. The fit has converged once the relative change
of the bound between two passes drops to the tolerance. The iterate with
the best bound is returned; running out of iterations is reported as a
warning on the result, never raised.

Usage:
    from troll_topics.features.topic_modeling import TopicModelFitter

    fitter = TopicModelFitter(num_topics=10, max_iterations=50, random_state=42)
    result = fitter.fit(trimmed_dtm)

    result.doc_topics      # (documents x topics), rows sum to 1
    result.topic_terms     # (topics x terms), rows sum to 1
    result.converged
"""

import copy
import logging
import math
from typing import Any, List, Optional

import numpy as np
from gensim.models import LdaModel

from troll_topics.features.document_term import DocumentTermMatrix
from .constants import (
    DEFAULT_ALPHA,
    DEFAULT_ETA,
    DEFAULT_INNER_ITERATIONS,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_NUM_TOPICS,
    DEFAULT_RANDOM_STATE,
    DEFAULT_TOLERANCE,
    RECOMMENDED_MIN_CORPUS_SIZE,
)
from .result import TopicModelResult

logger = logging.getLogger(__name__)


class TopicModelFitter:
    """
    LDA fitter for tweet document-term matrices.

    This class handles:
    1. Converting the matrix to a gensim bag-of-words corpus
    2. Training LDA pass by pass while tracking the variational bound
    3. Keeping the best iterate and reporting non-convergence
    4. Normalizing the posterior into probability matrices

    Identical matrices and seeds produce identical results.
    """

    def __init__(
        self,
        num_topics: int = DEFAULT_NUM_TOPICS,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        random_state: int = DEFAULT_RANDOM_STATE,
        alpha: Any = DEFAULT_ALPHA,
        eta: Any = DEFAULT_ETA,
        inner_iterations: int = DEFAULT_INNER_ITERATIONS,
        tolerance: float = DEFAULT_TOLERANCE,
    ):
        """
        Initialize fitter.

        Args:
            num_topics: Number of topics to discover
            max_iterations: Maximum passes through the corpus
            random_state: Random seed for reproducibility
            alpha: Document-topic prior ('symmetric', 'asymmetric', 'auto' or float)
            eta: Topic-word prior (None, 'auto' or float)
            inner_iterations: Maximum per-document variational iterations
            tolerance: Relative bound change that counts as converged

        Raises:
            ValueError: If a count is not positive or tolerance is negative
        """
        for name, value in (
            ("num_topics", num_topics),
            ("max_iterations", max_iterations),
            ("inner_iterations", inner_iterations),
        ):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {tolerance}")

        self.num_topics = num_topics
        self.max_iterations = max_iterations
        self.random_state = random_state
        self.alpha = alpha
        self.eta = eta
        self.inner_iterations = inner_iterations
        self.tolerance = tolerance

        logger.info(
            f"Initialized TopicModelFitter with {num_topics} topics, "
            f"max {max_iterations} iterations, seed {random_state}"
        )

    @classmethod
    def from_config(cls, config) -> "TopicModelFitter":
        """Build a fitter from a TopicModelingModelConfig."""
        return cls(
            num_topics=config.num_topics,
            max_iterations=config.max_iterations,
            random_state=config.random_state,
            alpha=config.alpha,
            eta=config.eta,
            inner_iterations=config.inner_iterations,
            tolerance=config.tolerance,
        )

    def fit(self, dtm: DocumentTermMatrix) -> TopicModelResult:
        """
        Fit LDA on a document-term matrix.

        Args:
            dtm: Trimmed document-term matrix

        Returns:
            TopicModelResult for the best iterate found

        Raises:
            ValueError: If the matrix has no terms or no counts
        """
        if dtm.n_terms == 0:
            raise ValueError("Cannot fit a topic model on a matrix with no terms")
        if dtm.total_count == 0:
            raise ValueError("Cannot fit a topic model on a matrix with no counts")

        if dtm.n_documents < RECOMMENDED_MIN_CORPUS_SIZE:
            logger.warning(
                f"Corpus size ({dtm.n_documents}) is below recommended minimum "
                f"({RECOMMENDED_MIN_CORPUS_SIZE}). Results may be unreliable."
            )

        corpus = dtm.to_corpus()
        chunksize = max(dtm.n_documents, 1)

        logger.info(
            f"Fitting LDA with {self.num_topics} topics on "
            f"{dtm.n_documents} documents x {dtm.n_terms} terms..."
        )
        model = LdaModel(
            id2word=dtm.vocabulary.id2word,
            num_topics=self.num_topics,
            random_state=self.random_state,
            alpha=self.alpha,
            eta=self.eta,
            iterations=self.inner_iterations,
            chunksize=chunksize,
            passes=1,
            eval_every=None,
        )

        bound_history: List[float] = []
        best_snapshot: Optional[_Snapshot] = None
        best_bound = -math.inf
        best_iteration = 0
        converged = False
        relative_change = math.inf

        for iteration in range(1, self.max_iterations + 1):
            model.update(corpus, chunksize=chunksize, passes=1)
            bound = float(model.log_perplexity(corpus))
            bound_history.append(bound)

            if bound > best_bound:
                best_bound = bound
                best_iteration = iteration
                best_snapshot = _Snapshot.take(model)

            if iteration > 1:
                previous = bound_history[-2]
                relative_change = abs(bound - previous) / max(abs(previous), 1e-12)
                logger.debug(
                    f"Iteration {iteration}: per-word bound {bound:.6f} "
                    f"(relative change {relative_change:.2e})"
                )
                if relative_change <= self.tolerance:
                    converged = True
                    break

        warnings: List[str] = []
        if best_snapshot is None:
            # every bound was NaN; fall back to the last iterate
            best_iteration = len(bound_history)
            warnings.append("Per-word bound was never finite during the fit")
        else:
            best_snapshot.restore(model)

        if converged:
            logger.info(f"LDA converged after {len(bound_history)} iterations")
        else:
            message = (
                f"LDA did not converge within {self.max_iterations} iterations "
                f"(last relative bound change {relative_change:.2e}, tolerance "
                f"{self.tolerance:.2e}); returning best iterate from iteration {best_iteration}"
            )
            logger.warning(message)
            warnings.append(message)

        doc_topics = self._document_topics(model, corpus)
        topic_terms = self._topic_terms(model)

        logger.info(f"Best per-word bound: {best_bound:.4f} (iteration {best_iteration})")

        return TopicModelResult(
            doc_topics=doc_topics,
            topic_terms=topic_terms,
            terms=dtm.vocabulary.terms,
            converged=converged,
            iterations_run=len(bound_history),
            best_iteration=best_iteration,
            bound_history=bound_history,
            random_state=self.random_state,
            max_iterations=self.max_iterations,
            alpha=self.alpha,
            eta=self.eta,
            warnings=warnings,
            doc_metadata=dtm.doc_metadata,
        )

    @staticmethod
    def _document_topics(model: LdaModel, corpus: list) -> np.ndarray:
        """Normalized variational gamma; an empty document gets the normalized prior."""
        gamma, _ = model.inference(corpus)
        gamma = np.asarray(gamma, dtype=np.float64)
        return gamma / gamma.sum(axis=1, keepdims=True)

    @staticmethod
    def _topic_terms(model: LdaModel) -> np.ndarray:
        topics = np.asarray(model.get_topics(), dtype=np.float64)
        return topics / topics.sum(axis=1, keepdims=True)


class _Snapshot:
    """Variational parameters of one LDA iterate."""

    def __init__(self, state, alpha: np.ndarray, eta: np.ndarray):
        self.state = state
        self.alpha = alpha
        self.eta = eta

    @classmethod
    def take(cls, model: LdaModel) -> "_Snapshot":
        return cls(copy.deepcopy(model.state), model.alpha.copy(), model.eta.copy())

    def restore(self, model: LdaModel) -> None:
        """Put the iterate back into model; expElogbeta is rebuilt from the state."""
        model.state = self.state
        model.alpha = self.alpha
        model.eta = self.eta
        model.sync_state()
