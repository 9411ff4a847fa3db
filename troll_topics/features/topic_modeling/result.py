"""
Topic Model Result

Immutable output of one topic model fit: document-topic proportions and
topic-term probabilities, plus fit diagnostics.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .constants import (
    DEFAULT_NUM_TOPIC_WORDS,
    MODEL_INFO_FILENAME,
    RESULT_ARRAYS_FILENAME,
    ROW_SUM_TOLERANCE,
    TOPIC_FEATURE_PREFIX,
)
from .schemas import TopicModelInfo

logger = logging.getLogger(__name__)


class TopicModelResult:
    """
    Fitted topic model output.

    Attributes:
        doc_topics: (num_documents, num_topics) array, each row sums to 1
        topic_terms: (num_topics, num_terms) array, each row sums to 1
        terms: Vocabulary terms labelling topic_terms columns
        converged: Whether the fit converged within its iteration budget
        iterations_run: Number of passes run
        best_iteration: Pass whose iterate is returned
        bound_history: Per-word bound after every pass
        warnings: Non-fatal problems (e.g. non-convergence)
    """

    def __init__(
        self,
        doc_topics: np.ndarray,
        topic_terms: np.ndarray,
        terms: Sequence[str],
        converged: bool,
        iterations_run: int,
        best_iteration: int,
        bound_history: Optional[Sequence[float]] = None,
        random_state: int = 0,
        max_iterations: Optional[int] = None,
        alpha: Any = None,
        eta: Any = None,
        warnings: Optional[List[str]] = None,
        doc_metadata: Optional[List[Dict[str, Any]]] = None,
    ):
        doc_topics = np.array(doc_topics, dtype=np.float64)
        topic_terms = np.array(topic_terms, dtype=np.float64)

        if doc_topics.ndim != 2 or topic_terms.ndim != 2:
            raise ValueError("doc_topics and topic_terms must be 2-D arrays")
        if doc_topics.shape[1] != topic_terms.shape[0]:
            raise ValueError(
                f"doc_topics has {doc_topics.shape[1]} topics, topic_terms has {topic_terms.shape[0]}"
            )
        if topic_terms.shape[1] != len(terms):
            raise ValueError(
                f"topic_terms has {topic_terms.shape[1]} columns for {len(terms)} terms"
            )
        _check_rows_sum_to_one("doc_topics", doc_topics)
        _check_rows_sum_to_one("topic_terms", topic_terms)

        doc_topics.setflags(write=False)
        topic_terms.setflags(write=False)

        self.doc_topics = doc_topics
        self.topic_terms = topic_terms
        self.terms: Tuple[str, ...] = tuple(terms)
        self.converged = bool(converged)
        self.iterations_run = int(iterations_run)
        self.best_iteration = int(best_iteration)
        self.bound_history: Tuple[float, ...] = tuple(float(b) for b in bound_history or ())
        self.random_state = int(random_state)
        self.max_iterations = int(max_iterations or iterations_run or 1)
        self.alpha = alpha
        self.eta = eta
        self.warnings: Tuple[str, ...] = tuple(warnings or ())
        self.doc_metadata: Tuple[Dict[str, Any], ...] = tuple(
            dict(m) for m in (doc_metadata or [{} for _ in range(doc_topics.shape[0])])
        )

    @property
    def num_topics(self) -> int:
        return self.topic_terms.shape[0]

    @property
    def num_documents(self) -> int:
        return self.doc_topics.shape[0]

    @property
    def num_terms(self) -> int:
        return self.topic_terms.shape[1]

    @property
    def per_word_bound(self) -> Optional[float]:
        if not self.bound_history or self.best_iteration < 1:
            return None
        return self.bound_history[self.best_iteration - 1]

    def __repr__(self) -> str:
        return (
            f"TopicModelResult(topics={self.num_topics}, documents={self.num_documents}, "
            f"terms={self.num_terms}, converged={self.converged})"
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def top_terms(self, topic_id: int, n: int = DEFAULT_NUM_TOPIC_WORDS) -> List[Tuple[str, float]]:
        """
        Most probable terms of a topic.

        Returns:
            List of (term, probability), descending; ties keep vocabulary order
        """
        if not 0 <= topic_id < self.num_topics:
            raise ValueError(f"topic_id must be in [0, {self.num_topics}), got {topic_id}")
        row = self.topic_terms[topic_id]
        order = np.argsort(-row, kind='stable')[:n]
        return [(self.terms[int(i)], float(row[i])) for i in order]

    def dominant_topics(self) -> np.ndarray:
        """Index of the most probable topic for each document."""
        return np.argmax(self.doc_topics, axis=1)

    def topic_prevalence(self) -> np.ndarray:
        """Mean topic proportion across documents."""
        if self.num_documents == 0:
            return np.zeros(self.num_topics)
        return self.doc_topics.mean(axis=0)

    def doc_topics_frame(self) -> pd.DataFrame:
        """Document-topic proportions as a DataFrame with topic_N columns."""
        columns = [f"{TOPIC_FEATURE_PREFIX}{k}" for k in range(self.num_topics)]
        return pd.DataFrame(self.doc_topics, columns=columns)

    def topic_terms_frame(self) -> pd.DataFrame:
        """Topic-term probabilities (topics x terms)."""
        return pd.DataFrame(self.topic_terms, columns=list(self.terms))

    def to_model_info(self, num_words: int = DEFAULT_NUM_TOPIC_WORDS) -> TopicModelInfo:
        return TopicModelInfo(
            num_topics=self.num_topics,
            num_documents=self.num_documents,
            vocabulary_size=self.num_terms,
            max_iterations=self.max_iterations,
            iterations_run=self.iterations_run,
            best_iteration=self.best_iteration,
            converged=self.converged,
            random_state=self.random_state,
            alpha=_jsonable(self.alpha),
            eta=_jsonable(self.eta),
            per_word_bound=self.per_word_bound,
            topic_top_words={
                k: self.top_terms(k, num_words) for k in range(self.num_topics)
            },
            warnings=list(self.warnings),
        )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, save_path: Path | str) -> None:
        """
        Save arrays and fit metadata to a directory.

        Args:
            save_path: Directory to save into (created if missing)
        """
        save_path = Path(save_path)
        save_path.mkdir(parents=True, exist_ok=True)

        arrays_path = save_path / RESULT_ARRAYS_FILENAME
        np.savez(arrays_path, doc_topics=self.doc_topics, topic_terms=self.topic_terms)
        logger.info(f"Saved topic model arrays to {arrays_path}")

        info = self.to_model_info().model_dump()
        info["terms"] = list(self.terms)
        info["bound_history"] = list(self.bound_history)
        info_path = save_path / MODEL_INFO_FILENAME
        with open(info_path, 'w', encoding='utf-8') as f:
            json.dump(info, f, indent=2, ensure_ascii=False, default=str)
        logger.info(f"Saved model info to {info_path}")

    @classmethod
    def load(cls, load_path: Path | str) -> "TopicModelResult":
        """
        Load a result saved with save().

        Raises:
            FileNotFoundError: If the directory or its files are missing
        """
        load_path = Path(load_path)
        arrays_path = load_path / RESULT_ARRAYS_FILENAME
        info_path = load_path / MODEL_INFO_FILENAME
        if not arrays_path.exists() or not info_path.exists():
            raise FileNotFoundError(f"Topic model files not found in {load_path}")

        with np.load(arrays_path) as arrays:
            doc_topics = arrays["doc_topics"]
            topic_terms = arrays["topic_terms"]
        with open(info_path, 'r', encoding='utf-8') as f:
            info = json.load(f)

        logger.info(f"Loaded topic model from {load_path}")
        return cls(
            doc_topics=doc_topics,
            topic_terms=topic_terms,
            terms=info["terms"],
            converged=info["converged"],
            iterations_run=info["iterations_run"],
            best_iteration=info["best_iteration"],
            bound_history=info.get("bound_history"),
            random_state=info["random_state"],
            max_iterations=info["max_iterations"],
            alpha=info.get("alpha"),
            eta=info.get("eta"),
            warnings=info.get("warnings"),
        )


def _check_rows_sum_to_one(name: str, array: np.ndarray) -> None:
    if array.size == 0:
        return
    sums = array.sum(axis=1)
    if not np.allclose(sums, 1.0, atol=ROW_SUM_TOLERANCE):
        worst = float(np.max(np.abs(sums - 1.0)))
        raise ValueError(f"Rows of {name} must sum to 1 (max deviation {worst:.2e})")


def _jsonable(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        return [float(v) for v in value]
    if isinstance(value, np.generic):
        return value.item()
    return value
