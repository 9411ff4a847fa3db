"""
Topic Modeling Schemas

Pydantic models describing a fitted topic model and the topic exposure of
individual tweets.
"""

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from .constants import ROW_SUM_TOLERANCE


class DocumentTopic(BaseModel):
    """One topic's share of a tweet, optionally with the topic's top words."""
    topic_id: int = Field(..., ge=0)
    probability: float = Field(..., ge=0.0, le=1.0)
    top_words: List[str] = Field(default_factory=list)


class TweetTopicFeatures(BaseModel):
    """
    Topic exposure of a single tweet.

    Attributes:
        doc_index: Row of the tweet in the fitted matrix
        doc_id / author: Metadata carried from the tweet
        proportions: Full topic distribution, indexed by topic id
        dominant_topic: Most probable topic (lowest id on ties)
        dominant_probability: Its proportion
        entropy: Shannon entropy in bits; 0 for a single-topic tweet,
            log2(num_topics) for a uniform one
        num_significant_topics: Topics at or above the significance threshold
    """
    doc_index: int = Field(..., ge=0)
    doc_id: Optional[str] = None
    author: Optional[str] = None
    proportions: List[float] = Field(..., min_length=1)
    dominant_topic: int = Field(..., ge=0)
    dominant_probability: float = Field(..., ge=0.0, le=1.0)
    entropy: float = Field(default=0.0, ge=0.0)
    num_significant_topics: int = Field(default=0, ge=0)

    @field_validator('proportions')
    @classmethod
    def check_distribution(cls, v: List[float]) -> List[float]:
        if any(p < 0 for p in v):
            raise ValueError("Topic proportions must be non-negative")
        if abs(sum(v) - 1.0) > max(ROW_SUM_TOLERANCE, 1e-4):
            raise ValueError(f"Topic proportions must sum to 1, got {sum(v):.6f}")
        return v

    @property
    def num_topics(self) -> int:
        return len(self.proportions)

    def ranked_topics(self, k: Optional[int] = None) -> List[DocumentTopic]:
        """Topics by decreasing proportion; ties keep topic id order."""
        order = sorted(range(self.num_topics), key=lambda t: -self.proportions[t])
        if k is not None:
            order = order[:k]
        return [
            DocumentTopic(topic_id=t, probability=min(self.proportions[t], 1.0))
            for t in order
        ]


class TopicModelInfo(BaseModel):
    """
    Serializable description of a fitted topic model (topics.json).

    Attributes:
        num_topics / num_documents / vocabulary_size: Model dimensions
        max_iterations: Iteration budget
        iterations_run: Passes actually run
        best_iteration: Pass whose iterate was returned
        converged: Whether the bound stabilized within the budget
        random_state: Seed used for the fit
        alpha / eta: Dirichlet priors as configured
        per_word_bound: Per-word variational bound of the returned iterate
        topic_top_words: topic id -> [(term, probability), ...]
        warnings: Non-fatal problems raised during the fit
        created_at: When the description was produced
    """
    num_topics: int = Field(..., ge=1)
    num_documents: int = Field(..., ge=0)
    vocabulary_size: int = Field(..., ge=0)
    max_iterations: int = Field(..., ge=1)
    iterations_run: int = Field(..., ge=0)
    best_iteration: int = Field(..., ge=0)
    converged: bool
    random_state: int
    alpha: str | float | List[float] | None = None
    eta: str | float | None = None
    per_word_bound: Optional[float] = None
    topic_top_words: Dict[int, List[Tuple[str, float]]] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)

    def get_topic_description(self, topic_id: int, num_words: int = 10) -> str:
        """'Topic N: word, word, ...' (just 'Topic N' without word data)."""
        words = self.topic_top_words.get(topic_id, [])[:num_words]
        if not words:
            return f"Topic {topic_id}"
        return f"Topic {topic_id}: " + ", ".join(term for term, _ in words)
