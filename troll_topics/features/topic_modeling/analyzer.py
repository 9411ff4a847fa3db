"""
Topic Modeling Feature Analyzer

Turns a fitted TopicModelResult into per-tweet topic features and a topic
assignment table.

Usage:
    from troll_topics.features.topic_modeling import TopicModelingAnalyzer

    analyzer = TopicModelingAnalyzer(result)
    features = analyzer.extract_features(0)
    print(f"Dominant topic: {features.dominant_topic}")

    assignments = analyzer.topic_assignments()   # one row per tweet
"""

import logging
from typing import Dict, List

import numpy as np
import pandas as pd

from .constants import (
    DEFAULT_MIN_PROBABILITY,
    DEFAULT_NUM_TOPIC_WORDS,
    DOMINANT_TOPIC_THRESHOLD,
)
from .result import TopicModelResult
from .schemas import DocumentTopic, TweetTopicFeatures

logger = logging.getLogger(__name__)

ASSIGNMENT_COLUMNS = [
    "doc_id", "author", "published_at",
    "dominant_topic", "dominant_probability", "topic_entropy",
]


class TopicModelingAnalyzer:
    """
    Per-tweet topic feature extractor.

    Features per tweet: dominant topic and its proportion, entropy of the
    topic distribution and the number of significant topics.
    """

    def __init__(
        self,
        result: TopicModelResult,
        min_probability: float = DEFAULT_MIN_PROBABILITY,
        dominant_threshold: float = DOMINANT_TOPIC_THRESHOLD,
    ):
        """
        Args:
            result: Fitted topic model output
            min_probability: Topics below this share are left out of document_topics()
            dominant_threshold: Share at which a topic counts as significant
        """
        self.result = result
        self.min_probability = min_probability
        self.dominant_threshold = dominant_threshold

    def extract_features(self, doc_index: int) -> TweetTopicFeatures:
        """
        Topic features of one tweet.

        Raises:
            IndexError: If doc_index is not a row of the fitted matrix
        """
        if not 0 <= doc_index < self.result.num_documents:
            raise IndexError(
                f"doc_index {doc_index} out of range for {self.result.num_documents} documents"
            )

        row = self.result.doc_topics[doc_index]
        dominant = int(np.argmax(row))
        meta = self._metadata(doc_index)

        return TweetTopicFeatures(
            doc_index=doc_index,
            doc_id=meta.get("doc_id"),
            author=meta.get("author"),
            proportions=[float(p) for p in row],
            dominant_topic=dominant,
            dominant_probability=round(min(float(row[dominant]), 1.0), 4),
            entropy=round(topic_entropy(row), 4),
            num_significant_topics=int(np.count_nonzero(row >= self.dominant_threshold)),
        )

    def extract_features_batch(self) -> List[TweetTopicFeatures]:
        return [self.extract_features(i) for i in range(self.result.num_documents)]

    def document_topics(
        self,
        doc_index: int,
        num_words: int = DEFAULT_NUM_TOPIC_WORDS,
    ) -> List[DocumentTopic]:
        """Topics of a tweet at or above min_probability, largest share first."""
        topics = []
        for topic in self.extract_features(doc_index).ranked_topics():
            if topic.probability < self.min_probability:
                break
            topic.top_words = [term for term, _ in self.result.top_terms(topic.topic_id, num_words)]
            topics.append(topic)
        return topics

    def topic_assignments(self) -> pd.DataFrame:
        """
        One row per tweet with its metadata and dominant topic.

        Returns:
            DataFrame with ASSIGNMENT_COLUMNS
        """
        records = []
        for i, features in enumerate(self.extract_features_batch()):
            records.append({
                "doc_id": features.doc_id,
                "author": features.author,
                "published_at": self._metadata(i).get("published_at"),
                "dominant_topic": features.dominant_topic,
                "dominant_probability": features.dominant_probability,
                "topic_entropy": features.entropy,
            })
        return pd.DataFrame.from_records(records, columns=ASSIGNMENT_COLUMNS)

    def get_topic_description(self, topic_id: int, num_words: int = DEFAULT_NUM_TOPIC_WORDS) -> str:
        words = ", ".join(term for term, _ in self.result.top_terms(topic_id, num_words))
        return f"Topic {topic_id}: {words}"

    def describe_topics(self, num_words: int = DEFAULT_NUM_TOPIC_WORDS) -> Dict[int, str]:
        return {
            k: self.get_topic_description(k, num_words)
            for k in range(self.result.num_topics)
        }

    def print_topics(self, num_words: int = DEFAULT_NUM_TOPIC_WORDS) -> None:
        """Print every topic's top terms and its prevalence across tweets."""
        prevalence = self.result.topic_prevalence()

        print(f"\nTopics (k={self.result.num_topics}, {self.result.num_documents} tweets)")
        print("-" * 72)
        for topic_id in range(self.result.num_topics):
            terms = "  ".join(
                f"{term}({weight:.3f})" for term, weight in self.result.top_terms(topic_id, num_words)
            )
            print(f"Topic {topic_id} (prevalence {prevalence[topic_id]:.3f})")
            print(f"     {terms}")
        print("-" * 72)

    def _metadata(self, doc_index: int) -> dict:
        if doc_index < len(self.result.doc_metadata):
            return self.result.doc_metadata[doc_index]
        return {}


def topic_entropy(proportions) -> float:
    """Shannon entropy (bits) of a topic distribution; zero shares contribute nothing."""
    p = np.asarray(proportions, dtype=np.float64)
    p = p[p > 0]
    return max(float(-(p * np.log2(p)).sum()), 0.0)
