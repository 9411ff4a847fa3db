"""
Topic Modeling Module

LDA topic modeling of troll tweets. Discovers latent themes in the trimmed
document-term matrix and quantifies each tweet's exposure to them.

Key Components:
- TopicModelFitter: Fits LDA (gensim) with convergence tracking
- TopicModelResult: Document-topic and topic-term probability matrices
- TopicModelingAnalyzer: Per-tweet topic features and assignments
- TweetTopicFeatures / DocumentTopic / TopicModelInfo: Pydantic schemas

Workflow:
    ```python
    from troll_topics.features.topic_modeling import TopicModelFitter, TopicModelingAnalyzer

    result = TopicModelFitter(num_topics=10, random_state=42).fit(trimmed_dtm)
    if not result.converged:
        print(result.warnings)

    analyzer = TopicModelingAnalyzer(result)
    analyzer.print_topics(num_words=10)
    assignments = analyzer.topic_assignments()
    ```
"""

from .fitter import TopicModelFitter
from .result import TopicModelResult
from .analyzer import TopicModelingAnalyzer, topic_entropy
from .schemas import (
    TweetTopicFeatures,
    DocumentTopic,
    TopicModelInfo,
)
from .constants import (
    TOPIC_MODELING_MODULE_VERSION,
    DEFAULT_NUM_TOPICS,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_RANDOM_STATE,
)

__all__ = [
    "TopicModelFitter",
    "TopicModelResult",
    "TopicModelingAnalyzer",
    "topic_entropy",
    "TweetTopicFeatures",
    "DocumentTopic",
    "TopicModelInfo",
    "TOPIC_MODELING_MODULE_VERSION",
    "DEFAULT_NUM_TOPICS",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_RANDOM_STATE",
]

__version__ = TOPIC_MODELING_MODULE_VERSION
