"""
End-to-end analysis pipeline.

load -> summarize -> tokenize -> build matrix -> trim -> fit topic model

Configuration is validated before any file is read, so a bad threshold or
topic count fails the run immediately.

Usage:
    from troll_topics.pipeline import TrollTopicsPipeline

    result = TrollTopicsPipeline().run("data/raw/tweets.csv", "data/raw/users.csv")
    print(result.tweets.rows_skipped, result.topic_model.converged)
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import pandas as pd

from troll_topics.analysis import CorpusSummary, summarize_tweets
from troll_topics.config import Settings, settings as default_settings
from troll_topics.features.document_term import (
    DocumentTermMatrix,
    build_document_term_matrix,
    trim_document_term_matrix,
    validate_thresholds,
)
from troll_topics.features.topic_modeling import TopicModelFitter, TopicModelResult
from troll_topics.ingestion import LoadResult, load_tweets, load_users
from troll_topics.ingestion.schemas import AUTHOR, CREATED_AT, TEXT
from troll_topics.preprocessing import Document, TweetTokenizer

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Everything one pipeline run produced."""
    tweets: LoadResult
    users: Optional[LoadResult]
    summary: CorpusSummary
    dtm: DocumentTermMatrix
    trimmed_dtm: DocumentTermMatrix
    topic_model: TopicModelResult
    warnings: List[str] = field(default_factory=list)

    @property
    def rows_skipped(self) -> int:
        return self.tweets.rows_skipped + (self.users.rows_skipped if self.users else 0)


class TrollTopicsPipeline:
    """
    Runs the full analysis once.

    Usage:
        pipeline = TrollTopicsPipeline()
        result = pipeline.run(tweets_path)
    """

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings
        self.tokenizer: Optional[TweetTokenizer] = None

    def validate(self) -> TopicModelFitter:
        """
        Check configuration before any computation.

        Returns:
            Fitter built from the validated topic model settings

        Raises:
            ValueError: On invalid thresholds or topic model settings
        """
        trimming = self.config.preprocessing.trimming
        validate_thresholds(trimming.min_count, trimming.min_docfreq, trimming.max_docfreq)
        return TopicModelFitter.from_config(self.config.topic_modeling.model)

    def run(
        self,
        tweets_path: Path | str,
        users_path: Optional[Path | str] = None,
    ) -> PipelineResult:
        """
        Run the pipeline.

        Args:
            tweets_path: tweets.csv export
            users_path: Optional users.csv export

        Returns:
            PipelineResult
        """
        fitter = self.validate()
        trimming = self.config.preprocessing.trimming

        logger.info("Step 1/5: Loading input tables...")
        tweets = load_tweets(tweets_path, self.config.ingestion)
        users = load_users(users_path, self.config.ingestion) if users_path else None
        if tweets.rows_loaded == 0:
            raise ValueError(f"No valid tweets in {tweets_path}")

        logger.info("Step 2/5: Computing descriptive statistics...")
        summary = summarize_tweets(tweets.frame, users.frame if users else None)

        logger.info("Step 3/5: Tokenizing tweets...")
        self.tokenizer = TweetTokenizer.from_config(self.config.preprocessing.tokenizer)
        documents = self.to_documents(tweets.frame)
        empty = sum(1 for doc in documents if doc.is_empty)
        if empty:
            logger.info(f"{empty} tweets have no tokens after normalization")

        logger.info("Step 4/5: Building and trimming document-term matrix...")
        dtm = build_document_term_matrix(documents)
        trimmed = trim_document_term_matrix(
            dtm,
            min_count=trimming.min_count,
            min_docfreq=trimming.min_docfreq,
            max_docfreq=trimming.max_docfreq,
        )

        logger.info("Step 5/5: Fitting topic model...")
        topic_model = fitter.fit(trimmed)

        warnings = list(topic_model.warnings)
        if tweets.rows_skipped:
            warnings.insert(0, f"Skipped {tweets.rows_skipped} malformed tweet rows")
        if users is not None and users.rows_skipped:
            warnings.insert(0, f"Skipped {users.rows_skipped} malformed user rows")

        return PipelineResult(
            tweets=tweets,
            users=users,
            summary=summary,
            dtm=dtm,
            trimmed_dtm=trimmed,
            topic_model=topic_model,
            warnings=warnings,
        )

    def to_documents(self, tweets: pd.DataFrame) -> List[Document]:
        """Tokenize every tweet row into a Document."""
        if self.tokenizer is None:
            self.tokenizer = TweetTokenizer.from_config(self.config.preprocessing.tokenizer)

        documents = []
        for index, row in tweets.iterrows():
            published_at = row[CREATED_AT]
            documents.append(self.tokenizer.to_document(
                row[TEXT],
                author=row[AUTHOR],
                published_at=None if pd.isna(published_at) else published_at.to_pydatetime(),
                doc_id=str(index),
            ))
        return documents
