"""Descriptive analysis of the troll tweet corpus."""

from .descriptive import (
    CorpusSummary,
    summarize_tweets,
    tweets_per_author,
    tweets_per_day,
)

__all__ = ["CorpusSummary", "summarize_tweets", "tweets_per_author", "tweets_per_day"]
