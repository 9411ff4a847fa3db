"""
Descriptive statistics over the tweet and user tables.

Usage:
    from troll_topics.analysis import summarize_tweets

    summary = summarize_tweets(tweets.frame, users.frame, top_n=10)
    print(summary.top_authors[:3])
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple

import pandas as pd
from pydantic import BaseModel, Field

from troll_topics.ingestion.schemas import (
    AUTHOR,
    CREATED_AT,
    FAVORITE_COUNT,
    FOLLOWERS_COUNT,
    LOCATION,
    RETWEET_COUNT,
    SCREEN_NAME,
    TEXT,
)

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 10


class CorpusSummary(BaseModel):
    """
    Summary of the loaded tweet corpus.

    Attributes:
        num_tweets: Number of valid tweets
        num_authors: Number of distinct author handles
        first_tweet / last_tweet: Timestamp range (None when no timestamps parse)
        total_retweets / total_favorites: Engagement totals
        top_authors: (handle, tweet count), most active first
        top_retweeted: Most retweeted tweets (author, text, retweet_count)
        tweets_per_day: ISO date -> tweet count
        top_followed: (screen name, followers), requires the user table
        top_locations: (location, account count), requires the user table
    """
    num_tweets: int = Field(..., ge=0)
    num_authors: int = Field(..., ge=0)
    first_tweet: Optional[datetime] = None
    last_tweet: Optional[datetime] = None
    total_retweets: int = Field(default=0, ge=0)
    total_favorites: int = Field(default=0, ge=0)
    top_authors: List[Tuple[str, int]] = Field(default_factory=list)
    top_retweeted: List[Dict[str, object]] = Field(default_factory=list)
    tweets_per_day: Dict[str, int] = Field(default_factory=dict)
    top_followed: List[Tuple[str, int]] = Field(default_factory=list)
    top_locations: List[Tuple[str, int]] = Field(default_factory=list)


def tweets_per_author(tweets: pd.DataFrame) -> pd.Series:
    """Tweet count per author, most active first (ties by handle)."""
    counts = tweets.groupby(AUTHOR).size()
    frame = counts.rename("tweets").reset_index()
    frame = frame.sort_values(["tweets", AUTHOR], ascending=[False, True])
    return frame.set_index(AUTHOR)["tweets"]


def tweets_per_day(tweets: pd.DataFrame) -> pd.Series:
    """Tweet count per calendar day; tweets without a timestamp are left out."""
    timestamps = tweets[CREATED_AT].dropna()
    if timestamps.empty:
        return pd.Series(dtype="int64", name="tweets")
    return timestamps.dt.floor("D").value_counts().sort_index().rename("tweets")


def summarize_tweets(
    tweets: pd.DataFrame,
    users: Optional[pd.DataFrame] = None,
    top_n: int = DEFAULT_TOP_N,
) -> CorpusSummary:
    """
    Compute descriptive statistics.

    Args:
        tweets: Frame from load_tweets()
        users: Optional frame from load_users()
        top_n: Length of the ranked lists

    Returns:
        CorpusSummary
    """
    if top_n < 1:
        raise ValueError(f"top_n must be >= 1, got {top_n}")

    timestamps = tweets[CREATED_AT].dropna()
    per_author = tweets_per_author(tweets)
    per_day = tweets_per_day(tweets)

    retweeted = tweets.sort_values(RETWEET_COUNT, ascending=False, kind="stable").head(top_n)

    summary = CorpusSummary(
        num_tweets=len(tweets),
        num_authors=int(tweets[AUTHOR].nunique()),
        first_tweet=timestamps.min().to_pydatetime() if not timestamps.empty else None,
        last_tweet=timestamps.max().to_pydatetime() if not timestamps.empty else None,
        total_retweets=int(tweets[RETWEET_COUNT].sum()),
        total_favorites=int(tweets[FAVORITE_COUNT].sum()),
        top_authors=[(str(a), int(n)) for a, n in per_author.head(top_n).items()],
        top_retweeted=[
            {"author": str(row[AUTHOR]), "text": str(row[TEXT]), "retweet_count": int(row[RETWEET_COUNT])}
            for _, row in retweeted.iterrows()
        ],
        tweets_per_day={day.date().isoformat(): int(n) for day, n in per_day.items()},
    )

    if users is not None:
        followed = users.sort_values(
            [FOLLOWERS_COUNT, SCREEN_NAME], ascending=[False, True]
        ).head(top_n)
        summary.top_followed = [
            (str(row[SCREEN_NAME]), int(row[FOLLOWERS_COUNT])) for _, row in followed.iterrows()
        ]
        locations = users[LOCATION].dropna().value_counts()
        summary.top_locations = [(str(loc), int(n)) for loc, n in locations.head(top_n).items()]

    logger.info(
        f"Summarized {summary.num_tweets} tweets from {summary.num_authors} authors"
    )
    return summary
