"""
Unit tests for troll_topics/analysis/descriptive.py
No real data dependencies - runs in <1 second.
"""

import pandas as pd
import pytest

from troll_topics.analysis import summarize_tweets, tweets_per_author, tweets_per_day
from troll_topics.ingestion import load_tweets, load_users


@pytest.fixture
def tweets() -> pd.DataFrame:
    return pd.DataFrame({
        "author": ["ten_gop", "ten_gop", "pamela_moore13", "leroylovesusa"],
        "text": ["vote", "wall", "email", "rally"],
        "created_at": pd.to_datetime([
            "2016-10-01 08:00", "2016-10-01 20:00", "2016-10-02 09:00", None,
        ]),
        "retweet_count": [5, 50, 7, 0],
        "favorite_count": [1, 2, 3, 4],
    })


class TestCounts:
    """Tests for the per-author and per-day series."""

    def test_tweets_per_author(self, tweets):
        counts = tweets_per_author(tweets)
        assert list(counts.items()) == [("ten_gop", 2), ("leroylovesusa", 1), ("pamela_moore13", 1)]

    def test_tweets_per_day_skips_missing_timestamps(self, tweets):
        per_day = tweets_per_day(tweets)
        assert per_day.tolist() == [2, 1]

    def test_tweets_per_day_without_timestamps(self, tweets):
        tweets["created_at"] = pd.NaT
        assert tweets_per_day(tweets).empty


class TestSummarizeTweets:
    """Tests for summarize_tweets."""

    def test_summary(self, tweets):
        summary = summarize_tweets(tweets, top_n=2)
        assert summary.num_tweets == 4
        assert summary.num_authors == 3
        assert summary.total_retweets == 62
        assert summary.total_favorites == 10
        assert summary.top_authors == [("ten_gop", 2), ("leroylovesusa", 1)]
        assert [t["text"] for t in summary.top_retweeted] == ["wall", "email"]
        assert summary.tweets_per_day == {"2016-10-01": 2, "2016-10-02": 1}
        assert summary.first_tweet.day == 1
        assert summary.last_tweet.day == 2
        assert summary.top_followed == []

    def test_invalid_top_n(self, tweets):
        with pytest.raises(ValueError, match="top_n"):
            summarize_tweets(tweets, top_n=0)

    def test_with_users(self, tweets_csv, users_csv):
        summary = summarize_tweets(load_tweets(tweets_csv).frame, load_users(users_csv).frame)
        assert summary.top_followed[0] == ("ten_gop", 136000)
        assert summary.top_locations[0] == ("Texas", 2)
        assert summary.num_tweets == 24
