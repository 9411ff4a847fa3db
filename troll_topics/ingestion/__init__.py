"""Loading of the tweet and user CSV exports."""

from .loader import load_tweets, load_users
from .schemas import LoadResult, TWEET_COLUMNS, USER_COLUMNS

__all__ = ["load_tweets", "load_users", "LoadResult", "TWEET_COLUMNS", "USER_COLUMNS"]
