"""
CSV loaders for the troll tweet and user exports.

Malformed rows (a wrong number of fields or a missing required field) are
skipped and counted, never raised. A file lacking one of the configured
columns fails immediately.

Usage:
    from troll_topics.ingestion import load_tweets, load_users

    tweets = load_tweets("data/raw/tweets.csv")
    print(f"Loaded {tweets.rows_loaded} tweets, skipped {tweets.rows_skipped}")
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

from troll_topics.config import IngestionConfig, settings
from .schemas import (
    AUTHOR,
    CREATED_AT,
    FAVORITE_COUNT,
    FOLLOWERS_COUNT,
    LOCATION,
    RETWEET_COUNT,
    SCREEN_NAME,
    TEXT,
    TWEET_COLUMNS,
    USER_COLUMNS,
    LoadResult,
)

logger = logging.getLogger(__name__)


def load_tweets(path: Path | str, config: Optional[IngestionConfig] = None) -> LoadResult:
    """
    Load tweet records.

    Author handles are case-folded so they join against user screen names.
    Timestamps that fail to parse become NaT; counts that fail to parse
    become 0.

    Args:
        path: tweets.csv export
        config: Column names (defaults to settings.ingestion)

    Returns:
        LoadResult with columns author, text, created_at, retweet_count,
        favorite_count

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a configured column is missing
    """
    config = config or settings.ingestion
    columns = {
        config.author_column: AUTHOR,
        config.text_column: TEXT,
        config.timestamp_column: CREATED_AT,
        config.retweet_column: RETWEET_COUNT,
        config.favorite_column: FAVORITE_COUNT,
    }
    raw, bad_lines = _read_csv(path, columns, config.encoding)
    rows_read = len(raw) + bad_lines

    frame = raw.rename(columns=columns)[TWEET_COLUMNS].copy()
    frame[AUTHOR] = _clean_strings(frame[AUTHOR]).str.casefold()
    frame[TEXT] = _clean_strings(frame[TEXT])

    frame = frame.dropna(subset=[AUTHOR, TEXT]).reset_index(drop=True)
    rows_skipped = rows_read - len(frame)

    frame[CREATED_AT] = pd.to_datetime(frame[CREATED_AT], errors='coerce')
    for column in (RETWEET_COUNT, FAVORITE_COUNT):
        frame[column] = _to_counts(frame[column])

    _log_skipped("tweet", path, rows_read, rows_skipped)
    return LoadResult(frame=frame, rows_read=rows_read, rows_skipped=rows_skipped, source=Path(path))


def load_users(path: Path | str, config: Optional[IngestionConfig] = None) -> LoadResult:
    """
    Load user records.

    Args:
        path: users.csv export
        config: Column names (defaults to settings.ingestion)

    Returns:
        LoadResult with columns screen_name (case-folded), followers_count,
        location

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a configured column is missing
    """
    config = config or settings.ingestion
    columns = {
        config.screen_name_column: SCREEN_NAME,
        config.followers_column: FOLLOWERS_COUNT,
        config.location_column: LOCATION,
    }
    raw, bad_lines = _read_csv(path, columns, config.encoding)
    rows_read = len(raw) + bad_lines

    frame = raw.rename(columns=columns)[USER_COLUMNS].copy()
    frame[SCREEN_NAME] = _clean_strings(frame[SCREEN_NAME]).str.casefold()
    frame[LOCATION] = _clean_strings(frame[LOCATION])

    frame = frame.dropna(subset=[SCREEN_NAME]).reset_index(drop=True)
    rows_skipped = rows_read - len(frame)

    frame[FOLLOWERS_COUNT] = _to_counts(frame[FOLLOWERS_COUNT])

    _log_skipped("user", path, rows_read, rows_skipped)
    return LoadResult(frame=frame, rows_read=rows_read, rows_skipped=rows_skipped, source=Path(path))


def _read_csv(path: Path | str, columns: Dict[str, str], encoding: str) -> Tuple[pd.DataFrame, int]:
    """
    Read an export as strings.

    Returns:
        (frame, bad_lines) where bad_lines counts rows rejected by the
        parser for having more fields than the header

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a configured column is missing
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    bad_lines: List[List[str]] = []

    def _reject(line: List[str]) -> None:
        bad_lines.append(line)

    raw = pd.read_csv(
        path,
        dtype=str,
        encoding=encoding,
        keep_default_na=True,
        engine='python',
        on_bad_lines=_reject,
    )
    if bad_lines:
        logger.debug(f"Rejected {len(bad_lines)} lines with extra fields in {path.name}")

    missing: List[str] = [c for c in columns if c not in raw.columns]
    if missing:
        raise ValueError(f"{path.name} is missing required columns: {', '.join(missing)}")
    return raw, len(bad_lines)


def _clean_strings(series: pd.Series) -> pd.Series:
    """Strip whitespace; blank strings become missing."""
    cleaned = series.astype("string").str.strip()
    return cleaned.replace("", pd.NA)


def _to_counts(series: pd.Series) -> pd.Series:
    return pd.to_numeric(series, errors='coerce').fillna(0).astype("int64")


def _log_skipped(kind: str, path: Path | str, rows_read: int, rows_skipped: int) -> None:
    if rows_skipped:
        logger.warning(
            f"Skipped {rows_skipped} of {rows_read} malformed {kind} rows "
            f"in {Path(path).name}"
        )
    else:
        logger.info(f"Loaded {rows_read} {kind} rows from {Path(path).name}")
