"""
Ingestion Schemas

Canonical column names and the load report returned by the CSV loaders.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd

# Canonical tweet columns (whatever the export calls them)
AUTHOR = "author"
TEXT = "text"
CREATED_AT = "created_at"
RETWEET_COUNT = "retweet_count"
FAVORITE_COUNT = "favorite_count"

TWEET_COLUMNS = [AUTHOR, TEXT, CREATED_AT, RETWEET_COUNT, FAVORITE_COUNT]

# Canonical user columns
SCREEN_NAME = "screen_name"
FOLLOWERS_COUNT = "followers_count"
LOCATION = "location"

USER_COLUMNS = [SCREEN_NAME, FOLLOWERS_COUNT, LOCATION]


@dataclass
class LoadResult:
    """
    Rows loaded from one CSV export.

    Attributes:
        frame: Valid rows with canonical column names
        rows_read: Rows present in the file
        rows_skipped: Rows dropped for a missing required field
        source: File the rows came from
    """
    frame: pd.DataFrame
    rows_read: int
    rows_skipped: int
    source: Optional[Path] = None

    @property
    def rows_loaded(self) -> int:
        return len(self.frame)

    def summary(self) -> dict:
        return {
            "source": str(self.source) if self.source else None,
            "rows_read": self.rows_read,
            "rows_loaded": self.rows_loaded,
            "rows_skipped": self.rows_skipped,
        }
