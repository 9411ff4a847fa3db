"""
Lightweight fixtures for unit tests - NO real data dependencies.
All fixtures use synthetic data that runs in <1 second.
"""

from pathlib import Path
from typing import List

import pandas as pd
import pytest

from troll_topics.features.document_term import build_document_term_matrix


# =============================================================================
# Token Fixtures
# =============================================================================

@pytest.fixture
def scenario_docs() -> List[List[str]]:
    """Two tokenized documents: 'trump trump clinton' and 'obama obama'."""
    return ["trump trump clinton".split(), "obama obama".split()]


@pytest.fixture
def hashtag_docs() -> List[List[str]]:
    """Documents mixing hashtags, handles and words."""
    return [
        ["#maga", "#trump", "wall", "@ten_gop"],
        ["#maga", "#trump", "border"],
        ["#maga", "vote", "@ten_gop"],
        ["#blacklivesmatter", "police"],
    ]


def _topic_docs() -> List[List[str]]:
    campaign = ["trump", "maga", "wall", "border", "rally", "vote"]
    scandal = ["hillary", "email", "server", "fbi", "leak", "benghazi"]
    docs = []
    for i in range(20):
        docs.append([campaign[(i + j) % 6] for j in range(8)])
    for i in range(20):
        docs.append([scandal[(i + j) % 6] for j in range(8)])
    return docs


@pytest.fixture
def topic_docs() -> List[List[str]]:
    """40 documents drawn from two disjoint vocabularies (20 each)."""
    return _topic_docs()


@pytest.fixture
def topic_dtm(topic_docs):
    """Document-term matrix over topic_docs plus one empty document."""
    return build_document_term_matrix(topic_docs + [[]])


# =============================================================================
# CSV Fixtures
# =============================================================================

@pytest.fixture
def tweets_frame() -> pd.DataFrame:
    """Raw tweet export rows, including two malformed rows."""
    rows = []
    campaign = "Trump rally tonight! Build the wall #MAGA @TEN_GOP vote"
    scandal = "Hillary email server leak, FBI investigation #CrookedHillary"
    for i in range(24):
        rows.append({
            "user_key": "ten_gop" if i % 2 == 0 else "Pamela_Moore13",
            "text": campaign if i < 12 else scandal,
            "created_str": f"2016-10-{(i % 5) + 1:02d} 12:00:00",
            "retweet_count": str(i),
            "favorite_count": "1",
        })
    rows.append({"user_key": "", "text": "orphan tweet", "created_str": "2016-10-01 00:00:00",
                 "retweet_count": "0", "favorite_count": "0"})
    rows.append({"user_key": "ten_gop", "text": None, "created_str": "2016-10-01 00:00:00",
                 "retweet_count": "0", "favorite_count": "0"})
    return pd.DataFrame(rows)


@pytest.fixture
def tweets_csv(tmp_path: Path, tweets_frame: pd.DataFrame) -> Path:
    path = tmp_path / "tweets.csv"
    tweets_frame.to_csv(path, index=False)
    return path


@pytest.fixture
def users_csv(tmp_path: Path) -> Path:
    path = tmp_path / "users.csv"
    pd.DataFrame([
        {"screen_name": "TEN_GOP", "followers_count": "136000", "location": "Tennessee"},
        {"screen_name": "Pamela_Moore13", "followers_count": "70000", "location": "Texas"},
        {"screen_name": "LeroyLovesUSA", "followers_count": "not a number", "location": "Texas"},
        {"screen_name": None, "followers_count": "5", "location": "Nowhere"},
    ]).to_csv(path, index=False)
    return path
