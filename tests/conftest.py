"""
Shared pytest fixtures for the troll tweet analysis test suite.

This module provides common fixtures used across test modules:
- Project paths
- Configuration settings
- Sample tweet text

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

import pytest
from pathlib import Path
import sys

# Ensure the package is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from troll_topics.config import Settings


# ===========================
# Path Fixtures
# ===========================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def configs_dir(project_root: Path) -> Path:
    """Return the YAML configs directory."""
    return project_root / "configs"


# ===========================
# Configuration Fixtures
# ===========================

@pytest.fixture
def test_settings() -> Settings:
    """
    Fresh Settings instance tuned for small synthetic corpora.

    Trimming keeps every term and the topic model is small, so pipeline
    tests run in well under a second per fit.
    """
    config = Settings()
    config.preprocessing.trimming.min_count = 1
    config.preprocessing.trimming.min_docfreq = 1
    config.preprocessing.trimming.max_docfreq = None
    config.preprocessing.tokenizer.min_token_length = 2
    config.topic_modeling.model.num_topics = 2
    config.topic_modeling.model.max_iterations = 30
    config.topic_modeling.model.random_state = 42
    return config


# ===========================
# Sample Content Fixtures
# ===========================

@pytest.fixture(scope="session")
def sample_tweet_text() -> str:
    """A troll-style tweet with a handle, hashtag, link, number and emoji."""
    return "RT @TEN_GOP: Hillary's emails are back!!! #MAGA 2016 \U0001F1FA\U0001F1F8 https://t.co/AbC123"
