"""
Troll Tweet Topic Analysis configuration package.

This module uses Pydantic Settings to:
1. Define the schema for all configuration
2. Load defaults from configs/config.yaml and configs/features/*.yaml
3. Automatically override with environment variables from .env

Usage:
    from troll_topics.config import settings

    # Access paths
    tweets_file = settings.paths.tweets_file

    # Access trimming thresholds
    min_count = settings.preprocessing.trimming.min_count

    # Access topic model settings
    num_topics = settings.topic_modeling.model.num_topics
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from troll_topics.config.paths import PathsConfig
from troll_topics.config.ingestion import IngestionConfig
from troll_topics.config.preprocessing import (
    PreprocessingConfig,
    TokenizerConfig,
    TrimmingConfig,
)
from troll_topics.config.topic_modeling import (
    TopicModelingConfig,
    TopicModelingModelConfig,
    TopicModelingFeaturesConfig,
    TopicModelingOutputConfig,
)


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from troll_topics.config import settings

        settings.paths.raw_data_dir
        settings.preprocessing.tokenizer.excluded_tokens
        settings.topic_modeling.model.num_topics
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    paths: PathsConfig = Field(default_factory=PathsConfig)
    ingestion: IngestionConfig = Field(default_factory=IngestionConfig)
    preprocessing: PreprocessingConfig = Field(default_factory=PreprocessingConfig)
    topic_modeling: TopicModelingConfig = Field(default_factory=TopicModelingConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


# ===========================
# Utility Functions
# ===========================

ensure_directories = settings.paths.ensure_directories


__all__ = [
    "settings",
    "Settings",
    "ensure_directories",
    "PathsConfig",
    "IngestionConfig",
    "PreprocessingConfig",
    "TokenizerConfig",
    "TrimmingConfig",
    "TopicModelingConfig",
    "TopicModelingModelConfig",
    "TopicModelingFeaturesConfig",
    "TopicModelingOutputConfig",
]
