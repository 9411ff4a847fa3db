"""Input table configuration (tweet and user CSV exports)."""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from troll_topics.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("config.yaml").get("ingestion", {})


class IngestionConfig(BaseSettings):
    """Column names for the tweet and user tables."""
    model_config = SettingsConfigDict(
        env_prefix='INGESTION_',
        case_sensitive=False
    )

    # Tweet table
    author_column: str = Field(
        default_factory=lambda: _get_config().get('author_column', 'user_key')
    )
    text_column: str = Field(
        default_factory=lambda: _get_config().get('text_column', 'text')
    )
    timestamp_column: str = Field(
        default_factory=lambda: _get_config().get('timestamp_column', 'created_str')
    )
    retweet_column: str = Field(
        default_factory=lambda: _get_config().get('retweet_column', 'retweet_count')
    )
    favorite_column: str = Field(
        default_factory=lambda: _get_config().get('favorite_column', 'favorite_count')
    )

    # User table
    screen_name_column: str = Field(
        default_factory=lambda: _get_config().get('screen_name_column', 'screen_name')
    )
    followers_column: str = Field(
        default_factory=lambda: _get_config().get('followers_column', 'followers_count')
    )
    location_column: str = Field(
        default_factory=lambda: _get_config().get('location_column', 'location')
    )

    encoding: str = Field(
        default_factory=lambda: _get_config().get('encoding', 'utf-8')
    )

    @property
    def tweet_columns(self) -> List[str]:
        return [
            self.author_column,
            self.text_column,
            self.timestamp_column,
            self.retweet_column,
            self.favorite_column,
        ]

    @property
    def user_columns(self) -> List[str]:
        return [self.screen_name_column, self.followers_column, self.location_column]
