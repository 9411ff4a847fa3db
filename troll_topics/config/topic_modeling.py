"""Topic modeling configuration."""

from typing import Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from troll_topics.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("features/topic_modeling.yaml", "topic_modeling")


class TopicModelingModelConfig(BaseSettings):
    """LDA model settings."""
    model_config = SettingsConfigDict(
        env_prefix='TOPIC_MODELING_MODEL_',
        case_sensitive=False,
        validate_assignment=True
    )

    num_topics: int = Field(
        default_factory=lambda: _get_config().get('model', {}).get('num_topics', 10),
        ge=1,
    )
    max_iterations: int = Field(
        default_factory=lambda: _get_config().get('model', {}).get('max_iterations', 50),
        ge=1,
    )
    inner_iterations: int = Field(
        default_factory=lambda: _get_config().get('model', {}).get('inner_iterations', 100),
        ge=1,
    )
    tolerance: float = Field(
        default_factory=lambda: _get_config().get('model', {}).get('tolerance', 1e-4),
        ge=0.0,
    )
    random_state: int = Field(
        default_factory=lambda: _get_config().get('model', {}).get('random_state', 42)
    )
    alpha: Union[str, float] = Field(
        default_factory=lambda: _get_config().get('model', {}).get('alpha', 'symmetric')
    )
    eta: Union[str, float, None] = Field(
        default_factory=lambda: _get_config().get('model', {}).get('eta', None)
    )


class TopicModelingFeaturesConfig(BaseSettings):
    """Per-document topic feature settings."""
    model_config = SettingsConfigDict(
        env_prefix='TOPIC_MODELING_FEATURES_',
        case_sensitive=False
    )

    min_probability: float = Field(
        default_factory=lambda: _get_config().get('features', {}).get('min_probability', 0.01),
        ge=0.0,
        le=1.0,
    )
    dominant_threshold: float = Field(
        default_factory=lambda: _get_config().get('features', {}).get('dominant_threshold', 0.25),
        ge=0.0,
        le=1.0,
    )


class TopicModelingOutputConfig(BaseSettings):
    """Output format settings for topic modeling."""
    model_config = SettingsConfigDict(
        env_prefix='TOPIC_MODELING_OUT_',
        case_sensitive=False
    )

    num_topic_words: int = Field(
        default_factory=lambda: _get_config().get('output', {}).get('num_topic_words', 10),
        ge=1,
    )
    precision: int = Field(
        default_factory=lambda: _get_config().get('output', {}).get('precision', 4)
    )


class TopicModelingConfig(BaseSettings):
    """
    Topic modeling configuration.
    Loads from configs/features/topic_modeling.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='TOPIC_MODELING_',
        env_nested_delimiter='__',
        case_sensitive=False
    )

    model: TopicModelingModelConfig = Field(default_factory=TopicModelingModelConfig)
    features: TopicModelingFeaturesConfig = Field(default_factory=TopicModelingFeaturesConfig)
    output: TopicModelingOutputConfig = Field(default_factory=TopicModelingOutputConfig)
