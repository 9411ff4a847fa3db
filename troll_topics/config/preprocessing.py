"""Tokenization and frequency trimming configuration."""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from troll_topics.config._loader import load_yaml_section


def _get_config() -> dict:
    return load_yaml_section("features/preprocessing.yaml", "preprocessing")


class TokenizerConfig(BaseSettings):
    """Tweet tokenizer settings."""
    model_config = SettingsConfigDict(
        env_prefix='PREPROCESSING_TOKENIZER_',
        case_sensitive=False,
        validate_assignment=True
    )

    min_token_length: int = Field(
        default_factory=lambda: _get_config().get('tokenizer', {}).get('min_token_length', 2),
        ge=1,
    )
    strip_urls: bool = Field(
        default_factory=lambda: _get_config().get('tokenizer', {}).get('strip_urls', True)
    )
    strip_handles: bool = Field(
        default_factory=lambda: _get_config().get('tokenizer', {}).get('strip_handles', False)
    )
    use_default_stopwords: bool = Field(
        default_factory=lambda: _get_config().get('tokenizer', {}).get('use_default_stopwords', True)
    )
    extra_stopwords: List[str] = Field(
        default_factory=lambda: _get_config().get('tokenizer', {}).get('extra_stopwords', [])
    )
    excluded_tokens: List[str] = Field(
        default_factory=lambda: _get_config().get('tokenizer', {}).get(
            'excluded_tokens', ['rt', 'amp', 'http', 'https', 't.co', 'https://t.co']
        )
    )


class TrimmingConfig(BaseSettings):
    """Document-term matrix trimming thresholds."""
    model_config = SettingsConfigDict(
        env_prefix='TRIMMING_',
        case_sensitive=False,
        validate_assignment=True
    )

    min_count: int = Field(
        default_factory=lambda: _get_config().get('trimming', {}).get('min_count', 5),
        ge=0,
    )
    min_docfreq: int = Field(
        default_factory=lambda: _get_config().get('trimming', {}).get('min_docfreq', 3),
        ge=0,
    )
    max_docfreq: Optional[float] = Field(
        default_factory=lambda: _get_config().get('trimming', {}).get('max_docfreq', None)
    )

    @field_validator('max_docfreq')
    @classmethod
    def validate_max_docfreq(cls, v: Optional[float]) -> Optional[float]:
        """max_docfreq is a proportion of documents."""
        if v is not None and not 0.0 < v <= 1.0:
            raise ValueError(f"max_docfreq must be in (0, 1], got {v}")
        return v


class PreprocessingConfig(BaseSettings):
    """
    Preprocessing configuration.
    Loads from configs/features/preprocessing.yaml with environment variable overrides.
    """
    model_config = SettingsConfigDict(
        env_prefix='PREPROCESSING_',
        env_nested_delimiter='__',
        case_sensitive=False
    )

    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    trimming: TrimmingConfig = Field(default_factory=TrimmingConfig)
