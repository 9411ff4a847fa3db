"""
Tweet Tokenizer / Normalizer

Splits raw tweet text into case-folded tokens and removes punctuation,
numbers, symbols (including emoji), links, stopwords and configured noise
tokens. Hashtags and @handles survive as single tokens.

Usage:
    from troll_topics.preprocessing import TweetTokenizer

    tokenizer = TweetTokenizer(excluded_tokens=["rt", "amp"])
    tokens = tokenizer.tokenize("RT @TEN_GOP: Hillary's emails! #MAGA https://t.co/xyz")
    # ['@ten_gop', "hillary's", 'emails', '#maga']
"""

import logging
import unicodedata
from datetime import datetime
from functools import lru_cache
from typing import FrozenSet, Iterable, List, Optional

from gensim.parsing.preprocessing import STOPWORDS as GENSIM_STOPWORDS
from nltk.corpus import stopwords as nltk_stopwords
from nltk.tokenize import casual

from .constants import (
    DEFAULT_EXCLUDED_TOKENS,
    MIN_TOKEN_LENGTH,
    NON_WORD_CATEGORIES,
    NUMERIC_PATTERN,
    URL_PATTERN,
)
from .schemas import Document

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_stopwords() -> FrozenSet[str]:
    """
    Load the default English stopword list (gensim + NLTK).

    Returns:
        Frozen set of lowercase stopwords
    """
    words = set(GENSIM_STOPWORDS)
    try:
        words.update(nltk_stopwords.words('english'))
    except LookupError:
        logger.warning(
            "NLTK stopwords not downloaded, using gensim stopwords only. "
            "Run: python -m nltk.downloader stopwords"
        )
    return frozenset(w.casefold() for w in words)


class TweetTokenizer:
    """
    Tokenizer and normalizer for tweet text.

    Pipeline per text:
    1. Case-fold and split with NLTK's tweet-aware tokenizer
    2. Drop links, punctuation/symbol-only tokens and numbers
    3. Drop short tokens
    4. Drop stopwords and excluded tokens

    The filter sets are case-folded at construction, so no output token is
    ever a member of the stopword or exclusion set.
    """

    def __init__(
        self,
        stopwords: Optional[Iterable[str]] = None,
        excluded_tokens: Optional[Iterable[str]] = None,
        use_default_stopwords: bool = True,
        min_token_length: int = MIN_TOKEN_LENGTH,
        strip_urls: bool = True,
        strip_handles: bool = False,
    ):
        """
        Initialize tokenizer.

        Args:
            stopwords: Additional stopwords
            excluded_tokens: Ad hoc noise tokens (e.g. 'rt', 'amp'); defaults
                to DEFAULT_EXCLUDED_TOKENS when None
            use_default_stopwords: Include gensim/NLTK English stopwords
            min_token_length: Tokens shorter than this are dropped
            strip_urls: Drop link tokens
            strip_handles: Drop @handles entirely instead of keeping them

        Raises:
            ValueError: If min_token_length < 1
        """
        if min_token_length < 1:
            raise ValueError(f"min_token_length must be >= 1, got {min_token_length}")

        stopword_set = set(default_stopwords()) if use_default_stopwords else set()
        if stopwords:
            stopword_set.update(stopwords)
        if excluded_tokens is None:
            excluded_tokens = DEFAULT_EXCLUDED_TOKENS

        self.stopwords: FrozenSet[str] = frozenset(w.casefold() for w in stopword_set)
        self.excluded_tokens: FrozenSet[str] = frozenset(t.casefold() for t in excluded_tokens)
        self.min_token_length = min_token_length
        self.strip_urls = strip_urls
        self.strip_handles = strip_handles

        self._splitter = casual.TweetTokenizer(
            preserve_case=False,
            reduce_len=True,
            strip_handles=strip_handles,
        )

        logger.debug(
            f"Initialized TweetTokenizer with {len(self.stopwords)} stopwords, "
            f"{len(self.excluded_tokens)} excluded tokens"
        )

    @classmethod
    def from_config(cls, config) -> "TweetTokenizer":
        """Build a tokenizer from a TokenizerConfig."""
        return cls(
            stopwords=config.extra_stopwords,
            excluded_tokens=config.excluded_tokens,
            use_default_stopwords=config.use_default_stopwords,
            min_token_length=config.min_token_length,
            strip_urls=config.strip_urls,
            strip_handles=config.strip_handles,
        )

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Tokenize and normalize one text.

        Args:
            text: Raw tweet text (None and empty strings allowed)

        Returns:
            List of normalized tokens, possibly empty
        """
        if not text or not text.strip():
            return []

        # preserve_case=False leaves emoticons untouched, fold them too
        tokens = [t.casefold() for t in self._splitter.tokenize(text)]
        return [t for t in tokens if self._keep(t)]

    def tokenize_many(self, texts: Iterable[Optional[str]]) -> List[List[str]]:
        """Tokenize a collection of texts, preserving order."""
        return [self.tokenize(text) for text in texts]

    def to_document(
        self,
        text: Optional[str],
        author: Optional[str] = None,
        published_at: Optional[datetime] = None,
        doc_id: Optional[str] = None,
    ) -> Document:
        """Tokenize text into an immutable Document carrying its metadata."""
        return Document(
            tokens=tuple(self.tokenize(text)),
            author=author,
            published_at=published_at,
            doc_id=doc_id,
        )

    def _keep(self, token: str) -> bool:
        if len(token) < self.min_token_length:
            return False
        if token in self.stopwords or token in self.excluded_tokens:
            return False
        if self.strip_urls and URL_PATTERN.match(token):
            return False
        if NUMERIC_PATTERN.fullmatch(token):
            return False
        if _is_non_word(token):
            return False
        return True


def _is_non_word(token: str) -> bool:
    """True when every character is punctuation, a symbol or a mark."""
    return all(unicodedata.category(ch)[0] in NON_WORD_CATEGORIES for ch in token)
