"""
Tweet preprocessing: tokenization and normalization.

Usage:
    from troll_topics.preprocessing import TweetTokenizer

    tokenizer = TweetTokenizer(excluded_tokens=["rt", "amp"])
    doc = tokenizer.to_document("RT Obama obama #tcot", author="ten_gop")
"""

from .tokenizer import TweetTokenizer, default_stopwords
from .schemas import Document
from .constants import PREPROCESSING_MODULE_VERSION, DEFAULT_EXCLUDED_TOKENS

__all__ = [
    "TweetTokenizer",
    "default_stopwords",
    "Document",
    "PREPROCESSING_MODULE_VERSION",
    "DEFAULT_EXCLUDED_TOKENS",
]
