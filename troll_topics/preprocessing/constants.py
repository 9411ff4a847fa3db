"""
Tokenization Constants

Patterns and defaults used when normalizing tweet text.
"""

import re
from typing import List

# ===========================
# Module Version
# ===========================
PREPROCESSING_MODULE_VERSION = "0.1.0"

# ===========================
# Token Filters
# ===========================
MIN_TOKEN_LENGTH = 2
"""Minimum token length kept after normalization"""

URL_PATTERN = re.compile(r"^(?:https?:|www\.|t\.co/)\S*$", re.IGNORECASE)
"""Tokens that are (fragments of) links"""

NUMERIC_PATTERN = re.compile(r"[+\-]?[\d.,:/%]*\d[\d.,:/%]*")
"""Tokens made of digits and numeric separators only (matched in full)"""

NON_WORD_CATEGORIES = frozenset("PSMCZ")
"""Unicode major categories for punctuation, symbols (emoji), marks, control and separators"""

# ===========================
# Tweet Noise
# ===========================
# Fallback exclusions when no configuration is supplied
DEFAULT_EXCLUDED_TOKENS: List[str] = [
    "rt", "amp", "http", "https", "t.co", "https://t.co",
]
