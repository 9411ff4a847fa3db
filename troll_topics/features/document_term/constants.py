"""
Document-Term Matrix Constants
"""

# ===========================
# Module Version
# ===========================
DOCUMENT_TERM_MODULE_VERSION = "0.1.0"

# ===========================
# Trimming Defaults
# ===========================
DEFAULT_MIN_COUNT = 1
"""Keep terms whose total count is >= this value"""

DEFAULT_MIN_DOCFREQ = 1
"""Keep terms appearing in >= this many documents"""

# ===========================
# Co-occurrence
# ===========================
DEFAULT_TOP_FEATURES = 30
"""Number of most frequent features used for co-occurrence edges"""

# ===========================
# Persistence
# ===========================
MATRIX_FILENAME = "dtm.npz"
"""scipy.sparse matrix file"""

VOCABULARY_FILENAME = "vocabulary.json"
"""Ordered term list"""

METADATA_FILENAME = "documents.json"
"""Per-row document metadata"""
