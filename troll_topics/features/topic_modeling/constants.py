"""
Topic Modeling Constants and Configuration

This module defines defaults for fitting LDA topic models on the
trimmed tweet document-term matrix.
"""

# ===========================
# Module Version
# ===========================
TOPIC_MODELING_MODULE_VERSION = "0.1.0"

# ===========================
# Default LDA Parameters
# ===========================
DEFAULT_NUM_TOPICS = 10
"""Default number of topics to discover"""

DEFAULT_MAX_ITERATIONS = 50
"""Maximum number of passes through the corpus"""

DEFAULT_INNER_ITERATIONS = 100
"""Maximum variational iterations per document in each E-step"""

DEFAULT_TOLERANCE = 1e-4
"""Relative change of the per-word bound below which the fit has converged"""

DEFAULT_RANDOM_STATE = 42
"""Random seed for reproducibility"""

DEFAULT_ALPHA = "symmetric"
"""Document-topic prior ('symmetric', 'asymmetric', 'auto' or float)"""

DEFAULT_ETA = None
"""Topic-word prior (None = symmetric 1/num_topics)"""

# ===========================
# Feature Engineering
# ===========================
DEFAULT_MIN_PROBABILITY = 0.01
"""Minimum probability for listing a topic on a document"""

DOMINANT_TOPIC_THRESHOLD = 0.25
"""Minimum probability to count a topic as significant for a document"""

DEFAULT_NUM_TOPIC_WORDS = 10
"""Number of top words reported per topic"""

TOPIC_FEATURE_PREFIX = "topic_"
"""Prefix for topic proportion columns (e.g., topic_0, topic_1, ...)"""

ROW_SUM_TOLERANCE = 1e-6
"""Allowed deviation of probability rows from 1.0"""

# ===========================
# Model Persistence
# ===========================
RESULT_ARRAYS_FILENAME = "topic_model.npz"
"""doc_topics and topic_terms arrays"""

MODEL_INFO_FILENAME = "model_info.json"
"""Fit metadata and vocabulary"""

# ===========================
# Training Recommendations
# ===========================
RECOMMENDED_MIN_CORPUS_SIZE = 50
"""Minimum number of documents recommended for fitting LDA"""
