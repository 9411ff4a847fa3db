"""
Troll Tweet Topic Analysis.

Exploratory analysis of tweets attributed to Russian troll accounts:
descriptive statistics, a sparse document-term matrix with frequency
trimming, feature co-occurrence edges and an LDA topic model.
"""

__version__ = "0.1.0"
