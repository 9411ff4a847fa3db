"""
Troll Tweet Topic Analysis - Test Suite

Test modules organized by functionality:
- unit/preprocessing/ - Tokenizer tests
- unit/features/ - Document-term matrix, trimming, co-occurrence, topic model tests
- unit/ - Ingestion, descriptive statistics, config, pipeline and CLI tests
"""
