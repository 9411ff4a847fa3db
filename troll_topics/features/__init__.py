"""Feature extraction: document-term matrices and topic models."""
