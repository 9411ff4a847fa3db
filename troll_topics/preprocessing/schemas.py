"""
Preprocessing Schemas

Pydantic models for tokenized documents.
"""

from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """
    A tokenized tweet with its metadata.

    Created once from raw text and immutable afterwards. A document whose
    text was entirely excluded content carries an empty token tuple.

    Attributes:
        tokens: Normalized tokens in text order
        author: Author handle (user_key in the tweet export)
        published_at: Tweet timestamp
        doc_id: Optional identifier carried through to outputs
    """
    model_config = ConfigDict(frozen=True)

    tokens: Tuple[str, ...] = Field(default_factory=tuple, description="Normalized tokens")
    author: Optional[str] = Field(default=None, description="Author handle")
    published_at: Optional[datetime] = Field(default=None, description="Tweet timestamp")
    doc_id: Optional[str] = Field(default=None, description="Document identifier")

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def is_empty(self) -> bool:
        return len(self.tokens) == 0

    def metadata(self) -> dict:
        """Metadata without the tokens, for attaching to matrix rows."""
        return {
            "doc_id": self.doc_id,
            "author": self.author,
            "published_at": self.published_at,
        }
