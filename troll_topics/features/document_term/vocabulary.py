"""
Vocabulary: ordered unique terms with stable integer indices.

Indices are assigned in first-seen order. A vocabulary only grows while a
matrix is being built; trimming produces a new, renumbered vocabulary via
restrict() and leaves the original untouched.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Sequence


class Vocabulary:
    """
    Term <-> index mapping.

    Usage:
        vocab = Vocabulary(["trump", "clinton"])
        vocab.add("obama")          # 2
        vocab.index_of("clinton")   # 1
        vocab[0]                    # 'trump'
    """

    def __init__(self, terms: Optional[Iterable[str]] = None):
        """
        Args:
            terms: Initial terms in index order

        Raises:
            ValueError: If terms contains duplicates
        """
        self._terms: List[str] = []
        self._index: Dict[str, int] = {}
        for term in terms or ():
            if term in self._index:
                raise ValueError(f"Duplicate term in vocabulary: {term!r}")
            self.add(term)

    def add(self, term: str) -> int:
        """Return the index of term, appending it if unseen."""
        index = self._index.get(term)
        if index is None:
            index = len(self._terms)
            self._terms.append(term)
            self._index[term] = index
        return index

    def index_of(self, term: str) -> Optional[int]:
        return self._index.get(term)

    def restrict(self, indices: Sequence[int]) -> "Vocabulary":
        """
        Build a renumbered vocabulary from the given indices.

        Args:
            indices: Indices to keep, in the order they should appear

        Returns:
            New Vocabulary where indices[i] becomes index i
        """
        return Vocabulary(self._terms[int(i)] for i in indices)

    def copy(self) -> "Vocabulary":
        return Vocabulary(self._terms)

    @property
    def terms(self) -> List[str]:
        return list(self._terms)

    @property
    def token2id(self) -> Dict[str, int]:
        return dict(self._index)

    @property
    def id2word(self) -> Dict[int, str]:
        """Index -> term mapping in the shape gensim models expect."""
        return dict(enumerate(self._terms))

    def __getitem__(self, index: int) -> str:
        return self._terms[index]

    def __contains__(self, term: object) -> bool:
        return term in self._index

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self._terms == other._terms

    def __repr__(self) -> str:
        preview = ", ".join(self._terms[:5])
        suffix = ", ..." if len(self._terms) > 5 else ""
        return f"Vocabulary([{preview}{suffix}], size={len(self._terms)})"
