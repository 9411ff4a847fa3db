"""
Unit tests for troll_topics/preprocessing/tokenizer.py

Tests TweetTokenizer case folding, noise removal (links, numbers, emoji,
punctuation), stopword/exclusion filtering and Document creation.
No real data dependencies - runs in <1 second.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from troll_topics.config import TokenizerConfig
from troll_topics.preprocessing import Document, TweetTokenizer, default_stopwords


@pytest.fixture
def bare_tokenizer() -> TweetTokenizer:
    """Tokenizer without stopwords or exclusions."""
    return TweetTokenizer(use_default_stopwords=False, excluded_tokens=[])


class TestTokenize:
    """Tests for TweetTokenizer.tokenize."""

    def test_splits_on_whitespace_in_order(self, bare_tokenizer: TweetTokenizer):
        assert bare_tokenizer.tokenize("trump trump clinton") == ["trump", "trump", "clinton"]

    def test_case_folds(self, bare_tokenizer: TweetTokenizer):
        assert bare_tokenizer.tokenize("MAGA Maga maga") == ["maga", "maga", "maga"]

    def test_empty_inputs_give_no_tokens(self, bare_tokenizer: TweetTokenizer):
        assert bare_tokenizer.tokenize(None) == []
        assert bare_tokenizer.tokenize("") == []
        assert bare_tokenizer.tokenize("   \n\t") == []

    def test_removes_numbers(self, bare_tokenizer: TweetTokenizer):
        assert bare_tokenizer.tokenize("42 3.14 2016") == []

    def test_removes_punctuation_and_emoji(self, bare_tokenizer: TweetTokenizer):
        assert bare_tokenizer.tokenize("lol!!! \U0001F602\U0001F602 ... ?") == ["lol"]

    def test_removes_links(self, bare_tokenizer: TweetTokenizer):
        tokens = bare_tokenizer.tokenize("read this https://t.co/AbC123 now")
        assert tokens == ["read", "this", "now"]

    def test_keeps_links_when_not_stripping(self):
        tokenizer = TweetTokenizer(use_default_stopwords=False, excluded_tokens=[], strip_urls=False)
        tokens = tokenizer.tokenize("read https://t.co/abc123")
        assert "https://t.co/abc123" in tokens

    def test_keeps_hashtags_and_handles_whole(self, bare_tokenizer: TweetTokenizer):
        tokens = bare_tokenizer.tokenize("@TEN_GOP says #MAGA")
        assert tokens == ["@ten_gop", "says", "#maga"]

    def test_strip_handles_drops_mentions(self):
        tokenizer = TweetTokenizer(use_default_stopwords=False, excluded_tokens=[], strip_handles=True)
        assert tokenizer.tokenize("@TEN_GOP hi there") == ["hi", "there"]

    def test_drops_short_tokens(self, bare_tokenizer: TweetTokenizer):
        assert bare_tokenizer.tokenize("a wall b") == ["wall"]

    def test_min_token_length_one_keeps_single_letters(self):
        tokenizer = TweetTokenizer(use_default_stopwords=False, excluded_tokens=[], min_token_length=1)
        assert tokenizer.tokenize("a wall") == ["a", "wall"]

    def test_invalid_min_token_length_raises(self):
        with pytest.raises(ValueError, match="min_token_length"):
            TweetTokenizer(min_token_length=0)

    def test_realistic_tweet(self, sample_tweet_text: str):
        tokens = TweetTokenizer().tokenize(sample_tweet_text)
        assert "#maga" in tokens
        assert "@ten_gop" in tokens
        assert "rt" not in tokens
        assert "2016" not in tokens
        assert not any(t.startswith("http") for t in tokens)


class TestFiltering:
    """Stopword and exclusion filtering."""

    def test_excluded_tokens_are_case_insensitive(self):
        tokenizer = TweetTokenizer(use_default_stopwords=False, excluded_tokens=["RT", "Amp"])
        assert tokenizer.tokenize("RT great &amp; AMP rally") == ["great", "rally"]

    def test_exclusions_match_full_case_folding(self):
        """'Straße' and 'STRASSE' fold to the same token as the excluded entry."""
        tokenizer = TweetTokenizer(excluded_tokens=["Straße"], use_default_stopwords=False)
        assert tokenizer.tokenize("Straße straße STRASSE") == []

    def test_stopwords_match_full_case_folding(self):
        tokenizer = TweetTokenizer(stopwords=["STRASSE"], use_default_stopwords=False, excluded_tokens=[])
        assert tokenizer.tokenize("Straße berlin") == ["berlin"]

    def test_default_exclusions_used_when_none(self):
        tokenizer = TweetTokenizer(use_default_stopwords=False)
        assert tokenizer.tokenize("rt rally") == ["rally"]

    def test_extra_stopwords(self):
        tokenizer = TweetTokenizer(stopwords=["Wall"], use_default_stopwords=False, excluded_tokens=[])
        assert tokenizer.tokenize("build the wall") == ["build", "the"]

    def test_default_stopwords_removed(self):
        tokenizer = TweetTokenizer(excluded_tokens=[])
        assert "the" not in tokenizer.tokenize("build the wall")

    def test_default_stopwords_are_case_folded(self):
        words = default_stopwords()
        assert "the" in words
        assert all(w == w.casefold() for w in words)

    @pytest.mark.parametrize("text", [
        "RT @TEN_GOP: The WALL is coming!!! #BuildTheWall",
        "Amp it UP &amp; vote, vote, VOTE",
        "I am here and you are there http://bit.ly/x",
    ])
    def test_no_output_token_is_filtered(self, text: str):
        """Every output token passes the length, stopword and exclusion filters."""
        tokenizer = TweetTokenizer(excluded_tokens=["rt", "amp", "vote"])
        for token in tokenizer.tokenize(text):
            assert len(token) >= tokenizer.min_token_length
            assert token not in tokenizer.stopwords
            assert token not in tokenizer.excluded_tokens


class TestDocuments:
    """Document creation and configuration."""

    def test_to_document_carries_metadata(self, bare_tokenizer: TweetTokenizer):
        when = datetime(2016, 10, 1, 12, 0)
        doc = bare_tokenizer.to_document("build wall", author="ten_gop", published_at=when, doc_id="7")
        assert isinstance(doc, Document)
        assert doc.tokens == ("build", "wall")
        assert doc.metadata() == {"doc_id": "7", "author": "ten_gop", "published_at": when}

    def test_empty_document(self, bare_tokenizer: TweetTokenizer):
        doc = bare_tokenizer.to_document("!!! 2016")
        assert doc.is_empty
        assert len(doc) == 0

    def test_document_is_immutable(self, bare_tokenizer: TweetTokenizer):
        doc = bare_tokenizer.to_document("build wall")
        with pytest.raises(ValidationError):
            doc.tokens = ("other",)

    def test_tokenize_many_preserves_order(self, bare_tokenizer: TweetTokenizer):
        assert bare_tokenizer.tokenize_many(["obama", None, "trump"]) == [["obama"], [], ["trump"]]

    def test_from_config(self):
        config = TokenizerConfig(
            min_token_length=4,
            use_default_stopwords=False,
            extra_stopwords=["rally"],
            excluded_tokens=["wall"],
        )
        tokenizer = TweetTokenizer.from_config(config)
        assert tokenizer.tokenize("big rally wall border") == ["border"]
