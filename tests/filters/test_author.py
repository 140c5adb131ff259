"""
Tests for AuthorFilter and written_by.
"""

from tweetlens.filters.author import AuthorFilter, written_by


class TestWrittenBy:
    """Test the written_by selection function."""

    def test_no_tweets(self):
        assert written_by([], "alyssa") == []

    def test_no_matching_author(self, tweet1, tweet2):
        assert written_by([tweet1, tweet2], "unknownAuthor") == []

    def test_single_match(self, tweet1, tweet2):
        assert written_by([tweet1, tweet2], "alyssa") == [tweet1]

    def test_multiple_matches_keep_order(self, tweet1, tweet2, tweet3):
        result = written_by([tweet3, tweet2, tweet1], "alyssa")

        assert result == [tweet3, tweet1]

    def test_case_insensitive(self, sample_tweets):
        assert written_by(sample_tweets, "ALYSSA") == written_by(sample_tweets, "alyssa")
        assert len(written_by(sample_tweets, "AlYsSa")) == 2

    def test_returns_new_list_and_leaves_input_alone(self, sample_tweets):
        before = list(sample_tweets)

        result = written_by(sample_tweets, "bbitdiddle")

        assert result is not sample_tweets
        assert sample_tweets == before
        assert result[0] is sample_tweets[1]

    def test_no_partial_match(self, tweet1):
        assert written_by([tweet1], "alys") == []


class TestAuthorFilter:
    """Test AuthorFilter results and configuration."""

    def test_apply_pass(self, tweet1):
        result = AuthorFilter({"author": "Alyssa"}).apply(tweet1)

        assert result.passed is True
        assert "alyssa" in result.reason
        assert result.metadata["tweet_author"] == "alyssa"

    def test_apply_fail(self, tweet2):
        result = AuthorFilter({"author": "alyssa"}).apply(tweet2)

        assert result.passed is False
        assert "is not alyssa" in result.reason

    def test_unconfigured_passes_everything(self, sample_tweets):
        filter_obj = AuthorFilter()

        assert filter_obj.select(sample_tweets) == sample_tweets
        assert "all tweets pass" in filter_obj.description

    def test_name_and_description(self):
        filter_obj = AuthorFilter({"author": "alyssa"})

        assert filter_obj.name == "author"
        assert filter_obj.description == "Tweets written by alyssa"
        assert str(filter_obj) == "author: Tweets written by alyssa"

    def test_validate_config(self):
        assert AuthorFilter({"author": "alyssa"}).validate_config() == []
        assert AuthorFilter({"author": "  "}).validate_config() == ["author must not be blank"]
        assert AuthorFilter({"author": 42}).validate_config()
