"""
Tests for loading tweets from JSON and JSON Lines files.
"""

import pytest

from tweetlens.core.exceptions import ErrorCode, TweetFormatError, TweetLoadError
from tweetlens.loader import load_tweets


class TestLoadTweets:
    """Test load_tweets."""

    def test_json_array(self, tweet_file, d1, d3):
        tweets = load_tweets(tweet_file)

        assert [t.id for t in tweets] == [1, 2, 3]
        assert tweets[0].timestamp == d1
        assert tweets[2].timestamp == d3
        assert tweets[2].author == "Alyssa"

    def test_json_object_with_tweets_key(self, write_tweet_file, sample_raw_tweets):
        path = write_tweet_file({"tweets": sample_raw_tweets})

        assert len(load_tweets(path)) == 3

    def test_json_lines(self, write_tweet_file, sample_raw_tweets):
        path = write_tweet_file(sample_raw_tweets, name="tweets.jsonl")

        tweets = load_tweets(str(path))

        assert [t.id for t in tweets] == [1, 2, 3]

    def test_json_lines_skips_blank_lines(self, tmp_path):
        path = tmp_path / "tweets.jsonl"
        path.write_text(
            '{"id": 1, "author": "a", "text": "x", "timestamp": "2016-02-17"}\n\n'
            '{"id": 2, "author": "b", "text": "y", "timestamp": "2016-02-18"}\n',
            encoding="utf-8"
        )

        assert len(load_tweets(path)) == 2

    def test_empty_array(self, write_tweet_file):
        assert load_tweets(write_tweet_file([])) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(TweetLoadError) as exc_info:
            load_tweets(tmp_path / "nope.json")

        assert exc_info.value.error_code == ErrorCode.FS_FILE_NOT_FOUND
        assert exc_info.value.suggestions

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(TweetLoadError) as exc_info:
            load_tweets(path)

        assert exc_info.value.error_code == ErrorCode.PROCESSING_CORRUPT_DATA

    def test_invalid_json_line(self, tmp_path):
        path = tmp_path / "broken.jsonl"
        path.write_text('{"id": 1}\nnot json\n', encoding="utf-8")

        with pytest.raises(TweetLoadError) as exc_info:
            load_tweets(path)

        assert "line 2" in exc_info.value.message

    def test_top_level_not_a_list(self, write_tweet_file):
        with pytest.raises(TweetLoadError):
            load_tweets(write_tweet_file({"id": 1}))

    def test_record_not_an_object(self, write_tweet_file):
        with pytest.raises(TweetFormatError):
            load_tweets(write_tweet_file([1, 2]))

    def test_bad_record_names_index(self, write_tweet_file, sample_raw_tweets):
        del sample_raw_tweets[1]["author"]

        with pytest.raises(TweetFormatError) as exc_info:
            load_tweets(write_tweet_file(sample_raw_tweets))

        assert "Record 1" in exc_info.value.message
        assert exc_info.value.error_code == ErrorCode.VALIDATION_MISSING_FIELD

    def test_duplicate_ids(self, write_tweet_file, sample_raw_tweets):
        sample_raw_tweets[2]["id"] = 1

        with pytest.raises(TweetLoadError) as exc_info:
            load_tweets(write_tweet_file(sample_raw_tweets))

        assert exc_info.value.error_code == ErrorCode.VALIDATION_CONSTRAINT_VIOLATION
