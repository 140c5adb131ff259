"""
Test suite for core exception system.

Tests error hierarchy, error context and recovery suggestions.
"""

import pytest

from tweetlens.core.exceptions import (
    ConfigurationError, EmptyTweetListError, ErrorCode, ErrorContext,
    InvalidTimespanError, RecoverySuggestion, TweetFormatError, TweetLensError,
    TweetLoadError, ValidationError, validation_error
)


class TestErrorHierarchy:
    """Test the error class hierarchy and inheritance."""

    def test_base_error_creation(self):
        """Test TweetLensError base class creation."""
        error = TweetLensError("Test error")

        assert str(error) == "Test error"
        assert error.error_code == ErrorCode.UNKNOWN_ERROR
        assert error.suggestions == []
        assert error.cause is None

    def test_context_filled_in(self):
        error = TweetLensError("Test error")

        assert len(error.context.correlation_id) == 8
        assert "python_version" in error.context.system_info

    @pytest.mark.parametrize("error_class", [
        InvalidTimespanError, EmptyTweetListError, TweetFormatError
    ])
    def test_validation_errors_are_value_errors(self, error_class):
        assert issubclass(error_class, ValidationError)
        assert issubclass(error_class, ValueError)
        assert issubclass(error_class, TweetLensError)

    def test_load_and_config_errors_are_not_value_errors(self):
        assert not issubclass(TweetLoadError, ValueError)
        assert not issubclass(ConfigurationError, ValueError)


class TestSpecificErrors:
    """Test constructor behavior of the concrete errors."""

    def test_invalid_timespan(self, d1, d2):
        error = InvalidTimespanError(d2, d1)

        assert error.start == d2
        assert error.end == d1
        assert error.error_code == ErrorCode.VALIDATION_RANGE_ERROR
        assert "is after end" in error.message
        assert error.context.user_context["field_name"] == "start"

    def test_empty_tweet_list(self):
        error = EmptyTweetListError("get_timespan")

        assert error.message == "get_timespan requires at least one tweet"
        assert error.context.operation == "get_timespan"

    def test_tweet_format_error_default_code(self):
        assert TweetFormatError("bad").error_code == ErrorCode.VALIDATION_FORMAT_ERROR

    def test_tweet_load_error_file_path(self):
        error = TweetLoadError("nope", error_code=ErrorCode.FS_FILE_NOT_FOUND, file_path="tweets.json")

        assert error.context.file_path == "tweets.json"
        assert error.context.operation == "load_tweets"
        assert error.suggestions[0].action == "Check the input path"

    def test_configuration_error_suggestions(self):
        error = ConfigurationError("bad", error_code=ErrorCode.CONFIG_SCHEMA_VALIDATION)

        assert error.suggestions
        assert ConfigurationError("bad").suggestions == []


class TestRecoverySuggestions:
    """Test suggestions and debug information."""

    def test_suggestions_sorted_by_priority(self):
        error = TweetLensError("Test error")
        error.add_suggestion(RecoverySuggestion("later", "second", priority=2))
        error.add_suggestion(RecoverySuggestion("first", "first", priority=1))

        assert [s.action for s in error.suggestions] == ["first", "later"]

    def test_debug_info(self):
        cause = KeyError("id")
        error = TweetLensError("Broken", cause=cause, context=ErrorContext(operation="load", tweet_id=3))

        info = error.get_debug_info()

        assert info["error_type"] == "TweetLensError"
        assert info["cause"]["type"] == "KeyError"
        assert info["context"]["tweet_id"] == 3
        assert info["context"]["operation"] == "load"


class TestConvenienceFunctions:
    """Test error factory helpers."""

    def test_validation_error(self):
        error = validation_error("bad id", field="id")

        assert error.error_code == ErrorCode.VALIDATION_INVALID_INPUT
        assert error.context.user_context["field_name"] == "id"
