"""
Tests for Configuration Models

Tests the pydantic models for defaults, parsing and validation.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from tweetlens.core.config.models import AppConfig, FilterConfig, OutputConfig


class TestFilterConfig:
    """Test FilterConfig model."""

    def test_defaults(self):
        config = FilterConfig()

        assert config.author is None
        assert config.since is None
        assert config.until is None
        assert config.words == []
        assert config.composition == "and"
        assert config.is_empty()

    def test_date_strings_parsed(self):
        config = FilterConfig(since="2016-02-17 10:00", until="2016-02-17T12:00:00+01:00")

        assert config.since == datetime(2016, 2, 17, 10, 0, tzinfo=timezone.utc)
        assert config.until == datetime(2016, 2, 17, 11, 0, tzinfo=timezone.utc)
        assert not config.is_empty()

    def test_naive_datetime_becomes_utc(self):
        config = FilterConfig(since=datetime(2016, 2, 17))

        assert config.since.tzinfo is not None

    def test_empty_string_date_is_unset(self):
        assert FilterConfig(since="").since is None

    def test_unparseable_date(self):
        with pytest.raises(ValidationError, match="Could not parse date"):
            FilterConfig(since="whenever")

    def test_since_after_until(self):
        with pytest.raises(ValidationError, match="since must be on or before until"):
            FilterConfig(since="2016-02-18", until="2016-02-17")

    def test_equal_bounds_allowed(self):
        config = FilterConfig(since="2016-02-17", until="2016-02-17")

        assert config.since == config.until

    def test_composition_normalized(self):
        assert FilterConfig(composition=" OR ").composition == "or"

    def test_invalid_composition(self):
        with pytest.raises(ValidationError):
            FilterConfig(composition="xor")

    @pytest.mark.parametrize("word", ["", "two words", "tab\tbed"])
    def test_invalid_words(self, word):
        with pytest.raises(ValidationError):
            FilterConfig(words=[word])


class TestOutputConfig:
    """Test OutputConfig model."""

    def test_defaults(self):
        config = OutputConfig()

        assert config.format == "table"
        assert config.max_text_width == 80

    @pytest.mark.parametrize("width", [5, 501])
    def test_width_bounds(self, width):
        with pytest.raises(ValidationError):
            OutputConfig(max_text_width=width)

    def test_invalid_format(self):
        with pytest.raises(ValidationError):
            OutputConfig(format="csv")


class TestAppConfig:
    """Test AppConfig root model."""

    def test_nested_dicts(self):
        config = AppConfig(filters={"author": "alyssa"}, output={"format": "json"}, debug=True)

        assert config.filters.author == "alyssa"
        assert config.output.format == "json"
        assert config.debug is True

    def test_independent_defaults(self):
        first = AppConfig()
        first.filters.words.append("x")

        assert AppConfig().filters.words == []
