"""
Shared Test Configuration and Fixtures

Provides fixed instants, sample tweets and on-disk tweet files for the
whole test suite.
"""

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import pytest

from tweetlens.tweet import Tweet


D1 = datetime(2016, 2, 17, 10, 0, 0, tzinfo=timezone.utc)
D2 = datetime(2016, 2, 17, 11, 0, 0, tzinfo=timezone.utc)
D3 = datetime(2016, 2, 17, 12, 0, 0, tzinfo=timezone.utc)


# Test Data Fixtures
@pytest.fixture
def d1() -> datetime:
    return D1


@pytest.fixture
def d2() -> datetime:
    return D2


@pytest.fixture
def d3() -> datetime:
    return D3


@pytest.fixture
def tweet1() -> Tweet:
    return Tweet(1, "alyssa", "talk about rivest", D1)


@pytest.fixture
def tweet2() -> Tweet:
    return Tweet(2, "bbitdiddle", "rivest talk in 30 minutes #hype", D2)


@pytest.fixture
def tweet3() -> Tweet:
    return Tweet(3, "alyssa", "30 minutes #hype", D3)


@pytest.fixture
def sample_tweets(tweet1, tweet2, tweet3) -> List[Tweet]:
    """The three reference tweets, in timestamp order."""
    return [tweet1, tweet2, tweet3]


@pytest.fixture
def sample_raw_tweets() -> List[Dict[str, Any]]:
    """Decoded JSON records as they appear in tweet files."""
    return [
        {"id": 1, "author": "alyssa", "text": "talk about rivest with @bbitdiddle", "timestamp": "2016-02-17T10:00:00Z"},
        {"id": 2, "author": "bbitdiddle", "text": "rivest talk in 30 minutes #hype @Alyssa", "timestamp": "2016-02-17T11:00:00Z"},
        {"id": 3, "author": "Alyssa", "text": "30 minutes #hype, mail me at alyssa@mit.edu", "timestamp": "2016-02-17T12:00:00Z"},
    ]


@pytest.fixture
def write_tweet_file(tmp_path):
    """Factory writing records to a JSON (or JSON Lines) file under tmp_path."""
    def _write(records, name: str = "tweets.json") -> Path:
        path = tmp_path / name
        if path.suffix == ".jsonl":
            path.write_text("\n".join(json.dumps(r) for r in records) + "\n", encoding="utf-8")
        else:
            path.write_text(json.dumps(records), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def tweet_file(write_tweet_file, sample_raw_tweets) -> Path:
    return write_tweet_file(sample_raw_tweets)


@pytest.fixture(autouse=True)
def clean_tweetlens_env(monkeypatch, tmp_path):
    """Keep TWEETLENS_* variables and config files on the developer's machine out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("TWEETLENS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_root_log_level():
    """Commands adjust the root logger level; put it back after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


# Pytest Configuration
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "cli: marks tests that drive the command-line interface"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
