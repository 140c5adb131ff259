"""
Core tweetlens Package

Contains the shared infrastructure: configuration and error handling.
"""

from tweetlens.core.exceptions import (
    TweetLensError,
    ConfigurationError,
    ValidationError,
    InvalidTimespanError,
    EmptyTweetListError,
    TweetFormatError,
    TweetLoadError,
    ErrorCode,
    ErrorContext,
    RecoverySuggestion
)

__all__ = [
    'TweetLensError',
    'ConfigurationError',
    'ValidationError',
    'InvalidTimespanError',
    'EmptyTweetListError',
    'TweetFormatError',
    'TweetLoadError',
    'ErrorCode',
    'ErrorContext',
    'RecoverySuggestion',
]
