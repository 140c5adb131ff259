"""
Tweet record.

This module provides the immutable data structure that every analysis and
filter function in tweetlens reads from, plus normalization of raw decoded
JSON objects into that structure.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from dateutil import parser as date_parser

from tweetlens.core.exceptions import ErrorCode, ErrorContext, TweetFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tweet:
    """
    A single short message.

    Tweets are values: none of the library functions modify them, and the
    frozen dataclass makes accidental assignment raise.

    Attributes:
        id: Identifier, unique within any list of tweets
        author: Username of the author (letters, digits and underscore;
            compared case-insensitively)
        text: Message body, possibly empty but never None
        timestamp: Instant the tweet was sent
    """

    id: int
    author: str
    text: str
    timestamp: datetime

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> 'Tweet':
        """
        Create a Tweet from a decoded JSON object.

        Args:
            raw: Mapping with ``id``, ``author``, ``text`` and ``timestamp``
                keys. ``timestamp`` may be a datetime, a date string in any
                format dateutil understands, or Unix epoch seconds.

        Returns:
            Tweet populated from the mapping

        Raises:
            TweetFormatError: If a field is missing or cannot be converted
        """
        for key in ('id', 'author', 'text', 'timestamp'):
            if raw.get(key) is None:
                raise TweetFormatError(
                    f"Tweet record is missing required field '{key}'",
                    error_code=ErrorCode.VALIDATION_MISSING_FIELD,
                    field_name=key
                )

        try:
            tweet_id = int(raw['id'])
        except (ValueError, TypeError) as e:
            raise TweetFormatError(
                f"Tweet id must be an integer, got {raw['id']!r}",
                error_code=ErrorCode.VALIDATION_TYPE_MISMATCH,
                field_name='id',
                field_value=raw['id'],
                cause=e
            )

        timestamp = cls._parse_timestamp(raw['timestamp'])
        if timestamp is None:
            raise TweetFormatError(
                f"Could not parse timestamp {raw['timestamp']!r}",
                field_name='timestamp',
                field_value=raw['timestamp'],
                context=ErrorContext(operation='Tweet.from_raw', tweet_id=tweet_id)
            )

        return cls(
            id=tweet_id,
            author=str(raw['author']).strip(),
            text=str(raw['text']),
            timestamp=timestamp
        )

    @staticmethod
    def _parse_timestamp(value: Any) -> Optional[datetime]:
        """
        Convert a raw timestamp into a timezone-aware datetime.

        Naive values are taken to be UTC.
        """
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, bool):
            return None
        elif isinstance(value, (int, float)):
            try:
                return datetime.fromtimestamp(value, tz=timezone.utc)
            except (ValueError, OverflowError, OSError):
                logger.debug(f"Epoch timestamp out of range: {value}")
                return None
        elif isinstance(value, str):
            try:
                parsed = date_parser.parse(value)
            except (ValueError, OverflowError) as e:
                logger.debug(f"Could not parse timestamp '{value}': {e}")
                return None
        else:
            return None

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            'id': self.id,
            'author': self.author,
            'text': self.text,
            'timestamp': self.timestamp.isoformat()
        }
