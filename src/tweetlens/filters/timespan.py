"""
Time-window filtering for tweets.

Filters tweets by timestamp against a closed interval. Both bounds are
inclusive, and either may be left open when the filter is built from
configuration.
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Union

from dateutil import parser as date_parser

from tweetlens.core.exceptions import ErrorCode, validation_error
from tweetlens.filters.base import Filter, FilterResult
from tweetlens.timespan import Timespan
from tweetlens.tweet import Tweet


class TimespanFilter(Filter):
    """
    Filter tweets sent within a timespan.

    Configuration options:
    - timespan: A Timespan; takes precedence over start/end
    - start: Tweets sent on or after this instant (inclusive)
    - end: Tweets sent on or before this instant (inclusive)

    ``start`` and ``end`` accept datetimes or any string dateutil can
    parse ("2016-02-17T10:00:00Z", "Feb 17 2016 10:00"). Parsed strings
    without a timezone are taken as UTC; datetime objects are used as given.

    Raises:
        ValidationError: If a bound cannot be parsed
        InvalidTimespanError: If both bounds are given and start > end
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)

        timespan = self.config.get('timespan')
        if timespan is not None:
            self.start = timespan.start
            self.end = timespan.end
        else:
            self.start = self._parse_date('start', self.config.get('start'))
            self.end = self._parse_date('end', self.config.get('end'))
            if self.start is not None and self.end is not None:
                # Construction enforces start <= end
                Timespan(self.start, self.end)

    @property
    def name(self) -> str:
        return "timespan"

    @property
    def description(self) -> str:
        if self.start is not None and self.end is not None:
            return f"Tweets sent from {self._format_date(self.start)} to {self._format_date(self.end)}"
        if self.start is not None:
            return f"Tweets sent from {self._format_date(self.start)}"
        if self.end is not None:
            return f"Tweets sent until {self._format_date(self.end)}"
        return "No timespan filtering (all tweets pass)"

    def apply(self, tweet: Tweet) -> FilterResult:
        start_time = time.time()
        sent = tweet.timestamp

        if self.start is not None and sent < self.start:
            return FilterResult(
                passed=False,
                reason=f"Tweet sent {self._format_date(sent)} before {self._format_date(self.start)}",
                metadata={
                    "tweet_date": self._format_date(sent),
                    "start": self._format_date(self.start),
                    "failed_criteria": "start"
                },
                execution_time=time.time() - start_time
            )

        if self.end is not None and sent > self.end:
            return FilterResult(
                passed=False,
                reason=f"Tweet sent {self._format_date(sent)} after {self._format_date(self.end)}",
                metadata={
                    "tweet_date": self._format_date(sent),
                    "end": self._format_date(self.end),
                    "failed_criteria": "end"
                },
                execution_time=time.time() - start_time
            )

        return FilterResult(
            passed=True,
            reason=f"Tweet sent {self._format_date(sent)} within timespan",
            metadata={
                "tweet_date": self._format_date(sent),
                "start": self._format_date(self.start),
                "end": self._format_date(self.end)
            },
            execution_time=time.time() - start_time
        )

    def _parse_date(self, field_name: str, date_input: Union[str, datetime, None]) -> Optional[datetime]:
        """
        Parse a bound from a datetime or string.

        Args:
            field_name: Config key the bound came from
            date_input: Date in string, datetime, or None

        Returns:
            Parsed datetime object or None

        Raises:
            ValidationError: If the bound is not a datetime or a parseable string
        """
        if date_input is None or isinstance(date_input, datetime):
            return date_input

        if not isinstance(date_input, str):
            raise validation_error(
                f"{field_name} must be a datetime or date string, got {type(date_input).__name__}",
                field=field_name,
                field_value=date_input,
                error_code=ErrorCode.VALIDATION_TYPE_MISMATCH
            )

        try:
            parsed = date_parser.parse(date_input)
        except (ValueError, OverflowError) as e:
            raise validation_error(
                f"Could not parse {field_name}: {date_input}",
                field=field_name,
                field_value=date_input,
                error_code=ErrorCode.VALIDATION_FORMAT_ERROR,
                cause=e
            )
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    @staticmethod
    def _format_date(date_obj: Optional[datetime]) -> Optional[str]:
        if date_obj is None:
            return None
        return date_obj.isoformat()


def in_timespan(tweets: Sequence[Tweet], timespan: Timespan) -> List[Tweet]:
    """
    Find tweets that were sent during a particular timespan.

    Args:
        tweets: List of tweets with distinct ids, not modified
        timespan: Interval to match, inclusive at both ends

    Returns:
        All and only the tweets sent during the timespan, in the same order
        as in the input list
    """
    return TimespanFilter({'timespan': timespan}).select(tweets)
