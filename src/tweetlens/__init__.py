"""
tweetlens: analysis and filtering of tweet collections.

Pure functions over immutable lists of tweets: the timespan they cover, the
users they mention, and sub-lists selected by author, time window or words.
"""

from tweetlens.extract import get_mentioned_users, get_timespan, mentions_in
from tweetlens.filters import containing, in_timespan, written_by
from tweetlens.timespan import Timespan
from tweetlens.tweet import Tweet

__version__ = "0.1.0"

__all__ = [
    "Tweet",
    "Timespan",
    "get_timespan",
    "get_mentioned_users",
    "mentions_in",
    "written_by",
    "in_timespan",
    "containing",
]
