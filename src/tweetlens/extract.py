"""
Aggregate properties of a list of tweets.

Two read-only computations: the smallest timespan containing every tweet,
and the set of usernames mentioned anywhere in the tweet texts.
"""

import logging
import re
import string
from typing import List, Sequence, Set

from tweetlens.core.exceptions import EmptyTweetListError
from tweetlens.timespan import Timespan
from tweetlens.tweet import Tweet

logger = logging.getLogger(__name__)

USERNAME_CHARS = frozenset(string.ascii_letters + string.digits + '_')

# Greedy, so the character after a match is never a username character.
_MENTION_PATTERN = re.compile(r'@([A-Za-z0-9_]+)')


def get_timespan(tweets: Sequence[Tweet]) -> Timespan:
    """
    Get the time period spanned by tweets.

    Args:
        tweets: Non-empty list of tweets with distinct ids, not modified

    Returns:
        The minimum-length timespan containing the timestamp of every tweet

    Raises:
        EmptyTweetListError: If ``tweets`` is empty
    """
    if not tweets:
        raise EmptyTweetListError('get_timespan')

    start = end = tweets[0].timestamp
    for tweet in tweets:
        if tweet.timestamp < start:
            start = tweet.timestamp
        if tweet.timestamp > end:
            end = tweet.timestamp

    return Timespan(start, end)


def mentions_in(text: str) -> List[str]:
    """
    Find the username-mentions in a single text.

    A mention is ``@`` followed by a username. It cannot be immediately
    preceded or followed by a username character, so ``bitdiddle@mit.edu``
    mentions nobody.

    Args:
        text: Text to scan

    Returns:
        Lowercased usernames in order of appearance, repeats included
    """
    found = []
    for match in _MENTION_PATTERN.finditer(text):
        at = match.start()
        if at > 0 and text[at - 1] in USERNAME_CHARS:
            continue
        found.append(match.group(1).lower())
    return found


def get_mentioned_users(tweets: Sequence[Tweet]) -> Set[str]:
    """
    Get usernames mentioned in a list of tweets.

    Args:
        tweets: List of tweets with distinct ids, not modified

    Returns:
        Set of lowercased usernames mentioned in the tweet texts. Usernames
        are case-insensitive, so each appears at most once.
    """
    mentioned = set()
    for tweet in tweets:
        mentioned.update(mentions_in(tweet.text))

    logger.debug(f"Found {len(mentioned)} distinct mentions in {len(tweets)} tweets")
    return mentioned
