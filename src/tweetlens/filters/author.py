"""
Author-based filtering for tweets.

Usernames are case-insensitive, so authorship is decided by comparing
lowercased strings.
"""

import time
from typing import Any, Dict, List, Optional, Sequence

from tweetlens.filters.base import Filter, FilterResult
from tweetlens.tweet import Tweet


class AuthorFilter(Filter):
    """
    Filter tweets written by one user.

    Configuration options:
    - author: Username to match (case-insensitive). The value is not
      validated; whatever plain case-insensitive comparison yields is the
      result.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.author = self.config.get('author')
        self._author_key = str(self.author).lower() if self.author is not None else None

    @property
    def name(self) -> str:
        return "author"

    @property
    def description(self) -> str:
        if self.author is None:
            return "No author filtering (all tweets pass)"
        return f"Tweets written by {self.author}"

    def apply(self, tweet: Tweet) -> FilterResult:
        start_time = time.time()

        if self._author_key is None:
            return FilterResult(
                passed=True,
                reason="No author filter configured",
                execution_time=time.time() - start_time
            )

        passed = tweet.author.lower() == self._author_key
        if passed:
            reason = f"Written by {tweet.author}"
        else:
            reason = f"Author {tweet.author} is not {self.author}"

        return FilterResult(
            passed=passed,
            reason=reason,
            metadata={"tweet_author": tweet.author, "author": self.author},
            execution_time=time.time() - start_time
        )

    def validate_config(self) -> List[str]:
        errors = []
        if self.author is not None and not isinstance(self.author, str):
            errors.append(f"author must be a string, got {type(self.author).__name__}")
        elif self.author is not None and not self.author.strip():
            errors.append("author must not be blank")
        return errors


def written_by(tweets: Sequence[Tweet], username: str) -> List[Tweet]:
    """
    Find tweets written by a particular user.

    Args:
        tweets: List of tweets with distinct ids, not modified
        username: Username to look for, compared case-insensitively

    Returns:
        All and only the tweets whose author is ``username``, in the same
        order as in the input list
    """
    return AuthorFilter({'author': username}).select(tweets)
