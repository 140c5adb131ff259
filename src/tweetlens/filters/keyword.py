"""
Keyword-based filtering for tweets.

A tweet matches when its text contains at least one of the configured words
as a case-insensitive substring. Words are not required to stand alone, so
"hype" matches "#hype".
"""

import time
from typing import Any, Dict, List, Optional, Sequence

from tweetlens.filters.base import Filter, FilterResult
from tweetlens.tweet import Tweet


class KeywordFilter(Filter):
    """
    Filter tweets containing any of a list of words.

    Configuration options:
    - words: Words to search for (OR logic). A word is a nonempty sequence
      of nonspace characters. With no words, no tweet matches.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        self.words = list(self.config.get('words', []))
        self._lowered = [str(word).lower() for word in self.words]

    @property
    def name(self) -> str:
        return "keyword"

    @property
    def description(self) -> str:
        if not self.words:
            return "Tweets containing any of no words (no tweet passes)"
        shown = ', '.join(map(str, self.words[:3])) + ("..." if len(self.words) > 3 else "")
        return f"Tweets containing any of: {shown}"

    def apply(self, tweet: Tweet) -> FilterResult:
        start_time = time.time()
        text = tweet.text.lower()

        matched = [word for word, lowered in zip(self.words, self._lowered) if lowered in text]

        if matched:
            return FilterResult(
                passed=True,
                reason=f"Found words: {', '.join(map(str, matched))}",
                metadata={"words": self.words, "matched_words": matched},
                execution_time=time.time() - start_time
            )

        return FilterResult(
            passed=False,
            reason=f"None of the words found: {', '.join(map(str, self.words))}" if self.words else "No words to search for",
            metadata={"words": self.words, "matched_words": []},
            execution_time=time.time() - start_time
        )

    def validate_config(self) -> List[str]:
        errors = []
        for word in self.words:
            if not isinstance(word, str):
                errors.append(f"Word must be a string, got {type(word).__name__}")
            elif not word or any(ch.isspace() for ch in word):
                errors.append(f"Word must be a nonempty run of nonspace characters: {word!r}")
        return errors


def containing(tweets: Sequence[Tweet], words: Sequence[str]) -> List[Tweet]:
    """
    Find tweets that contain certain words.

    Args:
        tweets: List of tweets with distinct ids, not modified
        words: Words to search for; each a nonempty sequence of nonspace
            characters

    Returns:
        All and only the tweets whose text contains at least one of the
        words, compared case-insensitively, in the same order as in the
        input list
    """
    return KeywordFilter({'words': words}).select(tweets)
