"""
Reading tweets from local files.

Supports a JSON array of tweet objects, a JSON object holding such an array
under ``"tweets"``, and JSON Lines (``.jsonl``) with one object per line.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from tweetlens.core.exceptions import ErrorCode, TweetFormatError, TweetLoadError
from tweetlens.tweet import Tweet

logger = logging.getLogger(__name__)


def load_tweets(path: Union[str, Path]) -> List[Tweet]:
    """
    Load tweets from a JSON or JSON Lines file.

    Args:
        path: File to read

    Returns:
        Tweets in file order

    Raises:
        TweetLoadError: If the file is missing, is not valid JSON, or holds
            duplicate tweet ids
        TweetFormatError: If a record cannot be turned into a tweet
    """
    path = Path(path)
    if not path.is_file():
        raise TweetLoadError(
            f"Tweet file not found: {path}",
            error_code=ErrorCode.FS_FILE_NOT_FOUND,
            file_path=path
        )

    try:
        content = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise TweetLoadError(f"Could not read {path}: {e}", file_path=path, cause=e)

    if path.suffix.lower() == '.jsonl':
        records = _decode_json_lines(content, path)
    else:
        records = _decode_json(content, path)

    tweets = []
    seen_ids = set()
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise TweetFormatError(f"Record {index} in {path} is not a JSON object")
        try:
            tweet = Tweet.from_raw(record)
        except TweetFormatError as e:
            raise TweetFormatError(f"Record {index} in {path}: {e.message}", error_code=e.error_code, cause=e)

        if tweet.id in seen_ids:
            raise TweetLoadError(
                f"Duplicate tweet id {tweet.id} in {path}",
                error_code=ErrorCode.VALIDATION_CONSTRAINT_VIOLATION,
                file_path=path
            )
        seen_ids.add(tweet.id)
        tweets.append(tweet)

    logger.info(f"Loaded {len(tweets)} tweets from {path}")
    return tweets


def _decode_json(content: str, path: Path) -> List[Any]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise TweetLoadError(f"Invalid JSON in {path}: {e}", file_path=path, cause=e)

    if isinstance(data, dict) and 'tweets' in data:
        data = data['tweets']
    if not isinstance(data, list):
        raise TweetLoadError(
            f"Expected a list of tweets in {path}, got {type(data).__name__}",
            file_path=path
        )
    return data


def _decode_json_lines(content: str, path: Path) -> List[Any]:
    records = []
    for line_number, line in enumerate(content.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as e:
            raise TweetLoadError(f"Invalid JSON on line {line_number} of {path}: {e}", file_path=path, cause=e)
    return records
