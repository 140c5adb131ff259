"""
Core Exception Hierarchy for tweetlens

Provides error classification with error codes, recovery suggestions,
and context information for debugging and user-facing messages.
"""

import sys
import time
import traceback
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(Enum):
    """Standard error codes for different error categories."""

    # Configuration errors (3000-3999)
    CONFIG_INVALID_FORMAT = 3001
    CONFIG_INVALID_VALUE = 3003
    CONFIG_FILE_NOT_FOUND = 3004
    CONFIG_SCHEMA_VALIDATION = 3006

    # Processing errors (4000-4999)
    PROCESSING_CORRUPT_DATA = 4005

    # Validation errors (5000-5999)
    VALIDATION_INVALID_INPUT = 5001
    VALIDATION_MISSING_FIELD = 5002
    VALIDATION_TYPE_MISMATCH = 5003
    VALIDATION_RANGE_ERROR = 5004
    VALIDATION_FORMAT_ERROR = 5005
    VALIDATION_CONSTRAINT_VIOLATION = 5006

    # File system errors (6000-6999)
    FS_FILE_NOT_FOUND = 6001

    # Generic/unknown errors (9000-9999)
    UNKNOWN_ERROR = 9000


@dataclass
class ErrorContext:
    """Contextual information about an error occurrence."""

    operation: str = ""
    tweet_id: Optional[int] = None
    file_path: Optional[str] = None
    correlation_id: Optional[str] = None
    timestamp: float = field(default_factory=time.time)
    system_info: Dict[str, Any] = field(default_factory=dict)
    user_context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary for serialization."""
        return {
            'operation': self.operation,
            'tweet_id': self.tweet_id,
            'file_path': self.file_path,
            'correlation_id': self.correlation_id,
            'timestamp': self.timestamp,
            'system_info': self.system_info,
            'user_context': self.user_context
        }


@dataclass
class RecoverySuggestion:
    """Structured recovery suggestion for error resolution."""

    action: str
    description: str
    command: Optional[str] = None
    priority: int = 1  # 1=highest

    def to_dict(self) -> Dict[str, Any]:
        """Convert suggestion to dictionary."""
        return {
            'action': self.action,
            'description': self.description,
            'command': self.command,
            'priority': self.priority
        }


class TweetLensError(Exception):
    """
    Base exception for all tweetlens errors.

    Carries an error code, recovery suggestions and context so that callers
    (most notably the CLI) can render a useful message.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
        suggestions: Optional[List[RecoverySuggestion]] = None
    ):
        """
        Initialize tweetlens error.

        Args:
            message: Human-readable error description
            error_code: Standardized error code
            context: Contextual information about the error
            cause: Original exception that caused this error
            suggestions: List of recovery suggestions
        """
        super().__init__(message)

        self.message = message
        self.error_code = error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self.suggestions = suggestions or []

        if not self.context.correlation_id:
            self.context.correlation_id = str(uuid.uuid4())[:8]

        if not self.context.system_info:
            self.context.system_info = {
                'platform': sys.platform,
                'python_version': sys.version.split()[0]
            }

    def add_suggestion(self, suggestion: RecoverySuggestion) -> None:
        """Add a recovery suggestion to the error."""
        self.suggestions.append(suggestion)
        self.suggestions.sort(key=lambda s: s.priority)

    def get_debug_info(self) -> Dict[str, Any]:
        """Get comprehensive debug information."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'error_code': self.error_code.value,
            'context': self.context.to_dict(),
            'cause': {
                'type': type(self.cause).__name__ if self.cause else None,
                'message': str(self.cause) if self.cause else None
            },
            'suggestions': [s.to_dict() for s in self.suggestions],
            'stack_trace': traceback.format_exc() if self.cause else None
        }


class ConfigurationError(TweetLensError):
    """Exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONFIG_INVALID_FORMAT,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        **kwargs
    ):
        context = kwargs.get('context') or ErrorContext()
        if config_key:
            context.user_context['config_key'] = config_key
            context.user_context['config_value'] = config_value

        kwargs['context'] = context
        kwargs['error_code'] = error_code

        super().__init__(message, **kwargs)

        if error_code == ErrorCode.CONFIG_FILE_NOT_FOUND:
            self.add_suggestion(RecoverySuggestion(
                action="Check the configuration path",
                description="Pass an existing YAML or JSON file with --config, or omit it to use defaults."
            ))
        elif error_code in (ErrorCode.CONFIG_INVALID_VALUE, ErrorCode.CONFIG_SCHEMA_VALIDATION):
            self.add_suggestion(RecoverySuggestion(
                action="Check configuration values",
                description="Review the configuration file and TWEETLENS_* environment variables for invalid values."
            ))


class ValidationError(TweetLensError, ValueError):
    """Exception for invalid arguments passed to library functions."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_INVALID_INPUT,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        **kwargs
    ):
        context = kwargs.get('context') or ErrorContext()
        if field_name:
            context.user_context['field_name'] = field_name
            context.user_context['field_value'] = field_value

        kwargs['context'] = context
        kwargs['error_code'] = error_code

        super().__init__(message, **kwargs)


class InvalidTimespanError(ValidationError):
    """Raised when a timespan would end before it starts."""

    def __init__(self, start: Any, end: Any, **kwargs):
        kwargs.setdefault('error_code', ErrorCode.VALIDATION_RANGE_ERROR)
        super().__init__(
            f"Timespan start {start} is after end {end}",
            field_name='start',
            field_value=start,
            **kwargs
        )
        self.start = start
        self.end = end


class EmptyTweetListError(ValidationError):
    """Raised when an operation needs at least one tweet and got none."""

    def __init__(self, operation: str, **kwargs):
        context = kwargs.get('context') or ErrorContext(operation=operation)
        kwargs['context'] = context
        super().__init__(f"{operation} requires at least one tweet", **kwargs)


class TweetFormatError(ValidationError):
    """Raised when a raw record cannot be turned into a tweet."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('error_code', ErrorCode.VALIDATION_FORMAT_ERROR)
        super().__init__(message, **kwargs)


class TweetLoadError(TweetLensError):
    """Raised when a tweet file cannot be read or decoded."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.PROCESSING_CORRUPT_DATA,
        file_path: Optional[str] = None,
        **kwargs
    ):
        context = kwargs.get('context') or ErrorContext(operation='load_tweets')
        if file_path:
            context.file_path = str(file_path)

        kwargs['context'] = context
        kwargs['error_code'] = error_code

        super().__init__(message, **kwargs)

        if error_code == ErrorCode.FS_FILE_NOT_FOUND:
            self.add_suggestion(RecoverySuggestion(
                action="Check the input path",
                description="The tweet file does not exist or is not a regular file."
            ))
        elif error_code == ErrorCode.PROCESSING_CORRUPT_DATA:
            self.add_suggestion(RecoverySuggestion(
                action="Check the file format",
                description="Expected a JSON array of tweets, an object with a 'tweets' array, or JSON Lines."
            ))


# Convenience function for argument errors
def validation_error(message: str, field: Optional[str] = None, **kwargs) -> ValidationError:
    """Create a validation error with field context."""
    return ValidationError(message, field_name=field, **kwargs)
