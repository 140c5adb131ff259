"""
Abstract Filter Base Classes

Defines the core interfaces for tweet filters. Every filter implements the
Filter abstract base class and returns FilterResult objects explaining the
decision. Filters never modify the tweets they inspect, and selecting from a
list always keeps the original order.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from tweetlens.tweet import Tweet


class FilterComposition(Enum):
    """How to combine multiple filters."""
    AND = "and"  # All filters must pass
    OR = "or"    # At least one filter must pass


@dataclass
class FilterResult:
    """
    Result of applying a filter to a tweet.

    Attributes:
        passed: Whether the tweet passed the filter
        reason: Human-readable reason for pass/fail
        metadata: Additional filter-specific metadata
        execution_time: Time taken to apply filter (seconds)
    """
    passed: bool
    reason: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)
    execution_time: float = 0.0


class Filter(ABC):
    """
    Abstract base class for all tweet filters.

    Filters are composable components that decide whether a tweet meets a
    criterion. They hold only their configuration, so one instance can be
    shared freely.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the filter with configuration.

        Args:
            config: Filter configuration dictionary
        """
        self.config = config or {}
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry name of the filter."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the filter does."""
        pass

    @abstractmethod
    def apply(self, tweet: Tweet) -> FilterResult:
        """
        Apply the filter to a tweet.

        Args:
            tweet: Tweet to inspect

        Returns:
            FilterResult indicating whether the tweet passed the filter
        """
        pass

    def matches(self, tweet: Tweet) -> bool:
        """Whether ``tweet`` passes this filter."""
        return self.apply(tweet).passed

    def select(self, tweets: Sequence[Tweet]) -> List[Tweet]:
        """
        Keep the tweets that pass this filter.

        Args:
            tweets: Tweets to filter, not modified

        Returns:
            New list of the passing tweets, in their original order
        """
        selected = [tweet for tweet in tweets if self.matches(tweet)]
        self.logger.debug(f"{self.name}: kept {len(selected)} of {len(tweets)} tweets")
        return selected

    def validate_config(self) -> List[str]:
        """
        Validate the filter configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        return []

    def __str__(self) -> str:
        return f"{self.name}: {self.description}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self.config})"


class FilterChain:
    """
    Chains multiple filters together with AND/OR logic.

    Evaluation stops at the first failing filter in AND mode and at the
    first passing filter in OR mode.
    """

    def __init__(self, filters: List[Filter], composition: FilterComposition = FilterComposition.AND):
        """
        Initialize the filter chain.

        Args:
            filters: List of filters to chain together
            composition: How to combine filter results (AND/OR)
        """
        self.filters = list(filters)
        self.composition = composition
        self.logger = logging.getLogger(__name__)

    def apply(self, tweet: Tweet) -> FilterResult:
        """
        Apply all filters in the chain to a tweet.

        Args:
            tweet: Tweet to inspect

        Returns:
            FilterResult indicating whether the tweet passed the chain
        """
        start_time = time.time()

        if not self.filters:
            return FilterResult(
                passed=True,
                reason="No filters in chain",
                execution_time=time.time() - start_time
            )

        executed = []
        for filter_instance in self.filters:
            result = filter_instance.apply(tweet)
            executed.append((filter_instance, result))

            if self.composition == FilterComposition.AND and not result.passed:
                return FilterResult(
                    passed=False,
                    reason=f"Failed {filter_instance.name}: {result.reason}",
                    metadata=self._chain_metadata(executed, failed_filter=filter_instance.name),
                    execution_time=time.time() - start_time
                )
            if self.composition == FilterComposition.OR and result.passed:
                return FilterResult(
                    passed=True,
                    reason=f"Passed {filter_instance.name}: {result.reason}",
                    metadata=self._chain_metadata(executed, passed_filter=filter_instance.name),
                    execution_time=time.time() - start_time
                )

        # Every filter ran: all passed (AND) or all failed (OR)
        passed = self.composition == FilterComposition.AND
        return FilterResult(
            passed=passed,
            reason="All filters passed" if passed else "All filters failed",
            metadata=self._chain_metadata(executed),
            execution_time=time.time() - start_time
        )

    def matches(self, tweet: Tweet) -> bool:
        """Whether ``tweet`` passes the chain."""
        return self.apply(tweet).passed

    def select(self, tweets: Sequence[Tweet]) -> List[Tweet]:
        """Keep the tweets that pass the chain, in their original order."""
        selected = [tweet for tweet in tweets if self.matches(tweet)]
        self.logger.debug(f"{self}: kept {len(selected)} of {len(tweets)} tweets")
        return selected

    def _chain_metadata(self, executed, **extra) -> Dict[str, Any]:
        metadata = {
            "filter_chain": self.composition.value,
            "filters_executed": len(executed),
            "total_filters": len(self.filters),
            "individual_results": [
                {
                    "filter": f.name,
                    "passed": r.passed,
                    "reason": r.reason,
                    "execution_time": r.execution_time
                }
                for f, r in executed
            ]
        }
        metadata.update(extra)
        return metadata

    def validate_config(self) -> List[str]:
        """
        Validate all filters in the chain.

        Returns:
            List of validation error messages from all filters
        """
        errors = []
        for filter_instance in self.filters:
            filter_errors = filter_instance.validate_config()
            errors.extend([f"{filter_instance.name}: {error}" for error in filter_errors])
        return errors

    def __len__(self) -> int:
        return len(self.filters)

    def __str__(self) -> str:
        filter_names = [f.name for f in self.filters]
        composition_str = " AND " if self.composition == FilterComposition.AND else " OR "
        return f"FilterChain({composition_str.join(filter_names)})"
