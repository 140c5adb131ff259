"""
Filtering System for Tweets

Derives order-preserving sub-lists of tweets by author, by time window, or
by the words they contain. Each criterion is available both as a plain
function and as a composable Filter object.

Key Components:
- written_by, in_timespan, containing: the three selection functions
- Filter: Abstract base class for all filters
- FilterChain: AND/OR composition of filters
- FilterFactory: Factory for creating filters from configuration
"""

from .base import Filter, FilterResult, FilterComposition, FilterChain
from .author import AuthorFilter, written_by
from .timespan import TimespanFilter, in_timespan
from .keyword import KeywordFilter, containing
from .factory import FilterFactory

__all__ = [
    "written_by",
    "in_timespan",
    "containing",
    "Filter",
    "FilterResult",
    "FilterComposition",
    "FilterChain",
    "FilterFactory",
    "AuthorFilter",
    "TimespanFilter",
    "KeywordFilter",
]
