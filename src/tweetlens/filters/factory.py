"""
Filter Factory for creating filter instances from configuration.

Provides a central place for turning configuration dictionaries, FilterConfig
models or CLI arguments into filters and filter chains.
"""

import logging
from typing import Any, Dict, List, Optional, Type, Union

from tweetlens.core.config.models import FilterConfig
from tweetlens.filters.author import AuthorFilter
from tweetlens.filters.base import Filter, FilterChain, FilterComposition
from tweetlens.filters.keyword import KeywordFilter
from tweetlens.filters.timespan import TimespanFilter

logger = logging.getLogger(__name__)


class FilterFactory:
    """
    Factory class for creating filter instances from configuration.

    Supports creating individual filters and filter chains with composition logic.
    """

    FILTER_REGISTRY: Dict[str, Type[Filter]] = {
        'author': AuthorFilter,
        'timespan': TimespanFilter,
        'keyword': KeywordFilter,
    }

    @classmethod
    def create_filter(cls, filter_type: str, config: Optional[Dict[str, Any]] = None) -> Filter:
        """
        Create a single filter instance.

        Args:
            filter_type: Type of filter to create
            config: Configuration for the filter

        Returns:
            Filter instance

        Raises:
            ValueError: If filter type is unknown
        """
        if filter_type not in cls.FILTER_REGISTRY:
            available_types = ', '.join(sorted(cls.FILTER_REGISTRY.keys()))
            raise ValueError(f"Unknown filter type '{filter_type}'. Available types: {available_types}")

        filter_class = cls.FILTER_REGISTRY[filter_type]
        return filter_class(config)

    @classmethod
    def create_filter_chain(
        cls,
        filter_configs: List[Dict[str, Any]],
        composition: Union[str, FilterComposition] = FilterComposition.AND
    ) -> FilterChain:
        """
        Create a filter chain from a list of filter configurations.

        Args:
            filter_configs: List of ``{'type': ..., 'config': {...}}`` dictionaries
            composition: How to combine filters ('and', 'or', or FilterComposition)

        Returns:
            FilterChain instance

        Raises:
            ValueError: If a configuration is missing its type, names an
                unknown type, or fails the filter's own validation
        """
        if isinstance(composition, str):
            try:
                composition = FilterComposition(composition.lower())
            except ValueError:
                raise ValueError(f"Unknown filter composition '{composition}'. Use 'and' or 'or'")

        filters = []
        for i, filter_config in enumerate(filter_configs):
            if 'type' not in filter_config:
                raise ValueError(f"Filter configuration {i} missing 'type' field")

            filter_instance = cls.create_filter(filter_config['type'], filter_config.get('config', {}))
            errors = filter_instance.validate_config()
            if errors:
                raise ValueError(f"Invalid configuration for filter {i} ({filter_instance.name}): {'; '.join(errors)}")
            filters.append(filter_instance)

        chain = FilterChain(filters, composition)
        logger.debug(f"Created {chain}")
        return chain

    @classmethod
    def create_from_config(cls, config: FilterConfig) -> Optional[FilterChain]:
        """
        Create a filter chain from a FilterConfig model.

        Args:
            config: Validated filter configuration

        Returns:
            FilterChain instance or None if no criterion is configured
        """
        if config.is_empty():
            return None

        filter_configs = []

        if config.author is not None:
            filter_configs.append({'type': 'author', 'config': {'author': config.author}})

        if config.since is not None or config.until is not None:
            filter_configs.append({
                'type': 'timespan',
                'config': {'start': config.since, 'end': config.until}
            })

        if config.words:
            filter_configs.append({'type': 'keyword', 'config': {'words': config.words}})

        return cls.create_filter_chain(filter_configs, config.composition)

    @classmethod
    def create_from_cli_args(cls, args: Dict[str, Any]) -> Optional[FilterChain]:
        """
        Create a filter chain from CLI arguments.

        Args:
            args: Dictionary with any of ``author``, ``since``, ``until``,
                ``words`` and ``composition``

        Returns:
            FilterChain instance or None if no filters specified
        """
        return cls.create_from_config(FilterConfig(**{k: v for k, v in args.items() if v is not None}))

