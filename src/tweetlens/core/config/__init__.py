"""
Configuration Management Package

Provides Pydantic-based configuration models and management for tweetlens.
"""

from tweetlens.core.config.models import AppConfig, FilterConfig, OutputConfig
from tweetlens.core.config.manager import ConfigManager

__all__ = [
    "AppConfig",
    "FilterConfig",
    "OutputConfig",
    "ConfigManager",
]
