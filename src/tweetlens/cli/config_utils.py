"""
Configuration Utilities for CLI Commands

Loads the layered configuration for a command and reports problems in the
CLI's error format.
"""

from typing import Any, Dict, Optional

from tweetlens.cli.error_handling import handle_error
from tweetlens.cli.utils import err_console, setup_logging
from tweetlens.core.config import AppConfig, ConfigManager
from tweetlens.core.exceptions import ConfigurationError


def load_config_from_cli(
    config_file: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None
) -> AppConfig:
    """
    Load configuration from CLI arguments with proper error handling.

    Also applies the configured verbose/debug logging level.

    Args:
        config_file: Optional path to configuration file
        cli_args: Dictionary of CLI arguments to override config

    Returns:
        Validated AppConfig instance

    Raises:
        typer.Exit: If configuration is invalid
    """
    try:
        config_manager = ConfigManager(config_file=config_file)
        app_config = config_manager.load_config(cli_args=cli_args or {})
    except ConfigurationError as e:
        handle_error(e)

    setup_logging(verbose=app_config.verbose, debug=app_config.debug)

    warnings = config_manager.validate_config(app_config)
    if warnings:
        err_console.print("[yellow]Configuration warnings:[/yellow]")
        for warning in warnings:
            err_console.print(f"  • {warning}")

    return app_config


def build_cli_args(**kwargs) -> Dict[str, Any]:
    """Drop unset options so they don't override file and environment settings."""
    return {key: value for key, value in kwargs.items() if value is not None}
