"""
CLI Error Handling

Renders tweetlens errors with their recovery suggestions and ends the command.
"""

import logging

import typer
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

from tweetlens.cli.utils import err_console
from tweetlens.core.exceptions import TweetLensError

logger = logging.getLogger(__name__)


def handle_error(err: TweetLensError):
    """Prints a TweetLensError with its suggestions and exits with code 1."""
    logger.debug(f"Command failed: {err.get_debug_info()}")

    err_console.print()
    error_panel = Panel(
        Text(err.message),
        title=f"[bold red]Error {err.error_code.value}[/bold red]",
        border_style="red",
        expand=False
    )
    err_console.print(error_panel)

    if err.suggestions:
        err_console.print("\n[bold green]Suggested solutions:[/bold green]")
        for i, suggestion in enumerate(err.suggestions, 1):
            suggestion_text = Text(f"{i}. {suggestion.action}: {suggestion.description}\n")
            if suggestion.command:
                suggestion_text.append("   Run: ", style="bold")
                suggestion_text.append(suggestion.command, style="cyan")
            err_console.print(Padding(suggestion_text, (0, 1)))

    raise typer.Exit(code=1)
