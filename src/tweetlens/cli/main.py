#!/usr/bin/env python3
"""
tweetlens CLI Main Application

Typer-based command-line interface over the analysis and filter functions:
report the timespan of a tweet file, list the users it mentions, or print
the tweets matching author, time-window and word criteria.
"""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table
from rich.text import Text

from tweetlens.cli import __version__
from tweetlens.cli.config_utils import build_cli_args, load_config_from_cli
from tweetlens.cli.error_handling import handle_error
from tweetlens.cli.utils import console, format_duration, print_header, setup_logging, truncate
from tweetlens.core.config import AppConfig
from tweetlens.core.exceptions import TweetLensError
from tweetlens.extract import get_mentioned_users, get_timespan
from tweetlens.filters import FilterFactory
from tweetlens.loader import load_tweets
from tweetlens.tweet import Tweet

app = typer.Typer(
    name="tweetlens",
    help="Analyze and filter collections of tweets",
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def version_callback(value: bool):
    """Show version information."""
    if value:
        console.print(f"[bold cyan]tweetlens[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def app_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Log progress information"),
    debug: bool = typer.Option(False, "--debug", help="Log debugging details"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information and exit"
    ),
):
    """
    tweetlens - tweet collection analysis

    [bold]Quick Start:[/bold]

    • Time covered: [cyan]tweetlens timespan tweets.json[/cyan]
    • Mentioned users: [cyan]tweetlens mentions tweets.json[/cyan]
    • Select tweets: [cyan]tweetlens filter tweets.json --author alyssa --word hype[/cyan]
    """
    setup_logging(verbose=verbose, debug=debug)
    ctx.obj = {"verbose": verbose or None, "debug": debug or None}


def _load(path: Path) -> List[Tweet]:
    try:
        return load_tweets(path)
    except TweetLensError as e:
        handle_error(e)


def _global_config(ctx: typer.Context, config_file: Optional[str]) -> AppConfig:
    return load_config_from_cli(config_file=config_file, cli_args=build_cli_args(**(ctx.obj or {})))


@app.command()
def timespan(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="JSON or JSON Lines file of tweets"),
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="YAML or JSON configuration file"),
):
    """Show the smallest time interval containing every tweet."""
    _global_config(ctx, config_file)
    tweets = _load(path)
    try:
        span = get_timespan(tweets)
    except TweetLensError as e:
        handle_error(e)

    console.print(f"Tweets: [cyan]{len(tweets)}[/cyan]")
    console.print(f"Start:  [cyan]{span.start.isoformat()}[/cyan]")
    console.print(f"End:    [cyan]{span.end.isoformat()}[/cyan]")
    console.print(f"Length: [cyan]{format_duration(span.duration)}[/cyan]")


@app.command()
def mentions(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="JSON or JSON Lines file of tweets"),
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="YAML or JSON configuration file"),
):
    """List the distinct users mentioned in the tweets."""
    _global_config(ctx, config_file)
    users = get_mentioned_users(_load(path))

    for user in sorted(users):
        console.print(f"@{user}", highlight=False)
    console.print(f"[dim]{len(users)} distinct users mentioned[/dim]")


@app.command("filter")
def filter_tweets(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="JSON or JSON Lines file of tweets"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Keep tweets by this user (case-insensitive)"),
    since: Optional[str] = typer.Option(None, "--since", help="Keep tweets sent on or after this date"),
    until: Optional[str] = typer.Option(None, "--until", help="Keep tweets sent on or before this date"),
    words: Optional[List[str]] = typer.Option(None, "--word", "-w", help="Keep tweets containing this word (repeatable)"),
    match_any: Optional[bool] = typer.Option(None, "--any/--all", help="Combine criteria with OR instead of AND"),
    as_json: bool = typer.Option(False, "--json", help="Print matching tweets as JSON lines"),
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="YAML or JSON configuration file"),
):
    """Print the tweets matching author, time-window and word criteria."""
    composition = None
    if match_any is not None:
        composition = "or" if match_any else "and"

    cli_args = build_cli_args(
        author=author,
        since=since,
        until=until,
        words=words or None,
        composition=composition,
        output_format="json" if as_json else None,
        **(ctx.obj or {})
    )
    config = load_config_from_cli(config_file=config_file, cli_args=cli_args)

    chain = FilterFactory.create_from_config(config.filters)
    tweets = _load(path)
    selected = chain.select(tweets) if chain is not None else list(tweets)

    if config.output.format == "json":
        for tweet in selected:
            typer.echo(json.dumps(tweet.to_dict(), ensure_ascii=False))
        return

    _print_table(selected, len(tweets), config, str(chain) if chain is not None else "no criteria")


def _print_table(selected: List[Tweet], total: int, config: AppConfig, description: str) -> None:
    print_header("Matching tweets", description)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right")
    table.add_column("Author", style="cyan")
    table.add_column("Sent")
    table.add_column("Text")

    for tweet in selected:
        table.add_row(
            str(tweet.id),
            Text(tweet.author),
            tweet.timestamp.isoformat(),
            Text(truncate(tweet.text, config.output.max_text_width))
        )

    console.print(table)
    console.print(f"[dim]{len(selected)} of {total} tweets matched[/dim]")


def main():
    """Entry point for the tweetlens console script."""
    app()


if __name__ == "__main__":
    main()
