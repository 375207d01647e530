"""webscraper CLI: scrape elements from a single page with a CSS selector.

Usage:
    python cli/main.py --url https://example.com --selector h1
    python cli/main.py -u https://httpbin.org/html -s p --format json --delay 2000
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from webscraper.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from cli.rendering import OUTPUT_FORMATS, render
from webscraper import __version__
from webscraper.config import settings
from webscraper.errors import ScraperError
from webscraper.scraper import scrape

app = typer.Typer(
    name="webscraper",
    help="A flexible web scraper with CSS selector support.",
    no_args_is_help=True,
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout only carries scrape output."""
    level = logging.INFO if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _validate_format(value: str) -> str:
    if value.lower() not in OUTPUT_FORMATS:
        raise typer.BadParameter(f"Output format must be one of: {', '.join(OUTPUT_FORMATS)}")
    return value.lower()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"webscraper {__version__}")
        raise typer.Exit()


@app.command()
def main(
    url: str = typer.Option(..., "--url", "-u", help="The URL to scrape."),
    selector: str = typer.Option(
        ..., "--selector", "-s",
        help="CSS selector to extract elements (e.g. 'h1', '.price', 'a.link').",
    ),
    output_format: str = typer.Option(
        settings.output_format, "--format", "-f",
        callback=_validate_format, help="Output format: 'text' or 'json'.",
    ),
    delay: int = typer.Option(
        settings.delay_ms, "--delay", "-d", min=0,
        help="Delay before the request in milliseconds.",
    ),
    user_agent: str = typer.Option(
        settings.user_agent, "--user-agent", help="Custom User-Agent header.",
    ),
    ignore_robots: bool = typer.Option(
        not settings.respect_robots, "--ignore-robots", help="Ignore robots.txt rules.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Fetch URL, extract elements matching SELECTOR and print them."""
    _configure_logging(verbose)

    try:
        result = scrape(
            url,
            selector,
            user_agent=user_agent,
            respect_robots=not ignore_robots,
            delay_ms=delay,
        )
    except ScraperError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(render(result, output_format))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
