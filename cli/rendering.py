"""Utilities for rendering scrape results in the CLI."""

from __future__ import annotations

from typing import List

from webscraper.scraper.models import ScrapeResult

OUTPUT_FORMATS = ("text", "json")


def render_json(result: ScrapeResult) -> str:
    """Render *result* as pretty-printed JSON."""
    return result.to_json()


def render_text(result: ScrapeResult) -> str:
    """Render *result* as a human-readable report.

    Each element block shows its text and attributes only when non-empty.
    """
    lines: List[str] = [
        "=== Web Scraping Results ===",
        f"URL: {result.url}",
        f"Selector: {result.selector}",
        f"Timestamp: {result.timestamp}",
        f"Found {len(result.results)} element(s):",
        "",
    ]
    for i, element in enumerate(result.results, start=1):
        lines.append(f"--- Element {i} ---")
        if element.text:
            lines.append(f"Text: {element.text}")
        if element.attributes:
            lines.append("Attributes:")
            for key, value in element.attributes.items():
                lines.append(f"  {key}: {value}")
        lines.append("")
    return "\n".join(lines)


def render(result: ScrapeResult, output_format: str) -> str:
    if output_format.lower() == "json":
        return render_json(result)
    return render_text(result)
