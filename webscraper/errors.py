"""Exception hierarchy for the scrape pipeline.

Every failure the orchestrator can surface derives from :class:`ScraperError`
so the CLI can report them uniformly.  :class:`PolicyFetchWarning` is the one
condition that is recovered locally and never reaches the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from webscraper.policy.models import ExclusionRule


class ScraperError(Exception):
    """Base class for all webscraper errors."""


class InvalidUrlError(ScraperError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Invalid URL format: {url}")


class PolicyViolationError(ScraperError):
    """The requested path is disallowed by the site's robots.txt."""

    def __init__(self, path: str, rule: ExclusionRule) -> None:
        self.path = path
        self.rule = rule
        super().__init__(
            f"Access to {path} is disallowed by robots.txt "
            f"(rule: Disallow: {rule.path_prefix})"
        )


class PolicyFetchWarning(ScraperError):
    """robots.txt could not be retrieved; scraping continues unrestricted."""


class NetworkError(ScraperError):
    """Transport-level failure or timeout on the primary fetch."""


class HttpStatusError(ScraperError):
    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason or "Unknown"
        super().__init__(f"HTTP error: {status_code} - {self.reason}")


class SelectorSyntaxError(ScraperError):
    def __init__(self, selector: str, detail: str = "") -> None:
        self.selector = selector
        message = f"Invalid CSS selector: {selector}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class NoMatchError(ScraperError):
    def __init__(self, selector: str, url: str) -> None:
        self.selector = selector
        self.url = url
        super().__init__(f"No elements found matching selector '{selector}' on {url}")
