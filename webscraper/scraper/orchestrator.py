"""Single-page scrape pipeline.

``scrape`` sequences the whole operation:

    validate URL → compile selector → robots.txt check → delay → fetch
    → parse → match → extract

Every step either returns or raises a :class:`~webscraper.errors.ScraperError`.
The only recovered failure is an unavailable robots.txt.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlsplit

from webscraper.config import settings
from webscraper.errors import InvalidUrlError, NoMatchError, PolicyFetchWarning
from webscraper.policy.checker import enforce_robots
from webscraper.scraper.extractor import extract_all
from webscraper.scraper.fetcher import fetch_page
from webscraper.scraper.models import ScrapeResult
from webscraper.scraper.selector import compile_selector, match, parse_html

logger = logging.getLogger(__name__)

_SUPPORTED_SCHEMES = ("http", "https")


def validate_url(url: str) -> str:
    """Return *url* unchanged if it is an absolute http(s) URL with a host.

    Raises:
        InvalidUrlError: Otherwise.
    """
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
        parts.port  # raises on a non-numeric or out-of-range port
    except ValueError as exc:
        raise InvalidUrlError(url) from exc
    if parts.scheme.lower() not in _SUPPORTED_SCHEMES or not hostname:
        raise InvalidUrlError(url)
    if any(ch.isspace() for ch in hostname):
        raise InvalidUrlError(url)
    return url


def scrape(
    url: str,
    selector: str,
    user_agent: Optional[str] = None,
    respect_robots: bool = True,
    delay_ms: Optional[int] = None,
) -> ScrapeResult:
    """Scrape the elements of *url* matching the CSS *selector*.

    Args:
        url: Absolute http(s) URL of the page.
        selector: CSS selector expression.
        user_agent: Identity sent as ``User-Agent`` and matched against
            robots.txt blocks.  Defaults to ``settings.user_agent``.
        respect_robots: Consult robots.txt before fetching.
        delay_ms: Pause before the page request.  Defaults to
            ``settings.delay_ms``.

    Returns:
        A timestamped :class:`ScrapeResult` with at least one element.

    Raises:
        InvalidUrlError, SelectorSyntaxError, PolicyViolationError,
        NetworkError, HttpStatusError, NoMatchError.
    """
    agent = user_agent or settings.user_agent
    delay = settings.delay_ms if delay_ms is None else delay_ms

    validate_url(url)
    expr = compile_selector(selector)

    if respect_robots:
        try:
            enforce_robots(url, agent, settings.robots_timeout)
        except PolicyFetchWarning as warning:
            logger.warning("[robots] %s", warning)

    if delay > 0:
        logger.debug("[scrape] Sleeping %d ms before request", delay)
        time.sleep(delay / 1000)

    raw = fetch_page(url, agent, settings.request_timeout)
    tree = parse_html(raw.html)
    elements = extract_all(match(tree, expr))

    if not elements:
        raise NoMatchError(selector, url)

    logger.info("[scrape] Extracted %d element(s)", len(elements))
    return ScrapeResult(
        url=url,
        selector=selector,
        results=elements,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
