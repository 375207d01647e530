"""HTTP fetcher for the primary page request."""

from __future__ import annotations

import logging

import httpx

from webscraper.errors import HttpStatusError, NetworkError
from webscraper.scraper.models import RawPage

logger = logging.getLogger(__name__)


def fetch_page(url: str, user_agent: str, timeout: float) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Redirects are followed; no retries are attempted.

    Raises:
        HttpStatusError: If the final response is not 2xx.
        NetworkError: On connection failures, timeouts or body read errors.
    """
    logger.info("[fetch] Fetching: %s", url)
    try:
        with httpx.Client(
            headers={"User-Agent": user_agent},
            timeout=timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            if not response.is_success:
                raise HttpStatusError(response.status_code, response.reason_phrase)
            html = response.text
    except httpx.HTTPError as exc:
        raise NetworkError(f"Network error: {exc}") from exc

    logger.info("[fetch] HTTP %s, %d characters", response.status_code, len(html))
    return RawPage(url=url, html=html, status_code=response.status_code)
