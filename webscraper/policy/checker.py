"""Fetch a site's robots.txt and enforce it for a single URL."""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

import httpx

from webscraper.errors import PolicyFetchWarning, PolicyViolationError
from webscraper.policy.evaluator import evaluate
from webscraper.policy.models import PolicyDecision

logger = logging.getLogger(__name__)


def robots_url(url: str) -> str:
    """Return ``{scheme}://{host}/robots.txt`` for *url*.

    Any port is kept; credentials, path, query and fragment are dropped.
    """
    parts = urlsplit(url)
    host = parts.netloc.rpartition("@")[2]
    return f"{parts.scheme}://{host}/robots.txt"


def request_path(url: str) -> str:
    """Return the path component of *url* used for rule matching."""
    return urlsplit(url).path or "/"


def fetch_robots_txt(url: str, user_agent: str, timeout: float) -> str:
    """Download the robots.txt governing *url*.

    Raises:
        PolicyFetchWarning: On any transport error, timeout or non-2xx
            status.  Callers are expected to log and continue.
    """
    target = robots_url(url)
    logger.debug("[robots] Fetching %s", target)
    try:
        with httpx.Client(
            headers={"User-Agent": user_agent},
            timeout=timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(target)
            if not response.is_success:
                raise PolicyFetchWarning(
                    f"robots.txt not found or inaccessible (HTTP {response.status_code}), "
                    "proceeding anyway"
                )
            return response.text
    except httpx.HTTPError as exc:
        raise PolicyFetchWarning(f"Could not fetch robots.txt ({exc}), proceeding anyway") from exc


def enforce_robots(url: str, user_agent: str, timeout: float) -> PolicyDecision:
    """Fetch robots.txt for *url* and raise if *user_agent* may not fetch it.

    Raises:
        PolicyViolationError: If a ``Disallow`` rule matches the URL path.
        PolicyFetchWarning: If robots.txt could not be retrieved.
    """
    document = fetch_robots_txt(url, user_agent, timeout)
    path = request_path(url)
    decision = evaluate(document, user_agent, path)
    if not decision.allowed:
        raise PolicyViolationError(path, decision.matched_rule)
    logger.info("[robots] robots.txt check passed for %s", path)
    return decision
