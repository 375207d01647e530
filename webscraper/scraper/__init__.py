"""Scraper package: page fetch, selector matching and element extraction."""

from webscraper.scraper.extractor import extract, extract_all
from webscraper.scraper.fetcher import fetch_page
from webscraper.scraper.models import ExtractedElement, RawPage, ScrapeResult
from webscraper.scraper.orchestrator import scrape, validate_url
from webscraper.scraper.selector import SelectorExpression, compile_selector, match, parse_html

__all__ = [
    "scrape",
    "validate_url",
    "fetch_page",
    "compile_selector",
    "match",
    "parse_html",
    "extract",
    "extract_all",
    "SelectorExpression",
    "ExtractedElement",
    "RawPage",
    "ScrapeResult",
]
