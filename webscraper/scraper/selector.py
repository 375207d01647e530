"""CSS selector compilation and matching over BeautifulSoup trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import soupsieve
from bs4 import BeautifulSoup, Tag

from webscraper.errors import SelectorSyntaxError


@dataclass(frozen=True)
class SelectorExpression:
    """A validated, compiled selector together with its source text."""

    text: str
    pattern: soupsieve.SoupSieve


def parse_html(html: str) -> BeautifulSoup:
    """Build a document tree from *html*.

    Multi-valued attributes (``class``, ``rel`` …) are left as the literal
    strings found in the markup.
    """
    return BeautifulSoup(html, "html.parser", multi_valued_attributes=None)


def compile_selector(selector_text: str) -> SelectorExpression:
    """Compile *selector_text*, failing fast on invalid grammar.

    Raises:
        SelectorSyntaxError: If the selector is blank or malformed.
    """
    if not selector_text or not selector_text.strip():
        raise SelectorSyntaxError(selector_text, "empty selector")
    try:
        pattern = soupsieve.compile(selector_text)
    except soupsieve.SelectorSyntaxError as exc:
        raise SelectorSyntaxError(selector_text, (str(exc).splitlines() or [""])[0]) from exc
    return SelectorExpression(text=selector_text, pattern=pattern)


def match(tree: BeautifulSoup | Tag, expr: SelectorExpression) -> List[Tag]:
    """Return every element under *tree* matching *expr*, in document order."""
    return expr.pattern.select(tree)
