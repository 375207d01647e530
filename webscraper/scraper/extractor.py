"""Turn matched elements into :class:`ExtractedElement` records."""

from __future__ import annotations

from typing import Iterable, List, Optional

from bs4 import Tag
from bs4.element import (
    CData,
    NavigableString,
    RubyParenthesisString,
    RubyTextString,
    Script,
    Stylesheet,
    TemplateString,
)

from webscraper.scraper.models import ExtractedElement

# Every text-bearing string type; comments and doctypes are left out.
_TEXT_TYPES = (
    NavigableString,
    CData,
    Script,
    Stylesheet,
    TemplateString,
    RubyTextString,
    RubyParenthesisString,
)


def _element_text(node: Tag) -> str:
    """Join every descendant text node with a single space, then trim."""
    return node.get_text(separator=" ", types=_TEXT_TYPES).strip()


def _element_attributes(node: Tag) -> dict[str, str]:
    """Return the node's own attributes as literal strings.

    Trees built with bs4's default multi-valued attribute handling store
    ``class`` and friends as lists; those are joined back with spaces.
    """
    return {name: value if isinstance(value, str) else " ".join(value)
            for name, value in node.attrs.items()}


def extract(node: Tag) -> Optional[ExtractedElement]:
    """Extract text and attributes from *node*.

    Returns ``None`` when the node has neither non-blank text nor attributes.
    """
    text = _element_text(node)
    attributes = _element_attributes(node)
    if not text and not attributes:
        return None
    return ExtractedElement(text=text, attributes=attributes)


def extract_all(nodes: Iterable[Tag]) -> List[ExtractedElement]:
    """Apply :func:`extract` to *nodes* in order, dropping empty results."""
    elements: List[ExtractedElement] = []
    for node in nodes:
        element = extract(node)
        if element is not None:
            elements.append(element)
    return elements
