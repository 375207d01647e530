"""Data models for the scrape pipeline."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class ExtractedElement:
    """Text and own attributes of one matched element."""

    text: str
    attributes: Dict[str, str] = field(default_factory=dict)


@dataclass
class ScrapeResult:
    url: str
    selector: str
    results: List[ExtractedElement] = field(default_factory=list)
    timestamp: str = ""

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, data: str) -> ScrapeResult:
        """Rebuild a result from the output of :meth:`to_json`.

        Raises:
            ValueError: If *data* is not valid JSON or lacks required fields.
        """
        try:
            raw = json.loads(data)
            return cls(
                url=raw["url"],
                selector=raw["selector"],
                results=[
                    ExtractedElement(text=item["text"], attributes=dict(item["attributes"]))
                    for item in raw["results"]
                ],
                timestamp=raw["timestamp"],
            )
        except (json.JSONDecodeError, KeyError, TypeError) as exc:
            raise ValueError(f"Not a scrape result document: {exc}") from exc
