"""Data models for robots.txt evaluation."""

from __future__ import annotations

from dataclasses import dataclass

WILDCARD = "*"


@dataclass(frozen=True)
class AgentMatcher:
    """The value of one ``User-agent:`` line."""

    name: str

    @property
    def is_wildcard(self) -> bool:
        return self.name == WILDCARD

    def matches(self, agent: str) -> bool:
        """Return ``True`` if this block applies to *agent*.

        A wildcard block applies to every agent; otherwise the names are
        compared case-insensitively.
        """
        return self.is_wildcard or self.name.lower() == agent.lower()


@dataclass(frozen=True)
class ExclusionRule:
    """A single ``Disallow:`` directive scoped to its agent block."""

    applies_to: AgentMatcher
    path_prefix: str


@dataclass(frozen=True)
class PolicyDecision:
    allowed: bool
    matched_rule: ExclusionRule | None = None
