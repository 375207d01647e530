"""robots.txt parsing and path evaluation.

Only ``User-agent`` and ``Disallow`` directives are understood.  A path is
disallowed when it starts with *any* ``Disallow`` prefix in a block that
applies to the requesting agent; the first such rule in document order is
reported.  There is no longest-match or ``Allow`` precedence.
"""

from __future__ import annotations

from typing import List

from webscraper.policy.models import AgentMatcher, ExclusionRule, PolicyDecision

_USER_AGENT = "User-agent:"
_DISALLOW = "Disallow:"


def _directive_value(line: str) -> str:
    """Return the trimmed text after the first ``:`` of *line*."""
    _, _, value = line.partition(":")
    return value.strip()


def parse_rules(document_text: str) -> List[ExclusionRule]:
    """Parse *document_text* into the ordered list of ``Disallow`` rules.

    Each rule is tagged with the agent of the most recent ``User-agent:``
    line.  ``Disallow:`` lines seen before any agent line, and those with an
    empty value, are dropped.  Unrecognised lines are ignored.
    """
    rules: List[ExclusionRule] = []
    current: AgentMatcher | None = None

    for raw_line in document_text.splitlines():
        line = raw_line.strip()
        if line.startswith(_USER_AGENT):
            current = AgentMatcher(_directive_value(line))
        elif line.startswith(_DISALLOW):
            path = _directive_value(line)
            if current is not None and path:
                rules.append(ExclusionRule(applies_to=current, path_prefix=path))

    return rules


def evaluate(document_text: str, requested_agent: str, requested_path: str) -> PolicyDecision:
    """Decide whether *requested_agent* may fetch *requested_path*.

    Never raises on malformed input; garbage lines are simply skipped.
    """
    for rule in parse_rules(document_text):
        if not rule.applies_to.matches(requested_agent):
            continue
        if requested_path.startswith(rule.path_prefix):
            return PolicyDecision(allowed=False, matched_rule=rule)
    return PolicyDecision(allowed=True)
