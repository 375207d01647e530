"""Policy package: robots.txt parsing, evaluation and enforcement."""

from webscraper.policy.checker import enforce_robots, fetch_robots_txt, robots_url
from webscraper.policy.evaluator import evaluate, parse_rules
from webscraper.policy.models import AgentMatcher, ExclusionRule, PolicyDecision

__all__ = [
    "evaluate",
    "parse_rules",
    "enforce_robots",
    "fetch_robots_txt",
    "robots_url",
    "AgentMatcher",
    "ExclusionRule",
    "PolicyDecision",
]
