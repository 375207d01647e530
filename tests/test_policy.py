"""Tests for robots.txt parsing, evaluation and enforcement.

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so robots.txt fetches in
  ``enforce_robots`` / ``fetch_robots_txt`` never touch the network.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from webscraper.errors import PolicyFetchWarning, PolicyViolationError
from webscraper.policy.checker import enforce_robots, fetch_robots_txt, request_path, robots_url
from webscraper.policy.evaluator import evaluate, parse_rules
from webscraper.policy.models import AgentMatcher, ExclusionRule


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_ADMIN_ROBOTS = "User-agent: *\nDisallow: /admin\n"

_SCOPED_ROBOTS = """\
User-agent: GoodBot
Disallow: /x

User-agent: *
"""

_MIXED_ROBOTS = """\
# Comments and unknown directives are ignored
Sitemap: https://example.com/sitemap.xml

User-agent: *
Disallow: /private
Disallow:
Allow: /private/open
Crawl-delay: 5

User-agent: EvilBot
Disallow: /
"""


# ---------------------------------------------------------------------------
# AgentMatcher
# ---------------------------------------------------------------------------

class TestAgentMatcher:
    def test_wildcard_matches_everyone(self) -> None:
        assert AgentMatcher("*").matches("AnyBot/2.0") is True

    def test_literal_is_case_insensitive(self) -> None:
        assert AgentMatcher("GoodBot").matches("goodbot") is True

    def test_literal_does_not_match_other_agents(self) -> None:
        assert AgentMatcher("GoodBot").matches("OtherBot") is False

    def test_literal_requires_whole_name(self) -> None:
        assert AgentMatcher("Good").matches("GoodBot") is False


# ---------------------------------------------------------------------------
# parse_rules
# ---------------------------------------------------------------------------

class TestParseRules:
    def test_rules_tagged_with_their_block(self) -> None:
        rules = parse_rules(_MIXED_ROBOTS)
        assert rules == [
            ExclusionRule(AgentMatcher("*"), "/private"),
            ExclusionRule(AgentMatcher("EvilBot"), "/"),
        ]

    def test_empty_disallow_dropped(self) -> None:
        assert parse_rules("User-agent: *\nDisallow:\nDisallow:   \n") == []

    def test_disallow_before_any_agent_ignored(self) -> None:
        assert parse_rules("Disallow: /early\nUser-agent: *\n") == []

    def test_directive_keywords_are_case_sensitive(self) -> None:
        assert parse_rules("user-agent: *\ndisallow: /x\n") == []

    def test_lines_are_trimmed(self) -> None:
        rules = parse_rules("   User-agent: *   \n\tDisallow: /tmp  \n")
        assert [r.path_prefix for r in rules] == ["/tmp"]

    def test_value_keeps_text_after_first_colon(self) -> None:
        rules = parse_rules("User-agent: *\nDisallow: /a:b\n")
        assert rules[0].path_prefix == "/a:b"

    def test_consecutive_agent_lines_keep_latest(self) -> None:
        rules = parse_rules("User-agent: A\nUser-agent: B\nDisallow: /x\n")
        assert rules[0].applies_to == AgentMatcher("B")

    def test_garbage_does_not_raise(self) -> None:
        assert parse_rules("::::\n\x00\nno colon here\nDisallow /nocolon\n") == []


# ---------------------------------------------------------------------------
# evaluate
# ---------------------------------------------------------------------------

class TestEvaluate:
    def test_prefix_disallows_subpath(self) -> None:
        decision = evaluate(_ADMIN_ROBOTS, "AnyBot", "/admin/users")
        assert decision.allowed is False
        assert decision.matched_rule == ExclusionRule(AgentMatcher("*"), "/admin")

    def test_unrelated_path_allowed(self) -> None:
        decision = evaluate(_ADMIN_ROBOTS, "AnyBot", "/public")
        assert decision.allowed is True
        assert decision.matched_rule is None

    def test_block_scope_resets_on_new_agent(self) -> None:
        assert evaluate(_SCOPED_ROBOTS, "OtherBot", "/x").allowed is True

    def test_named_block_applies_to_its_agent(self) -> None:
        assert evaluate(_SCOPED_ROBOTS, "goodbot", "/x/y").allowed is False

    def test_first_matching_rule_reported(self) -> None:
        robots = "User-agent: *\nDisallow: /a\nDisallow: /a/b\n"
        decision = evaluate(robots, "Bot", "/a/b/c")
        assert decision.matched_rule.path_prefix == "/a"

    def test_allow_directive_has_no_effect(self) -> None:
        assert evaluate(_MIXED_ROBOTS, "Bot", "/private/open").allowed is False

    def test_root_disallow_blocks_everything_for_agent(self) -> None:
        assert evaluate(_MIXED_ROBOTS, "EvilBot", "/anything").allowed is False
        assert evaluate(_MIXED_ROBOTS, "NiceBot", "/anything").allowed is True

    def test_empty_document_allows(self) -> None:
        assert evaluate("", "Bot", "/").allowed is True

    def test_deterministic(self) -> None:
        first = evaluate(_MIXED_ROBOTS, "Bot", "/private/x")
        second = evaluate(_MIXED_ROBOTS, "Bot", "/private/x")
        assert first == second


# ---------------------------------------------------------------------------
# URL helpers
# ---------------------------------------------------------------------------

class TestUrlHelpers:
    def test_robots_url_drops_path_and_query(self) -> None:
        assert robots_url("https://example.com/a/b?q=1#frag") == "https://example.com/robots.txt"

    def test_robots_url_keeps_port_drops_credentials(self) -> None:
        assert robots_url("http://user:pw@localhost:8080/x") == "http://localhost:8080/robots.txt"

    def test_request_path_defaults_to_root(self) -> None:
        assert request_path("https://example.com") == "/"

    def test_request_path_ignores_query(self) -> None:
        assert request_path("https://example.com/admin?x=1") == "/admin"


# ---------------------------------------------------------------------------
# fetch_robots_txt / enforce_robots
# ---------------------------------------------------------------------------

class TestFetchRobotsTxt:
    def test_returns_body_on_success(self) -> None:
        with respx.mock:
            respx.get("https://example.com/robots.txt").mock(
                return_value=httpx.Response(200, text=_ADMIN_ROBOTS)
            )
            body = fetch_robots_txt("https://example.com/page", "Bot", 10.0)
        assert body == _ADMIN_ROBOTS

    def test_sends_user_agent(self) -> None:
        with respx.mock:
            route = respx.get("https://example.com/robots.txt").mock(
                return_value=httpx.Response(200, text="")
            )
            fetch_robots_txt("https://example.com/", "MyBot/1.0", 10.0)
        assert route.calls.last.request.headers["User-Agent"] == "MyBot/1.0"

    def test_not_found_raises_warning(self) -> None:
        with respx.mock:
            respx.get("https://example.com/robots.txt").mock(
                return_value=httpx.Response(404)
            )
            with pytest.raises(PolicyFetchWarning):
                fetch_robots_txt("https://example.com/", "Bot", 10.0)

    def test_connection_error_raises_warning(self) -> None:
        with respx.mock:
            respx.get("https://example.com/robots.txt").mock(side_effect=httpx.ConnectError)
            with pytest.raises(PolicyFetchWarning):
                fetch_robots_txt("https://example.com/", "Bot", 10.0)

    def test_timeout_raises_warning(self) -> None:
        with respx.mock:
            respx.get("https://example.com/robots.txt").mock(side_effect=httpx.ReadTimeout)
            with pytest.raises(PolicyFetchWarning):
                fetch_robots_txt("https://example.com/", "Bot", 10.0)


class TestEnforceRobots:
    def test_disallowed_path_raises_violation(self) -> None:
        with respx.mock:
            respx.get("https://example.com/robots.txt").mock(
                return_value=httpx.Response(200, text=_ADMIN_ROBOTS)
            )
            with pytest.raises(PolicyViolationError) as exc_info:
                enforce_robots("https://example.com/admin/users", "Bot", 10.0)

        assert exc_info.value.path == "/admin/users"
        assert exc_info.value.rule.path_prefix == "/admin"
        assert "Disallow: /admin" in str(exc_info.value)

    def test_allowed_path_returns_decision(self) -> None:
        with respx.mock:
            respx.get("https://example.com/robots.txt").mock(
                return_value=httpx.Response(200, text=_ADMIN_ROBOTS)
            )
            decision = enforce_robots("https://example.com/public", "Bot", 10.0)
        assert decision.allowed is True
