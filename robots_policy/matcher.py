# robots_policy/matcher.py
"""
Fetch decision engine: resolves a parsed Policy to allow/deny for one agent and URL.

``can_fetch`` never raises for a parsed policy. Rules are evaluated in
declaration order and the first rule whose path prefixes the candidate wins;
this is *not* the longest-match precedence used by some modern crawlers.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

from robots_policy.parser.models import WILDCARD, AgentGroup, Policy, quote_path

__all__ = ["can_fetch", "find_group", "group_applies", "agent_token", "candidate_path"]


def agent_token(user_agent: str) -> str:
    """Product token of a User-Agent header: text before the first "/", lower-cased."""
    return user_agent.split("/", 1)[0].strip().lower()


def candidate_path(url: str) -> str:
    """Escaped path component of *url*; scheme, host, query and fragment are ignored."""
    try:
        path = urlsplit(url).path
    except ValueError:
        # unparsable authority such as "http://[", match against the raw string
        path = url
    return quote_path(path or "/")


def group_applies(group: AgentGroup, user_agent: str) -> bool:
    """Return True if *group* is addressed to *user_agent*."""
    token = agent_token(user_agent)
    for agent in group.agents:
        if agent == WILDCARD:
            return True
        name = agent.lower()
        if not name or not token:
            continue
        if token == name or name in token or token in name:
            return True
    return False


def find_group(policy: Policy, user_agent: str) -> Optional[AgentGroup]:
    """First group in declaration order that applies to *user_agent*."""
    return next((g for g in policy.groups if group_applies(g, user_agent)), None)


def can_fetch(policy: Policy, user_agent: str, url: str) -> bool:
    """Return True if *user_agent* may fetch *url* under *policy*.

    Args:
        policy: parsed robots policy (read only).
        user_agent: User-Agent header or bare product token.
        url: absolute URL or path.

    Returns:
        False if the policy is disallow-all or the first matching rule of the
        first applicable group is a Disallow; True otherwise.
    """
    if policy.disallow_all:
        return False
    if policy.allow_all:
        return True

    group = find_group(policy, user_agent)
    if group is None:
        return True

    path = candidate_path(url)
    for rule in group.rules:
        if rule.applies_to(path):
            return rule.permits
    return True
