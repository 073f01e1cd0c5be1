# robots_policy/parser/models.py
"""
Data models for a parsed robots.txt document.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple
from urllib.parse import quote, unquote

__all__ = ["PathRule", "AgentGroup", "Policy", "quote_path", "WILDCARD"]

WILDCARD = "*"
_ESCAPED_WILDCARD = quote(WILDCARD)  # "%2A"


def quote_path(path: str) -> str:
    """Normalize *path* to its percent-escaped form ("%7E" and "~" compare equal)."""
    return quote(unquote(path), errors="replace")


@dataclass(frozen=True, slots=True)
class PathRule:
    """One Allow/Disallow directive; ``path`` is kept escaped."""

    path: str
    permits: bool

    @classmethod
    def create(cls, path: str, permits: bool) -> PathRule:
        return cls(path=quote_path(path), permits=permits)

    def applies_to(self, path: str) -> bool:
        """Return True if the escaped candidate *path* falls under this rule."""
        if self.path == _ESCAPED_WILDCARD:
            return True
        return path.startswith(self.path)

    def __str__(self) -> str:
        prefix = "Allow" if self.permits else "Disallow"
        return f"{prefix}: {self.path}"


@dataclass(frozen=True, slots=True)
class AgentGroup:
    """A block of rules shared by one or more User-agent tokens."""

    agents: Tuple[str, ...] = ()
    rules: Tuple[PathRule, ...] = ()

    def __str__(self) -> str:
        lines = [f"User-agent: {agent}" for agent in self.agents]
        lines.extend(str(rule) for rule in self.rules)
        return "\n".join(lines)


@dataclass(slots=True)
class Policy:
    """Parsed robots.txt document plus retrieval bookkeeping.

    ``groups`` is a tuple and is replaced wholesale, never edited in place.
    ``allow_all`` / ``disallow_all`` and ``last_refreshed`` are set by the
    retriever; matching only reads the override flags.
    """

    groups: Tuple[AgentGroup, ...] = ()
    allow_all: bool = False
    disallow_all: bool = False
    source_location: Optional[str] = None
    last_refreshed: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __str__(self) -> str:
        return "".join(f"{group}\n\n" for group in self.groups)
