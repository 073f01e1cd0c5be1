# File: robots_policy/parser/robots_parser.py
"""robots_policy.parser.robots_parser: Line-oriented grammar for robots.txt.

The parser is deliberately lax: malformed lines, lines without a ``key: value``
pair and unknown directives (crawl-delay, sitemap, ...) are skipped, never
rejected. Parsing is a single forward pass over a three-state machine:

* ``OUTSIDE``  - between blocks;
* ``AGENTS``   - one or more ``User-agent:`` lines seen, no rule yet;
* ``RULES``    - at least one ``Allow``/``Disallow`` seen for the current block.

A block that declares agents but no rules before a blank line is dropped.
Consecutive ``User-agent:`` lines form a single group.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from robots_policy.logger import logger
from robots_policy.parser.models import AgentGroup, PathRule, Policy

__all__ = ["parse", "parse_text"]


class _State(Enum):
    OUTSIDE = 0
    AGENTS = 1
    RULES = 2


@dataclass
class _Accumulator:
    """Mutable parse state, private to one ``parse`` call."""

    state: _State = _State.OUTSIDE
    groups: List[AgentGroup] = field(default_factory=list)
    agents: List[str] = field(default_factory=list)
    rules: List[PathRule] = field(default_factory=list)

    def reset(self) -> None:
        self.agents = []
        self.rules = []
        self.state = _State.OUTSIDE

    def close_group(self) -> None:
        """Publish the current group and start a fresh one."""
        self.groups.append(AgentGroup(agents=tuple(self.agents), rules=tuple(self.rules)))
        self.reset()


def parse(lines: Iterable[str], source_location: Optional[str] = None) -> Policy:
    """Parse robots.txt *lines* into a new :class:`Policy`.

    Args:
        lines: document already split into lines.
        source_location: URL or path the document came from (bookkeeping only).

    Returns:
        Policy whose groups keep declaration order.
    """
    acc = _Accumulator()

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            _on_blank_line(acc)

        line = line.split("#", 1)[0].strip()
        if not line:
            continue

        directive = _split_directive(line)
        if directive is None:
            logger.debug("robots line %d skipped, no directive: %r", lineno, raw)
            continue
        _process_directive(acc, *directive)

    if acc.state is _State.RULES:
        acc.close_group()

    logger.debug("Parsed %d robots group(s) from %s", len(acc.groups), source_location or "<text>")
    return Policy(groups=tuple(acc.groups), source_location=source_location)


def parse_text(text: str, source_location: Optional[str] = None) -> Policy:
    """Split *text* into lines and parse it."""
    return parse(text.splitlines(), source_location=source_location)


def _on_blank_line(acc: _Accumulator) -> None:
    if acc.state is _State.AGENTS:
        logger.debug("Dropping robots group without rules: %s", acc.agents)
        acc.reset()
    elif acc.state is _State.RULES:
        acc.close_group()


def _split_directive(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(key, value)`` with a lower-cased key, or None if *line* has no colon."""
    key, sep, value = line.partition(":")
    if not sep:
        return None
    return key.strip().lower(), value.strip()


def _process_directive(acc: _Accumulator, key: str, value: str) -> None:
    if key == "user-agent":
        if acc.state is _State.RULES:
            acc.close_group()
        acc.agents.append(value)
        acc.state = _State.AGENTS
    elif key in ("allow", "disallow"):
        acc.rules.append(PathRule.create(value, permits=key == "allow"))
        acc.state = _State.RULES
    else:
        logger.debug("Ignoring robots directive %r", key)
