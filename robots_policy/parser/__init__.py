"""Grammar and data model for robots.txt documents."""
from robots_policy.parser.models import AgentGroup, PathRule, Policy, quote_path
from robots_policy.parser.robots_parser import parse, parse_text

__all__ = ["AgentGroup", "PathRule", "Policy", "quote_path", "parse", "parse_text"]
