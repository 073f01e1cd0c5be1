# robots_policy/__init__.py
"""
robots_policy package initializer.
Exposes the parser, the fetch decision engine and the retriever facade.
"""
__version__ = "0.1.0"

from robots_policy.matcher import can_fetch
from robots_policy.parser import AgentGroup, PathRule, Policy, parse, parse_text
from robots_policy.retriever import RetrievalError, RobotsFile, fetch_robots, load_file

__all__ = [
    "__version__",
    "AgentGroup",
    "PathRule",
    "Policy",
    "parse",
    "parse_text",
    "can_fetch",
    "RobotsFile",
    "RetrievalError",
    "fetch_robots",
    "load_file",
]
