"""Diagnostic renderings of a parsed Policy."""
from robots_policy.report.json_report import policy_to_dict, render_json

__all__ = ["policy_to_dict", "render_json"]
