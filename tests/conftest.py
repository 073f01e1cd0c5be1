# File: tests/conftest.py
from pathlib import Path

import pytest

from robots_policy.parser.robots_parser import parse_text

EXAMPLE_ROBOTS = """\
User-agent: *
Disallow: /search
Allow: /search/about

User-agent: ia_archiver
Disallow: /wiki/User
"""


@pytest.fixture()
def example_text() -> str:
    return EXAMPLE_ROBOTS


@pytest.fixture()
def example_policy():
    return parse_text(EXAMPLE_ROBOTS)


@pytest.fixture()
def robots_file(tmp_path) -> Path:
    """
    Write a local robots.txt where a named agent is listed before the wildcard.
    """
    path = tmp_path / "robots.txt"
    path.write_text(
        "User-agent: WebCopier\n"
        "Disallow: /\n"
        "\n"
        "User-agent: ia_archiver\n"
        "Disallow: /wiki/User\n"
        "\n"
        "User-agent: *\n"
        "Disallow: /private\n",
        encoding="utf-8",
    )
    return path
