# robots_policy/retriever.py
"""
Document retriever: loads robots.txt over HTTP or from disk and keeps the current Policy.

Status conventions applied to HTTP responses:

* 401 / 403      -> disallow-all policy (access to the site is restricted);
* other 4xx      -> allow-all policy (no robots.txt published);
* 5xx, transport errors and timeouts -> :class:`RetrievalError`, nothing is parsed.
"""
from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional, Union
from urllib.parse import urlsplit, urlunsplit

from aiohttp import ClientError, ClientSession, ClientTimeout

from robots_policy.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, RetrieverConfig
from robots_policy.logger import logger
from robots_policy.matcher import can_fetch
from robots_policy.parser.models import Policy
from robots_policy.parser.robots_parser import parse, parse_text

__all__ = ["RetrievalError", "RobotsFile", "fetch_robots", "load_file", "robots_url_for", "is_remote"]

_DISALLOW_STATUS = frozenset({401, 403})


class RetrievalError(Exception):
    """robots.txt could not be retrieved; the previous policy stays in effect."""


def is_remote(location: str) -> bool:
    return urlsplit(location).scheme in ("http", "https")


def robots_url_for(url: str) -> str:
    """Return ``<scheme>://<host>/robots.txt`` for an absolute http(s) URL."""
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"Not an absolute http(s) URL: {url!r}")
    return urlunsplit((parts.scheme, parts.netloc, "/robots.txt", "", ""))


def _policy_for_status(status: int, url: str) -> Optional[Policy]:
    if status in _DISALLOW_STATUS:
        logger.info("robots.txt %s answered %d, disallowing everything", url, status)
        return Policy(disallow_all=True, source_location=url)
    if 400 <= status < 500:
        logger.info("robots.txt %s answered %d, allowing everything", url, status)
        return Policy(allow_all=True, source_location=url)
    if status >= 500:
        raise RetrievalError(f"Server error {status} while fetching {url}")
    return None


async def fetch_robots(
    url: str,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[ClientSession] = None,
) -> Policy:
    """Асинхронно загружает robots.txt и возвращает новую Policy.

    Args:
        url: полный URL до robots.txt.
        user_agent: заголовок User-Agent запроса.
        timeout: общий таймаут запроса (секунд).
        session: существующая aiohttp-сессия; иначе создаётся временная.

    Raises:
        RetrievalError: 5xx, сетевая ошибка или таймаут.
    """
    own_session = session is None
    if own_session:
        session = ClientSession()
    try:
        async with session.get(
            url,
            headers={"User-Agent": user_agent},
            timeout=ClientTimeout(total=timeout),
            raise_for_status=False,
        ) as resp:
            policy = _policy_for_status(resp.status, url)
            if policy is not None:
                return policy
            body = await resp.read()
    except asyncio.TimeoutError as exc:
        raise RetrievalError(f"Timed out after {timeout}s fetching {url}") from exc
    except ClientError as exc:
        raise RetrievalError(f"Could not fetch {url}: {exc}") from exc
    finally:
        if own_session:
            await session.close()

    text = body.decode("utf-8", errors="replace")
    logger.info("Fetched robots.txt %s (%d bytes)", url, len(body))
    return parse_text(text, source_location=url)


def load_file(path: Union[str, Path]) -> Policy:
    """Read a local robots.txt file and parse it."""
    p = Path(path).expanduser()
    text = p.read_text(encoding="utf-8", errors="replace")
    logger.debug("Loaded robots file %s", p)
    return parse_text(text, source_location=str(p))


class RobotsFile:
    """Holds the current Policy for one robots.txt location.

    ``read`` and ``parse`` build a complete Policy before publishing it with a
    single assignment, so concurrent ``can_fetch`` calls see either the old or
    the new policy, never a partial one.
    """

    def __init__(self, url: str = "", config: Optional[RetrieverConfig] = None) -> None:
        self.url = url
        self.config = config or RetrieverConfig()
        self._policy = Policy(source_location=url or None)

    @property
    def policy(self) -> Policy:
        return self._policy

    def set_url(self, url: str) -> None:
        """Point at another robots.txt; takes effect on the next ``read``."""
        self.url = url

    async def read(self, session: Optional[ClientSession] = None) -> Policy:
        """Load ``self.url`` (http(s) URL or local path) and publish the result."""
        if not self.url:
            raise RetrievalError("No robots.txt location set")
        if is_remote(self.url):
            policy = await fetch_robots(
                self.url,
                user_agent=self.config.user_agent,
                timeout=self.config.timeout,
                session=session,
            )
        else:
            try:
                policy = load_file(self.url)
            except OSError as exc:
                raise RetrievalError(f"Could not read {self.url}: {exc}") from exc
        self._policy = policy
        return policy

    def parse(self, lines: Iterable[str]) -> Policy:
        """Parse already fetched *lines* and publish the result."""
        policy = parse(lines, source_location=self.url or None)
        self._policy = policy
        return policy

    def can_fetch(self, user_agent: str, url: str) -> bool:
        return can_fetch(self._policy, user_agent, url)

    def mtime(self) -> datetime:
        """Time the current policy was last fetched (or marked as fetched)."""
        return self._policy.last_refreshed

    def modified(self) -> None:
        """Mark the current policy as fetched now."""
        self._policy.last_refreshed = datetime.now(timezone.utc)

    def is_stale(self, max_age: Optional[float] = None) -> bool:
        """True if the policy is older than *max_age* seconds (config default)."""
        limit = self.config.max_age if max_age is None else max_age
        age = datetime.now(timezone.utc) - self._policy.last_refreshed
        return age.total_seconds() > limit

    def __str__(self) -> str:
        return str(self._policy)
